import json

import pytest

from commitcortex.components import Repo
from commitcortex.config import Config, default_config_path, open_config


def test_default_config_path_in_home(tmp_path):
    assert default_config_path(tmp_path) == tmp_path / ".commit-cortex.json"


def test_open_config_creates_empty_file(tmp_path):
    path = tmp_path / ".commit-cortex.json"
    config = open_config(path)
    assert path.exists()
    assert json.loads(path.read_text()) == {}
    assert config.repos == []
    assert config.path == path


def test_save_and_reload_round_trip(tmp_path):
    path = tmp_path / "config.json"
    repos = [Repo("/a/.git", "a", "https://example.com/a"), Repo("/b/.git", "b", "")]
    Config(path=path, repos=repos).save()
    assert open_config(path).repos == repos


def test_saved_file_uses_repos_key(tmp_path):
    path = tmp_path / "config.json"
    Config(path=path, repos=[Repo("/a/.git", "a", "")]).save()
    data = json.loads(path.read_text())
    assert data["repos"] == [{"Path": "/a/.git", "Name": "a", "RemoteUrl": ""}]


def test_extra_settings_are_preserved(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "dark", "Repos": [{"path": "/x/.git", "name": "x"}]}))
    config = open_config(path)
    assert config.repos == [Repo("/x/.git", "x", "")]
    config.save()
    reloaded = open_config(path)
    assert reloaded.extra == {"theme": "dark"}
    assert reloaded.repos == config.repos


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="error reading config file"):
        open_config(path)


def test_non_object_top_level_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError, match="error reading config file"):
        open_config(path)


def test_bad_repos_value_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"repos": "nope"}))
    with pytest.raises(ValueError, match="error unmarshalling repos"):
        open_config(path)