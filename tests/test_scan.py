import io
import os

import pytest

from commitcortex.scan import find_git_repositories, scan


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a" / ".git").mkdir(parents=True)
    (tmp_path / "a" / "sub" / ".git").mkdir(parents=True)
    (tmp_path / "b" / "c" / ".git").mkdir(parents=True)
    (tmp_path / "d.e" / ".git").mkdir(parents=True)
    (tmp_path / "f" / "g").mkdir(parents=True)
    (tmp_path / "h").mkdir()
    (tmp_path / "h" / ".git").write_text("gitdir: elsewhere\n")
    return tmp_path


def test_finds_repositories(tree):
    found = find_git_repositories(tree)
    expected = {str(tree / "a"), str(tree / "a" / "sub"), str(tree / "b" / "c")}
    assert set(found) == expected
    assert len(found) == len(expected)


def test_dotted_directories_are_skipped(tree):
    found = find_git_repositories(tree)
    assert str(tree / "d.e") not in found


def test_git_file_is_not_a_repository(tree):
    assert str(tree / "h") not in find_git_repositories(tree)


def test_results_are_absolute(tree, monkeypatch):
    monkeypatch.chdir(tree)
    found = find_git_repositories("b")
    assert found == [str(tree / "b" / "c")]
    assert all(os.path.isabs(path) for path in found)


def test_root_itself_can_be_a_repository(tmp_path):
    (tmp_path / ".git").mkdir()
    assert find_git_repositories(tmp_path) == [str(tmp_path)]


def test_missing_path_gives_nothing(tmp_path):
    assert find_git_repositories(tmp_path / "missing") == []


def test_scan_prints_progress_and_results(tree):
    buffer = io.StringIO()
    found = scan(tree, buffer)
    assert set(found) == set(find_git_repositories(tree))
    lines = buffer.getvalue().splitlines()
    assert f"Currently processing: {tree}" in lines
    header = lines.index("Found .git repositories:")
    assert lines[header + 1 :] == found
    assert f"Currently processing: {tree / 'd.e'}" not in lines


def test_scan_missing_path(tmp_path):
    buffer = io.StringIO()
    assert scan(tmp_path / "missing", buffer) == []
    assert buffer.getvalue().splitlines()[-1] == "Found .git repositories:"