# commitcortex

A small command-line tool that keeps a list of your local git repositories and
shows what has been committed to them lately.

The `git` executable must be on your `PATH`: remote URLs and commit histories
are read by running it.

## Installation

```
pip install .
```

This installs the `commit-cortex` command.

## Configuration

The tracked repositories are kept in `.commit-cortex.json` in your home
directory. If the file does not exist, it is created as an empty JSON object
the first time a command runs. Every repository is stored under the `repos`
key with its `Path` (the repository's `.git` directory), `Name` and
`RemoteUrl`. Any other top-level keys in the file are kept when it is written
back.

## Commands

Track a repository. The path defaults to the current directory:

```
commit-cortex add path/to/repo
```

The path must exist and contain a `.git` directory. The repository name is
the directory's name. The URL of the `origin` remote is recorded when git can
report one; otherwise it is left empty. Adding the same repository twice is an
error.

Show the tracked repositories. Those whose `.git` directory can no longer be
found are listed separately, after the others:

```
commit-cortex list
```

Drop the repositories whose `.git` directory can no longer be found, and save
the configuration:

```
commit-cortex tidy
```

Print, for each tracked repository, the commits made in the last 24 hours on
every local branch:

```
commit-cortex report
```

Each branch's history is read newest first and stops at the first commit older
than 24 hours. Repositories that git cannot open are skipped.

Search a directory tree for git repositories. The path defaults to your home
directory:

```
commit-cortex scan path/to/projects
```

Every directory visited is printed as it is processed, followed by the list of
repository roots found. Directories whose names contain a dot are not
descended into, symbolic links are not followed, and unreadable directories are
passed over. The repositories found are only printed, not added.

Commands exit with status 1 and a message on standard error when they fail.

## Use from Python

The commands are plain functions that take a loaded configuration and an
optional output stream:

```python
import io

from commitcortex.config import open_config
from commitcortex.repos import add, list_repos, tidy
from commitcortex.report import collect_report
from commitcortex.scan import find_git_repositories

config = open_config("/tmp/cortex.json")   # created if missing
repo = add("path/to/repo", config)          # saved to the file
out = io.StringIO()
list_repos(config, out)

report = collect_report(repo)               # commits of the last 24 hours
for item in report.report_items:
    print(item.branch, item.author, item.time, item.commit)

print(find_git_repositories("path/to/projects"))
```

`add` raises `commitcortex.repos.AlreadyAddedError` for a repository that is
already tracked and `FileNotFoundError` when the path or its `.git` directory
is missing. `collect_report` raises `RuntimeError` when git fails.
`commitcortex.output` holds the ANSI styling helpers (`Style`, `color`, `link`)
and `format_report` / `print_report`.

## What it does not do

There is no command to stop tracking one particular repository; only `tidy`
removes entries, and only those that no longer exist on disk. `scan` does not
add what it finds to the configuration. Nothing is fetched from remotes: reports
show only what is already in the local branches.

## Development

```
pip install -e ".[test]"
pytest
```