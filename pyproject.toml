[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commitcortex"
version = "0.1.0"
description = "Track local git repositories and report on their recent commits"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "repositories", "commits", "report", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
commit-cortex = "commitcortex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["commitcortex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
