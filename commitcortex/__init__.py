"""Track local git repositories and report on their recent commits."""

__version__ = "0.1.0"