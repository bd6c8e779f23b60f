"""gitlore: git blame, log, and revision access for editor integrations."""

from gitlore.enums import BlameFormat, LogSeverity
from gitlore.exceptions import (
    ConfigError,
    GitDiscoveryError,
    GitExecutionError,
    GitloreError,
    InvalidRevisionError,
    MaterializeError,
)
from gitlore.git import Git, GitExecutable, LogSink, is_uncommitted

__all__ = [
    "BlameFormat",
    "ConfigError",
    "Git",
    "GitDiscoveryError",
    "GitExecutable",
    "GitExecutionError",
    "GitloreError",
    "InvalidRevisionError",
    "LogSeverity",
    "LogSink",
    "MaterializeError",
    "is_uncommitted",
]
