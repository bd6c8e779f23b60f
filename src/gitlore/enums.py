"""Enumeration types for gitlore."""

from enum import StrEnum


class BlameFormat(StrEnum):
    """Output layouts for ``git blame``.

    The value is passed to git verbatim as the format flag.
    """

    INCREMENTAL = "--incremental"
    LINE_PORCELAIN = "--line-porcelain"
    PORCELAIN = "--porcelain"


class LogSeverity(StrEnum):
    """Severity a log entry is written at."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
