"""gitlore exceptions."""

from collections.abc import Sequence


class GitloreError(Exception):
    """Base exception for gitlore errors."""


class ConfigError(GitloreError):
    """Raised when configuration from the environment is invalid."""

    def __init__(self, message: str, *, key: str) -> None:
        """Initialize with error message and the offending configuration key."""
        super().__init__(message)
        self.key: str = key


# =============================================================================
# Git Exceptions
# =============================================================================


class GitDiscoveryError(GitloreError):
    """Raised when no usable git executable can be located."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        """Initialize with error message and the path hint that was tried."""
        super().__init__(message)
        self.hint: str | None = hint


class GitExecutionError(GitloreError):
    """Raised when a git invocation could not be spawned or exited non-zero.

    Attributes:
        args_: Arguments passed to git (without the executable).
        cwd: Working directory the command ran in.
        returncode: Process exit code, or None if the process never started.
        stderr: Captured standard error output.
    """

    def __init__(
        self,
        message: str,
        *,
        args: Sequence[str],
        cwd: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize with error message and invocation context."""
        super().__init__(message)
        self.args_: tuple[str, ...] = tuple(args)
        self.cwd: str = cwd
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class InvalidRevisionError(GitloreError, ValueError):
    """Raised when a revision has no addressable content, e.g. uncommitted."""

    def __init__(self, message: str, *, sha: str) -> None:
        """Initialize with error message and the rejected revision."""
        super().__init__(message)
        self.sha: str = sha


class MaterializeError(GitloreError, OSError):
    """Raised when a revision cannot be written to a temporary file."""

    def __init__(self, message: str, *, file_name: str, sha: str) -> None:
        """Initialize with error message and the file/revision being written."""
        super().__init__(message)
        self.file_name: str = file_name
        self.sha: str = sha
