"""Protocol definitions for git command logging.

This module defines the interface between the git command layer and the
host application's logging:
- LogSink: Protocol for consuming leveled, categorized log messages
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Protocol for consuming log messages from git invocations.

    Each method receives a category (e.g. ``"git"``), the message parts,
    and optional structured fields. Implementations are fire-and-forget
    and should not block the caller.
    """

    def info(self, category: str, *parts: object, **fields: object) -> None:
        """Write an informational message.

        Args:
            category: Category the message belongs to.
            *parts: Message parts, joined with spaces when rendered.
            **fields: Additional structured context.
        """
        ...

    def warning(self, category: str, *parts: object, **fields: object) -> None:
        """Write a warning message.

        Args:
            category: Category the message belongs to.
            *parts: Message parts, joined with spaces when rendered.
            **fields: Additional structured context.
        """
        ...

    def error(self, category: str, *parts: object, **fields: object) -> None:
        """Write an error message.

        Args:
            category: Category the message belongs to.
            *parts: Message parts, joined with spaces when rendered.
            **fields: Additional structured context.
        """
        ...
