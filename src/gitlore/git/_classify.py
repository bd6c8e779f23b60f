"""Failure classification for git invocations.

Some git failures are expected: the file is not tracked, or lives outside
any repository. Those are logged at warning level, everything else at error
level. Classification only affects the log severity; the failure is always
raised to the caller.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from gitlore.enums import LogSeverity


@dataclass(frozen=True, slots=True)
class FailureRule:
    """Maps a failure message substring to a log severity.

    Attributes:
        pattern: Substring matched case-insensitively against the message.
        severity: Severity to log a matching failure at.
    """

    pattern: str
    severity: LogSeverity

    def matches(self, message: str) -> bool:
        """Return True if the message contains this rule's pattern."""
        return self.pattern.casefold() in message.casefold()


DEFAULT_FAILURE_RULES: tuple[FailureRule, ...] = (
    FailureRule("not a git repository", LogSeverity.WARNING),
    FailureRule("is outside repository", LogSeverity.WARNING),
    FailureRule("no such path", LogSeverity.WARNING),
)


def classify_failure(
    message: str,
    rules: Iterable[FailureRule] = DEFAULT_FAILURE_RULES,
    *,
    default: LogSeverity = LogSeverity.ERROR,
) -> LogSeverity:
    """Classify a failure message by the first matching rule.

    Args:
        message: The failure message, usually git's stderr.
        rules: Ordered rules; the first match wins.
        default: Severity when no rule matches.

    Returns:
        The severity to log the failure at.
    """
    for rule in rules:
        if rule.matches(message):
            return rule.severity
    return default
