"""Git process invocation.

This module provides the GitInvoker class that runs a git command in a
working directory, captures its output, and writes exactly one log entry
per invocation.
"""

import re
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, final

import anyio

from gitlore.enums import LogSeverity
from gitlore.exceptions import GitExecutionError

from ._classify import DEFAULT_FAILURE_RULES, FailureRule, classify_failure

if TYPE_CHECKING:
    from ._locator import GitExecutable
    from ._protocol import LogSink

LOG_CATEGORY = "git"

_NEWLINES = re.compile(r"\r?\n|\r")


def _decode(output: bytes) -> str:
    return output.decode("utf-8", errors="replace")


def flatten_message(message: str) -> str:
    """Collapse a multi-line message onto one line."""
    return _NEWLINES.sub(" ", message).strip()


def emit(
    sink: "LogSink",
    severity: LogSeverity,
    *parts: object,
    category: str = LOG_CATEGORY,
    **fields: object,
) -> None:
    """Write a log entry, ignoring any error raised by the sink.

    Args:
        sink: Sink to write to.
        severity: Sink method to call.
        *parts: Message parts.
        category: Log category.
        **fields: Additional structured context.
    """
    try:  # noqa: SIM105
        getattr(sink, severity.value)(category, *parts, **fields)
    except Exception:  # noqa: BLE001, S110
        # Sink errors must not mask the result being reported
        pass


@final
class GitInvoker:
    """Runs git commands and logs their outcome.

    Failures are classified against an ordered rule list to choose the log
    severity, then raised unchanged. Log sink errors are swallowed so they
    never replace the command's own result or failure.
    """

    __slots__ = ("_resolve_git", "_rules", "_sink")

    def __init__(
        self,
        resolve_git: Callable[[], Awaitable["GitExecutable"]],
        sink: "LogSink",
        rules: Iterable[FailureRule] = DEFAULT_FAILURE_RULES,
    ) -> None:
        """Initialize the invoker.

        Args:
            resolve_git: Async callable returning the git executable to run.
            sink: Sink receiving one log entry per invocation.
            rules: Ordered failure classification rules.
        """
        self._resolve_git = resolve_git
        self._sink = sink
        self._rules: tuple[FailureRule, ...] = tuple(rules)

    def _fail(self, error: GitExecutionError) -> GitExecutionError:
        message = flatten_message(str(error))
        severity = classify_failure(message, self._rules)
        emit(self._sink, severity, *error.args_, cwd=error.cwd, error=message)
        return error

    async def run(self, cwd: str, *args: str) -> str:
        """Run git with the given arguments.

        Args:
            cwd: Working directory for the git process.
            *args: Arguments passed to git.

        Returns:
            The captured standard output.

        Raises:
            GitExecutionError: If git could not be spawned or exited non-zero.
            GitDiscoveryError: If no git executable could be resolved.
        """
        git = await self._resolve_git()

        try:
            result = await anyio.run_process(
                [git.path, *args],
                cwd=cwd,
                check=False,
            )
        except OSError as e:
            msg = f"Failed to run git: {e}"
            raise self._fail(
                GitExecutionError(msg, args=args, cwd=cwd, stderr=str(e))
            ) from e

        if result.returncode != 0:
            stderr = _decode(result.stderr)
            msg = stderr.strip() or f"git exited with code {result.returncode}"
            raise self._fail(
                GitExecutionError(
                    msg,
                    args=args,
                    cwd=cwd,
                    returncode=result.returncode,
                    stderr=stderr,
                )
            )

        emit(self._sink, LogSeverity.INFO, *args, cwd=cwd)
        return _decode(result.stdout)
