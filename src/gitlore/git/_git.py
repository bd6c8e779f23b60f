"""Git blame, log, and revision access.

This module provides the Git class, which owns the resolved git executable
and exposes the blame, log, and show queries used by the host application,
along with the pure argument builders behind them.

Blame and log output is returned verbatim; the argument templates here are
the contract that downstream parsers rely on.
"""

import os
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, final

import anyio

from gitlore.enums import BlameFormat, LogSeverity
from gitlore.exceptions import GitDiscoveryError, InvalidRevisionError, MaterializeError
from gitlore.utils import create_logger

from ._classify import DEFAULT_FAILURE_RULES, FailureRule
from ._invoker import GitInvoker, emit
from ._locator import GitExecutable, find_git
from ._materialize import materialize
from ._paths import normalize_path, split_path
from ._revision import is_uncommitted, strip_parent_suffix
from ._sink import StructlogSink

if TYPE_CHECKING:
    from gitlore.config import GitloreConfig

    from ._protocol import LogSink

LOG_FORMAT = (
    "%H -%n"
    "author %an%n"
    "author-date %ai%n"
    "committer %cn%n"
    "committer-date %ci%n"
    "summary %s%n"
    "filename ?"
)

_NEWLINES = re.compile(r"\r?\n|\r")


def blame_args(
    blame_format: BlameFormat,
    file: str,
    *,
    sha: str | None = None,
    line_range: tuple[int, int] | None = None,
) -> list[str]:
    """Build the arguments for ``git blame``.

    A given sha is blamed as of its parent (``<sha>^``), i.e. the state
    immediately before that revision.

    Args:
        blame_format: Output layout flag.
        file: Root-relative file path.
        sha: Revision whose parent to blame at, or None for the working tree.
        line_range: Inclusive (start, end) line numbers to restrict to.

    Returns:
        Arguments to pass to git.
    """
    args = ["blame"]
    if line_range is not None:
        start, end = line_range
        args.extend(["-L", f"{start},{end}"])
    args.extend([blame_format.value, "--root"])
    if sha:
        args.append(f"{sha}^")
    args.extend(["--", file])
    return args


def log_args(file: str) -> list[str]:
    """Build the arguments for the full history of a file."""
    return [
        "log",
        "--follow",
        "--name-only",
        "--no-merges",
        f"--format={LOG_FORMAT}",
        file,
    ]


def log_range_args(file: str, start: int, end: int) -> list[str]:
    """Build the arguments for the history of a line range of a file.

    ``--follow`` is left out; ``-L`` traces the range through history itself.
    """
    return [
        "log",
        "--name-only",
        "--no-merges",
        f"--format={LOG_FORMAT}",
        "-L",
        f"{start},{end}:{file}",
    ]


def show_args(file: str, sha: str) -> list[str]:
    """Build the arguments for the content of a file at a revision."""
    return ["show", f"{sha}:./{file}"]


@final
class Git:
    """Entry point for git queries against files in one or more repositories.

    The git executable is located lazily on first use and cached on the
    instance. Every query derives its (file, root) pair from the path it is
    given, so a single instance serves files from different repositories.

    Attributes:
        git_path: Explicit git executable path tried before PATH lookup.
        temp_dir: Directory for materialized revisions (system default if None).
    """

    __slots__ = (
        "_git",
        "_git_hint",
        "_invoker",
        "_lock",
        "_sink",
        "git_path",
        "temp_dir",
    )

    def __init__(
        self,
        git_path: str | None = None,
        *,
        sink: "LogSink | None" = None,
        temp_dir: str | None = None,
        rules: Iterable[FailureRule] = DEFAULT_FAILURE_RULES,
    ) -> None:
        """Initialize the git coordinator.

        Args:
            git_path: Explicit git executable path tried before PATH lookup.
            sink: Log sink for invocations. Defaults to a stderr StructlogSink.
            temp_dir: Directory for materialized revisions.
            rules: Ordered failure classification rules.
        """
        self.git_path = git_path
        self.temp_dir = temp_dir
        self._sink: LogSink = sink if sink is not None else StructlogSink()
        self._git: GitExecutable | None = None
        self._git_hint: str | None = None
        self._lock = anyio.Lock()
        self._invoker = GitInvoker(self.ensure_git, self._sink, rules)

    @classmethod
    def from_config(cls, config: "GitloreConfig") -> "Git":
        """Create a Git instance from loaded configuration.

        Args:
            config: gitlore configuration.

        Returns:
            A Git instance logging according to ``config.logging``.
        """
        logger = create_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,
            log_file=config.logging.file,
        )
        return cls(
            config.git_path,
            sink=StructlogSink(logger),
            temp_dir=config.temp_dir,
        )

    @property
    def executable(self) -> GitExecutable | None:
        """Return the resolved git executable, or None if not resolved yet."""
        return self._git

    def _is_cached(self, hint: str | None) -> bool:
        return self._git is not None and (hint is None or hint == self._git_hint)

    async def ensure_git(self, git_path: str | None = None) -> GitExecutable:
        """Resolve the git executable once and return it.

        Concurrent callers share a single resolution. A different
        ``git_path`` than the one used for the cached executable triggers a
        new resolution. Failures are not cached.

        Args:
            git_path: Path hint overriding ``self.git_path``.

        Returns:
            The resolved git executable.

        Raises:
            GitDiscoveryError: If no usable git executable is found.
        """
        if self._is_cached(git_path):
            return self._git  # pyright: ignore[reportReturnType]

        async with self._lock:
            if self._is_cached(git_path):
                return self._git  # pyright: ignore[reportReturnType]

            hint = git_path or self.git_path
            try:
                git = await find_git(hint)
            except GitDiscoveryError as e:
                emit(self._sink, LogSeverity.ERROR, str(e), hint=hint)
                raise

            self._git = git
            self._git_hint = git_path
            return git

    async def repo_path(self, cwd: str, git_path: str | None = None) -> str:
        """Return the top-level directory of the repository containing ``cwd``.

        Args:
            cwd: Directory inside the repository.
            git_path: Optional git executable path hint.

        Returns:
            The repository root with forward-slash separators.
        """
        _ = await self.ensure_git(git_path)
        data = await self._invoker.run(cwd, "rev-parse", "--show-toplevel")
        return normalize_path(_NEWLINES.sub("", data))

    async def blame(
        self,
        blame_format: BlameFormat,
        file_name: str,
        sha: str | None = None,
        repo_path: str | None = None,
    ) -> str:
        """Return raw blame output for a whole file.

        Args:
            blame_format: Output layout flag.
            file_name: Path of the file to blame.
            sha: Blame as of the parent of this revision, if given.
            repo_path: Repository root, if known.

        Returns:
            The blame output exactly as git produced it.
        """
        file, root = split_path(normalize_path(file_name), repo_path)
        return await self._invoker.run(
            root or os.curdir, *blame_args(blame_format, file, sha=sha)
        )

    async def blame_lines(  # noqa: PLR0913
        self,
        blame_format: BlameFormat,
        file_name: str,
        start: int,
        end: int,
        sha: str | None = None,
        repo_path: str | None = None,
    ) -> str:
        """Return raw blame output for lines ``start`` to ``end`` of a file."""
        file, root = split_path(normalize_path(file_name), repo_path)
        return await self._invoker.run(
            root or os.curdir,
            *blame_args(blame_format, file, sha=sha, line_range=(start, end)),
        )

    async def log(self, file_name: str, repo_path: str | None = None) -> str:
        """Return raw log output for the full history of a file."""
        file, root = split_path(normalize_path(file_name), repo_path)
        return await self._invoker.run(root or os.curdir, *log_args(file))

    async def log_range(
        self,
        file_name: str,
        start: int,
        end: int,
        repo_path: str | None = None,
    ) -> str:
        """Return raw log output for commits touching lines ``start`` to ``end``."""
        file, root = split_path(normalize_path(file_name), repo_path)
        return await self._invoker.run(
            root or os.curdir, *log_range_args(file, start, end)
        )

    async def get_versioned_file_text(
        self,
        file_name: str,
        repo_path: str | None,
        sha: str,
    ) -> str:
        """Return the content of a file at a revision.

        A trailing ``^`` on ``sha`` is ignored.

        Args:
            file_name: Path of the file.
            repo_path: Repository root, if known.
            sha: Revision to read the file at.

        Returns:
            The file content at that revision.

        Raises:
            InvalidRevisionError: If ``sha`` is the uncommitted sentinel. No
                process is spawned in that case.
            GitExecutionError: If git fails to show the file.
        """
        file, root = split_path(normalize_path(file_name), repo_path)
        sha = strip_parent_suffix(sha)

        if is_uncommitted(sha):
            msg = f"sha={sha} is uncommitted"
            emit(self._sink, LogSeverity.WARNING, msg, file=file, cwd=root)
            raise InvalidRevisionError(msg, sha=sha)

        return await self._invoker.run(root or os.curdir, *show_args(file, sha))

    async def get_versioned_file(
        self,
        file_name: str,
        repo_path: str | None,
        sha: str,
    ) -> str:
        """Write the content of a file at a revision to a temporary file.

        The caller owns the returned file and is responsible for removing it.

        Args:
            file_name: Path of the file.
            repo_path: Repository root, if known.
            sha: Revision to read the file at.

        Returns:
            Absolute path of the temporary file.

        Raises:
            InvalidRevisionError: If ``sha`` is the uncommitted sentinel.
            GitExecutionError: If git fails to show the file.
            MaterializeError: If the temporary file cannot be written.
        """
        text = await self.get_versioned_file_text(file_name, repo_path, sha)
        sha = strip_parent_suffix(sha)

        try:
            return await materialize(text, file_name, sha, self.temp_dir)
        except MaterializeError as e:
            emit(self._sink, LogSeverity.ERROR, str(e), category="materialize")
            raise
