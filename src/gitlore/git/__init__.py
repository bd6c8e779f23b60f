"""Git command layer for gitlore.

This package runs the git executable to produce raw blame and log output,
reads file content at historical revisions, and writes those revisions to
temporary files.

Key Components:
    - Git: Coordinator owning the resolved executable and exposing queries
    - GitInvoker: Runs one git command and logs its outcome
    - GitExecutable / find_git: Executable discovery
    - LogSink / StructlogSink: Logging interface and default implementation
    - FailureRule: Data-driven failure severity classification
    - normalize_path / split_path: Path handling for command arguments

Example:
    >>> from gitlore.enums import BlameFormat
    >>> from gitlore.git import Git
    >>> git = Git()
    >>> root = await git.repo_path("/src/project")
    >>> text = await git.blame(BlameFormat.PORCELAIN, f"{root}/main.py", repo_path=root)
"""

from ._classify import DEFAULT_FAILURE_RULES, FailureRule, classify_failure
from ._git import (
    LOG_FORMAT,
    Git,
    blame_args,
    log_args,
    log_range_args,
    show_args,
)
from ._invoker import LOG_CATEGORY, GitInvoker, emit, flatten_message
from ._locator import GitExecutable, find_git
from ._materialize import artifact_affixes, materialize
from ._paths import normalize_path, split_path
from ._protocol import LogSink
from ._revision import UNCOMMITTED_SHA, is_uncommitted, strip_parent_suffix
from ._sink import StructlogSink

__all__ = [
    "DEFAULT_FAILURE_RULES",
    "LOG_CATEGORY",
    "LOG_FORMAT",
    "UNCOMMITTED_SHA",
    "FailureRule",
    "Git",
    "GitExecutable",
    "GitInvoker",
    "LogSink",
    "StructlogSink",
    "artifact_affixes",
    "blame_args",
    "classify_failure",
    "emit",
    "find_git",
    "flatten_message",
    "is_uncommitted",
    "log_args",
    "log_range_args",
    "materialize",
    "normalize_path",
    "show_args",
    "split_path",
    "strip_parent_suffix",
]
