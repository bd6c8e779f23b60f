import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    skip_without_git = pytest.mark.skipif(
        shutil.which("git") is None, reason="git executable not installed"
    )
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            item.add_marker(skip_without_git)


def git(cwd: Path, *args: str) -> str:
    """Run git in cwd and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        check=True,
        text=True,
    )
    return result.stdout


def init_git_repo(path: Path) -> None:
    """Initialize a minimal git repository in the given path."""
    _ = git(path, "init")
    _ = git(path, "config", "user.email", "test@example.com")
    _ = git(path, "config", "user.name", "Test User")
    _ = git(path, "config", "commit.gpgsign", "false")


def commit_file(repo: Path, relative: str, content: str, message: str) -> str:
    """Write a file, commit it, and return the new commit sha."""
    target = repo / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_bytes(content.encode("utf-8"))
    _ = git(repo, "add", relative)
    _ = git(repo, "commit", "-m", message)
    return git(repo, "rev-parse", "HEAD").strip()


@dataclass(frozen=True, slots=True)
class HistoryRepo:
    """A repository with two commits touching src/notes.txt."""

    root: Path
    first_sha: str
    second_sha: str
    first_content: str
    second_content: str

    @property
    def notes(self) -> str:
        return f"{self.root.as_posix()}/src/notes.txt"


@pytest.fixture
def history_repo(tmp_path: Path) -> HistoryRepo:
    """Create a repository with a file edited across two commits.

    Structure:
        tmp_path/
            repo/
                .git/
                src/
                    notes.txt
    """
    root = (tmp_path / "repo").resolve()
    root.mkdir()
    init_git_repo(root)

    first_content = "alpha\nbeta\n"
    second_content = "alpha\nbeta\ngamma\n"
    first_sha = commit_file(root, "src/notes.txt", first_content, "Add notes")
    second_sha = commit_file(root, "src/notes.txt", second_content, "Extend notes")

    return HistoryRepo(
        root=root,
        first_sha=first_sha,
        second_sha=second_sha,
        first_content=first_content,
        second_content=second_content,
    )
