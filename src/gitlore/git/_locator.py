"""Git executable discovery.

Candidates are tried in order: an explicit path hint, ``git`` on PATH, and
on Windows the standard install locations. The first candidate that answers
``--version`` successfully is used.
"""

import os
import re
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

import anyio

from gitlore.exceptions import GitDiscoveryError

_VERSION_PATTERN = re.compile(r"git version (\S+)")

# Environment variables pointing at Program Files directories on Windows
_WINDOWS_PROGRAM_DIRS = ("ProgramW6432", "ProgramFiles", "ProgramFiles(x86)")


@dataclass(frozen=True, slots=True)
class GitExecutable:
    """A located git executable.

    Attributes:
        path: Path used to spawn git.
        version: Version reported by ``git --version``, e.g. "2.43.0".
    """

    path: str
    version: str


def _candidates(hint: str | None) -> list[str]:
    candidates: list[str] = []
    if hint:
        candidates.append(hint)

    on_path = shutil.which("git")
    if on_path:
        candidates.append(on_path)

    if sys.platform == "win32":
        for env_var in _WINDOWS_PROGRAM_DIRS:
            base = os.environ.get(env_var)
            if base:
                candidates.append(str(Path(base) / "Git" / "cmd" / "git.exe"))

    # Preserve order, drop duplicates
    return list(dict.fromkeys(candidates))


async def _probe(path: str) -> GitExecutable | None:
    """Run ``<path> --version`` and return the executable if it answers."""
    try:
        result = await anyio.run_process([path, "--version"], check=False)
    except OSError:
        return None

    if result.returncode != 0:
        return None

    output = result.stdout.decode("utf-8", errors="replace").strip()
    match = _VERSION_PATTERN.search(output)
    return GitExecutable(path=path, version=match.group(1) if match else output)


async def find_git(hint: str | None = None) -> GitExecutable:
    """Locate a usable git executable.

    Args:
        hint: Explicit path to try first.

    Returns:
        The first candidate that runs successfully.

    Raises:
        GitDiscoveryError: If no candidate could be run.
    """
    for candidate in _candidates(hint):
        git = await _probe(candidate)
        if git is not None:
            return git

    msg = "Unable to find a usable git executable"
    if hint:
        msg = f"{msg} (tried '{hint}' and PATH)"
    raise GitDiscoveryError(msg, hint=hint)
