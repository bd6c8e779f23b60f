"""Temporary file materialization of historical file revisions.

Artifacts are named ``<stem>-<sha>__<random><ext>`` so they can be traced
back to their source file and revision, while the random part keeps
concurrent requests for the same revision from colliding. Removing an
artifact is the caller's responsibility.
"""

import contextlib
import os
import posixpath
import tempfile
from pathlib import Path

import anyio

from gitlore.exceptions import MaterializeError

from ._paths import normalize_path


def artifact_affixes(file_name: str, sha: str) -> tuple[str, str]:
    """Return the (prefix, suffix) used to name a revision's temporary file.

    Args:
        file_name: Source file path; only its basename is used.
        sha: Revision the content belongs to.

    Returns:
        Tuple of (``"<stem>-<sha>__"``, original extension).
    """
    stem, ext = posixpath.splitext(posixpath.basename(normalize_path(file_name)))
    return f"{stem}-{sha}__", ext


async def materialize(
    text: str,
    file_name: str,
    sha: str,
    temp_dir: str | None = None,
) -> str:
    """Write revision content to a new uniquely named temporary file.

    The content is written as UTF-8 without newline translation. If the
    write fails, the allocated file is removed before the error is raised.

    Args:
        text: Content of the revision.
        file_name: Source file path the content came from.
        sha: Revision the content belongs to.
        temp_dir: Directory to create the file in (system default if None).

    Returns:
        Absolute path of the written file.

    Raises:
        MaterializeError: If the file cannot be allocated or written.
    """
    prefix, suffix = artifact_affixes(file_name, sha)

    try:
        fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=temp_dir)
    except OSError as e:
        msg = f"Failed to allocate temporary file for {file_name}@{sha}: {e}"
        raise MaterializeError(msg, file_name=file_name, sha=sha) from e
    os.close(fd)

    written = False
    try:
        _ = await anyio.Path(path).write_bytes(text.encode("utf-8"))
        written = True
    except OSError as e:
        msg = f"Failed to write {file_name}@{sha} to {path}: {e}"
        raise MaterializeError(msg, file_name=file_name, sha=sha) from e
    finally:
        if not written:
            with contextlib.suppress(OSError):
                Path(path).unlink()

    return os.path.abspath(path)
