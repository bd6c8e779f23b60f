"""Path helpers for git command construction.

Git expects forward-slash separated paths, and every command runs in the
repository root with a root-relative file argument.
"""

import posixpath


def normalize_path(path: str) -> str:
    """Replace backslash separators with forward slashes.

    Args:
        path: A file path in any platform's separator style.

    Returns:
        The path using ``/`` as the only separator.
    """
    return path.replace("\\", "/")


def split_path(path: str, root: str | None = None) -> tuple[str, str]:
    """Split a file path into a (relative file, root directory) pair.

    When ``root`` is given, the ``root + "/"`` prefix is removed from the
    path. A path outside ``root`` is returned unchanged. Without a root the
    path is split into its basename and its directory.

    Args:
        path: A normalized file path.
        root: Known repository root, if any.

    Returns:
        Tuple of (file path relative to the root, root directory).
    """
    if root:
        return path.removeprefix(f"{root}/"), root

    normalized = normalize_path(path)
    return posixpath.basename(normalized), posixpath.dirname(normalized)
