"""Revision identifier helpers."""

import re

# Git reports lines that are not yet committed with an all-zero sha
UNCOMMITTED_SHA = "0" * 40

_UNCOMMITTED_PATTERN = re.compile(r"0+")


def is_uncommitted(sha: str) -> bool:
    """Return True if the sha is the all-zero working tree sentinel."""
    return _UNCOMMITTED_PATTERN.fullmatch(sha) is not None


def strip_parent_suffix(sha: str) -> str:
    """Strip trailing ``^`` parent references from a sha.

    Args:
        sha: A revision, possibly suffixed with ``^``.

    Returns:
        The revision without trailing ``^`` characters.
    """
    return sha.rstrip("^")
