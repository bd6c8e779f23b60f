"""Tests for gitlore.git._paths module."""

from gitlore.git import normalize_path, split_path


class TestNormalizePath:
    def test_replaces_backslashes(self) -> None:
        assert normalize_path("C:\\src\\project\\main.py") == "C:/src/project/main.py"

    def test_leaves_forward_slashes_alone(self) -> None:
        assert normalize_path("/src/project/main.py") == "/src/project/main.py"

    def test_mixed_separators(self) -> None:
        assert normalize_path("src\\project/main.py") == "src/project/main.py"

    def test_is_idempotent(self) -> None:
        once = normalize_path("a\\b\\c.txt")
        assert normalize_path(once) == once

    def test_empty_string(self) -> None:
        assert normalize_path("") == ""


class TestSplitPathWithRoot:
    def test_strips_root_prefix(self) -> None:
        assert split_path("/repo/src/a.ts", "/repo") == ("src/a.ts", "/repo")

    def test_echoes_root_unchanged(self) -> None:
        _, root = split_path("/repo/a.ts", "/repo")
        assert root == "/repo"

    def test_path_outside_root_is_returned_unchanged(self) -> None:
        assert split_path("/other/a.ts", "/repo") == ("/other/a.ts", "/repo")

    def test_only_leading_prefix_is_removed(self) -> None:
        assert split_path("/x/repo/a.ts", "/repo") == ("/x/repo/a.ts", "/repo")

    def test_root_without_separator_is_not_stripped(self) -> None:
        # "/repository" starts with "/repo" but not with "/repo/"
        assert split_path("/repository/a.ts", "/repo") == (
            "/repository/a.ts",
            "/repo",
        )

    def test_already_relative_path(self) -> None:
        assert split_path("src/a.ts", "/repo") == ("src/a.ts", "/repo")


class TestSplitPathWithoutRoot:
    def test_splits_into_basename_and_dirname(self) -> None:
        assert split_path("/repo/src/a.ts") == ("a.ts", "/repo/src")

    def test_normalizes_backslashes(self) -> None:
        assert split_path("C:\\repo\\src\\a.ts") == ("a.ts", "C:/repo/src")

    def test_bare_file_name_has_empty_root(self) -> None:
        assert split_path("a.ts") == ("a.ts", "")

    def test_empty_root_is_treated_as_missing(self) -> None:
        assert split_path("/repo/a.ts", "") == ("a.ts", "/repo")
