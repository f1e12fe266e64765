from __future__ import annotations

from pathlib import Path

import pytest

from quote_scanner.quote_check.errors import FileDiscoveryError
from quote_scanner.quote_check.file_discovery import (
    discover_files,
    expand_braces,
    split_patterns,
)


def _make_tree(root: Path, files: list[str]) -> None:
    for name in files:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("test", encoding="utf-8")


def test_expand_braces() -> None:
    assert expand_braces("*.go") == ["*.go"]
    assert expand_braces("**/*.{go,js}") == ["**/*.go", "**/*.js"]
    assert expand_braces("{src,lib}/*.{c,h}") == ["src/*.c", "src/*.h", "lib/*.c", "lib/*.h"]
    assert expand_braces("a{b,{c,d}}") == ["ab", "ac", "ad"]


@pytest.mark.parametrize("pattern", ["*.{go,js", "*.go}", "}{"])
def test_expand_braces_rejects_unbalanced(pattern: str) -> None:
    with pytest.raises(FileDiscoveryError):
        expand_braces(pattern)


def test_split_patterns_respects_braces() -> None:
    assert split_patterns("**/*.{go,js},docs/*.md, ,") == ["**/*.{go,js}", "docs/*.md"]
    assert split_patterns("") == []


def test_discover_files_include_and_exclude(tmp_path: Path) -> None:
    _make_tree(
        tmp_path,
        [
            "test.go",
            "test.js",
            "test.txt",
            "vendor/test.go",
            "node_modules/test.js",
        ],
    )

    files = discover_files(
        ["*.go", "*.js", "vendor/*.go", "node_modules/*.js"],
        ["vendor/*", "node_modules/*"],
        root=tmp_path,
    )

    assert files == [tmp_path / "test.go", tmp_path / "test.js"]


def test_discover_files_recursive_with_default_excludes(tmp_path: Path) -> None:
    _make_tree(
        tmp_path,
        [
            "main.go",
            "pkg/util.go",
            "pkg/vendor/dep.go",
            "vendor/dep.go",
            "docs/readme.md",
        ],
    )

    files = discover_files(
        ["**/*.{go,md}"],
        ["vendor/**", "**/vendor/**"],
        root=tmp_path,
    )

    names = sorted(str(path.relative_to(tmp_path)).replace("\\", "/") for path in files)
    assert names == ["docs/readme.md", "main.go", "pkg/util.go"]


def test_discover_files_deduplicates_and_skips_directories(tmp_path: Path) -> None:
    _make_tree(tmp_path, ["a.py", "dir.py/inner.txt"])

    files = discover_files(["*.py", "a.*", "*"], [], root=tmp_path)

    assert files == [tmp_path / "a.py"]


def test_exclude_matches_expanded_path_string(tmp_path: Path) -> None:
    _make_tree(tmp_path, ["vendor/x.go"])

    # "**/vendor/**" needs a leading directory, so top-level vendor slips through.
    files = discover_files(["**/*.go"], ["**/vendor/**"], root=tmp_path)

    assert files == [tmp_path / "vendor" / "x.go"]


def test_discover_files_relative_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _make_tree(tmp_path, ["one.txt"])
    monkeypatch.chdir(tmp_path)

    assert discover_files(["*.txt"]) == [Path("one.txt")]


def test_discover_files_bad_pattern(tmp_path: Path) -> None:
    with pytest.raises(FileDiscoveryError):
        discover_files(["*.{go"], [], root=tmp_path)
    with pytest.raises(FileDiscoveryError):
        discover_files(["*.go"], ["vendor/{a"], root=tmp_path)
