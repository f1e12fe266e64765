"""Locate the files to scan from include and exclude glob patterns.

Include patterns support ``**`` for recursive matching and ``{a,b}`` brace
alternatives. Exclude patterns are matched with :mod:`fnmatch` against the
exact path string produced by the glob, so they must be written in the same
shape as the expanded paths (relative when the include pattern is relative).
"""

from __future__ import annotations

import glob
import logging
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable

from .errors import FileDiscoveryError

LOGGER = logging.getLogger(__name__)


def split_patterns(value: str) -> list[str]:
    """Split a comma-separated pattern list, keeping commas inside braces."""
    patterns: list[str] = []
    current: list[str] = []
    depth = 0
    for char in value:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(0, depth - 1)
        if char == "," and depth == 0:
            patterns.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    patterns.append("".join(current).strip())
    return [pattern for pattern in patterns if pattern]


def _find_closing_brace(pattern: str, start: int) -> int:
    depth = 0
    for index in range(start, len(pattern)):
        if pattern[index] == "{":
            depth += 1
        elif pattern[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    raise FileDiscoveryError(f"Unbalanced '{{' in pattern: {pattern!r}")


def _split_alternatives(body: str) -> list[str]:
    alternatives: list[str] = []
    current: list[str] = []
    depth = 0
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if char == "," and depth == 0:
            alternatives.append("".join(current))
            current = []
            continue
        current.append(char)
    alternatives.append("".join(current))
    return alternatives


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives into separate glob patterns.

    ``"*.{py,md}"`` becomes ``["*.py", "*.md"]``. Nested braces are
    expanded recursively. Raises :class:`FileDiscoveryError` for unbalanced
    braces.
    """
    start = pattern.find("{")
    if start == -1:
        if "}" in pattern:
            raise FileDiscoveryError(f"Unbalanced '}}' in pattern: {pattern!r}")
        return [pattern]

    if "}" in pattern[:start]:
        raise FileDiscoveryError(f"Unbalanced '}}' in pattern: {pattern!r}")

    end = _find_closing_brace(pattern, start)
    prefix = pattern[:start]
    suffix = pattern[end + 1 :]
    expanded: list[str] = []
    for alternative in _split_alternatives(pattern[start + 1 : end]):
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


def _is_excluded(path: str, exclude_patterns: Iterable[str]) -> bool:
    return any(fnmatch(path, pattern) for pattern in exclude_patterns)


def discover_files(
    include_patterns: Iterable[str],
    exclude_patterns: Iterable[str] = (),
    *,
    root: Path | None = None,
) -> list[Path]:
    """Return regular files matching an include pattern and no exclude pattern.

    Args:
            include_patterns: Glob patterns to expand, in priority order
            exclude_patterns: Patterns checked against each expanded path
            root: Directory that relative patterns are resolved against
                  (default: the current working directory)

    Returns:
            Paths in first-seen order with duplicates removed
    """

    excludes = [
        expanded for pattern in exclude_patterns for expanded in expand_braces(pattern)
    ]

    found: dict[str, None] = {}
    for include in include_patterns:
        for pattern in expand_braces(include):
            matches = glob.glob(pattern, root_dir=root, recursive=True)
            LOGGER.debug("Pattern %s matched %d path(s)", pattern, len(matches))
            for match in sorted(matches):
                if match in found or _is_excluded(match, excludes):
                    continue
                candidate = Path(root, match) if root is not None else Path(match)
                if candidate.is_file():
                    found[match] = None

    if root is not None:
        return [Path(root, match) for match in found]
    return [Path(match) for match in found]
