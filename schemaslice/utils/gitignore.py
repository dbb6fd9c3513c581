# schemaslice/utils/gitignore.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pathspec

_DEFAULT_PATTERNS = (".git/",)


@dataclass(frozen=True)
class IgnoreRules:
    """Compiled .gitignore patterns anchored at the directory that holds them."""

    spec: pathspec.PathSpec
    anchor: str  # absolute directory the patterns are relative to

    def ignores(self, path: str, *, is_dir: bool = False) -> bool:
        """
        True if `path` is excluded. Paths outside `anchor` are never excluded,
        since the patterns say nothing about them.
        """
        rel = os.path.relpath(os.path.abspath(path), self.anchor).replace(os.sep, "/")
        if rel == "." or rel == ".." or rel.startswith("../"):
            return False
        # Leading '/' anchors root-only patterns; trailing '/' lets 'dir/' match
        probe = "/" + rel + ("/" if is_dir else "")
        return self.spec.match_file(probe)


def _find_gitignore(start: str) -> Tuple[Optional[str], List[str]]:
    """Walk upward from `start`; return (directory, lines) of the first readable .gitignore."""
    cur = start
    while True:
        gi = os.path.join(cur, ".gitignore")
        if os.path.isfile(gi):
            try:
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    return cur, f.read().splitlines()
            except OSError:
                pass
        parent = os.path.dirname(cur)
        if parent == cur:
            return None, []
        cur = parent


def get_gitignore(path: str) -> IgnoreRules:
    """
    Rules from the nearest .gitignore found by walking upward from `path`
    (file or directory), anchored at the directory where it was found.
    Without one, the rules are anchored at `path` itself. '.git/' is always
    ignored.
    """
    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    anchor, lines = _find_gitignore(base)
    if anchor is None:
        anchor = base

    try:
        spec = pathspec.PathSpec.from_lines("gitwildmatch", [*_DEFAULT_PATTERNS, *lines])
    except ValueError:
        # Malformed pattern in the file; keep the defaults only.
        spec = pathspec.PathSpec.from_lines("gitwildmatch", _DEFAULT_PATTERNS)
    return IgnoreRules(spec=spec, anchor=anchor)
