# schemaslice/scan/scanner.py

from __future__ import annotations

import logging
import re
from typing import Optional

from .._logging import resolve_logger
from ..errors import UnbalancedBlockError
from ..models.blocks import BLOCK_KEYWORDS, Block, BlockKind

COMMENT_MARKER = "//"

# A declaration keyword must be followed by at least one whitespace character,
# so identifiers such as `models` or `enumValue` never match.
_KEYWORD_RES = [(kw, re.compile(rf"^{kw}\s")) for kw in BLOCK_KEYWORDS]


def _match_keyword(stripped: str) -> Optional[str]:
    """Return the first block keyword that introduces `stripped`, if any."""
    for kw, pattern in _KEYWORD_RES:
        if pattern.match(stripped):
            return kw
    return None


def _find_opening_brace(lines: list[str], start_line: int) -> int:
    """
    Index of the first line at or after `start_line` that contains '{',
    or -1 when the rest of the input has none.
    """
    for j in range(start_line, len(lines)):
        if "{" in lines[j]:
            return j
    return -1


def _find_closing_line(lines: list[str], start_line: int) -> int:
    """
    Walk characters from `start_line` tracking brace depth. Returns the line on
    which a closing brace brings the depth back to zero, or -1 if the input
    ends first.
    """
    depth = 0
    for i in range(start_line, len(lines)):
        for ch in lines[i]:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i
    return -1


def _parse_block_at(lines: list[str], start_line: int) -> Optional[Block]:
    """
    Try to read a keyword-introduced block starting at `start_line`.

    Returns None when the line is not a declaration (unknown keyword, or no
    opening brace anywhere below). Raises UnbalancedBlockError when the
    declaration opens braces that never close.
    """
    stripped = lines[start_line].strip()
    kind = _match_keyword(stripped)
    if kind is None:
        return None

    parts = stripped.split()
    name = parts[1] if len(parts) >= 2 else ""

    if _find_opening_brace(lines, start_line) == -1:
        return None

    end_line = _find_closing_line(lines, start_line)
    if end_line == -1:
        raise UnbalancedBlockError(kind, name, start_line)

    return Block(
        kind=kind,
        name=name,
        text="\n".join(lines[start_line:end_line + 1]),
        start_line=start_line,
        end_line=end_line,
    )


def scan_blocks(
    text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> list[Block]:
    """
    Split schema text into an ordered list of top-level blocks.

    Blank lines are dropped. A line whose stripped form starts with `//` becomes
    a `comment` block. Lines starting with `generator`, `datasource`, `model` or
    `enum` open a brace-delimited block that runs until the brace depth returns
    to zero; braces are counted regardless of what introduced them, so nested
    `{ }` pairs are handled by depth alone. Anything else becomes a single-line
    `other` block.

    Raises:
        UnbalancedBlockError: a declaration's braces are still open at the end
            of the input. No partial result is returned.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    lines = text.split("\n")
    blocks: list[Block] = []

    i = 0
    while i < len(lines):
        stripped = lines[i].strip()

        if not stripped:
            i += 1
            continue

        if stripped.startswith(COMMENT_MARKER):
            blocks.append(Block(kind=BlockKind.COMMENT, text=lines[i], start_line=i, end_line=i))
            i += 1
            continue

        block = _parse_block_at(lines, i)
        if block is not None:
            lg.debug("line %d: %s '%s' spans lines %d-%d", i + 1, block.kind, block.name, i + 1, block.end_line + 1)
            blocks.append(block)
            i = block.end_line + 1
        else:
            # Standalone line outside any recognized block.
            blocks.append(Block(kind=BlockKind.OTHER, text=lines[i], start_line=i, end_line=i))
            i += 1

    lg.info("scanned %d lines into %d blocks", len(lines), len(blocks))
    return blocks
