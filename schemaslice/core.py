# schemaslice/core.py
from __future__ import annotations

import logging
from typing import List

from ._logging import resolve_logger
from .filter import filter_blocks
from .models.blocks import BlockKind
from .reconstruct import reconstruct_schema
from .scan import scan_blocks


def filter_by_generator(
    schema_text: str,
    generator_name: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> str:
    """
    Return `schema_text` with every generator block removed except the one
    named `generator_name`.

    Datasources, models, enums, comments and any other top-level lines are kept
    verbatim. Blank lines are normalized: one blank line between blocks, none
    directly before a comment.

    Raises:
        UnbalancedBlockError: a block declaration never closes its braces.
        GeneratorNotFoundError: the schema has no generator with that name.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    blocks = scan_blocks(schema_text, logger=logger, log=log)
    kept = filter_blocks(blocks, generator_name, logger=logger, log=log)
    result = reconstruct_schema(kept)
    lg.debug("rebuilt schema for generator '%s' (%d chars)", generator_name, len(result))
    return result


def list_generators(
    schema_text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[str]:
    """Names of the generator blocks in `schema_text`, in declaration order."""
    blocks = scan_blocks(schema_text, logger=logger, log=log)
    return [b.name for b in blocks if b.kind == BlockKind.GENERATOR]
