# schemaslice/filter.py
from __future__ import annotations

import logging
from typing import Iterable, List

from ._logging import resolve_logger
from .errors import GeneratorNotFoundError
from .models.blocks import Block, BlockKind


def filter_blocks(
    blocks: Iterable[Block],
    generator_name: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Block]:
    """
    Keep only the generator named `generator_name`, plus every non-generator
    block, in original order.

    Datasources, models, enums, comments and stray lines are shared by all
    generators of a schema and always survive. Blocks are selected, never edited.

    Raises:
        GeneratorNotFoundError: no generator block has the requested name.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    kept: List[Block] = []
    seen_generators: List[str] = []
    found = False
    total = 0

    for block in blocks:
        total += 1
        if block.kind == BlockKind.GENERATOR:
            seen_generators.append(block.name)
            if block.name == generator_name:
                kept.append(block)
                found = True
            else:
                lg.debug("dropping generator '%s'", block.name)
        else:
            kept.append(block)

    if not found:
        raise GeneratorNotFoundError(generator_name, seen_generators)

    lg.info("kept %d of %d blocks for generator '%s'", len(kept), total, generator_name)
    return kept
