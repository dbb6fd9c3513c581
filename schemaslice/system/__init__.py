"""
File helpers for handing schemas to and from the filtering core.

Public API:
  - load_schema(path: str, *, logger=None, log=False) -> str
  - filter_schema_file(path: str, generator_name: str, *, logger=None, log=False) -> str
  - write_tempfile(text: str, *, suffix: str = ".prisma", prefix: str = "schemaslice-", dir: str | None = None, encoding: str = "utf-8") -> str
"""
from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from typing import List

from .._logging import resolve_logger
from ..core import filter_by_generator
from ..errors import SchemaLoadError
from ..utils.gitignore import get_gitignore

__all__ = ["load_schema", "filter_schema_file", "write_tempfile"]

SCHEMA_SUFFIX = ".prisma"


def _collect_schema_files(root: str) -> List[str]:
    """
    Relative POSIX paths of every schema file under `root`, sorted, skipping
    anything the nearest .gitignore excludes.
    """
    rules = get_gitignore(root)
    found: List[str] = []
    for current, dirs, files in os.walk(root):
        rel_dir = os.path.relpath(current, root).replace(os.sep, "/")
        prefix = "" if rel_dir == "." else rel_dir + "/"
        # Prune ignored directories so nothing below them is read
        dirs[:] = [d for d in dirs if not rules.ignores(os.path.join(current, d), is_dir=True)]
        for name in files:
            if not name.endswith(SCHEMA_SUFFIX):
                continue
            if not rules.ignores(os.path.join(current, name)):
                found.append(prefix + name)
    return sorted(found)


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Failed to read schema file '{path}': {e}") from e


def load_schema(
    path: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> str:
    """
    Read schema text from a single file or from a multi-file schema folder.

    For a folder, every `*.prisma` file below it (minus .gitignored paths) is
    read in sorted relative-path order and the texts are joined with a blank
    line.

    Raises:
        SchemaLoadError: the path does not exist, cannot be read, or the folder
            holds no schema files.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    if os.path.isfile(path):
        lg.debug("reading schema file %s", path)
        return _read_text(path)

    if not os.path.isdir(path):
        raise SchemaLoadError(f"Schema path '{path}' does not exist")

    rel_paths = _collect_schema_files(path)
    if not rel_paths:
        raise SchemaLoadError(f"No {SCHEMA_SUFFIX} files found under '{path}'")

    texts = []
    for rel_path in rel_paths:
        lg.debug("reading schema file %s", rel_path)
        full_path = os.path.join(path, *rel_path.split("/"))
        texts.append(_read_text(full_path).rstrip("\n"))

    lg.info("loaded %d schema files from %s", len(rel_paths), path)
    return "\n\n".join(texts) + "\n"


def filter_schema_file(
    path: str,
    generator_name: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> str:
    """Load the schema at `path` and keep only the generator `generator_name`."""
    text = load_schema(path, logger=logger, log=log)
    return filter_by_generator(text, generator_name, logger=logger, log=log)


def write_tempfile(
    text: str,
    *,
    suffix: str = SCHEMA_SUFFIX,
    prefix: str = "schemaslice-",
    dir: str | None = None,
    encoding: str = "utf-8",
) -> str:
    """
    Write `text` to a new temporary file and return the absolute file path.
    The file persists after the call; the caller owns its removal.
    """
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
    except Exception:
        # Don't leave a half-written file behind.
        with contextlib.suppress(OSError):
            os.remove(path)
        raise
    return os.path.realpath(path)
