"""
ts_parser.py - Tree-sitter TSX parser for intl-extract.

Responsibilities:
- Load the TSX grammar once and keep a Parser for it.
- Parse source text or files.
- Enumerate the source files under a directory.

The TSX grammar is a superset that also accepts plain .ts, .js and .jsx
sources well enough for message extraction.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import tree_sitter_typescript as tsts
from tree_sitter import Language, Parser, Tree

from intl_extract.models import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


class ParserManager:
    """Owns the TSX parser.

    Usage::

        pm = ParserManager()
        tree = pm.parse_source("const x = <FormattedMessage id='a'/>;")
        tree = pm.parse_file("src/App.tsx")
    """

    def __init__(self) -> None:
        self._language = Language(tsts.language_tsx())
        self._parser = Parser(self._language)

    def parse_source(self, source: Union[str, bytes]) -> Tree:
        """Parse in-memory source text or UTF-8 bytes."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self._parser.parse(source)

    def parse_file(self, file_path: str) -> Optional[Tree]:
        """Read and parse a source file.

        Args:
            file_path: Absolute or relative path to the file.

        Returns:
            A Tree, or None when the file cannot be read.
        """
        try:
            with open(file_path, "rb") as fh:
                source = fh.read()
        except OSError as exc:
            logger.error("Cannot read '%s': %s", file_path, exc)
            return None

        tree = self._parser.parse(source)
        if tree.root_node.has_error:
            logger.debug("Syntax errors in '%s'; extracting what parsed", file_path)
        return tree


# ---------------------------------------------------------------------------
# Convenience: walk a directory and yield source files
# ---------------------------------------------------------------------------

def walk_source_files(
    root: str,
    extensions: Optional[list[str]] = None,
    exclude_dirs: Optional[list[str]] = None,
) -> list[str]:
    """Recursively enumerate source files under *root*, sorted by path.

    A *root* that is itself a file is returned as-is when its extension
    matches.  ``None`` selects the defaults; an empty list means none.
    """
    exts = {e.lower() for e in (extensions if extensions is not None else DEFAULT_EXTENSIONS)}
    excluded = set(exclude_dirs if exclude_dirs is not None else DEFAULT_EXCLUDE_DIRS)

    if os.path.isfile(root):
        return [root] if Path(root).suffix.lower() in exts else []

    result: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune excluded directories in-place
        dirnames[:] = [
            d for d in dirnames
            if d not in excluded and not d.startswith(".")
        ]
        for fname in filenames:
            if Path(fname).suffix.lower() in exts:
                result.append(os.path.join(dirpath, fname))
    return sorted(result)
