"""
extractor.py - Runs the message matchers over one source unit.

Result order is fixed:

1. JSX element messages, grouped by tag name (``FormattedMessage`` first,
   then each additional tag name in the order given), document order
   within a tag;
2. ``defineMessages`` messages, document order;
3. ``formatMessage`` messages, document order.

No deduplication is done: a message authored twice is returned twice,
and a tag name configured twice is scanned twice.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from tree_sitter import Tree

from intl_extract.matchers import (
    DEFAULT_TAG_NAME,
    match_declarations,
    match_elements,
    match_single_calls,
)
from intl_extract.models import ExtractorConfig, FileMessages, MessageDescriptor
from intl_extract.ts_parser import ParserManager

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Tree]


def tag_names_for(config: ExtractorConfig) -> list[str]:
    return [DEFAULT_TAG_NAME, *config.additional_tag_names]


def extract_from_tree(
    tree: Tree,
    config: Optional[ExtractorConfig] = None,
) -> list[MessageDescriptor]:
    """Extract every valid message descriptor from a parsed tree."""
    cfg = config if config is not None else ExtractorConfig()
    root = tree.root_node

    results: list[MessageDescriptor] = []
    for tag_name in tag_names_for(cfg):
        results.extend(match_elements(root, tag_name))
    results.extend(match_declarations(root))
    results.extend(match_single_calls(root))
    return results


class MessageExtractor:
    """Parser plus extractor options, for repeated use over many files.

    Usage::

        ex = MessageExtractor(ExtractorConfig(additional_tag_names=["Msg"]))
        messages = ex.extract(source_text)
        per_file = ex.extract_file("src/App.tsx")
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        parser: Optional[ParserManager] = None,
    ) -> None:
        self.config = config if config is not None else ExtractorConfig()
        self.parser = parser if parser is not None else ParserManager()

    def extract(self, source: Source) -> list[MessageDescriptor]:
        """Extract descriptors from source text, bytes or a parsed Tree."""
        if isinstance(source, Tree):
            tree = source
        elif isinstance(source, (str, bytes)):
            tree = self.parser.parse_source(source)
        else:
            raise TypeError(
                f"expected str, bytes or tree_sitter.Tree, got {type(source).__name__}"
            )
        return extract_from_tree(tree, self.config)

    def extract_file(self, file_path: str) -> Optional[FileMessages]:
        """Extract descriptors from one file; None if it cannot be read."""
        tree = self.parser.parse_file(file_path)
        if tree is None:
            return None
        messages = extract_from_tree(tree, self.config)
        logger.debug("%s: %d message(s)", file_path, len(messages))
        return FileMessages(file_path=file_path, messages=messages)


def extract(
    source: Source,
    config: Optional[ExtractorConfig] = None,
) -> list[MessageDescriptor]:
    """Extract message descriptors from one TSX source unit.

    Args:
        source: Source text, UTF-8 bytes, or a tree already parsed with the
                TSX grammar.
        config: Extractor options; defaults to no additional tag names.

    Returns:
        Descriptors in the fixed element / defineMessages / formatMessage
        order.
    """
    return MessageExtractor(config).extract(source)
