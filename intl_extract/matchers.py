"""
matchers.py - Recognizers for the three message authoring patterns.

  defineMessages  const m = defineMessages({ greet: { id, defaultMessage } })
  formatMessage   const s = formatMessage({ id, defaultMessage })
  element         <FormattedMessage id="..." defaultMessage="..." />

Each matcher is a pure function of a syntax tree root returning the valid
descriptors it found, in document order.  Declarations are searched for
anywhere in the file, not only at top level, and the search continues into
a declarator's initializer: ``const C = () => { const m = defineMessages(...) }``
yields the inner messages.  Earlier extractors stopped descending at the
first variable declaration on each path and missed such nested calls.

Known limitation: the call patterns are only recognized as the
initializer of a variable declaration.  ``console.log(formatMessage({...}))``
or ``intl.formatMessage({...})`` yield nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from tree_sitter import Node

from intl_extract import syntax
from intl_extract.descriptor import (
    nested_objects,
    read_attribute_fields,
    read_object_fields,
    to_descriptor,
)
from intl_extract.models import MessageDescriptor
from intl_extract.walker import find_all, find_all_of_type

logger = logging.getLogger(__name__)

DEFINE_MESSAGES = "defineMessages"
FORMAT_MESSAGE = "formatMessage"
DEFAULT_TAG_NAME = "FormattedMessage"

# Turns one object literal into zero or more descriptors.
ObjectExtractor = Callable[[Node], list[MessageDescriptor]]


# ---------------------------------------------------------------------------
# Object extractors
# ---------------------------------------------------------------------------

def messages_from_definition_map(obj: Node) -> list[MessageDescriptor]:
    """One descriptor per ``key: { id, defaultMessage, ... }`` property."""
    messages: list[MessageDescriptor] = []
    for inner in nested_objects(obj):
        msg = to_descriptor(read_object_fields(inner, allow_template=True))
        if msg is not None:
            messages.append(msg)
    return messages


def messages_from_single_object(obj: Node) -> list[MessageDescriptor]:
    """The object itself is the descriptor."""
    msg = to_descriptor(read_object_fields(obj, allow_template=False))
    return [msg] if msg is not None else []


# ---------------------------------------------------------------------------
# Declaration shape
# ---------------------------------------------------------------------------

def call_initializer(declarator: Node, callee: str) -> Optional[Node]:
    """Return the call node if *declarator* is ``x = callee(...)``."""
    value = declarator.child_by_field_name("value")
    if value is None or value.type != syntax.CALL_EXPRESSION:
        return None
    function = value.child_by_field_name("function")
    if function is None or function.type != syntax.IDENTIFIER:
        return None
    if syntax.node_text(function) != callee:
        return None
    return value


def first_argument(call: Node) -> Optional[Node]:
    args = call.child_by_field_name("arguments")
    if args is None:
        return None
    positional = syntax.significant_children(args)
    return positional[0] if positional else None


def _messages_in_argument(arg: Node, extract: ObjectExtractor) -> list[MessageDescriptor]:
    # The outermost object literal on each path is the candidate.
    messages: list[MessageDescriptor] = []
    for obj in find_all_of_type(arg, syntax.OBJECT, prune=True):
        messages.extend(extract(obj))
    return messages


def match_calls(
    root: Node,
    callee: str,
    extract: ObjectExtractor,
) -> list[MessageDescriptor]:
    """Run *extract* over the first argument of every ``x = callee(...)``.

    Args:
        root:    Root of the syntax tree.
        callee:  Plain identifier name of the called function.
        extract: Object extractor applied to each candidate object literal.

    Returns:
        Descriptors in document order of the declarations.
    """
    messages: list[MessageDescriptor] = []
    for decl in find_all_of_type(root, syntax.VARIABLE_DECLARATOR):
        call = call_initializer(decl, callee)
        if call is None:
            continue
        arg = first_argument(call)
        if arg is None:
            logger.debug("%s() without arguments at line %d", callee, call.start_point[0] + 1)
            continue
        messages.extend(_messages_in_argument(arg, extract))
    return messages


def match_declarations(root: Node, callee: str = DEFINE_MESSAGES) -> list[MessageDescriptor]:
    """Descriptors from bulk ``defineMessages`` declarations."""
    return match_calls(root, callee, messages_from_definition_map)


def match_single_calls(root: Node, callee: str = FORMAT_MESSAGE) -> list[MessageDescriptor]:
    """Descriptors from ``formatMessage`` declarations."""
    return match_calls(root, callee, messages_from_single_object)


# ---------------------------------------------------------------------------
# JSX elements
# ---------------------------------------------------------------------------

def is_element_named(node: Node, tag_name: str) -> bool:
    """Is *node* an opening or self-closing tag with plain name *tag_name*?"""
    if node.type not in syntax.JSX_OPENING_LIKE:
        return False
    name = node.child_by_field_name("name")
    return (
        name is not None
        and name.type == syntax.IDENTIFIER
        and syntax.node_text(name) == tag_name
    )


def match_elements(root: Node, tag_name: str = DEFAULT_TAG_NAME) -> list[MessageDescriptor]:
    """One descriptor per ``<tag_name .../>`` with literal id and defaultMessage."""
    messages: list[MessageDescriptor] = []
    for element in find_all(root, lambda n: is_element_named(n, tag_name)):
        msg = to_descriptor(read_attribute_fields(element))
        if msg is not None:
            messages.append(msg)
    return messages
