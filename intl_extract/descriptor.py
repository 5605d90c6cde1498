"""
descriptor.py - Reading message fields out of candidate nodes.

A candidate is either an object literal (``{ id: "a", defaultMessage: "b" }``)
or the attribute list of a JSX element.  Fields are read into a partial
descriptor (a plain dict) which becomes a MessageDescriptor only once it
holds both ``id`` and ``defaultMessage``.

Only literal values are read.  Anything else (identifiers, calls,
concatenation, templates with substitutions, computed keys) is skipped
field by field, never failing the whole candidate.
"""

from __future__ import annotations

import logging
from typing import Optional

from tree_sitter import Node

from intl_extract import syntax
from intl_extract.models import MessageDescriptor

logger = logging.getLogger(__name__)

# The only keys ever copied into a descriptor.
MESSAGE_FIELDS: frozenset[str] = frozenset({"id", "defaultMessage", "description"})
REQUIRED_FIELDS: tuple[str, ...] = ("id", "defaultMessage")

PartialMessage = dict[str, str]


def copy_if_message_key(target: PartialMessage, key: str, value: str) -> None:
    """Set ``target[key] = value`` if *key* is a message field."""
    if key in MESSAGE_FIELDS:
        target[key] = value


def is_valid_message(partial: PartialMessage) -> bool:
    """Are the required fields present and non-empty?"""
    return all(partial.get(f) for f in REQUIRED_FIELDS)


def to_descriptor(partial: PartialMessage) -> Optional[MessageDescriptor]:
    """Freeze a partial into a MessageDescriptor, or None if it is incomplete."""
    if not is_valid_message(partial):
        logger.debug("Dropping incomplete message: %r", partial)
        return None
    return MessageDescriptor(
        id=partial["id"],
        default_message=partial["defaultMessage"],
        description=partial.get("description"),
    )


# ---------------------------------------------------------------------------
# Object literals
# ---------------------------------------------------------------------------

def read_object_fields(obj: Node, allow_template: bool = True) -> PartialMessage:
    """Read message fields from the ``key: value`` pairs of an object literal.

    Args:
        obj:            An ``object`` node.
        allow_template: Accept substitution-free template literals as
                        values in addition to plain strings.

    Returns:
        The partial descriptor; possibly empty.
    """
    partial: PartialMessage = {}
    for prop in syntax.significant_children(obj):
        if prop.type != syntax.PAIR:
            # shorthand, spread, method
            continue
        key_node = prop.child_by_field_name("key")
        value_node = prop.child_by_field_name("value")
        if key_node is None or value_node is None:
            continue
        name = syntax.property_key_name(key_node)
        if name is None:
            continue
        if allow_template:
            text = syntax.static_string_value(value_node)
        else:
            text = syntax.string_value(value_node)
        if text is None:
            continue
        copy_if_message_key(partial, name, text)
    return partial


def nested_objects(obj: Node) -> list[Node]:
    """Object-literal values of the pairs of *obj*, in source order."""
    inner: list[Node] = []
    for prop in syntax.significant_children(obj):
        if prop.type != syntax.PAIR:
            continue
        value_node = prop.child_by_field_name("value")
        if value_node is not None and value_node.type == syntax.OBJECT:
            inner.append(value_node)
    return inner


# ---------------------------------------------------------------------------
# JSX attributes
# ---------------------------------------------------------------------------

def _attribute_text(value_node: Node) -> Optional[str]:
    if value_node.type == syntax.STRING:
        return syntax.jsx_string_value(value_node)
    if value_node.type == syntax.JSX_EXPRESSION:
        inner = syntax.significant_children(value_node)
        if not inner:
            return None
        return syntax.static_string_value(inner[0])
    # nested element / fragment
    return None


def read_attribute_fields(element: Node) -> PartialMessage:
    """Read message fields from the attributes of a JSX opening-like element."""
    partial: PartialMessage = {}
    for attr in syntax.significant_children(element):
        if attr.type != syntax.JSX_ATTRIBUTE:
            # tag name, type arguments, {...spread}
            continue
        parts = syntax.significant_children(attr)
        if len(parts) < 2:
            # <X flag/>
            continue
        name_node, value_node = parts[0], parts[1]
        text = _attribute_text(value_node)
        if text is None:
            continue
        copy_if_message_key(partial, syntax.node_text(name_node), text)
    return partial
