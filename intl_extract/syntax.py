"""
syntax.py - Node kinds of the tree-sitter TSX grammar used by the matchers.

The matchers only look at a small, closed set of node types.  They are
named here once, together with the helpers that turn literal nodes into
Python strings.

String decoding
---------------
- JS/TS ``string`` and ``template_string`` literals are escape-processed
  (``"a\\nb"`` becomes a real newline).
- JSX attribute strings (``<X id="a\\nb"/>``) are taken verbatim, as the
  JSX grammar does not process escapes there.
"""

from __future__ import annotations

import re
from typing import Optional

from tree_sitter import Node

# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------

COMMENT = "comment"
IDENTIFIER = "identifier"
PROPERTY_IDENTIFIER = "property_identifier"
NUMBER = "number"
STRING = "string"
TEMPLATE_STRING = "template_string"
TEMPLATE_SUBSTITUTION = "template_substitution"

VARIABLE_DECLARATOR = "variable_declarator"
CALL_EXPRESSION = "call_expression"
OBJECT = "object"
PAIR = "pair"

JSX_OPENING_ELEMENT = "jsx_opening_element"
JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
JSX_ATTRIBUTE = "jsx_attribute"
JSX_EXPRESSION = "jsx_expression"

JSX_OPENING_LIKE: frozenset[str] = frozenset({
    JSX_OPENING_ELEMENT,
    JSX_SELF_CLOSING_ELEMENT,
})

# Property keys that have a static name: `id`, "id", 1
LITERAL_KEY_KINDS: frozenset[str] = frozenset({
    PROPERTY_IDENTIFIER,
    IDENTIFIER,
    STRING,
    NUMBER,
})


# ---------------------------------------------------------------------------
# Child access
# ---------------------------------------------------------------------------

def significant_children(node: Node) -> list[Node]:
    """Named children of *node*, without comments."""
    return [c for c in node.named_children if c.type != COMMENT]


def node_text(node: Node) -> str:
    """Raw UTF-8 source text of *node*."""
    raw = node.text
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Literal decoding
# ---------------------------------------------------------------------------

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_CONTINUATIONS = ("\n", "\r", "\r\n", "\u2028", "\u2029")


def _decode_escape(match: re.Match) -> str:
    seq = match.group(1)
    if seq.startswith("u{"):
        return chr(int(seq[2:-1], 16))
    if len(seq) == 5 and seq[0] == "u":
        return chr(int(seq[1:], 16))
    if len(seq) == 3 and seq[0] == "x":
        return chr(int(seq[1:], 16))
    if seq in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


def unescape(raw: str) -> str:
    """Apply JS string escape rules to the body of a literal."""
    if "\\" not in raw:
        return raw
    text = _ESCAPE_RE.sub(_decode_escape, raw)
    # \uD83D\uDE00 pairs decode to lone surrogates; join them.
    return text.encode("utf-16", "surrogatepass").decode("utf-16", errors="replace")


def is_plain_template(node: Node) -> bool:
    """True for a template literal without ``${...}`` substitutions."""
    return node.type == TEMPLATE_STRING and not any(
        c.type == TEMPLATE_SUBSTITUTION for c in node.named_children
    )


def string_value(node: Node) -> Optional[str]:
    """Decoded value of a ``string`` literal, else None."""
    if node.type != STRING:
        return None
    return unescape(node_text(node)[1:-1])


def static_string_value(node: Node) -> Optional[str]:
    """Decoded value of a ``string`` or substitution-free template literal."""
    if node.type == STRING:
        return string_value(node)
    if is_plain_template(node):
        return unescape(node_text(node)[1:-1].replace("\r\n", "\n"))
    return None


def jsx_string_value(node: Node) -> Optional[str]:
    """Verbatim value of a JSX attribute string, else None."""
    if node.type != STRING:
        return None
    return node_text(node)[1:-1]


def property_key_name(node: Node) -> Optional[str]:
    """Static name of a property key node, or None for computed keys."""
    if node.type not in LITERAL_KEY_KINDS:
        return None
    if node.type == STRING:
        return string_value(node)
    return node_text(node)
