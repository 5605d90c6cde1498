"""
test_syntax.py - Literal decoding helpers.
"""

from __future__ import annotations

from intl_extract import syntax
from intl_extract.ts_parser import ParserManager
from intl_extract.walker import find_all_of_type


def _first(src: str, *kinds: str):
    root = ParserManager().parse_source(src).root_node
    return find_all_of_type(root, *kinds)[0]


class TestUnescape:

    def test_plain_text_untouched(self):
        assert syntax.unescape("Hello {name}") == "Hello {name}"

    def test_simple_escapes(self):
        assert syntax.unescape(r"a\nb\tc") == "a\nb\tc"
        assert syntax.unescape(r"it\'s") == "it's"
        assert syntax.unescape(r"back\\slash") == "back\\slash"

    def test_unicode_and_hex(self):
        assert syntax.unescape(r"A\x42\u{43}") == "ABC"

    def test_surrogate_pair(self):
        assert syntax.unescape(r"\uD83D\uDE00") == "\U0001F600"

    def test_line_continuation(self):
        assert syntax.unescape("one \\\ntwo") == "one two"


class TestLiteralValues:

    def test_string_literal_is_decoded(self):
        node = _first(r'const a = "x\ty";', syntax.STRING)
        assert syntax.string_value(node) == "x\ty"
        assert syntax.static_string_value(node) == "x\ty"

    def test_single_quoted_string(self):
        node = _first("const a = 'hi';", syntax.STRING)
        assert syntax.string_value(node) == "hi"

    def test_plain_template(self):
        node = _first("const a = `hello`;", syntax.TEMPLATE_STRING)
        assert syntax.is_plain_template(node)
        assert syntax.static_string_value(node) == "hello"
        assert syntax.string_value(node) is None

    def test_template_with_substitution(self):
        node = _first("const a = `hello ${name}`;", syntax.TEMPLATE_STRING)
        assert not syntax.is_plain_template(node)
        assert syntax.static_string_value(node) is None

    def test_jsx_attribute_string_is_verbatim(self):
        node = _first(r'const e = <X id="a\nb" />;', syntax.JSX_ATTRIBUTE)
        value = syntax.significant_children(node)[1]
        assert syntax.jsx_string_value(value) == "a\\nb"


class TestPropertyKeys:

    def _keys(self, src: str):
        pairs = find_all_of_type(
            ParserManager().parse_source(src).root_node, syntax.PAIR,
        )
        return [syntax.property_key_name(p.child_by_field_name("key")) for p in pairs]

    def test_identifier_string_and_number_keys(self):
        assert self._keys("const o = { id: 1, 'defaultMessage': 2, 3: 4 };") == [
            "id", "defaultMessage", "3",
        ]

    def test_computed_key_has_no_name(self):
        assert self._keys("const o = { [ID]: 1 };") == [None]
