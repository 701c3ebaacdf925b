"""Tests for the LuaCSS tokenizer."""

import pytest

from luacss.model.token import Token, TokenKind
from luacss.parser.tokenizer import significant_tokens, tokenize


def _kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in significant_tokens(tokenize(source))]


def _values(source: str) -> list[str]:
    return [t.value for t in significant_tokens(tokenize(source))]


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


class TestCoverage:
    def test_empty_source(self):
        assert tokenize("") == []

    def test_whitespace_run_is_one_token(self):
        tokens = tokenize(" \t\n  ")
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.WHITESPACE
        assert tokens[0].value == " \t\n  "

    def test_every_character_is_covered(self):
        source = "a = { b = 1px, -- note\n c = 0xff }"
        rebuilt = "".join(t.value + t.unit for t in tokenize(source))
        assert rebuilt == source

    def test_unknown_characters_become_punctuation(self):
        tokens = tokenize("@;~")
        assert [t.kind for t in tokens] == [TokenKind.PUNCTUATION] * 3
        assert [t.value for t in tokens] == ["@", ";", "~"]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_comment_runs_to_end_of_line(self):
        tokens = tokenize("-- hello\nx")
        assert tokens[0] == Token(TokenKind.COMMENT, "-- hello", line=1, column=1)
        assert tokens[1].kind is TokenKind.WHITESPACE
        assert tokens[2].value == "x"

    def test_comment_at_end_of_input(self):
        tokens = tokenize("x -- trailing")
        assert tokens[-1].kind is TokenKind.COMMENT
        assert tokens[-1].value == "-- trailing"

    def test_comments_are_not_significant(self):
        assert _values("a -- b = c\nd") == ["a", "d"]


# ---------------------------------------------------------------------------
# Hex literals
# ---------------------------------------------------------------------------


class TestHex:
    def test_hex_literal(self):
        tokens = tokenize("0xA1b2C3")
        assert tokens == [Token(TokenKind.HEX, "0xA1b2C3")]

    def test_uppercase_prefix(self):
        assert _kinds("0XFF") == [TokenKind.HEX]

    def test_zero_digits_allowed(self):
        assert _values("0x") == ["0x"]
        assert _kinds("0x") == [TokenKind.HEX]

    def test_hex_stops_at_non_hex_character(self):
        assert _values("0xfg") == ["0xf", "g"]


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestStrings:
    def test_double_quoted(self):
        assert tokenize('"2rem"') == [Token(TokenKind.STRING, "2rem")]

    def test_single_quoted(self):
        assert _values("'a b'") == ["a b"]

    def test_other_quote_inside(self):
        assert _values("\"it's\"") == ["it's"]

    def test_escape_keeps_next_character(self):
        assert _values(r'"a\"b"') == ['a"b']
        assert _values(r'"\.card"') == [".card"]

    def test_escape_sequences_are_not_interpreted(self):
        assert _values(r'"\n"') == ["n"]

    def test_unterminated_string_runs_to_end(self):
        tokens = tokenize('"open ended')
        assert tokens == [Token(TokenKind.STRING, "open ended")]

    def test_trailing_backslash_is_dropped(self):
        assert _values('"abc\\') == ["abc"]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestNumbers:
    @pytest.mark.parametrize(
        "source,value,unit",
        [
            ("42", "42", ""),
            ("0.8", "0.8", ""),
            (".5", ".5", ""),
            ("-3", "-3", ""),
            ("+1.5", "+1.5", ""),
            ("-.5em", "-.5", "em"),
            ("2rem", "2", "rem"),
            ("50%", "50", "%"),
        ],
    )
    def test_number_forms(self, source, value, unit):
        tokens = tokenize(source)
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.NUMBER
        assert tokens[0].value == value
        assert tokens[0].unit == unit

    def test_lone_minus_is_punctuation(self):
        assert _kinds("- x") == [TokenKind.PUNCTUATION, TokenKind.IDENTIFIER]

    def test_dot_without_digit_is_punctuation(self):
        assert _kinds("color.hex") == [
            TokenKind.IDENTIFIER,
            TokenKind.PUNCTUATION,
            TokenKind.IDENTIFIER,
        ]

    def test_comment_wins_over_negative_number(self):
        assert _kinds("--5") == []


# ---------------------------------------------------------------------------
# Identifiers and positions
# ---------------------------------------------------------------------------


class TestIdentifiers:
    def test_underscore_and_hyphen(self):
        assert _values("font_size nth-child _x9") == ["font_size", "nth-child", "_x9"]

    def test_identifier_kind(self):
        assert _kinds("hover") == [TokenKind.IDENTIFIER]

    def test_digit_cannot_start_identifier(self):
        tokens = significant_tokens(tokenize("9lives"))
        assert tokens[0].kind is TokenKind.NUMBER
        assert tokens[0].unit == "lives"


class TestPositions:
    def test_line_and_column(self):
        tokens = significant_tokens(tokenize("a = {\n  b = 1\n}"))
        positions = [(t.value, t.line, t.column) for t in tokens]
        assert positions == [
            ("a", 1, 1),
            ("=", 1, 3),
            ("{", 1, 5),
            ("b", 2, 3),
            ("=", 2, 5),
            ("1", 2, 7),
            ("}", 3, 1),
        ]

    def test_token_is_frozen(self):
        token = tokenize("x")[0]
        with pytest.raises(AttributeError):
            token.value = "y"  # type: ignore[misc]
