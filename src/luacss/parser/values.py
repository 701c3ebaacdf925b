"""Value expressions: the right-hand side of ``key = value``.

Values are passed through largely as written. Tokens are re-joined with
spacing rules that keep ``1px solid`` and ``calc(100% - 2px)`` readable, and
``color.<fn>(...)`` calls are turned into CSS color notation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from luacss.model.diagnostic import DiagnosticKind
from luacss.model.token import Token, TokenKind
from luacss.parser.stream import TokenStream

__all__ = ["parse_color", "parse_value", "render_token"]


def render_token(token: Token) -> str:
    """Render a single token as it appears in a CSS value."""
    if token.kind is TokenKind.STRING:
        return f'"{token.value}"'
    if token.kind is TokenKind.NUMBER:
        return token.value + token.unit
    if token.kind is TokenKind.HEX:
        return "#" + token.value[2:].lower().rjust(6, "0")
    return token.value


# ---------------------------------------------------------------------------
# color.<fn>(...)
# ---------------------------------------------------------------------------


def _format_number(text: str) -> str:
    """Normalize numeric text the way a JavaScript ``Number`` prints it.

    ``"0.50"`` -> ``"0.5"``, ``"1.0"`` -> ``"1"``, ``"+7"`` -> ``"7"``.
    Shortest round-trip digits are used, with exponent notation outside
    ``1e-7 <= |x| < 1e21`` (``"1e+23"``). Text that is not a number
    (``"1.2.3"``) is kept as written.
    """
    try:
        number = float(text)
    except ValueError:
        return text
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    if number == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    count = len(digits)
    point = count + exponent  # position of the decimal point within digits

    if count <= point <= 21:
        body = digits + "0" * (point - count)
    elif 0 < point <= 21:
        body = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"
    return ("-" if sign else "") + body


def _color_argument(token: Token) -> str:
    if token.kind is TokenKind.NUMBER:
        return _format_number(token.value)
    return token.value


def _channel(arg: str) -> int:
    """Scale a 0-1 float to 0-255, rounding halves up."""
    try:
        fraction = float(arg)
    except ValueError:
        fraction = 0.0
    if not math.isfinite(fraction):
        fraction = 0.0
    return math.floor(fraction * 255 + 0.5)


def _pad_arguments(
    stream: TokenStream, name: str, args: list[str], count: int, token: Token | None
) -> list[str]:
    if len(args) < count:
        stream.error(
            f"color.{name} expects {count} arguments, got {len(args)}",
            token,
            kind=DiagnosticKind.SEMANTIC,
        )
        return args + ["0"] * (count - len(args))
    return args


def _build_color(
    stream: TokenStream, name: str, args: list[str], token: Token | None
) -> str:
    if name == "hex":
        raw = args[0] if args else "000000"
        return raw if raw.startswith("#") else "#" + raw
    if name == "rgb":
        return f"rgb({', '.join(args[:3])})"
    if name == "rgba":
        return f"rgba({', '.join(args[:4])})"
    if name == "hsl":
        hue, sat, light = _pad_arguments(stream, name, args, 3, token)[:3]
        return f"hsl({hue}, {sat}%, {light}%)"
    if name == "hsla":
        hue, sat, light, alpha = _pad_arguments(stream, name, args, 4, token)[:4]
        return f"hsla({hue}, {sat}%, {light}%, {alpha})"
    if name == "color3":
        r, g, b = (_channel(arg) for arg in (args + ["0", "0", "0"])[:3])
        return f"rgb({r}, {g}, {b})"
    stream.error(
        f"Unknown color function: color.{name}", token, kind=DiagnosticKind.SEMANTIC
    )
    return "#000000"


def parse_color(stream: TokenStream) -> str:
    """Parse ``color.<fn>(arg, ...)`` starting at the ``color`` identifier."""
    stream.next()  # color
    stream.expect(".")
    name_token = stream.next()
    name = name_token.value if name_token is not None else ""
    stream.expect("(")

    args: list[str] = []
    while not stream.at_end() and not stream.peek_is_punct(")"):
        token = stream.next()
        if token is None or token.is_punct(","):
            continue
        args.append(_color_argument(token))
    stream.expect(")")

    return _build_color(stream, name, args, name_token)


# ---------------------------------------------------------------------------
# General values
# ---------------------------------------------------------------------------


@dataclass
class _Depth:
    """Open ``()``, ``[]`` and ``{}`` counts inside a value."""

    paren: int = 0
    bracket: int = 0
    brace: int = 0

    @property
    def at_top(self) -> bool:
        return self.paren == 0 and self.bracket == 0 and self.brace == 0

    def track(self, token: Token) -> None:
        if token.kind is not TokenKind.PUNCTUATION:
            return
        if token.value == "(":
            self.paren += 1
        elif token.value == ")":
            self.paren = max(0, self.paren - 1)
        elif token.value == "[":
            self.bracket += 1
        elif token.value == "]":
            self.bracket = max(0, self.bracket - 1)
        elif token.value == "{":
            self.brace += 1
        elif token.value == "}":
            self.brace = max(0, self.brace - 1)


def _at_value_end(stream: TokenStream, depth: _Depth) -> bool:
    token = stream.peek()
    if token is None:
        return True
    if not depth.at_top:
        return False
    # Matched by token kind: a quoted "end" or "}" is ordinary value text.
    if token.is_punct(",") or token.is_punct("}") or token.is_ident("end"):
        return True
    return token.is_ident() and stream.peek_is_punct("=", 1)


def _ends_operand(token: Token | None) -> bool:
    if token is None:
        return False
    return token.is_word_like or token.is_punct(")") or token.is_punct("]")


def _starts_operand(token: Token | None) -> bool:
    if token is None:
        return False
    return token.is_word_like or token.is_punct("(")


def parse_value(stream: TokenStream) -> str:
    """Consume a value and return it as CSS text.

    Returns an empty string without consuming anything when the current
    token starts the next key (``key =`` / ``key {``) or closes a pseudo-state
    block (``end``), or is ``function``.
    """
    token = stream.peek()
    if token is None:
        return ""
    if token.is_ident("color") and stream.peek_is_punct(".", 1):
        return parse_color(stream)
    if token.is_ident() and (
        stream.peek_is_punct("=", 1) or stream.peek_is_punct("{", 1)
    ):
        return ""
    if token.is_ident("end") or token.is_ident("function"):
        return ""

    depth = _Depth()
    value = ""
    prev: Token | None = None

    while not _at_value_end(stream, depth):
        token = stream.peek()
        following = stream.peek(1)
        piece = render_token(token)
        is_sign = token.is_punct("+") or token.is_punct("-")

        if is_sign and _ends_operand(prev) and _starts_operand(following):
            # binary operator: a - b
            if value and not value.endswith(" "):
                value += " "
            value += piece
            if not following.is_ident("end"):
                value += " "
        else:
            if (
                prev is not None
                and token.is_word_like
                and (prev.is_word_like or prev.is_punct(")"))
            ):
                value += " "
            value += piece

        depth.track(token)
        prev = stream.next()

    return value.strip()
