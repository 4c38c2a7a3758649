"""Classification of source characters into lexical character classes."""

from __future__ import annotations

import string
from enum import Enum


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = "space"
    LETTER = "letter"
    DIGIT = "digit"
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    SLASH = "slash"
    LT = "lt"
    GT = "gt"
    EXCLAIMATION = "exclaimation"
    EQ = "eq"
    COMMA = "comma"
    PERIOD = "period"
    COLON = "colon"
    SEMICOLON = "semicolon"
    SINGLEQUOTE = "singlequote"
    LPAR = "lpar"
    RPAR = "rpar"
    UNKNOWN = "unknown"


_SYMBOLS = {
    "!": CharCode.EXCLAIMATION,
    "'": CharCode.SINGLEQUOTE,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
    "*": CharCode.TIMES,
    "+": CharCode.PLUS,
    ",": CharCode.COMMA,
    "-": CharCode.MINUS,
    ".": CharCode.PERIOD,
    "/": CharCode.SLASH,
    ":": CharCode.COLON,
    ";": CharCode.SEMICOLON,
    "<": CharCode.LT,
    "=": CharCode.EQ,
    ">": CharCode.GT,
}

_TABLE: dict[str, CharCode] = {
    **{ch: CharCode.SPACE for ch in "\t\n\x0b\x0c\r "},
    **{ch: CharCode.LETTER for ch in string.ascii_letters},
    **{ch: CharCode.DIGIT for ch in string.digits},
    **_SYMBOLS,
}


def char_code(ch: str) -> CharCode:
    """Return the lexical class of the single character ``ch``."""
    if not isinstance(ch, str):
        raise TypeError(f"expected a character, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLE.get(ch, CharCode.UNKNOWN)