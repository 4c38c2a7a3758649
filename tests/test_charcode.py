import string

import pytest

from kplc.charcode import CharCode, char_code


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters(ch):
    assert char_code(ch) is CharCode.LETTER


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert char_code(ch) is CharCode.DIGIT


@pytest.mark.parametrize("ch", ["\t", "\n", "\x0b", "\x0c", "\r", " "])
def test_whitespace(ch):
    assert char_code(ch) is CharCode.SPACE


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("!", CharCode.EXCLAIMATION),
        ("'", CharCode.SINGLEQUOTE),
        ("(", CharCode.LPAR),
        (")", CharCode.RPAR),
        ("*", CharCode.TIMES),
        ("+", CharCode.PLUS),
        (",", CharCode.COMMA),
        ("-", CharCode.MINUS),
        (".", CharCode.PERIOD),
        ("/", CharCode.SLASH),
        (":", CharCode.COLON),
        (";", CharCode.SEMICOLON),
        ("<", CharCode.LT),
        ("=", CharCode.EQ),
        (">", CharCode.GT),
    ],
)
def test_symbols(ch, expected):
    assert char_code(ch) is expected


@pytest.mark.parametrize("ch", ['"', "?", "@", "[", "_", "{", "~", "\x00", "\x7f", "\xe9", "\u4e2d"])
def test_unknown(ch):
    assert char_code(ch) is CharCode.UNKNOWN


def test_every_code_is_a_member():
    codes = {char_code(chr(i)) for i in range(256)}
    assert codes == set(CharCode)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        char_code(bad)


def test_rejects_non_string():
    with pytest.raises(TypeError):
        char_code(65)