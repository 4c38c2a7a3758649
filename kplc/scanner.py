"""Lexical scanner turning source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from kplc.charcode import CharCode, char_code
from kplc.errors import ErrorCode, error
from kplc.reader import Reader
from kplc.tokens import MAX_IDENT_LEN, Token, TokenType, check_keyword

_SINGLE_SYMBOLS: dict[CharCode, TokenType] = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.SLASH: TokenType.SB_SLASH,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.RPAR: TokenType.SB_RPAR,
}

# First character, second character, token when both match, token otherwise.
_DOUBLE_SYMBOLS: dict[CharCode, tuple[CharCode, TokenType, TokenType]] = {
    CharCode.LT: (CharCode.EQ, TokenType.SB_LE, TokenType.SB_LT),
    CharCode.GT: (CharCode.EQ, TokenType.SB_GE, TokenType.SB_GT),
    CharCode.COLON: (CharCode.EQ, TokenType.SB_ASSIGN, TokenType.SB_COLON),
    CharCode.PERIOD: (CharCode.RPAR, TokenType.SB_RSEL, TokenType.SB_PERIOD),
}


class Scanner:
    """Produces tokens from a :class:`Reader`.

    Lexical errors raise :class:`kplc.errors.CompileError`.
    """

    def __init__(self, reader: Reader) -> None:
        self._reader = reader

    def _current_code(self) -> CharCode | None:
        ch = self._reader.current_char
        return None if ch is None else char_code(ch)

    def _followed_by(self, code: CharCode) -> bool:
        if self._current_code() is code:
            self._reader.read_char()
            return True
        return False

    def _skip_blank(self) -> None:
        while self._current_code() is CharCode.SPACE:
            self._reader.read_char()

    def _skip_comment(self) -> None:
        reader = self._reader
        state = 0
        while reader.current_char is not None and state < 2:
            code = char_code(reader.current_char)
            if code is CharCode.TIMES:
                state = 1
            elif code is CharCode.RPAR:
                state = 2 if state == 1 else 0
            else:
                state = 0
            reader.read_char()
        if state != 2:
            error(ErrorCode.END_OF_COMMENT, reader.line_no, reader.col_no)

    def _read_ident_keyword(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        chars = [reader.current_char]
        reader.read_char()
        while self._current_code() in (CharCode.LETTER, CharCode.DIGIT):
            if len(chars) <= MAX_IDENT_LEN:
                chars.append(reader.current_char)
            reader.read_char()
        if len(chars) > MAX_IDENT_LEN:
            error(ErrorCode.IDENT_TOO_LONG, line_no, col_no)
        text = "".join(chars).upper()
        token_type = check_keyword(text)
        if token_type is TokenType.TK_NONE:
            token_type = TokenType.TK_IDENT
        return Token(token_type, line_no, col_no, string=text)

    def _read_number(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        digits = []
        while self._current_code() is CharCode.DIGIT:
            digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits)
        return Token(TokenType.TK_NUMBER, line_no, col_no, string=text, value=int(text))

    def _read_const_char(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        if reader.current_char is None:
            error(ErrorCode.INVALID_CONSTANT_CHAR, line_no, col_no)
        text = reader.current_char
        reader.read_char()
        if not self._followed_by(CharCode.SINGLEQUOTE):
            error(ErrorCode.INVALID_CONSTANT_CHAR, line_no, col_no)
        return Token(TokenType.TK_CHAR, line_no, col_no, string=text)

    def get_token(self) -> Token:
        """Read and return the next token; ``TK_EOF`` at the end of input."""
        reader = self._reader
        while True:
            if reader.current_char is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            code = char_code(reader.current_char)
            line_no, col_no = reader.line_no, reader.col_no

            if code is CharCode.SPACE:
                self._skip_blank()
                continue
            if code is CharCode.LETTER:
                return self._read_ident_keyword()
            if code is CharCode.DIGIT:
                return self._read_number()
            if code is CharCode.SINGLEQUOTE:
                return self._read_const_char()
            if code in _SINGLE_SYMBOLS:
                reader.read_char()
                return Token(_SINGLE_SYMBOLS[code], line_no, col_no)
            if code in _DOUBLE_SYMBOLS:
                second, joined, alone = _DOUBLE_SYMBOLS[code]
                reader.read_char()
                token_type = joined if self._followed_by(second) else alone
                return Token(token_type, line_no, col_no)
            if code is CharCode.EXCLAIMATION:
                reader.read_char()
                if self._followed_by(CharCode.EQ):
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                error(ErrorCode.INVALID_SYMBOL, line_no, col_no)
            if code is CharCode.LPAR:
                reader.read_char()
                if self._followed_by(CharCode.PERIOD):
                    return Token(TokenType.SB_LSEL, line_no, col_no)
                if self._followed_by(CharCode.TIMES):
                    self._skip_comment()
                    continue
                return Token(TokenType.SB_LPAR, line_no, col_no)
            error(ErrorCode.INVALID_SYMBOL, line_no, col_no)

    def get_valid_token(self) -> Token:
        """Return the next token that is not ``TK_NONE``."""
        token = self.get_token()
        while token.type is TokenType.TK_NONE:
            token = self.get_token()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the ``TK_EOF`` token."""
        while True:
            token = self.get_valid_token()
            yield token
            if token.type is TokenType.TK_EOF:
                return


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, ending with the ``TK_EOF`` token."""
    return list(Scanner(Reader(text)))