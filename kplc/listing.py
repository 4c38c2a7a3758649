"""Text listing of tokens, one per line with its position."""

from __future__ import annotations

from collections.abc import Iterable

from kplc.tokens import Token, TokenType


def format_token(token: Token) -> str:
    """Return ``line-col:KIND`` for ``token``, with its text where it has one."""
    kind = token.type
    if kind in (TokenType.TK_IDENT, TokenType.TK_NUMBER):
        body = f"{kind.name}({token.string})"
    elif kind is TokenType.TK_CHAR:
        body = f"{kind.name}('{token.string}')"
    else:
        body = kind.name
    return f"{token.line_no}-{token.col_no}:{body}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return the listing of ``tokens``, each line ending in a newline."""
    return "".join(f"{format_token(token)}\n" for token in tokens)