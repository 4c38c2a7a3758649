"""Compiler diagnostics: error codes, their messages and the exceptions raised."""

from __future__ import annotations

from enum import Enum, auto

from kplc.tokens import TokenType, token_to_string


class ErrorCode(Enum):
    """Every diagnostic the compiler can report."""

    END_OF_COMMENT = auto()
    IDENT_TOO_LONG = auto()
    INVALID_CONSTANT_CHAR = auto()
    INVALID_SYMBOL = auto()
    INVALID_IDENT = auto()
    INVALID_CONSTANT = auto()
    INVALID_TYPE = auto()
    INVALID_BASICTYPE = auto()
    INVALID_VARIABLE = auto()
    INVALID_FUNCTION = auto()
    INVALID_PROCEDURE = auto()
    INVALID_PARAMETER = auto()
    INVALID_STATEMENT = auto()
    INVALID_COMPARATOR = auto()
    INVALID_EXPRESSION = auto()
    INVALID_TERM = auto()
    INVALID_FACTOR = auto()
    INVALID_LVALUE = auto()
    INVALID_ARGUMENTS = auto()
    UNDECLARED_IDENT = auto()
    UNDECLARED_CONSTANT = auto()
    UNDECLARED_INT_CONSTANT = auto()
    UNDECLARED_TYPE = auto()
    UNDECLARED_VARIABLE = auto()
    UNDECLARED_FUNCTION = auto()
    UNDECLARED_PROCEDURE = auto()
    DUPLICATE_IDENT = auto()
    TYPE_INCONSISTENCY = auto()
    PARAMETERS_ARGUMENTS_INCONSISTENCY = auto()


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.END_OF_COMMENT: "End of comment expected.",
    ErrorCode.IDENT_TOO_LONG: "Identifier too long.",
    ErrorCode.INVALID_CONSTANT_CHAR: "Invalid char constant.",
    ErrorCode.INVALID_SYMBOL: "Invalid symbol.",
    ErrorCode.INVALID_IDENT: "An identifier expected.",
    ErrorCode.INVALID_CONSTANT: "A constant expected.",
    ErrorCode.INVALID_TYPE: "A type expected.",
    ErrorCode.INVALID_BASICTYPE: "A basic type expected.",
    ErrorCode.INVALID_VARIABLE: "A variable expected.",
    ErrorCode.INVALID_FUNCTION: "A function identifier expected.",
    ErrorCode.INVALID_PROCEDURE: "A procedure identifier expected.",
    ErrorCode.INVALID_PARAMETER: "A parameter expected.",
    ErrorCode.INVALID_STATEMENT: "Invalid statement.",
    ErrorCode.INVALID_COMPARATOR: "A comparator expected.",
    ErrorCode.INVALID_EXPRESSION: "Invalid expression.",
    ErrorCode.INVALID_TERM: "Invalid term.",
    ErrorCode.INVALID_FACTOR: "Invalid factor.",
    ErrorCode.INVALID_LVALUE: "Invalid lvalue in assignment.",
    ErrorCode.INVALID_ARGUMENTS: "Wrong arguments.",
    ErrorCode.UNDECLARED_IDENT: "Undeclared identifier.",
    ErrorCode.UNDECLARED_CONSTANT: "Undeclared constant.",
    ErrorCode.UNDECLARED_INT_CONSTANT: "Undeclared integer constant.",
    ErrorCode.UNDECLARED_TYPE: "Undeclared type.",
    ErrorCode.UNDECLARED_VARIABLE: "Undeclared variable.",
    ErrorCode.UNDECLARED_FUNCTION: "Undeclared function.",
    ErrorCode.UNDECLARED_PROCEDURE: "Undeclared procedure.",
    ErrorCode.DUPLICATE_IDENT: "Duplicate identifier.",
    ErrorCode.TYPE_INCONSISTENCY: "Type inconsistency",
    ErrorCode.PARAMETERS_ARGUMENTS_INCONSISTENCY: (
        "The number of arguments and the number of parameters are inconsistent."
    ),
}


class CompileError(Exception):
    """A diagnostic at a source position; ``str()`` gives ``line-col:message``."""

    def __init__(
        self,
        message: str,
        line_no: int,
        col_no: int,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(f"{line_no}-{col_no}:{message}")
        self.message = message
        self.line_no = line_no
        self.col_no = col_no
        self.code = code


class MissingTokenError(CompileError):
    """Raised when the parser expected a token that is not there."""

    def __init__(self, token_type: TokenType, line_no: int, col_no: int) -> None:
        super().__init__(f"Missing {token_to_string(token_type)}", line_no, col_no)
        self.token_type = token_type


def error_message(code: ErrorCode) -> str:
    """Return the message text for ``code``."""
    return _MESSAGES[code]


def error(code: ErrorCode, line_no: int, col_no: int) -> None:
    """Raise a :class:`CompileError` for ``code`` at the given position."""
    raise CompileError(error_message(code), line_no, col_no, code)


def missing_token(token_type: TokenType, line_no: int, col_no: int) -> None:
    """Raise a :class:`MissingTokenError` for ``token_type`` at the given position."""
    raise MissingTokenError(token_type, line_no, col_no)