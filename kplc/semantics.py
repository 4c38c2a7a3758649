"""Semantic checks on identifiers: freshness and declaration by kind."""

from __future__ import annotations

from collections.abc import Iterator

from kplc.errors import ErrorCode, error
from kplc.symtab import Object, ObjectKind, SymTab

_LVALUE_KINDS = frozenset(
    {ObjectKind.FUNCTION, ObjectKind.PARAMETER, ObjectKind.VARIABLE}
)


class SemanticChecker:
    """Checks identifiers against a symbol table, raising ``CompileError``."""

    def __init__(self, symtab: SymTab) -> None:
        self.symtab = symtab

    def _candidates(self, name: str) -> Iterator[Object]:
        """Yield objects named ``name``, innermost scope first, globals last."""
        scope = self.symtab.current_scope
        while scope is not None:
            obj = scope.find(name)
            if obj is not None:
                yield obj
            scope = scope.outer
        yield from (o for o in self.symtab.global_objects if o.name == name)

    def _find_kind(
        self,
        name: str,
        kinds: frozenset[ObjectKind],
        code: ErrorCode,
        line_no: int,
        col_no: int,
    ) -> Object:
        for obj in self._candidates(name):
            if obj.kind in kinds:
                return obj
        error(code, line_no, col_no)
        raise AssertionError("unreachable")

    def check_fresh_ident(self, name: str, line_no: int, col_no: int) -> None:
        """Raise ``DUPLICATE_IDENT`` if ``name`` is already in the current scope."""
        scope = self.symtab.current_scope
        if scope is not None and scope.find(name) is not None:
            error(ErrorCode.DUPLICATE_IDENT, line_no, col_no)

    def check_declared_ident(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the visible object named ``name`` of any kind."""
        obj = self.symtab.lookup(name)
        if obj is None:
            error(ErrorCode.UNDECLARED_IDENT, line_no, col_no)
        return obj

    def check_declared_constant(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the nearest constant named ``name``."""
        return self._find_kind(
            name, frozenset({ObjectKind.CONSTANT}),
            ErrorCode.UNDECLARED_CONSTANT, line_no, col_no,
        )

    def check_declared_type(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the nearest type named ``name``."""
        return self._find_kind(
            name, frozenset({ObjectKind.TYPE}),
            ErrorCode.UNDECLARED_TYPE, line_no, col_no,
        )

    def check_declared_variable(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the nearest variable named ``name``."""
        return self._find_kind(
            name, frozenset({ObjectKind.VARIABLE}),
            ErrorCode.UNDECLARED_VARIABLE, line_no, col_no,
        )

    def check_declared_function(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the nearest function named ``name``."""
        return self._find_kind(
            name, frozenset({ObjectKind.FUNCTION}),
            ErrorCode.UNDECLARED_FUNCTION, line_no, col_no,
        )

    def check_declared_procedure(self, name: str, line_no: int, col_no: int) -> Object:
        """Return the nearest procedure named ``name``."""
        return self._find_kind(
            name, frozenset({ObjectKind.PROCEDURE}),
            ErrorCode.UNDECLARED_PROCEDURE, line_no, col_no,
        )

    def check_declared_lvalue_ident(
        self, name: str, line_no: int, col_no: int
    ) -> Object:
        """Return the nearest function, parameter or variable named ``name``."""
        return self._find_kind(
            name, _LVALUE_KINDS, ErrorCode.UNDECLARED_IDENT, line_no, col_no,
        )