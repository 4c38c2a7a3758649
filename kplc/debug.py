"""Text dumps of types, constants, objects and scopes."""

from __future__ import annotations

from collections.abc import Iterable

from kplc.symtab import Object, ObjectKind, ParamKind, Scope
from kplc.typesys import ConstantValue, Type, TypeClass


def format_type(type_: Type) -> str:
    """Return ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Return an integer constant as digits, a char constant in quotes."""
    if value.type is TypeClass.INT:
        return str(value.value)
    if value.type is TypeClass.CHAR:
        return f"'{value.value}'"
    return ""


def format_object(obj: Object, indent: int) -> str:
    """Return ``obj`` indented by ``indent`` spaces; blocks list their scope."""
    pad = " " * indent
    kind = obj.kind
    if kind is ObjectKind.CONSTANT:
        return f"{pad}Const {obj.name} = {format_constant_value(obj.value)}"
    if kind is ObjectKind.TYPE:
        return f"{pad}Type {obj.name} = {format_type(obj.actual_type)}"
    if kind is ObjectKind.VARIABLE:
        return f"{pad}Var {obj.name} : {format_type(obj.type)}"
    if kind is ObjectKind.PARAMETER:
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {format_type(obj.type)}"
    if kind is ObjectKind.FUNCTION:
        head = f"{pad}Function {obj.name} : {format_type(obj.return_type)}\n"
    elif kind is ObjectKind.PROCEDURE:
        head = f"{pad}Procedure {obj.name}\n"
    else:
        head = f"{pad}Program {obj.name}\n"
    return head + format_scope(obj.scope, indent + 4)


def format_object_list(objects: Iterable[Object], indent: int) -> str:
    """Return every object formatted, each followed by a newline."""
    return "".join(f"{format_object(obj, indent)}\n" for obj in objects)


def format_scope(scope: Scope, indent: int) -> str:
    """Return the objects declared in ``scope``."""
    return format_object_list(scope.objects, indent)