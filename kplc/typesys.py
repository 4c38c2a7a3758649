"""Types and constant values of the source language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TypeClass(Enum):
    """Class of a language type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


@dataclass(frozen=True)
class Type:
    """A language type; arrays carry their size and element type."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None


@dataclass(frozen=True)
class ConstantValue:
    """A constant: an ``int`` for integers, a one-character ``str`` for chars."""

    type: TypeClass
    value: int | str


def make_int_type() -> Type:
    """Return the integer type."""
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    """Return the char type."""
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    """Return an array type of ``array_size`` elements of ``element_type``."""
    return Type(TypeClass.ARRAY, array_size, element_type)


def compare_types(type1: Type, type2: Type) -> bool:
    """Return whether two types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is not TypeClass.ARRAY:
        return True
    if type1.array_size != type2.array_size:
        return False
    return compare_types(type1.element_type, type2.element_type)


def make_int_constant(i: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, i)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a char constant holding the single character ``ch``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ConstantValue(TypeClass.CHAR, ch)