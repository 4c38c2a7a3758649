"""Symbol table: declared objects, their scopes and name lookup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from kplc.typesys import ConstantValue, Type, make_char_type, make_int_type


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass(eq=False)
class Object:
    """A declared name together with the attributes its kind carries.

    - constants use ``value``;
    - types use ``actual_type``;
    - variables and parameters use ``type``; a variable's ``scope`` is the
      scope it was declared in;
    - functions, procedures and the program use ``scope`` for their own
      block; functions and procedures keep their parameters in
      ``param_list``, and functions their ``return_type``;
    - parameters also carry ``param_kind`` and ``owner``.
    """

    name: str
    kind: ObjectKind
    value: ConstantValue | None = None
    actual_type: Type | None = None
    type: Type | None = None
    return_type: Type | None = None
    param_kind: ParamKind | None = None
    scope: Scope | None = field(default=None, repr=False)
    owner: Object | None = field(default=None, repr=False)
    param_list: list[Object] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Scope:
    """A block's declarations, the object owning it and the enclosing scope."""

    owner: Object | None = field(default=None, repr=False)
    outer: Scope | None = field(default=None, repr=False)
    objects: list[Object] = field(default_factory=list)

    def add(self, obj: Object) -> None:
        """Append ``obj`` to this scope's declarations."""
        self.objects.append(obj)

    def find(self, name: str) -> Object | None:
        """Return the first object in this scope named ``name``, or ``None``."""
        return find_object(self.objects, name)


def find_object(objects: Iterable[Object], name: str) -> Object | None:
    """Return the first object in ``objects`` named ``name``, or ``None``."""
    return next((obj for obj in objects if obj.name == name), None)


class SymTab:
    """The program object, the current scope and the built-in globals."""

    def __init__(self) -> None:
        self.program: Object | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[Object] = []

        readc = self.create_function("READC")
        readc.return_type = make_char_type()
        self.global_objects.append(readc)

        readi = self.create_function("READI")
        readi.return_type = make_int_type()
        self.global_objects.append(readi)

        writei = self.create_procedure("WRITEI")
        param = self.create_parameter("i", ParamKind.VALUE, writei)
        param.type = make_int_type()
        writei.param_list.append(param)
        self.global_objects.append(writei)

        writec = self.create_procedure("WRITEC")
        param = self.create_parameter("ch", ParamKind.VALUE, writec)
        param.type = make_char_type()
        writec.param_list.append(param)
        self.global_objects.append(writec)

        self.global_objects.append(self.create_procedure("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def create_program(self, name: str) -> Object:
        """Create the program object, with an outermost scope, and record it."""
        program = Object(name, ObjectKind.PROGRAM)
        program.scope = Scope(program, None)
        self.program = program
        return program

    def create_constant(self, name: str) -> Object:
        """Create a constant object; its value is set by the caller."""
        return Object(name, ObjectKind.CONSTANT)

    def create_type(self, name: str) -> Object:
        """Create a type object; its actual type is set by the caller."""
        return Object(name, ObjectKind.TYPE)

    def create_variable(self, name: str) -> Object:
        """Create a variable object belonging to the current scope."""
        return Object(name, ObjectKind.VARIABLE, scope=self.current_scope)

    def create_function(self, name: str) -> Object:
        """Create a function whose block is nested in the current scope."""
        obj = Object(name, ObjectKind.FUNCTION)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def create_procedure(self, name: str) -> Object:
        """Create a procedure whose block is nested in the current scope."""
        obj = Object(name, ObjectKind.PROCEDURE)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def create_parameter(self, name: str, kind: ParamKind, owner: Object) -> Object:
        """Create a parameter of ``owner`` passed as ``kind``."""
        return Object(name, ObjectKind.PARAMETER, param_kind=kind, owner=owner)

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current scope."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the scope enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def lookup(self, name: str) -> Object | None:
        """Find ``name`` from the current scope outwards, then among the globals."""
        scope = self.current_scope
        while scope is not None:
            obj = scope.find(name)
            if obj is not None:
                return obj
            scope = scope.outer
        return find_object(self.global_objects, name)

    def declare(self, obj: Object) -> None:
        """Add ``obj`` to the current scope.

        A parameter is also appended to the parameter list of the function
        or procedure owning the current scope.
        """
        scope = self.current_scope
        if scope is None:
            raise RuntimeError("no current scope to declare in")
        owner = scope.owner
        if (
            obj.kind is ObjectKind.PARAMETER
            and owner is not None
            and owner.kind in (ObjectKind.FUNCTION, ObjectKind.PROCEDURE)
        ):
            owner.param_list.append(obj)
        scope.add(obj)