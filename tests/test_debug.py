from kplc.debug import (
    format_constant_value,
    format_object,
    format_object_list,
    format_scope,
    format_type,
)
from kplc.symtab import ParamKind, SymTab
from kplc.typesys import (
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def test_format_basic_types():
    assert format_type(make_int_type()) == "Int"
    assert format_type(make_char_type()) == "Char"


def test_format_nested_array():
    t = make_array_type(10, make_array_type(3, make_char_type()))
    assert format_type(t) == "Arr(10,Arr(3,Char))"


def test_format_constants():
    assert format_constant_value(make_int_constant(42)) == "42"
    assert format_constant_value(make_char_constant("a")) == "'a'"


def test_format_leaf_objects_with_indent():
    symtab = SymTab()
    c = symtab.create_constant("C")
    c.value = make_int_constant(5)
    assert format_object(c, 2) == "  Const C = 5"
    t = symtab.create_type("T")
    t.actual_type = make_char_type()
    assert format_object(t, 0) == "Type T = Char"
    v = symtab.create_variable("X")
    v.type = make_int_type()
    assert format_object(v, 0) == "Var X : Int"


def test_format_parameters():
    symtab = SymTab()
    owner = symtab.create_function("F")
    by_value = symtab.create_parameter("A", ParamKind.VALUE, owner)
    by_value.type = make_int_type()
    by_ref = symtab.create_parameter("B", ParamKind.REFERENCE, owner)
    by_ref.type = make_int_type()
    assert format_object(by_value, 0) == "Param A : Int"
    assert format_object(by_ref, 0) == "Param VAR B : Int"


def test_format_program_tree():
    symtab = SymTab()
    program = symtab.create_program("P")
    symtab.enter_block(program.scope)
    c = symtab.create_constant("C")
    c.value = make_int_constant(5)
    symtab.declare(c)
    func = symtab.create_function("F")
    func.return_type = make_int_type()
    symtab.declare(func)
    symtab.enter_block(func.scope)
    x = symtab.create_variable("X")
    x.type = make_int_type()
    symtab.declare(x)
    symtab.exit_block()
    text = format_object_list([program], 0)
    assert text == (
        "Program P\n"
        "    Const C = 5\n"
        "    Function F : Int\n"
        "        Var X : Int\n"
        "\n"
        "\n"
    )


def test_format_scope_matches_object_list():
    symtab = SymTab()
    program = symtab.create_program("P")
    symtab.enter_block(program.scope)
    proc = symtab.create_procedure("Q")
    symtab.declare(proc)
    assert format_scope(program.scope, 4) == format_object_list([proc], 4)
    assert format_scope(program.scope, 4) == "    Procedure Q\n\n"
    assert format_scope(proc.scope, 0) == ""