import pytest

from kplc.errors import CompileError, ErrorCode
from kplc.semantics import SemanticChecker
from kplc.symtab import ParamKind, SymTab


@pytest.fixture
def env():
    symtab = SymTab()
    program = symtab.create_program("P")
    symtab.enter_block(program.scope)
    return symtab, SemanticChecker(symtab)


def test_fresh_ident_duplicate(env):
    symtab, checker = env
    symtab.declare(symtab.create_variable("X"))
    with pytest.raises(CompileError) as info:
        checker.check_fresh_ident("X", 3, 7)
    assert info.value.code is ErrorCode.DUPLICATE_IDENT
    assert (info.value.line_no, info.value.col_no) == (3, 7)
    assert str(info.value) == "3-7:Duplicate identifier."


def test_fresh_ident_allows_shadowing(env):
    symtab, checker = env
    symtab.declare(symtab.create_variable("X"))
    func = symtab.create_function("F")
    symtab.declare(func)
    symtab.enter_block(func.scope)
    checker.check_fresh_ident("X", 1, 1)
    symtab.declare(symtab.create_variable("X"))
    assert len(func.scope.objects) == 1


def test_declared_ident_found_and_missing(env):
    symtab, checker = env
    c = symtab.create_constant("C")
    symtab.declare(c)
    assert checker.check_declared_ident("C", 1, 1) is c
    with pytest.raises(CompileError) as info:
        checker.check_declared_ident("Z", 2, 4)
    assert info.value.code is ErrorCode.UNDECLARED_IDENT


def test_constant_skips_shadowing_variable(env):
    symtab, checker = env
    c = symtab.create_constant("N")
    symtab.declare(c)
    proc = symtab.create_procedure("Q")
    symtab.declare(proc)
    symtab.enter_block(proc.scope)
    v = symtab.create_variable("N")
    symtab.declare(v)
    assert checker.check_declared_constant("N", 1, 1) is c
    assert checker.check_declared_variable("N", 1, 1) is v


@pytest.mark.parametrize(
    "method, code",
    [
        ("check_declared_constant", ErrorCode.UNDECLARED_CONSTANT),
        ("check_declared_type", ErrorCode.UNDECLARED_TYPE),
        ("check_declared_variable", ErrorCode.UNDECLARED_VARIABLE),
        ("check_declared_function", ErrorCode.UNDECLARED_FUNCTION),
        ("check_declared_procedure", ErrorCode.UNDECLARED_PROCEDURE),
        ("check_declared_lvalue_ident", ErrorCode.UNDECLARED_IDENT),
    ],
)
def test_wrong_kind_raises(env, method, code):
    symtab, checker = env
    symtab.declare(symtab.create_program("Other"))
    with pytest.raises(CompileError) as info:
        getattr(checker, method)("Other", 5, 6)
    assert info.value.code is code


def test_type_found(env):
    symtab, checker = env
    t = symtab.create_type("T")
    symtab.declare(t)
    assert checker.check_declared_type("T", 1, 1) is t


def test_builtins_found(env):
    _, checker = env
    assert checker.check_declared_function("READI", 1, 1).name == "READI"
    assert checker.check_declared_procedure("WRITEC", 1, 1).name == "WRITEC"


def test_builtin_wrong_kind(env):
    _, checker = env
    with pytest.raises(CompileError) as info:
        checker.check_declared_procedure("READC", 1, 1)
    assert info.value.code is ErrorCode.UNDECLARED_PROCEDURE


def test_lvalue_kinds(env):
    symtab, checker = env
    func = symtab.create_function("F")
    symtab.declare(func)
    symtab.enter_block(func.scope)
    param = symtab.create_parameter("A", ParamKind.VALUE, func)
    symtab.declare(param)
    assert checker.check_declared_lvalue_ident("A", 1, 1) is param
    assert checker.check_declared_lvalue_ident("F", 1, 1) is func
    symtab.declare(symtab.create_constant("K"))
    with pytest.raises(CompileError):
        checker.check_declared_lvalue_ident("K", 1, 1)