# kplc

`kplc` is a library for the front end of a compiler for KPL, a small Pascal-like teaching language. It provides:

- `kplc.charcode`: sorts each source character into a lexical class (`CharCode`, `char_code`);
- `kplc.tokens`: token types, the `Token` dataclass, keyword lookup (`check_keyword`) and the descriptions of token types used in diagnostics (`token_to_string`);
- `kplc.reader`: a `Reader` that walks source text character by character and tracks line and column, and `open_source(path)` to read a file;
- `kplc.scanner`: a `Scanner` that turns a reader into tokens, and `tokenize(text)`;
- `kplc.listing`: a plain-text listing of tokens, one line per token, in the form `line-col:KIND`;
- `kplc.errors`: error codes, their messages and the exceptions raised for them;
- `kplc.typesys`: integer, char and array types, and constant values;
- `kplc.symtab`: a symbol table with nested scopes and the built-in routines `READC`, `READI`, `WRITEI`, `WRITEC` and `WRITELN`;
- `kplc.semantics`: checks on identifiers: duplicate declarations, and undeclared identifiers, constants, types, variables, functions and procedures;
- `kplc.debug`: a readable text dump of types, constants, objects and scopes.

## Scanning

```python
from kplc.scanner import tokenize
from kplc.listing import format_tokens

source = """PROGRAM demo;
VAR x : INTEGER;
BEGIN
  x := 42
END.
"""

tokens = tokenize(source)
print(format_tokens(tokens))
```

`tokenize` returns every token of the text, ending with a `TK_EOF` token. Identifiers and keywords are case-insensitive and are upper-cased as they are read. An identifier may be at most 15 characters long. Numbers carry their digits in `Token.string` and their value in `Token.value`. Comments are written `(* ... *)`, and array indexes use the selectors `(.` and `.)`. The symbols are `+ - * / = != < <= > >= := : ; , . ( )`.

To scan a file, read it with `kplc.reader.open_source(path)` (which raises `OSError` if the file cannot be read) and pass the reader to `kplc.scanner.Scanner`. `Scanner.get_token()` returns one token at a time; iterating over the scanner yields tokens up to and including the `TK_EOF` token.

## Errors

```python
from kplc.errors import CompileError
from kplc.scanner import tokenize

try:
    tokenize("x := 'ab'")
except CompileError as exc:
    print(exc)          # 1-6:Invalid char constant.
    print(exc.code)     # ErrorCode.INVALID_CONSTANT_CHAR
```

Every diagnostic is raised as a `CompileError`, whose text is `line-col:message` and which carries `line_no`, `col_no`, `message` and `code`. `kplc.errors.ErrorCode` lists every error code, and `error_message(code)` gives the text for one. `error(code, line_no, col_no)` raises the error for a code; `missing_token(token_type, line_no, col_no)` raises a `MissingTokenError` whose message reads, for example, `Missing keyword BEGIN`.

## Symbol table and checks

```python
from kplc.symtab import SymTab
from kplc.semantics import SemanticChecker
from kplc.typesys import make_int_type
from kplc.debug import format_object

table = SymTab()
program = table.create_program("DEMO")
table.enter_block(program.scope)

checker = SemanticChecker(table)
checker.check_fresh_ident("X", 2, 5)
x = table.create_variable("X")
x.type = make_int_type()
table.declare(x)

print(checker.check_declared_variable("X", 4, 3).name)
print(format_object(program, 0))
```

`SymTab.lookup` searches the current scope first, then each enclosing scope in turn, and finally the built-in routines. Declaring a parameter with `SymTab.declare` also appends it to the parameter list of the function or procedure that owns the current scope.

The `check_declared_*` methods of `SemanticChecker` return the nearest object of the wanted kind, passing over objects of other kinds with the same name, and raise a `CompileError` with the matching `UNDECLARED_*` code when there is none. `check_declared_lvalue_ident` accepts a variable, a parameter or a function. `check_fresh_ident` raises `DUPLICATE_IDENT` when the name is already declared in the current scope.

## What it does not do

`kplc` stops at scanning, the symbol table and identifier checks. It has no parser for KPL programs, no type checking of expressions or statements, no code generation and no command-line program; a parser built on top of it would drive the scanner, fill the symbol table and call the checks.

## Tests

The test suite uses pytest. Install the `test` extra to get it, then run `pytest`.