# tinylang

A scanner and a recursive-descent parser for TINY, the small teaching
language with `if`/`then`/`else`/`end`, `repeat`/`until`, `read`,
`write`, assignment with `:=`, integer arithmetic (`+`, `-`, `*`, `/`)
and the comparisons `<` and `=`. Comments are written in braces:
`{ like this }`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Two commands are installed. Each takes exactly one file name; if the
name has no `.`, the suffix `.tny` is added.

List the tokens of a program, echoing every source line with its line
number:

```
tinylex sample
```

Parse a program, showing the source echo and token trace, then the
syntax tree:

```
tinyparse sample.tny
```

Both write their listing to standard output, starting with a
`COMPILATION: <file>` line. A wrong number of arguments prints a usage
line, and a file that cannot be opened prints `File <name> not found`;
both go to standard error and the command exits with status 1.

Syntax errors are reported in the listing as
`>>> Syntax error at line N: ...`; parsing carries on, the tree built
so far is still printed, and the command exits with status 0.

## Library use

```python
from tinylang.scanner import scan
from tinylang.parser import parse
from tinylang.tree import format_tree

for token in scan("read x; write x + 1"):
    print(token)

tree = parse("read x;\nif 0 < x then write x end")
print(format_tree(tree))
```

- `tinylang.tokens` — `TokenType`, the frozen `Token` dataclass (`type`,
  `lexeme`, `lineno`), `lookup_reserved(name)` and
  `format_token(token_type, lexeme)`, which renders a token as one
  listing line such as `ID, name= x` or `reserved word: if`.
- `tinylang.scanner` — `Scanner(source, listing=None, echo_source=True,
  trace_lex=True)` reads from a string or text stream; `get_token()`
  returns the next `Token`, and iterating a scanner yields tokens up to
  and including `ENDFILE`. When a `listing` stream is given, source lines
  are echoed and tokens traced to it. `scan(text)` returns all tokens as
  a list, without a listing.
- `tinylang.parser` — `Parser(scanner, listing=None)`; `parse()` returns
  the first statement node (statements are chained through `sibling`).
  Syntax errors are collected in `errors` and flagged by `has_errors`.
  `parse(text, listing=None)` is the one-call form.
- `tinylang.tree` — `TreeNode` with `nodekind`, `kind`, `lineno`,
  `children` (three slots), `sibling`, `op`, `val`, `name` and `type`;
  `TreeNode.stmt` / `TreeNode.exp` constructors, `iter_siblings()`, and
  `format_tree(tree)` for the indented listing.

## What it does not do

The package stops at the syntax tree. It does no type checking or
symbol-table analysis, generates no code and does not run TINY
programs.