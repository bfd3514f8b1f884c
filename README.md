# tinycomp

A small compiler for integer arithmetic expressions. It builds an abstract
syntax tree from a sequence of tokens. It can then evaluate the tree, or
write x86-64 assembly text for it.

## Modules

### `tinycomp.tokens`

- `TokenType` lists the token kinds: `EOF`, `PLUS`, `MINUS`, `STAR`, `SLASH`,
  `INTLIT`, `SEMI` and `PRINT`.
- `Token(kind, intvalue=0)` is a frozen token record.
- `str(token)` gives text such as `Token +` or `Token intlit, value 42`.

### `tinycomp.tree`

- `NodeOp` lists the node operations: `ADD`, `SUBTRACT`, `MULTIPLY`,
  `DIVIDE` and `INTLIT`.
- `ASTNode` has the fields `op`, `left`, `right` and `intvalue`.
- `make_node(op, left, right, intvalue)` builds a node with up to two
  children.
- `make_leaf(op, intvalue)` builds a node with no children.
- `make_unary(op, left, intvalue)` builds a node with only a left child.

### `tinycomp.interp`

`interpret(node, trace=None)` evaluates a tree and returns an integer.
Division truncates toward zero.

If you pass a `trace` callable, it is called with one line per node, in the
order the nodes are evaluated:

- `"int N"` for a literal;
- `"L op R"` for an operator.

`InterpretError` is raised in three cases: division by zero, an operator
node that lacks an operand, and an unknown operator.

### `tinycomp.parser`

`TokenStream(tokens)` wraps any iterable of tokens. Once the tokens run out,
it returns `EOF` tokens forever. Its methods are:

- `current()` returns the token under the cursor.
- `advance()` moves to the next token and returns it.
- `match(kind, what)` consumes the current token if it is of that kind, and
  raises `ParseError` otherwise.
- `semi()` consumes a semicolon.

Three parsers work on a stream:

- `binexpr(stream, ptp=0)` parses by operator precedence. `*` and `/` bind
  tighter than `+` and `-`. The expression must end with `;`, and the
  semicolon is left unconsumed.
- `additive_expr(stream)` parses up to `EOF` by recursive descent, using
  `multiplicative_expr(stream)` for runs of `*` and `/`. Operators group to
  the left.
- `right_assoc_expr(stream)` parses up to `EOF` without precedence and
  groups to the right.

`arithop(kind)` maps an operator token kind to a `NodeOp`.
`op_precedence(kind)` returns 10 for `+` and `-`, and 20 for `*` and `/`.

Syntax errors raise `ParseError`.

### `tinycomp.codegen`

`CodeGenerator(out)` writes assembly to a text stream and manages four
registers, `%r8` to `%r11`. Its methods are:

- `preamble()` writes the program prologue, including a `printint` helper.
- `postamble()` writes the program epilogue.
- `load(value)`, `add`, `sub`, `mul` and `div` emit single operations.
- `print_int(r)` prints the value held in register `r`.
- `free_all()` releases every register.
- `generate(node)` emits code for a whole tree and returns the register that
  holds the result.

Running out of registers, or freeing a register twice, raises
`RegisterError`.

### `tinycomp.stmt`

`statements(stream, generator)` compiles one or more `print <expr> ;`
statements until the end of input. It raises `ParseError` on malformed
input.

## Example

```python
import io

from tinycomp.tokens import Token, TokenType
from tinycomp.parser import TokenStream, binexpr
from tinycomp.interp import interpret
from tinycomp.codegen import CodeGenerator

tokens = [
    Token(TokenType.INTLIT, 2),
    Token(TokenType.PLUS),
    Token(TokenType.INTLIT, 3),
    Token(TokenType.STAR),
    Token(TokenType.INTLIT, 5),
    Token(TokenType.SEMI),
]
tree = binexpr(TokenStream(tokens), 0)
print(interpret(tree))          # 17
interpret(tree, trace=print)    # int 2, int 3, int 5, 3 * 5, 2 + 15

out = io.StringIO()
gen = CodeGenerator(out)
gen.preamble()
gen.print_int(gen.generate(tree))
gen.postamble()
print(out.getvalue())
```

## What it does not do

The package has no scanner that turns source text into tokens. You build the
token sequence yourself, as in the example above.

There is also no command-line program. The package does not read input files
and does not write `.s` files on its own. You choose the output stream you
give to `CodeGenerator`.

## Tests

```
pip install -e .[test]
pytest
```