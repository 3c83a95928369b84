# pestle

Small, dependency-free building blocks for hand-written parsers:

- `pestle.position.Position`: a cursor into a string with matching helpers
  (`match_char`, `match_char_by`, `match_string`, `match_insensitive`,
  `match_range`, `skip`, `skip_back`, `skip_until`) and line reporting
  (`line_col`, `line_of`, `find_line_start`, `find_line_end`).
- `pestle.span.Span`: a slice of the input between two offsets, with
  `as_str`, `get`, `start_pos`, `end_pos`, `split`, `lines` and `lines_span`.
- `pestle.stack.Stack`: a stack that can `snapshot`, `restore` and
  `clear_snapshot`, for backtracking parsers.
- `pestle.token.Token` and `TokenKind`: start and end markers of a matched
  rule (`Token.start(rule, pos)`, `Token.end(rule, pos)`).
- `pestle.pratt_parser`: a Pratt parser for prefix, postfix and infix
  operators (`PrattParser`, `Op`, `Assoc`, `PrattError`).
- `pestle.prec_climber`: a precedence-climbing parser for infix operators
  (`PrecClimber`, `Operator`, `Assoc`, `ClimbError`).

Offsets count bytes of the UTF-8 encoding of the input, and always sit on a
character boundary.

## Install

```
pip install .
```

## Positions and spans

```python
from pestle.position import Position

text = "a\rb\nc\r\nd"
pos = Position(text, 4)
print(pos.line_col())   # (2, 1)
print(pos.line_of())    # 'c\r\n'

start = Position.from_start("hello world")
end = start.copy()
end.match_string("hello")
span = start.span(end)
print(span.as_str())    # 'hello'
```

`Position(input, pos)` raises `ValueError` when `pos` is out of range or
splits a character. The matching methods move the cursor only when they
succeed and return `True` or `False`; `skip_until` is the exception and
moves to the end of the input when nothing is found.

Positions and spans are equal only when they refer to the very same string
object. Ordering positions over different strings raises `TypeError`, and
`Position.span` over different strings raises `ValueError`.

`Span.get(start, end)` takes offsets relative to the span (`end` exclusive,
defaulting to the span's end) and returns `None` when the range does not fit.

## Expressions with a Pratt parser

Operators added later bind tighter; operators joined with `|` share a level.
Items can be anything: `rule_of` tells the parser which rule an item is, and
by default an item is its own rule.

```python
from pestle.pratt_parser import Assoc, Op, PrattParser

pratt = (
    PrattParser(rule_of=lambda item: item)
    .op(Op.infix("+", Assoc.LEFT) | Op.infix("-", Assoc.LEFT))
    .op(Op.infix("*", Assoc.LEFT))
    .op(Op.infix("^", Assoc.RIGHT))
)

ops = {"+": lambda a, b: a + b, "-": lambda a, b: a - b,
       "*": lambda a, b: a * b, "^": lambda a, b: a ** b}

result = (
    pratt.map_primary(int)
    .map_infix(lambda lhs, op, rhs: ops[op](lhs, rhs))
    .parse(["2", "+", "3", "*", "2", "^", "2"])
)
print(result)  # 14
```

Prefix and postfix operators are declared with `Op.prefix(rule)` and
`Op.postfix(rule)` and mapped with `map_prefix(lambda op, rhs: ...)` and
`map_postfix(lambda lhs, op: ...)`. Empty input, items out of order, or an
operator with no mapping function raise `PrattError`.

## Expressions with precedence climbing

Each entry of the list gets precedence index + 1, so later entries bind
tighter.

```python
from pestle.prec_climber import Assoc, Operator, PrecClimber

climber = PrecClimber(
    [Operator("+", Assoc.LEFT) | Operator("-", Assoc.LEFT),
     Operator("*", Assoc.LEFT)],
    rule_of=lambda item: item,
)
print(climber.climb(["1", "-", "2", "*", "3"], int,
                    lambda a, op, b: {"+": a + b, "-": a - b, "*": a * b}[op]))  # -5
```

`PrecClimber.from_table([(rule, precedence, assoc), ...])` builds a climber
from explicit precedences starting at 1. Empty input, or an operator with no
primary after it, raises `ClimbError`.

## Backtracking stack

```python
from pestle.stack import Stack

stack = Stack()
stack.push(1)
stack.snapshot()
stack.push(2)
stack.restore()
print(stack[0:len(stack)])  # [1]
```

`pop` and `peek` return `None` on an empty stack. `restore` with no
snapshot taken empties the stack.

## What this package does not do

There is no grammar language and no parsing engine here: nothing reads a
grammar, runs rules over an input, produces a token stream or reports parse
errors with expected and unexpected rules. The expression parsers work on
any sequence of items you give them, and the positions, spans, tokens and
stack are pieces to build such a parser from.

## Running the tests

```
pip install ".[test]"
pytest
```