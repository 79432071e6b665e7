# turtlegfx

`turtlegfx` is a small turtle-graphics language toolkit. It provides:

- `turtlegfx.ast` – the syntax tree of turtle programs: commands such as
  `fw`, `bw`, `left`, `right`, `hd`, `pos`, `color`, `up`, `down`, `home`,
  `repeat`, `set`, `proc`, `call` and `print`, and expressions with numbers,
  names, arithmetic (`+ - * / ^`, unary minus) and the functions
  `sqrt`, `sin`, `cos`, `tan` and `random`.
- `turtlegfx.interpreter` – evaluates a tree and writes drawing primitives,
  one per line: `MoveTo x y`, `LineTo x y` and `Color r g b`.
- `turtlegfx.printer` – renders a tree back as turtle program text.
- `turtlegfx.viewer` – an animated window that replays drawing primitives.

## Installation

```
pip install turtlegfx
```

The viewer uses `pygame`, which is installed as a dependency.

## Building and running a program

Programs are built from the constructors in `turtlegfx.ast` (`cmd_forward`,
`cmd_repeat`, `expr_value`, `binary_op`, …). Commands are chained into a
sequence with `sequence`:

```python
from turtlegfx.ast import (
    sequence, cmd_repeat, cmd_block, cmd_forward, cmd_right,
    cmd_color, expr_name, expr_value,
)
from turtlegfx.interpreter import Interpreter
from turtlegfx.printer import format_program

square = sequence(
    cmd_color(expr_name("blue")),
    cmd_repeat(
        expr_value(4),
        cmd_block(sequence(
            cmd_forward(expr_value(100)),
            cmd_right(expr_value(90)),
        )),
    ),
)

Interpreter().run(square)       # writes Color / LineTo primitives to stdout
print(format_program(square))   # prints the program back as text
```

`Interpreter` takes optional `context` (a `Context`), `out` (a text stream,
standard output by default) and `rng` (a `random.Random`, used by
`random`). `run` evaluates a whole program and ends the output with a
newline; `evaluate` evaluates a single node and returns its value.

The turtle starts at the origin, heading 0 (facing up), with the pen down.
`Context` predefines the variables `PI`, `SQRT2` and `SQRT3`; its
`define_variable`, `lookup_variable`, `define_procedure`,
`lookup_procedure` and `reset_pen` methods manage that state.

Colours are given either by name (`red`, `green`, `blue`, `cyan`,
`magenta`, `yellow`, `black`, `gray`, `white`) or as three components.

Errors raise `TurtleError`: an unknown variable, colour or procedure,
defining a variable or procedure twice, a literal angle outside
(-360, 360) for `right`, `left` or `hd`, a colour component outside
[0, 1], a negative repeat count, a negative literal given to `sqrt`, a
literal outside [0, 90] given to `sin` or outside [0, 180] given to `cos`,
and a `random` whose lower bound is greater than its upper bound.

## Viewing a drawing

`turtlegfx-viewer` reads drawing primitives from standard input and
animates them over ten seconds:

```
turtlegfx-viewer < drawing.txt
```

Keys while the window is open:

| Key        | Action                         |
|------------|--------------------------------|
| Space      | jump to the finished drawing   |
| Right      | skip forward one second        |
| Left       | step back one second           |
| F          | toggle fullscreen              |
| Escape     | close the window               |

The primitives can also be processed without a window: `parse_line` and
`parse_instructions` read text into `Instruction` values, and
`compute_frame` returns the `Frame` — the visible `Segment`s and the
turtle's position — for a given elapsed time.

## What it does not do

There is no parser for turtle program text and no command that runs a
program file: programs are built in Python with the `turtlegfx.ast`
constructors and run with `Interpreter`. The only command is
`turtlegfx-viewer`, which displays primitives already produced.

## Running the tests

```
pip install "turtlegfx[test]"
pytest
```