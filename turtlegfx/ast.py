"""Abstract syntax tree of turtle programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional


class Kind(Enum):
    """Kind of a node in the syntax tree."""

    CMD_SIMPLE = auto()
    CMD_REPEAT = auto()
    CMD_BLOCK = auto()
    CMD_PROC = auto()
    CMD_CALL = auto()
    CMD_SET = auto()

    EXPR_FUNC = auto()
    EXPR_VALUE = auto()
    EXPR_UNOP = auto()
    EXPR_BINOP = auto()
    EXPR_BLOCK = auto()
    EXPR_NAME = auto()


class Cmd(Enum):
    """Simple turtle commands."""

    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    HEADING = auto()
    FORWARD = auto()
    BACKWARD = auto()
    POSITION = auto()
    HOME = auto()
    COLOR = auto()
    PRINT = auto()


class Func(Enum):
    """Built-in functions of expressions."""

    COS = auto()
    RANDOM = auto()
    SIN = auto()
    SQRT = auto()
    TAN = auto()


@dataclass(eq=True)
class Node:
    """A node of the syntax tree, optionally followed by the next node of a sequence."""

    kind: Kind
    children: list[Node] = field(default_factory=list)
    value: float = 0.0
    name: str = ""
    op: str = ""
    cmd: Optional[Cmd] = None
    func: Optional[Func] = None
    next: Optional[Node] = None

    def iter_sequence(self) -> Iterator[Node]:
        """Yield this node and every node that follows it in its sequence."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def sequence(*args: Node) -> Optional[Node]:
    """Chain nodes one after another and return the first, or None if none given."""
    if not args:
        return None
    for current, following in zip(args, args[1:]):
        tail = current
        for tail in current.iter_sequence():
            pass
        if tail is following:
            continue
        tail.next = following
    return args[0]


def _simple(cmd: Cmd, *children: Node) -> Node:
    return Node(Kind.CMD_SIMPLE, list(children), cmd=cmd)


def _func(func: Func, expr: Node) -> Node:
    return Node(Kind.EXPR_FUNC, [expr], func=func)


def expr_value(value: float) -> Node:
    """A numeric literal."""
    return Node(Kind.EXPR_VALUE, value=float(value))


def expr_name(name: str) -> Node:
    """A name of a variable, procedure or colour."""
    return Node(Kind.EXPR_NAME, name=name)


def expr_parentheses(expr: Node) -> Node:
    """An expression enclosed in parentheses."""
    return Node(Kind.EXPR_BLOCK, [expr])


def expr_sqrt(expr: Node) -> Node:
    """The square root function applied to an expression."""
    return _func(Func.SQRT, expr)


def expr_sin(expr: Node) -> Node:
    """The sine function applied to an expression."""
    return _func(Func.SIN, expr)


def expr_cos(expr: Node) -> Node:
    """The cosine function applied to an expression."""
    return _func(Func.COS, expr)


def expr_tan(expr: Node) -> Node:
    """The tangent function applied to an expression."""
    return _func(Func.TAN, expr)


def expr_random(expr: Node) -> Node:
    """The random function applied to a parenthesised pair of bounds."""
    return _func(Func.RANDOM, expr)


def expr_comma(first: Node, second: Node) -> Node:
    """A comma separating two expressions."""
    return Node(Kind.EXPR_BINOP, [first, second], op=",")


def binary_op(left: Node, right: Node, op: str) -> Node:
    """A binary operation between two expressions."""
    return Node(Kind.EXPR_BINOP, [left, right], op=op)


def unary_minus(expr: Node) -> Node:
    """The negation of an expression."""
    return Node(Kind.EXPR_UNOP, [expr], op="-")


def cmd_print(expr: Node) -> Node:
    """The print command."""
    return _simple(Cmd.PRINT, expr)


def cmd_up() -> Node:
    """The command raising the pen."""
    return _simple(Cmd.UP)


def cmd_down() -> Node:
    """The command lowering the pen."""
    return _simple(Cmd.DOWN)


def cmd_forward(expr: Node) -> Node:
    """The command moving forward by a distance."""
    return _simple(Cmd.FORWARD, expr)


def cmd_backward(expr: Node) -> Node:
    """The command moving backward by a distance."""
    return _simple(Cmd.BACKWARD, expr)


def cmd_position(expr: Node) -> Node:
    """The command moving to an absolute position."""
    return _simple(Cmd.POSITION, expr)


def cmd_right(expr: Node) -> Node:
    """The command turning right by an angle."""
    return _simple(Cmd.RIGHT, expr)


def cmd_left(expr: Node) -> Node:
    """The command turning left by an angle."""
    return _simple(Cmd.LEFT, expr)


def cmd_heading(expr: Node) -> Node:
    """The command setting the absolute heading."""
    return _simple(Cmd.HEADING, expr)


def cmd_color(expr: Node) -> Node:
    """The command setting the pen colour."""
    return _simple(Cmd.COLOR, expr)


def cmd_home() -> Node:
    """The command returning the turtle home."""
    return _simple(Cmd.HOME)


def cmd_repeat(count: Node, body: Node) -> Node:
    """The command repeating a body a number of times."""
    return Node(Kind.CMD_REPEAT, [count, body])


def cmd_set(name: Node, value: Node) -> Node:
    """The command defining a variable."""
    return Node(Kind.CMD_SET, [name, value])


def cmd_block(cmds: Node) -> Node:
    """A block of commands."""
    return Node(Kind.CMD_BLOCK, [cmds])


def cmd_proc(name: Node, body: Node) -> Node:
    """The command defining a procedure."""
    return Node(Kind.CMD_PROC, [name, body])


def cmd_call(name: Node) -> Node:
    """The command calling a procedure."""
    return Node(Kind.CMD_CALL, [name])