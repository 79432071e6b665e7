"""Evaluation of turtle programs into drawing primitives."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from .ast import Cmd, Func, Kind, Node
from .printer import format_node

SQRT2 = 1.41421356237309504880
SQRT3 = 1.7320508075688772935

_COLORS = {
    "red": (1.0, 0.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "blue": (0.0, 0.0, 1.0),
    "cyan": (0.0, 1.0, 1.0),
    "magenta": (1.0, 0.0, 1.0),
    "yellow": (1.0, 1.0, 0.0),
    "black": (0.0, 0.0, 0.0),
    "gray": (0.5, 0.5, 0.5),
    "white": (1.0, 1.0, 1.0),
}

_EXPRESSION_KINDS = {
    Kind.EXPR_VALUE,
    Kind.EXPR_NAME,
    Kind.EXPR_BLOCK,
    Kind.EXPR_UNOP,
    Kind.EXPR_FUNC,
    Kind.EXPR_BINOP,
}


class TurtleError(Exception):
    """Raised when a turtle program cannot be evaluated."""


def _default_variables() -> dict[str, float]:
    return {"PI": math.pi, "SQRT2": SQRT2, "SQRT3": SQRT3}


@dataclass
class Context:
    """State of the turtle with the variables and procedures defined so far."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    up: bool = False
    variables: dict[str, float] = field(default_factory=_default_variables)
    procedures: dict[str, Optional[Node]] = field(default_factory=dict)

    def define_variable(self, name: str, value: float) -> None:
        """Define a new variable; a name may be defined only once."""
        if name in self.variables:
            raise TurtleError("The variable already exists.")
        self.variables[name] = value

    def lookup_variable(self, name: str) -> float:
        """Return the value of a defined variable."""
        try:
            return self.variables[name]
        except KeyError:
            raise TurtleError("Variable does not exist.") from None

    def define_procedure(self, name: str, body: Optional[Node]) -> None:
        """Define a new procedure; a name may be defined only once."""
        if name in self.procedures:
            raise TurtleError("The procedure already exists.")
        self.procedures[name] = body

    def lookup_procedure(self, name: str) -> Optional[Node]:
        """Return the body of a defined procedure."""
        try:
            return self.procedures[name]
        except KeyError:
            raise TurtleError(f"Procedure {name} does not exist.") from None

    def reset_pen(self) -> None:
        """Bring the turtle back to the origin, heading up, pen down."""
        self.x = 0.0
        self.y = 0.0
        self.angle = 0.0
        self.up = False


def _float_call(fn: Callable[[float], float], value: float) -> float:
    try:
        return fn(value)
    except (ValueError, OverflowError):
        return math.nan


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        odd = b.is_integer() and int(b) % 2 == 1
        return -math.inf if a < 0 and odd else math.inf
    except ValueError:
        if a == 0:
            odd = b.is_integer() and int(b) % 2 == 1
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


def _fmt(value: float) -> str:
    return f"{value:.6f}"


class Interpreter:
    """Evaluates syntax trees, moving the turtle and writing drawing primitives."""

    def __init__(
        self,
        context: Optional[Context] = None,
        out: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.context = context if context is not None else Context()
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()

    def run(self, root: Optional[Node]) -> None:
        """Evaluate a whole program and end its output with a newline."""
        if root is None:
            return
        self.evaluate(root)
        self.out.write("\n")

    def evaluate(self, node: Optional[Node]) -> float:
        """Evaluate a node and the commands following it; return an expression's value."""
        current = node
        result = 0.0
        while current is not None:
            result, proceed = self._step(current)
            if not proceed:
                return result
            current = current.next
        return result

    # A step yields the node's value and whether evaluation goes on with the next node.
    def _step(self, node: Node) -> tuple[float, bool]:
        kind = node.kind
        if kind in _EXPRESSION_KINDS:
            return self._expression(node)
        if kind is Kind.CMD_BLOCK:
            return self.evaluate(node.children[0]), False
        if kind is Kind.CMD_SIMPLE:
            self._simple(node)
        elif kind is Kind.CMD_CALL:
            body = self.context.lookup_procedure(node.children[0].name)
            self.evaluate(body)
        elif kind is Kind.CMD_SET:
            self._set(node)
        elif kind is Kind.CMD_REPEAT:
            self._repeat(node)
        elif kind is Kind.CMD_PROC:
            self._proc(node)
        return 0.0, True

    def _expression(self, node: Node) -> tuple[float, bool]:
        kind = node.kind
        if kind is Kind.EXPR_VALUE:
            return node.value, False
        if kind is Kind.EXPR_NAME:
            return self.context.lookup_variable(node.name), False
        if kind is Kind.EXPR_BLOCK:
            return self.evaluate(node.children[0]), False
        if kind is Kind.EXPR_UNOP:
            return -self.evaluate(node.children[0]), False
        if kind is Kind.EXPR_FUNC:
            return self._function(node), False
        operator = _BINARY.get(node.op)
        if operator is None:
            return 0.0, True
        left = self.evaluate(node.children[0])
        right = self.evaluate(node.children[1])
        return operator(left, right), False

    def _function(self, node: Node) -> float:
        arg = node.children[0]
        literal = arg.value
        func = node.func
        if func is Func.SQRT:
            if literal < 0:
                raise TurtleError(
                    "The sqrt function only takes positive or null numbers."
                )
            return _float_call(math.sqrt, self.evaluate(arg))
        if func is Func.SIN:
            if not 0 <= literal <= 90:
                raise TurtleError("The sin function only takes angles between 0° and 90°")
            return _float_call(math.sin, self.evaluate(arg))
        if func is Func.COS:
            if not 0 <= literal <= 180:
                raise TurtleError(
                    "The cos function only takes angles between 0° and 180°"
                )
            return _float_call(math.cos, self.evaluate(arg))
        if func is Func.TAN:
            return _float_call(math.tan, self.evaluate(arg))
        if func is Func.RANDOM:
            pair = arg.children[0]
            low = int(self.evaluate(pair.children[0]))
            high = int(self.evaluate(pair.children[1]))
            if low > high:
                raise TurtleError(
                    "The first bound of the random is greater than the second."
                )
            return float(self.rng.randint(low, high))
        return 0.0

    def _simple(self, node: Node) -> None:
        ctx = self.context
        cmd = node.cmd
        if cmd is Cmd.HOME:
            ctx.reset_pen()
        elif cmd is Cmd.UP:
            ctx.up = True
        elif cmd is Cmd.DOWN:
            ctx.up = False
        elif cmd is Cmd.POSITION:
            pair = node.children[0]
            ctx.x = self.evaluate(pair.children[0])
            ctx.y = self.evaluate(pair.children[1])
            self.out.write(f"\nMoveTo {_fmt(ctx.x)} {_fmt(ctx.y)}")
        elif cmd is Cmd.COLOR:
            self._color(node.children[0])
        elif cmd is Cmd.FORWARD:
            self._move(self.evaluate(node.children[0]))
        elif cmd is Cmd.BACKWARD:
            self._move(-self.evaluate(node.children[0]))
        elif cmd is Cmd.RIGHT:
            ctx.angle += self._angle(node.children[0], "The angle to go right")
        elif cmd is Cmd.LEFT:
            ctx.angle -= self._angle(node.children[0], "The angle to go left")
        elif cmd is Cmd.HEADING:
            ctx.angle = self._angle(node.children[0], "The absolute angle")
        elif cmd is Cmd.PRINT:
            self.out.write("\n")
            self.out.write(format_node(node.children[0]))

    def _angle(self, arg: Node, subject: str) -> float:
        if not -360 < arg.value < 360:
            raise TurtleError(f"{subject} must be between -360° and 360°")
        return self.evaluate(arg)

    def _move(self, distance: float) -> None:
        ctx = self.context
        radians = (ctx.angle - 90) * (math.pi / 180)
        ctx.x += distance * math.cos(radians)
        ctx.y += distance * math.sin(radians)
        verb = "MoveTo" if ctx.up else "LineTo"
        self.out.write(f"\n{verb} {_fmt(ctx.x)} {_fmt(ctx.y)}")

    def _color(self, arg: Node) -> None:
        if not arg.children:
            try:
                rgb = _COLORS[arg.name]
            except KeyError:
                raise TurtleError("The color does not exist.") from None
        else:
            pair = arg.children[0]
            rgb = (
                self.evaluate(pair.children[0]),
                self.evaluate(pair.children[1]),
                self.evaluate(arg.children[1]),
            )
            if any(c < 0 or c > 1 for c in rgb):
                raise TurtleError("Color values must be in the range [0, 1].")
        self.out.write("\nColor " + " ".join(_fmt(c) for c in rgb))

    def _set(self, node: Node) -> None:
        name_node, value_node = node.children
        if name_node.name in self.context.variables:
            raise TurtleError("The variable already exists.")
        name = name_node.name if name_node.kind is Kind.EXPR_NAME else ""
        self.context.define_variable(name, self.evaluate(value_node))

    def _repeat(self, node: Node) -> None:
        count = int(self.evaluate(node.children[0]))
        if count < 0:
            raise TurtleError("Cannot repeat a command a negative number of times.")
        body = node.children[1]
        for _ in range(count):
            self.evaluate(body)

    def _proc(self, node: Node) -> None:
        name_node, body = node.children
        if name_node.name in self.context.procedures:
            raise TurtleError("The procedure already exists.")
        name = name_node.name if name_node.kind is Kind.EXPR_NAME else ""
        self.context.define_procedure(name, body)


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "^": _power,
}