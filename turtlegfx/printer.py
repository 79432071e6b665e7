"""Rendering of syntax trees back into turtle program text."""

from __future__ import annotations

from typing import Optional

from .ast import Cmd, Func, Kind, Node

_SIMPLE_KEYWORDS = {
    Cmd.HOME: "home ",
    Cmd.UP: "up ",
    Cmd.DOWN: "down ",
    Cmd.POSITION: "pos ",
    Cmd.COLOR: "color ",
    Cmd.FORWARD: "fw ",
    Cmd.BACKWARD: "bw ",
    Cmd.RIGHT: "right ",
    Cmd.LEFT: "left ",
    Cmd.HEADING: "hd ",
    Cmd.PRINT: "print ",
}

_FUNC_KEYWORDS = {
    Func.SQRT: "sqrt ",
    Func.SIN: "sin ",
    Func.COS: "cos ",
    Func.TAN: "tan ",
    Func.RANDOM: "random ",
}

_PAIR_KEYWORDS = {
    Kind.CMD_SET: "set ",
    Kind.CMD_REPEAT: "repeat ",
    Kind.CMD_PROC: "proc ",
}

_BINARY_OPERATORS = {"+", "-", "*", "/", "^", ","}


def _format_leaf(node: Node) -> str:
    if node.kind is Kind.EXPR_VALUE:
        return f"{node.value:.2f} "
    if node.kind is Kind.EXPR_NAME:
        return f"{node.name} "
    if node.kind is Kind.CMD_SIMPLE and node.cmd in (Cmd.HOME, Cmd.UP, Cmd.DOWN):
        return _SIMPLE_KEYWORDS[node.cmd]
    return ""


def _format_unary(node: Node) -> str:
    inner = format_node(node.children[0])
    if node.kind is Kind.EXPR_BLOCK:
        return f"({inner})"
    if node.kind is Kind.CMD_BLOCK:
        return f"{{\n{inner}\n}}"
    if node.kind is Kind.EXPR_UNOP:
        return f"-{inner}"
    if node.kind is Kind.CMD_SIMPLE:
        if node.cmd in (Cmd.HOME, Cmd.UP, Cmd.DOWN) or node.cmd is None:
            return ""
        return _SIMPLE_KEYWORDS[node.cmd] + inner
    if node.kind is Kind.CMD_CALL:
        return f"call {inner}"
    if node.kind is Kind.EXPR_FUNC and node.func is not None:
        return _FUNC_KEYWORDS[node.func] + inner
    return ""


def _format_binary(node: Node) -> str:
    first = format_node(node.children[0])
    second = format_node(node.children[1])
    keyword = _PAIR_KEYWORDS.get(node.kind)
    if keyword is not None:
        return keyword + first + second
    if node.kind is Kind.EXPR_BINOP and node.op in _BINARY_OPERATORS:
        return f"{first}{node.op} {second}"
    return ""


def _format_single(node: Node) -> str:
    count = len(node.children)
    if count == 0:
        return _format_leaf(node)
    if count == 1:
        return _format_unary(node)
    if count == 2:
        return _format_binary(node)
    return ""


def format_node(node: Optional[Node]) -> str:
    """Return the program text of a node and of the nodes following it."""
    if node is None:
        return ""
    return "\n".join(_format_single(item) for item in node.iter_sequence())


def format_program(root: Optional[Node]) -> str:
    """Return the program text of a whole tree, ending with a newline."""
    if root is None:
        return ""
    return format_node(root) + "\n"