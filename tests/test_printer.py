from turtlegfx.ast import (
    binary_op,
    cmd_block,
    cmd_call,
    cmd_color,
    cmd_down,
    cmd_forward,
    cmd_home,
    cmd_proc,
    cmd_repeat,
    cmd_right,
    cmd_set,
    cmd_up,
    expr_comma,
    expr_name,
    expr_parentheses,
    expr_sqrt,
    expr_value,
    sequence,
    unary_minus,
)
from turtlegfx.printer import format_node, format_program


def test_value_uses_two_decimals():
    assert format_node(expr_value(3)) == "3.00 "


def test_name_followed_by_space():
    assert format_node(expr_name("side")) == "side "


def test_none_formats_as_empty():
    assert format_node(None) == ""
    assert format_program(None) == ""


def test_sequence_is_joined_by_newlines():
    first = cmd_forward(expr_value(10))
    second = cmd_right(expr_value(90))
    alone = [format_node(cmd_forward(expr_value(10))), format_node(cmd_right(expr_value(90)))]
    assert format_node(sequence(first, second)) == "\n".join(alone)


def test_program_ends_with_newline():
    root = sequence(cmd_up(), cmd_down(), cmd_home())
    text = format_program(root)
    assert text == format_node(root) + "\n"
    assert text.split("\n")[:3] == ["up ", "down ", "home "]


def test_forward_keyword_prefix():
    text = format_node(cmd_forward(expr_value(5)))
    assert text.startswith("fw ")
    assert text[len("fw "):] == format_node(expr_value(5))


def test_binary_operator_between_operands():
    left, right = expr_value(1), expr_value(2)
    text = format_node(binary_op(left, right, "+"))
    assert text == format_node(expr_value(1)) + "+ " + format_node(expr_value(2))


def test_unknown_operator_prints_nothing():
    assert format_node(binary_op(expr_value(1), expr_value(2), "%")) == ""


def test_unary_minus():
    assert format_node(unary_minus(expr_value(5))) == "-" + format_node(expr_value(5))


def test_parentheses_wrap_inner():
    inner = format_node(expr_value(4))
    assert format_node(expr_sqrt(expr_parentheses(expr_value(4)))) == "sqrt (" + inner + ")"


def test_block_and_repeat():
    body = cmd_block(cmd_forward(expr_value(10)))
    text = format_node(cmd_repeat(expr_value(4), body))
    assert text.startswith("repeat ")
    assert text.endswith("\n}")
    assert "{\n" + format_node(cmd_forward(expr_value(10))) + "\n}" in text


def test_color_triple_with_commas():
    triple = expr_comma(expr_comma(expr_value(1), expr_value(0)), expr_value(0))
    text = format_node(cmd_color(triple))
    assert text.startswith("color ")
    assert text.count(", ") == 2


def test_set_proc_and_call():
    assert format_node(cmd_set(expr_name("a"), expr_value(1))).startswith("set a ")
    proc = format_node(cmd_proc(expr_name("sq"), cmd_block(cmd_up())))
    assert proc.startswith("proc sq {")
    assert format_node(cmd_call(expr_name("sq"))) == "call sq "