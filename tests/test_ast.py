import pytest

from turtlegfx.ast import (
    Cmd,
    Func,
    Kind,
    Node,
    binary_op,
    cmd_backward,
    cmd_block,
    cmd_call,
    cmd_color,
    cmd_down,
    cmd_forward,
    cmd_heading,
    cmd_home,
    cmd_left,
    cmd_position,
    cmd_print,
    cmd_proc,
    cmd_repeat,
    cmd_right,
    cmd_set,
    cmd_up,
    expr_comma,
    expr_cos,
    expr_name,
    expr_parentheses,
    expr_random,
    expr_sin,
    expr_sqrt,
    expr_tan,
    expr_value,
    sequence,
    unary_minus,
)


def test_expr_value_holds_value():
    node = expr_value(42)
    assert node.kind is Kind.EXPR_VALUE
    assert node.value == 42.0
    assert node.children == []


def test_expr_name_holds_name():
    node = expr_name("PI")
    assert node.kind is Kind.EXPR_NAME
    assert node.name == "PI"


def test_parentheses_wraps_expression():
    inner = expr_value(1)
    node = expr_parentheses(inner)
    assert node.kind is Kind.EXPR_BLOCK
    assert node.children == [inner]


@pytest.mark.parametrize(
    "maker, func",
    [
        (expr_sqrt, Func.SQRT),
        (expr_sin, Func.SIN),
        (expr_cos, Func.COS),
        (expr_tan, Func.TAN),
        (expr_random, Func.RANDOM),
    ],
)
def test_function_nodes(maker, func):
    arg = expr_value(4)
    node = maker(arg)
    assert node.kind is Kind.EXPR_FUNC
    assert node.func is func
    assert node.children[0] is arg


def test_comma_is_binop():
    a, b = expr_value(1), expr_value(2)
    node = expr_comma(a, b)
    assert node.kind is Kind.EXPR_BINOP
    assert node.op == ","
    assert node.children == [a, b]


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "^"])
def test_binary_op(op):
    a, b = expr_value(3), expr_name("x")
    node = binary_op(a, b, op)
    assert node.op == op
    assert node.children[0] is a and node.children[1] is b


def test_unary_minus():
    inner = expr_value(5)
    node = unary_minus(inner)
    assert node.kind is Kind.EXPR_UNOP
    assert node.op == "-"
    assert node.children == [inner]


@pytest.mark.parametrize(
    "maker, cmd",
    [(cmd_up, Cmd.UP), (cmd_down, Cmd.DOWN), (cmd_home, Cmd.HOME)],
)
def test_commands_without_arguments(maker, cmd):
    node = maker()
    assert node.kind is Kind.CMD_SIMPLE
    assert node.cmd is cmd
    assert node.children == []


@pytest.mark.parametrize(
    "maker, cmd",
    [
        (cmd_print, Cmd.PRINT),
        (cmd_forward, Cmd.FORWARD),
        (cmd_backward, Cmd.BACKWARD),
        (cmd_position, Cmd.POSITION),
        (cmd_right, Cmd.RIGHT),
        (cmd_left, Cmd.LEFT),
        (cmd_heading, Cmd.HEADING),
        (cmd_color, Cmd.COLOR),
    ],
)
def test_commands_with_one_argument(maker, cmd):
    arg = expr_value(10)
    node = maker(arg)
    assert node.kind is Kind.CMD_SIMPLE
    assert node.cmd is cmd
    assert node.children == [arg]


@pytest.mark.parametrize(
    "maker, kind",
    [
        (cmd_repeat, Kind.CMD_REPEAT),
        (cmd_set, Kind.CMD_SET),
        (cmd_proc, Kind.CMD_PROC),
    ],
)
def test_commands_with_two_children(maker, kind):
    first, second = expr_name("a"), expr_value(2)
    node = maker(first, second)
    assert node.kind is kind
    assert node.children == [first, second]


def test_block_and_call():
    body = cmd_up()
    block = cmd_block(body)
    assert block.kind is Kind.CMD_BLOCK
    assert block.children == [body]
    call = cmd_call(expr_name("square"))
    assert call.kind is Kind.CMD_CALL
    assert call.children[0].name == "square"


def test_sequence_links_nodes_in_order():
    a, b, c = cmd_up(), cmd_forward(expr_value(1)), cmd_down()
    head = sequence(a, b, c)
    assert head is a
    assert list(head.iter_sequence()) == [a, b, c]
    assert c.next is None


def test_sequence_empty_returns_none():
    assert sequence() is None


def test_sequence_appends_to_existing_chain():
    a, b, c = cmd_up(), cmd_down(), cmd_home()
    sequence(a, b)
    sequence(a, c)
    assert [n.cmd for n in a.iter_sequence()] == [Cmd.UP, Cmd.DOWN, Cmd.HOME]


def test_iter_sequence_single_node():
    node = expr_value(7)
    assert list(node.iter_sequence()) == [node]


def test_nodes_compare_structurally():
    left = binary_op(expr_value(1), expr_name("x"), "+")
    right = binary_op(expr_value(1), expr_name("x"), "+")
    assert left == right
    assert left != binary_op(expr_value(1), expr_name("y"), "+")


def test_node_defaults():
    node = Node(Kind.CMD_BLOCK)
    assert node.children == [] and node.next is None and node.cmd is None