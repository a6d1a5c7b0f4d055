import json

import pytest

from ast_nodes import *
from ast_json import ast_to_json
from pretty_printer import PrettyPrinter
from tests.utils import parse_text, run_text

PROGRAMS = [
    "a := 0. b := verdadero mientras b {a := a + 1. b := falso} a",
    "a := función(a. a1) a + a1. b := 0. a(2. 2 + b).",
    "si 2 = 3-2 a:= 5 si no entonces si 3=1 a := 2 si no entonces a := 1 a",
    "x := -(3 - 10) * 2. si no (x = 14) {0} sino {x / 3}",
    "f := función() {}. f()",
]


def _walk(node):
    yield node
    for value in vars(node).values():
        if isinstance(value, ASTNode):
            yield from _walk(value)
        elif isinstance(value, list):
            for item in value:
                yield from _walk(item)


@pytest.mark.parametrize("src", PROGRAMS)
def test_structural_invariants(src):
    for node in _walk(parse_text(src)):
        if isinstance(node, InfixNode):
            assert node.operator.type in (
                TokenType.EQUALS,
                TokenType.PLUS,
                TokenType.MINUS,
                TokenType.MULTIPLICATION,
                TokenType.DIVISION,
            )
        if isinstance(node, IfNode):
            assert isinstance(node.consequence, BlockNode)
            assert node.alternative is None or isinstance(node.alternative, BlockNode)
        if isinstance(node, (WhileNode, FunctionNode)):
            assert isinstance(node.body, BlockNode)
        if isinstance(node, FunctionNode):
            assert all(isinstance(p, IdentifierNode) for p in node.parameters)
        if isinstance(node, IntegerNode):
            assert -(2**63) <= node.value < 2**63


@pytest.mark.parametrize("src", PROGRAMS)
def test_surface_output_reparses_to_same_result(src):
    surface = PrettyPrinter.print_surface(parse_text(src))
    assert run_text(surface) == run_text(src)
    assert PrettyPrinter.print_surface(parse_text(surface)) == surface


def test_surface_output_shape():
    prog = parse_text("si no a {b := 1 + 2 * 3} sino f(1. x)")
    assert (
        PrettyPrinter.print_surface(prog)
        == "si (no a) {b := (1 + (2 * 3)).} sino {f(1. x.).}"
    )


def test_pretty_printer_outputs_tree():
    prog = parse_text("a := función(x) x * 2. a(4)")
    out = PrettyPrinter.print_ast(prog)
    lines = out.splitlines()
    assert lines[0] == "Program"
    assert "Assignment(a)" in out
    assert "Function(params=[x])" in out
    assert "Infix(*)" in out
    assert "FunctionCall(a)" in out


def test_ast_json_is_serializable():
    prog = parse_text("mientras falso {n := n - 1}")
    data = ast_to_json(prog)
    json.dumps(data)
    loop = data["forms"][0]
    assert loop["node_type"] == "WHILE"
    assert loop["condition"] == {
        "node_type": "BOOLEAN",
        "line": 1,
        "column": 9,
        "value": False,
    }
    assignment = loop["body"]["forms"][0]
    assert assignment["name"] == "n"
    assert assignment["value"]["operator"] == "-"


def test_surface_output_keeps_wrapped_literal():
    prog = parse_text("9223372036854775808")
    surface = PrettyPrinter.print_surface(prog)
    assert surface == "9223372036854775808."
    assert parse_text(surface).forms == prog.forms
