"""Tests for the tree-walking evaluator."""

import pytest

from objects import BooleanObject, FunctionObject, IntegerObject, ObjectType
from tests.utils import eval_text, run_text


def test_integer_evaluation():
    _, value = eval_text("52")
    assert isinstance(value, IntegerObject)
    assert value.value == 52
    assert str(value) == "52"


@pytest.mark.parametrize("src,expected", [("verdadero", True), ("falso", False)])
def test_boolean_evaluation(src, expected):
    _, value = eval_text(src)
    assert value.type == ObjectType.BOOLEAN
    assert value.value is expected
    assert value.inspect() == src


@pytest.mark.parametrize(
    "src,expected",
    [
        ("a:=falso \n a", "falso"),
        ("h0la    := verdadero\n\th0la", "verdadero"),
        ("número27 :=27\nnúmero27", "27"),
    ],
)
def test_assignment(src, expected):
    assert run_text(src) == expected


@pytest.mark.parametrize(
    "src,expected",
    [
        ("3+3", "6"),
        ("2-5", "-3"),
        ("8/4+7*2.", "16"),
        ("(2+6)", "8"),
        ("(3-(0-8))", "11"),
        ("a := (35+7)-(2-10)+1. a", "51"),
        ("cincoIgualACuatroMásUno := 5 = 4 + 1. cincoIgualACuatroMásUno.", "verdadero"),
        ("verdadero = falso", "falso"),
        ("falso = falso", "verdadero"),
    ],
)
def test_infix(src, expected):
    assert run_text(src) == expected


@pytest.mark.parametrize(
    "src,expected",
    [
        ("7 / 2", "3"),
        ("0 - 7 / 2", "-3"),
        ("(0 - 7) / 2", "-3"),
        ("7 / (0 - 2)", "-3"),
        ("(0 - 7) / (0 - 2)", "3"),
    ],
)
def test_division_truncates_toward_zero(src, expected):
    assert run_text(src) == expected


def test_arithmetic_wraps_at_64_bits():
    assert run_text("9223372036854775807 + 1") == "-9223372036854775808"
    assert run_text("-9223372036854775808") == "-9223372036854775808"
    assert run_text("0 - 9223372036854775807 - 2") == "9223372036854775807"


@pytest.mark.parametrize(
    "src,expected",
    [
        ("-(65-1)", "-64"),
        ("2+(-85)", "-83"),
        ("no verdadero", "falso"),
        ("_está_terminado := falso. no _está_terminado", "verdadero"),
    ],
)
def test_prefix(src, expected):
    assert run_text(src) == expected


@pytest.mark.parametrize(
    "src,expected",
    [
        ("si verdadero {5.}", "5"),
        ("a:=5. si falso {a := 1.} sino {a := a+2. a.}", "7"),
        ("a := falso. si no a a := verdadero. si no entonces a := falso. a.", "verdadero"),
        ("si 2 = 3-2 a:= 5 si no entonces si 3=1 a := 2 si no entonces a := 1 a", "1"),
    ],
)
def test_if(src, expected):
    assert run_text(src) == expected


def test_if_without_chosen_branch_yields_no_value():
    evaluator, value = eval_text("si falso {5}")
    assert value is None
    assert not evaluator.diagnostics


@pytest.mark.parametrize(
    "src,expected",
    [
        ("a := 0. b := verdadero mientras b {a := a + 1. b := falso} a", "1"),
        ("a := 1. i := 0 mientras no (a = 16) {a := 2*a. i:= i+1.} i.", "4"),
        ("i := 0. mientras no (i = 3) {i := i + 1. i * 10}", "30"),
    ],
)
def test_while(src, expected):
    assert run_text(src) == expected


def test_while_that_never_runs_yields_no_value():
    evaluator, value = eval_text("mientras falso {1}")
    assert value is None
    assert not evaluator.diagnostics


def test_block_keeps_last_value_that_is_not_none():
    assert run_text("si verdadero {5. a := 1}") == "5"


@pytest.mark.parametrize(
    "src,expected",
    [
        ("a := función() {b := 5. b.} a()", "5"),
        ("func := función(a) {5.} func(2).", "5"),
        ("a := función(a. a1) a + a1. b := 0. a(2. 2 + b).", "4"),
        ("doble := función(f. x) f(f(x)). inc := función(n) n + 1. doble(inc. 5)", "7"),
    ],
)
def test_functions(src, expected):
    assert run_text(src) == expected


def test_function_value_renders():
    _, value = eval_text("función() 1")
    assert isinstance(value, FunctionObject)
    assert str(value) == "Objeto de tipo función"


def test_functions_do_not_see_outer_bindings():
    evaluator, value = eval_text("x := 1. f := función() x. f()")
    assert value is None
    assert "Unbound name 'x'" in evaluator.diagnostics.items[0].message


def test_assignment_idempotence():
    for expr in ["3 * (4 - 9)", "no (2 = 2)", "-(4 * 5)", "función() 1"]:
        assert run_text(f"x := {expr}. x") == run_text(expr)


def test_environment_survives_across_forms():
    evaluator, _ = eval_text("a := 1. b := a + 1. a := 10")
    assert evaluator.env.get("a") == IntegerObject(value=10)
    assert evaluator.env.get("b") == IntegerObject(value=2)


def test_empty_program_yields_no_value():
    _, value = eval_text("")
    assert value is None
    assert run_text("") == ""


@pytest.mark.parametrize(
    "src,message",
    [
        ("z", "Unbound name"),
        ("1 = verdadero", "Cannot apply '='"),
        ("verdadero + falso", "Cannot apply '+'"),
        ("-verdadero", "Cannot negate"),
        ("no 1", "'no' expects a boolean"),
        ("si 1 {2}", "Condition must be a boolean"),
        ("mientras 0 {1}", "Condition must be a boolean"),
        ("f := 3. f()", "is not a function"),
        ("g()", "Unbound name"),
        ("f := función(a) a. f()", "expects 1 argument"),
        ("1 / 0", "Division by zero"),
        ("f := función() 1. f = f", "functions"),
    ],
)
def test_semantic_errors_yield_no_value(src, message):
    evaluator, value = eval_text(src)
    assert value is None
    assert len(evaluator.diagnostics) == 1
    diagnostic = evaluator.diagnostics.items[0]
    assert diagnostic.kind == "semantic"
    assert message in diagnostic.message


def test_no_value_propagates_without_extra_diagnostics():
    evaluator, value = eval_text("x := z. x + 1")
    assert value is None
    assert len(evaluator.diagnostics) == 1


def test_error_in_one_form_does_not_stop_later_forms():
    assert run_text("a := 1 / 0. 5") == "5"


def test_diagnostic_position_points_at_operator():
    evaluator, _ = eval_text("1 +\n  verdadero")
    diagnostic = evaluator.diagnostics.items[0]
    assert (diagnostic.line, diagnostic.column) == (1, 2)


def test_runaway_recursion_yields_no_value():
    evaluator, value = eval_text("f := función(g) g(g). f(f)")
    assert value is None
    assert "call depth" in evaluator.diagnostics.items[0].message


def test_boolean_results_are_boolean_objects():
    _, value = eval_text("1 = 1")
    assert value == BooleanObject(value=True)
