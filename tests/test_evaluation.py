import pytest
from hypothesis import given, strategies as st

from eta.builtin.env_builtin import create_root_environment
from eta.errors import (
    EtaExpectedSymbol,
    EtaMalformedForm,
    EtaMissingBinding,
    EtaNotCallable,
    EtaTypeError,
    EtaUnboundSymbol,
)
from eta.evaluation.evaluator import call, evaluate, evaluate_body
from eta.types.closure import Closure
from eta.types.values import (
    VOID,
    Bool,
    Float,
    Integer,
    List,
    Module,
    String,
    Symbol,
    Void,
)

# -----------------------------------------------------
# Self-evaluation and symbols
# -----------------------------------------------------

literal_strat = st.one_of(
    st.integers(min_value=-(2**127), max_value=2**127 - 1).map(Integer),
    st.floats(allow_nan=False).map(Float),
    st.booleans().map(Bool),
    st.text(max_size=20).map(String),
)


@given(literal_strat)
def test_literals_evaluate_to_themselves(value):
    assert evaluate(value, create_root_environment()) == value


def test_void_and_closures_evaluate_to_themselves(env):
    assert evaluate(VOID, env) == VOID
    plus = env.get("+")
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.set("x", Integer(42))
    assert evaluate(Symbol("x"), env) == Integer(42)


def test_unbound_symbol(env):
    with pytest.raises(EtaUnboundSymbol) as excinfo:
        evaluate(Symbol("nope"), env)
    assert excinfo.value.name == "nope"


def test_empty_list_is_void(env):
    assert evaluate(List(()), env) == VOID


def test_empty_module_is_void(env):
    assert evaluate(Module(()), env) == VOID


def test_module_returns_last_value(run):
    assert run("1 2.5 \"three\"") == String("three")


def test_evaluate_body_of_nothing_is_void(env):
    assert evaluate_body([], env) == VOID


# -----------------------------------------------------
# define
# -----------------------------------------------------

def test_define_returns_void_then_binds(env):
    form = List((Symbol("define"), Symbol("x"), Integer(10)))
    assert evaluate(form, env) == VOID
    assert evaluate(Symbol("x"), env) == Integer(10)


def test_define_evaluates_its_expression(run, env):
    run("(define x (+ 1 2))")
    assert env.get("x") == Integer(3)


def test_define_rebinds_in_same_scope(run):
    assert run("(define x 1) (define x 2) x") == Integer(2)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(define)", EtaExpectedSymbol),
        ("(define 1 2)", EtaExpectedSymbol),
        ('(define "x" 2)', EtaExpectedSymbol),
        ("(define x)", EtaMissingBinding),
        ("(define x 1 2)", EtaMalformedForm),
    ],
)
def test_define_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_define_reports_what_it_found(run):
    with pytest.raises(EtaExpectedSymbol) as excinfo:
        run("(define 1 2)")
    assert excinfo.value.found == "Integer"


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", Integer(1)),
        ("(if false 1 2)", Integer(2)),
        ("(if false 1)", VOID),
        ("(if true 1)", Integer(1)),
        ('(if (< 1 2) "yes" "no")', String("yes")),
        ('(if (> 1 2) "yes" "no")', String("no")),
        ("(define t true) (if t 10 20)", Integer(10)),
        ("(if ((lambda () false)) 1 2)", Integer(2)),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_the_taken_branch(run):
    assert run("(if true 1 (undefined))") == Integer(1)
    assert run("(if false (undefined) 2)") == Integer(2)


@pytest.mark.parametrize("condition", ["1", "0", '""', "()", "+"])
def test_if_condition_must_be_boolean(run, condition):
    with pytest.raises(EtaTypeError) as excinfo:
        run(f"(if {condition} 1 2)")
    assert excinfo.value.expected == "boolean"
    assert "expected boolean" in str(excinfo.value)


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if true 1 2 3)"])
def test_if_shape(run, source):
    with pytest.raises(EtaMalformedForm):
        run(source)


# -----------------------------------------------------
# lambda and application
# -----------------------------------------------------

def test_lambda_builds_closure(run, env):
    fn = run("(lambda (a b) (+ a b))")
    assert isinstance(fn, Closure)
    assert not fn.is_builtin
    assert [p.name for p in fn.params] == ["a", "b"]
    assert fn.env is env


def test_lambda_application(run):
    assert run("((lambda (x) (* x x)) 7)") == Integer(49)


def test_named_function(run):
    assert run("(define add (lambda (a b) (+ a b))) (add 2 3)") == Integer(5)


def test_body_is_an_implicit_sequence(run):
    assert run("((lambda (x) (define y (* x 2)) (+ y 1)) 5)") == Integer(11)


def test_empty_body_returns_void(run):
    assert run("((lambda ()))") == VOID


def test_recursion(run):
    source = """
    (define fact (lambda (n)
      (if (<= n 1) 1 (* n (fact (- n 1))))))
    (fact 10)
    """
    assert run(source) == Integer(3628800)


def test_builtins_are_first_class(run):
    assert run("(define plus +) (plus 1 2)") == Integer(3)
    assert run("((lambda (op) (op 10 4)) -)") == Integer(6)


def test_call_from_host(run):
    square = run("(lambda (x) (* x x))")
    assert call(square, [Integer(9)]) == Integer(81)
    assert call(run("+"), [Integer(1), Float(0.5)]) == Float(1.5)


@pytest.mark.parametrize(
    "source,found",
    [
        ("(1 2)", "Integer"),
        ('("f")', "String"),
        ("(true)", "Bool"),
        ("(() 1)", "Void"),
    ],
)
def test_not_callable(run, source, found):
    with pytest.raises(EtaNotCallable) as excinfo:
        run(source)
    assert excinfo.value.found == found


def test_arguments_evaluate_left_to_right(run):
    with pytest.raises(EtaUnboundSymbol) as excinfo:
        run("(+ (first-missing) (second-missing))")
    assert excinfo.value.name == "first-missing"


def test_callee_evaluated_before_arguments(run):
    with pytest.raises(EtaUnboundSymbol) as excinfo:
        run("(missing-fn (missing-arg))")
    assert excinfo.value.name == "missing-fn"


@pytest.mark.parametrize(
    "source,error",
    [
        ("(lambda)", EtaMalformedForm),
        ("(lambda x x)", EtaMalformedForm),
        ("(lambda (1) 1)", EtaExpectedSymbol),
        ("(lambda (a a) a)", EtaMalformedForm),
        ("(lambda (&rest) 1)", EtaMalformedForm),
        ("(lambda (&rest a b) 1)", EtaMalformedForm),
        ("(lambda (a &rest 1) 1)", EtaExpectedSymbol),
    ],
)
def test_lambda_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_special_form_names_are_not_shadowed_by_definitions(run):
    assert run("(define if 1) (if true 2 3)") == Integer(2)


def test_void_result_is_a_void(run):
    assert isinstance(run("(define x 1)"), Void)
