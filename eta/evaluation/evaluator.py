"""Core evaluator for the Eta interpreter.

A recursive tree-walker: self-evaluating atoms return themselves, symbols
resolve through the lexical environment chain, lists dispatch to special
forms or to function application. Errors propagate as EtaError exceptions;
nothing here recovers from them.
"""

from __future__ import annotations

from typing import Iterable

from eta import SExpression, LispValue
from eta.errors import EtaTypeError
from eta.evaluation.apply import apply
from eta.evaluation.special_forms import SPECIAL_FORMS
from eta.types.environment import Environment
from eta.types.location import Location
from eta.types.values import VOID, List, Module, Symbol, Value, type_name


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env` and return its value."""
    match expr:
        case Symbol(name=name):
            return env.lookup(name, expr.loc)

        case List(items=()):
            return VOID

        case List(items=(Symbol(name=head), *tail)) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate, expr)

        case List(items=(head, *arg_forms)):
            fn = evaluate(head, env)
            # Arguments are evaluated left to right in the caller's environment
            args = [evaluate(arg, env) for arg in arg_forms]
            return apply(fn, args, evaluate_body, expr.loc)

        case Module(forms=forms):
            return evaluate_body(forms, env)

        case Value():
            # Void, Integer, Float, Bool, String and Closure evaluate to themselves
            return expr

    raise EtaTypeError("expression", type_name(expr))


def evaluate_body(forms: Iterable[SExpression], env: Environment) -> LispValue:
    """Evaluate forms in order; the value of the last one, or void if there are none.

    The first failing form aborts the rest.
    """
    result: LispValue = VOID
    for form in forms:
        result = evaluate(form, env)
    return result


def call(fn: LispValue, args: list[LispValue], loc: Location | None = None) -> LispValue:
    """Call a closure value from host code with already-evaluated arguments."""
    return apply(fn, list(args), evaluate_body, loc)
