"""Builtin operators for the Eta runtime environment.

This module defines the 11 arithmetic and comparison primitives, the table
the evaluator dispatches builtin closures through, and registration of
those closures into a root environment.
"""
from __future__ import annotations

import math
import operator
from typing import Callable, Optional

from eta.errors import EtaArityError, EtaDivisionByZero, EtaIntegerOverflow, EtaTypeError
from eta.types.closure import Closure
from eta.types.environment import Environment
from eta.types.location import Location
from eta.types.values import Bool, Float, Integer, Value, type_name

BuiltinFn = Callable[[list[Value], Optional[Location]], Value]


def _numbers(args: list[Value], loc: Location | None) -> list[Integer | Float]:
    for arg in args:
        if not isinstance(arg, (Integer, Float)):
            raise EtaTypeError("number", type_name(arg), loc)
    return args  # type: ignore[return-value]


def _require(name: str, args: list[Value], minimum: int, loc: Location | None) -> None:
    if len(args) < minimum:
        raise EtaArityError(f"at least {minimum}", len(args), loc, who=name)


def _box(name: str, value: int | float, is_float: bool, loc: Location | None) -> Value:
    if is_float:
        return Float(float(value))
    if not Integer.in_range(value):
        raise EtaIntegerOverflow(name, loc)
    return Integer(value)


# -------------------------------
# Arithmetic
# -------------------------------
def _int_div(a: int, b: int) -> int:
    # Truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _int_mod(a: int, b: int) -> int:
    # Takes the sign of the dividend
    return a - b * _int_div(a, b)


def _float_mod(a: float, b: float) -> float:
    # fmod raises on an infinite dividend
    return math.nan if math.isinf(a) else math.fmod(a, b)


def _fold(
    name: str,
    args: list[Value],
    loc: Location | None,
    int_op: Callable[[int, int], int],
    float_op: Callable[[float, float], float],
    checks_zero: bool = False,
) -> Value:
    nums = _numbers(args, loc)
    is_float = any(isinstance(n, Float) for n in nums)
    op = float_op if is_float else int_op
    # Integer operands are 128-bit, so promotion to float cannot overflow
    result = float(nums[0].value) if is_float else nums[0].value
    for n in nums[1:]:
        if checks_zero and n.value == 0:
            raise EtaDivisionByZero(loc)
        result = op(result, n.value)
        if not is_float and not Integer.in_range(result):
            raise EtaIntegerOverflow(name, loc)
    return _box(name, result, is_float, loc)


def add(args: list[Value], loc: Location | None = None) -> Value:
    """Sum of all arguments; a single argument is returned unchanged."""
    _require("+", args, 1, loc)
    return _fold("+", args, loc, operator.add, operator.add)


def sub(args: list[Value], loc: Location | None = None) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _require("-", args, 1, loc)
    if len(args) == 1:
        (n,) = _numbers(args, loc)
        return _box("-", -n.value, isinstance(n, Float), loc)
    return _fold("-", args, loc, operator.sub, operator.sub)


def mul(args: list[Value], loc: Location | None = None) -> Value:
    """Product of all arguments; a single argument is returned unchanged."""
    _require("*", args, 1, loc)
    return _fold("*", args, loc, operator.mul, operator.mul)


def div(args: list[Value], loc: Location | None = None) -> Value:
    """Divide left-to-right. Integer division truncates toward zero."""
    _require("/", args, 2, loc)
    return _fold("/", args, loc, _int_div, operator.truediv, checks_zero=True)


def mod(args: list[Value], loc: Location | None = None) -> Value:
    """Remainder, folded left-to-right; the result takes the sign of the dividend."""
    _require("%", args, 2, loc)
    return _fold("%", args, loc, _int_mod, _float_mod, checks_zero=True)


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, relation: Callable[[object, object], bool]) -> BuiltinFn:
    def compare(args: list[Value], loc: Location | None = None) -> Value:
        _require(name, args, 2, loc)
        nums = _numbers(args, loc)
        return Bool(all(relation(a.value, b.value) for a, b in zip(nums, nums[1:])))

    return compare


gt = _chain(">", operator.gt)
lt = _chain("<", operator.lt)
eq = _chain("=", operator.eq)
gte = _chain(">=", operator.ge)
lte = _chain("<=", operator.le)
not_equals = _chain("/=", operator.ne)


# -------------------------------
# Registration
# -------------------------------
BUILTIN_OPERATORS: dict[str, BuiltinFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    ">": gt,
    "<": lt,
    "=": eq,
    ">=": gte,
    "<=": lte,
    "/=": not_equals,
}


def call_builtin(fn: Closure, args: list[Value], loc: Location | None = None) -> Value:
    """Run the primitive a builtin closure is tagged with."""
    return BUILTIN_OPERATORS[fn.operator](args, loc)


def register(env: Environment) -> None:
    env.update({name: Closure.builtin(name) for name in BUILTIN_OPERATORS})


def create_root_environment() -> Environment:
    """A fresh root environment seeded with the builtin operators."""
    env = Environment()
    register(env)
    return env
