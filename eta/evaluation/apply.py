"""Application engine for Eta.

Centralizes the function-call protocol:
- Builtin closures (tagged `is_builtin`) dispatch to the operator table.
- User closures get a fresh Environment whose outer is the closure's
  defining environment, never the caller's, and evaluate their body there.
"""

import logging

from eta import LispValue, EvaluatorFn
from eta.builtin.env_builtin import call_builtin
from eta.errors import EtaNotCallable
from eta.types.bind import bind_arguments
from eta.types.closure import Closure
from eta.types.location import Location
from eta.types.values import type_name

logger = logging.getLogger("Apply")


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_body: EvaluatorFn,
    loc: Location | None = None,
) -> LispValue:
    """Apply a user closure to already-evaluated arguments.

    Binding (and the arity check) is delegated to bind_arguments; the body
    forms are then evaluated in order and the last value is returned.
    """
    new_env = bind_arguments(fn, args, loc)
    return evaluate_body(fn.body, new_env)


def apply(
    head: object,
    args: list[LispValue],
    evaluate_body: EvaluatorFn,
    loc: Location | None = None,
) -> LispValue:
    """Apply either a builtin or a user closure.

    `loc` is the location of the call form; errors raised by the call
    (arity, operand types, division by zero) are attributed to it.
    """
    if not isinstance(head, Closure):
        raise EtaNotCallable(type_name(head), loc)
    logger.debug("apply %s to %d argument(s)", head, len(args))
    if head.is_builtin:
        return call_builtin(head, args, loc)
    return apply_closure(head, args, evaluate_body, loc)
