from __future__ import annotations

from eta.errors import EtaArityError
from eta.types.closure import Closure
from eta.types.environment import Environment
from eta.types.location import Location
from eta.types.values import List, Value


def bind_arguments(
    fn: Closure,
    supplied_args: list[Value],
    loc: Location | None = None,
) -> Environment:
    """
    Single source of truth for parameter binding in Eta.

    Supports:
    - Positional required parameters (exact count unless variadic)
    - A trailing `&rest name` capturing remaining supplied args as a List

    Returns a new Environment whose outer is the closure's defining
    environment, populated with the bindings for evaluating the body.
    Raises EtaArityError (located at `loc`) on a count mismatch.
    """
    fixed = fn.fixed_params
    rest = fn.rest_param
    provided = len(supplied_args)

    if rest is None and provided != len(fixed):
        raise EtaArityError(str(len(fixed)), provided, loc)
    if rest is not None and provided < len(fixed):
        raise EtaArityError(f"at least {len(fixed)}", provided, loc)

    local_env = Environment(outer=fn.env)
    for param, arg in zip(fixed, supplied_args):
        local_env.set(param.name, arg)
    if rest is not None:
        local_env.set(rest.name, List(tuple(supplied_args[len(fixed):])))
    return local_env
