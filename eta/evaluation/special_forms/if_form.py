from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaMalformedForm, EtaTypeError
from eta.types.environment import Environment
from eta.types.values import VOID, Bool, List, type_name


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: List,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise EtaMalformedForm("if", "expected (if <condition> <then> [<else>])", form.loc)

    cond = evaluate_fn(tail[0], env)
    # Only Bool values are conditions: no truthiness for numbers, strings or lists
    if not isinstance(cond, Bool):
        raise EtaTypeError("boolean", type_name(cond), tail[0].loc or form.loc)

    if cond.value:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return VOID
