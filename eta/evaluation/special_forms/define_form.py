from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaExpectedSymbol, EtaMalformedForm, EtaMissingBinding
from eta.types.environment import Environment
from eta.types.values import VOID, List, Symbol, type_name


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: List,
) -> LispValue:
    """
    (define name value)
    Binds in the current environment only; an outer binding of the same name is shadowed.
    """
    if not tail:
        raise EtaExpectedSymbol("nothing", form.loc)
    name = tail[0]
    if not isinstance(name, Symbol):
        raise EtaExpectedSymbol(type_name(name), name.loc or form.loc)
    if len(tail) < 2:
        raise EtaMissingBinding(name.loc or form.loc)
    if len(tail) > 2:
        raise EtaMalformedForm("define", "expected (define <symbol> <expr>)", form.loc)

    value = evaluate_fn(tail[1], env)
    env.set(name.name, value)
    return VOID
