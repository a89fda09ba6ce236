from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaExpectedSymbol, EtaMalformedForm
from eta.types.closure import REST_MARKER, Closure, Param
from eta.types.environment import Environment
from eta.types.values import List, Symbol, type_name


def parse_params(param_list: SExpression, form: List) -> tuple[Param, ...]:
    """Turn a parameter list such as (a b &rest more) into Params."""
    if not isinstance(param_list, List):
        raise EtaMalformedForm("lambda", "parameter list must be a list", param_list.loc or form.loc)

    params: list[Param] = []
    items = param_list.items
    i = 0
    while i < len(items):
        item = items[i]
        if not isinstance(item, Symbol):
            raise EtaExpectedSymbol(type_name(item), item.loc or param_list.loc)
        if item.name == REST_MARKER:
            rest = items[i + 1:]
            if len(rest) != 1:
                raise EtaMalformedForm("lambda", f"{REST_MARKER} must be followed by exactly one name", item.loc)
            if not isinstance(rest[0], Symbol) or rest[0].name == REST_MARKER:
                raise EtaExpectedSymbol(type_name(rest[0]), rest[0].loc or item.loc)
            params.append(Param(rest[0].name, variadic=True, loc=rest[0].loc))
            break
        params.append(Param(item.name, loc=item.loc))
        i += 1

    names = [p.name for p in params]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise EtaMalformedForm("lambda", f"duplicate parameter(s) {', '.join(duplicates)}", param_list.loc or form.loc)
    return tuple(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: List,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms; the body is an
    # implicit sequence and an empty body yields void when called.
    if not tail:
        raise EtaMalformedForm("lambda", "missing parameter list", form.loc)

    params = parse_params(tail[0], form)
    # The current environment is captured by reference, not copied.
    return Closure(params, tuple(tail[1:]), env, loc=form.loc)
