"""Closure representation for Eta: user lambdas and builtin operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO

from eta.types.environment import Environment
from eta.types.location import Location
from eta.types.values import Value

REST_MARKER = "&rest"


@dataclass(frozen=True)
class Param:
    name: str
    variadic: bool = False
    loc: Location | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{REST_MARKER} {self.name}" if self.variadic else self.name


class Closure(Value):
    """A first-class function value.

    User closures hold their parameter list, body forms and the Environment
    that was current when the lambda was evaluated. That environment is shared,
    not copied: later definitions in it are visible to the closure.

    Builtin operators are Closures too, tagged with `is_builtin` and the
    operator they stand for; they have no body and no environment.
    """

    __slots__ = ("params", "body", "env", "is_builtin", "operator", "loc")

    type_name = "Closure"

    def __init__(
        self,
        params: tuple[Param, ...],
        body: tuple[Value, ...],
        env: Environment | None,
        is_builtin: bool = False,
        operator: str | None = None,
        loc: Location | None = None,
    ):
        self.params: tuple[Param, ...] = tuple(params)
        self.body: tuple[Value, ...] = tuple(body)
        self.env: Environment | None = env
        self.is_builtin: bool = is_builtin
        self.operator: str | None = operator
        self.loc: Location | None = loc

    @classmethod
    def builtin(cls, operator: str) -> Closure:
        return cls((Param("args", variadic=True),), (), None, is_builtin=True, operator=operator)

    @property
    def fixed_params(self) -> tuple[Param, ...]:
        return tuple(p for p in self.params if not p.variadic)

    @property
    def rest_param(self) -> Param | None:
        if self.params and self.params[-1].variadic:
            return self.params[-1]
        return None

    def __str__(self) -> str:
        if self.is_builtin:
            return f"<builtin {self.operator}>"
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(str(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
