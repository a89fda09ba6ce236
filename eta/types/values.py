"""Value classes shared by the reader (as code) and the evaluator (as data).

Every class is an immutable dataclass carrying an optional source Location.
The location is excluded from equality and hashing so that a literal read
from a file compares equal to the same value synthesized at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eta.types.location import Location


class Value:
    """Base class of every runtime value and AST node."""

    __slots__ = ()

    type_name = "Value"
    loc: Location | None


def _loc_field():
    return field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Void(Value):
    type_name = "Void"
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return "void"


VOID = Void()


# Integers are 128-bit signed
INTEGER_MIN = -(2**127)
INTEGER_MAX = 2**127 - 1


@dataclass(frozen=True)
class Integer(Value):
    type_name = "Integer"
    value: int
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def in_range(value: int) -> bool:
        return INTEGER_MIN <= value <= INTEGER_MAX


@dataclass(frozen=True)
class Float(Value):
    type_name = "Float"
    value: float
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Bool(Value):
    type_name = "Bool"
    value: bool
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = Bool(True)
FALSE = Bool(False)


@dataclass(frozen=True)
class String(Value):
    type_name = "String"
    value: str
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Symbol(Value):
    type_name = "Symbol"
    name: str
    loc: Location | None = _loc_field()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class List(Value):
    type_name = "List"
    items: tuple[Value, ...] = ()
    loc: Location | None = _loc_field()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class Module(Value):
    """The sequence of top-level forms read from one source text."""

    type_name = "Module"
    forms: tuple[Value, ...] = ()
    loc: Location | None = _loc_field()

    def __len__(self) -> int:
        return len(self.forms)

    def __iter__(self):
        return iter(self.forms)

    def __str__(self) -> str:
        return "\n".join(str(form) for form in self.forms)


def type_name(value: object) -> str:
    """Name of a value's kind for diagnostics; Python objects report their class."""
    if isinstance(value, Value):
        return value.type_name
    return type(value).__name__
