from __future__ import annotations

from eta.types.location import Location


class EtaError(Exception):
    """ Base class for all Eta errors"""

    def __init__(self, message: str, loc: Location | None = None):
        super().__init__(message)
        self.message = message
        self.loc = loc

    def __str__(self) -> str:
        if self.loc is None:
            return self.message
        return f"{self.message} at {self.loc}"


class EtaUnboundSymbol(EtaError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str, loc: Location | None = None):
        super().__init__(f"Symbol not found: {name}", loc)
        self.name = name


class EtaExpectedSymbol(EtaError):
    """ Raised when a symbol is required but another kind of form was found"""

    def __init__(self, found: str, loc: Location | None = None):
        super().__init__(f"Expected symbol but {found} found", loc)
        self.found = found


class EtaMissingBinding(EtaError):
    """ Raised when define has no expression to bind"""

    def __init__(self, loc: Location | None = None):
        super().__init__("Expected a value to bind in define", loc)


class EtaTypeError(EtaError):
    """ Raised when a value of the wrong type is used"""

    def __init__(self, expected: str, found: str, loc: Location | None = None):
        super().__init__(f"Type mismatch: expected {expected} but {found} found", loc)
        self.expected = expected
        self.found = found


class EtaArityError(EtaError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, expected: str, got: int, loc: Location | None = None, who: str | None = None):
        prefix = f"{who}: " if who else ""
        super().__init__(f"{prefix}expected {expected} argument(s) but got {got}", loc)
        self.expected = expected
        self.got = got


class EtaNotCallable(EtaError):
    """ Raised when the head of an application is not a closure"""

    def __init__(self, found: str, loc: Location | None = None):
        super().__init__(f"{found} is not callable", loc)
        self.found = found


class EtaDivisionByZero(EtaError):
    """ Raised when / or % has a zero right-hand operand"""

    def __init__(self, loc: Location | None = None):
        super().__init__("Division by zero", loc)


class EtaIntegerOverflow(EtaError):
    """ Raised when integer arithmetic leaves the 128-bit signed range"""

    def __init__(self, operator: str, loc: Location | None = None):
        super().__init__(f"Integer overflow in {operator}", loc)
        self.operator = operator


class EtaMalformedForm(EtaError):
    """ Raised when a special form does not have the expected shape"""

    def __init__(self, form: str, reason: str, loc: Location | None = None):
        super().__init__(f"Malformed {form}: {reason}", loc)
        self.form = form
        self.reason = reason


class EtaSyntaxError(EtaError):
    """ Raised when there is a syntax error"""
