# Core type aliases for Eta's data model.
# Code (forms read by the reader) and runtime values share one representation:
# the immutable Value classes in eta.types.values. Every node may carry a
# source Location; synthesized values usually carry none.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same Value union and are interchangeable.

from typing import Callable

from eta.types.values import Value

# Runtime value alias
LispValue = Value
# Forms alias (often used interchangeably with LispValue)
SExpression = Value

# Evaluator function type: the evaluator entry passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
