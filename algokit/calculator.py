"""A four-function calculator."""

from __future__ import annotations

import operator as _op
from collections.abc import Callable


class UnknownOperatorError(ValueError):
    """Raised for an operator the calculator does not support."""


OPERATION_NAMES = {
    "+": "addition",
    "-": "subtraction",
    "/": "division",
    "*": "multiplication",
}

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "/": _op.truediv,
    "*": _op.mul,
}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply ``operator`` (one of + - * /) to ``a`` and ``b``."""
    try:
        function = _OPERATIONS[operator]
    except KeyError:
        raise UnknownOperatorError(f"cannot recognise the operator {operator!r}") from None
    if operator == "/" and b == 0:
        raise ZeroDivisionError("division with denominator zero")
    return float(function(a, b))