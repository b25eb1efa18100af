"""Tools for working with numeric types as point components"""

import inspect
import numbers
from typing import *
import numpy as np

from pointgeom.exceptions import ScalarTypeError

__all__ = [
    "coerce_scalar",
    "default_scalar_value",
    "infer_scalar_type",
    "is_scalar_value",
    "validate_scalar_type",
    ]


def validate_scalar_type(t: Any) -> type:
    """Check that the given object may serve as the scalar type of a point, returning it unchanged."""
    if not isinstance(t, type):
        raise ScalarTypeError(f"Scalar type must be a type, not a value of type {type(t).__name__}")
    # Boolean is registered as integral, but arithmetic on it doesn't stay boolean.
    if issubclass(t, bool) or not issubclass(t, numbers.Number):
        raise ScalarTypeError(f"Scalar type isn't numeric: {t.__name__}")
    # Abstract numeric types (numbers.Real, np.floating, ...) have no default value to give a component.
    if inspect.isabstract(t):
        raise ScalarTypeError(f"Scalar type is abstract: {t.__name__}")
    try:
        default_scalar_value(t)
    except (TypeError, ValueError) as e:
        raise ScalarTypeError(f"Scalar type has no default value: {t.__name__}; error -- {e}") from e
    return t


def default_scalar_value(t: type) -> Any:
    """The value a component of the given scalar type takes when not given, e.g. 0 for int"""
    return t()


def is_scalar_value(value: Any) -> bool:
    """Determine whether the given value may act as a scalar (component or multiplication factor)."""
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def coerce_scalar(value: Any, t: type, *, ctx: str = "Value") -> Any:
    """
    Get the given value as an instance of the given scalar type.

    Instances of the type itself are passed through untouched. Other numbers are converted only
    if no information is lost, i.e. the converted value compares equal to the original.
    """
    if not is_scalar_value(value):
        raise ScalarTypeError(f"{ctx} ({value!r}) (type={type(value).__name__}) is not number-like!")
    if isinstance(value, t):
        return value
    try:
        converted = t(value)
    except (ArithmeticError, TypeError, ValueError) as e:
        raise ScalarTypeError(f"{ctx} ({value!r}) cannot be converted to {t.__name__}: {e}") from e
    if not _represents_same_number(converted, value):
        raise ScalarTypeError(f"{ctx} ({value!r}) cannot be represented exactly as {t.__name__}; got {converted!r}")
    return converted


def infer_scalar_type(values: Iterable[Any]) -> type:
    """Determine the single scalar type shared by all the given values."""
    types = list(dict.fromkeys(type(v) for v in values))
    match types:
        case []:
            raise ScalarTypeError("Cannot infer scalar type from no values")
        case [t]:
            return validate_scalar_type(t)
        case _:
            raise ScalarTypeError(
                f"Values have mixed types ({', '.join(t.__name__ for t in types)}); pass the scalar type explicitly"
            )


def _represents_same_number(converted: Any, original: Any) -> bool:
    # Compare as Python scalars, since numpy casts a Python operand to the numpy dtype before comparing.
    converted, original = _as_python_scalar(converted), _as_python_scalar(original)
    # NaN is the one value which doesn't equal itself.
    return bool(converted == original) or (converted != converted and original != original)


def _as_python_scalar(value: Any) -> Any:
    return value.item() if isinstance(value, np.generic) else value
