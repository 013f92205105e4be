from __future__ import annotations
from numbers import Real
from typing import Callable, TypeVar, Union
import numpy as np
from limit import logger
from limit.bounds import Bound, AtLeast, AtMost, Between, Unbounded, to_bound, \
    _INVERTED_BOUNDS_EXCEPTION, _NAN_BOUND_EXCEPTION
from limit.utils import is_float_type, get_infinity

F = TypeVar('F', float, np.float16, np.float32, np.float64, np.longdouble)

_NOT_A_FLOAT: Callable = lambda x: \
    TypeError(f"{repr(x)} is not a float: use limit for totally ordered values")

_NOT_A_REAL_BOUND: Callable = lambda x: \
    TypeError(f"Bound {repr(x)} is not a real number")


def _cast(kind: type, edge) -> F:
    if not isinstance(edge, Real):
        raise _NOT_A_REAL_BOUND(edge)
    return kind(edge)


def _clamp(value: F, lower: F, upper: F, bound: Bound) -> F:
    if lower != lower or upper != upper:
        logger.debug(f"Refusing to limit {repr(value)} to NaN bound {str(bound)}")
        raise _NAN_BOUND_EXCEPTION(bound)
    if lower > upper:
        logger.debug(f"Refusing to limit {repr(value)} to inverted bound {str(bound)}")
        raise _INVERTED_BOUNDS_EXCEPTION(bound)
    if value < lower:
        return lower
    elif value > upper:
        return upper
    return value


def limit_float(value: F, bound: Union[Bound, slice]) -> F:
    """
    Limit a floating point value to a bound.

    This behaves like a clamp, not like min/max: a missing edge is replaced by an infinity of the same width as value,
    a NaN value stays NaN whatever the bound, while a NaN edge is refused.
    Edges are converted to the type of value, so float32 in gives float32 out.

        >>> limit_float(2.0, bounds[3.0:])
        3.0
        >>> limit_float(float('inf'), bounds[3.0:7.0])
        7.0

    :param value: a builtin float or a numpy float of any width
    :param bound: the range to limit the value to, one of start:, :end, start:end or :
    :return: value if it lies inside the bound or is NaN, otherwise the nearest edge
    :raise NaNBoundException: if an edge is NaN
    :raise InvertedBoundsException: if the bound is start:end with start greater than end
    """
    if not is_float_type(value):
        raise _NOT_A_FLOAT(value)
    bound = to_bound(bound)
    if isinstance(bound, Unbounded):
        return value

    kind = type(value)
    infinity = get_infinity(kind)
    if isinstance(bound, AtLeast):
        lower, upper = _cast(kind, bound.start), infinity
    elif isinstance(bound, AtMost):
        lower, upper = -infinity, _cast(kind, bound.end)
    elif isinstance(bound, Between):
        lower, upper = _cast(kind, bound.start), _cast(kind, bound.end)
    else:
        raise TypeError(f"Unknown bound {repr(bound)}")
    return _clamp(value, lower, upper, bound)
