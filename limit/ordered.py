from __future__ import annotations
from typing import Any, Callable, Protocol, TypeVar, Union
from limit import logger
from limit.bounds import Bound, AtLeast, AtMost, Between, Unbounded, to_bound, _INVERTED_BOUNDS_EXCEPTION
from limit.utils import is_float_type


class SupportsTotalOrder(Protocol):

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=SupportsTotalOrder)

_NOT_TOTALLY_ORDERED: Callable = lambda x: \
    TypeError(f"{repr(x)} is a float, which is not totally ordered: use limit_float instead")


def limit(value: T, bound: Union[Bound[T], slice]) -> T:
    """
    Limit a totally ordered value to a bound.

    The bound is one of start:, :end, start:end or :, either as a Bound or as a slice (bounds[3:7]).
    Edges are inclusive.

        >>> limit(2, bounds[3:])
        3
        >>> limit(9, bounds[3:7])
        7

    :param value: the value to limit, floats are rejected
    :param bound: the range to limit the value to
    :return: value if it lies inside the bound, otherwise the nearest edge
    :raise InvertedBoundsException: if the bound is start:end with start greater than end
    """
    bound = to_bound(bound)
    for item in (value, bound.start, bound.end):
        if is_float_type(item):
            raise _NOT_TOTALLY_ORDERED(item)

    if isinstance(bound, AtLeast):
        return max(value, bound.start)
    elif isinstance(bound, AtMost):
        return min(value, bound.end)
    elif isinstance(bound, Between):
        start, end = bound.start, bound.end
        if start > end:
            logger.debug(f"Refusing to limit {repr(value)} to inverted bound {str(bound)}")
            raise _INVERTED_BOUNDS_EXCEPTION(bound)
        if value < start:
            return start
        elif value > end:
            return end
        return value
    elif isinstance(bound, Unbounded):
        return value
    else:
        raise TypeError(f"Unknown bound {repr(bound)}")
