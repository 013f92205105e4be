from __future__ import annotations
from typing import Callable, Generic, TypeVar, Union

T = TypeVar('T')


class BoundsException(Exception):

    def __init__(self, message: str):
        super().__init__(message)


class InvertedBoundsException(BoundsException):

    def __init__(self, message: str):
        super().__init__(message)


class NaNBoundException(BoundsException):

    def __init__(self, message: str):
        super().__init__(message)


_INVERTED_BOUNDS_EXCEPTION: Callable = lambda x: \
    InvertedBoundsException(f"Start bound is greater than end bound: {str(x)}")

_NAN_BOUND_EXCEPTION: Callable = lambda x: \
    NaNBoundException(f"NaN is not a valid bound: {str(x)}")

_NOT_A_BOUND: Callable = lambda x: \
    TypeError(f"Cannot use {repr(x)} as a bound, expected one of start:, :end, start:end or :")

_STEPPED_SLICE: Callable = lambda x: \
    TypeError(f"A bound cannot have a step: {repr(x)}")

_SEALED: Callable = lambda x: \
    TypeError(f"Cannot subclass {x.__name__}: the set of bounds is closed")


class Bound(Generic[T]):
    """
    A range a value can be limited to.

    Exactly four shapes exist: AtLeast, AtMost, Between and Unbounded.
    The set is closed, subclasses defined outside this module are rejected when the class is created.
    """

    def __init_subclass__(cls, **kwargs):
        if cls.__module__ != __name__:
            raise _SEALED(cls.__mro__[1])
        super().__init_subclass__(**kwargs)

    def __init__(self, start: T = None, end: T = None):
        if type(self) is Bound:
            raise _NOT_A_BOUND(self.__class__)
        self._start = start
        self._end = end

    @property
    def start(self) -> T:
        return self._start

    @property
    def end(self) -> T:
        return self._end

    def contains(self, value: T) -> bool:
        """
        Check if a value lies inside the bound, edges included.

        :param value: the value to check
        :return: true if the value is inside the bound, false otherwise
        """
        return (self._start is None or self._start <= value) and (self._end is None or value <= self._end)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((type(self).__name__, self._start, self._end))

    def __str__(self):
        lower = '(-inf' if self._start is None else '[' + str(self._start)
        upper = '+inf)' if self._end is None else str(self._end) + ']'
        return lower + ', ' + upper

    @staticmethod
    def at_least(start: T) -> AtLeast[T]:
        return AtLeast(start)

    @staticmethod
    def at_most(end: T) -> AtMost[T]:
        return AtMost(end)

    @staticmethod
    def between(start: T, end: T) -> Between[T]:
        return Between(start, end)

    @staticmethod
    def unbounded() -> Unbounded:
        return Unbounded()

    @staticmethod
    def from_slice(item: slice) -> Bound:
        """
        Map a slice literal to a bound. Both edges are inclusive, unlike list slicing.

        :param item: one of start:, :end, start:end or :
        :return: the matching bound
        """
        if not isinstance(item, slice):
            raise _NOT_A_BOUND(item)
        if item.step is not None:
            raise _STEPPED_SLICE(item)
        if item.start is None:
            return Unbounded() if item.stop is None else AtMost(item.stop)
        else:
            return AtLeast(item.start) if item.stop is None else Between(item.start, item.stop)


class AtLeast(Bound[T]):

    def __init__(self, start: T):
        super().__init__(start, None)

    def __repr__(self):
        return f"AtLeast({repr(self._start)})"


class AtMost(Bound[T]):

    def __init__(self, end: T):
        super().__init__(None, end)

    def __repr__(self):
        return f"AtMost({repr(self._end)})"


class Between(Bound[T]):

    def __init__(self, start: T, end: T):
        super().__init__(start, end)

    def is_empty(self) -> bool:
        """
        Check if no value can satisfy the bound, i.e. start is greater than end or an edge is not comparable.
        Limiting to an empty bound fails.
        """
        return not self._start <= self._end

    def __repr__(self):
        return f"Between({repr(self._start)}, {repr(self._end)})"


class Unbounded(Bound):

    def __init__(self):
        super().__init__(None, None)

    def __repr__(self):
        return "Unbounded()"


class _BoundLiteral:
    """
    Turns slice syntax into bounds: bounds[3:], bounds[:7], bounds[3:7] and bounds[:].
    """

    def __getitem__(self, item) -> Bound:
        return Bound.from_slice(item)

    def __repr__(self):
        return "bounds"


bounds = _BoundLiteral()

at_least = Bound.at_least
at_most = Bound.at_most
between = Bound.between
unbounded = Bound.unbounded


def to_bound(item: Union[Bound, slice]) -> Bound:
    if isinstance(item, Bound):
        return item
    elif isinstance(item, slice):
        return Bound.from_slice(item)
    else:
        raise _NOT_A_BOUND(item)
