"""
Limit values using slice syntax as range literals.

Specifically, bounds[start:], bounds[:end], bounds[start:end] and bounds[:] are supported, edges inclusive.
There is a separate function for floating point values, since floats are not totally ordered.
"""
import logging

logger = logging.getLogger('limit')

from limit.bounds import Bound, AtLeast, AtMost, Between, Unbounded, BoundsException, InvertedBoundsException, \
    NaNBoundException, bounds, to_bound, at_least, at_most, between, unbounded  # noqa: E402
from limit.ordered import limit  # noqa: E402
from limit.floating import limit_float  # noqa: E402
from limit.utils import get_float_types, is_float_type  # noqa: E402

__all__ = [
    'limit', 'limit_float', 'Bound', 'AtLeast', 'AtMost', 'Between', 'Unbounded', 'bounds', 'to_bound', 'at_least',
    'at_most', 'between', 'unbounded', 'BoundsException', 'InvertedBoundsException', 'NaNBoundException',
    'get_float_types', 'is_float_type', 'logger'
]
