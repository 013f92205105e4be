from __future__ import annotations
import ast
import math
from limit import Bound, bounds

_SPECIAL_FLOATS = ('nan', 'inf', '-inf')


def parse_value(text: str):
    text = text.strip()
    if text in _SPECIAL_FLOATS:
        return float(text)
    return ast.literal_eval(text)


def parse_bound(text: str) -> Bound:
    """
    Parse a bound written as a slice, e.g. '3:', ':7', '3:7' or ':'.
    """
    start, end = text.split(':')
    start = None if start.strip() == '' else parse_value(start)
    end = None if end.strip() == '' else parse_value(end)
    return bounds[start:end]


def same_float(expected, actual) -> bool:
    if math.isnan(expected):
        return math.isnan(actual)
    return expected == actual
