import numpy as np

_FLOAT_TYPES: tuple = (float, np.float16, np.float32, np.float64, np.longdouble)

_INFINITIES: dict = {kind: kind(np.inf) for kind in _FLOAT_TYPES}


def get_float_types() -> tuple:
    return _FLOAT_TYPES


def is_float_type(value) -> bool:
    """
    Check whether a value is one of the supported floating point types.

    Builtin floats and every numpy floating width are accepted.

    :param value: the value to check
    :return: true if the value is a float of a supported width, false otherwise
    """
    return isinstance(value, _FLOAT_TYPES)


def get_infinity(kind: type):
    """
    Positive infinity of the given float type, so that comparisons never change the width of a value.

    :param kind: a supported float type, or a subclass of one
    :return: +inf as an instance of the matching supported type
    """
    for base in kind.__mro__:
        if base in _INFINITIES:
            return _INFINITIES[base]
    raise TypeError('Type "' + kind.__name__ + '" is not a supported float type.')
