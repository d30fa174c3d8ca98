"""Module for miscellaneous multi-use functions"""

__all__ = ['in_range', 'normalize_longitude']

from typing import Union

import numpy as np

from tranmerc._const import PI, TWO_PI

ArrayOrFloat = Union[float, np.ndarray]


def in_range(value: float, lower: float, upper: float) -> bool:
    """
    Test whether a value lies within the closed range [lower, upper]. NaN is never
    in range.

    Args:
        value:
            The value to test

        lower:
            The lower bound (inclusive)

        upper:
            The upper bound (inclusive)

    Returns:
        bool
    """
    return lower <= value <= upper


def normalize_longitude(longitude: ArrayOrFloat) -> ArrayOrFloat:
    """
    Wraps a longitude (or an array of longitudes), in radians, into the half-open
    range (-pi, pi]. Longitudes already within range are returned unchanged.

    Args:
        longitude:
            A longitude in radians, or an array of them

    Returns:
        The wrapped longitude; a float when given a scalar, otherwise an ndarray
    """
    wrapped = longitude - TWO_PI * np.ceil((longitude - PI) / TWO_PI)
    if np.ndim(wrapped) == 0:
        return float(wrapped)

    return wrapped
