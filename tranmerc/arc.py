"""
Meridional arc length and its inverse, the footpoint latitude.

Both are truncated trigonometric series in the eccentricity of the ellipsoid. The arc
length series is truncated after the e2**3 terms, which keeps it to sub-millimeter
accuracy for Earth-like flattenings. All functions accept either floats or numpy
arrays of latitudes/arc lengths.
"""

__all__ = [
    'arc_length_coefficients', 'footpoint_coefficient', 'footpoint_latitude',
    'meridional_arc_length'
]

import math
from typing import Tuple, Union

import numpy as np

ArrayOrFloat = Union[float, np.ndarray]


def arc_length_coefficients(e2: float) -> Tuple[float, float, float, float]:
    """
    The four coefficients of the meridional arc length series.

    Args:
        e2:
            The first eccentricity squared of the ellipsoid

    Returns:
        (e0, e1, e2c, e3), such that the arc length from the equator to latitude phi is
        a * (e0*phi - e1*sin(2phi) + e2c*sin(4phi) - e3*sin(6phi))
    """
    e4 = e2 * e2
    e6 = e4 * e2

    e0 = 1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256
    e1 = 3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024
    e2c = 15 * e4 / 256 + 45 * e6 / 1024
    e3 = 35 * e6 / 3072
    return e0, e1, e2c, e3


def footpoint_coefficient(e2: float) -> float:
    """
    The coefficient used by the footpoint latitude series,
    (1 - sqrt(1 - e2)) / (1 + sqrt(1 - e2))

    Args:
        e2:
            The first eccentricity squared of the ellipsoid

    Returns:
        float
    """
    root = math.sqrt(1 - e2)
    return (1 - root) / (1 + root)


def meridional_arc_length(
    a: float,
    coefficients: Tuple[float, float, float, float],
    latitude: ArrayOrFloat
) -> ArrayOrFloat:
    """
    The distance along a meridian from the equator to a latitude.

    Args:
        a:
            The semi-major axis of the ellipsoid, in meters

        coefficients:
            The series coefficients (e0, e1, e2c, e3), see arc_length_coefficients()

        latitude:
            The latitude, in radians. Southern latitudes give negative lengths.

    Returns:
        The arc length in meters
    """
    e0, e1, e2c, e3 = coefficients
    return a * (
        e0 * latitude
        - e1 * np.sin(2 * latitude)
        + e2c * np.sin(4 * latitude)
        - e3 * np.sin(6 * latitude)
    )


def footpoint_latitude(
    a: float,
    e0: float,
    e1r: float,
    arc_length: ArrayOrFloat
) -> ArrayOrFloat:
    """
    The latitude at which the meridional arc length equals the given length, i.e.
    the inverse of meridional_arc_length(). Evaluated as a single closed-form series
    in the rectifying latitude; no iteration is performed.

    Args:
        a:
            The semi-major axis of the ellipsoid, in meters

        e0:
            The leading arc length coefficient, see arc_length_coefficients()

        e1r:
            The footpoint coefficient, see footpoint_coefficient()

        arc_length:
            The meridional arc length, in meters

    Returns:
        The footpoint latitude in radians
    """
    e1r2 = e1r * e1r
    e1r3 = e1r2 * e1r
    e1r4 = e1r3 * e1r

    mu = arc_length / (a * e0)
    return (
        mu
        + (3 * e1r / 2 - 27 * e1r3 / 32) * np.sin(2 * mu)
        + (21 * e1r2 / 16 - 55 * e1r4 / 32) * np.sin(4 * mu)
        + (151 * e1r3 / 96) * np.sin(6 * mu)
        + (1097 * e1r4 / 512) * np.sin(8 * mu)
    )
