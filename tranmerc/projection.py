"""
Forward (geographic to projected) and inverse (projected to geographic) Transverse
Mercator transforms.

Both transforms are single closed-form evaluations of truncated power series (Snyder,
"Map Projections: A Working Manual", USGS Professional Paper 1395, pp. 60-64) and are
pure functions of a ProjectionState and an input pair. Errors are reported in the
returned TranMercStatus; outputs of a call with a fatal status are NaN.
"""

__all__ = ['forward', 'inverse']

import math
from typing import Tuple, Union

import numpy as np

from tranmerc._const import LON_WARNING_DELTA, MAX_LAT, PI, PI_OVER_2, POLE_EPSILON, TWO_PI
from tranmerc.arc import footpoint_latitude, meridional_arc_length
from tranmerc.parameters import ProjectionState
from tranmerc.status import TranMercStatus
from tranmerc.utils.functions import in_range, normalize_longitude
from tranmerc.utils.logging import warn_once

ArrayOrFloat = Union[float, np.ndarray]

_LON_WARNING_MESSAGE = (
    f'Coordinates more than {math.degrees(LON_WARNING_DELTA):.0f} degrees from the '
    'central meridian; Transverse Mercator accuracy is degraded. '
    '(this warning will not repeat)'
)


def _forward_series(
    state: ProjectionState,
    latitude: ArrayOrFloat,
    delta_longitude: ArrayOrFloat,
) -> Tuple[ArrayOrFloat, ArrayOrFloat]:
    """
    Evaluate the forward series for a latitude and a longitude difference from the
    central meridian. No validation is performed.
    """
    a = state.ellipsoid.a
    params, consts = state.parameters, state.constants
    ep2 = consts.ep2

    sin_lat, cos_lat, tan_lat = np.sin(latitude), np.cos(latitude), np.tan(latitude)

    nu = a / np.sqrt(1 - consts.e2 * sin_lat ** 2)
    t = tan_lat ** 2
    c = ep2 * cos_lat ** 2
    a_ = delta_longitude * cos_lat
    m = meridional_arc_length(a, consts.arc_coefficients, latitude)

    easting = params.false_easting + params.scale_factor * nu * (
        a_
        + (1 - t + c) * a_ ** 3 / 6
        + (5 - 18 * t + t ** 2 + 72 * c - 58 * ep2) * a_ ** 5 / 120
    )
    northing = params.false_northing + params.scale_factor * (
        m - consts.m0 + nu * tan_lat * (
            a_ ** 2 / 2
            + (5 - t + 9 * c + 4 * c ** 2) * a_ ** 4 / 24
            + (61 - 58 * t + t ** 2 + 600 * c - 330 * ep2) * a_ ** 6 / 720
        )
    )
    return easting, northing


def _footpoint(state: ProjectionState, northing: ArrayOrFloat) -> ArrayOrFloat:
    """The footpoint latitude of a northing"""
    params, consts = state.parameters, state.constants
    m1 = consts.m0 + (northing - params.false_northing) / params.scale_factor
    return footpoint_latitude(state.ellipsoid.a, consts.e0, consts.e1r, m1)


def _inverse_series(
    state: ProjectionState,
    footpoint: ArrayOrFloat,
    easting: ArrayOrFloat,
) -> Tuple[ArrayOrFloat, ArrayOrFloat]:
    """
    Evaluate the inverse series about a footpoint latitude.

    Returns:
        (latitude, longitude difference from the central meridian), in radians
    """
    a = state.ellipsoid.a
    params, consts = state.parameters, state.constants
    e2, ep2 = consts.e2, consts.ep2

    sin_fp, cos_fp, tan_fp = np.sin(footpoint), np.cos(footpoint), np.tan(footpoint)

    w = 1 - e2 * sin_fp ** 2
    nu1 = a / np.sqrt(w)
    t1 = tan_fp ** 2
    c1 = ep2 * cos_fp ** 2
    r1 = a * (1 - e2) / w ** 1.5
    d = (easting - params.false_easting) / (nu1 * params.scale_factor)

    latitude = footpoint - (nu1 * tan_fp / r1) * (
        d ** 2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 ** 2 - 9 * ep2) * d ** 4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 ** 2 - 252 * ep2 - 3 * c1 ** 2) * d ** 6 / 720
    )
    delta_longitude = (
        d
        - (1 + 2 * t1 + c1) * d ** 3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 ** 2 + 8 * ep2 + 24 * t1 ** 2) * d ** 5 / 120
    ) / cos_fp
    return latitude, delta_longitude


def forward(
    state: ProjectionState,
    latitude: float,
    longitude: float
) -> Tuple[float, float, TranMercStatus]:
    """
    Project a geographic coordinate to Transverse Mercator easting/northing.

    Args:
        state:
            The projection to use

        latitude:
            Latitude in radians. Latitudes within 0.01 degrees of a pole are rejected.

        longitude:
            Longitude in radians, in [-pi, 2pi]

    Returns:
        (easting, northing, status). Easting and northing are in meters, and are NaN
        if the status carries LAT_ERROR or LON_ERROR. LON_WARNING marks a longitude
        far enough from the central meridian that accuracy is degraded; the output
        is still computed.
    """
    status = TranMercStatus.NO_ERROR

    if not in_range(latitude, -MAX_LAT, MAX_LAT):
        status |= TranMercStatus.LAT_ERROR

    if not in_range(longitude, -PI, TWO_PI):
        status |= TranMercStatus.LON_ERROR

    if status:
        return math.nan, math.nan, status

    delta_longitude = normalize_longitude(longitude - state.parameters.central_meridian)
    if abs(delta_longitude) > LON_WARNING_DELTA:
        warn_once(_LON_WARNING_MESSAGE)
        status |= TranMercStatus.LON_WARNING

    easting, northing = _forward_series(state, latitude, delta_longitude)
    return float(easting), float(northing), status


def inverse(
    state: ProjectionState,
    easting: float,
    northing: float
) -> Tuple[float, float, TranMercStatus]:
    """
    Convert a Transverse Mercator easting/northing back to a geographic coordinate.

    Args:
        state:
            The projection to use

        easting:
            Easting in meters

        northing:
            Northing in meters

    Returns:
        (latitude, longitude, status). Latitude and longitude are in radians, the
        longitude wrapped to (-pi, pi]. Both are NaN if the point lies at or beyond a
        pole (NORTHING_ERROR) or in the antipodal region of the projection
        (EASTING_ERROR). LON_WARNING marks a result far from the central meridian.
    """
    status = TranMercStatus.NO_ERROR

    if not math.isfinite(easting):
        status |= TranMercStatus.EASTING_ERROR

    if not math.isfinite(northing):
        status |= TranMercStatus.NORTHING_ERROR

    if status:
        return math.nan, math.nan, status

    footpoint = float(_footpoint(state, northing))
    if not abs(footpoint) < PI_OVER_2 - POLE_EPSILON:
        # Footpoint at or beyond a pole, cos(footpoint) is effectively zero
        return math.nan, math.nan, TranMercStatus.NORTHING_ERROR

    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        latitude, delta_longitude = _inverse_series(state, footpoint, easting)
    latitude, delta_longitude = float(latitude), float(delta_longitude)

    if not abs(delta_longitude) <= PI:
        status |= TranMercStatus.EASTING_ERROR

    if not abs(latitude) <= PI_OVER_2:
        status |= TranMercStatus.NORTHING_ERROR

    if status:
        return math.nan, math.nan, status

    if abs(delta_longitude) > LON_WARNING_DELTA:
        warn_once(_LON_WARNING_MESSAGE)
        status |= TranMercStatus.LON_WARNING

    longitude = normalize_longitude(state.parameters.central_meridian + delta_longitude)
    return latitude, longitude, status
