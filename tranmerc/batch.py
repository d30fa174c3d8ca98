"""
Vectorized forward and inverse transforms over numpy arrays.

Each element is validated and transformed exactly as the scalar transforms in
tranmerc.projection would, and carries its own status code.
"""

__all__ = ['forward_array', 'inverse_array']

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from tranmerc._const import LON_WARNING_DELTA, MAX_LAT, PI, PI_OVER_2, POLE_EPSILON, TWO_PI
from tranmerc.parameters import ProjectionState
from tranmerc.projection import (
    _LON_WARNING_MESSAGE, _footpoint, _forward_series, _inverse_series
)
from tranmerc.status import TranMercStatus
from tranmerc.utils.functions import normalize_longitude
from tranmerc.utils.logging import warn_once


def _flag(status: np.ndarray, mask: np.ndarray, flag: TranMercStatus) -> None:
    status[mask] |= int(flag)


def forward_array(
    state: ProjectionState,
    latitude: ArrayLike,
    longitude: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Project arrays of geographic coordinates to Transverse Mercator.

    Args:
        state:
            The projection to use

        latitude:
            Latitudes in radians

        longitude:
            Longitudes in radians; broadcast against latitude

    Returns:
        (easting, northing, status) arrays of the broadcast shape. Status holds the
        integer TranMercStatus code of each element; elements with LAT_ERROR or
        LON_ERROR have NaN easting and northing.
    """
    lat, lon = np.broadcast_arrays(
        np.asarray(latitude, dtype=float), np.asarray(longitude, dtype=float)
    )
    status = np.zeros(lat.shape, dtype=np.int64)

    # Comparisons are negated so that NaN is always flagged
    _flag(status, ~((lat >= -MAX_LAT) & (lat <= MAX_LAT)), TranMercStatus.LAT_ERROR)
    _flag(status, ~((lon >= -PI) & (lon <= TWO_PI)), TranMercStatus.LON_ERROR)
    failed = status != 0

    delta_longitude = normalize_longitude(
        np.where(failed, 0.0, lon) - state.parameters.central_meridian
    )
    warned = ~failed & (np.abs(delta_longitude) > LON_WARNING_DELTA)
    if warned.any():
        warn_once(_LON_WARNING_MESSAGE)
        _flag(status, warned, TranMercStatus.LON_WARNING)

    easting, northing = _forward_series(state, np.where(failed, 0.0, lat), delta_longitude)
    easting = np.where(failed, np.nan, easting)
    northing = np.where(failed, np.nan, northing)
    return easting, northing, status


def inverse_array(
    state: ProjectionState,
    easting: ArrayLike,
    northing: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert arrays of Transverse Mercator coordinates back to geographic coordinates.

    Args:
        state:
            The projection to use

        easting:
            Eastings in meters

        northing:
            Northings in meters; broadcast against easting

    Returns:
        (latitude, longitude, status) arrays of the broadcast shape, in radians.
        Status holds the integer TranMercStatus code of each element; elements with
        EASTING_ERROR or NORTHING_ERROR have NaN latitude and longitude.
    """
    east, north = np.broadcast_arrays(
        np.asarray(easting, dtype=float), np.asarray(northing, dtype=float)
    )
    status = np.zeros(east.shape, dtype=np.int64)

    _flag(status, ~np.isfinite(east), TranMercStatus.EASTING_ERROR)
    _flag(status, ~np.isfinite(north), TranMercStatus.NORTHING_ERROR)

    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        footpoint = _footpoint(state, np.where(status != 0, state.parameters.false_northing, north))
        polar = (status == 0) & ~(np.abs(footpoint) < PI_OVER_2 - POLE_EPSILON)
        # Polar points report only the northing error
        status[polar] = int(TranMercStatus.NORTHING_ERROR)
        failed = status != 0

        latitude, delta_longitude = _inverse_series(
            state,
            np.where(failed, 0.0, footpoint),
            np.where(failed, state.parameters.false_easting, east),
        )
        longitude = normalize_longitude(state.parameters.central_meridian + delta_longitude)

        _flag(status, ~failed & ~(np.abs(delta_longitude) <= PI), TranMercStatus.EASTING_ERROR)
        _flag(status, ~failed & ~(np.abs(latitude) <= PI_OVER_2), TranMercStatus.NORTHING_ERROR)
        failed = status != 0

        warned = ~failed & (np.abs(delta_longitude) > LON_WARNING_DELTA)

    if warned.any():
        warn_once(_LON_WARNING_MESSAGE)
        _flag(status, warned, TranMercStatus.LON_WARNING)

    latitude = np.where(failed, np.nan, latitude)
    longitude = np.where(failed, np.nan, longitude)
    return latitude, longitude, status
