import math

import numpy as np
from pytest import approx

from tranmerc import TranMercStatus, forward, forward_array, inverse, inverse_array

from tests.functions import wgs84_utm_like


def test_forward_array():
    state = wgs84_utm_like().state
    latitudes = np.array([0., 0.5, -0.8, math.pi / 2, 0.3, math.nan])
    longitudes = np.array([0., 0.02, -0.05, 0., 7., 0.])

    eastings, northings, status = forward_array(state, latitudes, longitudes)
    assert eastings.shape == northings.shape == status.shape == (6,)

    for i, (lat, lon) in enumerate(zip(latitudes, longitudes)):
        easting, northing, expected_status = forward(state, lat, lon)
        assert status[i] == expected_status
        if expected_status.is_fatal:
            assert math.isnan(eastings[i]) and math.isnan(northings[i])
        else:
            assert eastings[i] == approx(easting)
            assert northings[i] == approx(northing)

    assert list(status) == [
        TranMercStatus.NO_ERROR,
        TranMercStatus.NO_ERROR,
        TranMercStatus.NO_ERROR,
        TranMercStatus.LAT_ERROR,
        TranMercStatus.LON_ERROR,
        TranMercStatus.LAT_ERROR,
    ]


def test_forward_array_broadcast():
    state = wgs84_utm_like().state
    eastings, northings, status = forward_array(state, 0.5, [-0.01, 0., 0.01])
    assert eastings.shape == (3,)
    assert eastings[1] == 500_000.
    assert northings[0] == approx(northings[2])
    assert not status.any()


def test_forward_array_warning():
    state = wgs84_utm_like().state
    _, _, status = forward_array(state, [0.5, 0.5], [0.1, math.radians(100.)])
    assert list(status) == [TranMercStatus.NO_ERROR, TranMercStatus.LON_WARNING]


def test_inverse_array():
    state = wgs84_utm_like().state
    eastings = np.array([500_000., 510_000., 420_000., 500_000., math.nan, 3.0e7])
    northings = np.array([0., 4_500_000., -2_000_000., 2.0e7, 0., 0.])

    latitudes, longitudes, status = inverse_array(state, eastings, northings)
    assert latitudes.shape == longitudes.shape == status.shape == (6,)

    for i, (easting, northing) in enumerate(zip(eastings, northings)):
        latitude, longitude, expected_status = inverse(state, easting, northing)
        assert status[i] == expected_status
        if expected_status.is_fatal:
            assert math.isnan(latitudes[i]) and math.isnan(longitudes[i])
        else:
            assert latitudes[i] == approx(latitude, abs=1e-12)
            assert longitudes[i] == approx(longitude, abs=1e-12)

    assert list(status[3:]) == [
        TranMercStatus.NORTHING_ERROR,
        TranMercStatus.EASTING_ERROR,
        TranMercStatus.EASTING_ERROR,
    ]


def test_array_round_trip():
    tm = wgs84_utm_like()
    latitudes = np.linspace(-1.3, 1.3, 27)
    longitudes = np.linspace(-0.05, 0.05, 27)

    eastings, northings, status = tm.forward_array(latitudes, longitudes)
    assert not status.any()

    actual_lat, actual_lon, status = tm.inverse_array(eastings, northings)
    assert not status.any()
    assert actual_lat == approx(latitudes, abs=1e-9)
    assert actual_lon == approx(longitudes, abs=1e-9)
