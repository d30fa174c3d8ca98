import math

import pydantic
import pytest
from pytest import approx

from tranmerc import (
    DEFAULT_STATE, Ellipsoid, ProjectionParameters, ProjectionState, TranMercParameters,
    TranMercStatus, create_state
)
from tranmerc._const import WGS84_A, WGS84_F
from tranmerc.arc import meridional_arc_length
from tranmerc.parameters import validate_parameters


def test_ellipsoid():
    ellipsoid = Ellipsoid(WGS84_A, WGS84_F)
    assert ellipsoid.inverse_flattening == approx(298.257223563)
    assert ellipsoid.e2 == approx(0.00669437999014, rel=1e-10)
    assert ellipsoid.ep2 == approx(0.00673949674228, rel=1e-10)


def test_derived_constants():
    state = ProjectionState.from_parameters(
        Ellipsoid(WGS84_A, WGS84_F),
        ProjectionParameters(math.pi / 4, 0., 0., 0., 1.)
    )
    consts = state.constants
    assert consts.e2 == state.ellipsoid.e2
    assert consts.ep2 == state.ellipsoid.ep2
    assert consts.arc_coefficients == (consts.e0, consts.e1, consts.e2c, consts.e3)
    assert consts.e1r == approx(WGS84_F / (2 - WGS84_F), rel=1e-10)
    assert consts.m0 == approx(
        meridional_arc_length(WGS84_A, consts.arc_coefficients, math.pi / 4)
    )
    assert isinstance(consts.m0, float)


def test_default_state():
    assert DEFAULT_STATE.to_parameters() == TranMercParameters(
        WGS84_A, WGS84_F, 0., 0., 0., 0., 1.
    )
    assert DEFAULT_STATE.constants.m0 == 0.


def test_validate_parameters():
    assert validate_parameters(WGS84_A, WGS84_F, 0., 0., 1.) == TranMercStatus.NO_ERROR

    # Scale factor and central meridian bounds are inclusive
    assert validate_parameters(WGS84_A, 1 / 251, 0., math.pi, 0.3) == TranMercStatus.NO_ERROR
    assert validate_parameters(WGS84_A, 1 / 349, 0., -math.pi, 3.0) == TranMercStatus.NO_ERROR

    assert validate_parameters(-1., WGS84_F, 0., 0., 1.) == TranMercStatus.A_ERROR
    assert validate_parameters(WGS84_A, 0.5, 0., 0., 1.) == TranMercStatus.INV_F_ERROR
    assert validate_parameters(WGS84_A, 0., 0., 0., 1.) == TranMercStatus.INV_F_ERROR
    assert validate_parameters(WGS84_A, WGS84_F, math.pi / 2, 0., 1.) == TranMercStatus.ORIGIN_LAT_ERROR
    assert validate_parameters(WGS84_A, WGS84_F, -math.pi / 2, 0., 1.) == TranMercStatus.ORIGIN_LAT_ERROR
    assert validate_parameters(WGS84_A, WGS84_F, 0., 3.5, 1.) == TranMercStatus.CENT_MER_ERROR
    assert validate_parameters(WGS84_A, WGS84_F, 0., 0., 0.) == TranMercStatus.SCALE_FACTOR_ERROR
    assert validate_parameters(WGS84_A, WGS84_F, 0., 0., 10.) == TranMercStatus.SCALE_FACTOR_ERROR


def test_validate_parameters_nan():
    assert validate_parameters(math.nan, math.nan, math.nan, math.nan, math.nan) == (
        TranMercStatus.A_ERROR |
        TranMercStatus.INV_F_ERROR |
        TranMercStatus.ORIGIN_LAT_ERROR |
        TranMercStatus.CENT_MER_ERROR |
        TranMercStatus.SCALE_FACTOR_ERROR
    )


def test_validate_parameters_reports_all():
    status = validate_parameters(-1., 0.5, math.pi / 2, 4., 10.)
    assert status.describe() == [
        'ORIGIN_LAT_ERROR', 'CENT_MER_ERROR', 'A_ERROR', 'INV_F_ERROR', 'SCALE_FACTOR_ERROR'
    ]


def test_create_state():
    state, status = create_state(WGS84_A, WGS84_F, 0.5, 0.1, 500_000., 100., 0.9996)
    assert status == TranMercStatus.NO_ERROR
    assert state.to_parameters() == TranMercParameters(
        WGS84_A, WGS84_F, 0.5, 0.1, 500_000., 100., 0.9996
    )

    # Integers are coerced
    state, status = create_state(6378137, WGS84_F, 0, 0, 0, 0, 1)
    assert status == TranMercStatus.NO_ERROR
    assert isinstance(state.ellipsoid.a, float)

    # Central meridian is stored in (-pi, pi]
    state, _ = create_state(WGS84_A, WGS84_F, 0., -math.pi, 0., 0., 1.)
    assert state.parameters.central_meridian == math.pi


def test_create_state_rejected(caplog):
    state, status = create_state(WGS84_A, WGS84_F, math.pi / 2, 0., 0., 0., 1.)
    assert state is None
    assert status == TranMercStatus.ORIGIN_LAT_ERROR
    assert 'ORIGIN_LAT_ERROR' in caplog.text


def test_create_state_non_numeric():
    with pytest.raises(pydantic.ValidationError):
        create_state('not a number', WGS84_F, 0., 0., 0., 0., 1.)
