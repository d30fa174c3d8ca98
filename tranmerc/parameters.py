"""
Projection parameters, their validation, and the constants derived from them.
"""
from __future__ import annotations

__all__ = [
    'DEFAULT_STATE', 'DerivedConstants', 'Ellipsoid', 'ProjectionParameters',
    'ProjectionState', 'TranMercParameters', 'create_state', 'validate_parameters'
]

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from pydantic import validate_call

from tranmerc._const import (
    MAX_A, MAX_INV_F, MAX_SCALE_FACTOR, MIN_A, MIN_INV_F, MIN_SCALE_FACTOR,
    PI, PI_OVER_2, WGS84_A, WGS84_F
)
from tranmerc.arc import arc_length_coefficients, footpoint_coefficient, meridional_arc_length
from tranmerc.status import TranMercStatus
from tranmerc.utils.functions import in_range, normalize_longitude
from tranmerc.utils.logging import LOGGER


class TranMercParameters(NamedTuple):
    """The parameters of a Transverse Mercator projection, as set by the caller"""
    a: float
    f: float
    origin_latitude: float
    central_meridian: float
    false_easting: float
    false_northing: float
    scale_factor: float


@dataclass(frozen=True)
class Ellipsoid:
    """
    The shape of the planet.

    Attributes:
        a: semi-major axis, in meters
        f: flattening
    """
    a: float
    f: float

    @property
    def inverse_flattening(self) -> float:
        return 1 / self.f

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self.f - self.f * self.f

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self.e2 / (1 - self.e2)


@dataclass(frozen=True)
class ProjectionParameters:
    """
    The placement of the projection on the ellipsoid. Angles are in radians, offsets
    in meters.
    """
    origin_latitude: float
    central_meridian: float
    false_easting: float
    false_northing: float
    scale_factor: float


@dataclass(frozen=True)
class DerivedConstants:
    """
    Constants derived from an Ellipsoid and ProjectionParameters, shared by every
    forward and inverse transform.

    Attributes:
        e2: first eccentricity squared
        ep2: second eccentricity squared
        e0, e1, e2c, e3: meridional arc length series coefficients
        e1r: footpoint latitude series coefficient
        m0: meridional arc length at the origin latitude, in meters
    """
    e2: float
    ep2: float
    e0: float
    e1: float
    e2c: float
    e3: float
    e1r: float
    m0: float

    @property
    def arc_coefficients(self) -> Tuple[float, float, float, float]:
        return self.e0, self.e1, self.e2c, self.e3

    @classmethod
    def derive(cls, ellipsoid: Ellipsoid, parameters: ProjectionParameters) -> DerivedConstants:
        """Derive all constants from an ellipsoid and a projection placement"""
        e2 = ellipsoid.e2
        coefficients = arc_length_coefficients(e2)
        return cls(
            e2,
            ellipsoid.ep2,
            *coefficients,
            e1r=footpoint_coefficient(e2),
            m0=float(
                meridional_arc_length(ellipsoid.a, coefficients, parameters.origin_latitude)
            ),
        )


@dataclass(frozen=True)
class ProjectionState:
    """
    A complete, immutable Transverse Mercator configuration: the ellipsoid, the
    projection placement, and the constants derived from both. New parameters
    produce a new state rather than modifying an existing one.
    """
    ellipsoid: Ellipsoid
    parameters: ProjectionParameters
    constants: DerivedConstants

    @classmethod
    def from_parameters(
        cls,
        ellipsoid: Ellipsoid,
        parameters: ProjectionParameters
    ) -> ProjectionState:
        """Build a state, deriving its constants. Does not validate."""
        return cls(ellipsoid, parameters, DerivedConstants.derive(ellipsoid, parameters))

    def to_parameters(self) -> TranMercParameters:
        """The parameters this state was built from"""
        return TranMercParameters(
            self.ellipsoid.a,
            self.ellipsoid.f,
            self.parameters.origin_latitude,
            self.parameters.central_meridian,
            self.parameters.false_easting,
            self.parameters.false_northing,
            self.parameters.scale_factor,
        )


def validate_parameters(
    a: float,
    f: float,
    origin_latitude: float,
    central_meridian: float,
    scale_factor: float,
) -> TranMercStatus:
    """
    Check each projection parameter against its accepted range. Every parameter is
    checked regardless of earlier failures.

    Args:
        a:
            Semi-major axis of the ellipsoid, in meters

        f:
            Flattening of the ellipsoid

        origin_latitude:
            Latitude of the projection origin, in radians. The poles are excluded.

        central_meridian:
            Longitude of the center of the projection, in radians

        scale_factor:
            Scale factor along the central meridian

    Returns:
        TranMercStatus, NO_ERROR if every parameter is acceptable
    """
    status = TranMercStatus.NO_ERROR

    if not in_range(a, MIN_A, MAX_A):
        status |= TranMercStatus.A_ERROR

    if f == 0 or not in_range(1 / f, MIN_INV_F, MAX_INV_F):
        status |= TranMercStatus.INV_F_ERROR

    if not -PI_OVER_2 < origin_latitude < PI_OVER_2:
        status |= TranMercStatus.ORIGIN_LAT_ERROR

    if not in_range(central_meridian, -PI, PI):
        status |= TranMercStatus.CENT_MER_ERROR

    if not in_range(scale_factor, MIN_SCALE_FACTOR, MAX_SCALE_FACTOR):
        status |= TranMercStatus.SCALE_FACTOR_ERROR

    return status


@validate_call
def create_state(
    a: float,
    f: float,
    origin_latitude: float,
    central_meridian: float,
    false_easting: float,
    false_northing: float,
    scale_factor: float,
) -> Tuple[Optional[ProjectionState], TranMercStatus]:
    """
    Validate a set of projection parameters and, if all are acceptable, derive a new
    projection state from them.

    Args:
        a:
            Semi-major axis of the ellipsoid, in meters

        f:
            Flattening of the ellipsoid

        origin_latitude:
            Latitude of the projection origin, in radians

        central_meridian:
            Longitude of the center of the projection, in radians. Stored wrapped
            to (-pi, pi].

        false_easting:
            Easting at the projection origin, in meters

        false_northing:
            Northing at the projection origin, in meters

        scale_factor:
            Scale factor along the central meridian

    Returns:
        (ProjectionState, TranMercStatus); the state is None if any parameter was
        rejected
    """
    status = validate_parameters(a, f, origin_latitude, central_meridian, scale_factor)
    if status:
        LOGGER.warning(
            'Rejected Transverse Mercator parameters: %s', ', '.join(status.describe())
        )
        return None, status

    state = ProjectionState.from_parameters(
        Ellipsoid(a, f),
        ProjectionParameters(
            origin_latitude,
            normalize_longitude(central_meridian),
            false_easting,
            false_northing,
            scale_factor,
        )
    )
    return state, status


DEFAULT_STATE = ProjectionState.from_parameters(
    Ellipsoid(WGS84_A, WGS84_F),
    ProjectionParameters(0.0, 0.0, 0.0, 0.0, 1.0),
)
