"""
A caller-owned Transverse Mercator projection
"""
from __future__ import annotations

__all__ = ['TransverseMercator']

import math
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike
from typing_extensions import Self

from tranmerc._const import (
    UTM_FALSE_EASTING, UTM_FALSE_NORTHING_SOUTH, UTM_SCALE_FACTOR, WGS84_A, WGS84_F
)
from tranmerc.batch import forward_array, inverse_array
from tranmerc.parameters import (
    DEFAULT_STATE, ProjectionState, TranMercParameters, create_state
)
from tranmerc.projection import forward, inverse
from tranmerc.status import TranMercStatus


class TransverseMercator:
    """
    A Transverse Mercator projection. Holds the current ProjectionState, which is
    replaced as a whole whenever new parameters are accepted; transforms read it
    once per call, so they always see either the old or the new parameters in full.

    Args:
        a: (float) (Default WGS84)
            Semi-major axis of the ellipsoid, in meters

        f: (float) (Default WGS84)
            Flattening of the ellipsoid

        origin_latitude: (float) (Default 0.0)
            Latitude of the projection origin, in radians

        central_meridian: (float) (Default 0.0)
            Longitude of the center of the projection, in radians

        false_easting: (float) (Default 0.0)
            Easting at the projection origin, in meters

        false_northing: (float) (Default 0.0)
            Northing at the projection origin, in meters

        scale_factor: (float) (Default 1.0)
            Scale factor along the central meridian

    Raises:
        ValueError if any of the parameters is rejected
    """

    def __init__(
        self,
        a: float = WGS84_A,
        f: float = WGS84_F,
        origin_latitude: float = 0.0,
        central_meridian: float = 0.0,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
        scale_factor: float = 1.0,
    ):
        self._state = DEFAULT_STATE
        status = self.set_parameters(
            a, f, origin_latitude, central_meridian,
            false_easting, false_northing, scale_factor
        )
        if status:
            raise ValueError(
                f'Invalid Transverse Mercator parameters: {", ".join(status.describe())}'
            )

    def __repr__(self):
        params = self.get_parameters()
        return (
            f'<TransverseMercator(a={params.a}, 1/f={1 / params.f}, '
            f'origin_latitude={params.origin_latitude}, '
            f'central_meridian={params.central_meridian}, k0={params.scale_factor})>'
        )

    @classmethod
    def from_utm_zone(cls, zone: int, southern: bool = False) -> Self:
        """
        Creates the projection of a Universal Transverse Mercator zone on the WGS84
        ellipsoid.

        Args:
            zone:
                The UTM zone number, 1 through 60

            southern:
                (Default False) If True, uses the southern hemisphere false northing

        Returns:
            TransverseMercator
        """
        if not 1 <= zone <= 60:
            raise ValueError(f'UTM zone must be between 1 and 60, got {zone}')

        return cls(
            central_meridian=math.radians(6 * zone - 183),
            false_easting=UTM_FALSE_EASTING,
            false_northing=UTM_FALSE_NORTHING_SOUTH if southern else 0.0,
            scale_factor=UTM_SCALE_FACTOR,
        )

    @property
    def state(self) -> ProjectionState:
        """The current projection state"""
        return self._state

    def set_parameters(
        self,
        a: float,
        f: float,
        origin_latitude: float,
        central_meridian: float,
        false_easting: float,
        false_northing: float,
        scale_factor: float,
    ) -> TranMercStatus:
        """
        Validates and, if every parameter is accepted, applies a new set of projection
        parameters. If any parameter is rejected, the current parameters are kept.

        Args:
            See TransverseMercator

        Returns:
            TranMercStatus, with a bit set for every rejected parameter
        """
        state, status = create_state(
            a, f, origin_latitude, central_meridian,
            false_easting, false_northing, scale_factor
        )
        if state is not None:
            self._state = state

        return status

    def get_parameters(self) -> TranMercParameters:
        """The parameters currently in use"""
        return self._state.to_parameters()

    def forward(self, latitude: float, longitude: float) -> Tuple[float, float, TranMercStatus]:
        """
        Projects a latitude/longitude (radians) to easting/northing (meters).

        See tranmerc.projection.forward
        """
        return forward(self._state, latitude, longitude)

    def inverse(self, easting: float, northing: float) -> Tuple[float, float, TranMercStatus]:
        """
        Converts an easting/northing (meters) to latitude/longitude (radians).

        See tranmerc.projection.inverse
        """
        return inverse(self._state, easting, northing)

    def forward_array(
        self,
        latitude: ArrayLike,
        longitude: ArrayLike
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """See tranmerc.batch.forward_array"""
        return forward_array(self._state, latitude, longitude)

    def inverse_array(
        self,
        easting: ArrayLike,
        northing: ArrayLike
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """See tranmerc.batch.inverse_array"""
        return inverse_array(self._state, easting, northing)
