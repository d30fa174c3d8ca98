from tranmerc._version import __version__  # noqa: F401
from tranmerc.utils.logging import LOGGER
from tranmerc.status import TranMercStatus
from tranmerc.parameters import (
    DEFAULT_STATE, DerivedConstants, Ellipsoid, ProjectionParameters, ProjectionState,
    TranMercParameters, create_state
)
from tranmerc.projection import forward, inverse
from tranmerc.batch import forward_array, inverse_array
from tranmerc.transverse_mercator import TransverseMercator


__all__ = [
    'DEFAULT_STATE',
    'DerivedConstants',
    'Ellipsoid',
    'ProjectionParameters',
    'ProjectionState',
    'TranMercParameters',
    'TranMercStatus',
    'TransverseMercator',
    'create_state',
    'forward',
    'forward_array',
    'inverse',
    'inverse_array',
    'LOGGER',
]
