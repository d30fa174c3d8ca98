"""
Constants declarations for tranmerc
"""
import math

PI = math.pi
PI_OVER_2 = math.pi / 2
TWO_PI = 2 * math.pi

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Accepted ellipsoid shapes
MIN_A = 1.0e5  # meters
MAX_A = 1.0e8  # meters
MIN_INV_F = 250.0
MAX_INV_F = 350.0

# Accepted scale factors
MIN_SCALE_FACTOR = 0.3
MAX_SCALE_FACTOR = 3.0

# Largest latitude the forward transform accepts
MAX_LAT = math.radians(89.99)

# Distance from the central meridian beyond which accuracy is flagged as degraded
LON_WARNING_DELTA = math.radians(70.0)

# Distance from the central meridian within which forward then inverse recovers the
# input to 1e-9 radians; the truncated series degrade quickly beyond it
ROUND_TRIP_DELTA = math.radians(3.5)

# Footpoint latitudes closer than this to a pole cannot be inverted
POLE_EPSILON = 1.0e-10

# UTM
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING_SOUTH = 10_000_000.0
