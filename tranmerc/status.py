"""
Status codes reported by parameter setting and by the forward and inverse transforms.

Every check that fails sets its own bit, and all bits found in one call are combined,
so a single status describes every problem with the inputs rather than the first one.
"""

__all__ = ['TranMercStatus']

from enum import IntFlag
from typing import List


class TranMercStatus(IntFlag):
    """Bitmask of Transverse Mercator errors and warnings"""

    NO_ERROR = 0x0000
    LAT_ERROR = 0x0001
    LON_ERROR = 0x0002
    EASTING_ERROR = 0x0004
    NORTHING_ERROR = 0x0008
    ORIGIN_LAT_ERROR = 0x0010
    CENT_MER_ERROR = 0x0020
    A_ERROR = 0x0040
    INV_F_ERROR = 0x0080
    SCALE_FACTOR_ERROR = 0x0100
    LON_WARNING = 0x0200

    def describe(self) -> List[str]:
        """
        The names of the bits set in this status, ordered by bit value.

        Returns:
            List[str]; empty when no bit is set
        """
        return [
            member.name
            for member in sorted(TranMercStatus, key=lambda x: x.value)
            if member.value and self.value & member.value
        ]

    @property
    def is_fatal(self) -> bool:
        """True if any bit other than the longitude warning is set"""
        return bool(self.value & ~TranMercStatus.LON_WARNING.value)
