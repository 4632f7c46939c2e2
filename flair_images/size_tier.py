"""
SizeTier - Fixed output heights for flair image variants.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SizeTier:
    """
    One output size.

    Attributes:
        tier: Tier identifier used in the variant filename (x1, x2, x3)
        height: Target height in pixels; width follows the source aspect ratio
    """
    tier: int
    height: int

    @property
    def suffix(self) -> str:
        return f"-x{self.tier}"


SIZE_TIERS: Tuple[SizeTier, ...] = (
    SizeTier(tier=1, height=16),
    SizeTier(tier=2, height=28),
    SizeTier(tier=3, height=54),
)
