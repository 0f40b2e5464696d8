"""Real-time Chebyshev Type II filters with a reserved maximum order."""

from ._analog_prototype import AnalogLowPass, AnalogLowShelf
from ._cascade_filter import CascadeFilter
from ._chebyshev_type_2 import (
    BandPass,
    BandShelf,
    BandStop,
    HighPass,
    HighShelf,
    LowPass,
    LowShelf,
)
from ._pole_zero_layout import PoleZeroLayout
from ._state import DirectFormI, DirectFormII, TransposedDirectFormII

__all__ = [
    # Filters
    "BandPass",
    "BandShelf",
    "BandStop",
    "CascadeFilter",
    "HighPass",
    "HighShelf",
    "LowPass",
    "LowShelf",
    # Analog prototypes
    "AnalogLowPass",
    "AnalogLowShelf",
    "PoleZeroLayout",
    # Execution topologies
    "DirectFormI",
    "DirectFormII",
    "TransposedDirectFormII",
]
