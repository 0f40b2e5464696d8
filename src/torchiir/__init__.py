"""torchiir: Chebyshev Type II IIR filter design for PyTorch."""

from . import (
    filter,
    filter_design,
)

__all__ = [
    "filter",
    "filter_design",
]

__version__ = "0.1.0"
