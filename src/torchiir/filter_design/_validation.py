"""Parameter validation for filter design.

Every check returns the error it found instead of raising it, so that
callers can reject a request before touching any state and decide for
themselves whether to raise or report.
"""

import math
from numbers import Integral
from typing import Optional

from torch import Tensor

from ._exceptions import (
    CapacityError,
    FilterDesignError,
    InvalidCutoffError,
    InvalidOrderError,
    NumericDegeneracyError,
    NyquistViolationError,
    SpecificationError,
)

FILTER_TYPES = (
    "lowpass",
    "highpass",
    "bandpass",
    "bandstop",
    "lowshelf",
    "highshelf",
    "bandshelf",
)

BAND_FILTER_TYPES = ("bandpass", "bandstop", "bandshelf")

SHELF_FILTER_TYPES = ("lowshelf", "highshelf", "bandshelf")


def check_order(
    order: int, max_order: Optional[int] = None
) -> Optional[FilterDesignError]:
    if isinstance(order, bool) or not isinstance(order, Integral):
        return InvalidOrderError(
            f"Filter order must be an integer, got {order!r}"
        )
    if order < 1:
        return InvalidOrderError(f"Filter order must be positive, got {order}")
    if max_order is not None and order > max_order:
        return CapacityError(
            f"Requested order {order} exceeds the reserved order {max_order}"
        )
    return None


def check_stopband_attenuation(
    stopband_attenuation_db: float,
) -> Optional[FilterDesignError]:
    if not math.isfinite(stopband_attenuation_db):
        return SpecificationError(
            f"Stopband attenuation must be finite, got {stopband_attenuation_db}"
        )
    if stopband_attenuation_db <= 0:
        return SpecificationError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}"
        )
    return None


def check_gain(gain_db: float) -> Optional[FilterDesignError]:
    if not math.isfinite(gain_db):
        return SpecificationError(f"Shelf gain must be finite, got {gain_db}")
    return None


def check_sampling_frequency(
    sampling_frequency: float,
) -> Optional[FilterDesignError]:
    if not math.isfinite(sampling_frequency) or sampling_frequency <= 0:
        return SpecificationError(
            f"Sampling frequency must be finite and positive, got {sampling_frequency}"
        )
    return None


def check_cutoff(
    cutoff_frequency: float,
    sampling_frequency: float,
    name: str = "Cutoff frequency",
) -> Optional[FilterDesignError]:
    if not math.isfinite(cutoff_frequency) or cutoff_frequency <= 0:
        return InvalidCutoffError(
            f"{name} must be finite and positive, got {cutoff_frequency}"
        )
    nyquist = sampling_frequency / 2
    if cutoff_frequency >= nyquist:
        return NyquistViolationError(
            f"{name} must be below Nyquist ({nyquist}), got {cutoff_frequency}"
        )
    return None


def check_band(
    center_frequency: float,
    width_frequency: float,
    sampling_frequency: float,
    bandstop: bool = False,
) -> Optional[FilterDesignError]:
    error = check_cutoff(
        center_frequency, sampling_frequency, name="Center frequency"
    )
    if error is not None:
        return error
    if not math.isfinite(width_frequency) or width_frequency <= 0:
        return InvalidCutoffError(
            f"Width frequency must be finite and positive, got {width_frequency}"
        )

    low = center_frequency - width_frequency / 2
    high = center_frequency + width_frequency / 2
    if low <= 0:
        return InvalidCutoffError(
            f"Lower band edge must be positive, got {low} "
            f"(center {center_frequency}, width {width_frequency})"
        )
    nyquist = sampling_frequency / 2
    if high >= nyquist:
        return NyquistViolationError(
            f"Upper band edge must be below Nyquist ({nyquist}), got {high} "
            f"(center {center_frequency}, width {width_frequency})"
        )
    if bandstop and width_frequency >= center_frequency:
        return SpecificationError(
            f"Bandstop width ({width_frequency}) must be smaller than its "
            f"center frequency ({center_frequency})"
        )
    return None


def check_stability(poles: Tensor) -> Optional[FilterDesignError]:
    if poles.numel() == 0:
        return None
    radius = poles.abs().max().item()
    if not radius < 1:
        return NumericDegeneracyError(
            f"Digital pole on or outside the unit circle (|p| = {radius})"
        )
    return None


def check_design(
    filter_type: str,
    sampling_frequency: float,
    stopband_attenuation_db: float,
    cutoff_frequency: Optional[float] = None,
    center_frequency: Optional[float] = None,
    width_frequency: Optional[float] = None,
    gain_db: Optional[float] = None,
) -> Optional[FilterDesignError]:
    """Validate the frequency, gain and attenuation of a design request.

    Parameters that the filter type does not use are ignored; parameters it
    needs must not be ``None``.
    """
    if filter_type not in FILTER_TYPES:
        return SpecificationError(
            f"Invalid filter_type: {filter_type!r}, expected one of {FILTER_TYPES}"
        )

    error = check_sampling_frequency(sampling_frequency)
    if error is not None:
        return error

    if filter_type in BAND_FILTER_TYPES:
        if center_frequency is None or width_frequency is None:
            return InvalidCutoffError(
                f"{filter_type} requires center_frequency and width_frequency"
            )
        error = check_band(
            center_frequency,
            width_frequency,
            sampling_frequency,
            bandstop=filter_type == "bandstop",
        )
    else:
        if cutoff_frequency is None:
            return InvalidCutoffError(f"{filter_type} requires cutoff_frequency")
        error = check_cutoff(cutoff_frequency, sampling_frequency)
    if error is not None:
        return error

    if filter_type in SHELF_FILTER_TYPES:
        if gain_db is None:
            return SpecificationError(f"{filter_type} requires gain_db")
        error = check_gain(gain_db)
        if error is not None:
            return error

    return check_stopband_attenuation(stopband_attenuation_db)
