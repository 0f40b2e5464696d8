"""Chebyshev Type II IIR filter design functions."""

from ._bilinear_transform_zpk import bilinear_transform_zpk, prewarp_frequency
from ._chebyshev_type_2_design import chebyshev_type_2_design
from ._chebyshev_type_2_prototype import (
    chebyshev_type_2_prototype,
    chebyshev_type_2_transition_ratio,
)
from ._chebyshev_type_2_shelf_prototype import chebyshev_type_2_shelf_prototype
from ._exceptions import (
    CapacityError,
    DomainError,
    FilterDesignError,
    InvalidCutoffError,
    InvalidOrderError,
    NumericDegeneracyError,
    NyquistViolationError,
    SpecificationError,
)
from ._frequency_transform_zpk import frequency_transform_zpk
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._validation import (
    check_band,
    check_cutoff,
    check_design,
    check_gain,
    check_order,
    check_sampling_frequency,
    check_stability,
    check_stopband_attenuation,
)
from ._zpk_to_sos import zpk_to_sos

__all__ = [
    # Design functions
    "chebyshev_type_2_design",
    "chebyshev_type_2_prototype",
    "chebyshev_type_2_shelf_prototype",
    "chebyshev_type_2_transition_ratio",
    # Transforms
    "bilinear_transform_zpk",
    "frequency_transform_zpk",
    "lowpass_to_bandpass_zpk",
    "lowpass_to_bandstop_zpk",
    "lowpass_to_highpass_zpk",
    "lowpass_to_lowpass_zpk",
    "prewarp_frequency",
    # Conversions
    "zpk_to_sos",
    # Validation
    "check_band",
    "check_cutoff",
    "check_design",
    "check_gain",
    "check_order",
    "check_sampling_frequency",
    "check_stability",
    "check_stopband_attenuation",
    # Exceptions
    "CapacityError",
    "DomainError",
    "FilterDesignError",
    "InvalidCutoffError",
    "InvalidOrderError",
    "NumericDegeneracyError",
    "NyquistViolationError",
    "SpecificationError",
]
