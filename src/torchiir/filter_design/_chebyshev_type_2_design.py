"""Chebyshev Type II digital filter design function."""

from __future__ import annotations

from typing import Literal, Optional

import torch
from torch import Tensor

from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._chebyshev_type_2_shelf_prototype import chebyshev_type_2_shelf_prototype
from ._frequency_transform_zpk import frequency_transform_zpk
from ._validation import (
    SHELF_FILTER_TYPES,
    check_design,
    check_order,
    check_stability,
)
from ._zpk_to_sos import zpk_to_sos

FilterType = Literal[
    "lowpass",
    "highpass",
    "bandpass",
    "bandstop",
    "lowshelf",
    "highshelf",
    "bandshelf",
]


def chebyshev_type_2_design(
    order: int,
    sampling_frequency: float,
    stopband_attenuation_db: float,
    filter_type: FilterType = "lowpass",
    *,
    cutoff_frequency: Optional[float] = None,
    center_frequency: Optional[float] = None,
    width_frequency: Optional[float] = None,
    gain_db: Optional[float] = None,
    output: Literal["sos", "zpk"] = "sos",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor | tuple[Tensor, Tensor, Tensor]:
    """Design an Nth-order digital Chebyshev Type II filter.

    Chebyshev Type II filters have a monotonic passband and an equiripple
    stopband whose attenuation never falls below ``stopband_attenuation_db``.

    Parameters
    ----------
    order : int
        The order of the prototype. Band types produce twice as many poles.
    sampling_frequency : float
        The sampling frequency of the digital system (Hz).
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be positive.
    filter_type : str, optional
        "lowpass" (default), "highpass", "bandpass", "bandstop", "lowshelf",
        "highshelf" or "bandshelf".
    cutoff_frequency : float, optional
        Half-power frequency (Hz) of lowpass and highpass filters; the
        transition midpoint of lowshelf and highshelf filters.
    center_frequency : float, optional
        Center frequency (Hz) of band types.
    width_frequency : float, optional
        Width (Hz) of band types. The edges ``center_frequency ∓
        width_frequency / 2`` fall on the half-power points (the transition
        midpoints for bandshelf).
    gain_db : float, optional
        Passband gain of the shelf types in decibels.
    output : {"sos", "zpk"}, optional
        Type of output:
        - "sos": second-order sections (default, recommended)
        - "zpk": zeros, poles, gain
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype(). The design itself
        always runs in double precision.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    sos : Tensor
        Second-order sections representation of the filter (if output="sos").
        Shape: (n_sections, 6) where each row is [b0, b1, b2, a0, a1, a2].
    zeros, poles, gain : tuple of Tensors
        Zeros, poles, and gain of the filter (if output="zpk").

    Raises
    ------
    DomainError
        If any parameter is outside its numeric domain.
    NumericDegeneracyError
        If the design produced a pole on or outside the unit circle.

    Notes
    -----
    The filter is designed by:
    1. Creating an analog Chebyshev Type II lowpass (or low-shelf) prototype
    2. Transforming it to the pre-warped target frequencies
    3. Converting to digital using the bilinear transform

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import chebyshev_type_2_design
    >>> sos = chebyshev_type_2_design(
    ...     4, 48000.0, 40.0, cutoff_frequency=1000.0
    ... )
    >>> sos.shape
    torch.Size([2, 6])
    """
    error = check_order(order) or check_design(
        filter_type,
        sampling_frequency,
        stopband_attenuation_db,
        cutoff_frequency=cutoff_frequency,
        center_frequency=center_frequency,
        width_frequency=width_frequency,
        gain_db=gain_db,
    )
    if error is not None:
        raise error

    if output not in ("sos", "zpk"):
        raise ValueError(f"Invalid output format: {output}")

    if dtype is None:
        dtype = torch.get_default_dtype()

    if filter_type in SHELF_FILTER_TYPES:
        prototype = chebyshev_type_2_shelf_prototype(
            order, gain_db, stopband_attenuation_db, dtype=torch.float64
        )
    else:
        prototype = chebyshev_type_2_prototype(
            order, stopband_attenuation_db, dtype=torch.float64
        )

    z_digital, p_digital, k_digital = frequency_transform_zpk(
        *prototype,
        filter_type,
        sampling_frequency,
        cutoff_frequency=cutoff_frequency,
        center_frequency=center_frequency,
        width_frequency=width_frequency,
    )

    error = check_stability(p_digital)
    if error is not None:
        raise error

    if output == "zpk":
        complex_dtype = (
            torch.complex64 if dtype == torch.float32 else torch.complex128
        )
        return (
            z_digital.to(dtype=complex_dtype, device=device),
            p_digital.to(dtype=complex_dtype, device=device),
            k_digital.to(dtype=dtype, device=device),
        )

    return zpk_to_sos(z_digital, p_digital, k_digital).to(
        dtype=dtype, device=device
    )
