"""Chebyshev Type II analog lowpass filter prototype."""

import inspect
import math
import warnings
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._validation import check_order, check_stopband_attenuation


def chebyshev_type_2_transition_ratio(
    order: int,
    stopband_attenuation_db: float,
) -> float:
    """
    Ratio between the stopband edge and the half-power cutoff.

    The prototypes in this module are normalized so that the half-power
    (-3.01 dB) point lies at 1 rad/s. The equiripple stopband, where the
    response never rises above ``-stopband_attenuation_db``, starts at the
    returned ratio.

    Parameters
    ----------
    order : int
        Number of poles, at least 1.
    stopband_attenuation_db : float
        Attenuation floor of the stopband (dB), greater than 0.

    Returns
    -------
    ratio : float
        ``cosh(acosh(1/eps) / order)`` with
        ``eps = 1 / sqrt(10^(Rs/10) - 1)``. Always ``>= 1``.

    Notes
    -----
    With an attenuation of at most 10*log10(2) dB the response never falls
    to half power. The cutoff then coincides with the stopband edge and the
    ratio is 1; a warning is emitted.
    """
    error = check_order(order) or check_stopband_attenuation(
        stopband_attenuation_db
    )
    if error is not None:
        raise error

    inverse_eps = math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    if inverse_eps <= 1:
        warnings.warn(
            f"Stopband attenuation of {stopband_attenuation_db} dB never "
            "reaches half power; the cutoff is placed at the stopband edge",
            stacklevel=_caller_stacklevel(),
        )
        return 1.0

    return math.cosh(math.acosh(inverse_eps) / order)


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Inverse Chebyshev lowpass prototype with its half-power point at 1 rad/s.

    The passband falls off monotonically from 0 dB at DC. Past the stopband
    edge (see :func:`chebyshev_type_2_transition_ratio`) the response
    ripples between ``-stopband_attenuation_db`` and the transmission zeros
    on the imaginary axis.

    Parameters
    ----------
    order : int
        Number of poles, at least 1.
    stopband_attenuation_db : float
        Attenuation floor of the stopband (dB), greater than 0.
    dtype : torch.dtype, optional
        Real dtype of the gain; roots use the matching complex dtype.
        Defaults to ``torch.get_default_dtype()``.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        ``2 * (order // 2)`` purely imaginary zeros.
    poles : Tensor
        ``order`` left half-plane poles.
    gain : Tensor
        Scalar gain giving a DC response of exactly 1.

    Raises
    ------
    InvalidOrderError
        If ``order`` is not a positive integer.
    SpecificationError
        If ``stopband_attenuation_db`` is not finite and positive.

    Notes
    -----
    With :math:`\\epsilon = 1 / \\sqrt{10^{R_s/10} - 1}`,
    :math:`a = \\operatorname{asinh}(1/\\epsilon) / n` and
    :math:`\\theta_k = \\pi (2k - 1) / (2n)`, the poles are the reciprocals of
    the Chebyshev Type I points

    .. math::
        p_k = -\\sinh(a) \\sin(\\theta_k) + j \\cosh(a) \\cos(\\theta_k)

    and the zeros are :math:`1 / (j \\cos(\\theta_k))` for
    :math:`k = 1, \\dots, \\lfloor n/2 \\rfloor` together with their
    conjugates. For odd order the real pole has no finite zero.

    Poles and zeros are then scaled by
    :func:`chebyshev_type_2_transition_ratio` so that the half-power point is
    at 1 rad/s. Conjugate pairs come first, the real pole (odd order) last.

    Examples
    --------
    >>> from torchiir.filter_design import chebyshev_type_2_prototype
    >>> zeros, poles, gain = chebyshev_type_2_prototype(5, 60.0)
    >>> zeros.numel(), poles.numel()
    (4, 5)
    """
    error = check_order(order) or check_stopband_attenuation(
        stopband_attenuation_db
    )
    if error is not None:
        raise error

    dtype, complex_dtype, device = _resolve_dtypes(dtype, device)

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    ratio = chebyshev_type_2_transition_ratio(order, stopband_attenuation_db)

    a = math.asinh(1.0 / eps) / order
    poles = ratio / _chebyshev_type_1_points(order, a, device)

    # Zeros at 1/(j*cos(theta_k)); the real pole of odd order keeps its zero
    # at infinity
    k = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k - 1) / (2 * order)
    upper_zeros = ratio / torch.complex(
        torch.zeros_like(theta), torch.cos(theta)
    )
    zeros = _conjugate_pairs(upper_zeros)

    gain = _unit_dc_gain(zeros, poles)

    return zeros.to(complex_dtype), poles.to(complex_dtype), gain.to(dtype)


def _chebyshev_type_1_points(
    order: int, a: float, device: Optional[torch.device]
) -> Tensor:
    """Left half-plane Chebyshev Type I points for the parameter ``a``.

    Conjugate pairs come first, the real point (odd order) last.
    """
    k = torch.arange(1, order // 2 + 1, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k - 1) / (2 * order)
    upper = torch.complex(
        -math.sinh(a) * torch.sin(theta), math.cosh(a) * torch.cos(theta)
    )
    points = _conjugate_pairs(upper)

    if order % 2 == 1:
        real = torch.tensor(
            [complex(-math.sinh(a), 0.0)], dtype=torch.complex128, device=device
        )
        points = torch.cat([points, real])

    return points


def _conjugate_pairs(x: Tensor) -> Tensor:
    """Interleave ``x`` with its conjugate: [x0, conj(x0), x1, conj(x1), ...]."""
    return torch.stack([x, x.conj()], dim=-1).reshape(-1)


def _unit_dc_gain(zeros: Tensor, poles: Tensor) -> Tensor:
    # H(0) = k prod(-z) / prod(-p) = 1
    return (torch.prod(-poles) / torch.prod(-zeros)).real


def _resolve_dtypes(
    dtype: Optional[torch.dtype], device: Optional[torch.device]
) -> Tuple[torch.dtype, torch.dtype, torch.device]:
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    if dtype == torch.float32:
        complex_dtype = torch.complex64
    elif dtype == torch.float64:
        complex_dtype = torch.complex128
    else:
        raise ValueError(f"Unsupported dtype: {dtype}")

    return dtype, complex_dtype, device


def _caller_stacklevel() -> int:
    """``stacklevel`` pointing at the first caller outside this package."""
    package = __name__.split(".")[0] + "."
    frame = inspect.currentframe().f_back
    level = 1
    while frame is not None and frame.f_globals.get(
        "__name__", ""
    ).startswith(package):
        frame = frame.f_back
        level += 1
    return level
