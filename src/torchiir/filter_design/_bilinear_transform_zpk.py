"""Bilinear transform for analog to digital filter conversion."""

import math
from typing import Tuple, Union

import torch
from torch import Tensor


def prewarp_frequency(
    frequency: float,
    sampling_frequency: float,
) -> float:
    """
    Analog angular frequency that the bilinear transform maps onto ``frequency``.

    .. math::
        \\omega_a = 2 f_s \\tan(\\pi f / f_s)

    Parameters
    ----------
    frequency : float
        Digital frequency (Hz), strictly between 0 and Nyquist.
    sampling_frequency : float
        Sampling frequency (Hz).

    Returns
    -------
    float
        Pre-warped analog frequency (rad/s).
    """
    return (
        2
        * sampling_frequency
        * math.tan(math.pi * frequency / sampling_frequency)
    )


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    sampling_frequency: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Discretize an analog zpk filter with the bilinear transform.

    Substitutes 2 fs (z - 1) / (z + 1) for s. The left half-plane maps into
    the unit disc and the imaginary axis onto the unit circle, compressed
    as omega_d = 2 arctan(omega_a / (2 fs)). Use :func:`prewarp_frequency`
    to pin chosen frequencies before discretizing.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the analog filter.
    gain : Tensor
        Gain of the analog filter.
    sampling_frequency : float or Tensor
        Sampling frequency (Hz).

    Returns
    -------
    zeros_digital : Tensor
        Digital zeros, as many as there are poles. Zeros at infinity land on
        z = -1.
    poles_digital : Tensor
        Digital poles.
    gain_digital : Tensor
        Digital gain.
    """
    fs2 = 2 * torch.as_tensor(
        sampling_frequency, dtype=gain.dtype, device=gain.device
    )
    excess = poles.numel() - zeros.numel()

    nyquist = torch.full(
        (excess,), -1.0, dtype=poles.dtype, device=poles.device
    )
    zeros_digital = torch.cat([_to_z(zeros, fs2).to(poles.dtype), nyquist])

    gain_digital = gain * torch.real(
        torch.prod(fs2 - zeros) / torch.prod(fs2 - poles)
    )

    return zeros_digital, _to_z(poles, fs2), gain_digital


def _to_z(roots: Tensor, fs2: Tensor) -> Tensor:
    return (fs2 + roots) / (fs2 - roots)
