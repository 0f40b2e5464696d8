"""Lowpass to bandpass mapping for analog prototypes."""

from typing import Tuple, Union

import torch
from torch import Tensor


def lowpass_to_bandpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center_frequency: Union[float, Tensor] = 1.0,
    bandwidth: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Center a unit-cutoff prototype on ``center_frequency``.

    Substitutes (s^2 + center_frequency^2) / (bandwidth * s) for s. The
    prototype's passband, from -1 to 1 rad/s, stretches over a band
    ``bandwidth`` rad/s wide whose edges have geometric mean
    ``center_frequency``. A low shelf becomes a band shelf.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the analog prototype.
    gain : Tensor
        Gain of the analog prototype.
    center_frequency : float or Tensor
        Geometric center of the band (rad/s).
    bandwidth : float or Tensor
        Distance between the band edges (rad/s).

    Returns
    -------
    zeros_new, poles_new, gain_new : Tensor
        The band filter, of twice the prototype's order. Each zero at
        infinity contributes one zero at the origin.
    """
    w0 = torch.as_tensor(
        center_frequency, dtype=gain.dtype, device=gain.device
    )
    bw = torch.as_tensor(bandwidth, dtype=gain.dtype, device=gain.device)
    excess = poles.numel() - zeros.numel()

    origin = torch.zeros(excess, dtype=poles.dtype, device=poles.device)
    zeros_new = torch.cat(
        [split_roots(bw * zeros / 2, w0).to(poles.dtype), origin]
    )

    return zeros_new, split_roots(bw * poles / 2, w0), gain * bw**excess


def split_roots(half: Tensor, center_frequency: Tensor) -> Tensor:
    """Solve x^2 - 2 half x + center_frequency^2 = 0 for every entry.

    Both roots of each quadratic are returned, the ``+`` branch first.
    """
    offset = torch.sqrt(half * half - center_frequency * center_frequency)
    return torch.cat([half + offset, half - offset])
