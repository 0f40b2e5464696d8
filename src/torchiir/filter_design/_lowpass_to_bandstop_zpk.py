"""Lowpass to bandstop mapping for analog prototypes."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._lowpass_to_bandpass_zpk import split_roots


def lowpass_to_bandstop_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center_frequency: Union[float, Tensor] = 1.0,
    bandwidth: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Turn a unit-cutoff prototype into a notch around ``center_frequency``.

    Substitutes (bandwidth * s) / (s^2 + center_frequency^2) for s, so the
    prototype's stopband is folded into a band ``bandwidth`` rad/s wide.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the analog prototype.
    gain : Tensor
        Gain of the analog prototype.
    center_frequency : float or Tensor
        Geometric center of the rejected band (rad/s).
    bandwidth : float or Tensor
        Width of the rejected band (rad/s).

    Returns
    -------
    zeros_new, poles_new, gain_new : Tensor
        The band filter, of twice the prototype's order.

    Notes
    -----
    Zeros at infinity become conjugate pairs at ±j center_frequency. Far
    from the band the response equals the prototype's DC response.
    """
    w0 = torch.as_tensor(
        center_frequency, dtype=gain.dtype, device=gain.device
    )
    bw = torch.as_tensor(bandwidth, dtype=gain.dtype, device=gain.device)
    excess = poles.numel() - zeros.numel()

    notch = torch.tensor(
        [1j, -1j], dtype=poles.dtype, device=poles.device
    ).repeat(excess)
    zeros_new = torch.cat(
        [split_roots(bw / (2 * zeros), w0).to(poles.dtype), notch * w0]
    )

    gain_new = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    return zeros_new, split_roots(bw / (2 * poles), w0), gain_new
