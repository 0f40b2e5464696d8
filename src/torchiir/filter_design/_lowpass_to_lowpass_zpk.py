"""Cutoff scaling for analog prototypes."""

from typing import Tuple, Union

import torch
from torch import Tensor


def lowpass_to_lowpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Scale a unit-cutoff prototype to ``cutoff_frequency``.

    Substitutes s / cutoff_frequency for s. Works unchanged for the low-shelf
    prototype, which moves its transition band the same way.

    Parameters
    ----------
    zeros, poles : Tensor
        Roots of the analog prototype.
    gain : Tensor
        Gain of the analog prototype.
    cutoff_frequency : float or Tensor
        Target cutoff (rad/s).

    Returns
    -------
    zeros_new, poles_new, gain_new : Tensor
        Roots and gain after scaling. The response at s = 0 is unchanged.
    """
    scale = torch.as_tensor(
        cutoff_frequency, dtype=gain.dtype, device=gain.device
    )
    excess = poles.numel() - zeros.numel()
    return zeros * scale, poles * scale, gain * scale**excess
