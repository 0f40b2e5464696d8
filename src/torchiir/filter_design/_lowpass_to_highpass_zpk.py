"""Lowpass to highpass inversion for analog prototypes."""

from typing import Tuple, Union

import torch
from torch import Tensor


def lowpass_to_highpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Mirror a unit-cutoff prototype about ``cutoff_frequency``.

    Substitutes cutoff_frequency / s for s, so the prototype's DC behaviour
    appears at s -> inf. A low shelf becomes a high shelf.

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
        Every root r maps to cutoff_frequency / r. Zeros at infinity land
        on the origin, so ``zeros_new`` has as many entries as ``poles``.
    """
    scale = torch.as_tensor(
        cutoff_frequency, dtype=gain.dtype, device=gain.device
    )
    excess = poles.numel() - zeros.numel()

    origin = torch.zeros(excess, dtype=poles.dtype, device=poles.device)
    zeros_new = torch.cat([(scale / zeros).to(poles.dtype), origin])

    # torch.prod of an empty tensor is 1, which covers all-pole prototypes
    gain_new = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    return zeros_new, scale / poles, gain_new
