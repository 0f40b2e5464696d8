"""Chebyshev Type II analog low-shelf filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._chebyshev_type_2_prototype import (
    _chebyshev_type_1_points,
    _resolve_dtypes,
    chebyshev_type_2_transition_ratio,
)
from ._validation import check_gain, check_order, check_stopband_attenuation


def chebyshev_type_2_shelf_prototype(
    order: int,
    gain_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Chebyshev Type II low-shelf filter prototype.

    The response rises (or falls) from 0 dB far in the stopband to
    ``gain_db`` in the passband. Like the lowpass prototype it is monotonic
    in the passband and equiripple in the stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    gain_db : float
        Passband gain in decibels relative to the 0 dB stopband.
    stopband_attenuation_db : float
        Attenuation of the shelf step in the stopband in decibels. Must be
        positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter, complex tensor of shape (order,).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,). Identical to
        the poles of :func:`chebyshev_type_2_prototype`.
    gain : Tensor
        System gain, scalar tensor. The DC response is ``10^(gain_db/20)``.

    Notes
    -----
    The squared magnitude response is

    .. math::
        |H(\\omega)|^2 = \\frac{G^2 \\epsilon^2 T_n^2(r/\\omega) + 1}
                              {\\epsilon^2 T_n^2(r/\\omega) + 1}

    with :math:`G = 10^{g/20}`, :math:`T_n` the Chebyshev polynomial and
    :math:`r` the transition ratio. The poles solve the denominator exactly
    as for the lowpass prototype. The zeros use the same construction with
    :math:`\\epsilon` replaced by :math:`G \\epsilon`, so the zero radius
    moves continuously with the gain:

    - ``gain_db = 0`` puts every zero on its pole (flat response).
    - Large ``gain_db`` moves the zeros onto the imaginary axis and the odd
      real zero to infinity, approaching ``G`` times the lowpass prototype.

    In the stopband the response stays between 0 dB and :math:`G_b` with
    :math:`G_b^2 - 1 = (G^2 - 1) 10^{-R_s/10}`. At 1 rad/s the power gain
    is :math:`(G^2 + 1) / 2`.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import chebyshev_type_2_shelf_prototype
    >>> zeros, poles, gain = chebyshev_type_2_shelf_prototype(3, 6.0, 40.0)
    >>> zeros.shape, poles.shape
    (torch.Size([3]), torch.Size([3]))
    """
    error = (
        check_order(order)
        or check_gain(gain_db)
        or check_stopband_attenuation(stopband_attenuation_db)
    )
    if error is not None:
        raise error

    dtype, complex_dtype, device = _resolve_dtypes(dtype, device)

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    ratio = chebyshev_type_2_transition_ratio(order, stopband_attenuation_db)
    shelf_gain = 10 ** (gain_db / 20)

    a_poles = math.asinh(1.0 / eps) / order
    a_zeros = math.asinh(1.0 / (shelf_gain * eps)) / order

    poles = ratio / _chebyshev_type_1_points(order, a_poles, device)
    zeros = ratio / _chebyshev_type_1_points(order, a_zeros, device)

    # H(0) = shelf_gain
    gain = shelf_gain * (torch.prod(-poles) / torch.prod(-zeros)).real

    return zeros.to(complex_dtype), poles.to(complex_dtype), gain.to(dtype)
