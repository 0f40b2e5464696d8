"""Analog prototype to digital filter: frequency transform plus bilinear transform."""

import math
from typing import Optional, Tuple

from torch import Tensor

from ._bilinear_transform_zpk import bilinear_transform_zpk, prewarp_frequency
from ._exceptions import InvalidCutoffError, SpecificationError
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._validation import (
    BAND_FILTER_TYPES,
    FILTER_TYPES,
    check_band,
    check_cutoff,
    check_sampling_frequency,
)


def frequency_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    filter_type: str,
    sampling_frequency: float,
    *,
    cutoff_frequency: Optional[float] = None,
    center_frequency: Optional[float] = None,
    width_frequency: Optional[float] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Turn a normalized analog prototype into a digital filter.

    The prototype (cutoff at 1 rad/s) is moved to the pre-warped target
    frequencies with an s-plane transform and then discretized with the
    bilinear transform.

    Parameters
    ----------
    zeros, poles, gain : Tensor
        Analog prototype, a lowpass for the pass/stop types or a low shelf
        for the shelf types.
    filter_type : str
        One of "lowpass", "highpass", "bandpass", "bandstop", "lowshelf",
        "highshelf", "bandshelf".
    sampling_frequency : float
        Sampling frequency (Hz).
    cutoff_frequency : float, optional
        Cutoff (Hz) for lowpass, highpass, lowshelf and highshelf.
    center_frequency, width_frequency : float, optional
        Center and width (Hz) for bandpass, bandstop and bandshelf. The band
        edges are ``center_frequency ± width_frequency / 2``.

    Returns
    -------
    zeros, poles, gain : Tensor
        The digital filter. Band types have twice as many poles as the
        prototype.

    Notes
    -----
    ========================  ==============================  ===============================
    filter_type               s-plane transform               target
    ========================  ==============================  ===============================
    lowpass, lowshelf         s -> s / w_c                    w_c = warp(cutoff)
    highpass, highshelf       s -> w_c / s                    w_c = warp(cutoff)
    bandpass, bandshelf       s -> (s^2 + w_0^2) / (B s)      w_0 = sqrt(warp(lo) warp(hi))
    bandstop                  s -> B s / (s^2 + w_0^2)        B = warp(hi) - warp(lo)
    ========================  ==============================  ===============================

    where ``warp`` is :func:`prewarp_frequency` and ``lo``, ``hi`` are the band
    edges ``center_frequency ∓ width_frequency / 2``. Both edges land exactly
    on the half-power point. The peak (or notch) is at the geometric center
    of the warped edges, close to ``center_frequency``.
    """
    if filter_type not in FILTER_TYPES:
        raise SpecificationError(f"Invalid filter_type: {filter_type!r}")

    error = check_sampling_frequency(sampling_frequency)
    if error is not None:
        raise error

    if filter_type in BAND_FILTER_TYPES:
        if center_frequency is None or width_frequency is None:
            raise InvalidCutoffError(
                f"{filter_type} requires center_frequency and width_frequency"
            )
        error = check_band(
            center_frequency,
            width_frequency,
            sampling_frequency,
            bandstop=filter_type == "bandstop",
        )
        if error is not None:
            raise error

        low = prewarp_frequency(
            center_frequency - width_frequency / 2, sampling_frequency
        )
        high = prewarp_frequency(
            center_frequency + width_frequency / 2, sampling_frequency
        )
        # Geometric center of the warped edges puts both edges on the
        # half-power point
        center = math.sqrt(low * high)

        if filter_type == "bandstop":
            zpk = lowpass_to_bandstop_zpk(
                zeros, poles, gain, center_frequency=center, bandwidth=high - low
            )
        else:
            zpk = lowpass_to_bandpass_zpk(
                zeros, poles, gain, center_frequency=center, bandwidth=high - low
            )
    else:
        if cutoff_frequency is None:
            raise InvalidCutoffError(f"{filter_type} requires cutoff_frequency")
        error = check_cutoff(cutoff_frequency, sampling_frequency)
        if error is not None:
            raise error

        cutoff = prewarp_frequency(cutoff_frequency, sampling_frequency)

        if filter_type in ("lowpass", "lowshelf"):
            zpk = lowpass_to_lowpass_zpk(
                zeros, poles, gain, cutoff_frequency=cutoff
            )
        else:
            zpk = lowpass_to_highpass_zpk(
                zeros, poles, gain, cutoff_frequency=cutoff
            )

    return bilinear_transform_zpk(*zpk, sampling_frequency=sampling_frequency)
