"""Conversion from zeros-poles-gain to second-order sections."""

import cmath
from typing import List, Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import CapacityError, NumericDegeneracyError


def zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    n_sections: Optional[int] = None,
) -> Tensor:
    """
    Convert zeros, poles, and gain to second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the filter. At most as many as there are poles; missing
        zeros are placed at z = -1.
    poles : Tensor
        Poles of the filter.
    gain : Tensor
        System gain.
    n_sections : int, optional
        Number of sections the caller has room for. A layout that needs more
        raises :class:`CapacityError`.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape ``((len(poles) + 1) // 2, 6)``.
        Each row is [b0, b1, b2, a0, a1, a2] with a0 = 1. An odd number of
        real poles produces exactly one first-order section
        (b2 = a2 = 0).

    Raises
    ------
    CapacityError
        If more than ``n_sections`` sections are needed.
    NumericDegeneracyError
        If a complex pole or zero has no conjugate partner, or the zeros
        cannot be distributed over the sections.
    ValueError
        If there are more zeros than poles.

    Notes
    -----
    Sections are ordered by descending pole magnitude, so the most resonant
    section comes first; ties are broken by pole angle. The first-order
    section, if any, comes last. The ordering does not change the transfer
    function but keeps rounding reproducible.

    Zeros are assigned greedily in that order: the first-order section (if
    any) takes the real zero nearest to its pole, then every pole pair takes
    the nearest conjugate zero pair, or the two nearest real zeros.
    """
    n_poles = poles.numel()
    n_zeros = zeros.numel()

    if n_zeros > n_poles:
        raise ValueError(
            f"Cannot build sections with more zeros ({n_zeros}) than poles ({n_poles})"
        )

    n_required = (n_poles + 1) // 2
    if n_sections is not None and n_required > n_sections:
        raise CapacityError(
            f"Layout needs {n_required} sections, only {n_sections} reserved"
        )

    if n_poles == 0:
        return torch.zeros((0, 6), dtype=gain.dtype, device=gain.device)

    if n_zeros < n_poles:
        padding = -torch.ones(
            n_poles - n_zeros, dtype=poles.dtype, device=poles.device
        )
        zeros = torch.cat([zeros.to(poles.dtype), padding])

    real_poles, complex_poles = _separate_real_complex(poles)
    real_zeros, complex_zeros = _separate_real_complex(zeros)

    # Pole groups: conjugate pairs, then real poles two at a time. The real
    # pole of smallest magnitude is left over for odd counts.
    groups: List[List[complex]] = [[p, p.conjugate()] for p in complex_poles]
    real_poles.sort(key=lambda p: -abs(p))
    single = real_poles.pop() if len(real_poles) % 2 == 1 else None
    for i in range(0, len(real_poles), 2):
        groups.append([real_poles[i], real_poles[i + 1]])
    groups.sort(key=lambda g: (-abs(g[0]), abs(cmath.phase(g[0]))))

    # The first-order section claims its zero before the pairs so that an
    # even number of real zeros remains for them
    single_row = None
    if single is not None:
        if not real_zeros:
            raise NumericDegeneracyError(
                "No real zero left for the first-order section"
            )
        single_row = _section([_pop_nearest(real_zeros, single)], [single])

    rows = []
    for group in groups:
        zero_pair = _take_zero_pair(group[0], real_zeros, complex_zeros)
        rows.append(_section(zero_pair, group))

    if single_row is not None:
        rows.append(single_row)

    sos = torch.tensor(rows, dtype=torch.float64, device=gain.device)
    sos = sos.to(gain.dtype)
    n_out = sos.shape[0]

    # Distribute gain across sections, sign on the first one
    gain_per_section = gain.abs() ** (1.0 / n_out)
    numerator = sos[:, :3] * gain_per_section
    if gain < 0:
        sign = torch.ones(n_out, 1, dtype=sos.dtype, device=sos.device)
        sign[0] = -1.0
        numerator = numerator * sign

    return torch.cat([numerator, sos[:, 3:]], dim=1)


def _take_zero_pair(
    pole: complex,
    real_zeros: List[float],
    complex_zeros: List[complex],
) -> List[complex]:
    """Remove and return the zero pair nearest to ``pole``."""
    best_complex = None
    best_complex_distance = float("inf")
    for i, z in enumerate(complex_zeros):
        distance = min(abs(z - pole), abs(z.conjugate() - pole))
        if distance < best_complex_distance:
            best_complex, best_complex_distance = i, distance

    best_real_distance = float("inf")
    if len(real_zeros) >= 2:
        best_real_distance = min(abs(z - pole) for z in real_zeros)

    if best_complex is not None and best_complex_distance <= best_real_distance:
        z = complex_zeros.pop(best_complex)
        return [z, z.conjugate()]

    if len(real_zeros) < 2:
        raise NumericDegeneracyError(
            "Zeros cannot be paired: an odd number of real zeros is left over"
        )
    first = _pop_nearest(real_zeros, pole)
    second = _pop_nearest(real_zeros, pole)
    return [first, second]


def _pop_nearest(values: List[float], target: complex) -> float:
    index = min(range(len(values)), key=lambda i: abs(values[i] - target))
    return values.pop(index)


def _section(zeros: List[complex], poles: List[complex]) -> List[float]:
    return _polynomial(zeros) + _polynomial(poles)


def _polynomial(roots: List[complex]) -> List[float]:
    """Monic polynomial in z^-1 with the given roots, padded to 3 terms."""
    if len(roots) == 1:
        return [1.0, -roots[0].real, 0.0]
    first, second = roots
    return [1.0, -(first + second).real, (first * second).real]


def _separate_real_complex(x: Tensor) -> Tuple[List[float], List[complex]]:
    """Split roots into real values and upper-half-plane representatives.

    Roots whose imaginary part is below 1e-6 of their real part, or whose
    magnitude is below 1e-6, count as real.
    """
    real_values: List[float] = []
    upper: List[complex] = []
    n_lower = 0

    for value in x.to(torch.complex128).tolist():
        value = complex(value)
        rel_tol = 1e-6 * abs(value.real) + 1e-10
        if abs(value.imag) < rel_tol or abs(value) < 1e-6:
            real_values.append(value.real)
        elif value.imag > 0:
            upper.append(value)
        else:
            n_lower += 1

    if n_lower != len(upper):
        raise NumericDegeneracyError(
            f"Complex values are not in conjugate pairs: {len(upper)} above "
            f"and {n_lower} below the real axis"
        )

    return real_values, upper
