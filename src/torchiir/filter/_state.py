"""Per-sample execution topologies for cascades of second-order sections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import torch
from torch import Tensor


class _SectionState(ABC):
    """Delay state for up to ``n_sections`` sections, allocated once.

    Subclasses define the number of delays per section and the per-section
    update in :meth:`_tick`.
    """

    n_delays = 2

    def __init__(
        self,
        n_sections: int,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ):
        self._delays = torch.zeros(
            n_sections, self.n_delays, dtype=dtype, device=device
        )

    @property
    def n_sections(self) -> int:
        return self._delays.shape[0]

    def reset(self) -> None:
        """Zero every delay element."""
        self._delays.zero_()

    def process(self, sos: Tensor, x: Tensor) -> Tensor:
        """
        Run ``x`` through the cascade ``sos``, one sample at a time.

        Parameters
        ----------
        sos : Tensor
            Active sections, shape ``(n, 6)`` with ``n <= n_sections``.
            Rows are [b0, b1, b2, a0, a1, a2].
        x : Tensor
            Input samples, shape ``(n_samples,)``.

        Returns
        -------
        y : Tensor
            Output samples, same shape and dtype as ``x``. The delay state is
            kept for the next call.
        """
        if x.ndim != 1:
            raise ValueError(
                f"x must be one-dimensional, got shape {tuple(x.shape)}"
            )
        n_active = sos.shape[0]
        if n_active > self.n_sections:
            raise ValueError(
                f"{n_active} sections given, state holds {self.n_sections}"
            )
        if n_active == 0:
            return x.clone()

        coefficients = (sos / sos[:, 3:4]).tolist()
        delays = self._delays[:n_active].tolist()
        samples = x.tolist()

        for i, sample in enumerate(samples):
            for section, coefficient in zip(delays, coefficients):
                sample = self._tick(section, coefficient, sample)
            samples[i] = sample

        self._delays[:n_active].copy_(
            torch.tensor(delays, dtype=self._delays.dtype)
        )
        return torch.tensor(samples, dtype=x.dtype, device=x.device)

    @staticmethod
    @abstractmethod
    def _tick(delays: List[float], coefficients: List[float], x: float) -> float:
        """Advance one section by one sample and return its output."""
        ...


class DirectFormI(_SectionState):
    """Direct form I: separate input and output delay lines.

    Four delays per section, ``[x1, x2, y1, y2]``. No internal overflow for
    fixed-gain sections at the cost of twice the state.
    """

    n_delays = 4

    @staticmethod
    def _tick(delays: List[float], coefficients: List[float], x: float) -> float:
        b0, b1, b2, _, a1, a2 = coefficients
        x1, x2, y1, y2 = delays
        y = b0 * x + b1 * x1 + b2 * x2 - a1 * y1 - a2 * y2
        delays[:] = [x, x1, y, y1]
        return y


class DirectFormII(_SectionState):
    """Direct form II: one shared delay line ``[w1, w2]`` per section."""

    @staticmethod
    def _tick(delays: List[float], coefficients: List[float], x: float) -> float:
        b0, b1, b2, _, a1, a2 = coefficients
        w1, w2 = delays
        w = x - a1 * w1 - a2 * w2
        delays[:] = [w, w1]
        return b0 * w + b1 * w1 + b2 * w2


class TransposedDirectFormII(_SectionState):
    """Transposed direct form II, the structure used by ``lfilter``.

    Two delays per section, ``[s1, s2]``.
    """

    @staticmethod
    def _tick(delays: List[float], coefficients: List[float], x: float) -> float:
        b0, b1, b2, _, a1, a2 = coefficients
        s1, s2 = delays
        y = b0 * x + s1
        delays[:] = [b1 * x - a1 * y + s2, b2 * x - a2 * y]
        return y
