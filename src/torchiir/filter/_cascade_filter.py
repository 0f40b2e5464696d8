"""Cascade filter with a reserved maximum order."""

from __future__ import annotations

from typing import Optional, Type, Union

import torch
from torch import Tensor

from ..filter_design._exceptions import FilterDesignError
from ..filter_design._frequency_transform_zpk import frequency_transform_zpk
from ..filter_design._validation import (
    BAND_FILTER_TYPES,
    SHELF_FILTER_TYPES,
    check_design,
    check_order,
    check_stability,
)
from ..filter_design._zpk_to_sos import zpk_to_sos
from ._analog_prototype import AnalogLowPass, AnalogLowShelf
from ._pole_zero_layout import PoleZeroLayout
from ._state import DirectFormII, _SectionState


class CascadeFilter:
    """A cascade of second-order sections sized for a maximum order.

    Storage for the sections, the digital pole/zero layout, the analog
    prototype and the delay state is allocated once, in the constructor.
    Every successful ``setup`` overwrites it in place; a rejected ``setup``
    leaves it untouched.

    Subclasses set :attr:`filter_type`, which selects the prototype (lowpass
    or low shelf) and the frequency transform.

    Parameters
    ----------
    order : int
        Maximum order. Band types reserve twice as many poles.
    state : type, optional
        Execution topology, one of :class:`DirectFormI`,
        :class:`DirectFormII` (default) or :class:`TransposedDirectFormII`.
    dtype : torch.dtype, optional
        Dtype of the stored coefficients and delay state. Defaults to
        ``torch.float64``. Designs are always computed in double precision.
    device : torch.device, optional
        Device of all buffers. Defaults to CPU.

    Notes
    -----
    ``setup`` and :meth:`filter` must not run concurrently on the same
    instance; reconfigure between processing blocks.
    """

    filter_type = "lowpass"

    def __init__(
        self,
        order: int,
        state: Type[_SectionState] = DirectFormII,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ):
        error = check_order(order)
        if error is not None:
            raise error

        max_poles = order
        if self.filter_type in BAND_FILTER_TYPES:
            max_poles = 2 * order

        self._max_order = order
        self._max_sections = (max_poles + 1) // 2
        self._order = 0
        self._num_sections = 0

        self._sos = torch.empty(
            self._max_sections, 6, dtype=dtype, device=device
        )
        _fill_identity(self._sos)
        self._layout = PoleZeroLayout(max_poles, device=device)
        if self.filter_type in SHELF_FILTER_TYPES:
            self._prototype = AnalogLowShelf(order, device=device)
        else:
            self._prototype = AnalogLowPass(order, device=device)
        self._state = state(self._max_sections, dtype=dtype, device=device)

    @property
    def max_order(self) -> int:
        """Order reserved at construction."""
        return self._max_order

    @property
    def order(self) -> int:
        """Order of the current design, 0 before the first ``setup``."""
        return self._order

    @property
    def max_sections(self) -> int:
        return self._max_sections

    @property
    def num_sections(self) -> int:
        return self._num_sections

    @property
    def sos(self) -> Tensor:
        """Active second-order sections, shape ``(num_sections, 6)``.

        A view into the reserved storage; clone it to keep a snapshot.
        """
        return self._sos[: self._num_sections]

    @property
    def zpk(self) -> tuple[Tensor, Tensor, Tensor]:
        """Digital zeros, poles and gain of the current design."""
        return self._layout.zeros, self._layout.poles, self._layout.gain

    @property
    def state(self) -> _SectionState:
        return self._state

    def reset(self) -> None:
        """Clear the delay state; the coefficients are kept."""
        self._state.reset()

    def filter(self, x: Union[float, Tensor]) -> Union[float, Tensor]:
        """Process one sample (float) or a block of samples (1-D tensor).

        Before the first ``setup`` the filter passes its input through.
        """
        if isinstance(x, Tensor):
            return self._state.process(self.sos, x)
        block = torch.tensor([x], dtype=self._sos.dtype)
        return self._state.process(self.sos, block).item()

    def _design(
        self,
        order: Optional[int],
        sampling_frequency: float,
        stopband_attenuation_db: float,
        *,
        cutoff_frequency: Optional[float] = None,
        center_frequency: Optional[float] = None,
        width_frequency: Optional[float] = None,
        gain_db: Optional[float] = None,
    ) -> Optional[FilterDesignError]:
        """Validate, design and commit; return the error instead of raising."""
        if order is None:
            order = self._max_order

        error = check_order(order, self._max_order) or check_design(
            self.filter_type,
            sampling_frequency,
            stopband_attenuation_db,
            cutoff_frequency=cutoff_frequency,
            center_frequency=center_frequency,
            width_frequency=width_frequency,
            gain_db=gain_db,
        )
        if error is not None:
            return error

        if self.filter_type in SHELF_FILTER_TYPES:
            self._prototype.design(order, gain_db, stopband_attenuation_db)
        else:
            self._prototype.design(order, stopband_attenuation_db)

        zeros, poles, gain = frequency_transform_zpk(
            self._prototype.zeros,
            self._prototype.poles,
            self._prototype.gain,
            self.filter_type,
            sampling_frequency,
            cutoff_frequency=cutoff_frequency,
            center_frequency=center_frequency,
            width_frequency=width_frequency,
        )

        error = check_stability(poles)
        if error is not None:
            return error

        try:
            sos = zpk_to_sos(
                zeros, poles, gain, n_sections=self._max_sections
            )
        except FilterDesignError as error:
            return error

        n = sos.shape[0]
        self._layout.replace(zeros, poles, gain)
        self._sos[:n].copy_(sos)
        _fill_identity(self._sos[n:])
        self._num_sections = n
        self._order = order
        return None

    @staticmethod
    def _raise_if_error(error: Optional[FilterDesignError]) -> None:
        if error is not None:
            raise error


def _fill_identity(sections: Tensor) -> None:
    """Overwrite ``sections`` in place with pass-through sections."""
    sections.zero_()
    sections[:, 0] = 1.0
    sections[:, 3] = 1.0
