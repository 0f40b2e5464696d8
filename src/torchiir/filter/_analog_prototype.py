"""Analog Chebyshev Type II prototypes held in fixed-capacity layouts."""

from typing import Optional

import torch

from ..filter_design._chebyshev_type_2_prototype import (
    chebyshev_type_2_prototype,
)
from ..filter_design._chebyshev_type_2_shelf_prototype import (
    chebyshev_type_2_shelf_prototype,
)
from ..filter_design._validation import check_order
from ._pole_zero_layout import PoleZeroLayout


class AnalogLowPass(PoleZeroLayout):
    """Normalized Chebyshev Type II lowpass prototype (s-plane).

    The half-power point is at 1 rad/s. A design is only recomputed when
    its parameters change.

    Parameters
    ----------
    max_order : int
        Largest order :meth:`design` accepts.
    device : torch.device, optional
        Device of the layout buffers.
    """

    def __init__(
        self,
        max_order: int,
        *,
        device: Optional[torch.device] = None,
    ):
        super().__init__(max_order, device=device)
        self._parameters = None

    def design(self, order: int, stopband_attenuation_db: float) -> None:
        """Place the poles and zeros for ``order`` and the given attenuation.

        Raises
        ------
        CapacityError
            If ``order`` exceeds ``max_order``.
        DomainError
            If ``order`` or ``stopband_attenuation_db`` is invalid.
        """
        parameters = (order, stopband_attenuation_db)
        if parameters == self._parameters:
            return

        error = check_order(order, self.capacity)
        if error is not None:
            raise error

        self.replace(
            *chebyshev_type_2_prototype(
                order,
                stopband_attenuation_db,
                dtype=torch.float64,
                device=self._poles.device,
            )
        )
        self._parameters = parameters


class AnalogLowShelf(PoleZeroLayout):
    """Normalized Chebyshev Type II low-shelf prototype (s-plane).

    0 dB far in the stopband, ``gain_db`` in the passband; see
    :func:`~torchiir.filter_design.chebyshev_type_2_shelf_prototype`.

    Parameters
    ----------
    max_order : int
        Largest order :meth:`design` accepts.
    device : torch.device, optional
        Device of the layout buffers.
    """

    def __init__(
        self,
        max_order: int,
        *,
        device: Optional[torch.device] = None,
    ):
        super().__init__(max_order, device=device)
        self._parameters = None

    def design(
        self,
        order: int,
        gain_db: float,
        stopband_attenuation_db: float,
    ) -> None:
        parameters = (order, gain_db, stopband_attenuation_db)
        if parameters == self._parameters:
            return

        error = check_order(order, self.capacity)
        if error is not None:
            raise error

        self.replace(
            *chebyshev_type_2_shelf_prototype(
                order,
                gain_db,
                stopband_attenuation_db,
                dtype=torch.float64,
                device=self._poles.device,
            )
        )
        self._parameters = parameters
