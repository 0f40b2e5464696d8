"""Fixed-capacity pole/zero/gain storage."""

from typing import Optional

import torch
from torch import Tensor

from ..filter_design._exceptions import CapacityError, InvalidOrderError


class PoleZeroLayout:
    """Poles, zeros and gain held in buffers allocated once.

    The buffers are sized for ``capacity`` poles and ``capacity`` zeros.
    :meth:`replace` copies a new layout into them in place; it never grows
    them.

    Parameters
    ----------
    capacity : int
        Maximum number of poles (and of zeros).
    device : torch.device, optional
        Device of the buffers. Defaults to CPU.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter import PoleZeroLayout
    >>> layout = PoleZeroLayout(2)
    >>> layout.replace(
    ...     torch.tensor([-1.0 + 0j]),
    ...     torch.tensor([0.5 + 0.5j, 0.5 - 0.5j]),
    ...     torch.tensor(0.25, dtype=torch.float64),
    ... )
    >>> layout.poles.shape, layout.zeros.shape
    (torch.Size([2]), torch.Size([1]))
    """

    def __init__(
        self,
        capacity: int,
        *,
        device: Optional[torch.device] = None,
    ):
        if capacity < 1:
            raise InvalidOrderError(
                f"Layout capacity must be positive, got {capacity}"
            )
        self._capacity = capacity
        self._zeros = torch.zeros(
            capacity, dtype=torch.complex128, device=device
        )
        self._poles = torch.zeros(
            capacity, dtype=torch.complex128, device=device
        )
        self._gain = torch.ones((), dtype=torch.float64, device=device)
        self._num_zeros = 0
        self._num_poles = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def zeros(self) -> Tensor:
        """View of the active zeros."""
        return self._zeros[: self._num_zeros]

    @property
    def poles(self) -> Tensor:
        """View of the active poles."""
        return self._poles[: self._num_poles]

    @property
    def gain(self) -> Tensor:
        return self._gain

    def replace(self, zeros: Tensor, poles: Tensor, gain: Tensor) -> None:
        """Copy a new layout into the buffers.

        Raises
        ------
        CapacityError
            If there are more poles or zeros than the layout can hold. The
            stored layout is left unchanged.
        """
        if poles.numel() > self._capacity or zeros.numel() > self._capacity:
            raise CapacityError(
                f"Layout holds {self._capacity} poles and zeros, got "
                f"{poles.numel()} poles and {zeros.numel()} zeros"
            )

        self._zeros[: zeros.numel()].copy_(zeros)
        self._poles[: poles.numel()].copy_(poles)
        self._gain.copy_(gain)
        self._num_zeros = zeros.numel()
        self._num_poles = poles.numel()

    def clear(self) -> None:
        self._num_zeros = 0
        self._num_poles = 0
        self._gain.fill_(1.0)
