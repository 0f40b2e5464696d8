"""Chebyshev Type II filters with a reserved maximum order.

Every class takes the maximum order in its constructor and offers two ways
to compute coefficients:

- ``setup(...)`` raises a :class:`~torchiir.filter_design.FilterDesignError`
  when the request is rejected.
- ``try_setup(...)`` returns that error instead (``None`` on success).

Both accept ``order=`` to design a lower order than the reserved one. The
stopband attenuation is always the last positional parameter.
"""

from __future__ import annotations

from typing import Optional

from ..filter_design._exceptions import FilterDesignError
from ._cascade_filter import CascadeFilter


class LowPass(CascadeFilter):
    """Chebyshev Type II lowpass filter.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter import LowPass
    >>> lowpass = LowPass(4)
    >>> lowpass.setup(48000.0, 1000.0, 40.0)
    >>> lowpass.sos.shape
    torch.Size([2, 6])
    >>> y = lowpass.filter(torch.randn(256, dtype=torch.float64))
    """

    filter_type = "lowpass"

    def setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        cutoff_frequency : float
            Half-power frequency (Hz).
        stopband_attenuation_db : float
            Minimum attenuation in the stopband (dB).
        order : int, optional
            Requested order, at most :attr:`max_order`. Defaults to
            :attr:`max_order`.

        Raises
        ------
        CapacityError
            If ``order`` exceeds :attr:`max_order`.
        DomainError
            If any parameter is outside its domain.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                cutoff_frequency,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            cutoff_frequency=cutoff_frequency,
        )


class HighPass(CascadeFilter):
    """Chebyshev Type II highpass filter."""

    filter_type = "highpass"

    def setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        cutoff_frequency : float
            Half-power frequency (Hz).
        stopband_attenuation_db : float
            Minimum attenuation in the stopband (dB).
        order : int, optional
            Requested order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                cutoff_frequency,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            cutoff_frequency=cutoff_frequency,
        )


class BandPass(CascadeFilter):
    """Chebyshev Type II bandpass filter.

    Reserves ``2 * order`` poles: the bandpass transform doubles the order.
    """

    filter_type = "bandpass"

    def setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        center_frequency : float
            Center frequency of the passband (Hz).
        width_frequency : float
            Width of the passband between its half-power edges (Hz).
        stopband_attenuation_db : float
            Minimum attenuation in the stopbands (dB).
        order : int, optional
            Requested prototype order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                center_frequency,
                width_frequency,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            center_frequency=center_frequency,
            width_frequency=width_frequency,
        )


class BandStop(CascadeFilter):
    """Chebyshev Type II bandstop filter.

    Reserves ``2 * order`` poles. The width must be smaller than the center
    frequency.
    """

    filter_type = "bandstop"

    def setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        center_frequency : float
            Center frequency of the stopband (Hz).
        width_frequency : float
            Width of the stopband between its half-power edges (Hz).
        stopband_attenuation_db : float
            Minimum attenuation in the stopband (dB).
        order : int, optional
            Requested prototype order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                center_frequency,
                width_frequency,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            center_frequency=center_frequency,
            width_frequency=width_frequency,
        )


class LowShelf(CascadeFilter):
    """Chebyshev Type II low shelf: ``gain_db`` below the cutoff, 0 dB above."""

    filter_type = "lowshelf"

    def setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        cutoff_frequency : float
            Transition midpoint (Hz), where the power gain is halfway
            between 0 dB and ``gain_db``.
        gain_db : float
            Gain in the passband (dB). The stopband has 0 dB gain.
        stopband_attenuation_db : float
            Attenuation of the shelf step in the stopband (dB).
        order : int, optional
            Requested order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                cutoff_frequency,
                gain_db,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            cutoff_frequency=cutoff_frequency,
            gain_db=gain_db,
        )


class HighShelf(CascadeFilter):
    """Chebyshev Type II high shelf: ``gain_db`` above the cutoff, 0 dB below."""

    filter_type = "highshelf"

    def setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        cutoff_frequency : float
            Transition midpoint (Hz).
        gain_db : float
            Gain in the passband (dB). The stopband has 0 dB gain.
        stopband_attenuation_db : float
            Attenuation of the shelf step in the stopband (dB).
        order : int, optional
            Requested order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                cutoff_frequency,
                gain_db,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        cutoff_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            cutoff_frequency=cutoff_frequency,
            gain_db=gain_db,
        )


class BandShelf(CascadeFilter):
    """Chebyshev Type II band shelf: ``gain_db`` inside the band, 0 dB outside.

    Reserves ``2 * order`` poles.
    """

    filter_type = "bandshelf"

    def setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> None:
        """Calculate the coefficients of the filter.

        Parameters
        ----------
        sampling_frequency : float
            Sampling rate (Hz).
        center_frequency : float
            Center frequency of the band (Hz).
        width_frequency : float
            Width of the band between its transition midpoints (Hz).
        gain_db : float
            Gain inside the band (dB). Outside it the gain is 0 dB.
        stopband_attenuation_db : float
            Attenuation of the shelf step outside the band (dB).
        order : int, optional
            Requested prototype order, at most :attr:`max_order`.
        """
        self._raise_if_error(
            self.try_setup(
                sampling_frequency,
                center_frequency,
                width_frequency,
                gain_db,
                stopband_attenuation_db,
                order=order,
            )
        )

    def try_setup(
        self,
        sampling_frequency: float,
        center_frequency: float,
        width_frequency: float,
        gain_db: float,
        stopband_attenuation_db: float,
        *,
        order: Optional[int] = None,
    ) -> Optional[FilterDesignError]:
        return self._design(
            order,
            sampling_frequency,
            stopband_attenuation_db,
            center_frequency=center_frequency,
            width_frequency=width_frequency,
            gain_db=gain_db,
        )
