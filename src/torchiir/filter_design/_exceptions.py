"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class CapacityError(FilterDesignError):
    """Raised when a requested order exceeds the reserved order.

    This occurs when:
    - ``setup(..., order=n)`` is called with ``n`` larger than the order the
      filter was constructed with
    - A pole/zero layout receives more values than it was allocated for
    - A cascade needs more sections than the caller reserved
    """

    pass


class NumericDegeneracyError(FilterDesignError):
    """Raised when a design produces an unusable pole/zero layout.

    This occurs when:
    - A digital pole lands on or outside the unit circle
    - A complex pole or zero has no conjugate partner
    """

    pass


class DomainError(FilterDesignError, ValueError):
    """Base exception for parameters outside their numeric domain."""

    pass


class InvalidOrderError(DomainError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not a positive integer
    """

    pass


class InvalidCutoffError(DomainError):
    """Raised when a cutoff, center or width frequency is invalid.

    This occurs when:
    - A frequency is not finite or not strictly positive
    - The lower band edge ``center - width / 2`` is not above 0 Hz
    """

    pass


class NyquistViolationError(DomainError):
    """Raised when frequency reaches the Nyquist frequency.

    This occurs when:
    - Cutoff or center frequency >= sampling_frequency / 2
    - Upper band edge ``center + width / 2`` reaches Nyquist
    """

    pass


class SpecificationError(DomainError):
    """Raised when filter specifications are contradictory or impossible to meet.

    This occurs when:
    - Stopband attenuation is not a finite positive number
    - Shelf gain is not finite
    - Sampling frequency is not a finite positive number
    - A bandstop is at least as wide as its center frequency
    """

    pass
