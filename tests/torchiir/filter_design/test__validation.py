"""Tests for filter design parameter validation."""

import math

import pytest
import torch

from torchiir.filter_design import (
    CapacityError,
    DomainError,
    FilterDesignError,
    InvalidCutoffError,
    InvalidOrderError,
    NumericDegeneracyError,
    NyquistViolationError,
    SpecificationError,
    check_band,
    check_cutoff,
    check_design,
    check_gain,
    check_order,
    check_sampling_frequency,
    check_stability,
    check_stopband_attenuation,
)


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidOrderError,
            InvalidCutoffError,
            NyquistViolationError,
            SpecificationError,
        ],
    )
    def test_domain_errors(self, error) -> None:
        assert issubclass(error, DomainError)
        assert issubclass(error, ValueError)
        assert issubclass(error, FilterDesignError)

    @pytest.mark.parametrize("error", [CapacityError, NumericDegeneracyError])
    def test_other_errors(self, error) -> None:
        assert issubclass(error, FilterDesignError)
        assert not issubclass(error, DomainError)


class TestCheckOrder:
    """Tests for check_order."""

    @pytest.mark.parametrize("order", [1, 4, 16])
    def test_valid(self, order: int) -> None:
        assert check_order(order) is None
        assert check_order(order, max_order=16) is None

    @pytest.mark.parametrize("order", [0, -3, 2.0, "4", None, False])
    def test_invalid(self, order) -> None:
        assert isinstance(check_order(order), InvalidOrderError)

    def test_exceeds_capacity(self) -> None:
        error = check_order(6, max_order=4)

        assert isinstance(error, CapacityError)
        assert "6" in str(error)

    def test_returns_instead_of_raising(self) -> None:
        error = check_order(0)

        assert isinstance(error, Exception)
        with pytest.raises(InvalidOrderError):
            raise error


class TestCheckScalars:
    """Tests for the scalar range checks."""

    @pytest.mark.parametrize("value", [0.1, 40.0, 200.0])
    def test_stopband_attenuation_valid(self, value: float) -> None:
        assert check_stopband_attenuation(value) is None

    @pytest.mark.parametrize("value", [0.0, -1.0, math.inf, math.nan])
    def test_stopband_attenuation_invalid(self, value: float) -> None:
        error = check_stopband_attenuation(value)

        assert isinstance(error, SpecificationError)

    @pytest.mark.parametrize("value", [-24.0, 0.0, 24.0])
    def test_gain_valid(self, value: float) -> None:
        assert check_gain(value) is None

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_gain_invalid(self, value: float) -> None:
        assert isinstance(check_gain(value), SpecificationError)

    @pytest.mark.parametrize("value", [0.0, -48000.0, math.inf, math.nan])
    def test_sampling_frequency_invalid(self, value: float) -> None:
        assert isinstance(check_sampling_frequency(value), SpecificationError)


class TestCheckCutoff:
    """Tests for check_cutoff."""

    @pytest.mark.parametrize("cutoff_frequency", [1e-3, 1000.0, 23999.0])
    def test_valid(self, cutoff_frequency: float) -> None:
        assert check_cutoff(cutoff_frequency, 48000.0) is None

    @pytest.mark.parametrize("cutoff_frequency", [0.0, -10.0, math.nan])
    def test_not_positive(self, cutoff_frequency: float) -> None:
        assert isinstance(
            check_cutoff(cutoff_frequency, 48000.0), InvalidCutoffError
        )

    @pytest.mark.parametrize("cutoff_frequency", [24000.0, 30000.0])
    def test_nyquist(self, cutoff_frequency: float) -> None:
        assert isinstance(
            check_cutoff(cutoff_frequency, 48000.0), NyquistViolationError
        )

    def test_name_in_message(self) -> None:
        error = check_cutoff(0.0, 48000.0, name="Center frequency")

        assert "Center frequency" in str(error)


class TestCheckBand:
    """Tests for check_band."""

    def test_valid(self) -> None:
        assert check_band(1000.0, 200.0, 48000.0) is None
        assert check_band(1000.0, 200.0, 48000.0, bandstop=True) is None

    @pytest.mark.parametrize(
        "center_frequency,width_frequency,error",
        [
            (1000.0, 0.0, InvalidCutoffError),
            (1000.0, -5.0, InvalidCutoffError),
            (1000.0, math.inf, InvalidCutoffError),
            (100.0, 200.0, InvalidCutoffError),
            (100.0, 300.0, InvalidCutoffError),
            (23000.0, 2000.0, NyquistViolationError),
            (24000.0, 100.0, NyquistViolationError),
            (0.0, 100.0, InvalidCutoffError),
        ],
    )
    def test_invalid(
        self, center_frequency: float, width_frequency: float, error
    ) -> None:
        assert isinstance(
            check_band(center_frequency, width_frequency, 48000.0), error
        )

    def test_bandstop_width_below_center(self) -> None:
        assert check_band(1000.0, 1500.0, 48000.0) is None
        assert isinstance(
            check_band(1000.0, 1500.0, 48000.0, bandstop=True),
            SpecificationError,
        )


class TestCheckStability:
    """Tests for check_stability."""

    def test_stable(self) -> None:
        poles = torch.tensor([0.5 + 0.5j, 0.5 - 0.5j], dtype=torch.complex128)

        assert check_stability(poles) is None

    @pytest.mark.parametrize("pole", [1.0, -1.0, 1.2j, math.nan])
    def test_unstable(self, pole) -> None:
        poles = torch.tensor([0.1, pole], dtype=torch.complex128)

        assert isinstance(check_stability(poles), NumericDegeneracyError)

    def test_empty(self) -> None:
        assert check_stability(torch.empty(0, dtype=torch.complex128)) is None


class TestCheckDesign:
    """Tests for check_design."""

    @pytest.mark.parametrize(
        "filter_type,kwargs",
        [
            ("lowpass", {"cutoff_frequency": 1000.0}),
            ("highpass", {"cutoff_frequency": 1000.0}),
            (
                "bandpass",
                {"center_frequency": 1000.0, "width_frequency": 200.0},
            ),
            (
                "bandstop",
                {"center_frequency": 1000.0, "width_frequency": 200.0},
            ),
            ("lowshelf", {"cutoff_frequency": 1000.0, "gain_db": 6.0}),
            ("highshelf", {"cutoff_frequency": 1000.0, "gain_db": -6.0}),
            (
                "bandshelf",
                {
                    "center_frequency": 1000.0,
                    "width_frequency": 200.0,
                    "gain_db": 3.0,
                },
            ),
        ],
    )
    def test_valid(self, filter_type: str, kwargs) -> None:
        assert check_design(filter_type, 48000.0, 40.0, **kwargs) is None

    def test_unused_parameters_ignored(self) -> None:
        assert (
            check_design(
                "lowpass",
                48000.0,
                40.0,
                cutoff_frequency=1000.0,
                center_frequency=-1.0,
                gain_db=math.nan,
            )
            is None
        )

    def test_frequency_checked_before_attenuation(self) -> None:
        error = check_design("lowpass", 48000.0, -1.0, cutoff_frequency=0.0)

        assert isinstance(error, InvalidCutoffError)

    def test_unknown_filter_type(self) -> None:
        error = check_design("peaking", 48000.0, 40.0, cutoff_frequency=1e3)

        assert isinstance(error, SpecificationError)

    def test_missing_gain(self) -> None:
        error = check_design("highshelf", 48000.0, 40.0, cutoff_frequency=1e3)

        assert isinstance(error, SpecificationError)
