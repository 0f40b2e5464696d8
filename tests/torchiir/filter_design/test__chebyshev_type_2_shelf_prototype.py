"""Tests for the Chebyshev Type II analog low-shelf prototype."""

import math

import pytest
import torch

from torchiir.filter_design import (
    InvalidOrderError,
    SpecificationError,
    chebyshev_type_2_prototype,
    chebyshev_type_2_shelf_prototype,
    chebyshev_type_2_transition_ratio,
)


class TestChebyshevType2ShelfPrototype:
    """Tests for chebyshev_type_2_shelf_prototype."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    def test_output_shapes(self, order: int) -> None:
        """A shelf has as many finite zeros as poles."""
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            order, 6.0, 40.0, dtype=torch.float64
        )

        assert zeros.shape == (order,)
        assert poles.shape == (order,)
        assert gain.shape == ()

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("gain_db", [-12.0, 6.0, 24.0])
    def test_poles_match_lowpass(self, order: int, gain_db: float) -> None:
        _, lowpass_poles, _ = chebyshev_type_2_prototype(
            order, 30.0, dtype=torch.float64
        )
        _, poles, _ = chebyshev_type_2_shelf_prototype(
            order, gain_db, 30.0, dtype=torch.float64
        )

        torch.testing.assert_close(poles, lowpass_poles)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    def test_zero_gain_is_flat(self, order: int) -> None:
        """0 dB puts every zero on its pole."""
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            order, 0.0, 20.0, dtype=torch.float64
        )

        torch.testing.assert_close(zeros, poles)
        assert abs(gain.item() - 1.0) < 1e-12

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("gain_db", [-12.0, -3.0, 6.0, 24.0])
    def test_dc_gain(self, order: int, gain_db: float) -> None:
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            order, gain_db, 40.0, dtype=torch.float64
        )

        h = _analog_response(zeros, poles, gain, torch.tensor([0.0]))

        assert abs(20 * math.log10(h.abs().item()) - gain_db) < 1e-9

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("gain_db", [-12.0, 6.0, 24.0])
    def test_midpoint_at_unit_frequency(
        self, order: int, gain_db: float
    ) -> None:
        """The power gain at 1 rad/s is halfway between 1 and G^2."""
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            order, gain_db, 40.0, dtype=torch.float64
        )
        shelf_gain = 10 ** (gain_db / 20)

        h = _analog_response(zeros, poles, gain, torch.tensor([1.0]))

        expected = (shelf_gain**2 + 1) / 2
        assert abs(h.abs().item() ** 2 - expected) < 1e-9 * expected

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    @pytest.mark.parametrize("gain_db", [-12.0, 6.0, 24.0])
    def test_stopband_bounds(self, order: int, gain_db: float) -> None:
        """In the stopband the power gain stays between 1 and Gb^2."""
        stopband_attenuation_db = 30.0
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            order, gain_db, stopband_attenuation_db, dtype=torch.float64
        )
        ratio = chebyshev_type_2_transition_ratio(
            order, stopband_attenuation_db
        )
        shelf_gain = 10 ** (gain_db / 20)
        band_gain_sq = 1 + (shelf_gain**2 - 1) * 10 ** (
            -stopband_attenuation_db / 10
        )

        w = torch.linspace(ratio, 50 * ratio, 1000, dtype=torch.float64)
        power = _analog_response(zeros, poles, gain, w).abs() ** 2

        low, high = sorted([1.0, band_gain_sq])
        assert power.min() >= low - 1e-9
        assert power.max() <= high + 1e-9

    def test_large_boost_approaches_lowpass_zeros(self) -> None:
        lowpass_zeros, _, _ = chebyshev_type_2_prototype(
            4, 40.0, dtype=torch.float64
        )
        zeros, _, _ = chebyshev_type_2_shelf_prototype(
            4, 120.0, 40.0, dtype=torch.float64
        )

        torch.testing.assert_close(zeros, lowpass_zeros, rtol=0, atol=1e-3)

    def test_invalid_arguments(self) -> None:
        with pytest.raises(InvalidOrderError):
            chebyshev_type_2_shelf_prototype(0, 6.0, 40.0)
        with pytest.raises(SpecificationError):
            chebyshev_type_2_shelf_prototype(4, math.inf, 40.0)
        with pytest.raises(SpecificationError):
            chebyshev_type_2_shelf_prototype(4, 6.0, 0.0)


def _analog_response(
    zeros: torch.Tensor,
    poles: torch.Tensor,
    gain: torch.Tensor,
    w: torch.Tensor,
) -> torch.Tensor:
    s = (1j * w.to(torch.float64)).unsqueeze(-1)
    num = (s - zeros.to(torch.complex128)).prod(dim=-1)
    den = (s - poles.to(torch.complex128)).prod(dim=-1)
    return gain.to(torch.float64) * num / den
