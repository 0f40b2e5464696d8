"""Tests for prewarping and the bilinear transform."""

import math

import pytest
import torch
from scipy import signal as scipy_signal

from torchiir.filter_design import (
    bilinear_transform_zpk,
    chebyshev_type_2_prototype,
    chebyshev_type_2_shelf_prototype,
    lowpass_to_lowpass_zpk,
    prewarp_frequency,
)


class TestPrewarpFrequency:
    """Tests for prewarp_frequency."""

    def test_known_value(self) -> None:
        expected = 2 * 48000.0 * math.tan(math.pi * 1000.0 / 48000.0)

        assert abs(prewarp_frequency(1000.0, 48000.0) - expected) < 1e-9

    def test_approaches_angular_frequency_at_low_frequencies(self) -> None:
        warped = prewarp_frequency(1.0, 48000.0)

        assert abs(warped - 2 * math.pi) < 1e-6

    @pytest.mark.parametrize("frequency", [100.0, 5000.0, 20000.0])
    def test_maps_back_through_bilinear_transform(
        self, frequency: float
    ) -> None:
        """A pole at -warp(f) gives a digital 3 dB point at f."""
        sampling_frequency = 48000.0
        warped = prewarp_frequency(frequency, sampling_frequency)

        zeros = torch.empty(0, dtype=torch.complex128)
        poles = torch.tensor([-warped + 0j], dtype=torch.complex128)
        gain = torch.tensor(warped, dtype=torch.float64)
        zeros_d, poles_d, gain_d = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=sampling_frequency
        )

        z = torch.exp(
            torch.tensor(
                1j * 2 * math.pi * frequency / sampling_frequency,
                dtype=torch.complex128,
            )
        )
        h = gain_d * (z - zeros_d[0]) / (z - poles_d[0])

        assert abs(h.abs().item() ** 2 - 0.5) < 1e-10


class TestBilinearTransformZpk:
    """Tests for bilinear_transform_zpk."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("sampling_frequency", [2.0, 8000.0, 48000.0])
    def test_matches_scipy(
        self, order: int, sampling_frequency: float
    ) -> None:
        """Should match scipy.signal.bilinear_zpk."""
        zeros, poles, gain = lowpass_to_lowpass_zpk(
            *chebyshev_type_2_prototype(order, 40.0, dtype=torch.float64),
            cutoff_frequency=0.2 * sampling_frequency,
        )

        zeros_d, poles_d, gain_d = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=sampling_frequency
        )

        z_sp, p_sp, k_sp = scipy_signal.bilinear_zpk(
            zeros.numpy(), poles.numpy(), gain.item(), fs=sampling_frequency
        )

        assert poles_d.numel() == order
        assert zeros_d.numel() == order

        p_d_sorted = sorted(poles_d.numpy(), key=_sort_key)
        p_sp_sorted = sorted(p_sp, key=_sort_key)
        for p_ts, p_ref in zip(p_d_sorted, p_sp_sorted):
            assert abs(p_ts - p_ref) < 1e-10, (
                f"Pole mismatch: {p_ts} vs {p_ref}"
            )

        z_d_sorted = sorted(zeros_d.numpy(), key=_sort_key)
        z_sp_sorted = sorted(z_sp, key=_sort_key)
        for z_ts, z_ref in zip(z_d_sorted, z_sp_sorted):
            assert abs(z_ts - z_ref) < 1e-10

        assert abs(gain_d.item() - k_sp) < 1e-10

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_poles_inside_unit_circle(self, order: int) -> None:
        """Left half-plane poles map inside the unit circle."""
        zeros, poles, gain = chebyshev_type_2_prototype(
            order, 60.0, dtype=torch.float64
        )
        _, poles_d, _ = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )

        assert (poles_d.abs() < 1.0).all()

    @pytest.mark.parametrize("order", [2, 4, 6])
    def test_zeros_on_unit_circle(self, order: int) -> None:
        """Imaginary-axis zeros map onto the unit circle."""
        zeros, poles, gain = chebyshev_type_2_prototype(
            order, 40.0, dtype=torch.float64
        )
        zeros_d, _, _ = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )

        torch.testing.assert_close(
            zeros_d.abs(), torch.ones(order, dtype=torch.float64)
        )

    def test_odd_order_adds_zero_at_nyquist(self) -> None:
        zeros, poles, gain = chebyshev_type_2_prototype(
            3, 40.0, dtype=torch.float64
        )
        zeros_d, _, _ = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )

        assert zeros_d.numel() == 3
        assert abs(zeros_d[-1].item() + 1.0) < 1e-12

    def test_shelf_adds_no_zeros(self) -> None:
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            3, 6.0, 40.0, dtype=torch.float64
        )
        zeros_d, poles_d, _ = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )

        assert zeros_d.numel() == poles_d.numel() == 3
        assert ((zeros_d + 1).abs() > 1e-3).all()

    def test_dc_gain_preserved(self) -> None:
        zeros, poles, gain = chebyshev_type_2_shelf_prototype(
            4, -9.0, 30.0, dtype=torch.float64
        )
        zeros_d, poles_d, gain_d = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )

        dc = gain_d * torch.prod(1 - zeros_d) / torch.prod(1 - poles_d)

        assert abs(dc.abs().item() - 10 ** (-9.0 / 20)) < 1e-10


def _sort_key(x):
    return (round(x.real, 8), x.imag)
