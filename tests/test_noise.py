"""Tests for noise correction, noise error and ratio conversions."""

import math
import warnings

import numpy as np
import pandas as pd
import pytest

from soundstats.noise import noise_correction, noise_error, snnr_to_snr, snr_to_snnr


class TestNoiseCorrection:
    def test_reference_value(self):
        assert math.isclose(noise_correction(10, 0), 10 * math.log10(10 - 1), rel_tol=1e-12)
        assert math.isclose(noise_correction(10, 0), 9.5424, abs_tol=1e-4)

    def test_scalar_inputs_return_float(self):
        assert isinstance(noise_correction(80.0, 70.0), float)

    def test_energy_balance_when_signal_exceeds_noise(self):
        rng = np.random.default_rng(3)
        n = rng.uniform(20.0, 60.0, size=50)
        xn = n + rng.uniform(0.01, 30.0, size=50)
        x = noise_correction(xn, n)
        assert np.isfinite(x).all()
        assert np.allclose(10 ** (x / 10), 10 ** (xn / 10) - 10 ** (n / 10), rtol=1e-9)

    def test_noise_above_signal_is_minus_infinity(self):
        xn = np.array([[30.0, 40.0], [50.0, 20.0]])
        n = np.array([[31.0, 10.0], [60.0, 20.5]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            x = noise_correction(xn, n)
        assert x[0, 0] == -np.inf
        assert x[1, 0] == -np.inf
        assert x[1, 1] == -np.inf
        assert np.isfinite(x[0, 1])

    def test_broadcast_row_of_noise(self):
        xn = np.array([[40.0, 50.0, 60.0], [30.0, 45.0, 55.0]])
        n = np.array([35.0, 48.0, 61.0])
        x = noise_correction(xn, n)
        assert x.shape == (2, 3)
        assert np.isneginf(x[:, 2]).all()
        assert np.isneginf(x[1, 0])
        assert np.isfinite(x[0, 0])

    def test_scalar_noise_above_vector(self):
        x = noise_correction([1.0, 2.0, 3.0], 5.0)
        assert np.isneginf(x).all()

    def test_equal_levels_give_minus_infinity(self):
        assert noise_correction(42.0, 42.0) == -math.inf

    def test_zero_noise_leaves_level_unchanged(self):
        xn = np.array([-12.5, 0.0, 33.3, 120.0])
        assert np.allclose(noise_correction(xn, -np.inf), xn)

    def test_series_keeps_index(self):
        xn = pd.Series([60.0, 65.0], index=["left", "right"], name="Lsn")
        out = noise_correction(xn, 50.0)
        assert isinstance(out, pd.Series)
        assert list(out.index) == ["left", "right"]

    def test_non_numeric_input_raises(self):
        with pytest.raises(TypeError, match="XN"):
            noise_correction("loud", 10.0)
        with pytest.raises(TypeError, match="N must be"):
            noise_correction(10.0, ["quiet"])

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError, match="broadcastable"):
            noise_correction([1.0, 2.0, 3.0], [1.0, 2.0])


class TestNoiseError:
    def test_zero_snr_gives_three_db(self):
        assert math.isclose(noise_error(0), 10 * math.log10(2), rel_tol=1e-12)
        assert math.isclose(noise_error(0, False), 3.0103, abs_tol=1e-4)

    def test_snnr_singularity_is_infinite(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert noise_error(0.0, True) == math.inf

    def test_very_low_ratio_overflows_silently(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert noise_error(-4000.0) == math.inf

    def test_snnr_error_grows_towards_zero(self):
        snnr = np.array([20.0, 10.0, 3.0, 1.0, 0.1, 1e-6])
        err = noise_error(snnr, True)
        assert np.all(np.diff(err) > 0)
        assert np.isfinite(err).all()

    def test_flag_accepts_zero_and_one(self):
        r = np.array([3.0, 6.0])
        assert np.array_equal(noise_error(r, 1), noise_error(r, True))
        assert np.array_equal(noise_error(r, 0), noise_error(r, False))
        assert np.array_equal(noise_error(r, np.bool_(True)), noise_error(r, True))

    def test_flag_accepts_zero_dimensional_arrays(self):
        assert noise_error(3.0, np.array(True)) == noise_error(3.0, True)
        assert noise_error(3.0, np.array(0)) == noise_error(3.0, False)
        assert noise_error(3.0, np.array(1.0)) == noise_error(3.0, True)

    @pytest.mark.parametrize("flag", [2, 0.5, "yes", None, [True, False]])
    def test_invalid_flag_raises(self, flag):
        with pytest.raises(ValueError, match="is_snnr"):
            noise_error(5.0, flag)

    def test_non_numeric_ratio_raises(self):
        with pytest.raises(TypeError, match="RATIO"):
            noise_error("10 dB")

    def test_shape_is_preserved(self):
        r = np.linspace(1.0, 20.0, 12).reshape(3, 4)
        assert noise_error(r).shape == (3, 4)


class TestRatioConversions:
    def test_round_trip(self):
        snr = np.array([-10.0, 0.0, 5.0, 20.0])
        assert np.allclose(snnr_to_snr(snr_to_snnr(snr)), snr)

    def test_zero_snr_is_three_db_snnr(self):
        assert math.isclose(snr_to_snnr(0.0), 10 * math.log10(2), rel_tol=1e-12)

    def test_negative_snnr_has_no_signal(self):
        assert snnr_to_snr(-1.0) == -math.inf

    def test_noise_error_is_ratio_difference(self):
        snr = np.array([-3.0, 0.0, 4.0, 15.0])
        assert np.allclose(noise_error(snr, False), snr_to_snnr(snr) - snr)

        snnr = np.array([0.5, 3.0, 10.0, 25.0])
        assert np.allclose(noise_error(snnr, True), snnr - snnr_to_snr(snnr))
