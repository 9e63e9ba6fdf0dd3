"""
Tests for 8-bit quantization
"""

import numpy as np

from soundwave import Sound, quantize, quantize_samples, sine_wave, synthesize_note


def _sound(values, rate=44100.0):
    return Sound(buffer=np.asarray(values, dtype=np.float64), sample_rate=rate)


class TestQuantize:
    """Adaptive min/max rescale."""

    def test_length_and_range(self):
        sound = synthesize_note("D", "b", 0, 0.05)
        out = quantize_samples(sound)
        assert out.dtype == np.int8
        assert len(out) == len(sound)
        assert out.min() >= -128
        assert out.max() <= 127

    def test_extremes_map_to_bounds(self):
        sound = _sound([0.3, -2.0, 5.0, 1.0])
        out = quantize_samples(sound)
        assert out[1] == -128
        assert out[2] == 127
        assert out[int(np.argmax(sound.buffer))] == out.max()
        assert out[int(np.argmin(sound.buffer))] == out.min()

    def test_affine_midpoint(self):
        out = quantize_samples(_sound([-1.0, 0.0, 1.0]))
        assert list(out) == [-128, 0, 127]

    def test_relative_shape_only(self):
        """Loud and quiet copies of one tone quantize to the same levels."""
        quiet = sine_wave(200, 8000.0, 440.0, 1.0, 0.0)
        loud = sine_wave(200, 8000.0, 440.0, 100.0, 0.0)
        # samples landing on a half step may round either way
        np.testing.assert_allclose(quantize_samples(quiet).astype(int), quantize_samples(loud).astype(int), atol=1)

    def test_relative_shape_exact_off_half_steps(self):
        quiet = _sound([-1.0, -0.2, 0.6, 1.0])
        loud = _sound([-50.0, -10.0, 30.0, 50.0])
        np.testing.assert_array_equal(quantize_samples(quiet), quantize_samples(loud))

    def test_constant_buffer_is_silence(self):
        assert list(quantize_samples(_sound([3.5] * 6))) == [0] * 6

    def test_single_sample(self):
        assert quantize(_sound([42.0])) == b"\x00"

    def test_empty(self):
        assert quantize(_sound([])) == b""

    def test_bytes_are_signed(self):
        data = quantize(_sound([-1.0, 1.0]))
        assert data == bytes([0x80, 0x7F])
        np.testing.assert_array_equal(np.frombuffer(data, dtype=np.int8), [-128, 127])
