"""Sine-wave note synthesis and 8-bit playback."""

from .errors import (
    EmptyCompositionError,
    InvalidKeyError,
    PlaybackUnavailableError,
    SampleRateMismatchError,
    SoundwaveError,
)
from .note_mapper import frequency
from .quantize import quantize, quantize_samples
from .score import load_score, parse_score
from .synthesis import concatenate, sine_wave, sine_wave_for, synthesize_note
from .types import Accidental, Note, Sound

__all__ = [
    "Accidental",
    "EmptyCompositionError",
    "InvalidKeyError",
    "Note",
    "PlaybackUnavailableError",
    "SampleRateMismatchError",
    "Sound",
    "SoundwaveError",
    "concatenate",
    "frequency",
    "load_score",
    "parse_score",
    "quantize",
    "quantize_samples",
    "sine_wave",
    "sine_wave_for",
    "synthesize_note",
]
