import math
from typing import Iterable, List

import numpy as np

from .errors import EmptyCompositionError, SampleRateMismatchError
from . import note_mapper
from .note_mapper import AccidentalLike
from .types import DEFAULT_SAMPLE_RATE, MAX_AMPLITUDE, Sound


def sine_wave(
    length: int,
    sample_rate: float,
    frequency: float,
    amplitude: float = MAX_AMPLITUDE,
    phase: float = 0.0,
) -> Sound:
    """Pure sine tone of ``length`` samples.

    Nothing guards against aliasing; frequencies near or past
    ``sample_rate / 2`` fold back as they would on any naive oscillator.
    """
    if length < 0:
        raise ValueError(f"Sample count must be non-negative, got {length}.")
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate}.")

    angular = 2.0 * math.pi * frequency
    instants = np.arange(int(length), dtype=np.float64) / sample_rate
    samples = amplitude * np.sin(angular * instants + phase)
    return Sound(buffer=samples, sample_rate=float(sample_rate))


def sine_wave_for(duration: float, frequency: float) -> Sound:
    length = int(math.floor(DEFAULT_SAMPLE_RATE * duration))
    return sine_wave(length, DEFAULT_SAMPLE_RATE, frequency, MAX_AMPLITUDE, 0.0)


def concatenate(sounds: Iterable[Sound]) -> Sound:
    """Play ``sounds`` back to back with no gap or crossfade."""
    sound_list: List[Sound] = list(sounds)
    if not sound_list:
        raise EmptyCompositionError("Nothing to concatenate.")

    sample_rate = sound_list[0].sample_rate
    for sound in sound_list[1:]:
        if sound.sample_rate != sample_rate:
            raise SampleRateMismatchError(sample_rate, sound.sample_rate)

    joined = np.concatenate([sound.buffer for sound in sound_list])
    return Sound(buffer=joined, sample_rate=sample_rate)


def synthesize_note(white_key: str, accidental: AccidentalLike, octave: int, duration: float) -> Sound:
    return sine_wave_for(duration, note_mapper.frequency(white_key, accidental, octave))
