import logging

import numpy as np

from .types import MAX_AMPLITUDE, Sound

_LOG = logging.getLogger("soundwave.quantize")

INT8_MIN = -128
INT8_MAX = 127


def quantize_samples(sound: Sound) -> np.ndarray:
    """Rescale a sound's own min..max span onto the signed 8-bit range.

    The mapping is adaptive per sound: the quietest and loudest samples always
    land on -128 and 127, so absolute loudness is not comparable between two
    quantized sounds. A constant buffer has no span to stretch and comes back
    as all zeros.
    """
    buffer = sound.buffer
    if buffer.size == 0:
        return np.zeros(0, dtype=np.int8)

    min_s = float(buffer.min())
    max_s = float(buffer.max())
    span = max_s - min_s
    if span == 0:
        _LOG.debug("Constant buffer of %d samples quantized to silence", buffer.size)
        return np.zeros(buffer.size, dtype=np.int8)

    new_range = MAX_AMPLITUDE * 2 - 1
    scale = new_range / span
    scaled = np.rint((buffer - min_s) * scale - MAX_AMPLITUDE)
    return np.clip(scaled, INT8_MIN, INT8_MAX).astype(np.int8)


def quantize(sound: Sound) -> bytes:
    return quantize_samples(sound).tobytes()
