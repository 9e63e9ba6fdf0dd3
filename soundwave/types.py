from dataclasses import dataclass
from enum import Enum

import numpy as np

DEFAULT_SAMPLE_RATE = 44100.0
MAX_AMPLITUDE = 128.0
REFERENCE_FREQUENCY = 440.0  # A at octave 0


class Accidental(Enum):
    FLAT = "b"
    SHARP = "#"
    NATURAL = "n"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Accidental":
        # anything that is not a flat or sharp plays natural
        if symbol == cls.FLAT.value:
            return cls.FLAT
        if symbol == cls.SHARP.value:
            return cls.SHARP
        return cls.NATURAL


@dataclass(frozen=True, eq=False)
class Sound:
    """Read-only sample buffer paired with its sample rate.

    Build instances with the factories in :mod:`soundwave.synthesis`.
    """

    buffer: np.ndarray
    sample_rate: float  # samples per second

    def __post_init__(self) -> None:
        samples = np.array(self.buffer, dtype=np.float64)
        samples.setflags(write=False)
        object.__setattr__(self, "buffer", samples)

    def __len__(self) -> int:
        return int(self.buffer.shape[0])

    @property
    def duration(self) -> float:
        return len(self) / self.sample_rate


@dataclass(frozen=True)
class Note:
    white_key: str  # A..G
    accidental: Accidental
    octave: int  # 0 holds A440
    duration: float  # seconds
