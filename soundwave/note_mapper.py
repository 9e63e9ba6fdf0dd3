import math
from typing import Dict, Union

from .errors import InvalidKeyError
from .types import REFERENCE_FREQUENCY, Accidental

WHITE_KEY_STEPS: Dict[str, int] = {
    "A": 0,
    "B": 2,
    "C": 3,
    "D": 5,
    "E": 7,
    "F": 8,
    "G": 10,
}
ACCIDENTAL_STEPS: Dict[Accidental, int] = {
    Accidental.FLAT: -1,
    Accidental.SHARP: 1,
    Accidental.NATURAL: 0,
}

AccidentalLike = Union[Accidental, str]


def _normalize_key(white_key: str) -> str:
    key = white_key.strip().upper() if isinstance(white_key, str) else ""
    if key not in WHITE_KEY_STEPS:
        raise InvalidKeyError(white_key)
    return key


def _as_accidental(accidental: AccidentalLike) -> Accidental:
    if isinstance(accidental, Accidental):
        return accidental
    return Accidental.from_symbol(accidental)


def semitones_above_reference(white_key: str, accidental: AccidentalLike = Accidental.NATURAL) -> int:
    key = _normalize_key(white_key)
    return WHITE_KEY_STEPS[key] + ACCIDENTAL_STEPS[_as_accidental(accidental)]


def frequency(white_key: str, accidental: AccidentalLike = Accidental.NATURAL, octave: int = 0) -> float:
    """Equal-tempered frequency in Hz, with A at octave 0 pinned to 440 Hz."""
    key = _normalize_key(white_key)
    result = REFERENCE_FREQUENCY * math.pow(2, WHITE_KEY_STEPS[key] / 12.0)

    shift = ACCIDENTAL_STEPS[_as_accidental(accidental)]
    if shift:
        result *= math.pow(2, shift / 12.0)

    return result * math.pow(2, octave)
