import csv
import logging
import math
import os
from typing import IO, Iterable, List, Optional, Sequence, Union

from . import note_mapper
from .synthesis import concatenate, sine_wave_for
from .types import Accidental, Note, Sound

_LOG = logging.getLogger("soundwave.score")

FIELD_COUNT = 4

ScoreSource = Union[str, "os.PathLike[str]", IO[str], Iterable[str]]


def _parse_record(fields: Sequence[str]) -> Optional[Note]:
    key_field, accidental_field, octave_field, duration_field = (f.strip() for f in fields)
    if not key_field:
        return None
    try:
        octave = int(octave_field)
        duration = float(duration_field)
    except ValueError:
        return None
    if not math.isfinite(duration) or duration < 0:
        return None
    return Note(
        white_key=key_field[0],
        accidental=Accidental.from_symbol(accidental_field[:1]),
        octave=octave,
        duration=duration,
    )


def _read_notes(lines: Iterable[str]) -> List[Note]:
    notes: List[Note] = []
    for line_number, fields in enumerate(csv.reader(lines), start=1):
        # trailing empty fields do not count, so "A,n,0,0.5," is still a record
        while fields and fields[-1] == "":
            fields.pop()
        if len(fields) != FIELD_COUNT:
            _LOG.debug("Skipping line %d: expected %d fields, got %d", line_number, FIELD_COUNT, len(fields))
            continue
        note = _parse_record(fields)
        if note is None:
            _LOG.debug("Skipping malformed line %d: %r", line_number, ",".join(fields))
            continue
        # fail on unknown keys here rather than midway through synthesis
        note_mapper.semitones_above_reference(note.white_key, note.accidental)
        notes.append(note)
    return notes


def parse_score(source: ScoreSource) -> List[Note]:
    """Read ``key,accidental,octave,duration`` records in order.

    Lines with another field count, or whose octave or duration do not parse,
    are skipped. A well-formed line naming a key outside A-G raises
    :class:`~soundwave.errors.InvalidKeyError`.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, newline="", encoding="utf-8") as handle:
            return _read_notes(handle)
    return _read_notes(source)


def load_score(source: ScoreSource) -> Sound:
    notes = parse_score(source)
    _LOG.info("Loaded %d notes", len(notes))
    sounds = [
        sine_wave_for(note.duration, note_mapper.frequency(note.white_key, note.accidental, note.octave))
        for note in notes
    ]
    return concatenate(sounds)
