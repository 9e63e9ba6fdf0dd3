import asyncio
import io
import logging
import threading
from typing import Callable, Optional

from pydub import AudioSegment
from pydub.playback import play as _play_segment

from .errors import PlaybackUnavailableError
from .quantize import quantize
from .types import Sound

_LOG = logging.getLogger("soundwave.playback")

SAMPLE_WIDTH = 1  # bytes, signed
DEVICE_SAMPLE_WIDTH = 2
CHANNELS = 1


def to_audio_segment(sound: Sound) -> AudioSegment:
    """Mono signed 8-bit segment at the sound's own sample rate."""
    return AudioSegment(
        quantize(sound),
        frame_rate=int(round(sound.sample_rate)),
        sample_width=SAMPLE_WIDTH,
        channels=CHANNELS,
    )


def render_to_wav(sound: Sound) -> io.BytesIO:
    segment = to_audio_segment(sound)
    buffer = io.BytesIO()
    segment.export(buffer, format="wav")
    buffer.seek(0)
    return buffer


def play(sound: Sound) -> None:
    """Block until the sound has drained through the default output device."""
    segment = to_audio_segment(sound)
    _LOG.debug("Playing %.2f seconds at %d Hz", sound.duration, segment.frame_rate)
    try:
        # simpleaudio and pyaudio read 1-byte samples as unsigned; 16-bit is signed everywhere
        _play_segment(segment.set_sample_width(DEVICE_SAMPLE_WIDTH))
    except Exception as exc:  # pydub backends raise anything from OSError to their own types
        raise PlaybackUnavailableError(f"Audio output unavailable ({exc}).") from exc


def play_in_background(
    sound: Sound,
    on_error: Optional[Callable[[PlaybackUnavailableError], None]] = None,
) -> threading.Thread:
    def _worker() -> None:
        try:
            play(sound)
        except PlaybackUnavailableError as exc:
            _LOG.error("Playback failed: %s", exc)
            if on_error is not None:
                on_error(exc)

    thread = threading.Thread(target=_worker, name="soundwave-playback")
    thread.start()
    return thread


async def play_async(sound: Sound) -> None:
    await asyncio.to_thread(play, sound)
