class SoundwaveError(Exception):
    """Base class for synthesis and playback failures."""


class InvalidKeyError(SoundwaveError, ValueError):
    def __init__(self, white_key: str) -> None:
        super().__init__(f"Unknown white key {white_key!r}; expected one of A-G.")
        self.white_key = white_key


class SampleRateMismatchError(SoundwaveError, ValueError):
    def __init__(self, expected: float, actual: float) -> None:
        super().__init__(f"Cannot join sounds sampled at {expected} Hz and {actual} Hz.")
        self.expected = expected
        self.actual = actual


class EmptyCompositionError(SoundwaveError, ValueError):
    pass


class PlaybackUnavailableError(SoundwaveError, RuntimeError):
    pass
