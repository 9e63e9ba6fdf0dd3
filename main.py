import logging
import os
import sys

from dotenv import load_dotenv

from soundwave import SoundwaveError, load_score
from soundwave.playback import play_in_background, render_to_wav

DEFAULT_SCORE = os.path.join("data", "scale.csv")


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
    )


def _playback_enabled() -> bool:
    return os.getenv("SOUNDWAVE_PLAY", "1").strip().lower() not in ("0", "false", "no", "off")


def main() -> int:
    load_dotenv()
    configure_logging()
    log = logging.getLogger("soundwave")

    score_path = sys.argv[1] if len(sys.argv) > 1 else os.getenv("SOUNDWAVE_SCORE", DEFAULT_SCORE)
    try:
        sound = load_score(score_path)
    except (OSError, SoundwaveError) as exc:
        log.error("Couldn't build a sound from %s: %s", score_path, exc)
        return 1
    log.info("Composed %.2f seconds from %s", sound.duration, score_path)

    wav_out = os.getenv("SOUNDWAVE_WAV_OUT")
    if wav_out:
        try:
            with open(wav_out, "wb") as handle:
                handle.write(render_to_wav(sound).getvalue())
        except OSError as exc:
            log.error("Couldn't write %s: %s", wav_out, exc)
            return 1
        log.info("Wrote %s", wav_out)

    if not _playback_enabled():
        return 0

    failures = []
    worker = play_in_background(sound, on_error=failures.append)
    try:
        worker.join()
    except KeyboardInterrupt:
        log.info("Interrupted; playback keeps running until it drains.")
        worker.join()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
