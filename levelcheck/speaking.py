"""The speaking section: a read-aloud passage scored against what was recognised."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from levelcheck.scores import save_score, score_path

REFERENCE_TEXT = (
    "Today I want to talk about my favorite hobby which is playing the guitar. "
    "I started learning about five years ago, and it has become a very important part of my life. "
    "I find it incredibly relaxing and a great way to express myself. "
    "Learning to play the guitar was challenging at first, but with practice, I gradually improved. "
    "Now, I can play many of my favorite songs, and I even write my own music sometimes. "
    "I think everyone should have a hobby that they are passionate about. "
    "It helps to relieve stress, develop new skills, and connect with other people who share similar interests. "
    "For me, playing the guitar is more than just a hobby; it's a way to connect with my emotions "
    "and express my creativity."
)

MIN_RECORDING_BYTES = 1024
SHORT_RECORDING_SECONDS = 5
LONG_RECORDING_SECONDS = 10


class RecordingTooSmallError(ValueError):
    """The recording is missing or too small to be a real recording."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__("Запись не удалась. Размер файла слишком маленький.")
        self.path = Path(path)


@dataclass(frozen=True)
class PronunciationResult:
    """How closely the recognised speech followed the reference passage."""

    score: int = 0
    accuracy: float = 0.0
    duration: float = 0.0
    incorrect_words: tuple[str, ...] = ()
    recognized_text: str = ""

    def summary(self) -> str:
        """The result as rich text for the candidate."""
        return (
            "<h3>Результат оценки произношения</h3>"
            f"<p><b>Общий балл:</b> {self.score}/10</p>"
            f"<p><b>Точность:</b> {self.accuracy:.1f}%</p>"
            f"<p><b>Длина записи:</b> {self.duration:.1f} сек</p>"
            f"<p><b>Проблемные слова:</b> {', '.join(self.incorrect_words)}</p>"
            f"<p><b>Распознанный текст:</b><br>{self.recognized_text}</p>"
        )


def _split_words(text: str) -> list[str]:
    return [word for word in text.split(" ") if word]


def evaluate(
    recognized_text: str,
    duration: float,
    reference: str = REFERENCE_TEXT,
) -> PronunciationResult:
    """Score *recognized_text* of a recording lasting *duration* seconds against *reference*."""
    recognized_text = recognized_text.strip()
    reference_words = _split_words(reference)
    if not reference_words:
        raise ValueError("the reference text has no words")
    heard = {word.casefold() for word in _split_words(recognized_text)}

    incorrect = [word for word in reference_words if word.casefold() not in heard]
    correct = len(reference_words) - len(incorrect)

    accuracy = correct * 100.0 / len(reference_words)
    score = min(10, int(accuracy / 10.0))
    if duration < SHORT_RECORDING_SECONDS:
        score = max(1, score - 2)
    elif duration > LONG_RECORDING_SECONDS:
        score = min(10, score + 1)

    return PronunciationResult(
        score=score,
        accuracy=accuracy,
        duration=float(duration),
        incorrect_words=tuple(incorrect),
        recognized_text=recognized_text,
    )


def check_recording(path: str | os.PathLike[str]) -> Path:
    """Return *path* if it holds a usable recording, else raise RecordingTooSmallError."""
    recording = Path(path)
    try:
        size = recording.stat().st_size
    except OSError:
        raise RecordingTooSmallError(recording) from None
    if not recording.is_file() or size < MIN_RECORDING_BYTES:
        raise RecordingTooSmallError(recording)
    return recording


def recording_path(
    directory: str | os.PathLike[str],
    when: Optional[datetime] = None,
) -> Path:
    """A time-stamped path for a new recording inside *directory*."""
    moment = when if when is not None else datetime.now()
    return Path(directory) / f"speaking_{moment:%Y%m%d_%H%M%S}.wav"


def submit(
    recognized_text: str,
    duration: float,
    directory: str | os.PathLike[str] | None = None,
) -> PronunciationResult:
    """Evaluate the recognised speech and save its score."""
    result = evaluate(recognized_text, duration)
    save_score(score_path("speaking", directory), result.score)
    return result