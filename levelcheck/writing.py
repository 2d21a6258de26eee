"""The writing section: an essay checked for length, spelling and style."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from levelcheck.scores import save_score, score_path

MIN_WORDS = 120
MAX_WORDS = 150

DEFAULT_WORDS = frozenset(
    {
        "i", "like", "hobby", "sport", "music", "read", "play", "my",
        "the", "and", "to", "of", "a", "in", "is", "it", "that", "for",
        "you", "he", "she", "we", "they", "this", "are", "as", "with",
        "have", "has", "was", "were", "be", "been", "at", "on", "but",
        "not", "by", "from", "or", "an", "do", "did", "can", "could",
        "will", "would", "what", "when", "where", "which", "who", "how",
    }
)

_NON_ENGLISH = re.compile(r"[^a-zA-Z\s.,!?';:\"'\-()\[\]{}]")
_WORD_SPLIT = re.compile(r"[\s\n]+")
_WORD = re.compile(r"\b[a-zA-Z']+\b")
_LOWER_SENTENCE_START = re.compile(r"(^|\.\s+)([a-z])")
_REPEATED_SPACE = re.compile(r"\s{2,}")
_MISSING_SPACE = re.compile(r"[.,!?][a-zA-Z]")


class NonEnglishTextError(ValueError):
    """The text holds a character outside the accepted English set."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Текст содержит не-английские символы: '{character}'")
        self.character = character


class TooFewWordsError(ValueError):
    """The text is shorter than the minimum word count."""

    def __init__(self, word_count: int) -> None:
        super().__init__(f"Слишком мало слов: {word_count} (требуется минимум {MIN_WORDS})")
        self.word_count = word_count


@dataclass(frozen=True)
class WritingReport:
    """The outcome of checking an essay."""

    word_count: int
    error_count: int
    score: int
    misspelled: tuple[tuple[int, int], ...] = ()


def load_dictionary(path: str | os.PathLike[str]) -> frozenset[str]:
    """Read one word per line, lower-cased; fall back to a basic set if unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            words = {line.strip().lower() for line in handle}
    except OSError:
        return DEFAULT_WORDS
    words.discard("")
    return frozenset(words)


def find_non_english(text: str) -> Optional[str]:
    """The first character that is not accepted English text, or None."""
    match = _NON_ENGLISH.search(text)
    return match.group() if match else None


def count_words(text: str) -> int:
    """The number of whitespace-separated words."""
    return sum(1 for part in _WORD_SPLIT.split(text) if part)


def calculate_score(word_count: int, error_count: int) -> int:
    """Score out of 10: one off for exceeding the length, one off per five errors."""
    score = 10
    if word_count > MAX_WORDS:
        score -= 1
    score -= error_count // 5
    return max(0, min(score, 10))


def _count_overlapping(pattern: re.Pattern[str], text: str) -> int:
    count = 0
    position = 0
    while position < len(text):
        match = pattern.search(text, position)
        if match is None:
            break
        count += 1
        position = match.start() + 1
    return count


@dataclass(frozen=True)
class WritingChecker:
    """Checks essays against a set of known lower-case words."""

    dictionary: frozenset[str] = field(default=DEFAULT_WORDS)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "WritingChecker":
        """A checker using the word list at *path*, or the basic set if it cannot be read."""
        return cls(load_dictionary(Path(path)))

    def misspelled_spans(self, text: str) -> list[tuple[int, int]]:
        """Start and end offsets of words not in the dictionary."""
        return [
            match.span()
            for match in _WORD.finditer(text)
            if match.group().lower() not in self.dictionary
        ]

    def count_errors(self, text: str) -> int:
        """Style errors plus unknown words."""
        errors = _count_overlapping(_LOWER_SENTENCE_START, text)
        errors += _count_overlapping(_REPEATED_SPACE, text)
        errors += _count_overlapping(_MISSING_SPACE, text)
        errors += len(self.misspelled_spans(text))
        return errors

    def _report(self, text: str, word_count: int) -> WritingReport:
        error_count = self.count_errors(text)
        return WritingReport(
            word_count=word_count,
            error_count=error_count,
            score=calculate_score(word_count, error_count),
            misspelled=tuple(self.misspelled_spans(text)),
        )

    def check(self, text: str) -> WritingReport:
        """Validate and grade *text*."""
        character = find_non_english(text)
        if character is not None:
            raise NonEnglishTextError(character)
        word_count = count_words(text)
        if word_count < MIN_WORDS:
            raise TooFewWordsError(word_count)
        return self._report(text, word_count)

    def save(
        self,
        text: str,
        directory: str | os.PathLike[str] | None = None,
    ) -> WritingReport:
        """Grade *text* and save its score."""
        word_count = count_words(text)
        if word_count < MIN_WORDS:
            raise TooFewWordsError(word_count)
        report = self._report(text, word_count)
        save_score(score_path("writing", directory), report.score)
        return report