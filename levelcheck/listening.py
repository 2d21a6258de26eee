"""The listening section: multiple-choice questions about a recorded dialogue."""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Optional

from levelcheck.scores import save_score, score_path

AUDIO_FILE = "listening/audio/05Meeting a new friend in class--.mp3"


@dataclass(frozen=True)
class ListeningQuestion:
    """A question, its answer options and the index of the right option."""

    question: str
    options: tuple[str, ...]
    correct_option: int


QUESTIONS: tuple[ListeningQuestion, ...] = (
    ListeningQuestion(
        "1. Where is Laura originally from?",
        ("a) Sydney, Australia", "b) Adelaide, Australia", "c) Australia", "d) Auckland, New Zealand"),
        2,
    ),
    ListeningQuestion(
        "2. How many siblings does Sam have?",
        (
            "a) A large family of 8 siblings",
            "b) Seven",
            "c) More than a handful of siblings",
            "d) A close-knit family of 6-8",
        ),
        1,
    ),
    ListeningQuestion(
        "3. What musical instruments does Laura play?",
        (
            "a) Piano and clarinet, and is learning the guitar",
            "b) Guitar and clarinet, and is learning the piano",
            "c) Clarinet, piano, and guitar",
            "d) Guitar, piano, and violin",
        ),
        2,
    ),
    ListeningQuestion(
        "4. Why did Laura move to New York?",
        (
            "a) She moved to New York with her parents a few years ago, then went to college somewhere else",
            "b) She moved to New York for high school, then stayed to complete a degree",
            "c) She moved to New York with her parents a few years ago and stayed for college after "
            "graduating from high school.",
            "d) She moved to New York for a semester abroad, then decided to study for a degree",
        ),
        2,
    ),
    ListeningQuestion(
        "5. What instrument does Sam try to play?",
        (
            "a) Sam plays the bass guitar in a band, but badly",
            "b) Sam plays the guitar, but often borrows his friend's bass",
            "c) Sam has a bass guitar he tries to play",
            "d) Sam tries to play the bass guitar, but he admits he's not very good at it.",
        ),
        3,
    ),
)


@dataclass(frozen=True)
class ListeningResult:
    """How many questions were answered correctly out of how many."""

    correct: int
    total: int

    @property
    def score(self) -> int:
        """The result on a 0–10 scale, rounded down."""
        return self.correct * 10 // self.total

    def summary(self) -> str:
        """The message shown to the candidate."""
        return f"Correct answers: {self.correct}/{self.total}\nScore: {self.score}/10"


def check_answers(selected: Iterable[Optional[int]]) -> ListeningResult:
    """Grade the chosen option index per question, in order; None means unanswered."""
    correct = 0
    for question, choice in zip_longest(QUESTIONS, selected):
        if question is None:
            raise ValueError(f"more answers than the {len(QUESTIONS)} questions")
        if choice is None:
            continue
        if not 0 <= choice < len(question.options):
            raise ValueError(f"option {choice} out of range for: {question.question}")
        if choice == question.correct_option:
            correct += 1
    return ListeningResult(correct, len(QUESTIONS))


def submit(
    selected: Iterable[Optional[int]],
    directory: str | os.PathLike[str] | None = None,
) -> ListeningResult:
    """Grade the chosen options and save the score."""
    result = check_answers(selected)
    save_score(score_path("listening", directory), result.score)
    return result


def grade_topic_answer(answer: Optional[str]) -> Optional[int]:
    """Score a free answer about the audio's topic: 1 if it mentions the weather.

    Returns None when no answer was given.
    """
    if not answer:
        return None
    return 1 if "weather" in answer.casefold() else 0