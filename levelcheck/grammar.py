"""The grammar section: fixed questions answered by typed text."""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import zip_longest
from typing import Callable, Iterable, Optional

from levelcheck.scores import save_score, score_path


@dataclass(frozen=True)
class GrammarQuestion:
    """A question, its expected lower-case answer and the points it is worth."""

    text: str
    answer: str
    points: int

    def is_correct(self, answer: Optional[str]) -> bool:
        """Whether *answer* matches, ignoring surrounding space and case."""
        return answer is not None and answer.strip().lower() == self.answer


QUESTIONS: tuple[GrammarQuestion, ...] = (
    GrammarQuestion("Выберите правильный вариант:\nHe _____ a book. [read/reads]", "reads", 1),
    GrammarQuestion("Выберите правильный вариант:\nThey _____ soccer on weekends. [play/plays]", "play", 1),
    GrammarQuestion("Выберите правильный предлог:\nThe book is ______ the table. [on/in]", "on", 1),
    GrammarQuestion("Выберите правильный предлог:\nI am going ______ the store. [to/at]", "to", 1),
    GrammarQuestion("Выберите правильную форму глагола:\nShe ______ studying right now. [is/are]", "is", 1),
    GrammarQuestion(
        "Выберите правильную форму глагола:\nThey ______ finished their homework yet. [have/has]", "have", 1
    ),
    GrammarQuestion("Выберите правильный вариант:\nThe cat _____ on the sofa. [sleep/sleeps]", "sleeps", 1),
    GrammarQuestion("Выберите правильный вариант:\nMy friend _____ in London. [live/lives]", "lives", 1),
    GrammarQuestion("Выберите правильный вариант:\nWe _____ a car. [have/has]", "have", 1),
    GrammarQuestion("Выберите правильный вариант:\nThe train _____ at 10 AM. [leave/leaves]", "leaves", 1),
    GrammarQuestion("Выберите правильный вариант:\nHe _____ to the music. [dance/dances]", "dances", 1),
    GrammarQuestion("Выберите правильный вариант:\nShe _____ English very well. [speak/speaks]", "speaks", 1),
    GrammarQuestion("Выберите правильный вариант:\nThey _____ tennis every weekend. [play/plays]", "play", 1),
    GrammarQuestion(
        "Выберите правильное время:\nIf I __  the answer, I would tell you. [knew / would know / have known]",
        "knew",
        2,
    ),
    GrammarQuestion(
        "Выберите правильную форму глагола:\nHe asked me where I __  on vacation last year. "
        "[went / had gone / have gone]",
        "had gone",
        2,
    ),
    GrammarQuestion(
        "Выберите правильный модальный глагол:\nYou __  see a doctor if you have a fever. [must / should / might]",
        "should",
        2,
    ),
    GrammarQuestion(
        "Выберите правильное время:\nBy the time we arrived, the movie __ . "
        "[started / had started / was starting]",
        "had started",
        2,
    ),
    GrammarQuestion(
        "Выберите правильный предлог:\nShe is very good __ playing the piano. [at / in / on]", "at", 2
    ),
    GrammarQuestion(
        "Выберите правильное условное наклонение:\nIf she __ harder, she would have passed the exam. "
        "[studied / had studied / would have studied]",
        "had studied",
        2,
    ),
    GrammarQuestion(
        "Выберите правильную форму глагола:\nHe is said __ a very talented musician. [to be / being / be]",
        "to be",
        2,
    ),
)


@dataclass(frozen=True)
class GrammarResult:
    """Points earned out of the points available."""

    total_score: int
    max_score: int

    @property
    def scaled(self) -> int:
        """The score on a 0–10 scale, rounded down."""
        return self.total_score * 10 // self.max_score

    def summary(self) -> str:
        """The message shown to the candidate."""
        return (
            f"Счет по 10-бальной шкале: {self.scaled}/10\n"
            f"Общий счет: {self.total_score}/{self.max_score}"
        )


def grade(answers: Iterable[Optional[str]]) -> GrammarResult:
    """Grade answers given in question order; missing or None answers score nothing."""
    total = 0
    maximum = 0
    for question, answer in zip_longest(QUESTIONS, answers):
        if question is None:
            raise ValueError(f"more answers than the {len(QUESTIONS)} questions")
        maximum += question.points
        if question.is_correct(answer):
            total += question.points
    return GrammarResult(total, maximum)


def run_test(
    ask: Callable[[str], Optional[str]],
    directory: str | os.PathLike[str] | None = None,
) -> GrammarResult:
    """Ask every question through *ask*, grade, and save the scaled score."""
    result = grade(ask(question.text) for question in QUESTIONS)
    save_score(score_path("grammar", directory), result.scaled)
    return result