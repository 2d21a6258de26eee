"""Combining section scores into an overall English level."""

from __future__ import annotations

import os
from dataclasses import dataclass

from levelcheck.scores import load_score, score_path

MAX_TOTAL = 40

_DESCRIPTIONS = {
    "A1": "Beginner — начальный. Понимает слова и фразы в простых ситуациях (приветствие, прощание). "
    "Может представиться, рассказать о своих интересах. Читает простые тексты: вывески, инструкции. "
    "Пишет короткие сообщения.",
    "A2": "Pre Intermediate — ниже среднего. Может участвовать в коротких беседах на повседневные темы. "
    "Читает простые тексты и письма. Понимает основную повседневную речь. Пишет простые письма и записки. "
    "Может использовать основные времена и конструкции, но с ошибками.",
    "B1": "Intermediate — средний. Люди с этим уровнем способны справляться с большинством ситуаций, "
    "возникающих при путешествии в англоязычных странах. Они могут писать короткие тексты, обсуждать "
    "знакомые темы и высказывать своё мнение. Основные характеристики уровня B1: понимание основных идей "
    "текста на знакомую тематику, способность общаться в типичных ситуациях и выражать свои мысли на "
    "разные темы, умение писать простые сочинения и письма. ",
    "B2": "Upper Intermediate — выше среднего. Этот уровень характеризует уверенное владение английским. "
    "Люди с уровнем B2 могут понимать более сложные тексты и общаться на профессиональные темы. Они "
    "способны вести беседу с носителями языка на разные темы, не испытывая значительных трудностей. "
    "Основные характеристики уровня B2: способность понимать сложные тексты, как на профессиональные, "
    "так и на бытовые темы, умение вести дискуссию и защищать свою точку зрения, владение английским для "
    "использования в учебной или профессиональной среде. ",
    "C1": "Advanced — продвинутый. Люди с этим уровнем могут читать сложные тексты, вести беседы на "
    "незнакомые темы и писать детализированные эссе. Основные характеристики уровня C1: понимание длинных "
    "текстов и сложных рассуждений, умение выражать свои мысли спонтанно и без труда, возможность вести "
    "профессиональную переписку и писать сложные тексты. ",
    "C2": "Proficiency — совершенный. Это самый высокий уровень владения английским языком. Люди с этим "
    "уровнем могут понимать любой письменный или устный текст, включая академические работы и сложные "
    "технические документы. Они могут спонтанно и уверенно вести дискуссии, используя сложную лексику.",
}

_UNKNOWN_LEVEL = "Неизвестный уровень"

_TOTAL_THRESHOLDS = ((10, "A1"), (20, "A2"), (30, "B1"), (35, "B2"), (38, "C1"))

_AVERAGE_THRESHOLDS = (
    (9, "C2 - Mastery"),
    (8, "C1 - Advanced"),
    (7, "B2 - Upper-Intermediate"),
    (5.5, "B1 - Intermediate"),
    (4, "A2 - Elementary"),
)


def level_for_total(total: int) -> str:
    """The level code for a total out of 40."""
    for limit, level in _TOTAL_THRESHOLDS:
        if total <= limit:
            return level
    return "C2"


def level_description(level: str) -> str:
    """A description of *level*, or a placeholder for unknown codes."""
    return _DESCRIPTIONS.get(level, _UNKNOWN_LEVEL)


def level_from_average(average: float) -> str:
    """The named level for an average section score out of 10."""
    for limit, level in _AVERAGE_THRESHOLDS:
        if average >= limit:
            return level
    return "A1 - Beginner"


@dataclass(frozen=True)
class FinalResult:
    """The four section scores and the level they add up to."""

    grammar: int
    writing: int
    speaking: int
    listening: int

    @property
    def total(self) -> int:
        return self.grammar + self.writing + self.speaking + self.listening

    @property
    def max_total(self) -> int:
        return MAX_TOTAL

    @property
    def level(self) -> str:
        return level_for_total(self.total)

    @property
    def description(self) -> str:
        return level_description(self.level)

    def render(self) -> str:
        """The results and the level description as rich text."""
        message = (
            "<h2 style='font-size: 20pt;'>Ваш уровень английского: "
            f"<span style='color: #2c7be5;'>{self.level}</span></h2>"
            "<table style='font-size: 14pt; margin: 10px;'>"
            f"<tr><td><b>Грамматика:</b></td><td>{self.grammar}/10</td></tr>"
            f"<tr><td><b>Письмо:</b></td><td>{self.writing}/10</td></tr>"
            f"<tr><td><b>Говорение:</b></td><td>{self.speaking}/10</td></tr>"
            f"<tr><td><b>Аудирование:</b></td><td>{self.listening}/10</td></tr>"
            f"<tr><td><b>Общий счет:</b></td><td>{self.total}/{self.max_total}</td></tr>"
            "</table>"
        )
        description = (
            "<div style='font-size: 14pt; margin: 10px;'>"
            f"<h3 style='color: #2c7be5;'>Описание уровня {self.level}:</h3>"
            f"<p>{self.description}</p>"
            "</div>"
        )
        return message + description


def final_result(directory: str | os.PathLike[str] | None = None) -> FinalResult:
    """Load the saved section scores from *directory*."""
    return FinalResult(
        grammar=load_score(score_path("grammar", directory)),
        writing=load_score(score_path("writing", directory)),
        speaking=load_score(score_path("speaking", directory)),
        listening=load_score(score_path("listening", directory)),
    )


def average_report(grammar: int, speaking: int, writing: int, listening: int) -> str:
    """A plain-text report of the four scores, their average and its level."""
    average = (grammar + speaking + writing + listening) / 4.0
    return (
        f"Grammar: {grammar}/10\n"
        f"Speaking: {speaking}/10\n"
        f"Writing: {writing}/10\n"
        f"Listening: {listening}/10\n\n"
        f"Average: {average:.2f}\n"
        f"Level: {level_from_average(average)}"
    )