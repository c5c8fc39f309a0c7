# contrasthero - A maubot to play the Contrast Hero accessibility game in Matrix.
# Copyright (C) 2020 Tulir Asokan
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from __future__ import annotations

import random

from attr import dataclass
import attr

from contrast import Color, Level, wcag

from . import palette
from .scores import GameScore

GAME_NAME = "Contrast Hero"

DECK: list[tuple[Color, Color, str]] = [
    (
        palette.BLACK,
        palette.WHITE,
        "Black on white is the highest contrast there is, 21:1.",
    ),
    (
        palette.WHITE,
        palette.BLACK,
        "White on black is just as readable. The ratio doesn't care which color is in front.",
    ),
    (
        palette.BLUE,
        palette.WHITE,
        "Pure blue is dark enough on white to pass AA and even AAA.",
    ),
    (
        palette.WHITE,
        palette.SYSTEM_BLUE,
        "White on the system blue looks bold, but it lands just under 4.5:1.",
    ),
    (
        palette.SYSTEM_GRAY,
        palette.WHITE,
        "Light gray on white has poor contrast and fails WCAG AA requirements.",
    ),
    (
        palette.SYSTEM_YELLOW,
        palette.WHITE,
        "Yellow text on a white background has very poor contrast and is hard to read.",
    ),
    (
        palette.SYSTEM_GRAY2,
        palette.SYSTEM_GRAY6,
        "Similar gray tones provide insufficient contrast.",
    ),
    (
        palette.SYSTEM_RED,
        palette.SYSTEM_PINK,
        "Red text on a pink background lacks adequate contrast.",
    ),
    (
        palette.SYSTEM_ORANGE,
        palette.WHITE,
        "Orange on white is vivid, but far too light for body text.",
    ),
    (
        palette.SYSTEM_PURPLE,
        palette.WHITE,
        "This purple comes close on white, but it's still short of 4.5:1.",
    ),
]

SAMPLE_TEXTS = ["Sample Text", "Read Me", "Important", "Click Here", "Menu Item"]


class GameOver(Exception):
    pass


@dataclass(frozen=True)
class ContrastQuestion:
    foreground: Color
    background: Color
    sample_text: str
    explanation: str
    level: Level = Level.AA_NORMAL

    @property
    def contrast_ratio(self) -> float:
        return wcag.contrast_ratio(self.foreground, self.background)

    @property
    def correct_answer(self) -> bool:
        return wcag.passes_threshold(
            self.foreground, self.background, self.level.threshold
        )


@dataclass(frozen=True)
class Answer:
    question: ContrastQuestion
    given: bool

    @property
    def correct(self) -> bool:
        return self.given == self.question.correct_answer


def generate_questions(
    count: int, level: Level = Level.AA_NORMAL, rng: random.Random | None = None
) -> list[ContrastQuestion]:
    """Build ``count`` questions by cycling through the deck, then shuffle them."""
    if count < 1:
        raise ValueError(f"Can't generate {count} questions")
    questions = []
    for i in range(count):
        foreground, background, explanation = DECK[i % len(DECK)]
        questions.append(
            ContrastQuestion(
                foreground=foreground,
                background=background,
                sample_text=SAMPLE_TEXTS[i % len(SAMPLE_TEXTS)],
                explanation=explanation,
                level=level,
            )
        )
    (rng or random).shuffle(questions)
    return questions


@dataclass
class GameSession:
    questions: list[ContrastQuestion]
    game_name: str = GAME_NAME
    current: int = 0
    score: int = 0
    answers: list[Answer] = attr.ib(factory=list)

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def finished(self) -> bool:
        return self.current >= self.total_questions

    @property
    def question(self) -> ContrastQuestion:
        if self.finished:
            raise GameOver("The game is already over")
        return self.questions[self.current]

    @property
    def progress(self) -> int:
        """Percentage through the game, counting the question being asked."""
        return min(self.current + 1, self.total_questions) * 100 // self.total_questions

    def answer(self, given: bool) -> Answer:
        answer = Answer(question=self.question, given=given)
        if answer.correct:
            self.score += 1
        self.answers.append(answer)
        self.current += 1
        return answer

    def to_score(self, timestamp: int) -> GameScore:
        return GameScore(
            game_name=self.game_name,
            score=self.score,
            total_questions=self.total_questions,
            timestamp=timestamp,
        )


def performance_message(percentage: int) -> str:
    if percentage >= 90:
        return "Excellent! You're a contrast expert!"
    elif percentage >= 70:
        return "Great job! You have a solid understanding of contrast."
    elif percentage >= 50:
        return "Good effort! Keep practicing to improve."
    return "Keep learning! Contrast is tricky but important."
