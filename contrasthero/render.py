# contrasthero - A maubot to play the Contrast Hero accessibility game in Matrix.
# Copyright (C) 2023 Tulir Asokan
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
# along with this program.  If not, see <https://www.gnu.org/licenses/>
import html

from attr import dataclass

from contrast import Color, ContrastResult, Level

from .game import Answer, GameSession, performance_message
from .scores import GameScore, ScoreBoard

YES_KEY = "✅"
NO_KEY = "❌"

LEARN_TEXT = """**Color Contrast**

Color contrast is crucial for readability:

WCAG AA Requirements:
* Normal text: 4.5:1 contrast ratio
* Large text (18pt+): 3:1 contrast ratio

WCAG AAA Requirements:
* Normal text: 7:1 contrast ratio
* Large text: 4.5:1 contrast ratio

Test your colors with `!contrast check <foreground> <background>`,
or play a round with `!contrast play`!"""


@dataclass
class ColorSample:
    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    @property
    def is_default(self) -> bool:
        return not any([self.fg, self.bg, self.bold])

    @property
    def open_tags(self) -> str:
        tags = []
        if self.fg or self.bg:
            tags.append("<font")
            if self.fg:
                tags.append(f' color="{self.fg}"')
            if self.bg:
                tags.append(f' data-mx-bg-color="{self.bg}"')
            tags.append(">")
        if self.bold:
            tags.append("<strong>")
        return "".join(tags)

    @property
    def close_tags(self) -> str:
        tags = []
        if self.bold:
            tags.append("</strong>")
        if self.fg or self.bg:
            tags.append("</font>")
        return "".join(tags)

    def render(self, text: str) -> str:
        if self.is_default:
            return html.escape(text)
        return f"{self.open_tags}{html.escape(text)}{self.close_tags}"


def format_ratio(ratio: float) -> str:
    return f"{ratio:.1f}:1"


def _verdict(passed: bool) -> str:
    return "pass" if passed else "**fail**"


def render_check(fg: Color, bg: Color, result: ContrastResult) -> str:
    sample = ColorSample(fg=fg, bg=bg).render(f" {fg} on {bg} ")
    lines = [
        f"{sample} contrast ratio: **{format_ratio(result.ratio)}**",
        "",
    ]
    for level in Level:
        lines.append(
            f"* {level.label}, {level.threshold:g}:1: {_verdict(result.passes(level))}"
        )
    return "\n".join(lines)


def render_question(session: GameSession) -> str:
    question = session.question
    sample = ColorSample(fg=question.foreground, bg=question.background, bold=True)
    return (
        f"**Question {session.current + 1} of {session.total_questions}** "
        f"(score: {session.score}, {session.progress}% complete)\n\n"
        f"Does this pass {question.level.label}?\n\n"
        f"{sample.render(f'  {question.sample_text}  ')}\n\n"
        f"Answer `yes` or `no`, or react with {YES_KEY} or {NO_KEY}."
    )


def render_feedback(answer: Answer) -> str:
    question = answer.question
    verdict = f"{YES_KEY} **Correct!**" if answer.correct else f"{NO_KEY} **Incorrect**"
    level = question.level
    return (
        f"{verdict} Contrast ratio: {format_ratio(question.contrast_ratio)}. "
        f"{level.label} requires {level.threshold:g}:1.\n\n"
        f"> {html.escape(question.explanation)}"
    )


def render_final(score: GameScore, best: GameScore | None) -> str:
    resp = (
        f"**Game complete!** Final score: {score.formatted}\n\n"
        f"{performance_message(score.percentage)}"
    )
    if best:
        resp += f"\n\nYour best score: {best.formatted}"
    return resp


def render_scores(board: ScoreBoard, game_name: str) -> str:
    if not board.scores:
        return "You haven't finished any games yet. Start one with `!contrast play`."
    lines = []
    best = board.high_score(game_name)
    if best:
        lines += [f"🏆 Best {html.escape(game_name)} score: {best.formatted}", ""]
    lines.append("**Recent scores:**")
    for score in board.recent():
        lines.append(f"* {html.escape(score.game_name)}: {score.formatted}")
    return "\n".join(lines)


def render_progress(board: ScoreBoard) -> str:
    lines = [
        f"**Games played:** {board.games_played}",
        f"**Best score:** {board.best_percentage}%",
        f"**Overall accuracy:** {board.overall_accuracy}%",
        "",
        "**Achievements:**",
    ]
    for achievement in board.achievements():
        mark = "🏅" if achievement.unlocked else "🔒"
        lines.append(f"* {mark} {achievement.title}: {achievement.description}")
    return "\n".join(lines)
