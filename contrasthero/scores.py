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
from typing import List, Optional
from uuid import uuid4
import json
import logging

from attr import dataclass
from mautrix.types import SerializableAttrs, SerializerError
import attr

KEEP_PER_GAME = 10
RECENT_LIMIT = 5


@dataclass
class GameScore(SerializableAttrs):
    game_name: str
    score: int
    total_questions: int
    # Milliseconds since the epoch, like Matrix event timestamps
    timestamp: int
    id: str = attr.ib(factory=lambda: str(uuid4()))

    @property
    def percentage(self) -> int:
        if self.total_questions <= 0:
            return 0
        return self.score * 100 // self.total_questions

    @property
    def formatted(self) -> str:
        return f"{self.score}/{self.total_questions} ({self.percentage}%)"


@dataclass(frozen=True)
class Achievement:
    title: str
    description: str
    unlocked: bool


@dataclass
class ScoreBoard:
    """A user's game history, newest game results mixed with their best ones."""

    scores: List[GameScore] = attr.ib(factory=list)
    keep: int = KEEP_PER_GAME

    def add(self, score: GameScore) -> None:
        """Add a score, keeping only the best ``keep`` scores of its game."""
        same_game = [s for s in self.scores if s.game_name == score.game_name]
        # sorted() is stable, so ties keep the older score first
        same_game = sorted(same_game + [score], key=lambda s: s.score, reverse=True)
        self.scores = same_game[: self.keep] + [
            s for s in self.scores if s.game_name != score.game_name
        ]

    def scores_for(self, game_name: str) -> List[GameScore]:
        return sorted(
            (s for s in self.scores if s.game_name == game_name),
            key=lambda s: s.score,
            reverse=True,
        )

    def high_score(self, game_name: str) -> Optional[GameScore]:
        scores = self.scores_for(game_name)
        return scores[0] if scores else None

    def recent(self, limit: int = RECENT_LIMIT) -> List[GameScore]:
        return sorted(self.scores, key=lambda s: s.timestamp, reverse=True)[:limit]

    @property
    def games_played(self) -> int:
        return len(self.scores)

    @property
    def best_percentage(self) -> int:
        return max((s.percentage for s in self.scores), default=0)

    @property
    def overall_accuracy(self) -> int:
        total_questions = sum(s.total_questions for s in self.scores)
        if total_questions <= 0:
            return 0
        return sum(s.score for s in self.scores) * 100 // total_questions

    def achievements(self) -> List[Achievement]:
        return [
            Achievement(
                "First Steps", "Complete your first game", self.games_played > 0
            ),
            Achievement(
                "Contrast Expert",
                "Score 80% or higher",
                any(s.percentage >= 80 for s in self.scores),
            ),
            Achievement(
                "Perfect Score",
                "Get 100% on any game",
                any(s.percentage == 100 for s in self.scores),
            ),
            Achievement("Dedicated Learner", "Play 5 games", self.games_played >= 5),
            Achievement("Accessibility Champion", "Master all concepts", False),
        ]

    def serialize(self) -> str:
        return json.dumps([s.serialize() for s in self.scores])

    @classmethod
    def deserialize(
        cls,
        blob: Optional[str],
        keep: int = KEEP_PER_GAME,
        log: Optional[logging.Logger] = None,
    ) -> "ScoreBoard":
        """Load a board from its JSON blob.

        A missing blob is an empty board. So is one that can't be decoded,
        after a warning is logged.
        """
        if not blob:
            return cls(keep=keep)
        try:
            data = json.loads(blob)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            scores = [GameScore.deserialize(item) for item in data]
        except (SerializerError, ValueError, TypeError):
            if log:
                log.warning("Discarding undecodable score blob", exc_info=True)
            return cls(keep=keep)
        return cls(scores=scores, keep=keep)
