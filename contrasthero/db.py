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

import logging

from mautrix.types import UserID
from mautrix.util.async_db import Connection, Database, UpgradeTable

from .scores import KEEP_PER_GAME, ScoreBoard

upgrade_table = UpgradeTable()


@upgrade_table.register(description="Initial revision")
async def upgrade_v1(conn: Connection) -> None:
    await conn.execute(
        """CREATE TABLE score_blob (
            user_id TEXT PRIMARY KEY,
            scores  TEXT NOT NULL
        )"""
    )


class ScoreStore:
    """Keeps each user's score board as one JSON blob."""

    db: Database
    log: logging.Logger
    keep: int

    def __init__(
        self, db: Database, log: logging.Logger, keep: int = KEEP_PER_GAME
    ) -> None:
        self.db = db
        self.log = log
        self.keep = keep

    async def load(self, user_id: UserID) -> ScoreBoard:
        blob = await self.db.fetchval(
            "SELECT scores FROM score_blob WHERE user_id=$1", user_id
        )
        return ScoreBoard.deserialize(blob, keep=self.keep, log=self.log)

    async def save(self, user_id: UserID, board: ScoreBoard) -> None:
        q = (
            "INSERT INTO score_blob (user_id, scores) VALUES ($1, $2) "
            "ON CONFLICT (user_id) DO UPDATE SET scores=excluded.scores"
        )
        await self.db.execute(q, user_id, board.serialize())
        self.log.debug("Saved %d scores for %s", len(board.scores), user_id)
