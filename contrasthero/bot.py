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

import time

from maubot import MessageEvent, Plugin
from maubot.handlers import command, event
from mautrix.types import EventID, EventType, MessageType, ReactionEvent, RoomID, UserID
from mautrix.util.async_db import UpgradeTable
from mautrix.util.config import BaseProxyConfig, ConfigUpdateHelper

from contrast import InvalidInput, Level, evaluate, parse_color

from .db import ScoreStore, upgrade_table
from .game import GAME_NAME, GameSession, generate_questions
from .render import (
    LEARN_TEXT,
    NO_KEY,
    YES_KEY,
    render_check,
    render_feedback,
    render_final,
    render_progress,
    render_question,
    render_scores,
)


class Config(BaseProxyConfig):
    def do_update(self, helper: ConfigUpdateHelper) -> None:
        helper.copy("rooms")
        helper.copy("questions")
        helper.copy("threshold")
        helper.copy("keep_scores")
        helper.copy("game_name")


SessionKey = tuple[RoomID, UserID]

DEFAULT_QUESTIONS = 10

PLAIN_ANSWERS = {"yes": True, "y": True, "no": False, "n": False}
REACTION_ANSWERS = {YES_KEY: True, NO_KEY: False}


class ContrastHeroBot(Plugin):
    sessions: dict[SessionKey, GameSession]
    question_events: dict[EventID, SessionKey]
    store: ScoreStore
    level: Level
    questions: int

    @classmethod
    def get_config_class(cls) -> type[BaseProxyConfig]:
        return Config

    @classmethod
    def get_db_upgrade_table(cls) -> UpgradeTable:
        return upgrade_table

    async def start(self) -> None:
        self.sessions = {}
        self.question_events = {}
        self.on_external_config_update()

    def on_external_config_update(self) -> None:
        super().on_external_config_update()
        self.apply_config()

    def apply_config(self) -> None:
        try:
            self.level = Level(self.config["threshold"])
        except ValueError:
            self.log.warning(
                f"Unknown threshold {self.config['threshold']!r}, using aa_normal"
            )
            self.level = Level.AA_NORMAL
        questions = self.config["questions"]
        if isinstance(questions, bool) or not isinstance(questions, int) or questions < 1:
            self.log.warning(
                f"Invalid question count {questions!r}, using {DEFAULT_QUESTIONS}"
            )
            questions = DEFAULT_QUESTIONS
        self.questions = questions
        self.store = ScoreStore(
            self.database,
            self.log.getChild("scores"),
            keep=self.config["keep_scores"],
        )

    @property
    def game_name(self) -> str:
        return self.config["game_name"] or GAME_NAME

    def _allowed(self, room_id: RoomID, sender: UserID) -> bool:
        rooms = self.config["rooms"]
        return (not rooms or room_id in rooms) and sender != self.client.mxid

    def _ignored(self, evt: MessageEvent) -> bool:
        if self._allowed(evt.room_id, evt.sender):
            return False
        self.log.debug(
            f"Ignoring command {evt.event_id} from {evt.sender} in {evt.room_id}"
        )
        return True

    async def _send(self, room_id: RoomID, text: str) -> EventID:
        return await self.client.send_markdown(room_id, text, allow_html=True)

    async def _ask(self, key: SessionKey, session: GameSession) -> None:
        room_id, _ = key
        evt_id = await self._send(room_id, render_question(session))
        self.question_events[evt_id] = key
        try:
            await self.client.react(room_id, evt_id, YES_KEY)
            await self.client.react(room_id, evt_id, NO_KEY)
        except Exception:
            self.log.warning("Failed to add answer reactions", exc_info=True)

    def _forget_questions(self, key: SessionKey) -> None:
        self.question_events = {
            evt_id: k for evt_id, k in self.question_events.items() if k != key
        }

    async def _answer(self, key: SessionKey, given: bool) -> None:
        session = self.sessions.get(key)
        if session is None:
            return
        self._forget_questions(key)
        answer = session.answer(given)
        if session.finished:
            del self.sessions[key]
        room_id, _ = key
        await self._send(room_id, render_feedback(answer))
        if session.finished:
            await self._finish(key, session)
        else:
            await self._ask(key, session)

    async def _finish(self, key: SessionKey, session: GameSession) -> None:
        room_id, user_id = key
        score = session.to_score(timestamp=int(time.time() * 1000))
        board = await self.store.load(user_id)
        board.add(score)
        await self.store.save(user_id, board)
        self.log.debug(f"{user_id} finished a game in {room_id}: {score.formatted}")
        best = board.high_score(score.game_name)
        await self._send(room_id, render_final(score, best))

    async def _check(self, evt: MessageEvent, foreground: str, background: str) -> None:
        if self._ignored(evt):
            return
        try:
            fg, bg = parse_color(foreground), parse_color(background)
        except InvalidInput as e:
            await evt.reply(f"Invalid color: {e}")
            return
        await evt.reply(render_check(fg, bg, evaluate(fg, bg)), allow_html=True)

    async def _play(self, evt: MessageEvent) -> None:
        if self._ignored(evt):
            return
        key = (evt.room_id, evt.sender)
        if key in self.sessions:
            await evt.reply(
                "You already have a game running. Answer the current question "
                "or stop it with `!contrast quit`."
            )
            return
        session = GameSession(
            questions=generate_questions(self.questions, self.level),
            game_name=self.game_name,
        )
        self.sessions[key] = session
        await evt.reply(
            f"Welcome to {self.game_name}! {session.total_questions} questions: "
            f"decide whether each color combination passes {self.level.label}."
        )
        await self._ask(key, session)

    async def _answer_cmd(self, evt: MessageEvent, given: bool) -> None:
        if self._ignored(evt):
            return
        key = (evt.room_id, evt.sender)
        if key not in self.sessions:
            await evt.reply(
                "You don't have a game running. Start one with `!contrast play`."
            )
            return
        await self._answer(key, given)

    async def _quit(self, evt: MessageEvent) -> None:
        if self._ignored(evt):
            return
        key = (evt.room_id, evt.sender)
        if self.sessions.pop(key, None) is None:
            await evt.reply("You don't have a game running.")
            return
        self._forget_questions(key)
        await evt.reply("Game stopped. Your score wasn't saved.")

    async def _scores(self, evt: MessageEvent) -> None:
        if self._ignored(evt):
            return
        board = await self.store.load(evt.sender)
        await evt.reply(render_scores(board, self.game_name))

    async def _progress(self, evt: MessageEvent) -> None:
        if self._ignored(evt):
            return
        board = await self.store.load(evt.sender)
        await evt.reply(render_progress(board))

    async def _learn(self, evt: MessageEvent) -> None:
        if self._ignored(evt):
            return
        await evt.reply(LEARN_TEXT)

    @command.new(
        "contrast",
        aliases=["ch"],
        require_subcommand=True,
        help="Play Contrast Hero and check color contrast",
    )
    async def contrast(self, evt: MessageEvent) -> None:
        pass

    @contrast.subcommand("check", help="Check the contrast ratio of two colors")
    @command.argument("foreground", required=True)
    @command.argument("background", required=True)
    async def check(self, evt: MessageEvent, foreground: str, background: str) -> None:
        await self._check(evt, foreground, background)

    @contrast.subcommand("play", help="Start a game of Contrast Hero")
    async def play(self, evt: MessageEvent) -> None:
        await self._play(evt)

    @contrast.subcommand("yes", help="Answer that the colors pass")
    async def yes(self, evt: MessageEvent) -> None:
        await self._answer_cmd(evt, True)

    @contrast.subcommand("no", help="Answer that the colors fail")
    async def no(self, evt: MessageEvent) -> None:
        await self._answer_cmd(evt, False)

    @contrast.subcommand("quit", help="Stop your current game without saving")
    async def quit(self, evt: MessageEvent) -> None:
        await self._quit(evt)

    @contrast.subcommand("scores", help="Show your best and recent scores")
    async def scores(self, evt: MessageEvent) -> None:
        await self._scores(evt)

    @contrast.subcommand("progress", help="Show your statistics and achievements")
    async def progress(self, evt: MessageEvent) -> None:
        await self._progress(evt)

    @contrast.subcommand("learn", help="Learn the WCAG color contrast requirements")
    async def learn(self, evt: MessageEvent) -> None:
        await self._learn(evt)

    @event.on(EventType.ROOM_MESSAGE)
    async def plain_answer(self, evt: MessageEvent) -> None:
        key = (evt.room_id, evt.sender)
        if key not in self.sessions or evt.content.msgtype != MessageType.TEXT:
            return
        given = PLAIN_ANSWERS.get(evt.content.body.strip().lower())
        if given is not None:
            await self._answer(key, given)

    @event.on(EventType.REACTION)
    async def reaction(self, evt: ReactionEvent) -> None:
        relates_to = evt.content.relates_to
        key = self.question_events.get(relates_to.event_id)
        if key is None or evt.sender != key[1]:
            return
        given = REACTION_ANSWERS.get(relates_to.key.replace("\ufe0f", ""))
        if given is not None:
            await self._answer(key, given)
