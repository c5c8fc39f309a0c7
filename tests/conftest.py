"""Shared fixtures for the contrast and contrasthero tests."""

from __future__ import annotations

import random

import pytest

from contrast import RGB

BLACK = RGB(0, 0, 0)
WHITE = RGB(1, 1, 1)
PURE_BLUE = RGB(0, 0, 1)
YELLOW = RGB(1, 1, 0)


class FakeDatabase:
    """Just enough of mautrix's Database for a keyed blob table."""

    def __init__(self) -> None:
        self.rows: dict[str, str] = {}
        self.queries: list[str] = []

    async def fetchval(self, query: str, *args):
        self.queries.append(query)
        return self.rows.get(args[0])

    async def execute(self, query: str, *args) -> None:
        self.queries.append(query)
        self.rows[args[0]] = args[1]


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
