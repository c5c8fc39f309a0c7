"""Tests for the Contrast Hero question deck and game sessions."""

from __future__ import annotations

import random

import pytest

from contrast import Level, contrast_ratio
from contrasthero import palette
from contrasthero.game import (
    DECK,
    GAME_NAME,
    SAMPLE_TEXTS,
    ContrastQuestion,
    GameOver,
    GameSession,
    generate_questions,
    performance_message,
)


class TestContrastQuestion:
    def test_black_on_white_is_correct_to_pass(self) -> None:
        question = ContrastQuestion(palette.BLACK, palette.WHITE, "Read Me", "")
        assert question.correct_answer
        assert question.contrast_ratio == pytest.approx(21.0, abs=1e-2)

    def test_yellow_on_white_is_correct_to_fail(self) -> None:
        question = ContrastQuestion(palette.SYSTEM_YELLOW, palette.WHITE, "Read Me", "")
        assert not question.correct_answer

    def test_level_changes_the_answer(self) -> None:
        # The system gray sits between the large and normal text thresholds
        normal = ContrastQuestion(palette.SYSTEM_GRAY, palette.WHITE, "", "")
        large = ContrastQuestion(
            palette.SYSTEM_GRAY, palette.WHITE, "", "", level=Level.AA_LARGE
        )
        assert not normal.correct_answer
        assert large.correct_answer


class TestGenerateQuestions:
    def test_count(self, rng: random.Random) -> None:
        assert len(generate_questions(10, rng=rng)) == 10
        assert len(generate_questions(23, rng=rng)) == 23

    def test_one_round_covers_the_deck(self, rng: random.Random) -> None:
        questions = generate_questions(len(DECK), rng=rng)
        pairs = {(q.foreground, q.background) for q in questions}
        assert pairs == {(fg, bg) for fg, bg, _ in DECK}

    def test_sample_texts_cycle(self, rng: random.Random) -> None:
        questions = generate_questions(10, rng=rng)
        texts = [q.sample_text for q in questions]
        for text in SAMPLE_TEXTS:
            assert texts.count(text) == 2

    def test_answers_match_the_evaluator(self, rng: random.Random) -> None:
        for question in generate_questions(10, rng=rng):
            ratio = contrast_ratio(question.foreground, question.background)
            assert question.correct_answer == (ratio >= 4.5)

    def test_aa_deck_has_three_passing_pairs(self, rng: random.Random) -> None:
        questions = generate_questions(10, rng=rng)
        assert sum(q.correct_answer for q in questions) == 3

    def test_level_is_applied(self, rng: random.Random) -> None:
        questions = generate_questions(10, Level.AAA_NORMAL, rng=rng)
        assert all(q.level is Level.AAA_NORMAL for q in questions)

    def test_shuffle_is_seeded(self) -> None:
        first = generate_questions(10, rng=random.Random(5))
        second = generate_questions(10, rng=random.Random(5))
        assert first == second

    def test_non_positive_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            generate_questions(0)


class TestGameSession:
    def _session(self, rng: random.Random) -> GameSession:
        return GameSession(questions=generate_questions(10, rng=rng))

    def test_progress_counts_the_current_question(self, rng: random.Random) -> None:
        session = self._session(rng)
        assert session.progress == 10
        session.answer(True)
        assert session.progress == 20

    def test_progress_of_a_single_question_game(self) -> None:
        session = GameSession(questions=generate_questions(1))
        assert session.progress == 100
        session.answer(True)
        assert session.progress == 100

    def test_perfect_game(self, rng: random.Random) -> None:
        session = self._session(rng)
        while not session.finished:
            answer = session.answer(session.question.correct_answer)
            assert answer.correct
        assert session.score == 10
        assert session.progress == 100

    def test_wrong_answers_dont_score(self, rng: random.Random) -> None:
        session = self._session(rng)
        answer = session.answer(not session.question.correct_answer)
        assert not answer.correct
        assert session.score == 0
        assert session.current == 1
        assert session.progress == 20

    def test_answering_a_finished_game(self, rng: random.Random) -> None:
        session = GameSession(questions=generate_questions(1, rng=rng))
        session.answer(True)
        assert session.finished
        with pytest.raises(GameOver):
            session.answer(True)

    def test_to_score(self, rng: random.Random) -> None:
        session = self._session(rng)
        for _ in range(4):
            session.answer(session.question.correct_answer)
        score = session.to_score(timestamp=1_700_000_000_000)
        assert score.game_name == GAME_NAME
        assert score.score == 4
        assert score.total_questions == 10
        assert score.timestamp == 1_700_000_000_000


class TestPerformanceMessage:
    @pytest.mark.parametrize(
        "percentage, start",
        [
            (100, "Excellent!"),
            (90, "Excellent!"),
            (89, "Great job!"),
            (70, "Great job!"),
            (69, "Good effort!"),
            (50, "Good effort!"),
            (49, "Keep learning!"),
            (0, "Keep learning!"),
        ],
    )
    def test_bands(self, percentage: int, start: str) -> None:
        assert performance_message(percentage).startswith(start)
