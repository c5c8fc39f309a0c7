"""Tests for relative luminance and contrast ratio."""

from __future__ import annotations

import random

import pytest

from contrast import (
    AA_LARGE_TEXT,
    AA_NORMAL_TEXT,
    AAA_LARGE_TEXT,
    AAA_NORMAL_TEXT,
    RGB,
    ColorPair,
    Hex,
    InvalidInput,
    Level,
    contrast_ratio,
    evaluate,
    passes_threshold,
    relative_luminance,
)
from contrast.wcag import passes_aa, passes_aaa
from tests.conftest import BLACK, PURE_BLUE, WHITE, YELLOW


def _random_colors(n: int, seed: int = 42) -> list[RGB]:
    rng = random.Random(seed)
    return [RGB(rng.random(), rng.random(), rng.random()) for _ in range(n)]


# ---------------------------------------------------------------------------
# Relative luminance
# ---------------------------------------------------------------------------


class TestRelativeLuminance:
    def test_black_is_zero(self) -> None:
        assert relative_luminance(BLACK) == 0.0

    def test_white_is_one(self) -> None:
        assert relative_luminance(WHITE) == pytest.approx(1.0, abs=1e-9)

    def test_accepts_plain_triples(self) -> None:
        assert relative_luminance((0.3, 0.6, 0.9)) == relative_luminance(
            RGB(0.3, 0.6, 0.9)
        )

    def test_channel_weights(self) -> None:
        assert relative_luminance((1, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance((0, 1, 0)) == pytest.approx(0.7152)
        assert relative_luminance((0, 0, 1)) == pytest.approx(0.0722)

    def test_linear_segment_below_threshold(self) -> None:
        c = 0.03
        assert relative_luminance((c, c, c)) == pytest.approx(c / 12.92)

    def test_gamma_segment_above_threshold(self) -> None:
        c = 0.5
        expected = ((c + 0.055) / 1.055) ** 2.4
        assert relative_luminance((c, c, c)) == pytest.approx(expected)

    def test_threshold_value_is_linear(self) -> None:
        c = 0.03928
        assert relative_luminance((c, c, c)) == pytest.approx(c / 12.92)

    def test_hex_color(self) -> None:
        assert relative_luminance(Hex("#ffffff")) == pytest.approx(1.0)

    def test_result_in_unit_range(self) -> None:
        for color in _random_colors(50):
            assert 0.0 <= relative_luminance(color) <= 1.0


# ---------------------------------------------------------------------------
# Contrast ratio
# ---------------------------------------------------------------------------


class TestContrastRatio:
    def test_black_on_white_is_21(self) -> None:
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0, abs=1e-2)

    def test_same_color_is_one(self) -> None:
        for color in _random_colors(20):
            assert contrast_ratio(color, color) == pytest.approx(1.0, abs=1e-9)

    def test_symmetric(self) -> None:
        colors = _random_colors(20)
        for a, b in zip(colors, reversed(colors)):
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_never_below_one(self) -> None:
        colors = _random_colors(30, seed=7)
        for a, b in zip(colors, colors[1:]):
            assert contrast_ratio(a, b) >= 1.0

    def test_pure_blue_on_white(self) -> None:
        assert contrast_ratio(PURE_BLUE, WHITE) == pytest.approx(8.59, abs=1e-2)

    def test_yellow_on_white(self) -> None:
        assert contrast_ratio(YELLOW, WHITE) == pytest.approx(1.07, abs=1e-2)

    def test_idempotent(self) -> None:
        a, b = RGB(0.2, 0.4, 0.6), RGB(0.9, 0.8, 0.1)
        assert contrast_ratio(a, b) == contrast_ratio(a, b)
        assert relative_luminance(a) == relative_luminance(a)


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------


class TestPassesThreshold:
    def test_named_thresholds(self) -> None:
        assert AA_NORMAL_TEXT == 4.5
        assert AA_LARGE_TEXT == 3.0
        assert AAA_NORMAL_TEXT == 7.0
        assert AAA_LARGE_TEXT == 4.5

    def test_black_on_white_passes_aa(self) -> None:
        assert passes_threshold(BLACK, WHITE, 4.5)

    def test_similar_grays_fail_aa(self) -> None:
        assert not passes_threshold((0.5, 0.5, 0.5), (0.55, 0.55, 0.55), 4.5)

    def test_pure_blue_on_white_passes_aa_and_aaa(self) -> None:
        assert passes_threshold(PURE_BLUE, WHITE, AA_NORMAL_TEXT)
        assert passes_threshold(PURE_BLUE, WHITE, AAA_NORMAL_TEXT)

    def test_yellow_on_white_fails_aa_and_aaa(self) -> None:
        assert not passes_aa(YELLOW, WHITE)
        assert not passes_aaa(YELLOW, WHITE)

    def test_ratio_equal_to_threshold_passes(self) -> None:
        ratio = contrast_ratio(PURE_BLUE, WHITE)
        assert passes_threshold(PURE_BLUE, WHITE, ratio)

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            passes_threshold(BLACK, WHITE, -1.0)


class TestEvaluate:
    def test_black_on_white_passes_everything(self) -> None:
        result = evaluate(BLACK, WHITE)
        assert result.ratio == pytest.approx(21.0, abs=1e-2)
        assert all(result.passes(level) for level in Level)

    def test_mid_gray_only_passes_large_aa(self) -> None:
        # #767676 is the lightest gray that passes AA on white; #949494 isn't
        result = evaluate(Hex("#949494"), WHITE)
        assert 3.0 <= result.ratio < 4.5
        assert result.aa_large
        assert not result.aa_normal
        assert not result.aaa_normal
        assert not result.aaa_large

    def test_level_thresholds(self) -> None:
        assert Level.AA_NORMAL.threshold == AA_NORMAL_TEXT
        assert Level.AA_LARGE.threshold == AA_LARGE_TEXT
        assert Level.AAA_NORMAL.threshold == AAA_NORMAL_TEXT
        assert Level.AAA_LARGE.threshold == AAA_LARGE_TEXT

    def test_level_label(self) -> None:
        assert Level.AA_NORMAL.label == "WCAG AA (normal text)"
        assert Level.AAA_LARGE.label == "WCAG AAA (large text)"


class TestColorPair:
    def test_contrast_ratio(self) -> None:
        pair = ColorPair(PURE_BLUE, WHITE)
        assert pair.contrast_ratio == contrast_ratio(PURE_BLUE, WHITE)
        assert pair.passes(AAA_NORMAL_TEXT)
        assert pair.evaluate().aaa_normal

    def test_missing_color(self) -> None:
        with pytest.raises(InvalidInput):
            ColorPair(foreground=BLACK).contrast_ratio
