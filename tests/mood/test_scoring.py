"""Tests for mood scoring, bands and the mood catalog."""

import pytest

from mood.catalog import MOOD_CATALOG, emoji_for, normalize_mood
from mood.scoring import MOOD_SCORES, energy_band, mood_band, mood_score


class TestMoodScore:
    @pytest.mark.parametrize(
        "mood,expected",
        [
            ("Excited", 100),
            ("Happy", 90),
            ("Thoughtful", 60),
            ("Neutral", 50),
            ("Anxious", 30),
            ("Tired", 20),
            ("Sad", 10),
            ("Angry", 0),
        ],
    )
    def test_known_moods(self, mood, expected):
        assert mood_score(mood) == expected

    def test_unknown_mood_defaults_to_neutral(self):
        assert mood_score("Bewildered") == 50
        assert mood_score("") == 50

    def test_angry_is_real_zero_not_default(self):
        """A 0 score must not fall through to the default."""
        assert mood_score("Angry") == 0

    def test_lookup_is_case_sensitive(self):
        assert mood_score("happy") == 50

    def test_all_scores_in_range(self):
        assert all(0 <= s <= 100 for s in MOOD_SCORES.values())


class TestBands:
    def test_energy_zero_is_none_band(self):
        assert energy_band(0) == "none"

    @pytest.mark.parametrize(
        "level,band",
        [(1, "very_low"), (29, "very_low"), (30, "low"), (50, "medium"), (70, "high"), (90, "very_high"), (100, "very_high")],
    )
    def test_energy_bands(self, level, band):
        assert energy_band(level) == band

    @pytest.mark.parametrize(
        "score,band",
        [(0, "very_low"), (20, "very_low"), (21, "low"), (40, "low"), (60, "medium"), (80, "high"), (81, "very_high")],
    )
    def test_mood_bands(self, score, band):
        assert mood_band(score) == band


class TestCatalog:
    def test_every_catalog_mood_has_score(self):
        assert set(MOOD_CATALOG) == set(MOOD_SCORES)

    def test_emoji_for_known_and_custom(self):
        assert emoji_for("Happy") == "😊"
        assert emoji_for("Bewildered") == "😐"

    def test_normalize_matches_case_insensitively(self):
        assert normalize_mood("  happy ") == "Happy"
        assert normalize_mood("EXCITED") == "Excited"

    def test_normalize_keeps_custom_labels(self):
        assert normalize_mood(" Grateful ") == "Grateful"
