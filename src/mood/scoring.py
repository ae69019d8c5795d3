"""Mood label scoring and colour-band classification."""

MOOD_SCORES = {
    "Excited": 100,
    "Happy": 90,
    "Thoughtful": 60,
    "Neutral": 50,
    "Anxious": 30,
    "Tired": 20,
    "Sad": 10,
    "Angry": 0,
}

DEFAULT_SCORE = 50


def mood_score(mood: str) -> int:
    """Map a mood label to a 0-100 intensity. Unknown labels count as neutral."""
    return MOOD_SCORES.get(mood, DEFAULT_SCORE)


def energy_band(level: float) -> str:
    """Classify an energy percentage into a display band.

    ``0`` is its own band since it is also the "no data" sentinel.
    """
    if level == 0:
        return "none"
    if level < 30:
        return "very_low"
    if level < 50:
        return "low"
    if level < 70:
        return "medium"
    if level < 90:
        return "high"
    return "very_high"


def mood_band(score: float) -> str:
    """Classify a mood score into a display band."""
    if score <= 20:
        return "very_low"
    if score <= 40:
        return "low"
    if score <= 60:
        return "medium"
    if score <= 80:
        return "high"
    return "very_high"
