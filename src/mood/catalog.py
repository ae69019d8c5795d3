"""Built-in mood labels offered when recording an entry."""

MOOD_CATALOG = {
    "Happy": "😊",
    "Neutral": "😐",
    "Sad": "😢",
    "Angry": "😡",
    "Tired": "😴",
    "Anxious": "😰",
    "Thoughtful": "🤔",
    "Excited": "🥳",
}

FALLBACK_EMOJI = "😐"


def emoji_for(mood: str) -> str:
    """Emoji for a catalog mood; custom labels get the neutral face."""
    return MOOD_CATALOG.get(mood, FALLBACK_EMOJI)


def normalize_mood(mood: str) -> str:
    """Match a label case-insensitively against the catalog.

    Labels outside the catalog are returned stripped but otherwise untouched;
    the set of moods is open.
    """
    cleaned = mood.strip()
    for label in MOOD_CATALOG:
        if label.lower() == cleaned.lower():
            return label
    return cleaned
