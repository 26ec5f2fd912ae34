from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_CHAPTERS: Final[int] = 3
MINUTES_PER_CHAPTER: Final[int] = 5
SUGGESTED_TIME_SPREAD: Final[int] = 10

# Served when a plan has no record for the computed day (keyed by testament)
FALLBACK_READINGS: Final[dict[str, dict]] = {
    "NT": {
        "label": "NT90",
        "passages": ["Matthew 1-4"],
        "theme": "Birth & Early Ministry",
        "chapters": 4,
    },
    "OT": {
        "label": "OT365",
        "passages": ["Genesis 1-3"],
        "theme": "Creation & Fall",
        "chapters": 3,
    },
}
