"""DayRecord domain entity: one normalized day of a reading plan."""
from typing import Optional

from reading.utilities.constants import DEFAULT_CHAPTERS


class DayRecord:
    def __init__(self, day_number: int, reading: str, theme: Optional[str] = None,
                 chapters: Optional[int] = None, month: Optional[str] = None,
                 focus: Optional[str] = None, feast: Optional[str] = None,
                 month_day: Optional[int] = None):
        self.day_number = day_number
        self.reading = reading
        self.theme = theme
        # 0 / None / missing all fall back to the default
        self.chapters = chapters or DEFAULT_CHAPTERS
        self.month = month
        self.focus = focus
        self.feast = feast
        self.month_day = month_day

    def __str__(self) -> str:
        parts = [f"Day {self.day_number} - {self.reading}"]
        if self.theme:
            parts.append(self.theme)
        if self.month:
            parts.append(f"Month: {self.month}")
        if self.feast:
            parts.append(f"Feast: {self.feast}")
        return " - ".join(parts)

    __repr__ = __str__
