"""ReadingAssignment domain entity: what the reader is asked to read on a given day."""
from typing import List, Optional


class ReadingAssignment:
    def __init__(self, day: int, title: str, passages: Optional[List[str]] = None,
                 theme: Optional[str] = None, chapters: int = 0,
                 month: Optional[str] = None, focus: Optional[str] = None,
                 feast: Optional[str] = None, plan_type=None, is_fallback: bool = False):
        self.day = day
        self.title = title
        self.passages = passages[:] if passages else []
        self.theme = theme
        self.chapters = chapters
        self.month = month
        self.focus = focus
        self.feast = feast
        self.plan_type = plan_type
        self.is_fallback = is_fallback

    def __str__(self) -> str:
        return f"{self.title} - {', '.join(self.passages)} ({self.chapters} chapters)"

    __repr__ = __str__

    def to_dict(self):
        '''Converts the assignment to a JSON-ready dictionary; month/focus/feast only when present.'''
        out = {
            "day": self.day,
            "title": self.title,
            "passages": list(self.passages),
            "theme": self.theme,
            "chapters": self.chapters,
            "plan_type": str(self.plan_type) if self.plan_type is not None else None,
            "is_fallback": self.is_fallback,
        }
        for key in ("month", "focus", "feast"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out
