"""PlanType domain enum: the three supported reading schedules."""
from enum import Enum

from reading.domain.errors import UnknownPlanType


class PlanType(str, Enum):
    NT90 = "nt90"
    OT365 = "ot365"
    ETHIOPIAN = "ethiopian"

    @classmethod
    def parse(cls, value) -> "PlanType":
        '''Accepts a PlanType or its string value (case-insensitive). Raises UnknownPlanType otherwise.'''
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownPlanType(value)

    @property
    def cycle_length(self) -> int:
        return 90 if self is PlanType.NT90 else 365

    @property
    def testament(self) -> str:
        return "NT" if self is PlanType.NT90 else "OT"

    def __str__(self) -> str:
        return self.value
