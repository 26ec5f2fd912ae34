"""PlanMetadata domain entity: static descriptive data for each reading plan."""
from types import MappingProxyType

from reading.domain.PlanType import PlanType


class PlanMetadata:
    __slots__ = ("plan_type", "display_name", "cycle_length_days", "description",
                 "total_chapters", "avg_chapters_per_day")

    def __init__(self, plan_type: PlanType, display_name: str, cycle_length_days: int,
                 description: str, total_chapters: int, avg_chapters_per_day: float):
        object.__setattr__(self, "plan_type", plan_type)
        object.__setattr__(self, "display_name", display_name)
        object.__setattr__(self, "cycle_length_days", cycle_length_days)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "total_chapters", total_chapters)
        object.__setattr__(self, "avg_chapters_per_day", avg_chapters_per_day)

    def __setattr__(self, name, value):
        raise AttributeError("PlanMetadata is read-only")

    def __str__(self) -> str:
        return f"{self.display_name} - {self.cycle_length_days} days - {self.avg_chapters_per_day} chapters/day"

    __repr__ = __str__

    def to_dict(self):
        return {
            "plan_type": str(self.plan_type),
            "name": self.display_name,
            "days": self.cycle_length_days,
            "description": self.description,
            "totalChapters": self.total_chapters,
            "avgChaptersPerDay": self.avg_chapters_per_day,
        }


PLAN_INFO = MappingProxyType({
    PlanType.NT90: PlanMetadata(
        PlanType.NT90, "90-Day New Testament", 90,
        "Read through the New Testament in 90 days", 260, 2.89,
    ),
    PlanType.OT365: PlanMetadata(
        PlanType.OT365, "OT365 Challenge", 365,
        "Read entire Old Testament in one year", 929, 2.54,
    ),
    PlanType.ETHIOPIAN: PlanMetadata(
        PlanType.ETHIOPIAN, "Ethiopian Calendar Plan", 365,
        "Bible reading following Ethiopian calendar with feast days", 929, 2.54,
    ),
})


def get_plan_info(plan_type) -> PlanMetadata:
    """Return the metadata for a plan type; unknown values raise UnknownPlanType."""
    return PLAN_INFO[PlanType.parse(plan_type)]
