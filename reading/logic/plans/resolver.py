"""Reading resolution: which assignment belongs to a date under a given plan."""
import logging
from datetime import date

from reading.domain.DayRecord import DayRecord
from reading.domain.PlanMetadata import get_plan_info
from reading.domain.PlanType import PlanType
from reading.domain.ReadingAssignment import ReadingAssignment
from reading.events.event_helpers import publish_start_adopted
from reading.logic.plans.day_number import compute_day_number
from reading.utilities.constants import FALLBACK_READINGS

logger = logging.getLogger(__name__)


def fallback_reading(plan_type: PlanType, day: int) -> ReadingAssignment:
    """Generic assignment served when the plan has no record for the day."""
    canned = FALLBACK_READINGS[plan_type.testament]
    return ReadingAssignment(
        day=day,
        title=f"{canned['label']} Day {day}",
        passages=canned["passages"],
        theme=canned["theme"],
        chapters=canned["chapters"],
        plan_type=plan_type,
        is_fallback=True,
    )


def _title(plan_type: PlanType, record: DayRecord) -> str:
    if plan_type is PlanType.ETHIOPIAN:
        title = f"{record.month} Day {record.month_day}"
        if record.feast:
            title += f" - {record.feast}"
        return title
    if record.theme:
        return f"Day {record.day_number}: {record.theme}"
    return f"Day {record.day_number}"


def build_assignment(plan_type: PlanType, record: DayRecord) -> ReadingAssignment:
    return ReadingAssignment(
        day=record.day_number,
        title=_title(plan_type, record),
        passages=[record.reading],
        theme=record.theme,
        chapters=record.chapters,
        month=record.month,
        focus=record.focus,
        feast=record.feast,
        plan_type=plan_type,
    )


class ReadingResolver:
    def __init__(self, plan_store, progress_store):
        self.plan_store = plan_store
        self.progress_store = progress_store

    def day_number_for(self, today: date, plan_type) -> int:
        """Day of the plan's cycle for `today`, adopting today as day 1 if the plan has no start date."""
        plan_type = PlanType.parse(plan_type)
        cycle_length = get_plan_info(plan_type).cycle_length_days
        start = self.progress_store.get_start_date(plan_type)
        result = compute_day_number(today, start, cycle_length)
        if result.adopted_start is not None:
            logger.info("No start date for %s; starting on %s", plan_type, result.adopted_start)
            self.progress_store.set_start_date(plan_type, result.adopted_start)
            publish_start_adopted(plan_type, result.adopted_start)
        return result.day

    def get_reading(self, today: date, plan_type) -> ReadingAssignment:
        plan_type = PlanType.parse(plan_type)
        day = self.day_number_for(today, plan_type)
        record = self.plan_store.lookup(plan_type, day)
        if record is None:
            if self.plan_store.is_loaded(plan_type):
                logger.warning("%s plan has no record for day %s; serving fallback", plan_type, day)
            else:
                logger.debug("%s plan not loaded; serving fallback for day %s", plan_type, day)
            return fallback_reading(plan_type, day)
        return build_assignment(plan_type, record)
