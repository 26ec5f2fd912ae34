"""
Progress statistics and reading-time estimates for reading plans.
"""
import math
from datetime import date
from decimal import Decimal
from typing import Dict

from reading.domain.PlanMetadata import get_plan_info
from reading.domain.PlanType import PlanType
from reading.utilities.constants import MINUTES_PER_CHAPTER, SUGGESTED_TIME_SPREAD


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_stats(plan_type, completed_count: int) -> Dict:
    """Progress through a plan given how many readings are complete.

    percent is clamped to 0..100 and remaining never goes below 0, so
    re-marked days cannot push progress past the end of the plan. completed
    is reported as given.
    """
    if completed_count < 0:
        raise ValueError(f"completed_count cannot be negative, got {completed_count}")
    info = get_plan_info(plan_type)
    total = info.cycle_length_days
    percent = _round_half_up(100 * completed_count / total)
    return {
        'totalDays': total,
        'completed': completed_count,
        'percent': max(0, min(100, percent)),
        'remaining': max(0, total - completed_count),
        'avgChaptersPerDay': info.avg_chapters_per_day,
    }


def suggested_minutes(plan_type) -> int:
    info = get_plan_info(plan_type)
    # Decimal keeps 2.89 * 5 at 14.45 instead of float noise
    return math.ceil(Decimal(str(info.avg_chapters_per_day)) * MINUTES_PER_CHAPTER)


def suggested_time(plan_type) -> str:
    minutes = suggested_minutes(plan_type)
    return f"{minutes}-{minutes + SUGGESTED_TIME_SPREAD} min"


def print_report(service, today=None):
    """Print today's reading and progress for every plan."""
    today = today or date.today()
    print("\n" + "=" * 60)
    print("📖 READING PLANS REPORT")
    print("=" * 60)
    for plan_type in PlanType:
        info = service.get_plan_info(plan_type)
        reading = service.get_reading_for_date(today, plan_type)
        stats = service.get_reading_stats(plan_type)
        print(f"\n{info.display_name} ({plan_type})")
        print(f"  Today:     {reading.title}")
        print(f"  Passages:  {', '.join(reading.passages)}")
        if reading.is_fallback:
            print("  (plan data unavailable, showing default reading)")
        print(f"  Progress:  {stats['completed']}/{stats['totalDays']} ({stats['percent']}%)")
        print(f"  Time:      {service.get_suggested_time(plan_type)}")
    print("\n" + "=" * 60 + "\n")


# CLI interface
if __name__ == "__main__":
    import asyncio
    from reading.logic.plans.service import ReadingPlanService

    service = ReadingPlanService()
    asyncio.run(service.init())
    print_report(service)
