"""Progress repository (file persistence): current plan, start dates and completed readings.

Stored as a single JSON object:
    {
      "current_plan": "nt90",
      "start_dates": {"nt90": "2024-01-01", ...},
      "completed": [{"plan": "nt90", "day": 1, "date": "2024-01-01"}, ...]
    }
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Union

from reading.domain.PlanType import PlanType
from reading.infra.paths import PROGRESS_FILE
from reading.utilities.constants import DATE_FORMAT

logger = logging.getLogger(__name__)

DEFAULT_PLAN = PlanType.NT90


def _empty_store() -> dict:
    return {"current_plan": DEFAULT_PLAN.value, "start_dates": {}, "completed": []}


class ProgressRepository:
    def __init__(self, path: Union[str, Path] = PROGRESS_FILE):
        self.path = Path(path)

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f) or {}
        except FileNotFoundError:
            return _empty_store()
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Invalid progress file %s: %s. Starting from empty progress.", self.path, e)
            return _empty_store()
        if not isinstance(store, dict):
            logger.error("Progress file %s does not hold an object. Starting from empty progress.", self.path)
            return _empty_store()
        base = _empty_store()
        base.update(store)
        for key, expected in (("start_dates", dict), ("completed", list)):
            if not isinstance(base[key], expected):
                logger.error("Progress file %s has an unreadable %r section. Resetting it.", self.path, key)
                base[key] = _empty_store()[key]
        return base

    def _save(self, store: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".progress_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # --- current plan ---

    def get_current_plan(self) -> PlanType:
        value = self._load().get("current_plan")
        try:
            return PlanType.parse(value)
        except ValueError:
            logger.warning("Stored current plan %r is unknown; using %s", value, DEFAULT_PLAN)
            return DEFAULT_PLAN

    def set_current_plan(self, plan_type) -> PlanType:
        plan_type = PlanType.parse(plan_type)
        store = self._load()
        store["current_plan"] = plan_type.value
        self._save(store)
        return plan_type

    # --- start dates ---

    def get_start_date(self, plan_type) -> Optional[date]:
        plan_type = PlanType.parse(plan_type)
        raw = self._load()["start_dates"].get(plan_type.value)
        if not raw:
            return None
        try:
            return datetime.strptime(raw, DATE_FORMAT).date()
        except (TypeError, ValueError):
            logger.warning("Ignoring unreadable start date %r for %s", raw, plan_type)
            return None

    def set_start_date(self, plan_type, start: date) -> None:
        plan_type = PlanType.parse(plan_type)
        if isinstance(start, datetime):
            start = start.date()
        store = self._load()
        store["start_dates"][plan_type.value] = start.strftime(DATE_FORMAT)
        self._save(store)
        logger.info("Start date for %s set to %s", plan_type, start)

    def reset_start_date(self, plan_type) -> bool:
        """Forget a plan's start date; the next lookup adopts that day as day 1."""
        plan_type = PlanType.parse(plan_type)
        store = self._load()
        removed = store["start_dates"].pop(plan_type.value, None) is not None
        if removed:
            self._save(store)
        return removed

    # --- completed readings ---

    def get_completed_readings(self) -> List[dict]:
        return self._load()["completed"]

    def mark_completed(self, plan_type, day: int, on: Optional[date] = None) -> bool:
        """Record a plan day as read. Returns False if it was already recorded."""
        plan_type = PlanType.parse(plan_type)
        if not 1 <= day <= plan_type.cycle_length:
            raise ValueError(f"Day {day} is outside the {plan_type.cycle_length}-day {plan_type} plan")
        on = on or date.today()
        store = self._load()
        completed = store["completed"]
        if any(r.get("plan") == plan_type.value and r.get("day") == day for r in completed if isinstance(r, dict)):
            return False
        completed.append({"plan": plan_type.value, "day": day, "date": on.strftime(DATE_FORMAT)})
        self._save(store)
        return True

    def clear_completed(self) -> None:
        store = self._load()
        store["completed"] = []
        self._save(store)
