"""Reading plan service: the API consumed by the web and CLI layers."""
import asyncio
import logging
from datetime import date
from typing import Dict, Optional

from reading.domain.PlanMetadata import PlanMetadata, get_plan_info
from reading.domain.PlanType import PlanType
from reading.domain.ReadingAssignment import ReadingAssignment
from reading.domain.errors import IngestError
from reading.events.event_helpers import publish_plan_load_failed
from reading.infra.Plan_Source import PlanSource
from reading.infra.Plan_Store import PlanStore
from reading.infra.Progress_Repository import ProgressRepository
from reading.logic.plans.resolver import ReadingResolver
from reading.logic.reporting.stats import compute_stats, suggested_time

logger = logging.getLogger(__name__)


class ReadingPlanService:
    def __init__(self, plan_store: Optional[PlanStore] = None,
                 progress_store: Optional[ProgressRepository] = None,
                 source: Optional[PlanSource] = None):
        self.plan_store = plan_store or PlanStore()
        self.progress_store = progress_store or ProgressRepository()
        self.source = source or PlanSource()
        self.resolver = ReadingResolver(self.plan_store, self.progress_store)

    async def _load_plan(self, plan_type: PlanType) -> bool:
        try:
            raw = await self.source.load(plan_type)
        except IngestError as e:
            logger.warning("%s plan failed to load: %s", plan_type, e.message)
            publish_plan_load_failed(plan_type, e.message)
            return False
        return self.plan_store.ingest(plan_type, raw)

    async def init(self) -> Dict[PlanType, bool]:
        """Load all plans concurrently. A failed plan serves fallback readings; it never raises."""
        logger.info("Initializing reading plans...")
        plan_types = list(PlanType)
        results = await asyncio.gather(*(self._load_plan(p) for p in plan_types), return_exceptions=True)
        status = {}
        for plan_type, result in zip(plan_types, results):
            if isinstance(result, BaseException):
                logger.error("%s plan failed to load: %r", plan_type, result)
                status[plan_type] = False
            else:
                status[plan_type] = result
        logger.info("Reading plans initialized: %s",
                    ", ".join(f"{p}={'ok' if ok else 'fallback'}" for p, ok in status.items()))
        return status

    def get_reading_for_date(self, day: date, plan_type=None) -> ReadingAssignment:
        if plan_type is None:
            plan_type = self.progress_store.get_current_plan()
        return self.resolver.get_reading(day, plan_type)

    def get_plan_info(self, plan_type) -> PlanMetadata:
        return get_plan_info(plan_type)

    def get_reading_stats(self, plan_type) -> Dict:
        completed = len(self.progress_store.get_completed_readings())
        return compute_stats(plan_type, completed)

    def get_suggested_time(self, plan_type) -> str:
        return suggested_time(plan_type)
