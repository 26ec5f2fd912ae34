"""Plan store: holds one immutable day-number table per plan type."""
import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from reading.domain.DayRecord import DayRecord
from reading.domain.PlanType import PlanType
from reading.domain.errors import IngestError
from reading.events.event_helpers import publish_plan_load_failed, publish_plan_loaded
from reading.logic.plans.normalizer import normalize

logger = logging.getLogger(__name__)

_EMPTY: Mapping[int, DayRecord] = MappingProxyType({})


class PlanStore:
    def __init__(self):
        self._tables: Dict[PlanType, Mapping[int, DayRecord]] = {p: _EMPTY for p in PlanType}

    def ingest(self, plan_type, raw_document) -> bool:
        """Normalize a raw document and swap it in as the plan's table.

        On a malformed document the previous table (empty if never loaded) is
        kept and False is returned. Unknown plan types raise UnknownPlanType.
        """
        plan_type = PlanType.parse(plan_type)
        try:
            table = normalize(plan_type, raw_document)
        except IngestError as e:
            logger.warning("Could not ingest %s plan: %s", plan_type, e.message)
            publish_plan_load_failed(plan_type, e.message)
            return False
        self._tables[plan_type] = MappingProxyType(table)
        logger.info("%s plan loaded (%s days)", plan_type, len(table))
        publish_plan_loaded(plan_type, len(table))
        return True

    def table(self, plan_type) -> Mapping[int, DayRecord]:
        return self._tables[PlanType.parse(plan_type)]

    def lookup(self, plan_type, day_number: int) -> Optional[DayRecord]:
        return self.table(plan_type).get(day_number)

    def is_loaded(self, plan_type) -> bool:
        return bool(self.table(plan_type))
