"""Plan normalization: turns each raw plan document into a flat day-number table.

Raw shapes:
  nt90      -> {"schedule": [{day, reading, theme?, chapters?}, ...]}
  ot365     -> {"monthlyPlans": [{month, focus?, days: [{day, reading, theme?, chapters?}]}]}
  ethiopian -> {"months": [{name, feast?, readings: [{day, reading, theme?, feast?, chapters?}]}]}

The returned dict is ordered by day number. When two entries claim the same
day number the first one encountered is kept.
"""
import logging
from itertools import accumulate
from typing import Dict, Iterable, List

from pydantic import ValidationError

from reading.domain.DayRecord import DayRecord
from reading.domain.PlanType import PlanType
from reading.domain.errors import IngestError
from reading.utilities.validators import EthiopianDocument, NT90Document, OT365Document

logger = logging.getLogger(__name__)


def _index(plan_type: PlanType, records: Iterable[DayRecord]) -> Dict[int, DayRecord]:
    table: Dict[int, DayRecord] = {}
    for record in records:
        if record.day_number in table:
            logger.warning("%s: duplicate day %s (%s) skipped, keeping %s",
                           plan_type, record.day_number, record.reading,
                           table[record.day_number].reading)
            continue
        table[record.day_number] = record
    return {day: table[day] for day in sorted(table)}


def _normalize_nt90(doc: NT90Document) -> List[DayRecord]:
    return [
        DayRecord(entry.day, entry.reading, theme=entry.theme, chapters=entry.chapters)
        for entry in doc.schedule
    ]


def _normalize_ot365(doc: OT365Document) -> List[DayRecord]:
    records = []
    for month in doc.monthlyPlans:
        for entry in month.days:
            records.append(DayRecord(
                entry.day, entry.reading, theme=entry.theme, chapters=entry.chapters,
                month=month.month, focus=month.focus,
            ))
    return records


def month_offsets(counts: List[int]) -> List[int]:
    """Starting offset of each month: the number of readings in all earlier months."""
    return [0, *accumulate(counts)][:len(counts)]


def _normalize_ethiopian(doc: EthiopianDocument) -> List[DayRecord]:
    offsets = month_offsets([len(month.readings) for month in doc.months])
    records = []
    for offset, month in zip(offsets, doc.months):
        for entry in month.readings:
            records.append(DayRecord(
                offset + entry.day, entry.reading, theme=entry.theme, chapters=entry.chapters,
                month=month.name, feast=entry.feast or month.feast, month_day=entry.day,
            ))
    return records


_SCHEMAS = {
    PlanType.NT90: (NT90Document, _normalize_nt90),
    PlanType.OT365: (OT365Document, _normalize_ot365),
    PlanType.ETHIOPIAN: (EthiopianDocument, _normalize_ethiopian),
}


def normalize(plan_type, raw_document) -> Dict[int, DayRecord]:
    """Validate a raw plan document and flatten it into {day_number: DayRecord}.

    Raises:
        UnknownPlanType: plan_type is not one of the supported plans.
        IngestError: the document does not have the plan's expected shape.
    """
    plan_type = PlanType.parse(plan_type)
    schema, flatten = _SCHEMAS[plan_type]
    if not isinstance(raw_document, dict):
        raise IngestError(plan_type, f"expected a JSON object, got {type(raw_document).__name__}")
    try:
        doc = schema.model_validate(raw_document)
    except ValidationError as e:
        raise IngestError(plan_type, f"malformed plan document: {e}") from e
    return _index(plan_type, flatten(doc))
