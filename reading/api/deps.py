"""Shared FastAPI dependencies."""
from fastapi import HTTPException

from reading.domain.PlanType import PlanType
from reading.domain.errors import UnknownPlanType
from reading.logic.plans.service import ReadingPlanService

_service = ReadingPlanService()


def get_service() -> ReadingPlanService:
    return _service


def parse_plan(value) -> PlanType:
    """PlanType from a path/query/body value; unknown plans are a 400."""
    try:
        return PlanType.parse(value)
    except UnknownPlanType as e:
        raise HTTPException(status_code=400, detail=str(e))
