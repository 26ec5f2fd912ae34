from fastapi import FastAPI, Depends, HTTPException, Query

from datetime import date as _date, datetime
from typing import Optional
import logging

from reading.api.deps import get_service, parse_plan
from reading.api.routes import progress
from reading.domain.PlanType import PlanType
from reading.logic.plans.service import ReadingPlanService
from reading.utilities.constants import DATE_FORMAT

# Logging
logger = logging.getLogger("reading_app")

# Initialize FastAPI app
app = FastAPI(title="Bible Reading Plans API")

# Include routers
app.include_router(progress.router)


@app.on_event("startup")
async def _startup_load_plans():
    """Load the three plan documents when the app starts; failures fall back per plan."""
    status = await get_service().init()
    loaded = [str(p) for p, ok in status.items() if ok]
    logger.info("Plans available: %s", ", ".join(loaded) or "none (serving fallback readings)")


# -------------------- Helpers --------------------
def _parse_date(value: Optional[str]) -> _date:
    if not value:
        return _date.today()
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date (expected YYYY-MM-DD): {value}")


# -------------------- PLANS --------------------
@app.get('/api/plans')
def list_plans(service: ReadingPlanService = Depends(get_service)):
    return {
        "plans": [
            dict(service.get_plan_info(p).to_dict(),
                 loaded=service.plan_store.is_loaded(p),
                 suggestedTime=service.get_suggested_time(p))
            for p in PlanType
        ]
    }


@app.get('/api/plans/{plan}')
def plan_info(plan: str, service: ReadingPlanService = Depends(get_service)):
    plan_type = parse_plan(plan)
    info = service.get_plan_info(plan_type).to_dict()
    info["loaded"] = service.plan_store.is_loaded(plan_type)
    return info


@app.get('/api/plans/{plan}/stats')
def plan_stats(plan: str, service: ReadingPlanService = Depends(get_service)):
    return service.get_reading_stats(parse_plan(plan))


@app.get('/api/plans/{plan}/suggested-time')
def plan_suggested_time(plan: str, service: ReadingPlanService = Depends(get_service)):
    plan_type = parse_plan(plan)
    return {"plan": plan_type.value, "suggestedTime": service.get_suggested_time(plan_type)}


# -------------------- READINGS --------------------
@app.get('/api/reading')
def reading_for_date(date: Optional[str] = Query(default=None),
                     plan: Optional[str] = Query(default=None),
                     service: ReadingPlanService = Depends(get_service)):
    """Reading for a date (today by default) under a plan (the current plan by default)."""
    day = _parse_date(date)
    plan_type = parse_plan(plan) if plan else None
    assignment = service.get_reading_for_date(day, plan_type)
    result = assignment.to_dict()
    result["date"] = day.strftime(DATE_FORMAT)
    return result
