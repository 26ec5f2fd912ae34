from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from reading.api.deps import get_service, parse_plan
from reading.domain.PlanType import PlanType
from reading.logic.plans.service import ReadingPlanService
from reading.utilities.validators import CompleteReadingInput, CurrentPlanInput, StartDateInput

router = APIRouter(prefix="/api/progress")


@router.get("")
def get_progress(service: ReadingPlanService = Depends(get_service)):
    store = service.progress_store
    start_dates = {}
    for plan_type in PlanType:
        start = store.get_start_date(plan_type)
        start_dates[plan_type.value] = start.isoformat() if start else None
    return {
        "current_plan": store.get_current_plan().value,
        "start_dates": start_dates,
        "completed": store.get_completed_readings(),
    }


@router.post("/current-plan")
def set_current_plan(body: CurrentPlanInput, service: ReadingPlanService = Depends(get_service)):
    plan_type = service.progress_store.set_current_plan(parse_plan(body.plan))
    return {"status": "ok", "current_plan": plan_type.value}


@router.post("/complete")
def mark_complete(body: CompleteReadingInput, service: ReadingPlanService = Depends(get_service)):
    plan_type = parse_plan(body.plan)
    try:
        added = service.progress_store.mark_completed(plan_type, body.day, body.completed_on)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "status": "ok" if added else "already_completed",
        "stats": service.get_reading_stats(plan_type),
    }


@router.post("/start-date")
def set_start_date(body: StartDateInput, service: ReadingPlanService = Depends(get_service)):
    plan_type = parse_plan(body.plan)
    start = body.start_date or date.today()
    service.progress_store.set_start_date(plan_type, start)
    return {"status": "ok", "plan": plan_type.value, "start_date": start.isoformat()}


@router.delete("/start-date/{plan}")
def reset_start_date(plan: str, service: ReadingPlanService = Depends(get_service)):
    plan_type = parse_plan(plan)
    removed = service.progress_store.reset_start_date(plan_type)
    return {"status": "ok" if removed else "not_set", "plan": plan_type.value}
