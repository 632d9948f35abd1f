from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from fitplan.api.dependencies import ProgramServices, get_services
from fitplan.logic.program.enrollment import EnrollmentResult
from fitplan.utilities.constants import PROGRAM_WEEKS
from fitplan.utilities.validators import EnrollmentInput

router = APIRouter()


@router.get("/user-exists")
def user_exists(chat_id: int = Query(..., alias="chatId"), services: ProgramServices = Depends(get_services)):
    return services.repo.user_exists(chat_id)


@router.get("/all-chat-ids")
def all_chat_ids(services: ProgramServices = Depends(get_services)):
    return services.repo.all_user_ids()


@router.get("/current-week")
def get_current_week(chat_id: int = Query(..., alias="chatId"), services: ProgramServices = Depends(get_services)):
    return {"week": services.repo.current_week_for(chat_id, datetime.now(timezone.utc))}


@router.get("/start-date")
def get_start_date(chat_id: int = Query(..., alias="chatId"), services: ProgramServices = Depends(get_services)):
    user = services.repo.get_user(chat_id)
    if not user or not user.start_date:
        raise HTTPException(status_code=404, detail="Start date not found for this user.")
    return {"startDate": user.start_date.isoformat()}


@router.get("/schedule")
def get_schedule(chat_id: int = Query(..., alias="chatId"),
                 day: Optional[str] = Query(default=None),
                 services: ProgramServices = Depends(get_services)):
    """Day-specific schedule when ``day`` is given, otherwise the stored template."""
    template = services.repo.get_schedule(chat_id)
    if not template:
        detail = "Schedule not found for this day" if day else "Schedule not found"
        raise HTTPException(status_code=404, detail=detail)
    if not day:
        return template
    week = services.repo.current_week_for(chat_id, datetime.now(timezone.utc))
    return services.resolver.resolve_for_day(template, chat_id, day, week)


@router.get("/workout")
def get_workout(chat_id: int = Query(..., alias="chatId"),
                week: int = Query(..., ge=1, le=PROGRAM_WEEKS),
                day: str = Query(...),
                services: ProgramServices = Depends(get_services)):
    workout = services.repo.get_workout(chat_id, week, day)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout.to_dict()


@router.get("/meal")
def get_meal(chat_id: int = Query(..., alias="chatId"), day: str = Query(...),
             services: ProgramServices = Depends(get_services)):
    meal = services.repo.get_meal(chat_id, day)
    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal.to_dict()


@router.post("/enroll")
def enroll(payload: EnrollmentInput, services: ProgramServices = Depends(get_services)):
    result = services.enrollment.enroll(payload.chat_id)
    if result is EnrollmentResult.ALREADY_ENROLLED:
        return JSONResponse(status_code=409, content={
            "status": result.value,
            "detail": "You already have a fitness plan. Use regenerate if you want to start over.",
        })
    return {"status": result.value}


@router.post("/regenerate")
def regenerate(payload: EnrollmentInput, services: ProgramServices = Depends(get_services)):
    result = services.enrollment.regenerate(payload.chat_id)
    return {"status": result.value}
