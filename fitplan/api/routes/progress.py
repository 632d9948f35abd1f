from fastapi import APIRouter, Depends, Query

from fitplan.api.dependencies import ProgramServices, get_services
from fitplan.utilities.constants import PROGRAM_WEEKS
from fitplan.utilities.validators import ProgressUpdateInput

router = APIRouter()


@router.post("/update-progress")
def update_progress(payload: ProgressUpdateInput, services: ProgramServices = Depends(get_services)):
    # Unknown users are a silent no-op; the mini-app always gets a success reply
    services.tracker.record_completion(payload.chat_id, payload.week, payload.task, payload.completed)
    return {"message": "Progress updated successfully.", "success": True}


@router.get("/get-progress")
def get_progress(chat_id: int = Query(..., alias="chatId"),
                 week: int = Query(..., ge=1, le=PROGRAM_WEEKS),
                 services: ProgramServices = Depends(get_services)):
    return services.tracker.get_progress(chat_id, week).to_dict()
