from typing import Optional

from fastapi import APIRouter, Query

from fitplan.events.delivery_log import DELIVERY_LOG

router = APIRouter(prefix="/api/reminders")


@router.get("/recent")
def recent_reminders(since: Optional[int] = Query(default=None, ge=0)):
    """Reminder deliveries newer than ``since``; poll again with the returned next_cursor."""
    return DELIVERY_LOG.get_events(since)
