from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from services.journal_service import JournalService, get_journal
from services.ramadhan_calendar import calendar_label, date_for

router = APIRouter(prefix="/api/calendar", tags=["Calendar"])


def _day_payload(day: int, anchor) -> dict:
    d = date_for(day, anchor)
    return {"day": day, "date": d.isoformat(), "label": calendar_label(d, anchor)}


@router.get("/today")
async def today(journal: JournalService = Depends(get_journal)):
    return _day_payload(journal.current_day(), journal.anchor)


@router.get("/day/{day}")
async def day_info(day: int, journal: JournalService = Depends(get_journal)):
    if day < 1:
        raise HTTPException(status_code=422, detail="Day must be 1 or greater")
    return _day_payload(day, journal.anchor)


@router.get("/label")
async def label(date: date, journal: JournalService = Depends(get_journal)):
    return {"date": date.isoformat(), "label": calendar_label(date, journal.anchor)}
