from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field
from typing import Literal, Optional

from services.export_service import EXPORT_FILENAME, records_to_csv
from services.journal_service import JournalService, RecordStoreError, get_journal
from services.scoring import compute_score, score_breakdown
from services.sync_service import sync_record

router = APIRouter(prefix="/api", tags=["Records"])

Prayer = Optional[Literal["jamaah", "munfarid"]]


class AmalanFields(BaseModel):
    sholat_subuh: Prayer = None
    sholat_dzuhur: Prayer = None
    sholat_ashar: Prayer = None
    sholat_maghrib: Prayer = None
    sholat_isya: Prayer = None
    sholat_tarawih: Prayer = None
    sholat_dhuha: bool = False
    infaq: bool = False
    dzikir: bool = False
    itikaf: bool = False
    tausiyah_ustadz: Optional[str] = ""
    tausiyah_tema: Optional[str] = ""
    tausiyah_intisari: Optional[str] = ""
    quran_pages: int = Field(default=0, ge=0)


class AmalanRecordIn(AmalanFields):
    student_name: str = Field(min_length=1)
    day: int = Field(ge=1, le=30)
    # Accepted for compatibility with older clients, always recomputed
    total_exp: Optional[int] = None


@router.get("/records")
async def list_records(
    student_name: Optional[str] = None,
    day: Optional[int] = None,
    journal: JournalService = Depends(get_journal),
):
    try:
        return journal.get_records(student_name, day)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch records: {e}")


@router.post("/records")
async def save_record(
    record: AmalanRecordIn,
    background_tasks: BackgroundTasks,
    journal: JournalService = Depends(get_journal),
):
    try:
        saved = journal.save_record(record.model_dump())
    except RecordStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

    background_tasks.add_task(sync_record, saved)
    return {"success": True, "data": saved}


@router.get("/records/export")
async def export_records(journal: JournalService = Depends(get_journal)):
    try:
        records = journal.get_records()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch records: {e}")
    if not records:
        raise HTTPException(status_code=404, detail="No records to export yet")

    return Response(
        content=records_to_csv(records),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/records/{student_name}/{day}")
async def get_record(student_name: str, day: int, journal: JournalService = Depends(get_journal)):
    try:
        record = journal.get_record(student_name, day)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch record: {e}")
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return record


@router.post("/score")
async def score_preview(fields: AmalanFields):
    """Score a draft entry without saving it."""
    data = fields.model_dump()
    return {"total_exp": compute_score(data), "breakdown": score_breakdown(data)}
