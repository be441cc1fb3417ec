from fastapi import APIRouter, Depends, HTTPException

from services.journal_service import JournalService, get_journal

router = APIRouter(prefix="/api", tags=["Leaderboard"])


@router.get("/leaderboard")
async def get_leaderboard(journal: JournalService = Depends(get_journal)):
    """Ranked EXP per roster student. Empty when the record store is down."""
    return journal.get_leaderboard()


@router.get("/students")
async def list_students(journal: JournalService = Depends(get_journal)):
    return journal.roster.list()


@router.get("/students/{student_name}/exp")
async def get_student_exp(student_name: str, journal: JournalService = Depends(get_journal)):
    if student_name not in journal.roster:
        raise HTTPException(status_code=404, detail="Student not found")
    try:
        return {"name": student_name, "exp": journal.get_total_exp(student_name)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch records: {e}")
