from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from services.inquiry_service import submit_inquiry

router = APIRouter(prefix="/api/inquiries", tags=["Inquiries"])


class InquiryCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    subject: str = ""
    message: str = Field(min_length=1)


@router.post("")
async def create_inquiry(inquiry: InquiryCreate):
    try:
        result = submit_inquiry(inquiry.model_dump())
        return {"status": "success", "data": result}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to submit inquiry: {e}")
