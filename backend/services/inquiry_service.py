"""
inquiry_service.py - Contact form submissions stored in the hosted database
"""

import logging

from config import INQUIRY_TABLE
from supabase_client import get_table

logger = logging.getLogger(__name__)

INQUIRY_FIELDS = ("name", "email", "subject", "message")


def submit_inquiry(inquiry: dict, table=None) -> dict:
    """Insert one inquiry. Errors are logged and re-raised to the route."""
    row = {k: inquiry.get(k, "") for k in INQUIRY_FIELDS}
    try:
        table = table if table is not None else get_table(INQUIRY_TABLE)
        response = table.insert([row]).execute()
    except Exception as e:
        logger.error(f"Error submitting inquiry: {e}")
        raise
    data = getattr(response, "data", None)
    return data[0] if data else row
