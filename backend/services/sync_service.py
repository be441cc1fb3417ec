"""
sync_service.py - Fire-and-forget copy of saved records to a cloud webhook
(e.g. a spreadsheet script). Failures are logged and never reach the caller.
"""

import json
import logging

import httpx

from config import SYNC_WEBHOOK_URL, HTTP_TIMEOUT

logger = logging.getLogger(__name__)


def sync_record(record: dict, url: str = None, transport: httpx.BaseTransport = None) -> bool:
    url = url if url is not None else SYNC_WEBHOOK_URL
    if not url:
        return False
    try:
        # text/plain keeps spreadsheet web-app endpoints happy (no CORS preflight upstream)
        with httpx.Client(timeout=HTTP_TIMEOUT, transport=transport) as client:
            resp = client.post(
                url,
                content=json.dumps(record, default=str),
                headers={"Content-Type": "text/plain"},
            )
            resp.raise_for_status()
        logger.info(f"Record synced to cloud: {record.get('student_name')} day {record.get('day')}")
        return True
    except httpx.HTTPError as e:
        logger.error(f"Failed to sync record to cloud: {e}")
        return False
