"""
export_service.py - CSV export of all daily records
"""

import csv
import io

from services.record_store import RECORD_FIELDS
from services.scoring import PRAYER_FIELDS

EXPORT_FILENAME = "petualangan_ramadhan_data.csv"


def records_to_csv(records: list[dict]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(RECORD_FIELDS)
    for r in records:
        row = []
        for name in RECORD_FIELDS:
            value = r.get(name)
            if value is None or (name in PRAYER_FIELDS and not value):
                value = ""
            row.append(value)
        writer.writerow(row)
    return buffer.getvalue()
