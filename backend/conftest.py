import os
import sys
from datetime import date

import pytest

# Keep tests off the developer's .env database and hosted tables
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["LOCAL_STORE_PATH"] = ""
os.environ["SUPABASE_URL"] = ""
os.environ["SYNC_WEBHOOK_URL"] = ""

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.journal_service import JournalService  # noqa: E402
from services.record_store import LocalRecordStore  # noqa: E402
from services.roster import Roster  # noqa: E402

ANCHOR = date(2026, 2, 19)


@pytest.fixture
def roster():
    return Roster(["Aisyah", "Bilal", "Fatimah"])


@pytest.fixture
def journal(roster):
    return JournalService(LocalRecordStore(), roster, ANCHOR)


@pytest.fixture
def client(journal):
    from fastapi.testclient import TestClient
    from main import app
    from services.journal_service import get_journal

    app.dependency_overrides[get_journal] = lambda: journal
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
