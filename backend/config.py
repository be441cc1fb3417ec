import os
from datetime import date
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# Default to local SQLite, but prefer environment variable (for Vercel/Supabase)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/ramadhan.db")

# Fix for common SQLAlchemy issues with postgres:// vs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# --- Supabase Configuration ---
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
RECORDS_TABLE = os.getenv("RECORDS_TABLE", "records")
INQUIRY_TABLE = os.getenv("INQUIRY_TABLE", "inquiry_submissions")

# --- Record storage ---
# auto | supabase | sql | local
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "auto").strip().lower()
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "./data/jurnal_ramadhan_data.json")

# --- Observance period ---
# Day 1 of the observance period (1 Ramadhan 1447 H)
RAMADHAN_START = date.fromisoformat(os.getenv("RAMADHAN_START", "2026-02-19"))
PERIOD_NAME = os.getenv("PERIOD_NAME", "Ramadhan")
HIJRI_YEAR_LABEL = os.getenv("HIJRI_YEAR_LABEL", "1447")
PERIOD_DAYS = int(os.getenv("PERIOD_DAYS", "30"))

# --- Roster (comma-separated, or a file with one name per line) ---
STUDENT_ROSTER = [s.strip() for s in os.getenv("STUDENT_ROSTER", "").split(",") if s.strip()]
STUDENT_ROSTER_FILE = os.getenv("STUDENT_ROSTER_FILE", "")

# --- Cloud sync ---
SYNC_WEBHOOK_URL = os.getenv("SYNC_WEBHOOK_URL", "")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
