"""
supabase_rest.py - HTTP-based database client using Supabase's PostgREST API.
Used by the hosted record store; plain httpx, no database driver required.
"""
import httpx
from urllib.parse import quote

from config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, HTTP_TIMEOUT


def _headers(prefer: str = "return=representation"):
    return {
        "apikey": SUPABASE_SERVICE_ROLE_KEY,
        "Authorization": f"Bearer {SUPABASE_SERVICE_ROLE_KEY}",
        "Content-Type": "application/json",
        "Prefer": prefer,
    }


def _client() -> httpx.Client:
    return httpx.Client(timeout=HTTP_TIMEOUT)


def is_configured() -> bool:
    return bool(SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY)


def sb_select(table: str, filters: dict = None, columns: str = "*") -> list:
    """Select rows from a table with optional equality filters."""
    url = f"{SUPABASE_URL}/rest/v1/{table}?select={columns}"
    if filters:
        for key, value in filters.items():
            url += f"&{key}=eq.{quote(str(value))}"

    with _client() as client:
        resp = client.get(url, headers=_headers())
        resp.raise_for_status()
        return resp.json()


def sb_upsert(table: str, data: dict, on_conflict: str) -> dict:
    """Insert or overwrite the row matching the `on_conflict` columns."""
    url = f"{SUPABASE_URL}/rest/v1/{table}?on_conflict={on_conflict}"
    headers = _headers("resolution=merge-duplicates,return=representation")
    with _client() as client:
        resp = client.post(url, json=data, headers=headers)
        resp.raise_for_status()
        result = resp.json()
        return result[0] if isinstance(result, list) and result else {}
