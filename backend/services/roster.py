"""
roster.py - The fixed list of students eligible for the leaderboard
"""

import logging
import os

from config import STUDENT_ROSTER, STUDENT_ROSTER_FILE

logger = logging.getLogger(__name__)


class Roster:
    """Ordered, de-duplicated student names. Order is the leaderboard tie-break."""

    def __init__(self, names=()):
        self._names: list[str] = []
        for name in names:
            name = name.strip()
            if name and name not in self._names:
                self._names.append(name)

    def list(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name) -> bool:
        return name in self._names

    def __iter__(self):
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


def read_roster_file(path: str) -> list[str]:
    """One name per line; blank lines and '#' comments are skipped."""
    with open(path, encoding="utf-8") as f:
        lines = [line.split("#", 1)[0].strip() for line in f]
    return [line for line in lines if line]


def load_roster(names: list[str] = None, path: str = None) -> Roster:
    path = path if path is not None else STUDENT_ROSTER_FILE
    if names is None and path:
        if os.path.exists(path):
            return Roster(read_roster_file(path))
        logger.warning(f"Roster file not found: {path}")
    return Roster(names if names is not None else STUDENT_ROSTER)
