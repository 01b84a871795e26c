"""
infrastructure.persistence.errors - Classify SQLite integrity errors.

Repositories let sqlite3.IntegrityError propagate untouched. Adapters use
these helpers to tell the caller which constraint failed.
"""

from __future__ import annotations

import re
import sqlite3

from domain.models import ConstraintKind

_PREFIXES = {
    "UNIQUE constraint failed": ConstraintKind.UNIQUE,
    "NOT NULL constraint failed": ConstraintKind.NOT_NULL,
    "FOREIGN KEY constraint failed": ConstraintKind.FOREIGN_KEY,
}

_COLUMN_RE = re.compile(r"constraint failed: (.+)$")


def classify_integrity_error(exc: sqlite3.IntegrityError) -> ConstraintKind:
    """Return the kind of constraint named in the engine's message."""
    message = str(exc)
    for prefix, kind in _PREFIXES.items():
        if message.startswith(prefix):
            return kind
    return ConstraintKind.UNKNOWN


def violated_columns(exc: sqlite3.IntegrityError) -> list[str]:
    """Columns listed in the message, e.g. ['Users.Email'].

    FOREIGN KEY failures carry no column names in SQLite.
    """
    match = _COLUMN_RE.search(str(exc))
    if not match:
        return []
    return [c.strip() for c in match.group(1).split(",")]
