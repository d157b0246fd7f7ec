"""
===============================================================================
CRC CARD — application/csv_export.py
===============================================================================

Module:
    CSV export for the user and facility tables

Responsibilities:
    - Render a header row plus one row per entity.
    - Quote every cell and double embedded quotes.
    - Render None as an empty cell and enums by value.

Collaborators:
    - domain.entities: User, Facility
    - interfaces/api/http/routers: /users/export.csv, /facilities/export.csv

Notes:
    - Rows are separated by "\\n" (no trailing newline).
===============================================================================
"""

from __future__ import annotations

import csv
import io
from enum import Enum
from typing import Any, Iterable, Sequence, Tuple

from ..domain.entities import Facility, User

# (header, attribute)
USER_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("name", "name"),
    ("email", "email"),
    ("role", "role"),
    ("status", "status"),
    ("department", "department"),
    ("title", "title"),
    ("phone", "phone_number"),
)

FACILITY_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("code", "code"),
    ("name", "name"),
    ("category", "category"),
    ("status", "status"),
    ("prefecture", "prefecture"),
    ("city", "city"),
    ("phone", "phone"),
    ("email", "email"),
)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def render_csv(
    columns: Sequence[Tuple[str, str]], rows: Iterable[object]
) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([header for header, _ in columns])
    for row in rows:
        writer.writerow([_cell(getattr(row, attr, None)) for _, attr in columns])
    return buf.getvalue().rstrip("\n")


def users_to_csv(users: Iterable[User]) -> str:
    return render_csv(USER_COLUMNS, users)


def facilities_to_csv(facilities: Iterable[Facility]) -> str:
    return render_csv(FACILITY_COLUMNS, facilities)
