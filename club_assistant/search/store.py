# Read-only record store for the five content collections.
# Each search takes a substring term (None = most recent) and a limit.

from __future__ import annotations

import sqlite3
from contextlib import closing
from typing import List, Optional, Protocol, Sequence, Tuple

from .types import BlogItem, EventItem, LeaderItem, ProjectItem, ReportItem

SCHEMA = """
CREATE TABLE IF NOT EXISTS blogs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    slug TEXT,
    content TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL DEFAULT '',
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS events (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    location_name TEXT NOT NULL DEFAULT '',
    start_date TEXT,
    end_date TEXT,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS projects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    status TEXT NOT NULL DEFAULT 'submitted',
    tech_stack TEXT,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS leaders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    full_name TEXT NOT NULL,
    position TEXT NOT NULL DEFAULT '',
    academic_year TEXT NOT NULL DEFAULT '',
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS reports (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL DEFAULT '',
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA)
    conn.commit()


def _like_pattern(term: str) -> str:
    """Lowercased LIKE pattern with user wildcards escaped."""
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class RecordStore(Protocol):
    def search_blogs(self, term: Optional[str], limit: int) -> List[BlogItem]: ...
    def search_events(self, term: Optional[str], limit: int) -> List[EventItem]: ...
    def search_projects(self, term: Optional[str], limit: int) -> List[ProjectItem]: ...
    def search_leaders(self, term: Optional[str], limit: int) -> List[LeaderItem]: ...
    def search_reports(self, term: Optional[str], limit: int) -> List[ReportItem]: ...


class SQLiteRecordStore:
    """RecordStore over a SQLite file. Opens one connection per query."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    # -------------------------
    # Query helper
    # -------------------------
    def _select(
        self,
        table: str,
        columns: Sequence[str],
        match_columns: Sequence[str],
        order_by: str,
        term: Optional[str],
        limit: int,
    ) -> List[Tuple]:
        cols = ", ".join(columns)
        params: list = []
        where = ""
        if term is not None:
            pattern = _like_pattern(term)
            where = "WHERE " + " OR ".join(
                f"lower(COALESCE({c}, '')) LIKE ? ESCAPE '\\'" for c in match_columns
            )
            params.extend(pattern for _ in match_columns)
        sql = f"SELECT {cols} FROM {table} {where} ORDER BY {order_by} DESC, id DESC LIMIT ?;"
        params.append(int(limit))
        with closing(sqlite3.connect(self.db_path)) as conn:
            return conn.execute(sql, params).fetchall()

    # -------------------------
    # Public API
    # -------------------------
    def search_blogs(self, term: Optional[str], limit: int) -> List[BlogItem]:
        rows = self._select(
            "blogs",
            ("title", "content", "category", "created_at"),
            ("title", "content", "category"),
            "created_at",
            term,
            limit,
        )
        return [BlogItem(title=r[0], content=r[1] or "", category=r[2] or "", created_at=r[3]) for r in rows]

    def search_events(self, term: Optional[str], limit: int) -> List[EventItem]:
        rows = self._select(
            "events",
            ("title", "description", "location_name", "start_date"),
            ("title", "description", "location_name"),
            "start_date",
            term,
            limit,
        )
        return [
            EventItem(title=r[0], description=r[1] or "", location_name=r[2] or "", start_date=r[3])
            for r in rows
        ]

    def search_projects(self, term: Optional[str], limit: int) -> List[ProjectItem]:
        rows = self._select(
            "projects",
            ("title", "description", "status", "created_at"),
            ("title", "description"),
            "created_at",
            term,
            limit,
        )
        return [ProjectItem(title=r[0], description=r[1] or "", status=r[2] or "", created_at=r[3]) for r in rows]

    def search_leaders(self, term: Optional[str], limit: int) -> List[LeaderItem]:
        rows = self._select(
            "leaders",
            ("full_name", "position", "academic_year"),
            ("full_name", "position"),
            "created_at",
            term,
            limit,
        )
        return [LeaderItem(full_name=r[0], position=r[1] or "", academic_year=r[2] or "") for r in rows]

    def search_reports(self, term: Optional[str], limit: int) -> List[ReportItem]:
        rows = self._select(
            "reports",
            ("title", "content", "created_at"),
            ("title", "content"),
            "created_at",
            term,
            limit,
        )
        return [ReportItem(title=r[0], content=r[1] or "", created_at=r[2]) for r in rows]
