import json
from typing import List

import pytest

from bootstrap_club_db import seed
from club_assistant.generate.types import Message, ModelParams
from club_assistant.search.store import SQLiteRecordStore
from club_assistant.search.types import BlogItem, EventItem, LeaderItem, ProjectItem, ReportItem


class ScriptedClient:
    """Returns queued replies in order and records every call."""

    def __init__(self, *replies):
        self.model = "scripted"
        self.replies = list(replies)
        self.calls: List[tuple] = []

    async def generate(self, messages: List[Message], params: ModelParams):
        self.calls.append((list(messages), params))
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            reply = json.dumps(reply)
        return reply, {"engine": "scripted"}


class FakeStore:
    """In-memory RecordStore; kinds listed in `failing` raise on search."""

    def __init__(self, blogs=(), events=(), projects=(), leaders=(), reports=(), failing=()):
        self.data = {
            "blogs": list(blogs),
            "events": list(events),
            "projects": list(projects),
            "leaders": list(leaders),
            "reports": list(reports),
        }
        self.failing = set(failing)
        self.calls = []

    def _search(self, kind, term, limit):
        self.calls.append((kind, term, limit))
        if kind in self.failing:
            raise RuntimeError(f"{kind} table unavailable")
        return self.data[kind][:limit]

    def search_blogs(self, term, limit):
        return self._search("blogs", term, limit)

    def search_events(self, term, limit):
        return self._search("events", term, limit)

    def search_projects(self, term, limit):
        return self._search("projects", term, limit)

    def search_leaders(self, term, limit):
        return self._search("leaders", term, limit)

    def search_reports(self, term, limit):
        return self._search("reports", term, limit)


def make_blog(i=1, content="Short body."):
    return BlogItem(title=f"Blog {i}", content=content, category="Tech", created_at="2024-01-01")


def make_event(i=1):
    return EventItem(title=f"Event {i}", description="An event.", location_name="Hall", start_date="2024-05-01")


def make_project(i=1):
    return ProjectItem(title=f"Project {i}", description="A project.", status="approved")


def make_leader(i=1):
    return LeaderItem(full_name=f"Leader {i}", position="Secretary", academic_year="2024/2025")


def make_report(i=1):
    return ReportItem(title=f"Report {i}", content="A report.")


@pytest.fixture
def club_db(tmp_path):
    path = tmp_path / "club.db"
    seed(path)
    return path


@pytest.fixture
def store(club_db):
    return SQLiteRecordStore(str(club_db))
