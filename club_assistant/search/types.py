# Data models for the search layer.
# Retrieved rows are read-only snapshots that live for a single request.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple, Union


class EntityKind(str, Enum):
    """Record collections the assistant can see, in rendering order."""
    BLOGS = "blogs"
    EVENTS = "events"
    PROJECTS = "projects"
    LEADERS = "leaders"
    REPORTS = "reports"


@dataclass(frozen=True)
class RetrievalQuery:
    raw_text: str
    is_broad: bool


@dataclass(frozen=True)
class BlogItem:
    kind: ClassVar[EntityKind] = EntityKind.BLOGS
    title: str
    content: str
    category: str
    created_at: Optional[str] = None


@dataclass(frozen=True)
class EventItem:
    kind: ClassVar[EntityKind] = EntityKind.EVENTS
    title: str
    description: str
    location_name: str
    start_date: Optional[str] = None


@dataclass(frozen=True)
class ProjectItem:
    kind: ClassVar[EntityKind] = EntityKind.PROJECTS
    title: str
    description: str
    status: str
    created_at: Optional[str] = None


@dataclass(frozen=True)
class LeaderItem:
    kind: ClassVar[EntityKind] = EntityKind.LEADERS
    full_name: str
    position: str
    academic_year: str


@dataclass(frozen=True)
class ReportItem:
    kind: ClassVar[EntityKind] = EntityKind.REPORTS
    title: str
    content: str
    created_at: Optional[str] = None


RetrievedItem = Union[BlogItem, EventItem, ProjectItem, LeaderItem, ReportItem]
RetrievalResult = Dict[EntityKind, List[RetrievedItem]]


@dataclass(frozen=True)
class ContextSection:
    """Rendered text for one entity kind."""
    kind: EntityKind
    count: int
    truncated: bool
    text: str


@dataclass(frozen=True)
class ContextBlock:
    """The only ground truth handed to the model."""
    header: str
    sections: Tuple[ContextSection, ...]
    total: int

    def render(self) -> str:
        parts = [self.header]
        parts.extend(s.text for s in self.sections)
        parts.append(f"TOTAL ITEMS FOUND: {self.total}")
        return "\n\n".join(parts)

    def section(self, kind: EntityKind) -> ContextSection:
        for s in self.sections:
            if s.kind == kind:
                return s
        raise KeyError(kind)

    def __str__(self) -> str:
        return self.render()
