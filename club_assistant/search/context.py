# Render retrieved rows into the bounded context block the model answers from.

from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Tuple

from .types import (
    BlogItem,
    ContextBlock,
    ContextSection,
    EntityKind,
    EventItem,
    LeaderItem,
    ProjectItem,
    ReportItem,
    RetrievedItem,
)

EXCERPT_LIMIT = 200
ELLIPSIS = "..."
CONTEXT_HEADER = "CLUB DATABASE CONTEXT (complete results of the database lookup for this question)"


def excerpt(text: str, limit: int = EXCERPT_LIMIT) -> Tuple[str, bool]:
    """Whitespace-collapsed excerpt of at most `limit` chars, plus whether it was clipped."""
    flat = " ".join((text or "").split())
    if len(flat) <= limit:
        return flat, False
    return flat[:limit] + ELLIPSIS, True


def _render_blog(item: BlogItem) -> Tuple[str, bool]:
    body, cut = excerpt(item.content)
    return f"- {item.title} (Category: {item.category or 'uncategorized'})\n  {body}", cut


def _render_event(item: EventItem) -> Tuple[str, bool]:
    body, cut = excerpt(item.description)
    where = f" at {item.location_name}" if item.location_name else ""
    date = item.start_date or "date not set"
    return f"- {item.title}{where}\n  {body}\n  Date: {date}", cut


def _render_project(item: ProjectItem) -> Tuple[str, bool]:
    body, cut = excerpt(item.description)
    return f"- {item.title} (Status: {item.status or 'unknown'})\n  {body}", cut


def _render_leader(item: LeaderItem) -> Tuple[str, bool]:
    year = f" ({item.academic_year})" if item.academic_year else ""
    return f"- {item.full_name} - {item.position}{year}", False


def _render_report(item: ReportItem) -> Tuple[str, bool]:
    body, cut = excerpt(item.content)
    return f"- {item.title}\n  {body}", cut


_RENDERERS: Dict[EntityKind, Callable] = {
    EntityKind.BLOGS: _render_blog,
    EntityKind.EVENTS: _render_event,
    EntityKind.PROJECTS: _render_project,
    EntityKind.LEADERS: _render_leader,
    EntityKind.REPORTS: _render_report,
}


def _section(kind: EntityKind, items: List[RetrievedItem]) -> ContextSection:
    title = kind.value.upper()
    if not items:
        return ContextSection(
            kind=kind,
            count=0,
            truncated=False,
            text=f"{title}\nNo {kind.value} found in database.",
        )
    render = _RENDERERS[kind]
    lines = []
    truncated = False
    for item in items:
        line, cut = render(item)
        lines.append(line)
        truncated = truncated or cut
    text = f"{title} ({len(items)} found)\n" + "\n".join(lines)
    return ContextSection(kind=kind, count=len(items), truncated=truncated, text=text)


def serialize(items: Mapping[EntityKind, List[RetrievedItem]]) -> ContextBlock:
    """Build one section per kind, in fixed order, even when a kind is missing or empty."""
    sections = tuple(_section(kind, list(items.get(kind) or [])) for kind in EntityKind)
    return ContextBlock(
        header=CONTEXT_HEADER,
        sections=sections,
        total=sum(s.count for s in sections),
    )
