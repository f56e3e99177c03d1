# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    json_mode: bool = False


@dataclass
class AssistantAnswer:
    text: str
    regenerated: bool = False


@dataclass
class BlogDraft:
    title: str = ""
    content: str = ""
    slug: str = ""


@dataclass
class Translation:
    title: str = ""
    body: str = ""


@dataclass
class ProjectFeedback:
    feedback: str = ""
    suggestions: List[str] = field(default_factory=list)
    rating: float = 0.0


@dataclass
class RelevantItem:
    type: str = ""
    title: str = ""
    relevance: str = ""


@dataclass
class SearchSummary:
    summary: str = ""
    relevant_items: List[RelevantItem] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
