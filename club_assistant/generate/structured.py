# Single-shot structured generation: blog drafts, translations,
# project feedback, and event descriptions.

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .completion import as_str, as_str_list, load_config, parse_json_object, run_completion, task_params
from .errors import GenerationError, InvalidParametersError
from .types import BlogDraft, Message, ProjectFeedback, Translation

logger = logging.getLogger(__name__)

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "sw": "Kiswahili (Swahili)",
    "fr": "French",
    "id": "Indonesian",
    "de": "German",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "ja": "Japanese",
})
SUPPORTED_LANGUAGES = tuple(LANGUAGE_NAMES)
TONES = ("professional", "casual", "academic")

RATING_MIN = 0.0
RATING_MAX = 10.0

_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
_SLUG_SPACE = re.compile(r"\s+")


def language_name(code: Optional[str]) -> str:
    """Display name for a language code; unknown codes fall back to English."""
    return LANGUAGE_NAMES.get((code or "").lower(), LANGUAGE_NAMES["en"])


def slugify(text: str) -> str:
    s = _SLUG_STRIP.sub("", (text or "").lower()).strip()
    return _SLUG_SPACE.sub("-", s)


def coerce_rating(value: Any) -> float:
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return RATING_MIN
    if math.isnan(rating):
        return RATING_MIN
    return min(RATING_MAX, max(RATING_MIN, rating))


def _require(**fields: Optional[str]) -> None:
    missing = [name for name, value in fields.items() if not (value or "").strip()]
    if missing:
        raise InvalidParametersError(f"Missing required field(s): {', '.join(missing)}")


class StructuredGenerator:
    def __init__(self, model_client, club_name: str = "the club", timeout: float = 60.0, cfg: Optional[dict] = None):
        self.model_client = model_client
        self.club_name = club_name
        self.timeout = timeout
        self.cfg = cfg if cfg is not None else load_config()

    async def _ask(self, prompt: str, task: str, json_mode: bool) -> str:
        params = task_params(self.cfg, task, json_mode=json_mode)
        return await run_completion(
            self.model_client, [Message(role="user", content=prompt)], params, self.timeout
        )

    # -------------------------
    # Blog drafting
    # -------------------------
    async def generate_blog_content(
        self,
        topic: str,
        category: str,
        language: str = "en",
        tone: str = "professional",
    ) -> BlogDraft:
        _require(topic=topic, category=category)
        lang = language_name(language)
        if tone not in TONES:
            tone = "professional"

        prompt = f"""Write a {tone} blog post about "{topic}" for a university tech club ({self.club_name}) in {lang}.

Category: {category}

Requirements:
- Write entirely in {lang}
- Make it engaging and informative for students
- Include practical examples or tips
- Length: 500-800 words
- Use proper formatting with paragraphs

Format your response as JSON:
{{
  "title": "Blog title in {lang}",
  "content": "Full blog content with paragraphs"
}}"""
        data = parse_json_object(await self._ask(prompt, "blog", json_mode=True))
        title = as_str(data.get("title"))
        logger.info("Generated blog draft %r (%s, %s)", title, category, language)
        return BlogDraft(title=title, content=as_str(data.get("content")), slug=slugify(title))

    # -------------------------
    # Translation
    # -------------------------
    async def translate(self, title: str, body: str, target_language: str) -> Translation:
        _require(title=title, body=body)
        lang = language_name(target_language)

        prompt = f"""Translate the following content to {lang}.

Maintain the tone, style, and formatting. Ensure the translation is natural and culturally appropriate for {lang} speakers.

Original content:
Title: {title}
Body: {body}

Provide the translation in JSON format:
{{
  "title": "translated title",
  "body": "translated body"
}}"""
        data = parse_json_object(await self._ask(prompt, "translate", json_mode=True))
        logger.info("Translated %r to %s", title, target_language)
        return Translation(title=as_str(data.get("title")), body=as_str(data.get("body")))

    # -------------------------
    # Project feedback
    # -------------------------
    async def generate_project_feedback(
        self, title: str, description: str, tech_stack: Optional[str] = None
    ) -> ProjectFeedback:
        _require(title=title, description=description)
        stack_line = f"Tech Stack: {tech_stack}\n" if tech_stack else ""

        prompt = f"""As a tech mentor, review this student project:

Title: {title}
Description: {description}
{stack_line}
Provide constructive feedback and improvement suggestions.

Format your response as JSON:
{{
  "feedback": "Detailed constructive feedback (2-3 paragraphs)",
  "suggestions": ["Suggestion 1", "Suggestion 2", "Suggestion 3"],
  "rating": 7.5
}}

Rating must be a number from 0 to 10 based on innovation, technical complexity, and practical value."""
        data = parse_json_object(await self._ask(prompt, "project_feedback", json_mode=True))
        logger.info("Generated feedback for project %r", title)
        return ProjectFeedback(
            feedback=as_str(data.get("feedback")),
            suggestions=as_str_list(data.get("suggestions")),
            rating=coerce_rating(data.get("rating")),
        )

    # -------------------------
    # Event description
    # -------------------------
    async def generate_event_description(
        self, title: str, event_type: str, audience: str, language: str = "en"
    ) -> str:
        _require(title=title, event_type=event_type, audience=audience)
        lang = language_name(language)

        prompt = f"""Write an engaging event description for a university tech club event in {lang}.

Event: {title}
Type: {event_type}
Audience: {audience}

Write 2-3 paragraphs that:
- Explain what attendees will learn/experience
- Highlight the benefits of attending
- Create excitement and encourage registration
- Use an encouraging and welcoming tone

Write entirely in {lang}. Reply with the description text only."""
        text = await self._ask(prompt, "event_description", json_mode=False)
        if not text:
            raise GenerationError("Completion service returned an empty description")
        logger.info("Generated event description for %r (%s)", title, language)
        return text
