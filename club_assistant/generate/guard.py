# Deflection check over generated answers, with a single corrective retry.

from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Tuple

from .types import AssistantAnswer

logger = logging.getLogger(__name__)

DENY_PHRASES: Tuple[str, ...] = (
    "i need to check",
    "let me check",
    "i'll need to check",
    "i would need to check",
    "contact our leaders",
    "contact the leaders",
    "contact the club",
    "reach out to our leaders",
    "reach out to the leaders",
    "for the most accurate information",
    "for the most up-to-date information",
    "check our website",
    "check the website",
    "visit our website",
    "visit the website",
    "official website",
    "check our social media",
    "i don't have access to",
    "i do not have access to",
    "i don't have real-time",
    "i do not have real-time",
)


def find_deflections(answer: str) -> List[str]:
    lowered = (answer or "").lower()
    return [p for p in DENY_PHRASES if p in lowered]


async def guard(answer: str, retry_fn: Callable[[], Awaitable[str]]) -> AssistantAnswer:
    """
    Return the answer unchanged when it contains no deny-listed phrase.
    Otherwise call retry_fn exactly once and return its text, flagged as
    regenerated, whatever the retry produced.
    """
    hits = find_deflections(answer)
    if not hits:
        return AssistantAnswer(text=answer, regenerated=False)
    logger.warning("Answer deflected (%s); regenerating once", ", ".join(hits))
    retried = await retry_fn()
    return AssistantAnswer(text=retried, regenerated=True)
