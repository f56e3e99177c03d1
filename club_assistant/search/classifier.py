# Decide whether a question asks to enumerate content ("broad")
# or to find something specific ("targeted").

from __future__ import annotations
import re
from typing import Tuple

_KINDS = r"(?:events?|blogs?|posts?|articles?|projects?|leaders?|reports?)"

BROAD_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\bshow\s+(?:me\s+)?(?:all|every)\b",
        r"\blist\s+(?:all|every)\b",
        r"\bwhat\b.*\bavailable\b",
        r"\bupcoming\s+(?:events?|activities)\b",
        rf"\bwhat\s+(?:kinds?\s+of\s+)?{_KINDS}\b",
        rf"\ball\s+(?:the\s+|your\s+)?{_KINDS}\b",
        r"\bhow\s+many\b",
        r"\bwho\s+are\s+(?:the|your|all)\b.*\bleaders?\b",
    )
)


def classify(raw_text: str) -> bool:
    """Return True for broad/listing requests, False for targeted ones."""
    text = (raw_text or "").strip()
    if not text:
        return False
    return any(p.search(text) for p in BROAD_PATTERNS)
