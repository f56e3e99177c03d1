# Generator package

# Makes generate/ importable and exposes key interfaces.

from .errors import GenerationError, InvalidParametersError
from .generator import ChatGenerator
from .structured import LANGUAGE_NAMES, SUPPORTED_LANGUAGES, StructuredGenerator, slugify
from .types import (
    AssistantAnswer,
    BlogDraft,
    Message,
    ModelParams,
    ProjectFeedback,
    SearchSummary,
    Translation,
)
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ChatGenerator",
    "StructuredGenerator",
    "GenerationError",
    "InvalidParametersError",
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "slugify",
    "AssistantAnswer",
    "BlogDraft",
    "Message",
    "ModelParams",
    "ProjectFeedback",
    "SearchSummary",
    "Translation",
    "EchoDevClient",
]
