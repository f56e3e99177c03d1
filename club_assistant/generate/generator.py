# ChatGenerator: grounded answering over the club database.
# classify -> retrieve -> serialize -> prompt -> complete -> guard

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from club_assistant.search.classifier import classify
from club_assistant.search.context import serialize
from club_assistant.search.prompts import (
    STRICT_RETRY_ADMONITION,
    build_search_prompt,
    build_system_prompt,
)
from club_assistant.search.retriever import Retriever
from club_assistant.search.types import ContextBlock, RetrievalQuery
from .completion import as_str, as_str_list, load_config, parse_json_object, run_completion, task_params
from .errors import GenerationError, InvalidParametersError
from .guard import guard
from .types import AssistantAnswer, Message, RelevantItem, SearchSummary

logger = logging.getLogger(__name__)

HISTORY_ROLES = ("user", "assistant")


class ChatGenerator:
    def __init__(
        self,
        model_client,
        retriever: Retriever,
        club_name: str = "the club",
        club_description: str = "a university tech club",
        timeout: float = 60.0,
        cfg: Optional[dict] = None,
    ):
        self.model_client = model_client
        self.retriever = retriever
        self.club_name = club_name
        self.club_description = club_description
        self.timeout = timeout
        self.cfg = cfg if cfg is not None else load_config()

    async def build_context(self, text: str) -> ContextBlock:
        query = RetrievalQuery(raw_text=text, is_broad=classify(text))
        items = await self.retriever.retrieve(query)
        return serialize(items)

    def _compose_history(self, history: Iterable[Message]) -> List[Message]:
        """Prior turns without any system turn; the system turn is ours alone."""
        kept = []
        for m in history or []:
            if m.role not in HISTORY_ROLES:
                logger.warning("Dropping history turn with role %r", m.role)
                continue
            kept.append(Message(role=m.role, content=m.content))
        return kept

    async def answer(self, user_message: str, history: Optional[List[Message]] = None) -> AssistantAnswer:
        """Main entry point for chat."""
        if not (user_message or "").strip():
            raise InvalidParametersError("Message is required")

        block = await self.build_context(user_message)
        sys_msg = build_system_prompt(self.club_name, self.club_description, block.render())
        messages = [
            Message(role="system", content=sys_msg),
            *self._compose_history(history or []),
            Message(role="user", content=user_message),
        ]

        text = await self._complete_text(messages, "chat")

        async def retry() -> str:
            retry_messages = [
                *messages,
                Message(role="assistant", content=text),
                Message(role="user", content=STRICT_RETRY_ADMONITION),
            ]
            return await self._complete_text(retry_messages, "chat_retry")

        return await guard(text, retry)

    async def chat(self, user_message: str, history: Optional[List[Message]] = None) -> str:
        out = await self.answer(user_message, history)
        return out.text

    async def search(self, query: str) -> SearchSummary:
        if not (query or "").strip():
            raise InvalidParametersError("Search query is required")

        block = await self.build_context(query)
        prompt = build_search_prompt(query, block.render())
        params = task_params(self.cfg, "search", json_mode=True)
        raw = await run_completion(self.model_client, [Message(role="user", content=prompt)], params, self.timeout)
        data = parse_json_object(raw)

        items = []
        raw_items = data.get("relevantItems")
        if not isinstance(raw_items, list):
            raw_items = []
        for entry in raw_items:
            if not isinstance(entry, dict):
                continue
            items.append(
                RelevantItem(
                    type=as_str(entry.get("type")),
                    title=as_str(entry.get("title")),
                    relevance=as_str(entry.get("relevance")),
                )
            )
        return SearchSummary(
            summary=as_str(data.get("summary")),
            relevant_items=items,
            suggestions=as_str_list(data.get("suggestions")),
        )

    async def _complete_text(self, messages: List[Message], task: str) -> str:
        params = task_params(self.cfg, task)
        text = await run_completion(self.model_client, messages, params, self.timeout)
        if not text:
            raise GenerationError("Completion service returned an empty answer")
        return text
