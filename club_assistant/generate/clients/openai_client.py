# Client for OpenAI-compatible Chat Completions APIs (OpenAI, Groq, ...).
# Same interface as OllamaClient.

from typing import List, Optional, Tuple, Dict, Any
from openai import AsyncOpenAI
from ..types import Message, ModelParams

class OpenAIClient:
    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
    ):
        self.model = model
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)

    async def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        kwargs: Dict[str, Any] = {}
        if params.json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        resp = await self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature if params.temperature is not None else 0.3,
            max_tokens=params.max_tokens or 1024,
            **kwargs,
        )
        text = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        meta = {"engine": "openai", "model": self.model}
        return text, meta
