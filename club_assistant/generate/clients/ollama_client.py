# Client for Ollama local inference.
# Accepts a model name and exposes async generate(messages, params).

import asyncio
import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 180):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    async def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        return await asyncio.to_thread(self._generate_sync, messages, params)

    def _generate_sync(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "model": self.model,
            "prompt": self._compose_prompt(messages),
            "stream": False,
            "options": {
                "temperature": float(params.temperature if params.temperature is not None else 0.3),
                "num_predict": int(params.max_tokens or 1024),
            },
        }
        if params.json_mode:
            payload["format"] = "json"
        resp = requests.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        parts.append("ASSISTANT:\n")
        return "\n".join(parts)
