# Shared plumbing for generators: task config, bounded completion calls,
# and strict-with-fallback JSON decoding of model output.

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import GenerationError
from .types import Message, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def load_config(config_path: Path | str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    if not os.path.exists(config_path):
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def task_params(cfg: Dict[str, Any], task: str, json_mode: bool = False, **overrides: Any) -> ModelParams:
    """ModelParams for one task, from the `tasks.<task>` section of the config."""
    section = (cfg.get("tasks") or {}).get(task) or {}
    merged = {**section, **{k: v for k, v in overrides.items() if v is not None}}
    return ModelParams(
        temperature=float(merged.get("temperature", 0.3)),
        max_tokens=int(merged.get("max_tokens", 1024)),
        json_mode=json_mode,
    )


async def run_completion(model_client, messages: List[Message], params: ModelParams, timeout: float) -> str:
    """Call the model client once. Any failure or timeout becomes GenerationError."""
    try:
        text, _meta = await asyncio.wait_for(model_client.generate(messages, params), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error("Completion timed out after %.1fs", timeout)
        raise GenerationError(f"Completion timed out after {timeout:.0f}s") from e
    except Exception as e:
        logger.exception("Completion call failed")
        raise GenerationError(f"Generation failed: {e}") from e
    return (text or "").strip()


def parse_json_object(raw: str) -> Dict[str, Any]:
    """Decode a JSON object reply. Anything else becomes {}."""
    text = (raw or "").strip()
    m = _FENCE.match(text)
    if m:
        text = m.group(1)
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError):
        logger.warning("Model returned malformed JSON (%d chars)", len(text))
        return {}
    if not isinstance(data, dict):
        logger.warning("Model returned JSON %s, expected an object", type(data).__name__)
        return {}
    return data


def as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [s for s in (as_str(v) for v in value) if s]
