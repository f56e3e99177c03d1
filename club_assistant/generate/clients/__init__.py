# Model client selection.

from .echo_dev_client import EchoDevClient


def build_model_client(settings):
    """Ollama when enabled, OpenAI-compatible when a key is set, echo otherwise."""
    if settings.USE_OLLAMA:
        from .ollama_client import OllamaClient
        return OllamaClient(
            model=settings.OLLAMA_MODEL,
            host=settings.OLLAMA_HOST,
            timeout=settings.COMPLETION_TIMEOUT,
        )
    if settings.OPENAI_API_KEY:
        from .openai_client import OpenAIClient
        return OpenAIClient(
            model=settings.OPENAI_MODEL,
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.COMPLETION_TIMEOUT,
        )
    return EchoDevClient()


__all__ = ["EchoDevClient", "build_model_client"]
