# ============================================================
# Club Assistant FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Grounded chat + AI search over the club database
#   - Structured generators (blog, translation, feedback, event)
#   - Support for OpenAI-compatible, Ollama, or Echo clients
# ============================================================

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

# --- Local imports ---
from club_assistant.settings import settings
from club_assistant.search import Retriever, SQLiteRecordStore
from club_assistant.generate import (
    ChatGenerator,
    GenerationError,
    InvalidParametersError,
    Message,
    SUPPORTED_LANGUAGES,
    StructuredGenerator,
)
from club_assistant.generate.clients import build_model_client

# ------------------------------------------------------------
# 🪵 Logging
# ------------------------------------------------------------
logger = logging.getLogger("club_assistant")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(h)
logger.setLevel(settings.LOG_LEVEL.upper())

# ------------------------------------------------------------
# 🔧 Dependencies (overridable in tests)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_model_client():
    client = build_model_client(settings)
    logger.info("Using model client %s (%s)", type(client).__name__, getattr(client, "model", None))
    return client

@lru_cache(maxsize=1)
def get_chat_generator() -> ChatGenerator:
    return ChatGenerator(
        model_client=get_model_client(),
        retriever=Retriever(SQLiteRecordStore(settings.DATABASE_PATH)),
        club_name=settings.CLUB_NAME,
        club_description=settings.CLUB_DESCRIPTION,
        timeout=settings.COMPLETION_TIMEOUT,
    )

@lru_cache(maxsize=1)
def get_structured_generator() -> StructuredGenerator:
    return StructuredGenerator(
        model_client=get_model_client(),
        club_name=settings.CLUB_NAME,
        timeout=settings.COMPLETION_TIMEOUT,
    )

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Club Assistant API", version="0.3")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class ChatTurn(BaseModel):
    role: str
    content: str

class ChatRequest(_CamelModel):
    message: str = Field(min_length=1)
    conversation_history: Optional[List[ChatTurn]] = Field(default=None, alias="conversationHistory")

class BlogRequest(_CamelModel):
    topic: str = Field(min_length=1)
    category: str = Field(min_length=1)
    language: str = "en"
    tone: str = "professional"

class TranslateRequest(_CamelModel):
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    target_language: str = Field(alias="targetLanguage")

class ProjectFeedbackRequest(_CamelModel):
    project_title: str = Field(min_length=1, alias="projectTitle")
    project_description: str = Field(min_length=1, alias="projectDescription")
    tech_stack: Optional[str] = Field(default=None, alias="techStack")

class EventDescriptionRequest(_CamelModel):
    event_title: str = Field(min_length=1, alias="eventTitle")
    event_type: str = Field(min_length=1, alias="eventType")
    target_audience: str = Field(min_length=1, alias="targetAudience")
    language: str = "en"

# ------------------------------------------------------------
# 🧰 Helpers
# ------------------------------------------------------------
def _require_language(code: str) -> str:
    if code not in SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid language. Must be one of: {', '.join(SUPPORTED_LANGUAGES)}",
        )
    return code

def _ok(data) -> dict:
    return {"success": True, "data": data}

async def _run(coro, what: str):
    try:
        return await coro
    except InvalidParametersError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationError as e:
        logger.error("%s failed: %s", what, e)
        raise HTTPException(status_code=502, detail=str(e))

# ------------------------------------------------------------
# 💬 Chat + search
# ------------------------------------------------------------
@app.post("/ai/chat")
async def chat(req: ChatRequest, gen: ChatGenerator = Depends(get_chat_generator)):
    history = [Message(**h.model_dump()) for h in (req.conversation_history or [])]
    out = await _run(gen.answer(req.message, history), "chat")
    return _ok({
        "response": out.text,
        "regenerated": out.regenerated,
        "model": getattr(gen.model_client, "model", None),
    })

@app.get("/ai/search")
async def search(
    query: str = Query(..., min_length=1, description="Search query"),
    gen: ChatGenerator = Depends(get_chat_generator),
):
    out = await _run(gen.search(query), "search")
    return _ok({
        "summary": out.summary,
        "relevantItems": [asdict(i) for i in out.relevant_items],
        "suggestions": out.suggestions,
    })

# ------------------------------------------------------------
# ✍️ Structured generation
# ------------------------------------------------------------
@app.post("/ai/generate/blog")
async def generate_blog(req: BlogRequest, gen: StructuredGenerator = Depends(get_structured_generator)):
    _require_language(req.language)
    out = await _run(
        gen.generate_blog_content(req.topic, req.category, req.language, req.tone), "blog generation"
    )
    return _ok(asdict(out))

@app.post("/ai/translate")
async def translate(req: TranslateRequest, gen: StructuredGenerator = Depends(get_structured_generator)):
    _require_language(req.target_language)
    out = await _run(gen.translate(req.title, req.body, req.target_language), "translation")
    return _ok(asdict(out))

@app.post("/ai/feedback/project")
async def project_feedback(
    req: ProjectFeedbackRequest, gen: StructuredGenerator = Depends(get_structured_generator)
):
    out = await _run(
        gen.generate_project_feedback(req.project_title, req.project_description, req.tech_stack),
        "project feedback",
    )
    return _ok(asdict(out))

@app.post("/ai/generate/event-description")
async def event_description(
    req: EventDescriptionRequest, gen: StructuredGenerator = Depends(get_structured_generator)
):
    _require_language(req.language)
    out = await _run(
        gen.generate_event_description(req.event_title, req.event_type, req.target_audience, req.language),
        "event description",
    )
    return _ok({"description": out})

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "Club Assistant service running."}
