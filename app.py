"""
app.py — FastAPI entry point for the movie-ticketing support assistant.

PIPELINE per request:
  1.  Load the FAQ catalog (lazily, once per process)
  2.  Emotion detection (lexicon + punctuation rules)
  3.  FAQ match (exact keywords → fuzzy similarity)
  4.  Compose the reply (per-emotion override, empathetic wrap, or topic list)
  5.  Log the turn (only when MongoDB is configured)
  6.  Return structured ChatResponse

RUN:
  pip install -e .
  uvicorn app:app --reload --host 0.0.0.0 --port 8000

ADMIN ENDPOINTS:
  GET  /health             → service + catalog status
  GET  /faqs               → currently loaded FAQ catalog
  POST /admin/faqs/reload  → re-read the catalog from its source
  GET  /admin/logs         → recent logged messages
"""

import logging
import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from moviebot.catalog          import CatalogProvider, build_catalog
from moviebot.composer         import compose
from moviebot.config           import LOG_LEVEL, FUZZY_MATCH_THRESHOLD
from moviebot.conversation_log import log_turn, recent_messages
from moviebot.db               import is_configured
from moviebot.emotion          import emotion_badge
from moviebot.schemas          import FAQ, ChatRequest, ChatResponse

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("moviebot.app")


# ── App ────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Movie Bot — Support Assistant",
    description="FAQ answers for the movie ticketing site, phrased for the visitor's mood.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ── Catalog (loaded on first use, shared read-only by all requests) ───────
_provider: CatalogProvider = build_catalog()
_catalog: Optional[List[FAQ]] = None
_catalog_lock = threading.Lock()


def get_catalog() -> List[FAQ]:
    global _catalog
    with _catalog_lock:
        if _catalog is None:
            _catalog = _provider.load()
            logger.info(f"[CATALOG] loaded {len(_catalog)} faqs via {type(_provider).__name__}")
        return _catalog


def reload_catalog() -> List[FAQ]:
    global _catalog
    with _catalog_lock:
        _catalog = None
    return get_catalog()


@app.on_event("startup")
async def startup():
    logger.info(f"[STARTUP] mongo_configured={is_configured()}  fuzzy_threshold={FUZZY_MATCH_THRESHOLD}")


# ══════════════════════════════════════════════════════════════════════════
# POST /chat — main pipeline
# ══════════════════════════════════════════════════════════════════════════

@app.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest) -> ChatResponse:
    session_id = req.session_id.strip()
    raw_msg    = req.message.strip()
    if not raw_msg:
        raise HTTPException(400, "Message cannot be empty.")

    composed = compose(raw_msg, get_catalog())

    logger.info(
        f"[PIPELINE] msg='{raw_msg[:60]}' emotion={composed.emotion.value}({composed.confidence:.2f}) "
        f"faq={composed.faq_id} score={composed.match_score:.3f}"
    )

    if is_configured():
        log_turn(session_id, raw_msg, composed)

    badge = emotion_badge(composed.emotion)
    return ChatResponse(
        session_id=session_id,
        reply=composed.reply,
        emotion=composed.emotion,
        confidence=composed.confidence,
        matched_keywords=composed.matched_keywords,
        emoji=badge["emoji"],
        color=badge["color"],
        base_answer=composed.base_answer,
        faq_id=composed.faq_id,
        match_score=composed.match_score,
    )


# ══════════════════════════════════════════════════════════════════════════
# Admin + health endpoints
# ══════════════════════════════════════════════════════════════════════════

@app.get("/health")
async def health():
    return {
        "status":           "ok",
        "catalog_size":     len(get_catalog()),
        "mongo_configured": is_configured(),
    }


@app.get("/faqs", response_model=List[FAQ])
async def faqs():
    return get_catalog()


@app.post("/admin/faqs/reload")
async def admin_reload_faqs():
    catalog = reload_catalog()
    return {"status": "ok", "catalog_size": len(catalog)}


@app.get("/admin/logs")
async def admin_logs(limit: int = Query(50, ge=1, le=500)):
    if not is_configured():
        return {"logs": []}
    return {"logs": recent_messages(limit)}
