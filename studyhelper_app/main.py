"""
Student Helper API - keyword routing to math steps, quizzes and general answers.

Run with:
    uvicorn studyhelper_app.main:create_app --factory --reload
"""

import asyncio
import traceback
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from .config import load_settings
from .errors import InvalidInputError
from .orchestrator import ChatDispatcher
from .routing import route
from .schemas import ChatRequest

VERSION = "1.0.0"

INDEX_PAGE = Path(__file__).resolve().parent / "static" / "index.html"

INVALID_INPUT_MESSAGE = "Invalid input"
APOLOGY_MESSAGE = "Sorry, something went wrong on my end. Please try again!"


def create_app(dispatcher: Optional[ChatDispatcher] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        dispatcher: Pre-built dispatcher (tests inject one with fake LLMs).
            When omitted, settings are loaded from the environment and the
            LLM clients are constructed here, once per process.
    """
    if dispatcher is None:
        dispatcher = ChatDispatcher.from_settings(load_settings())

    app = FastAPI(
        title="Student Helper",
        description="Student helper chat: step-by-step math, quiz questions and general answers",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.dispatcher = dispatcher

    @app.on_event("startup")
    async def startup_event():
        print(f"[STARTUP] Student Helper v{VERSION} starting up...")
        print("[OK] Keyword router ready")
        print(f"[OK] Tools: {', '.join(t.action_type for t in dispatcher.tools)}")

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Single-page chat UI."""
        return HTMLResponse(INDEX_PAGE.read_text(encoding="utf-8"))

    @app.get("/health")
    async def health():
        """Health check and API info."""
        return {
            "ok": True,
            "message": "Student Helper API",
            "version": VERSION,
            "routing": {
                "method": "keyword_intent_detection",
                "intents": ["math", "quiz", "general"],
            },
            "endpoints": {
                "chat": "POST /api/chat",
                "tools": "GET /api/tools",
                "test_routing": "GET /api/test-routing/{query}",
            },
        }

    @app.post("/api/chat")
    async def chat(request: Request):
        """
        Route a message to the math tool, the quiz tool or a general answer.

        Body: {"message": "..."}
        """
        try:
            payload = await request.json()
            req = ChatRequest.model_validate(payload)
        except (ValueError, ValidationError):
            # Non-JSON body, missing message, or message not a string
            return JSONResponse({"message": INVALID_INPUT_MESSAGE, "type": "text"}, status_code=400)

        try:
            response = await asyncio.to_thread(dispatcher.handle, req.message)
            return JSONResponse(response.to_payload())
        except InvalidInputError:
            return JSONResponse({"message": INVALID_INPUT_MESSAGE, "type": "text"}, status_code=400)
        except Exception:
            print("=== CHAT ENDPOINT ERROR ===")
            traceback.print_exc()
            return JSONResponse({"message": APOLOGY_MESSAGE, "type": "text"}, status_code=500)

    @app.get("/api/tools")
    async def list_tools():
        """List available tools and their capabilities."""
        return {"ok": True, "tools": dispatcher.describe_tools()}

    @app.get("/api/test-routing/{test_query}")
    async def test_routing(test_query: str):
        """Show how a query would be routed, without calling the LLM."""
        decision = route(test_query)
        return {
            "ok": True,
            "query": test_query,
            "routing_decision": {
                "intent": decision.intent.value,
                "trigger": decision.trigger,
                "reasoning": decision.reasoning,
            },
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
