"""
FastAPI application.

Routes (all under /api):
    GET  /api                  service info
    GET  /api/health           liveness
    GET  /api/chat/health      chat liveness
    GET  /api/chat/languages   supported target languages
    POST /api/chat/send        one tutor turn

The TutorService is created once at startup. A missing API key makes
startup fail rather than every request.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linguatutor import __version__
from linguatutor.config.logging import get_logger
from linguatutor.config.settings import Settings, get_settings
from linguatutor.tutor.languages import list_supported_languages
from linguatutor.tutor.models import ChatResponse, SendMessageRequest
from linguatutor.tutor.service import TutorService, TutorServiceError

logger = get_logger(__name__)

SERVICE_NAME = "ai-tutor-backend"

router = APIRouter(prefix="/api")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_service(request: Request) -> TutorService:
    return request.app.state.service


@router.get("")
async def info(request: Request) -> dict:
    settings: Settings = request.app.state.settings
    return {
        "name": "AI Language Tutor Backend",
        "version": __version__,
        "environment": settings.environment,
        "status": "running",
    }


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "timestamp": _timestamp()}


@router.get("/chat/health")
async def chat_health() -> dict:
    return {"status": "ok", "timestamp": _timestamp(), "service": SERVICE_NAME}


@router.get("/chat/languages")
async def languages() -> dict:
    return {"languages": list_supported_languages()}


@router.post("/chat/send", response_model=ChatResponse, response_model_by_alias=True)
async def send_message(
    body: SendMessageRequest,
    service: TutorService = Depends(get_service),
) -> ChatResponse:
    logger.info(
        f"Received message: {body.message[:50]}... [Language: {body.target_language.value}]"
    )
    return await service.send_message(body.message, body.chat_history, body.target_language)


async def _tutor_error_handler(request: Request, exc: TutorServiceError) -> JSONResponse:
    headers = {"Retry-After": "60"} if exc.retryable else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


def create_app(
    settings: Settings | None = None,
    service: TutorService | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to the global settings)
        service: Pre-built TutorService; when omitted one is created from
                 settings.llm at startup

    Raises:
        ConfigurationError: At startup, if no service was given and the API key is missing
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "service", None) is None:
            app.state.service = TutorService.from_settings(settings.llm)
        logger.info(f"Models: {', '.join(app.state.service.gateway.models)}")
        logger.info(f"CORS enabled for: {settings.server.cors_origin}")
        logger.info(f"Environment: {settings.environment}")
        yield

    app = FastAPI(title="linguatutor", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    app.add_exception_handler(TutorServiceError, _tutor_error_handler)
    app.include_router(router)
    return app
