"""
FastAPI Main Application

Backend for turning YouTube videos into articles.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables from .env.local
load_dotenv('.env.local')

# Setup logging with rotation
logs_dir = Path(__file__).parent.parent / 'logs'
logs_dir.mkdir(parents=True, exist_ok=True)
log_file = logs_dir / 'backend.log'

file_handler = RotatingFileHandler(
    log_file,
    maxBytes=10_000_000,  # 10MB per file
    backupCount=5,
    encoding='utf-8'
)
console_handler = logging.StreamHandler()

log_format = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
file_handler.setFormatter(log_format)
console_handler.setFormatter(log_format)

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    handlers=[file_handler, console_handler]
)

logger = logging.getLogger(__name__)
logger.info(f"Logging to file: {log_file}")

from app.routes import article
from core.config import Config, Settings
from core.errors import ArticleServiceError, InvalidUrlError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    logger.info("🚀 Starting Video Article Backend")

    settings = Settings.from_env()
    if settings.has_llm_credentials:
        logger.info(f"✅ LLM provider configured: {settings.provider} ({settings.model})")
    else:
        logger.warning(f"⚠️ No API key for provider '{settings.provider}', articles will be rule-based")

    yield

    logger.info("👋 Shutting down Video Article Backend")


app = FastAPI(
    title="Video Article API",
    description="Generates articles from YouTube video transcripts",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(article.router, prefix="/api", tags=["articles"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Video Article API",
        "version": "1.0.0",
        "status": "online"
    }


@app.exception_handler(ArticleServiceError)
async def article_service_exception_handler(request: Request, exc: ArticleServiceError):
    """Render pipeline errors with their status and caller-safe message"""
    if exc.status_code >= 500:
        logger.error(f"❌ {exc.__class__.__name__} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"⚠️ {exc.__class__.__name__} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Bodies that are not a JSON object are treated as a missing URL"""
    logger.warning(f"⚠️ Invalid request body on {request.url.path}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": InvalidUrlError.default_message}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "path": str(request.url)
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", Config.DEFAULT_PORT)))
