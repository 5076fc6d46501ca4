"""
Podsift FastAPI Main Application
API endpoints for podcast processing and provider discovery.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .errors import ErrorKind, PodsiftError
from .llm.orchestrator import AnalysisOrchestrator
from .llm.registry import ProviderRegistry
from .models import CamelModel, PodcastAnalysis
from .processor import PodcastProcessor

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.TIMEOUT: 504,
    ErrorKind.SERVICE_DOWN: 503,
}


# --- Dependencies ---


@lru_cache
def get_registry() -> ProviderRegistry:
    return ProviderRegistry.create(settings)


@lru_cache
def get_processor() -> PodcastProcessor:
    orchestrator = AnalysisOrchestrator(settings, get_registry())
    return PodcastProcessor(settings, orchestrator=orchestrator)


# Create FastAPI app
app = FastAPI(
    title="Podsift",
    description="Podcast transcript analysis API",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PodsiftError)
async def podsift_error_handler(request: Request, exc: PodsiftError):
    """Map typed pipeline errors to HTTP responses."""
    status_code = ERROR_STATUS.get(exc.kind, 500)
    if status_code == 400:
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.message, "kind": exc.kind.value},
        )

    logger.error(f"Error processing podcast ({exc.kind.value}): {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": "Failed to process podcast",
            "message": exc.message,
            "kind": exc.kind.value,
        },
    )


# --- Health Check ---


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "message": "Podcast Summarizer API is running", "version": __version__}


# --- Providers ---


@app.get("/api/providers")
def list_providers(registry: ProviderRegistry = Depends(get_registry)):
    """List LLM providers and whether each is usable right now."""
    return {"providers": registry.describe()}


# --- Processing ---


class ProcessPodcastRequest(CamelModel):
    podcast_url: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None


@app.post("/api/process-podcast", response_model=PodcastAnalysis)
def process_podcast(
    payload: ProcessPodcastRequest,
    processor: PodcastProcessor = Depends(get_processor),
):
    """
    Transcribe and analyze a podcast.

    Provide `podcastUrl`; optionally `provider` (auto, groq, gemini, ollama,
    claude; defaults to the configured provider) and `model`.
    """
    if not payload.podcast_url:
        return JSONResponse(status_code=400, content={"error": "Podcast URL is required"})

    logger.info(f"Processing podcast: {payload.podcast_url} (provider={payload.provider})")

    try:
        return processor.process(payload.podcast_url, provider=payload.provider, model=payload.model)
    except PodsiftError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error processing {payload.podcast_url}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process podcast", "message": str(e)},
        )
