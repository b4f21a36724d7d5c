"""
FastAPI Application Entry Point

Integrates:
  - Prompt enhancer API
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api import router as prompts_router
from config import Config
from enhancer import MODEL_ID

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("PromptHub starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"LLM Backend: {Config.LLM_BACKEND} ({MODEL_ID})")
    if not Config.validate():
        logger.warning("OPENAI_API_KEY is not set; /api/enhance will fail until it is")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("PromptHub shutting down...")


# Create FastAPI app
app = FastAPI(
    title="PromptHub API",
    description="Turns product ideas into platform-aware build prompts",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(prompts_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    if Config.validate():
        return {"status": "ready"}
    return {"status": "not_ready", "reason": "OPENAI_API_KEY is not configured"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "PromptHub API",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "enhance": "POST /api/enhance",
            "platforms": "GET /api/platforms",
            "samples": "GET /api/samples",
            "recipe": "POST /api/recipe",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


@app.get("/config/info")
async def config_info():
    """Get non-sensitive configuration info."""
    return {
        "environment": Config.ENVIRONMENT,
        "llm_backend": Config.LLM_BACKEND,
        "model": MODEL_ID,
        "api_key_configured": Config.api_key_configured(),
        "port": Config.PORT,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=Config.PORT)
