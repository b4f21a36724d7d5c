"""
Prompt Enhancer HTTP Handler

Thin FastAPI adapter over enhancer.enhance_prompt(). No business logic here.

Endpoints:
  POST /api/enhance    {idea, appType} -> {enhancedPrompt}
  GET  /api/platforms  platform catalogue
  GET  /api/samples    canned example ideas
  POST /api/recipe     {idea} -> recipe checklist progress

Errors from /api/enhance are rendered as {detail, category} with the
status from ERROR_STATUS.
"""

import logging
import uuid
from typing import Dict, List

from pydantic import BaseModel, Field
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from enhancer import (
    EnhanceError,
    EnhanceRequest,
    SAMPLE_IDEAS,
    enhance_prompt,
    evaluate_recipe,
    list_platforms,
)
from inference import ModelBackend
from infra import bootstrap_infrastructure

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["prompts"])

ERROR_STATUS: Dict[str, int] = {
    "invalid_input": 400,
    "configuration": 500,
    "authentication": 502,
    "quota_exceeded": 429,
    "upstream_error": 502,
    "unavailable": 503,
}


class EnhancePayload(BaseModel):
    idea: str
    app_type: str = Field(..., alias="appType")

    class Config:
        populate_by_name = True


class EnhanceResponse(BaseModel):
    enhancedPrompt: str


class RecipePayload(BaseModel):
    idea: str = ""


class RecipeCheck(BaseModel):
    id: str
    title: str
    hint: str
    met: bool


class RecipeResponse(BaseModel):
    checks: List[RecipeCheck]
    completed: int
    total: int


def get_llm_backend() -> ModelBackend:
    """Get the process-wide model backend."""
    return bootstrap_infrastructure().get_llm_backend()


def error_response(error: EnhanceError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(error.category, 503),
        content={"detail": error.message, "category": error.category},
    )


@router.post("/enhance", response_model=EnhanceResponse)
def enhance(payload: EnhancePayload):
    """
    Enhance a product idea into a build brief.

    Expected payload:
    {
        "idea": "A habit tracker for remote teams",
        "appType": "web-app"
    }

    Returns:
        {"enhancedPrompt": "..."} on success
        {"detail": "...", "category": "..."} on failure
    """
    trace_id = str(uuid.uuid4())
    try:
        text = enhance_prompt(
            EnhanceRequest(idea=payload.idea, app_type=payload.app_type),
            backend=get_llm_backend(),
            trace_id=trace_id,
        )
    except EnhanceError as e:
        logger.info(f"Enhance request {trace_id} failed: {e.category}")
        return error_response(e)

    return {"enhancedPrompt": text}


@router.get("/platforms")
async def platforms():
    """List supported target platforms."""
    return list_platforms()


@router.get("/samples")
async def samples():
    """Example ideas for the input form."""
    return {"samples": list(SAMPLE_IDEAS)}


@router.post("/recipe", response_model=RecipeResponse)
async def recipe(payload: RecipePayload):
    """Report which recipe items an idea already covers."""
    checks = evaluate_recipe(payload.idea)
    return {
        "checks": checks,
        "completed": sum(1 for c in checks if c["met"]),
        "total": len(checks),
    }
