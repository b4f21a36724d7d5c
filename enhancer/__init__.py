"""
Prompt enhancer core.

Framework-independent validation, prompt assembly and provider error
mapping. The HTTP layer in api/ is a thin adapter over enhance_prompt().
"""

from .errors import (
    EnhanceError,
    InvalidInputError,
    ConfigurationError,
    AuthenticationError,
    QuotaExceededError,
    UpstreamError,
    UnavailableError,
)
from .platforms import Platform, PLATFORMS, PLATFORM_IDS, get_platform, list_platforms
from .recipe import PROMPT_RECIPE, SAMPLE_IDEAS, evaluate_recipe
from .validation import EnhanceRequest, ValidatedRequest, validate
from .service import (
    FALLBACK_PROMPT,
    MODEL_ID,
    TEMPERATURE,
    call_provider,
    enhance_prompt,
    read_api_key,
)

__all__ = [
    "EnhanceError",
    "InvalidInputError",
    "ConfigurationError",
    "AuthenticationError",
    "QuotaExceededError",
    "UpstreamError",
    "UnavailableError",
    "Platform",
    "PLATFORMS",
    "PLATFORM_IDS",
    "get_platform",
    "list_platforms",
    "PROMPT_RECIPE",
    "SAMPLE_IDEAS",
    "evaluate_recipe",
    "EnhanceRequest",
    "ValidatedRequest",
    "validate",
    "FALLBACK_PROMPT",
    "MODEL_ID",
    "TEMPERATURE",
    "call_provider",
    "enhance_prompt",
    "read_api_key",
]
