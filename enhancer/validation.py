"""
Request validation for the prompt enhancer.

PURE - NO NETWORK, NO CONFIG ACCESS
Runs before any provider call so malformed input costs nothing.
"""

from dataclasses import dataclass

from .errors import InvalidInputError
from .platforms import Platform, get_platform

EMPTY_IDEA_MESSAGE = "Share a project idea before enhancing the prompt."
UNSUPPORTED_PLATFORM_MESSAGE = "Choose a supported application type."


@dataclass(frozen=True)
class EnhanceRequest:
    idea: str
    app_type: str


@dataclass(frozen=True)
class ValidatedRequest:
    idea: str  # trimmed, non-empty
    platform: Platform


def validate(request: EnhanceRequest) -> ValidatedRequest:
    """
    Normalize and check an enhance request.

    Args:
        request: Raw idea text and platform identifier

    Returns:
        ValidatedRequest with trimmed idea and resolved platform

    Raises:
        InvalidInputError: blank idea, or platform outside the catalogue
    """
    idea = (request.idea or "").strip()
    if not idea:
        raise InvalidInputError(EMPTY_IDEA_MESSAGE)

    platform = get_platform(request.app_type)
    if platform is None:
        raise InvalidInputError(UNSUPPORTED_PLATFORM_MESSAGE)

    return ValidatedRequest(idea=idea, platform=platform)
