"""
Prompt Enhancer
===============

validate -> credential check -> call_provider, framework independent.

Invariants:
- Validation and the credential check run before any backend call
- At most one backend.generate() per invocation, never retried
- The credential is read per invocation, never cached here
- Every failure leaves as an EnhanceError subclass
"""

import logging
import os
from typing import Optional

from inference import CompletionRequest, CompletionResponse, ModelBackend

from .errors import (
    AuthenticationError,
    ConfigurationError,
    QuotaExceededError,
    UnavailableError,
    UpstreamError,
)
from .prompting import build_messages
from .validation import EnhanceRequest, ValidatedRequest, validate

logger = logging.getLogger(__name__)

MODEL_ID = "gpt-4o-mini"
TEMPERATURE = 0.4
API_KEY_ENV = "OPENAI_API_KEY"

FALLBACK_PROMPT = "Unable to generate an enhanced prompt right now. Please try again."


def read_api_key() -> Optional[str]:
    """Read the provider credential from the process environment."""
    value = os.getenv(API_KEY_ENV, "").strip()
    return value or None


def _raise_for_provider_error(response: CompletionResponse) -> None:
    error = response.error
    kind = error.kind if error else "transport"

    if kind == "unauthorized":
        raise AuthenticationError()
    if kind == "rate_limited":
        raise QuotaExceededError()
    if kind == "other":
        raise UpstreamError(error.message)
    raise UnavailableError()


def call_provider(
    validated: ValidatedRequest,
    backend: ModelBackend,
    api_key: str,
    trace_id: Optional[str] = None,
) -> str:
    """
    Send the fixed conversation to the provider once and map the outcome.

    Args:
        validated: Output of validate()
        backend: Model boundary to call
        api_key: Provider credential
        trace_id: Optional id echoed into backend metadata

    Returns:
        Trimmed text of the first choice, or FALLBACK_PROMPT when empty

    Raises:
        AuthenticationError, QuotaExceededError, UpstreamError, UnavailableError
    """
    request = CompletionRequest(
        messages=build_messages(validated),
        model=MODEL_ID,
        temperature=TEMPERATURE,
        api_key=api_key,
        trace_id=trace_id,
    )

    try:
        response = backend.generate(request)
    except Exception as e:
        logger.error(f"OpenAI prompt enhancement failed: {type(e).__name__}: {e}", exc_info=True)
        raise UnavailableError() from e

    if response.status != "success":
        error = response.error
        logger.error(
            f"OpenAI prompt enhancement failed: kind={error.kind if error else None} "
            f"status={error.status_code if error else None} "
            f"message={error.message if error else None}"
        )
        _raise_for_provider_error(response)

    text = (response.output or "").strip()
    return text or FALLBACK_PROMPT


def enhance_prompt(
    request: EnhanceRequest,
    backend: ModelBackend,
    api_key: Optional[str] = None,
    trace_id: Optional[str] = None,
) -> str:
    """
    Turn a product idea into a build brief.

    Args:
        request: Raw idea and platform identifier
        backend: Model boundary (injected for tests)
        api_key: Credential override; read from OPENAI_API_KEY when None
        trace_id: Optional correlation id

    Returns:
        The enhanced prompt text

    Raises:
        EnhanceError subclass describing the failure
    """
    validated = validate(request)

    if api_key is None:
        api_key = read_api_key()
    if not api_key:
        logger.error(f"{API_KEY_ENV} is not configured; refusing to call the provider")
        raise ConfigurationError()

    logger.info(
        f"Enhancing idea ({len(validated.idea)} chars) for platform {validated.platform.id}"
    )
    return call_provider(validated, backend, api_key, trace_id=trace_id)
