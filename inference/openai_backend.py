import logging
from typing import Any, Dict, Optional

import requests

from .base import ModelBackend
from .types import CompletionRequest, CompletionResponse, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Error codes OpenAI uses for exhausted billing, independent of HTTP status
_QUOTA_ERROR_CODES = {"insufficient_quota"}


def _error_body(resp: requests.Response) -> Dict[str, Any]:
    """Return the provider's {"error": {...}} object, or {} if unreadable."""
    try:
        data = resp.json()
    except ValueError:
        return {}
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return data["error"]
    return {}


def classify_http_error(status_code: int, body: Dict[str, Any]) -> ProviderError:
    """
    Map a provider-reported failure onto the closed ProviderError kinds.

    Args:
        status_code: HTTP status returned by the provider
        body: The decoded "error" object (may be empty)

    Returns:
        ProviderError with kind unauthorized, rate_limited or other
    """
    message: Optional[str] = body.get("message") or None
    code = body.get("code")

    if status_code == 401:
        return ProviderError(kind="unauthorized", message=message, status_code=status_code)

    if status_code == 429 or code in _QUOTA_ERROR_CODES:
        return ProviderError(kind="rate_limited", message=message, status_code=status_code)

    return ProviderError(kind="other", message=message, status_code=status_code)


def _first_choice_content(data: Any) -> Optional[str]:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not choices:
        return None
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


class OpenAIModelBackend(ModelBackend):
    """
    OpenAI chat-completions backend.

    Posts to {base_url}/chat/completions with a bearer credential supplied
    per request. Never raises: every outcome is folded into a
    CompletionResponse so the enhancer can classify it.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[requests.Session] = None):
        """
        Initialize OpenAI backend.

        Args:
            base_url: API root, e.g. "https://api.openai.com/v1"
            session:  Optional requests session (defaults to module-level requests)
        """
        self.base_url = base_url.rstrip("/")
        self._http = session or requests

    def generate(self, request: CompletionRequest) -> CompletionResponse:
        """
        Issue exactly one POST to /chat/completions.

        Flow:
          1. Build {model, temperature, messages}
          2. POST with Authorization header
          3. Non-2xx -> classify_http_error
          4. 2xx -> first choice content (None when absent)

        Args:
            request: CompletionRequest with messages, model and credential

        Returns:
            CompletionResponse with output, or error set
        """
        base_metadata = {
            "backend": "openai",
            "model": request.model,
            "trace_id": request.trace_id,
        }

        payload = {
            "model": request.model,
            "temperature": request.temperature,
            "messages": [m.to_dict() for m in request.messages],
        }
        headers = {
            "Authorization": f"Bearer {request.api_key}",
            "Content-Type": "application/json",
        }

        try:
            resp = self._http.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers,
                timeout=request.timeout_s,
            )

            if resp.status_code >= 400:
                error = classify_http_error(resp.status_code, _error_body(resp))
                return CompletionResponse(
                    status="error",
                    error=error,
                    metadata={**base_metadata, "status_code": resp.status_code},
                )

            data = resp.json()
            return CompletionResponse(
                status="success",
                output=_first_choice_content(data),
                metadata={**base_metadata, "status_code": resp.status_code},
            )

        except requests.RequestException as e:
            logger.warning(f"OpenAI request did not complete: {type(e).__name__}")
            return CompletionResponse(
                status="error",
                error=ProviderError(kind="transport", message=str(e)),
                metadata=base_metadata,
            )

        except Exception as e:
            # Undecodable body or unexpected response shape
            return CompletionResponse(
                status="error",
                error=ProviderError(kind="transport", message=str(e)),
                metadata={**base_metadata, "error": type(e).__name__},
            )
