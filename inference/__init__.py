"""
Model boundary layer for chat-completion inference.

This package provides a clean abstraction for model invocation,
allowing the enhancer to remain agnostic of the underlying provider.

Supported backends:
- StubModelBackend: Deterministic fake model (default for CI/tests)
- OpenAIModelBackend: OpenAI /chat/completions over HTTPS

Example usage:
    from inference import StubModelBackend, CompletionRequest, ChatMessage

    backend = StubModelBackend()
    request = CompletionRequest(
        messages=[ChatMessage(role="user", content="Hello")],
        model="gpt-4o-mini",
        temperature=0.4,
        api_key="sk-test",
    )
    response = backend.generate(request)
"""

from .types import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    CompletionStatus,
    ProviderError,
    ProviderErrorKind,
)
from .base import ModelBackend
from .stub import StubModelBackend
from .openai_backend import OpenAIModelBackend, classify_http_error

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionStatus",
    "ProviderError",
    "ProviderErrorKind",
    "ModelBackend",
    "StubModelBackend",
    "OpenAIModelBackend",
    "classify_http_error",
]
