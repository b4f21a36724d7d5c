from .base import ModelBackend
from .types import CompletionRequest, CompletionResponse


class StubModelBackend(ModelBackend):
    """
    Deterministic fake model for local development and CI.

    Echoes the last user message back inside a fixed brief so callers can
    exercise the full enhance flow without network access.
    """

    def generate(self, request: CompletionRequest) -> CompletionResponse:
        user_messages = [m.content for m in request.messages if m.role == "user"]
        last = user_messages[-1] if user_messages else ""

        return CompletionResponse(
            status="success",
            output=f"Title: Stubbed build brief\n\n{last}\n",
            metadata={
                "backend": "stub",
                "model": request.model,
                "trace_id": request.trace_id,
            },
        )
