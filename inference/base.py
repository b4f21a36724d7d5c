from abc import ABC, abstractmethod
from .types import CompletionRequest, CompletionResponse


class ModelBackend(ABC):
    """
    Abstract chat-completion boundary.
    Enhancer code must depend ONLY on this interface.
    """

    @abstractmethod
    def generate(self, request: CompletionRequest) -> CompletionResponse:
        """Issue one chat completion. Must not raise for provider failures."""
        raise NotImplementedError
