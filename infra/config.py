"""
Infrastructure configuration system.

Environment-based backend selection. Defaults to the real OpenAI backend;
LLM_BACKEND=stub runs fully offline.
"""

import os
from typing import Literal
from dataclasses import dataclass

from inference import ModelBackend, StubModelBackend, OpenAIModelBackend
from inference.openai_backend import DEFAULT_BASE_URL


LLMBackendType = Literal["openai", "stub"]


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    llm_backend: LLMBackendType
    openai_base_url: str

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """Load configuration from environment variables."""
        return cls(
            llm_backend=os.getenv("LLM_BACKEND", "openai").lower(),  # type: ignore
            openai_base_url=os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL),
        )

    def create_llm_backend(self) -> ModelBackend:
        """Create LLM backend instance based on configuration."""
        if self.llm_backend == "stub":
            return StubModelBackend()
        # Default to openai
        return OpenAIModelBackend(base_url=self.openai_base_url)


def get_config() -> InfraConfig:
    """Get infrastructure configuration."""
    return InfraConfig.from_env()
