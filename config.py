"""
Configuration management for PromptHub.

Loads environment variables from .env file and provides typed access to configuration.
OPENAI_API_KEY is deliberately not captured here: the enhancer reads it per request.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for PromptHub."""

    # Service
    PORT = int(os.getenv("PROMPTHUB_PORT", "8000"))
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # LLM Backend Configuration
    LLM_BACKEND = os.getenv("LLM_BACKEND", "openai").lower()
    OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")

    @staticmethod
    def api_key_configured() -> bool:
        return bool(os.getenv("OPENAI_API_KEY", "").strip())

    @classmethod
    def validate(cls) -> bool:
        """Validate that required configuration is set.

        The enhancer requires OPENAI_API_KEY whichever backend is selected.
        """
        return cls.api_key_configured()


if __name__ == "__main__":
    print("Configuration loaded:")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"  Port: {Config.PORT}")
    print(f"  LLM Backend: {Config.LLM_BACKEND}")
    print(f"  OpenAI Base URL: {Config.OPENAI_BASE_URL}")
    print(f"  OpenAI API Key: {'✓ Set' if Config.api_key_configured() else '✗ Missing'}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
