"""
Prompt enhancer error taxonomy.

Every failure of the enhance operation surfaces as one EnhanceError
subclass carrying a fixed, user-presentable message and a category.
"""

from typing import Optional


class EnhanceError(Exception):
    """Base class: enhance request failed."""

    category = "unavailable"
    default_message = "Prompt enhancer is temporarily unavailable. Please retry in a moment."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(EnhanceError):
    """Empty idea or unrecognized platform. User-fixable."""

    category = "invalid_input"
    default_message = "Invalid enhance request."


class ConfigurationError(EnhanceError):
    """No provider credential configured. Operator-fixable."""

    category = "configuration"
    default_message = (
        "Missing OPENAI_API_KEY. Add it to your environment and restart the server."
    )


class AuthenticationError(EnhanceError):
    """Provider rejected the credential."""

    category = "authentication"
    default_message = (
        "OpenAI rejected the API key. Double-check OPENAI_API_KEY and restart the server."
    )


class QuotaExceededError(EnhanceError):
    """Billing quota or rate limit hit."""

    category = "quota_exceeded"
    default_message = (
        "OpenAI usage quota was exceeded. Update your billing plan or try again later."
    )


class UpstreamError(EnhanceError):
    """Any other provider-reported failure; carries the provider message when present."""

    category = "upstream_error"
    default_message = (
        "OpenAI could not process this request right now. Please try again shortly."
    )


class UnavailableError(EnhanceError):
    """Transport or unknown failure."""

    category = "unavailable"
