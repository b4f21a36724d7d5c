"""HTTP layer - Module Exports"""

from .prompts import router, ERROR_STATUS

__all__ = ["router", "ERROR_STATUS"]
