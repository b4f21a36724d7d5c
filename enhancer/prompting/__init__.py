"""
Prompt Builder layer for PromptHub.

Exports the SYSTEM_PROMPT contract and the message assemblers.
"""

from .prompt_builder import SYSTEM_PROMPT, build_user_prompt, build_messages

__all__ = ["SYSTEM_PROMPT", "build_user_prompt", "build_messages"]
