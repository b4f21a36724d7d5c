"""
Prompt Builder Layer
====================

Assembles the fixed two-message conversation sent to the provider.

Invariants:
- Exactly two messages: system first, user second
- The user message embeds the trimmed idea and the platform's display label
- The requested output shape (title, 2 bullet goals, detailed prompt) is fixed
"""

from typing import List

from inference import ChatMessage

# ── Behavioral Contract ───────────────────────────────────────────────────────
SYSTEM_PROMPT = (
    "You are PromptHub, an expert prompt engineer who transforms vague ideas "
    "into detailed, high-impact product prompts for AI code generation."
)

_USER_TEMPLATE = (
    "Create a concise but detailed build prompt for an AI engineer.\n"
    "\n"
    "Idea: {idea}\n"
    "Target platform: {platform_label}\n"
    "\n"
    "Return:\n"
    "- A compelling title\n"
    "- 2 bullet goal summary\n"
    "- Detailed prompt with technical stack, APIs, performance goals, and edge cases."
)


def build_user_prompt(idea: str, platform_label: str) -> str:
    """Render the user message for one idea/platform pair."""
    return _USER_TEMPLATE.format(idea=idea, platform_label=platform_label)


def build_messages(validated) -> List[ChatMessage]:
    """
    Build the conversation for a ValidatedRequest.

    Args:
        validated: ValidatedRequest (trimmed idea + resolved platform)

    Returns:
        [system, user] chat messages
    """
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(
            role="user",
            content=build_user_prompt(validated.idea, validated.platform.label),
        ),
    ]
