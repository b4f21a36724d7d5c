"""
Prompt recipe checklist.

Four keyword checks describing what a strong idea mentions: who it is for,
its hero features, the technical stack, and the risky edge cases.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class RecipeItem:
    id: str
    title: str
    hint: str
    pattern: "re.Pattern[str]"

    def matches(self, text: str) -> bool:
        return bool(self.pattern.search(text))


PROMPT_RECIPE: tuple = (
    RecipeItem(
        id="users",
        title="Users & pains",
        hint="Name the personas plus the frustration you solve.",
        pattern=re.compile(r"(user|team|founder|manager|designer|player|customer)", re.IGNORECASE),
    ),
    RecipeItem(
        id="features",
        title="Hero features",
        hint="List 2-3 workflows or differentiators.",
        pattern=re.compile(r"(feature|workflow|dashboard|automation|pipeline|collaborat)", re.IGNORECASE),
    ),
    RecipeItem(
        id="stack",
        title="Technical stack",
        hint="Call out frameworks, APIs, or data sources.",
        pattern=re.compile(
            r"(api|sdk|graphql|firebase|supabase|swift|react|native|postgres|aws)", re.IGNORECASE
        ),
    ),
    RecipeItem(
        id="risks",
        title="Edge cases",
        hint="Note performance, compliance, or offline needs.",
        pattern=re.compile(r"(latency|compliance|security|offline|edge|retry|fallback)", re.IGNORECASE),
    ),
)

SAMPLE_IDEAS: tuple = (
    "A multiplayer product strategy room that syncs live whiteboards, backlog grooming, "
    "and KPI dashboards for remote SaaS founders.",
    "A React Native field ops assistant for solar installers with offline survey capture, "
    "photo annotations, and automated permit packets.",
    "A SwiftUI CFO cockpit that ingests NetSuite + Stripe to forecast runway, trigger "
    "anomaly alerts, and share investor-ready briefs.",
)


def evaluate_recipe(idea: str) -> List[Dict[str, Any]]:
    """
    Score an idea against the recipe.

    Blank (or whitespace-only) ideas meet nothing.

    Returns:
        One {id, title, hint, met} dict per recipe item, in recipe order
    """
    text = (idea or "").strip()
    return [
        {
            "id": item.id,
            "title": item.title,
            "hint": item.hint,
            "met": bool(text) and item.matches(text),
        }
        for item in PROMPT_RECIPE
    ]
