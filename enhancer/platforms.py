"""
Platform catalogue.

Closed set of target application types. The label is embedded into the
outbound prompt; the description is shown next to the selector.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Platform:
    id: str
    label: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


PLATFORMS: tuple = (
    Platform(
        id="web-app",
        label="Web App",
        description="Responsive browser experience with modern web tooling.",
    ),
    Platform(
        id="react-native",
        label="React Native",
        description="Cross-platform mobile application targeting iOS and Android.",
    ),
    Platform(
        id="native-ios",
        label="Native iOS",
        description="Swift / SwiftUI experience optimized for Apple devices.",
    ),
)

_BY_ID: Dict[str, Platform] = {p.id: p for p in PLATFORMS}

PLATFORM_IDS = frozenset(_BY_ID)


def get_platform(platform_id: str) -> Optional[Platform]:
    """Return the catalogue entry for platform_id, or None."""
    return _BY_ID.get(platform_id)


def list_platforms() -> List[Dict[str, str]]:
    return [p.to_dict() for p in PLATFORMS]
