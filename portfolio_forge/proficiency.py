"""
Proficiency level → display percentage used by the skill bars.
"""
from __future__ import annotations

LEVELS = ("beginner", "intermediate", "advanced", "expert")
DEFAULT_LEVEL = "intermediate"

_PERCENTAGES = {
    "beginner": 25,
    "intermediate": 50,
    "advanced": 75,
    "expert": 90,
}
_FALLBACK = 50


def skill_percentage(level: str | None) -> int:
    """Width (in %) a skill bar fills to; unknown levels sit in the middle."""
    return _PERCENTAGES.get((level or "").strip().lower(), _FALLBACK)


def normalise_level(level: str | None) -> str:
    """Lower-case known levels, default empty input, keep anything else as typed."""
    cleaned = (level or "").strip()
    if not cleaned:
        return DEFAULT_LEVEL
    lowered = cleaned.lower()
    return lowered if lowered in _PERCENTAGES else cleaned
