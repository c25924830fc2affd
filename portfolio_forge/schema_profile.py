"""
Canonical profile schema (empty strings and lists – no placeholders).
"""
import copy
from enum import Enum

PROFILE_SCHEMA = {
    "personal": {
        "full_name": "",
        "title": "",
        "email": "",
        "phone": "",
        "location": "",
        "profile_image": "",
        "about": "",
    },
    "skills": [],      # {"name", "category", "proficiency"}
    "education": [],   # {"institution", "degree", "year", "description"}
    "projects": [],    # {"title", "description", "technologies", "github", "demo", "image"}
    "social": {
        "github": "",
        "linkedin": "",
        "twitter": "",
        "website": "",
        "resume": "",
    },
    "selected_variant": None,
}

SKILL_DEFAULTS = {"category": "Other", "proficiency": "intermediate"}


def new_profile() -> dict:
    """Fresh, independent copy of the empty profile."""
    return copy.deepcopy(PROFILE_SCHEMA)


class Variant(str, Enum):
    """The closed set of site templates."""

    MODERN = "modern"
    CREATIVE = "creative"
    MINIMAL = "minimal"
    DARK_NEON = "dark-neon"
    GLASSMORPHISM = "glassmorphism"
    CYBERPUNK = "cyberpunk"
    GRADIENT_PARADISE = "gradient-paradise"
    PARTICLE_NEXUS = "particle-nexus"


DEFAULT_VARIANT = Variant.MODERN
