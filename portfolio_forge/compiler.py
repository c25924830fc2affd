"""
Template compilers: profile dict → index.html / style.css / script.js.

• One TemplateCompiler subclass per variant, each rendering its own folder
  under templates/ with Jinja2.
• compile() is pure: it only reads the profile it is handed, so equal
  profiles give byte-identical bundles and calls may run concurrently.
• Sections (skills, education, projects, social links) are rendered only
  when their collection is non-empty, and the style/script templates are
  gated on the same flags so nothing refers to a missing element.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, NamedTuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from portfolio_forge import config
from portfolio_forge.cleaner import clean_text, first_name, initial, split_technologies
from portfolio_forge.proficiency import DEFAULT_LEVEL, skill_percentage
from portfolio_forge.schema_profile import Variant

_TEMPLATE_DIR = Path(__file__).parent / "templates"

DOCUMENTS = ("index.html", "style.css", "script.js")

# Order in which social links appear on every site
SOCIAL_LABELS = (
    ("github", "GitHub"),
    ("linkedin", "LinkedIn"),
    ("twitter", "Twitter"),
    ("website", "Website"),
    ("resume", "Resume"),
)


class Bundle(NamedTuple):
    markup: str
    style: str
    script: str


@lru_cache(maxsize=None)
def get_environment(escape: bool) -> Environment:
    """Shared Jinja environment; HTML documents are autoescaped when `escape` is on."""
    autoescape = select_autoescape(enabled_extensions=("html",), default=False) if escape else False
    return Environment(
        loader=FileSystemLoader(_TEMPLATE_DIR),
        autoescape=autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class TemplateCompiler(ABC):
    """Compiles a profile into one variant's three documents."""

    variant: Variant
    display_name: str = ""
    description: str = ""

    def __init__(self, escape: bool | None = None):
        self.escape = config.ESCAPE_HTML if escape is None else escape
        self.env = get_environment(self.escape)

    @property
    @abstractmethod
    def defaults(self) -> Dict[str, str]:
        """Texts shown when the profile leaves a hero field blank."""

    def context(self, profile: dict) -> Dict[str, Any]:
        personal = dict(profile.get("personal") or {})
        social = profile.get("social") or {}
        return {
            "variant": self.variant.value,
            "default": self.defaults,
            "personal": personal,
            "first_name": first_name(personal.get("full_name", ""), self.defaults.get("first_name", "Developer")),
            "skills": _skills(profile.get("skills") or []),
            "education": [dict(e) for e in profile.get("education") or []],
            "projects": _projects(profile.get("projects") or []),
            "social_links": [
                {"key": key, "label": label, "url": clean_text(social.get(key))}
                for key, label in SOCIAL_LABELS
                if clean_text(social.get(key))
            ],
        }

    def compile(self, profile: dict) -> Bundle:
        ctx = self.context(profile)
        markup, style, script = (
            self.env.get_template(f"{self.variant.value}/{name}").render(ctx)
            for name in DOCUMENTS
        )
        return Bundle(markup, style, script)


# ───────────────────────────────────────── context helpers ──
def _skills(skills: List[dict]) -> List[dict]:
    out = []
    for s in skills:
        level = s.get("proficiency") or DEFAULT_LEVEL
        out.append({
            **s,
            "category": s.get("category") or "Other",
            "level": level,
            "percent": skill_percentage(level),
        })
    return out


def _projects(projects: List[dict]) -> List[dict]:
    return [
        {
            **p,
            "tech_list": split_technologies(p.get("technologies", "")),
            "initial": initial(p.get("title", "")),
        }
        for p in projects
    ]


# ───────────────────────────────────────── variants ──
class ModernCompiler(TemplateCompiler):
    variant = Variant.MODERN
    display_name = "Modern Professional"
    description = "Clean light layout with progress-bar skills and project cards."
    defaults = {
        "name": "Portfolio",
        "first_name": "Developer",
        "title": "Full Stack Developer",
        "about": "Passionate developer creating amazing digital experiences.",
    }


class CreativeCompiler(TemplateCompiler):
    variant = Variant.CREATIVE
    display_name = "Creative Developer"
    description = "Dark canvas, floating colour blobs and pink-purple gradients."
    defaults = {
        "name": "Your Name",
        "title": "Creative Developer",
        "about": "Crafting digital experiences that inspire and engage through creative code and innovative design.",
    }


class MinimalCompiler(TemplateCompiler):
    variant = Variant.MINIMAL
    display_name = "Minimal Portfolio"
    description = "Typography-first, thin rules and lots of white space."
    defaults = {
        "name": "Your Name",
        "title": "Designer & Developer",
        "about": (
            "Creating thoughtful digital experiences through clean design and elegant code. "
            "Focused on simplicity, functionality, and user-centered design."
        ),
    }


class DarkNeonCompiler(TemplateCompiler):
    variant = Variant.DARK_NEON
    display_name = "Dark Neon"
    description = "Black background with glowing green accents."
    defaults = {
        "brand": "NEON.DEV",
        "name": "CYBER DEV",
        "title": "FULL STACK DEVELOPER",
        "about": "Building neon interfaces and hi-performance applications with cutting-edge technology.",
    }


class GlassmorphismCompiler(TemplateCompiler):
    variant = Variant.GLASSMORPHISM
    display_name = "Glassmorphism"
    description = "Frosted-glass panels over a violet gradient."
    defaults = {
        "name": "Glass Portfolio",
        "title": "Creative Developer",
        "about": "Beautiful glassmorphism design with modern aesthetics.",
    }


class CyberpunkCompiler(TemplateCompiler):
    variant = Variant.CYBERPUNK
    display_name = "Cyberpunk"
    description = "Terminal type, cyan glitch headline and bordered panels."
    defaults = {
        "name": "CYBER.EXE",
        "title": "> HACKING_THE_MATRIX.EXE",
        "about": "> Connecting to neural network... > Initializing cyberpunk portfolio... > Welcome to the future.",
    }


class GradientParadiseCompiler(TemplateCompiler):
    variant = Variant.GRADIENT_PARADISE
    display_name = "Gradient Paradise"
    description = "Animated sunset gradient with pill-shaped glass cards."
    defaults = {
        "name": "Gradient Magic",
        "title": "Designer & Developer",
        "about": "Creating beautiful gradients and smooth animations that bring websites to life.",
    }


class ParticleNexusCompiler(TemplateCompiler):
    variant = Variant.PARTICLE_NEXUS
    display_name = "Particle Nexus"
    description = "Interactive particle network drawn on a full-page canvas."
    defaults = {
        "name": "Particle Master",
        "title": "Interactive Developer",
        "about": "Crafting interactive experiences with particle systems and smooth animations.",
    }
