"""
Shared clean-ups for form input and template context.
"""
from __future__ import annotations
import re, unicodedata
from typing import Any, List

_SPACES = re.compile(r"\s+")


# ───────────────────────────────────────── helpers ──
def clean_text(value: Any) -> str:
    """Strip a form value; None and non-strings become text first."""
    if value is None:
        return ""
    return unicodedata.normalize("NFKC", str(value)).strip()


def key_of(*parts: str) -> tuple:
    """Case-insensitive identity key for skills, education and projects."""
    return tuple(_SPACES.sub(" ", clean_text(p)).casefold() for p in parts)


def split_technologies(raw: str) -> List[str]:
    """'Python, Flask ,  ' → ['Python', 'Flask']"""
    return [t.strip() for t in (raw or "").split(",") if t.strip()]


def first_name(full_name: str, fallback: str = "Developer") -> str:
    name = clean_text(full_name) or fallback
    return name.split(" ")[0]


def initial(title: str) -> str:
    title = clean_text(title)
    return title[:1]
