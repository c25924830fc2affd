"""
Configuration settings for the portfolio builder.

Values come from the environment (optionally a local .env file).
Change them there rather than editing this module.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

_TRUTHY = {"1", "true", "yes", "on"}


def get_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


# Escape markup-significant characters in user text inserted into index.html.
# Turn off to interpolate profile text verbatim.
ESCAPE_HTML = get_bool("PORTFOLIO_ESCAPE_HTML", True)

# Where write_bundle() puts generated sites by default
OUTPUT_DIR = os.getenv("PORTFOLIO_OUTPUT_DIR", "dist")

LOG_LEVEL = os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper()

# Preview server binding
PREVIEW_HOST = os.getenv("PORTFOLIO_PREVIEW_HOST", "0.0.0.0")
