"""
Sanity checks for a compiled bundle.

• html5lib (strict) for the markup document
• cssutils for style.css, warnings captured through a temporary log handler
• every class/id selector the script queries must exist in the markup
"""
from __future__ import annotations

import logging
import re
from typing import List

import cssutils
import html5lib
from bs4 import BeautifulSoup

from portfolio_forge.compiler import Bundle

logger = logging.getLogger(__name__)

cssutils.log.setLevel(logging.CRITICAL)

# '.skill-bar' / "#particles" style literals handed to querySelector, gsap, ...
_QUOTED_SELECTOR = re.compile(r"""['"]([.#][A-Za-z][\w-]*)['"]""")
_BY_ID = re.compile(r"""getElementById\(\s*['"]([\w-]+)['"]\s*\)""")
_HEX_COLOUR = re.compile(r"#[0-9a-fA-F]{3,8}")


class CaptureCSSLogHandler(logging.Handler):
    def __init__(self, error_list: List[str]):
        super().__init__()
        self.error_list = error_list

    def emit(self, record):
        self.error_list.append(f"CSS: {record.getMessage()}")


def script_selectors(script: str) -> List[str]:
    """Selectors the script looks up, in first-seen order."""
    found = [m for m in _QUOTED_SELECTOR.findall(script) if not _HEX_COLOUR.fullmatch(m)]
    found += [f"#{i}" for i in _BY_ID.findall(script)]
    return list(dict.fromkeys(found))


def dangling_references(bundle: Bundle) -> List[str]:
    """Selectors used by script.js that match nothing in index.html."""
    soup = BeautifulSoup(bundle.markup, "html.parser")
    return [sel for sel in script_selectors(bundle.script) if soup.select_one(sel) is None]


def _html_errors(markup: str) -> List[str]:
    try:
        html5lib.HTMLParser(strict=True).parse(markup)
    except html5lib.html5parser.ParseError as e:
        return [f"HTML ParseError: {e}"]
    return []


def _css_errors(style: str) -> List[str]:
    errors: List[str] = []
    handler = CaptureCSSLogHandler(errors)
    original_level = cssutils.log.getEffectiveLevel()

    cssutils.log.addHandler(handler)
    cssutils.log.setLevel(logging.WARNING)
    try:
        cssutils.CSSParser(validate=True, raiseExceptions=False).parseString(style)
    finally:
        cssutils.log.removeHandler(handler)
        cssutils.log.setLevel(original_level)
    return errors


def validate_bundle(bundle: Bundle) -> List[str]:
    """Returns a list of problems; empty means the bundle looks sound."""
    errors = _html_errors(bundle.markup)
    errors += _css_errors(bundle.style)
    errors += [f"Script references missing element: {sel}" for sel in dangling_references(bundle)]
    if errors:
        logger.debug("Bundle validation found %d issue(s)", len(errors))
    return errors
