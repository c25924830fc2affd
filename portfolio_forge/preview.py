"""
Single-document preview of a compiled bundle.

The stylesheet link and the script tag are swapped for inline <style> and
<script> elements so the page can be shown in an iframe or served on its own.
"""
from __future__ import annotations

from portfolio_forge.compiler import Bundle

STYLE_LINK = '<link rel="stylesheet" href="style.css">'
SCRIPT_TAG = '<script src="script.js"></script>'


def inline_bundle(bundle: Bundle) -> str:
    html = bundle.markup.replace(STYLE_LINK, f"<style>\n{bundle.style}</style>", 1)
    return html.replace(SCRIPT_TAG, f"<script>\n{bundle.script}</script>", 1)
