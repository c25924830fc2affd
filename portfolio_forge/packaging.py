"""
Packaging for compiled portfolios: README, folder output and zip archive.
"""
from __future__ import annotations

import hashlib
import io
import logging
import zipfile
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from portfolio_forge import config
from portfolio_forge.compiler import Bundle
from portfolio_forge.variants import resolve_variant

logger = logging.getLogger(__name__)

BUNDLE_FILENAMES = ("index.html", "style.css", "script.js", "README.md")

_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

README_TEMPLATE = """# {name} - Portfolio Website

This portfolio was generated with Portfolio Forge.

## Files
- `index.html` - Main HTML file
- `style.css` - Custom styles
- `script.js` - JavaScript animations and interactions

## How to use
1. Open `index.html` in your web browser
2. Or upload all files to your web hosting service
3. Customize the content by editing the HTML file

## Template
{variant}

## Generated
{generated}
"""


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def build_readme(profile: dict, generated: Optional[date] = None) -> str:
    name = (profile.get("personal") or {}).get("full_name") or "Portfolio"
    variant = resolve_variant(profile.get("selected_variant")).value
    return README_TEMPLATE.format(
        name=name,
        variant=variant,
        generated=(generated or date.today()).isoformat(),
    )


def bundle_files(bundle: Bundle, profile: dict, generated: Optional[date] = None) -> Dict[str, str]:
    """Filename → contents, in BUNDLE_FILENAMES order."""
    contents = (bundle.markup, bundle.style, bundle.script, build_readme(profile, generated))
    return dict(zip(BUNDLE_FILENAMES, contents))


def write_bundle(bundle: Bundle, profile: dict, out_dir: str | Path | None = None) -> List[Path]:
    """Write the four files into out_dir (created if needed). OSError propagates."""
    target = Path(out_dir or config.OUTPUT_DIR)
    target.mkdir(parents=True, exist_ok=True)
    written = []
    for name, text in bundle_files(bundle, profile).items():
        path = target / name
        path.write_text(text, encoding="utf-8")
        written.append(path)
    logger.info("Wrote %d files to %s", len(written), target)
    return written


def zip_bundle(bundle: Bundle, profile: dict, generated: Optional[date] = None) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=6) as zf:
        for name, text in bundle_files(bundle, profile, generated).items():
            # fixed timestamp so equal bundles give equal archives
            info = zipfile.ZipInfo(name, date_time=_ZIP_EPOCH)
            zf.writestr(info, text, compress_type=zipfile.ZIP_DEFLATED, compresslevel=6)
    return buf.getvalue()


def archive_name(profile: dict, bundle: Bundle) -> str:
    variant = resolve_variant(profile.get("selected_variant")).value
    return f"portfolio-{variant}-{_sha(bundle.markup)[:8]}.zip"
