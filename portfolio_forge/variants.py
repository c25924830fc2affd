"""
Variant registry: the closed mapping from variant id to its compiler.

Unknown or missing ids resolve to the modern template rather than failing.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Type

from portfolio_forge.compiler import (
    Bundle,
    CreativeCompiler,
    CyberpunkCompiler,
    DarkNeonCompiler,
    GlassmorphismCompiler,
    GradientParadiseCompiler,
    MinimalCompiler,
    ModernCompiler,
    ParticleNexusCompiler,
    TemplateCompiler,
)
from portfolio_forge.schema_profile import DEFAULT_VARIANT, Variant

logger = logging.getLogger(__name__)

REGISTRY: Mapping[Variant, Type[TemplateCompiler]] = MappingProxyType({
    Variant.MODERN: ModernCompiler,
    Variant.CREATIVE: CreativeCompiler,
    Variant.MINIMAL: MinimalCompiler,
    Variant.DARK_NEON: DarkNeonCompiler,
    Variant.GLASSMORPHISM: GlassmorphismCompiler,
    Variant.CYBERPUNK: CyberpunkCompiler,
    Variant.GRADIENT_PARADISE: GradientParadiseCompiler,
    Variant.PARTICLE_NEXUS: ParticleNexusCompiler,
})

assert set(REGISTRY) == set(Variant), "every variant needs a compiler"


def resolve_variant(value: Optional[str]) -> Variant:
    """Map any id (or None) onto the closed set, defaulting to modern."""
    if isinstance(value, Variant):
        return value
    try:
        return Variant((value or "").strip().lower())
    except ValueError:
        if value:
            logger.info("Unknown template %r, falling back to %s", value, DEFAULT_VARIANT.value)
        return DEFAULT_VARIANT


def get_compiler(value: Optional[str] = None, escape: bool | None = None) -> TemplateCompiler:
    """Factory returning the compiler for a variant id."""
    return REGISTRY[resolve_variant(value)](escape=escape)


def compile_profile(profile: dict, variant: Optional[str] = None, escape: bool | None = None) -> Bundle:
    """Compile with an explicit variant, or the one stored on the profile."""
    chosen = variant if variant is not None else profile.get("selected_variant")
    return get_compiler(chosen, escape=escape).compile(profile)


def available_variants() -> List[Tuple[str, str, str]]:
    """(id, display name, description) for template pickers."""
    return [(v.value, REGISTRY[v].display_name, REGISTRY[v].description) for v in Variant]
