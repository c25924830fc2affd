"""
Portfolio Forge: a six-step wizard that compiles a profile into a static
portfolio site (index.html, style.css, script.js) in one of eight templates.
"""
from portfolio_forge.compiler import Bundle
from portfolio_forge.controller import StepController, StepResult
from portfolio_forge.variants import available_variants, compile_profile, get_compiler

__version__ = "0.1.0"

__all__ = [
    "Bundle",
    "StepController",
    "StepResult",
    "available_variants",
    "compile_profile",
    "get_compiler",
]
