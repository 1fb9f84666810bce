"""Fixture generation: block builders, fixture list and renderer."""

from .identifiers import safe_enum
from .fixtures import FIXTURES, Fixture, RenderContext, marker
from .renderer import FixtureRenderer, generate_all, render_text

__all__ = [
    "safe_enum",
    "FIXTURES",
    "Fixture",
    "RenderContext",
    "marker",
    "FixtureRenderer",
    "generate_all",
    "render_text",
]
