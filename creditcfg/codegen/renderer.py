"""Marker substitution into fixture templates."""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from config.settings import Settings, get_settings
from creditcfg.codegen.fixtures import FIXTURES, Fixture, RenderContext
from creditcfg.core.exceptions import TemplateError
from creditcfg.core.models import PoolConfig
from creditcfg.registry import ReferenceTables, default_tables

logger = logging.getLogger(__name__)


def render_text(template: str, blocks: Mapping[str, str]) -> str:
    """Replace every occurrence of each marker with its block.

    Markers absent from the template are ignored; a block may be empty, in
    which case its marker simply disappears.
    """
    for marker, block in blocks.items():
        template = template.replace(marker, block)
    return template


class FixtureRenderer:
    """Renders fixtures from one set of reference tables and markets."""

    def __init__(self, tables: ReferenceTables, markets: Sequence[PoolConfig] = ()):
        self.context = RenderContext(tables=tables, markets=tuple(markets))

    def render_blocks(self, fixture: Fixture) -> dict:
        """Evaluate every block of a fixture against the render context."""
        return {marker: build(self.context) for marker, build in fixture.markers.items()}

    def render(self, fixture: Fixture, templates_dir: Path, output_dir: Path) -> Path:
        """Render one fixture and write it, overwriting any previous output.

        Args:
            fixture: Fixture to render
            templates_dir: Directory the template is read from
            output_dir: Directory the rendered file is written to

        Returns:
            Path of the written file

        Raises:
            TemplateError: If the template is missing or unreadable
        """
        template_path = Path(templates_dir) / fixture.template
        try:
            template = template_path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(template_path, e) from e

        text = render_text(template, self.render_blocks(fixture))

        output_path = Path(output_dir) / fixture.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {output_path}")
        return output_path

    def render_all(
        self,
        templates_dir: Path,
        output_dir: Path,
        fixtures: Sequence[Fixture] = FIXTURES,
    ) -> List[Path]:
        return [self.render(fixture, templates_dir, output_dir) for fixture in fixtures]


def generate_all(
    settings: Optional[Settings] = None,
    tables: Optional[ReferenceTables] = None,
    markets: Optional[Sequence[PoolConfig]] = None,
) -> List[Path]:
    """Render every fixture with the shipped tables and live-test markets.

    Args:
        settings: Source of the template and output directories
        tables: Reference tables (defaults to the shipped ones)
        markets: Markets rendered into the credit-config fixture
            (defaults to the live-test markets)

    Returns:
        Paths of the written fixtures, in fixture order
    """
    settings = settings or get_settings()
    tables = tables or default_tables()
    if markets is None:
        from creditcfg.markets import live_test_markets

        markets = live_test_markets()

    renderer = FixtureRenderer(tables, markets)
    paths = renderer.render_all(settings.templates_dir, settings.output_dir)
    logger.info(f"Generated {len(paths)} fixtures into {settings.output_dir}")
    return paths
