"""Deploy-config printer: summary to stderr, structured config to stdout."""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from creditcfg.core.models import PoolConfig
from creditcfg.deploy.configurator import PoolConfigurator
from creditcfg.registry import ReferenceTables

logger = logging.getLogger(__name__)


def print_deploy_config(
    pool: PoolConfig,
    tables: Optional[ReferenceTables] = None,
    *,
    console: Optional[Console] = None,
    out: Optional[TextIO] = None,
) -> PoolConfigurator:
    """Validate a pool and print it for an operator.

    The human-readable summary goes to ``console`` (stderr by default) and
    the JSON deploy config to ``out`` (stdout by default), so the latter can
    be piped into deployment tooling.

    Raises:
        ConfigValidationError: If the configuration is malformed; nothing is printed
    """
    configurator = PoolConfigurator.new(pool, tables)
    console = console or Console(stderr=True)
    out = out or sys.stdout

    for renderable in configurator.to_renderables():
        console.print(renderable)
    out.write(configurator.deploy_config_json())
    out.write("\n")
    logger.debug(f"Printed deploy config for {pool.id}")
    return configurator
