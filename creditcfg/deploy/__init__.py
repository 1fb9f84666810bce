"""Deploy-config printers for pool configurations."""

from .configurator import PoolConfigurator, validate_pool
from .printer import print_deploy_config

__all__ = ["PoolConfigurator", "validate_pool", "print_deploy_config"]
