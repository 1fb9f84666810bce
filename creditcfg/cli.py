"""Console entry points.

generate-fixtures      render every fixture template
print-deploy-config    print a market's deploy config (summary on stderr, JSON on stdout)
verify-decimals        compare the token table's decimals with the chain
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from config.settings import Settings, get_settings
from creditcfg.core.constants import Network
from creditcfg.core.exceptions import CreditConfigError
from creditcfg.core.models import PoolConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def run_printer(pool: PoolConfig) -> int:
    """Print one pool's deploy config; returns the process exit status."""
    from creditcfg.deploy import print_deploy_config

    setup_logging(get_settings())
    try:
        print_deploy_config(pool)
    except CreditConfigError as e:
        logger.error(e.message)
        return 1
    return 0


def generate_fixtures_main(argv: Optional[List[str]] = None) -> int:
    from creditcfg.codegen import generate_all

    parser = argparse.ArgumentParser(description="Render Solidity test fixtures from the reference tables")
    parser.add_argument("--templates-dir", help="Directory holding the fixture templates")
    parser.add_argument("--output-dir", help="Directory fixtures are written to")
    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.templates_dir:
        overrides["templates_dir"] = args.templates_dir
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})
    setup_logging(settings)

    try:
        generate_all(settings)
    except CreditConfigError as e:
        logger.error(e.message)
        return 1
    return 0


def print_deploy_config_main(argv: Optional[List[str]] = None) -> int:
    from creditcfg.markets import MarketRegistry

    parser = argparse.ArgumentParser(description="Print the deploy config of a shipped market")
    parser.add_argument("market_id", nargs="?", help="Market id, e.g. mainnet-weth-v3")
    parser.add_argument("--list", action="store_true", help="List available market ids and exit")
    args = parser.parse_args(argv)

    if args.list or not args.market_id:
        for market_id in MarketRegistry.ids():
            print(market_id)
        return 0 if args.list else 2

    try:
        pool = MarketRegistry.get(args.market_id)
    except CreditConfigError as e:
        setup_logging(get_settings())
        logger.error(e.message)
        return 1
    return run_printer(pool)


def verify_decimals_main(argv: Optional[List[str]] = None) -> int:
    from creditcfg.onchain import verify_decimals

    parser = argparse.ArgumentParser(description="Compare token decimals in the table with the chain")
    parser.add_argument(
        "--network",
        choices=[n.value for n in Network],
        default=Network.MAINNET.value,
        help="Network to check (default: Mainnet)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)
    try:
        mismatches = asyncio.run(verify_decimals(Network(args.network), settings))
    except CreditConfigError as e:
        logger.error(e.message)
        return 1

    for mismatch in mismatches:
        logger.error(f"Decimals mismatch: {mismatch}")
    return 1 if mismatches else 0
