"""Print the deploy config of the Arbitrum WETH pool."""

from creditcfg.cli import run_printer
from creditcfg.markets.weth_arbitrum import CONFIG


def main() -> int:
    return run_printer(CONFIG)


if __name__ == "__main__":
    raise SystemExit(main())
