"""Print the deploy config of the Optimism WETH pool."""

from creditcfg.cli import run_printer
from creditcfg.markets.weth_optimism import CONFIG


def main() -> int:
    return run_printer(CONFIG)


if __name__ == "__main__":
    raise SystemExit(main())
