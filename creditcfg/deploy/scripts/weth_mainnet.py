"""Print the deploy config of the mainnet WETH pool."""

from creditcfg.cli import run_printer
from creditcfg.markets.weth_mainnet import CONFIG


def main() -> int:
    return run_printer(CONFIG)


if __name__ == "__main__":
    raise SystemExit(main())
