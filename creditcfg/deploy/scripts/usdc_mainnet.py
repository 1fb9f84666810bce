"""Print the deploy config of the mainnet USDC pool."""

from creditcfg.cli import run_printer
from creditcfg.markets.usdc_mainnet import CONFIG


def main() -> int:
    return run_printer(CONFIG)


if __name__ == "__main__":
    raise SystemExit(main())
