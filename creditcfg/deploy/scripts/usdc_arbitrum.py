"""Print the deploy config of the Arbitrum USDC.e pool."""

from creditcfg.cli import run_printer
from creditcfg.markets.usdc_arbitrum import CONFIG


def main() -> int:
    return run_printer(CONFIG)


if __name__ == "__main__":
    raise SystemExit(main())
