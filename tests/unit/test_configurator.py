"""Unit tests for the deploy-config configurator and printer."""

import io
import json

import pytest
from rich.console import Console

from creditcfg.core.constants import Network
from creditcfg.core.exceptions import ConfigValidationError
from creditcfg.core.models import AdapterConfig, CollateralToken, IRMParams, QuotaParams, UniV3Pool
from creditcfg.deploy import PoolConfigurator, print_deploy_config, validate_pool
from creditcfg.markets import MarketRegistry


class TestValidation:
    """Tests for validate_pool / PoolConfigurator.new."""

    def test_valid_pool(self, small_tables, sample_pool):
        assert validate_pool(sample_pool, small_tables) == []
        assert PoolConfigurator.new(sample_pool, small_tables).pool is sample_pool

    def test_collects_all_problems(self, small_tables, make_pool, make_credit_manager):
        """Every problem is reported in one error."""
        cm = make_credit_manager(
            [CollateralToken("ARB", 9000), CollateralToken("USDC", 12000), CollateralToken("NOPE", 9000)],
            [AdapterConfig("CAMELOT_V3_ROUTER")],
            min_debt=10,
            max_debt=1,
        )
        pool = make_pool([cm], irm=IRMParams(9500, 9000, 0, 1, 2, 3))

        with pytest.raises(ConfigValidationError) as exc_info:
            PoolConfigurator.new(pool, small_tables)

        problems = exc_info.value.problems
        assert any("token ARB is not deployed on Mainnet" in p for p in problems)
        assert any("liquidation threshold 12000" in p for p in problems)
        assert any("unknown token NOPE" in p for p in problems)
        assert any("unknown contract CAMELOT_V3_ROUTER" in p for p in problems)
        assert any("min debt 10 exceeds max debt 1" in p for p in problems)
        assert any(p.startswith("irm:") for p in problems)
        assert exc_info.value.config_id == "test-weth"
        assert "Invalid configuration test-weth" in str(exc_info.value)

    def test_underlying_must_be_deployed(self, small_tables, make_pool):
        pool = make_pool([], underlying="ARB")
        assert validate_pool(pool, small_tables) == ["underlying: token ARB is not deployed on Mainnet"]

    def test_contract_not_on_network(self, small_tables, make_pool, make_credit_manager):
        cm = make_credit_manager([], [AdapterConfig("CURVE_3CRV_POOL")])
        pool = make_pool([cm], network=Network.ARBITRUM, rates_and_limits={})

        problems = validate_pool(pool, small_tables)

        assert problems == ["credit manager 'Test CM' adapter: contract CURVE_3CRV_POOL is not deployed on Arbitrum"]

    def test_allowlist_tokens_checked(self, small_tables, make_pool, make_credit_manager):
        cm = make_credit_manager([], [AdapterConfig("UNISWAP_V3_ROUTER", allowed=(UniV3Pool("ARB", "WETH", 500),))])

        problems = validate_pool(make_pool([cm]), small_tables)

        assert problems == [
            "credit manager 'Test CM' UNISWAP_V3_ROUTER allowlist: token ARB is not deployed on Mainnet"
        ]

    def test_quota_rates(self, small_tables, make_pool):
        pool = make_pool([], rates_and_limits={"USDC": QuotaParams(100, 10, 0, 1)})
        assert validate_pool(pool, small_tables) == ["quota USDC: min rate 100 exceeds max rate 10"]

    def test_duplicate_collateral(self, small_tables, make_pool, make_credit_manager):
        cm = make_credit_manager([CollateralToken("USDC", 9000), CollateralToken("USDC", 8000)])
        problems = validate_pool(make_pool([cm]), small_tables)
        assert problems == ["credit manager 'Test CM' collateral USDC: listed more than once"]


class TestDeployConfig:
    """Tests for the structured deploy config."""

    def test_addresses_resolved(self, small_tables, sample_pool):
        config = PoolConfigurator.new(sample_pool, small_tables).deploy_config()

        assert config["underlying"] == {"symbol": "WETH", "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"}
        assert config["chainId"] == 1
        assert config["network"] == "Mainnet"
        cm = config["creditManagers"][0]
        assert cm["collateralTokens"][0] == {
            "token": "USDC",
            "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            "lt": 9000,
        }
        assert cm["adapters"][0]["adapterType"] == "CURVE_V1_3ASSETS"

    def test_big_integers_are_strings(self, small_tables, sample_pool):
        config = PoolConfigurator.new(sample_pool, small_tables).deploy_config()

        assert config["totalDebtLimit"] == str(50_000 * 10**18)
        assert config["creditManagers"][0]["maxDebt"] == str(100_000 * 10**18)
        assert config["ratesAndLimits"][0]["limit"] == str(5_000 * 10**18)

    def test_irm_keys(self, small_tables, sample_pool):
        irm = PoolConfigurator.new(sample_pool, small_tables).deploy_config()["irm"]
        assert irm["U1"] == 7000
        assert irm["isBorrowingMoreU2Forbidden"] is True

    def test_json_matches_structured(self, small_tables, sample_pool):
        configurator = PoolConfigurator.new(sample_pool, small_tables)
        parsed = json.loads(configurator.deploy_config_json())
        assert parsed == configurator.deploy_config()


class TestSummary:
    """Tests for the human-readable summary."""

    def test_str_mentions_pool_and_collateral(self, small_tables, sample_pool):
        text = str(PoolConfigurator.new(sample_pool, small_tables))

        assert "Test WETH" in text
        assert "Interest rate model" in text
        assert "70.00%" in text
        assert "Credit manager: Test CM" in text
        assert "USDC" in text
        assert "CURVE_3CRV_POOL" in text

    def test_amounts_in_human_units(self, small_tables, sample_pool):
        text = str(PoolConfigurator.new(sample_pool, small_tables))
        assert "50,000" in text


class TestPrintDeployConfig:
    """Tests for print_deploy_config."""

    def test_summary_to_stderr_json_to_stdout(self, small_tables, sample_pool, capsys):
        print_deploy_config(sample_pool, small_tables)

        captured = capsys.readouterr()
        assert json.loads(captured.out)["id"] == "test-weth"
        assert "Test WETH" in captured.err

    def test_explicit_streams(self, small_tables, sample_pool):
        summary = io.StringIO()
        out = io.StringIO()

        print_deploy_config(sample_pool, small_tables, console=Console(file=summary, width=120), out=out)

        assert json.loads(out.getvalue())["symbol"] == "dWETHV3"
        assert "Quotas" in summary.getvalue()

    def test_malformed_prints_nothing(self, small_tables, make_pool, capsys):
        with pytest.raises(ConfigValidationError):
            print_deploy_config(make_pool([], underlying="ARB"), small_tables)

        captured = capsys.readouterr()
        assert captured.out == ""

    @pytest.mark.parametrize("market_id", ["mainnet-weth-v3", "arbitrum-usdc-v3", "optimism-weth-v3"])
    def test_shipped_markets(self, market_id, capsys):
        print_deploy_config(MarketRegistry.get(market_id))

        config = json.loads(capsys.readouterr().out)
        assert config["id"] == market_id
        assert config["creditManagers"]
