"""Unit tests for application settings."""

from pathlib import Path

from config.settings import PACKAGE_TEMPLATES_DIR, Settings
from creditcfg.core.constants import Network


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("TEMPLATES_DIR", "OUTPUT_DIR", "ETH_RPC_URL", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.templates_dir == PACKAGE_TEMPLATES_DIR
        assert settings.output_dir == Path("contracts/test/config")
        assert settings.eth_rpc_url is None
        assert settings.log_level == "INFO"

    def test_templates_shipped_with_package(self):
        assert (PACKAGE_TEMPLATES_DIR / "Tokens.sol").is_file()

    def test_paths_from_environment(self, monkeypatch, tmp_path):
        """Directory settings are read from the environment as paths."""
        monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))

        settings = Settings(_env_file=None)

        assert settings.output_dir == tmp_path

    def test_log_level_normalized(self):
        assert Settings(log_level=" debug ", _env_file=None).log_level == "DEBUG"

    def test_rpc_url_per_network(self):
        settings = Settings(
            eth_rpc_url="http://eth",
            arbitrum_rpc_url="http://arb",
            optimism_rpc_url=None,
            _env_file=None,
        )

        assert settings.rpc_url(Network.MAINNET) == "http://eth"
        assert settings.rpc_url(Network.ARBITRUM) == "http://arb"
        assert settings.rpc_url(Network.OPTIMISM) is None
