"""Pydantic settings for the fixture generator and deploy tooling."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creditcfg.core.constants import Network

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "creditcfg" / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fixture generation
    templates_dir: Path = Field(default=PACKAGE_TEMPLATES_DIR, description="Directory with fixture templates")
    output_dir: Path = Field(default=Path("contracts/test/config"), description="Directory fixtures are written to")

    # RPC endpoints (decimals verification only)
    eth_rpc_url: Optional[str] = Field(default=None, description="Ethereum mainnet RPC endpoint")
    arbitrum_rpc_url: Optional[str] = Field(default=None, description="Arbitrum RPC endpoint")
    optimism_rpc_url: Optional[str] = Field(default=None, description="Optimism RPC endpoint")

    log_level: str = Field(default="INFO", description="Root logging level for CLI entry points")

    @field_validator("templates_dir", "output_dir", mode="before")
    @classmethod
    def parse_path(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def rpc_url(self, network: Network) -> Optional[str]:
        """Get the RPC endpoint configured for a network."""
        return {
            Network.MAINNET: self.eth_rpc_url,
            Network.ARBITRUM: self.arbitrum_rpc_url,
            Network.OPTIMISM: self.optimism_rpc_url,
        }[network]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
