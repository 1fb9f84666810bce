"""On-chain check of the decimals recorded in the token table."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from config.settings import Settings, get_settings
from creditcfg.core.constants import Network
from creditcfg.core.exceptions import CreditConfigError
from creditcfg.registry import ReferenceTables, default_tables

logger = logging.getLogger(__name__)

# Failures reaching the endpoint, as opposed to a token call failing
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)

ERC20_DECIMALS_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    }
]


@dataclass
class DecimalsMismatch:
    """A token whose on-chain decimals differ from the table (or could not be read)."""

    symbol: str
    address: str
    expected: int
    actual: Optional[int]

    def __str__(self) -> str:
        actual = "unreadable" if self.actual is None else str(self.actual)
        return f"{self.symbol} ({self.address}): table says {self.expected}, chain says {actual}"


class DecimalsVerifier:
    """Reads ``decimals()`` of every deployed token through an RPC endpoint."""

    def __init__(
        self,
        network: Network,
        settings: Optional[Settings] = None,
        tables: Optional[ReferenceTables] = None,
    ):
        self.network = network
        self.settings = settings or get_settings()
        self.tables = tables or default_tables()
        self._web3: Optional[AsyncWeb3] = None

    def _get_web3(self) -> AsyncWeb3:
        """Get or create the Web3 instance for the network."""
        if self._web3 is None:
            rpc_url = self.settings.rpc_url(self.network)
            if not rpc_url:
                raise CreditConfigError(
                    f"No RPC endpoint configured for {self.network.value}",
                    code="rpc_not_configured",
                )
            self._web3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        return self._web3

    async def read_decimals(self, address: str) -> int:
        web3 = self._get_web3()
        token = web3.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=ERC20_DECIMALS_ABI)
        return await token.functions.decimals().call()

    async def read_all(self) -> Dict[str, Optional[int]]:
        """Symbol -> on-chain decimals (None where the call failed)."""
        tokens = self.tables.tokens_on(self.network)
        results = await asyncio.gather(
            *(self.read_decimals(t.address(self.network)) for t in tokens),
            return_exceptions=True,
        )

        decimals: Dict[str, Optional[int]] = {}
        for token, result in zip(tokens, results):
            if isinstance(result, Web3Exception):
                logger.warning(f"Error reading decimals of {token.symbol}: {result}")
                decimals[token.symbol] = None
            elif isinstance(result, TRANSPORT_ERRORS):
                raise CreditConfigError(
                    f"RPC endpoint for {self.network.value} is unreachable: {result}",
                    code="rpc_unreachable",
                ) from result
            elif isinstance(result, BaseException):
                raise result
            else:
                decimals[token.symbol] = int(result)
        return decimals

    async def verify(self) -> List[DecimalsMismatch]:
        """Compare on-chain decimals with the table.

        Returns:
            Mismatching or unreadable tokens, in table order
        """
        on_chain = await self.read_all()
        mismatches = []
        for symbol, actual in on_chain.items():
            token = self.tables.token(symbol)
            if actual != token.decimals:
                mismatches.append(DecimalsMismatch(symbol, token.address(self.network), token.decimals, actual))
        logger.info(f"Checked {len(on_chain)} tokens on {self.network.value}: {len(mismatches)} mismatch(es)")
        return mismatches


async def verify_decimals(
    network: Network,
    settings: Optional[Settings] = None,
    tables: Optional[ReferenceTables] = None,
) -> List[DecimalsMismatch]:
    """Check the token table's decimals against the chain for one network."""
    return await DecimalsVerifier(network, settings, tables).verify()
