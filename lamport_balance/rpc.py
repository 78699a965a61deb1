"""Blocking Solana RPC balance lookup."""

import logging
from typing import Callable

from solana.rpc.api import Client
from solders.pubkey import Pubkey
from solders.rpc.responses import GetBalanceResp

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"

BalanceLookup = Callable[[str], int]


class BalanceLookupError(RuntimeError):
    """Raised when an address cannot be parsed or its balance cannot be fetched."""


class SolanaBalanceLookup:
    """
    Resolve an account address to its lamport balance.

    Instances are callables so they can be handed straight to ``run_blocking``.
    The underlying ``Client`` performs synchronous HTTP and must not be called
    from the event loop thread.

    Usage:
        lookup = SolanaBalanceLookup("https://api.mainnet-beta.solana.com")
        lamports = lookup("Vote111111111111111111111111111111111111111")
    """

    def __init__(self, endpoint: str = DEFAULT_RPC_URL, timeout: float | None = None):
        """
        Args:
            endpoint: JSON-RPC URL of the Solana node.
            timeout: Request timeout in seconds; None disables it.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = Client(endpoint, timeout=timeout)

    @staticmethod
    def parse_address(address: str) -> Pubkey:
        try:
            return Pubkey.from_string(address)
        except ValueError as exc:
            raise BalanceLookupError(f"Invalid account address {address!r}: {exc}") from exc

    def __call__(self, address: str) -> int:
        pubkey = self.parse_address(address)

        try:
            response = self._client.get_balance(pubkey)
        except Exception as exc:
            raise BalanceLookupError(f"getBalance request to {self.endpoint} failed: {exc}") from exc

        if not isinstance(response, GetBalanceResp):
            raise BalanceLookupError(f"Unexpected getBalance response: {response!r}")

        lamports = response.value
        if not isinstance(lamports, int) or lamports < 0:
            raise BalanceLookupError(f"Balance value is not a lamport count: {lamports!r}")

        logger.debug("Fetched balance %d lamports for %s", lamports, address)
        return lamports
