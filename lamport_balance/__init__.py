"""Stateless FastAPI service returning the lamport balance of a Solana account."""

from .processor import BaseProcessor, StatelessAction
from .api import create_app, ServiceConfig
from .config import Settings, settings
from .direct import error_response, json_response, method_not_allowed, run_blocking
from .rpc import BalanceLookupError, SolanaBalanceLookup
from .balance import BalanceProcessor

__version__ = "1.0.0"


__all__ = [
    "BaseProcessor",
    "StatelessAction",
    "create_app",
    "ServiceConfig",
    "Settings",
    "settings",
    "error_response",
    "json_response",
    "method_not_allowed",
    "run_blocking",
    "BalanceLookupError",
    "SolanaBalanceLookup",
    "BalanceProcessor",
]
