"""Processor exposing the lamport balance endpoint."""

import json
import logging
from typing import List
from urllib.parse import parse_qsl

from fastapi import Request, Response

from .config import settings
from .direct import error_response, json_response, method_not_allowed, run_blocking
from .models import BalanceRequest, BalanceResponse
from .processor import BaseProcessor, StatelessAction
from .rpc import BalanceLookup, BalanceLookupError, SolanaBalanceLookup

logger = logging.getLogger(__name__)

BALANCE_ROUTES = {
    "get_balance": "/",
    "get_balance_api": "/api/balance",
}


def address_from_query(query_string: str) -> str | None:
    """Return the value of the first ``address`` pair in a URL-encoded query string."""
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        if key == "address":
            return value
    return None


class _JSONObject(list):
    """Key/value pairs of a decoded JSON object, duplicates included."""


def parse_balance_request(text: str) -> BalanceRequest:
    """
    Decode a POST body into a ``BalanceRequest``.

    Unknown keys are ignored but a repeated ``address`` key is rejected.

    Raises:
        ValueError: Malformed JSON, a non-object document, a repeated or
            missing ``address``, or a non-string ``address``.
    """
    document = json.loads(text, object_pairs_hook=_JSONObject)
    if not isinstance(document, _JSONObject):
        raise ValueError("Balance request must be a JSON object")
    if [key for key, _ in document].count("address") > 1:
        raise ValueError("Duplicate field 'address'")
    return BalanceRequest.model_validate(dict(document))


class BalanceProcessor(BaseProcessor):
    """
    Look up the lamport balance of a single account.

    GET reads ``?address=``; POST reads a ``{"address": ...}`` JSON body.
    Any other method gets a plain-text 405.

    Args:
        lookup: Blocking callable mapping an address to lamports. Defaults to a
            ``SolanaBalanceLookup`` against ``settings.rpc_url``.
    """

    def __init__(self, lookup: BalanceLookup | None = None):
        if lookup is None:
            lookup = SolanaBalanceLookup(settings.rpc_url, timeout=settings.rpc_timeout)
        self._lookup = lookup

    @property
    def name(self) -> str:
        return settings.service_name

    @property
    def version(self) -> str:
        return settings.service_version

    def get_stateless_actions(self) -> List[StatelessAction]:
        return [
            StatelessAction(
                name=name,
                path=path,
                handler=self.handle_balance,
                response_model=BalanceResponse,
                summary="Get the lamport balance of an account.",
                description=(
                    "Pass the base58 account address as the `address` query parameter (GET) "
                    "or as `{\"address\": ...}` in a JSON body (POST)."
                ),
                tags=("balance",),
            )
            for name, path in BALANCE_ROUTES.items()
        ]

    async def handle_balance(self, request: Request) -> Response:
        if request.method == "GET":
            address = address_from_query(request.url.query)
        elif request.method == "POST":
            body = await request.body()
            if not body:
                return error_response("Empty body", 400)
            try:
                payload = parse_balance_request(body.decode("utf-8", errors="replace"))
            except ValueError:
                return error_response("Invalid JSON", 400)
            address = payload.address
        else:
            return method_not_allowed()

        if address is None:
            return error_response("Missing address", 400)

        try:
            lamports = await run_blocking(self._lookup, address)
            balance = BalanceResponse(lamports=lamports)
        except BalanceLookupError as exc:
            logger.warning("Balance lookup for %r failed: %s", address, exc)
            return error_response("Failed to get balance", 500)
        except Exception:
            logger.exception("Unexpected failure looking up balance for %r", address)
            return error_response("Failed to get balance", 500)

        return json_response(balance.model_dump())
