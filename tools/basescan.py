"""
BaseScan block-explorer actions for the agent.

Each action makes a single GET request to the BaseScan API and turns the
response, or the failure, into a string the agent can read back to the user.
"""

import json
import logging
from typing import Any, Optional

import requests
from coinbase_agentkit import ActionProvider, WalletProvider, create_action
from coinbase_agentkit.network import Network
from pydantic import BaseModel, Field
from requests.exceptions import RequestException

import config

logger = logging.getLogger(__name__)

BASESCAN_API_URL = "https://api.basescan.org/api"

# Upstream "status" value for a successful call
SUCCESS_STATUS = "1"

DEFAULT_PAGE = 1
DEFAULT_OFFSET = 100
DEFAULT_START_BLOCK = 0
DEFAULT_END_BLOCK = 27025780
DEFAULT_SORT = "asc"


class BaseScanError(Exception):
    """Raised when BaseScan answers with a non-success status or a malformed body."""


class GetBalanceSchema(BaseModel):
    address: str = Field(..., description="The Ethereum address to check balance for")


class GetTokenTransfersSchema(BaseModel):
    address: Optional[str] = Field(None, description="The Ethereum address to check token transfers for")
    contractaddress: Optional[str] = Field(None, description="Optional token contract address to filter transfers")
    page: int = Field(DEFAULT_PAGE, description="Page number for pagination")
    offset: int = Field(DEFAULT_OFFSET, description="Number of results per page")
    startblock: int = Field(DEFAULT_START_BLOCK, description="Starting block number for search")
    endblock: int = Field(DEFAULT_END_BLOCK, description="Ending block number for search")
    sort: str = Field(DEFAULT_SORT, description="Sort order: 'asc' or 'desc'")


def _query(params: dict) -> Any:
    """Run one BaseScan query and return its ``result`` field."""
    logger.debug("BaseScan request: module=%s action=%s", params.get("module"), params.get("action"))
    response = requests.get(BASESCAN_API_URL, params=params)
    data = response.json()

    if not isinstance(data, dict):
        raise BaseScanError(f"Unexpected response from BaseScan: {data!r}")

    if data.get("status") != SUCCESS_STATUS:
        raise BaseScanError(f"Error from BaseScan: {data.get('message')}")

    return data.get("result")


class BaseScanActionProvider(ActionProvider[WalletProvider]):
    """Read-only explorer lookups that do not need the wallet."""

    def __init__(self, api_key: Optional[str] = None):
        super().__init__("basescan", [])
        self.api_key = api_key if api_key is not None else config.get_basescan_api_key()

    @create_action(
        name="get_balance",
        description="Retrieve Ether balance for a given Ethereum address using BaseScan API",
        schema=GetBalanceSchema,
    )
    def get_balance(self, args: dict[str, Any]) -> str:
        address = args.get("address")
        params = {
            "module": "account",
            "action": "balance",
            "address": address,
            "tag": "latest",
            "apikey": self.api_key,
        }

        try:
            balance_wei = _query(params)
            return f"The balance for address {address} is {balance_wei} wei."
        except (BaseScanError, RequestException, ValueError) as e:
            logger.warning("Balance lookup failed for %s: %s", address, e)
            return f"Failed to retrieve balance: {str(e)}"
        except Exception as e:
            logger.exception("Unexpected error in balance lookup for %s", address)
            return f"Failed to retrieve balance: {str(e)}"

    @create_action(
        name="get_token_transfers",
        description=(
            "Retrieve ERC-20 token transfer events for an address (and optionally filter "
            "by a token contract) using the BaseScan API"
        ),
        schema=GetTokenTransfersSchema,
    )
    def get_token_transfers(self, args: dict[str, Any]) -> str:
        try:
            validated = GetTokenTransfersSchema(**args)
        except ValueError as e:
            return f"Failed to retrieve token transfers: {str(e)}"

        params = {"module": "account", "action": "tokentx"}
        if validated.address:
            params["address"] = validated.address
        if validated.contractaddress:
            params["contractaddress"] = validated.contractaddress
        params.update(
            {
                "page": validated.page,
                "offset": validated.offset,
                "startblock": validated.startblock,
                "endblock": validated.endblock,
                "sort": validated.sort,
                "apikey": self.api_key,
            }
        )

        try:
            transfers = _query(params)
            return f"Token transfer events: {json.dumps(transfers)}"
        except (BaseScanError, RequestException, ValueError) as e:
            logger.warning("Token transfer lookup failed: %s", e)
            return f"Failed to retrieve token transfers: {str(e)}"
        except Exception as e:
            logger.exception("Unexpected error in token transfer lookup")
            return f"Failed to retrieve token transfers: {str(e)}"

    def supports_network(self, network: Network) -> bool:
        return True


def basescan_action_provider(api_key: Optional[str] = None) -> BaseScanActionProvider:
    return BaseScanActionProvider(api_key=api_key)
