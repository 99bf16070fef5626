"""
Deployed bytecode lookup.

Fetches the code stored at an address so it can be compared with a local
build. Exactly one request is made per call; retries belong to the transport.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from web3 import HTTPProvider

from ..exceptions import RpcError

logger = logging.getLogger(__name__)

GET_CODE_METHOD = "eth_getCode"
DEFAULT_BLOCK = "latest"

RpcSender = Callable[[str, str, List[Any]], Optional[Dict[str, Any]]]


def send_rpc_request(endpoint: str, method: str, params: List[Any]) -> Optional[Dict[str, Any]]:
    """Send a single JSON-RPC request over HTTP and return the raw response."""
    provider = HTTPProvider(endpoint)
    return provider.make_request(method, params)


class BytecodeFetcher:
    """Reads deployed contract code through a JSON-RPC transport."""

    def __init__(self, rpc_sender: Optional[RpcSender] = None):
        self.rpc_sender = rpc_sender or send_rpc_request

    def fetch_deployed_bytecode(self, endpoint: str, address: str) -> str:
        """
        Get the bytecode currently deployed at an address.

        Args:
            endpoint: JSON-RPC endpoint URL
            address: Contract address

        Returns:
            Deployed bytecode as a hex string, or '' if the node returned
            no result

        Raises:
            RpcError: If there was no response or the node reported an error
        """
        logger.debug("Requesting code at %s from %s", address, endpoint)
        response = self.rpc_sender(
            endpoint, GET_CODE_METHOD, [address, DEFAULT_BLOCK]
        )

        if response is None or response.get("error") is not None:
            raise RpcError(_error_message(response))

        result = response.get("result")
        return str(result) if result else ""


def _error_message(response: Optional[Dict[str, Any]]) -> str:
    if not response:
        return ""
    error = response["error"]
    if isinstance(error, dict):
        return error.get("message") or ""
    return str(error)


def fetch_deployed_bytecode(endpoint: str, address: str) -> str:
    """Get deployed bytecode using the default HTTP transport."""
    return BytecodeFetcher().fetch_deployed_bytecode(endpoint, address)


get_deployed_bytecode_by_address = fetch_deployed_bytecode
