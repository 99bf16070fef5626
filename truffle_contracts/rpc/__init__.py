"""JSON-RPC helpers for on-chain verification."""
from .bytecode import (
    BytecodeFetcher,
    fetch_deployed_bytecode,
    get_deployed_bytecode_by_address,
    send_rpc_request,
)

__all__ = [
    "BytecodeFetcher",
    "fetch_deployed_bytecode",
    "get_deployed_bytecode_by_address",
    "send_rpc_request",
]
