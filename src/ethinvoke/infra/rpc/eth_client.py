"""Ethereum JSON-RPC client — eth_call, eth_estimateGas, eth_sendTransaction."""

import logging
from typing import Any

import httpx
from eth_utils import to_hex
from tenacity import (
    retry,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ethinvoke.domain.enums import BlockTag
from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.transaction import EthereumTransaction
from ethinvoke.exceptions import ExternalServiceError, RPCError
from ethinvoke.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


def block_param(block: BlockTag | int | str) -> str:
    """JSON-RPC block parameter: a tag name or a hex block number."""
    if isinstance(block, BlockTag):
        return block.value
    if isinstance(block, int):
        if block < 0:
            raise ValueError(f"Block number must be non-negative: {block}")
        return to_hex(block)
    return BlockTag(block).value


def _quantity(result: Any, method: str) -> int:
    if not isinstance(result, str) or not result.startswith("0x"):
        raise ExternalServiceError(f"Unexpected {method} result: {result!r}")
    return int(result, 16)


class EthRPCClient:
    """Minimal Ethereum JSON-RPC client for contract calls and transaction submission.

    Reads are retried on transport failures; node error responses (RPCError)
    and sends are never retried.
    """

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client
        self._request_id = 0

    async def _post(self, method: str, params: list) -> Any:
        """Execute one JSON-RPC request and return its result field."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        try:
            resp = await self._http.post(self._rpc_url, json=payload)
        except httpx.HTTPError as exc:
            logger.info("Transport error on %s: %s", method, exc)
            raise ExternalServiceError(f"RPC transport error ({method}): {exc}") from exc

        if resp.status_code >= 500:
            logger.info("Node returned HTTP %d on %s", resp.status_code, method)
            raise ExternalServiceError(f"RPC server error ({method}): HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise ExternalServiceError(f"RPC response is not JSON ({method})") from exc

        if "error" in data:
            error = data["error"]
            if not isinstance(error, dict):
                error = {"message": str(error)}
            logger.warning("RPC error on %s: %s", method, error.get("message"))
            raise RPCError(method, error.get("code"), error.get("message", str(error)), error.get("data"))

        return data.get("result")

    @retry(
        retry=retry_if_exception_type(ExternalServiceError) & retry_if_not_exception_type(RPCError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        reraise=True,
    )
    async def _call(self, method: str, params: list) -> Any:
        return await self._post(method, params)

    async def call(self, call: EthereumCall, block: BlockTag | int = BlockTag.LATEST) -> str:
        """eth_call. Returns raw 0x-prefixed return data."""
        result = await self._call("eth_call", [call.to_rpc(), block_param(block)])
        if not isinstance(result, str):
            raise ExternalServiceError(f"Unexpected eth_call result: {result!r}")
        return result

    async def estimate_gas(self, call: EthereumCall) -> int:
        result = await self._call("eth_estimateGas", [call.to_rpc()])
        return _quantity(result, "eth_estimateGas")

    async def send_transaction(self, transaction: EthereumTransaction) -> str:
        """eth_sendTransaction, sent exactly once. The node signs with the `from` account."""
        logger.info("Submitting transaction from %s to %s", transaction.from_address, transaction.to or "<create>")
        result = await self._post("eth_sendTransaction", [transaction.to_rpc()])
        if not isinstance(result, str):
            raise ExternalServiceError(f"Unexpected eth_sendTransaction result: {result!r}")
        return result

    async def chain_id(self) -> int:
        return _quantity(await self._call("eth_chainId", []), "eth_chainId")

    async def block_number(self) -> int:
        return _quantity(await self._call("eth_blockNumber", []), "eth_blockNumber")
