from collections.abc import Sequence
from typing import Any

import pytest

from ethinvoke.domain.enums import BlockTag
from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.parameter import ABIParameter
from ethinvoke.domain.models.transaction import EthereumTransaction
from ethinvoke.handler.base import FunctionHandler


class RecordingHandler(FunctionHandler):
    """In-memory handler: records every dispatch, returns canned results or raises `error`."""

    def __init__(
        self,
        address: str | None = "0x1111111111111111111111111111111111111111",
        call_result: dict[str, Any] | None = None,
        tx_hash: str = "0x" + "ab" * 32,
        gas: int = 21_000,
        error: Exception | None = None,
    ) -> None:
        self._address = address
        self.call_result = call_result or {}
        self.tx_hash = tx_hash
        self.gas = gas
        self.error = error
        self.calls: list[tuple[EthereumCall, tuple[ABIParameter, ...], BlockTag | int]] = []
        self.sent: list[EthereumTransaction] = []
        self.estimates: list[EthereumCall] = []

    @property
    def address(self) -> str | None:
        return self._address

    async def call(
        self, call: EthereumCall, outputs: Sequence[ABIParameter], block: BlockTag | int
    ) -> dict[str, Any]:
        self.calls.append((call, tuple(outputs), block))
        if self.error is not None:
            raise self.error
        return self.call_result

    async def send(self, transaction: EthereumTransaction) -> str:
        self.sent.append(transaction)
        if self.error is not None:
            raise self.error
        return self.tx_hash

    async def estimate_gas(self, call: EthereumCall) -> int:
        self.estimates.append(call)
        if self.error is not None:
            raise self.error
        return self.gas


@pytest.fixture()
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def unbound_handler() -> RecordingHandler:
    return RecordingHandler(address=None)


@pytest.fixture()
def handler_factory():
    return RecordingHandler


@pytest.fixture()
def erc20_abi() -> list[dict]:
    return [
        {
            "type": "constructor",
            "stateMutability": "nonpayable",
            "inputs": [
                {"name": "name_", "type": "string"},
                {"name": "supply", "type": "uint256"},
            ],
        },
        {
            "type": "function",
            "name": "balanceOf",
            "stateMutability": "view",
            "inputs": [{"name": "owner", "type": "address"}],
            "outputs": [{"name": "balance", "type": "uint256"}],
        },
        {
            "type": "function",
            "name": "totalSupply",
            "stateMutability": "view",
            "inputs": [],
            "outputs": [{"name": "", "type": "uint256"}],
        },
        {
            "type": "function",
            "name": "transfer",
            "stateMutability": "nonpayable",
            "inputs": [
                {"name": "to", "type": "address"},
                {"name": "amount", "type": "uint256"},
            ],
            "outputs": [{"name": "", "type": "bool"}],
        },
        {
            "type": "function",
            "name": "deposit",
            "stateMutability": "payable",
            "inputs": [],
            "outputs": [],
        },
        {
            "type": "event",
            "name": "Transfer",
            "anonymous": False,
            "inputs": [
                {"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False},
            ],
        },
    ]
