"""Contract — a FunctionHandler bound to one address and ABI over JSON-RPC."""

from collections.abc import Sequence
from typing import Any

from eth_utils import is_address, to_checksum_address

from ethinvoke.abi.codec import decode_outputs
from ethinvoke.abi.json_abi import ContractABI, load_abi
from ethinvoke.domain.enums import BlockTag
from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.function import SolidityFunction
from ethinvoke.domain.models.parameter import ABIParameter
from ethinvoke.domain.models.transaction import EthereumTransaction
from ethinvoke.exceptions import InvalidConfiguration
from ethinvoke.handler.base import FunctionHandler
from ethinvoke.infra.rpc.eth_client import EthRPCClient
from ethinvoke.invocation import (
    ConstructorInvocation,
    NonPayableInvocation,
    PayableInvocation,
    ReadInvocation,
)


class Contract(FunctionHandler):
    """Entry point for invoking a contract's methods.

    Usage:
        token = Contract(client, abi=erc20_abi, address="0x...")
        balance = await token.invoke("balanceOf", holder).call()
        tx_hash = await token.invoke("transfer", to, 1000).send(from_address=me)
    """

    def __init__(
        self,
        client: EthRPCClient,
        abi: list[dict[str, Any]] | dict[str, Any] | str | ContractABI,
        address: str | None = None,
        bytecode: str | bytes | None = None,
    ) -> None:
        if address is not None:
            if not is_address(address):
                raise InvalidConfiguration(f"Invalid contract address: {address!r}")
            address = to_checksum_address(address)
        self._client = client
        self._abi = abi if isinstance(abi, ContractABI) else load_abi(abi)
        self._address = address
        self._bytecode = bytecode

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def abi(self) -> ContractABI:
        return self._abi

    def at(self, address: str) -> "Contract":
        """Same ABI and client, bound to another address (e.g. after deployment)."""
        return Contract(self._client, self._abi, address=address, bytecode=self._bytecode)

    def function(self, name_or_signature: str) -> SolidityFunction:
        function = self._abi.get(name_or_signature)
        if function is None:
            raise InvalidConfiguration(f"Contract has no function {name_or_signature!r}")
        return function

    def invoke(
        self, name_or_signature: str, *args: Any
    ) -> ReadInvocation | PayableInvocation | NonPayableInvocation:
        """Invocation of the named method with `args`, dispatched through this contract."""
        return self.function(name_or_signature).invoke(self, *args)

    def deploy(self, *args: Any) -> ConstructorInvocation:
        if self._bytecode is None:
            raise InvalidConfiguration("Contract was created without bytecode; cannot deploy")
        return self._abi.constructor.invoke(self, self._bytecode, *args)

    # --- FunctionHandler ---

    async def call(
        self, call: EthereumCall, outputs: Sequence[ABIParameter], block: BlockTag | int = BlockTag.LATEST
    ) -> dict[str, Any]:
        data = await self._client.call(call, block)
        return decode_outputs(outputs, data)

    async def send(self, transaction: EthereumTransaction) -> str:
        return await self._client.send_transaction(transaction)

    async def estimate_gas(self, call: EthereumCall) -> int:
        return await self._client.estimate_gas(call)

    def __repr__(self) -> str:
        return f"Contract(address={self._address!r})"
