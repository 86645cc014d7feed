"""Contract deployment: creation payload is the bytecode followed by encoded constructor arguments."""

import logging
from collections.abc import Sequence

from eth_utils import decode_hex, encode_hex, is_hex, remove_0x_prefix

from ethinvoke.abi.codec import encode_parameters
from ethinvoke.domain.models.parameter import WrappedParameter
from ethinvoke.domain.models.transaction import EthereumTransaction, TxOptions
from ethinvoke.exceptions import InvalidConfiguration, InvalidInvocation
from ethinvoke.handler.base import FunctionHandler

logger = logging.getLogger(__name__)


def _normalize_bytecode(bytecode: str | bytes) -> str:
    if isinstance(bytecode, (bytes, bytearray)):
        raw = bytes(bytecode)
    else:
        # solc emits bytecode without the 0x prefix
        if not is_hex(bytecode) or len(remove_0x_prefix(bytecode)) % 2:
            raise InvalidConfiguration("Bytecode must be an even-length hex string")
        raw = decode_hex(bytecode)
    if not raw:
        raise InvalidConfiguration("Bytecode is empty")
    return encode_hex(raw)


class ConstructorInvocation:
    """One intent to deploy a contract. Needs no bound address; the transaction has `to=None`."""

    __slots__ = ("_bytecode", "_parameters", "_payable", "_handler")

    def __init__(
        self,
        bytecode: str | bytes,
        parameters: Sequence[WrappedParameter],
        payable: bool,
        handler: FunctionHandler,
    ) -> None:
        self._bytecode = _normalize_bytecode(bytecode)
        self._parameters = tuple(parameters)
        self._payable = payable
        self._handler = handler

    @property
    def bytecode(self) -> str:
        return self._bytecode

    @property
    def parameters(self) -> tuple[WrappedParameter, ...]:
        return self._parameters

    @property
    def payable(self) -> bool:
        return self._payable

    @property
    def handler(self) -> FunctionHandler:
        return self._handler

    def encode_abi(self) -> str:
        """Creation payload, broadcast as-is."""
        if not self._parameters:
            return self._bytecode
        return self._bytecode + remove_0x_prefix(encode_parameters(self._parameters))

    def create_transaction(
        self,
        from_address: str | None = None,
        options: TxOptions | None = None,
        value: int | None = None,
    ) -> EthereumTransaction:
        if not self._payable and value not in (None, 0):
            raise InvalidInvocation(f"Constructor is not payable but value={value} was given")
        return EthereumTransaction.from_options(
            options or TxOptions(), data=self.encode_abi(), to=None, from_address=from_address, value=value
        )

    async def send(
        self,
        from_address: str,
        options: TxOptions | None = None,
        value: int | None = None,
    ) -> str:
        """Build and submit the deployment. Returns the transaction hash."""
        transaction = self.create_transaction(from_address, options, value)
        logger.debug("Deploying %d-byte contract from %s", len(self._bytecode) // 2 - 1, from_address)
        return await self._handler.send(transaction)

    def __repr__(self) -> str:
        args = ", ".join(repr(p.value) for p in self._parameters)
        return f"ConstructorInvocation(payable={self._payable}, args=({args}))"
