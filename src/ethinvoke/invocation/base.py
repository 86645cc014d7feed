"""Shared behaviour of method invocations: wrapping, call data, call objects, gas estimates."""

import logging
from collections.abc import Sequence
from typing import Any

from ethinvoke.abi.codec import encode_function_call
from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.function import SolidityFunction
from ethinvoke.domain.models.parameter import WrappedParameter, wrap_parameters
from ethinvoke.domain.models.transaction import EthereumTransaction, TxOptions
from ethinvoke.exceptions import ContractNotDeployed, InvalidConfiguration
from ethinvoke.handler.base import FunctionHandler

logger = logging.getLogger(__name__)


class BaseInvocation:
    """One intent to invoke `method` with `parameters` through `handler`.

    Immutable once constructed. Subclasses pin METHOD_TYPE to the descriptor
    variant they accept and expose only the actions that fit that shape.
    """

    METHOD_TYPE: type[SolidityFunction] = SolidityFunction

    __slots__ = ("_method", "_parameters", "_handler")

    def __init__(self, method: SolidityFunction, parameters: Sequence[Any], handler: FunctionHandler) -> None:
        if not isinstance(method, self.METHOD_TYPE):
            raise InvalidConfiguration(
                f"{type(self).__name__} requires a {self.METHOD_TYPE.__name__}, got {type(method).__name__}"
            )
        self._method = method
        self._parameters = wrap_parameters(parameters, method.inputs)
        self._handler = handler

    @property
    def method(self) -> SolidityFunction:
        return self._method

    @property
    def parameters(self) -> tuple[WrappedParameter, ...]:
        return self._parameters

    @property
    def handler(self) -> FunctionHandler:
        return self._handler

    def encode_abi(self) -> str:
        """Call data: selector + encoded parameters."""
        return encode_function_call(self._method, self._parameters)

    def _bound_address(self) -> str:
        address = self._handler.address
        if address is None:
            raise ContractNotDeployed(f"No contract address bound for {self._method.signature}")
        return address

    def create_call(
        self,
        from_address: str | None = None,
        gas: int | None = None,
        gas_price: int | None = None,
        value: int | None = None,
    ) -> EthereumCall:
        data = self.encode_abi()
        to = self._bound_address()
        return EthereumCall(from_address=from_address, to=to, gas=gas, gas_price=gas_price, value=value, data=data)

    async def estimate_gas(
        self,
        from_address: str | None = None,
        gas: int | None = None,
        value: int | None = None,
    ) -> int:
        call = self.create_call(from_address=from_address, gas=gas, value=value)
        logger.debug("Estimating gas for %s at %s", self._method.signature, call.to)
        return await self._handler.estimate_gas(call)

    def _build_transaction(
        self,
        from_address: str | None,
        options: TxOptions | None,
        value: int | None,
    ) -> EthereumTransaction:
        data = self.encode_abi()
        to = self._bound_address()
        return EthereumTransaction.from_options(
            options or TxOptions(), data=data, to=to, from_address=from_address, value=value
        )

    async def _dispatch(self, transaction: EthereumTransaction) -> str:
        logger.debug("Sending %s to %s from %s", self._method.signature, transaction.to, transaction.from_address)
        return await self._handler.send(transaction)

    def __repr__(self) -> str:
        args = ", ".join(repr(p.value) for p in self._parameters)
        return f"{type(self).__name__}({self._method.name}({args}))"
