"""Contract method descriptors, one closed variant per mutability class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from eth_utils import encode_hex, function_signature_to_4byte_selector
from pydantic import BaseModel, ConfigDict

from ethinvoke.domain.enums import StateMutability
from ethinvoke.domain.models.parameter import ABIParameter, wrap_parameters

if TYPE_CHECKING:
    from ethinvoke.handler.base import FunctionHandler
    from ethinvoke.invocation import (
        ConstructorInvocation,
        NonPayableInvocation,
        PayableInvocation,
        ReadInvocation,
    )


class SolidityFunction(BaseModel):
    """Immutable description of one contract method. Shared across invocations."""

    model_config = ConfigDict(frozen=True)

    name: str
    inputs: tuple[ABIParameter, ...] = ()

    @property
    def state_mutability(self) -> StateMutability:
        raise NotImplementedError

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. ``transfer(address,uint256)``."""
        return f"{self.name}({','.join(p.canonical_type for p in self.inputs)})"

    @property
    def selector(self) -> str:
        """0x-prefixed 4-byte selector derived from the signature."""
        return encode_hex(function_signature_to_4byte_selector(self.signature))

    def __str__(self) -> str:
        return self.signature


class ConstantFunction(SolidityFunction):
    """Read-only method (`view` or `pure`). Invoked with `.call()`."""

    outputs: tuple[ABIParameter, ...] = ()
    pure: bool = False

    @property
    def state_mutability(self) -> StateMutability:
        return StateMutability.PURE if self.pure else StateMutability.VIEW

    def invoke(self, handler: FunctionHandler, *args: Any) -> ReadInvocation:
        from ethinvoke.invocation import ReadInvocation

        return ReadInvocation(self, args, handler)


class PayableFunction(SolidityFunction):
    """State-changing method that may receive native value."""

    outputs: tuple[ABIParameter, ...] = ()

    @property
    def state_mutability(self) -> StateMutability:
        return StateMutability.PAYABLE

    def invoke(self, handler: FunctionHandler, *args: Any) -> PayableInvocation:
        from ethinvoke.invocation import PayableInvocation

        return PayableInvocation(self, args, handler)


class NonPayableFunction(SolidityFunction):
    """State-changing method that must not receive native value."""

    outputs: tuple[ABIParameter, ...] = ()

    @property
    def state_mutability(self) -> StateMutability:
        return StateMutability.NONPAYABLE

    def invoke(self, handler: FunctionHandler, *args: Any) -> NonPayableInvocation:
        from ethinvoke.invocation import NonPayableInvocation

        return NonPayableInvocation(self, args, handler)


class ConstructorFunction(BaseModel):
    """The contract constructor. Payable constructors may be deployed with value."""

    model_config = ConfigDict(frozen=True)

    inputs: tuple[ABIParameter, ...] = ()
    payable: bool = False

    def invoke(self, handler: FunctionHandler, bytecode: str | bytes, *args: Any) -> ConstructorInvocation:
        from ethinvoke.invocation import ConstructorInvocation

        return ConstructorInvocation(bytecode, wrap_parameters(args, self.inputs), self.payable, handler)
