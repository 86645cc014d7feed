"""Abstract dispatch target for built calls and transactions."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ethinvoke.domain.enums import BlockTag
from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.parameter import ABIParameter
from ethinvoke.domain.models.transaction import EthereumTransaction


class FunctionHandler(ABC):
    """Executes calls, sends and gas estimates on behalf of invocations.

    Shared, not owned: any number of invocations may hold and use the same
    handler concurrently.
    """

    @property
    @abstractmethod
    def address(self) -> str | None:
        """Bound contract address, or None if the contract is not deployed yet."""

    @abstractmethod
    async def call(
        self, call: EthereumCall, outputs: Sequence[ABIParameter], block: BlockTag | int
    ) -> dict[str, Any]:
        """Execute a read call at `block` and decode its return data by `outputs`."""

    @abstractmethod
    async def send(self, transaction: EthereumTransaction) -> str:
        """Submit a transaction. Returns its hash."""

    @abstractmethod
    async def estimate_gas(self, call: EthereumCall) -> int:
        """Estimate gas needed to execute `call`."""
