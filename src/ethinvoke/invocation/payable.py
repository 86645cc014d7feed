from ethinvoke.domain.models.function import PayableFunction
from ethinvoke.domain.models.transaction import EthereumTransaction, TxOptions
from ethinvoke.invocation.base import BaseInvocation


class PayableInvocation(BaseInvocation):
    """Invocation of a state-changing method that can receive native value. Use `.send()`."""

    METHOD_TYPE = PayableFunction

    __slots__ = ()

    def create_transaction(
        self,
        from_address: str | None = None,
        options: TxOptions | None = None,
        value: int | None = None,
    ) -> EthereumTransaction:
        return self._build_transaction(from_address, options, value)

    async def send(
        self,
        from_address: str,
        options: TxOptions | None = None,
        value: int | None = None,
    ) -> str:
        """Build and submit the transaction. Returns the transaction hash."""
        return await self._dispatch(self.create_transaction(from_address, options, value))
