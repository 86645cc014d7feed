from ethinvoke.domain.models.function import NonPayableFunction
from ethinvoke.domain.models.transaction import EthereumTransaction, TxOptions
from ethinvoke.invocation.base import BaseInvocation


class NonPayableInvocation(BaseInvocation):
    """Invocation of a state-changing method that cannot receive value. Use `.send()`.

    Neither builder takes a value; the transaction is always built with `value=None`.
    """

    METHOD_TYPE = NonPayableFunction

    __slots__ = ()

    def create_transaction(
        self,
        from_address: str | None = None,
        options: TxOptions | None = None,
    ) -> EthereumTransaction:
        return self._build_transaction(from_address, options, None)

    async def send(self, from_address: str, options: TxOptions | None = None) -> str:
        """Build and submit the transaction. Returns the transaction hash."""
        return await self._dispatch(self.create_transaction(from_address, options))
