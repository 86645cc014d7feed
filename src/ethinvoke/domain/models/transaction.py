"""Write-path transaction object and the per-write options that shape it."""

from typing import Any

from eth_utils import to_hex
from pydantic import BaseModel, ConfigDict

from ethinvoke.domain.enums import TransactionType

# address -> storage keys, insertion order preserved
AccessList = dict[str, list[str]]


class TxOptions(BaseModel):
    """Caller overrides for a write. Every field unset means the handler/network decides.

    No `value` field: value is an argument only on shapes that may carry it.
    """

    model_config = ConfigDict(frozen=True)

    nonce: int | None = None
    gas_price: int | None = None
    max_fee_per_gas: int | None = None
    max_priority_fee_per_gas: int | None = None
    gas_limit: int | None = None
    access_list: AccessList = {}
    transaction_type: TransactionType = TransactionType.LEGACY


class EthereumTransaction(BaseModel):
    """Unsigned transaction. `to=None` means contract creation."""

    model_config = ConfigDict(frozen=True)

    nonce: int | None = None
    gas_price: int | None = None
    max_fee_per_gas: int | None = None
    max_priority_fee_per_gas: int | None = None
    gas_limit: int | None = None
    from_address: str | None = None
    to: str | None = None
    value: int | None = None
    data: str
    access_list: AccessList = {}
    transaction_type: TransactionType = TransactionType.LEGACY

    @classmethod
    def from_options(
        cls,
        options: TxOptions,
        *,
        data: str,
        to: str | None,
        from_address: str | None,
        value: int | None,
    ) -> "EthereumTransaction":
        return cls(
            nonce=options.nonce,
            gas_price=options.gas_price,
            max_fee_per_gas=options.max_fee_per_gas,
            max_priority_fee_per_gas=options.max_priority_fee_per_gas,
            gas_limit=options.gas_limit,
            from_address=from_address,
            to=to,
            value=value,
            data=data,
            access_list=options.access_list,
            transaction_type=options.transaction_type,
        )

    def to_rpc(self) -> dict[str, Any]:
        """JSON-RPC transaction object for eth_sendTransaction."""
        params: dict[str, Any] = {"data": self.data}
        if self.from_address is not None:
            params["from"] = self.from_address
        if self.to is not None:
            params["to"] = self.to

        quantities = {
            "nonce": self.nonce,
            "gasPrice": self.gas_price,
            "maxFeePerGas": self.max_fee_per_gas,
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "gas": self.gas_limit,
            "value": self.value,
        }
        for key, quantity in quantities.items():
            if quantity is not None:
                params[key] = to_hex(quantity)

        if self.transaction_type != TransactionType.LEGACY:
            params["type"] = to_hex(self.transaction_type.type_byte)
            params["accessList"] = [
                {"address": address, "storageKeys": list(keys)}
                for address, keys in self.access_list.items()
            ]
        return params
