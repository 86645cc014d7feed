"""Read-path call object handed to eth_call / eth_estimateGas."""

from typing import Any

from eth_utils import to_hex
from pydantic import BaseModel, ConfigDict


class EthereumCall(BaseModel):
    """Ephemeral call built per call/estimate; never persisted."""

    model_config = ConfigDict(frozen=True)

    from_address: str | None = None
    to: str
    gas: int | None = None
    gas_price: int | None = None
    value: int | None = None
    data: str  # 0x-prefixed call data

    def to_rpc(self) -> dict[str, Any]:
        """JSON-RPC call object. Unset fields are omitted so the node fills them in."""
        params: dict[str, Any] = {"to": self.to, "data": self.data}
        if self.from_address is not None:
            params["from"] = self.from_address
        if self.gas is not None:
            params["gas"] = to_hex(self.gas)
        if self.gas_price is not None:
            params["gasPrice"] = to_hex(self.gas_price)
        if self.value is not None:
            params["value"] = to_hex(self.value)
        return params
