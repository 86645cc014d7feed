from enum import Enum


class TransactionType(str, Enum):
    """Typed transaction envelopes (EIP-2718)."""

    LEGACY = "legacy"
    EIP2930 = "eip2930"  # access list
    EIP1559 = "eip1559"  # fee market

    @property
    def type_byte(self) -> int:
        return _TYPE_BYTES[self]


_TYPE_BYTES: dict[TransactionType, int] = {
    TransactionType.LEGACY: 0,
    TransactionType.EIP2930: 1,
    TransactionType.EIP1559: 2,
}
