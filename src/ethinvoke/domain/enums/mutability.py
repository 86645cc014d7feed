from enum import Enum


class StateMutability(str, Enum):
    """Solidity state mutability. Values match the ABI JSON `stateMutability` field."""

    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    @property
    def is_constant(self) -> bool:
        return self in (StateMutability.PURE, StateMutability.VIEW)
