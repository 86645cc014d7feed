from ethinvoke.domain.enums.block import BlockTag
from ethinvoke.domain.enums.mutability import StateMutability
from ethinvoke.domain.enums.transaction_type import TransactionType

__all__ = [
    "BlockTag",
    "StateMutability",
    "TransactionType",
]
