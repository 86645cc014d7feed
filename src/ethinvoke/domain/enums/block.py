from enum import Enum


class BlockTag(str, Enum):
    """Named block identifiers accepted by eth_call. Values lowercase to match JSON-RPC."""

    LATEST = "latest"
    EARLIEST = "earliest"
    PENDING = "pending"
    SAFE = "safe"
    FINALIZED = "finalized"
