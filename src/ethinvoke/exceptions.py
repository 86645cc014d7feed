"""Error taxonomy for invocation building and dispatch."""


class InvocationError(Exception):
    """Base for failures raised while shaping a call or transaction."""


class ContractNotDeployed(InvocationError):
    """Handler has no bound contract address where one is required."""


class InvalidConfiguration(InvocationError):
    """Malformed invocation setup, e.g. descriptor/invocation mismatch or bad bytecode."""


class InvalidInvocation(InvocationError):
    """Structurally disallowed combination of arguments."""


class EncodingError(InvocationError):
    """The ABI codec could not produce or read data for the given parameters."""


class ExternalServiceError(Exception):
    """Transport-level failure talking to the node. Retriable."""


class RPCError(ExternalServiceError):
    """The node answered with a JSON-RPC error object (revert, bad params)."""

    def __init__(self, method: str, code: int | None, message: str, data: object = None) -> None:
        super().__init__(f"RPC error ({method}): {message}")
        self.method = method
        self.code = code
        self.message = message
        self.data = data
