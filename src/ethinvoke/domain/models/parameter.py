"""ABI parameter slots and the values that fill them."""

from collections.abc import Sequence
from typing import Any

from eth_abi import is_encodable
from eth_abi.exceptions import ParseError
from pydantic import BaseModel, ConfigDict

from ethinvoke.exceptions import EncodingError, InvalidInvocation


class ABIParameter(BaseModel):
    """One declared input or output of a contract method, as found in ABI JSON."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str  # e.g. "uint256", "address[]", "tuple[2]"
    components: tuple["ABIParameter", ...] | None = None  # only for tuple types

    @property
    def canonical_type(self) -> str:
        """Type string with tuples expanded, as used in signatures and by eth-abi."""
        if not self.type.startswith("tuple"):
            return self.type
        suffix = self.type[len("tuple"):]
        inner = ",".join(c.canonical_type for c in self.components or ())
        return f"({inner}){suffix}"


class WrappedParameter(BaseModel):
    """A caller-supplied value paired with the ABI type of the slot it fills."""

    model_config = ConfigDict(frozen=True)

    value: Any
    type: str


def _accepts(abi_type: str, value: Any) -> bool:
    try:
        return is_encodable(abi_type, value)
    except (ParseError, ValueError):
        # Unparseable or unregistered type string
        return False


def wrap_parameters(values: Sequence[Any], inputs: Sequence[ABIParameter]) -> tuple[WrappedParameter, ...]:
    """Pair values with declared inputs by position.

    Raises InvalidInvocation on a count mismatch and EncodingError when a
    declared type cannot encode the value placed in it.
    """
    if len(values) != len(inputs):
        raise InvalidInvocation(f"Expected {len(inputs)} argument(s), got {len(values)}")

    wrapped = []
    for position, (value, param) in enumerate(zip(values, inputs)):
        abi_type = param.canonical_type
        if not _accepts(abi_type, value):
            label = param.name or f"#{position}"
            raise EncodingError(f"Argument {label} ({value!r}) is not encodable as {abi_type}")
        wrapped.append(WrappedParameter(value=value, type=abi_type))
    return tuple(wrapped)
