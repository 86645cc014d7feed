"""ABI codec — turns wrapped parameters into call data and return data back into values.

Thin layer over eth-abi. Every eth-abi failure surfaces as EncodingError.
"""

from collections.abc import Sequence
from typing import Any

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, ParseError
from eth_abi.exceptions import EncodingError as ABIEncodingError
from eth_utils import decode_hex, encode_hex, function_signature_to_4byte_selector, is_hex

from ethinvoke.domain.models.function import SolidityFunction
from ethinvoke.domain.models.parameter import ABIParameter, WrappedParameter
from ethinvoke.exceptions import EncodingError

_ENCODE_ERRORS = (ABIEncodingError, ParseError, ValueError, TypeError, OverflowError)
_DECODE_ERRORS = (DecodingError, ParseError, ValueError, TypeError)


def _encode_args(parameters: Sequence[WrappedParameter]) -> bytes:
    if not parameters:
        return b""
    types = [p.type for p in parameters]
    values = [p.value for p in parameters]
    try:
        return encode(types, values)
    except _ENCODE_ERRORS as exc:
        raise EncodingError(f"Cannot encode parameters {types}: {exc}") from exc


def encode_parameters(parameters: Sequence[WrappedParameter]) -> str:
    """Encode parameters without a selector. Returns "0x" when there are none."""
    return encode_hex(_encode_args(parameters))


def encode_function_call(function: SolidityFunction, parameters: Sequence[WrappedParameter]) -> str:
    """Selector of `function` followed by the encoded parameters."""
    try:
        selector = function_signature_to_4byte_selector(function.signature)
    except _ENCODE_ERRORS as exc:
        raise EncodingError(f"Cannot derive selector for {function.name}: {exc}") from exc
    return encode_hex(selector + _encode_args(parameters))


def decode_outputs(outputs: Sequence[ABIParameter], data: str | bytes) -> dict[str, Any]:
    """Decode return data into a name-keyed mapping.

    Unnamed outputs are keyed by their position ("0", "1", ...).
    """
    if not outputs:
        return {}

    if isinstance(data, str):
        if not is_hex(data):
            raise EncodingError(f"Return data is not hex: {data!r}")
        try:
            raw = decode_hex(data)
        except ValueError as exc:
            raise EncodingError(f"Malformed return data {data!r}: {exc}") from exc
    else:
        raw = bytes(data)
    if not raw:
        raise EncodingError("Empty return data for a method with outputs (reverted or no code at address?)")

    types = [o.canonical_type for o in outputs]
    try:
        values = decode(types, raw)
    except _DECODE_ERRORS as exc:
        raise EncodingError(f"Cannot decode return data as {types}: {exc}") from exc

    return {(o.name or str(i)): v for i, (o, v) in enumerate(zip(outputs, values))}
