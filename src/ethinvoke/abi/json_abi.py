"""Load Solidity JSON ABI entries into function descriptors."""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from ethinvoke.domain.enums import StateMutability
from ethinvoke.domain.models.function import (
    ConstantFunction,
    ConstructorFunction,
    NonPayableFunction,
    PayableFunction,
    SolidityFunction,
)
from ethinvoke.domain.models.parameter import ABIParameter
from ethinvoke.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

# Entry types that carry no callable method
SKIPPED_ENTRY_TYPES = {"event", "error", "fallback", "receive"}


class ContractABI(BaseModel):
    """Descriptors for one contract. `functions` holds both plain names and full signatures."""

    model_config = ConfigDict(frozen=True)

    functions: dict[str, SolidityFunction] = {}
    constructor: ConstructorFunction = ConstructorFunction()

    def get(self, name_or_signature: str) -> SolidityFunction | None:
        return self.functions.get(name_or_signature)


def _parse_param(raw: dict[str, Any]) -> ABIParameter:
    if "type" not in raw:
        raise InvalidConfiguration(f"ABI parameter without type: {raw!r}")
    components = raw.get("components")
    return ABIParameter(
        name=raw.get("name") or "",
        type=raw["type"],
        components=tuple(_parse_param(c) for c in components) if components is not None else None,
    )


def _parse_params(raw: list[dict[str, Any]] | None) -> tuple[ABIParameter, ...]:
    return tuple(_parse_param(p) for p in raw or [])


def _mutability(entry: dict[str, Any]) -> StateMutability:
    """Modern `stateMutability`, falling back to the pre-0.4.16 `constant`/`payable` flags."""
    raw = entry.get("stateMutability")
    if raw is not None:
        try:
            return StateMutability(raw)
        except ValueError as exc:
            raise InvalidConfiguration(f"Unknown stateMutability {raw!r} for {entry.get('name')!r}") from exc
    if entry.get("constant"):
        return StateMutability.VIEW
    if entry.get("payable"):
        return StateMutability.PAYABLE
    return StateMutability.NONPAYABLE


def function_from_abi(entry: dict[str, Any]) -> SolidityFunction:
    """Build the descriptor variant matching a `"type": "function"` ABI entry."""
    name = entry.get("name")
    if not name:
        raise InvalidConfiguration(f"ABI function entry without name: {entry!r}")

    inputs = _parse_params(entry.get("inputs"))
    outputs = _parse_params(entry.get("outputs"))
    mutability = _mutability(entry)

    if mutability.is_constant:
        return ConstantFunction(
            name=name, inputs=inputs, outputs=outputs, pure=mutability == StateMutability.PURE
        )
    if mutability == StateMutability.PAYABLE:
        return PayableFunction(name=name, inputs=inputs, outputs=outputs)
    return NonPayableFunction(name=name, inputs=inputs, outputs=outputs)


def constructor_from_abi(entry: dict[str, Any]) -> ConstructorFunction:
    return ConstructorFunction(
        inputs=_parse_params(entry.get("inputs")),
        payable=_mutability(entry) == StateMutability.PAYABLE,
    )


def load_abi(abi: list[dict[str, Any]] | dict[str, Any] | str) -> ContractABI:
    """Parse a full contract ABI (list of entries, compiler artifact, or JSON text).

    Overloaded names resolve to the first entry by plain name; every overload
    stays reachable by its signature.
    """
    if isinstance(abi, str):
        try:
            abi = json.loads(abi)
        except json.JSONDecodeError as exc:
            raise InvalidConfiguration(f"ABI is not valid JSON: {exc}") from exc
    if isinstance(abi, dict) and "abi" in abi:
        # Compiler artifact ({"abi": [...], "bytecode": ...})
        abi = abi["abi"]
    if not isinstance(abi, list):
        raise InvalidConfiguration("ABI payload must be an array")

    functions: dict[str, SolidityFunction] = {}
    constructor = ConstructorFunction()
    for entry in abi:
        entry_type = entry.get("type", "function")
        if entry_type in SKIPPED_ENTRY_TYPES:
            continue
        if entry_type == "constructor":
            constructor = constructor_from_abi(entry)
        elif entry_type == "function":
            function = function_from_abi(entry)
            functions.setdefault(function.name, function)
            functions[function.signature] = function
        else:
            raise InvalidConfiguration(f"Unknown ABI entry type: {entry_type!r}")

    logger.debug("Loaded ABI with %d function(s)", len({f.signature for f in functions.values()}))
    return ContractABI(functions=functions, constructor=constructor)
