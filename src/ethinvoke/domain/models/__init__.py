from ethinvoke.domain.models.call import EthereumCall
from ethinvoke.domain.models.function import (
    ConstantFunction,
    ConstructorFunction,
    NonPayableFunction,
    PayableFunction,
    SolidityFunction,
)
from ethinvoke.domain.models.parameter import ABIParameter, WrappedParameter, wrap_parameters
from ethinvoke.domain.models.transaction import AccessList, EthereumTransaction, TxOptions

__all__ = [
    "ABIParameter",
    "AccessList",
    "ConstantFunction",
    "ConstructorFunction",
    "EthereumCall",
    "EthereumTransaction",
    "NonPayableFunction",
    "PayableFunction",
    "SolidityFunction",
    "TxOptions",
    "WrappedParameter",
    "wrap_parameters",
]
