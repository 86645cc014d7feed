from ethinvoke.invocation.base import BaseInvocation
from ethinvoke.invocation.constructor import ConstructorInvocation
from ethinvoke.invocation.non_payable import NonPayableInvocation
from ethinvoke.invocation.payable import PayableInvocation
from ethinvoke.invocation.read import ReadInvocation

__all__ = [
    "BaseInvocation",
    "ConstructorInvocation",
    "NonPayableInvocation",
    "PayableInvocation",
    "ReadInvocation",
]
