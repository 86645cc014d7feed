import logging
from typing import Any

from ethinvoke.domain.enums import BlockTag
from ethinvoke.domain.models.function import ConstantFunction
from ethinvoke.invocation.base import BaseInvocation

logger = logging.getLogger(__name__)


class ReadInvocation(BaseInvocation):
    """Invocation of a read-only method. Use `.call()`."""

    METHOD_TYPE = ConstantFunction

    __slots__ = ()

    async def call(self, block: BlockTag | int = BlockTag.LATEST) -> dict[str, Any]:
        """Execute against `block`; returns outputs keyed by name (position if unnamed)."""
        call = self.create_call()
        logger.debug("Calling %s at %s (block=%s)", self._method.signature, call.to, block)
        return await self._handler.call(call, self._method.outputs, block)
