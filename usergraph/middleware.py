import logging
import time
from inspect import isawaitable
from typing import Any, Callable, Iterable

from graphql import GraphQLResolveInfo

from .resolver import ROOT_TYPES

logger = logging.getLogger(__name__)


class LoggingMiddleware:
    """Log each root field call and how long it took.

    Nested fields (``User.name`` and friends) pass straight through.
    """

    def __init__(self, types: Iterable[str] = ROOT_TYPES, level: int = logging.DEBUG):
        self.types = set(types)
        self.level = level

    def resolve(self, next_: Callable, root: Any, info: GraphQLResolveInfo, **kwargs) -> Any:
        if info.parent_type.name not in self.types:
            return next_(root, info, **kwargs)

        field = f'{info.parent_type.name}.{info.field_name}'
        start = time.monotonic()
        result = next_(root, info, **kwargs)
        if isawaitable(result):
            return self._await(field, start, result)

        self._log(field, start)
        return result

    async def _await(self, field: str, start: float, result: Any) -> Any:
        try:
            return await result
        finally:
            self._log(field, start)

    def _log(self, field: str, start: float) -> None:
        logger.log(self.level, '%s spent %d ms', field, int((time.monotonic() - start) * 1000))
