import abc
from typing import List, Optional

from ..models import User, UserID


class UserStore(abc.ABC):
    """Backing store of User records.

    Every operation is a coroutine so the in-memory and the database variants
    can be swapped behind the same resolvers. ``id`` arguments arrive exactly
    as the ``ID`` scalar delivers them (a string); each store converts them to
    its own key type.
    """

    async def open(self) -> None:
        """Acquire resources. Called once at application startup."""

    async def close(self) -> None:
        """Release resources. Called once at application shutdown."""

    @abc.abstractmethod
    async def insert(self, name: str, email: str) -> User:
        ...

    @abc.abstractmethod
    async def get(self, id: UserID) -> Optional[User]:
        ...

    @abc.abstractmethod
    async def all(self) -> List[User]:
        ...

    @abc.abstractmethod
    async def update(self, id: UserID, **fields) -> Optional[User]:
        """Merge ``fields`` into the record, keys absent from ``fields`` stay as they are."""

    @abc.abstractmethod
    async def delete(self, id: UserID) -> bool:
        ...
