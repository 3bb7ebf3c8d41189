import itertools
import logging
import re
from typing import Iterable, List, Optional

from ..models import User, UserID
from .base import UserStore

logger = logging.getLogger(__name__)

LEADING_INTEGER = re.compile(r'\s*([+-]?\d+)')

SEED_USERS = (
    User(id=1, name='Alice', email='alice@example.com'),
    User(id=2, name='Bob', email='bob@example.com'),
)


def parse_id(id: UserID) -> Optional[int]:
    """Coerce a wire id to the integer key the way ``parseInt`` reads it.

    Leading digits win (``"2abc"`` is 2, ``"1.9"`` is 1), ``None`` when the
    text does not start with a number.
    """
    if isinstance(id, int):
        return id
    match = LEADING_INTEGER.match(str(id))
    return int(match.group(1)) if match else None


class MemoryUserStore(UserStore):
    """Ordered list of users living as long as the process.

    New ids are ``len(users) + 1`` unless ``monotonic_ids`` is set, so after a
    deletion a new user may share its id with a survivor. Lookups return the
    first match in list order.
    """

    def __init__(self, users: Iterable[User] = (), monotonic_ids: bool = False):
        self.users: List[User] = [User(u.id, u.name, u.email) for u in users]
        self.monotonic_ids = monotonic_ids
        start = max((u.id for u in self.users), default=0) + 1
        self._counter = itertools.count(start)

    @classmethod
    def seeded(cls, monotonic_ids: bool = False) -> 'MemoryUserStore':
        return cls(SEED_USERS, monotonic_ids=monotonic_ids)

    def next_id(self) -> int:
        if self.monotonic_ids:
            return next(self._counter)
        return len(self.users) + 1

    def _index(self, id: UserID) -> int:
        key = parse_id(id)
        if key is None:
            return -1
        return next((i for i, user in enumerate(self.users) if user.id == key), -1)

    def _find(self, id: UserID) -> Optional[User]:
        index = self._index(id)
        return self.users[index] if index != -1 else None

    async def open(self) -> None:
        logger.info('Using in-memory user store with %d users', len(self.users))

    async def insert(self, name: str, email: str) -> User:
        user = User(id=self.next_id(), name=name, email=email)
        self.users.append(user)
        return user

    async def get(self, id: UserID) -> Optional[User]:
        return self._find(id)

    async def all(self) -> List[User]:
        return list(self.users)

    async def update(self, id: UserID, **fields) -> Optional[User]:
        user = self._find(id)
        if user is None:
            return None
        if 'name' in fields:
            user.name = fields['name']
        if 'email' in fields:
            user.email = fields['email']
        return user

    async def delete(self, id: UserID) -> bool:
        index = self._index(id)
        if index == -1:
            return False
        del self.users[index]
        return True
