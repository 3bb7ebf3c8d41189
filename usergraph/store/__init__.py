from .base import UserStore  # noqa
from .memory import MemoryUserStore  # noqa
from .mongo import MongoUserStore  # noqa
