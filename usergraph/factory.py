import logging

from .applications import GraphQL
from .config import Settings
from .store import MemoryUserStore, MongoUserStore, UserStore

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> UserStore:
    if settings.backend == 'mongo':
        return MongoUserStore.from_url(
            settings.mongo_url, database=settings.mongo_database, collection=settings.mongo_collection
        )
    if settings.seed:
        return MemoryUserStore.seeded(monotonic_ids=settings.monotonic_ids)
    return MemoryUserStore(monotonic_ids=settings.monotonic_ids)


def create_app(settings: Settings = None) -> GraphQL:
    settings = settings or Settings.from_env()
    logger.info('Creating %s backed application', settings.backend)
    return GraphQL(create_store(settings), playground=settings.playground, debug=settings.debug)
