import logging
from typing import List, Mapping, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from ..models import User, UserID
from .base import UserStore

logger = logging.getLogger(__name__)


def to_user(document: Mapping) -> User:
    return User(id=str(document['_id']), name=document['name'], email=document['email'])


class MongoUserStore(UserStore):
    """Users kept as ``{_id, name, email}`` documents of one collection.

    The document ``_id`` doubles as the GraphQL id. Malformed ids raise
    ``bson.errors.InvalidId`` and driver failures are left to propagate.
    """

    def __init__(self, collection: AsyncIOMotorCollection, client: AsyncIOMotorClient = None):
        self.collection = collection
        self.client = client

    @classmethod
    def from_url(cls, url: str, database: str = 'usergraph', collection: str = 'users') -> 'MongoUserStore':
        client = AsyncIOMotorClient(url)
        return cls(client[database][collection], client=client)

    async def open(self) -> None:
        logger.info('Using mongo user store %s', self.collection.name)

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info('Closed mongo connection')

    async def insert(self, name: str, email: str) -> User:
        result = await self.collection.insert_one({'name': name, 'email': email})
        return User(id=str(result.inserted_id), name=name, email=email)

    async def get(self, id: UserID) -> Optional[User]:
        document = await self.collection.find_one({'_id': ObjectId(id)})
        return to_user(document) if document else None

    async def all(self) -> List[User]:
        return [to_user(document) async for document in self.collection.find()]

    async def update(self, id: UserID, **fields) -> Optional[User]:
        key = ObjectId(id)
        document = await self.collection.find_one({'_id': key})
        if document is None:
            return None
        changes = {k: v for k, v in fields.items() if k in ('name', 'email')}
        if changes:
            await self.collection.update_one({'_id': key}, {'$set': changes})
            document.update(changes)
        return to_user(document)

    async def delete(self, id: UserID) -> bool:
        result = await self.collection.delete_one({'_id': ObjectId(id)})
        return result.deleted_count > 0
