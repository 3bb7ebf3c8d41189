from typing import List, Optional

from graphql import GraphQLResolveInfo

from .models import User
from .resolver import ResolverMap
from .store import UserStore

resolvers = ResolverMap()


def get_store(info: GraphQLResolveInfo) -> UserStore:
    return info.context['store']


@resolvers.query
async def get_user(parent, info, id: str) -> Optional[User]:
    return await get_store(info).get(id)


@resolvers.query
async def get_users(parent, info) -> List[User]:
    return await get_store(info).all()


@resolvers.mutate
async def create_user(parent, info, name: str, email: str) -> User:
    return await get_store(info).insert(name, email)


@resolvers.mutate
async def update_user(parent, info, id: str, name: str = None, email: str = None) -> Optional[User]:
    # an explicit null is treated like an omitted argument
    fields = {key: value for key, value in (('name', name), ('email', email)) if value is not None}
    return await get_store(info).update(id, **fields)


@resolvers.mutate
async def delete_user(parent, info, id: str) -> str:
    if await get_store(info).delete(id):
        return f'User with id {id} deleted successfully.'
    return f'User with id {id} not found.'
