import logging
from enum import Enum
from functools import wraps
from inspect import iscoroutinefunction, isfunction
from typing import Callable, Dict, Union

from graphql import GraphQLFieldResolver, GraphQLSchema, assert_object_type

from .exceptions import SchemaBindingError
from .utils import execute_async_function, recursive_to_snake_case, to_camel_case

logger = logging.getLogger(__name__)

ROOT_TYPES = ('Query', 'Mutation')


class Operation(Enum):
    """Every root field the API serves, as ``<type>.<field>``."""

    GET_USER = 'Query.getUser'
    GET_USERS = 'Query.getUsers'
    CREATE_USER = 'Mutation.createUser'
    UPDATE_USER = 'Mutation.updateUser'
    DELETE_USER = 'Mutation.deleteUser'

    @property
    def type_name(self) -> str:
        return self.value.split('.', 1)[0]

    @property
    def field_name(self) -> str:
        return self.value.split('.', 1)[1]

    @classmethod
    def lookup(cls, type_name: str, field_name: str) -> 'Operation':
        try:
            return cls(f'{type_name}.{field_name}')
        except ValueError:
            raise SchemaBindingError(f'{type_name}.{field_name} is not a known operation.') from None


def wrap_resolver(func: GraphQLFieldResolver, print_exc: bool = True, snake_argument: bool = True):
    @wraps(func)
    def sync_resolver(*args, **kwargs):
        if snake_argument:
            kwargs = recursive_to_snake_case(kwargs)
        if not print_exc:
            return func(*args, **kwargs)

        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception('Resolver %s failed', func.__name__)
            raise

    @wraps(func)
    async def async_resolver(*args, **kwargs):
        if snake_argument:
            kwargs = recursive_to_snake_case(kwargs)
        if not print_exc:
            return await execute_async_function(func, *args, **kwargs)

        try:
            return await execute_async_function(func, *args, **kwargs)
        except Exception:
            logger.exception('Resolver %s failed', func.__name__)
            raise

    if iscoroutinefunction(func):
        return async_resolver
    return sync_resolver


class ResolverMap:
    """Explicit pairing of :class:`Operation` members with handler functions.

    >>> resolvers = ResolverMap()
    >>> @resolvers.query
    >>> async def get_user(parent, info, id):
    >>>     ...

    :meth:`bind` installs the handlers on a schema and fails loudly if a root
    field has no handler or a handler has no root field.
    """

    def __init__(self):
        self.handlers: Dict[Operation, GraphQLFieldResolver] = {}

    def field_resolver(
        self,
        type_name: str,
        func_or_field: Union[GraphQLFieldResolver, str] = None,
        print_exc: bool = True,
        snake_argument: bool = True,
    ):
        def wrap(func: GraphQLFieldResolver):
            if isinstance(func_or_field, str):
                name = to_camel_case(func_or_field)
            else:
                name = to_camel_case(func.__name__)

            operation = Operation.lookup(type_name, name)
            if operation in self.handlers:
                raise SchemaBindingError(f'{operation.value} already has a resolver.')

            resolver = wrap_resolver(func, print_exc=print_exc, snake_argument=snake_argument)
            self.handlers[operation] = resolver
            return resolver

        if isfunction(func_or_field):
            return wrap(func_or_field)

        return wrap

    def query(self, func_or_field: Union[Callable, str] = None, **kwargs):
        return self.field_resolver('Query', func_or_field, **kwargs)

    def mutate(self, func_or_field: Union[Callable, str] = None, **kwargs):
        return self.field_resolver('Mutation', func_or_field, **kwargs)

    def check(self, schema: GraphQLSchema) -> None:
        missing = [op.value for op in Operation if op not in self.handlers]
        if missing:
            raise SchemaBindingError(f'No resolver registered for: {", ".join(missing)}.')

        for operation in Operation:
            type_ = schema.get_type(operation.type_name)
            if type_ is None or operation.field_name not in assert_object_type(type_).fields:
                raise SchemaBindingError(f'{operation.value} is not declared in the schema.')

        for type_name in ROOT_TYPES:
            type_ = schema.get_type(type_name)
            if type_ is None:
                continue
            for field_name in assert_object_type(type_).fields:
                # raises for root fields without an operation
                Operation.lookup(type_name, field_name)

    def bind(self, schema: GraphQLSchema) -> GraphQLSchema:
        self.check(schema)
        for operation, resolver in self.handlers.items():
            type_ = assert_object_type(schema.get_type(operation.type_name))
            type_.fields[operation.field_name].resolve = resolver
        return schema
