from typing import List, Union

from graphql import GraphQLSchema, build_schema

from .operations import resolvers as default_resolvers
from .resolver import ResolverMap
from .utils import gql

TYPE_DEFS = gql(
    """
type User {
  id: ID!
  name: String!
  email: String!
}

type Query {
  getUser(id: ID!): User
  getUsers: [User]
}

type Mutation {
  createUser(name: String!, email: String!): User
  updateUser(id: ID!, name: String, email: String): User
  deleteUser(id: ID!): String
}
"""
)


def join_type_defs(type_defs: List[str]) -> str:
    return "\n\n".join(t.strip() for t in type_defs)


def make_schema(
    type_defs: Union[str, List[str]] = TYPE_DEFS,
    resolvers: ResolverMap = None,
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    no_location: bool = False,
) -> GraphQLSchema:
    """Build the executable schema and bind every root field to its handler.

    Raises :class:`~usergraph.exceptions.SchemaBindingError` when the type
    definitions and the handlers disagree.
    """
    if isinstance(type_defs, list):
        type_defs = join_type_defs(type_defs)

    resolvers = resolvers or default_resolvers
    schema = build_schema(
        type_defs, assume_valid=assume_valid, assume_valid_sdl=assume_valid_sdl, no_location=no_location
    )
    return resolvers.bind(schema)
