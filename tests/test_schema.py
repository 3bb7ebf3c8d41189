from graphql import GraphQLNonNull, get_named_type, graphql, print_schema

from usergraph.schema import TYPE_DEFS, join_type_defs, make_schema
from usergraph.store import MemoryUserStore


def test_make_schema():
    schema = make_schema()
    assert set(schema.query_type.fields.keys()) == {'getUser', 'getUsers'}
    assert set(schema.mutation_type.fields.keys()) == {'createUser', 'updateUser', 'deleteUser'}

    user_type = schema.get_type('User')
    assert set(user_type.fields.keys()) == {'id', 'name', 'email'}
    assert all(isinstance(f.type, GraphQLNonNull) for f in user_type.fields.values())


def test_argument_contract():
    schema = make_schema()
    update_user = schema.mutation_type.fields['updateUser']
    assert isinstance(update_user.args['id'].type, GraphQLNonNull)
    assert not isinstance(update_user.args['name'].type, GraphQLNonNull)
    assert not isinstance(update_user.args['email'].type, GraphQLNonNull)
    assert get_named_type(schema.mutation_type.fields['deleteUser'].type).name == 'String'


def test_print_schema():
    assert 'getUser(id: ID!): User' in print_schema(make_schema())


def test_join_type_defs():
    assert join_type_defs(['type A { a: Int }\n', '\n  type B { b: Int }']) == 'type A { a: Int }\n\ntype B { b: Int }'


async def test_execute_with_store_in_context():
    store = MemoryUserStore.seeded()
    result = await graphql(
        make_schema(TYPE_DEFS),
        '{ getUsers { id name email } }',
        context_value={'store': store},
    )
    assert result.errors is None
    assert result.data == {
        'getUsers': [
            {'id': '1', 'name': 'Alice', 'email': 'alice@example.com'},
            {'id': '2', 'name': 'Bob', 'email': 'bob@example.com'},
        ]
    }
