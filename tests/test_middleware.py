import logging

from graphql import graphql

from usergraph.middleware import LoggingMiddleware
from usergraph.schema import make_schema
from usergraph.store import MemoryUserStore


async def test_logs_root_fields_only(caplog):
    store = MemoryUserStore.seeded()
    with caplog.at_level(logging.DEBUG, logger='usergraph.middleware'):
        result = await graphql(
            make_schema(),
            '{ getUsers { id name } getUser(id: 2) { email } }',
            context_value={'store': store},
            middleware=[LoggingMiddleware()],
        )

    assert result.errors is None
    assert result.data['getUser'] == {'email': 'bob@example.com'}
    messages = [r.getMessage() for r in caplog.records if r.name == 'usergraph.middleware']
    assert sorted(m.split(' ', 1)[0] for m in messages) == ['Query.getUser', 'Query.getUsers']


async def test_custom_level(caplog):
    store = MemoryUserStore()
    with caplog.at_level(logging.INFO, logger='usergraph.middleware'):
        await graphql(
            make_schema(),
            'mutation { createUser(name: "Alice", email: "alice@example.com") { id } }',
            context_value={'store': store},
            middleware=[LoggingMiddleware(level=logging.INFO)],
        )

    assert 'Mutation.createUser spent' in caplog.text
