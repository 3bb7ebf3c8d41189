import pytest
from mongomock_motor import AsyncMongoMockClient
from starlette.testclient import TestClient

from usergraph.applications import GraphQL
from usergraph.store import MemoryUserStore, MongoUserStore


def construct_request(query, variables=None, operation=None):
    return {'operationName': operation, 'query': query, 'variables': variables or {}}


@pytest.fixture
def memory_store():
    return MemoryUserStore()


@pytest.fixture
def mongo_collection():
    return AsyncMongoMockClient()['usergraph']['users']


@pytest.fixture
def mongo_store(mongo_collection):
    return MongoUserStore(mongo_collection)


@pytest.fixture
def client(memory_store):
    with TestClient(GraphQL(memory_store)) as client:
        yield client


@pytest.fixture
def mongo_client(mongo_store):
    with TestClient(GraphQL(mongo_store)) as client:
        yield client


@pytest.fixture
def execute(client):
    def _execute(query, variables=None, operation=None):
        response = client.post('/graphql', json=construct_request(query, variables, operation))
        return response.json()

    return _execute
