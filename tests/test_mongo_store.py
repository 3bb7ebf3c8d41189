import pytest
from bson import ObjectId
from bson.errors import InvalidId

from usergraph.store.mongo import to_user


def test_to_user():
    _id = ObjectId()
    user = to_user({'_id': _id, 'name': 'Alice', 'email': 'alice@example.com'})
    assert user.id == str(_id)
    assert user.name == 'Alice'


async def test_insert_uses_store_assigned_id(mongo_store, mongo_collection):
    user = await mongo_store.insert('Alice', 'alice@example.com')

    assert ObjectId.is_valid(user.id)
    document = await mongo_collection.find_one({'_id': ObjectId(user.id)})
    assert document['name'] == 'Alice'
    assert document['email'] == 'alice@example.com'


async def test_get_and_all(mongo_store):
    alice = await mongo_store.insert('Alice', 'alice@example.com')
    bob = await mongo_store.insert('Bob', 'bob@example.com')

    assert await mongo_store.get(alice.id) == alice
    assert await mongo_store.get(str(ObjectId())) is None
    assert await mongo_store.all() == [alice, bob]


async def test_update_is_merge_patch(mongo_store, mongo_collection):
    alice = await mongo_store.insert('Alice', 'alice@example.com')

    user = await mongo_store.update(alice.id, email='alicia@example.com')
    assert user.name == 'Alice'
    assert user.email == 'alicia@example.com'

    document = await mongo_collection.find_one({'_id': ObjectId(alice.id)})
    assert document['email'] == 'alicia@example.com'

    assert await mongo_store.update(str(ObjectId()), name='Nobody') is None


async def test_delete(mongo_store):
    alice = await mongo_store.insert('Alice', 'alice@example.com')

    assert await mongo_store.delete(alice.id) is True
    assert await mongo_store.get(alice.id) is None
    assert await mongo_store.delete(alice.id) is False


async def test_invalid_id_raises(mongo_store):
    with pytest.raises(InvalidId):
        await mongo_store.get('1')
    with pytest.raises(InvalidId):
        await mongo_store.delete('not-an-object-id')
