from unittest.mock import AsyncMock, MagicMock

import pytest
from listings_api.stores.firestore import FirestorePropertyStore
from listings_api.stores.memory import InMemoryPropertyStore

@pytest.mark.asyncio
async def test_memory_store_assigns_unique_ids():
    store = InMemoryPropertyStore()
    first = await store.add({"name": "A"})
    second = await store.add({"name": "A"})
    assert first and second and first != second
    assert await store.get(first) == {"name": "A", "id": first}
    assert sorted(item["id"] for item in await store.list_all()) == sorted([first, second])

@pytest.mark.asyncio
async def test_memory_store_copies_documents():
    store = InMemoryPropertyStore()
    data = {"name": "A", "tags": ["x"]}
    property_id = await store.add(data)
    data["tags"].append("y")
    listed = await store.list_all()
    listed[0]["tags"].append("z")
    assert (await store.get(property_id))["tags"] == ["x"]

def _snapshot(doc_id, data, exists=True):
    snapshot = MagicMock()
    snapshot.id = doc_id
    snapshot.exists = exists
    snapshot.to_dict.return_value = data if exists else None
    return snapshot

@pytest.mark.asyncio
async def test_firestore_store_list_all():
    async def stream():
        yield _snapshot("a1", {"name": "A", "id": "stale"})
        yield _snapshot("b2", {"name": "B"})

    collection = MagicMock()
    collection.stream = stream
    store = FirestorePropertyStore(collection)
    assert await store.list_all() == [{"name": "A", "id": "a1"}, {"name": "B", "id": "b2"}]

@pytest.mark.asyncio
async def test_firestore_store_add_returns_document_id():
    doc_ref = MagicMock()
    doc_ref.id = "new-id"
    collection = MagicMock()
    collection.add = AsyncMock(return_value=(object(), doc_ref))
    store = FirestorePropertyStore(collection)
    assert await store.add({"name": "A"}) == "new-id"
    collection.add.assert_awaited_once_with({"name": "A"})

@pytest.mark.asyncio
async def test_firestore_store_get_and_delete():
    doc_ref = MagicMock()
    doc_ref.get = AsyncMock(return_value=_snapshot("a1", {"name": "A"}))
    doc_ref.delete = AsyncMock()
    collection = MagicMock()
    collection.document.return_value = doc_ref
    store = FirestorePropertyStore(collection)

    assert await store.get("a1") == {"name": "A", "id": "a1"}
    await store.delete("a1")
    collection.document.assert_called_with("a1")
    doc_ref.delete.assert_awaited_once()

@pytest.mark.asyncio
async def test_firestore_store_get_missing():
    doc_ref = MagicMock()
    doc_ref.get = AsyncMock(return_value=_snapshot("gone", None, exists=False))
    collection = MagicMock()
    collection.document.return_value = doc_ref
    assert await FirestorePropertyStore(collection).get("gone") is None
