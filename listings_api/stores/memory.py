import uuid
from copy import deepcopy
from typing import List

from listings_api.stores.base import Document, PropertyStore

class InMemoryPropertyStore(PropertyStore):
    """Process-local store, used by the tests and for runs without Firebase credentials."""

    def __init__(self):
        self._documents: dict[str, Document] = {}

    async def list_all(self) -> List[Document]:
        return [{**deepcopy(data), "id": doc_id} for doc_id, data in self._documents.items()]

    async def add(self, data: Document) -> str:
        doc_id = uuid.uuid4().hex
        self._documents[doc_id] = deepcopy(data)
        return doc_id

    async def get(self, property_id: str) -> Document | None:
        data = self._documents.get(property_id)
        if data is None:
            return None
        return {**deepcopy(data), "id": property_id}

    async def delete(self, property_id: str) -> None:
        self._documents.pop(property_id, None)

    def __len__(self) -> int:
        return len(self._documents)
