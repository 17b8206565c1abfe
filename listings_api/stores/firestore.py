from typing import List

import firebase_admin
from firebase_admin import credentials, firestore_async
from structlog import get_logger

from listings_api.stores.base import Document, PropertyStore

logger = get_logger()

class FirestorePropertyStore(PropertyStore):
    def __init__(self, collection):
        self._collection = collection

    @classmethod
    def from_service_account(cls, key_path: str, collection_path: str) -> "FirestorePropertyStore":
        """Initialise the Firebase Admin app from a service account key file
        and bind the store to ``collection_path``.
        """
        try:
            fb_app = firebase_admin.get_app()
        except ValueError:
            # No default app yet
            fb_app = firebase_admin.initialize_app(credentials.Certificate(key_path))
        client = firestore_async.client(app=fb_app)
        logger.info("Connected to Firestore", collection=collection_path)
        return cls(client.collection(collection_path))

    async def list_all(self) -> List[Document]:
        return [{**(snapshot.to_dict() or {}), "id": snapshot.id} async for snapshot in self._collection.stream()]

    async def add(self, data: Document) -> str:
        _, doc_ref = await self._collection.add(data)
        return doc_ref.id

    async def get(self, property_id: str) -> Document | None:
        snapshot = await self._collection.document(property_id).get()
        if not snapshot.exists:
            return None
        return {**(snapshot.to_dict() or {}), "id": snapshot.id}

    async def delete(self, property_id: str) -> None:
        await self._collection.document(property_id).delete()
