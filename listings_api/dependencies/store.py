from fastapi import Request

from listings_api.config import Settings
from listings_api.stores.base import PropertyStore
from listings_api.stores.firestore import FirestorePropertyStore
from listings_api.stores.memory import InMemoryPropertyStore

def build_store(settings: Settings) -> PropertyStore:
    backend = settings.STORE_BACKEND.lower()
    if backend == "firestore":
        return FirestorePropertyStore.from_service_account(
            settings.FIREBASE_CREDENTIALS_PATH, settings.collection_path
        )
    if backend == "memory":
        return InMemoryPropertyStore()
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND}")

def get_store(request: Request) -> PropertyStore:
    """Record store created for this application at startup."""
    return request.app.state.store
