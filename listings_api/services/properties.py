import re
from typing import Any, List

from listings_api.stores.base import Document, PropertyStore

REQUIRED_FIELDS = ("name", "price", "location")
PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400/cccccc/333?text={text}"

def is_blank(value: Any) -> bool:
    """Falsiness as JSON clients understand it: null, false, 0, NaN and "".
    Empty arrays and objects count as present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False

def missing_required_fields(data: Document) -> List[str]:
    return [field for field in REQUIRED_FIELDS if is_blank(data.get(field))]

def placeholder_image(name: Any) -> str:
    return PLACEHOLDER_IMAGE_URL.format(text=re.sub(r"\s", "+", str(name)))

def build_document(data: Document) -> Document:
    """Document to persist for a new listing.

    Extra fields pass through untouched; ``id`` is dropped since only the
    store assigns it, and ``image`` falls back to a placeholder.
    """
    document = {key: value for key, value in data.items() if key != "id"}
    if is_blank(document.get("image")):
        document["image"] = placeholder_image(document["name"])
    return document

async def list_properties(store: PropertyStore) -> List[Document]:
    return await store.list_all()

async def create_property(store: PropertyStore, data: Document) -> Document:
    document = build_document(data)
    property_id = await store.add(document)
    return {**document, "id": property_id}

async def delete_property(store: PropertyStore, property_id: str) -> bool:
    """Remove a listing; returns False when no listing has ``property_id``."""
    if await store.get(property_id) is None:
        return False
    await store.delete(property_id)
    return True
