from abc import ABC, abstractmethod
from typing import Any, Dict, List

Document = Dict[str, Any]

class PropertyStore(ABC):
    """Record store holding the property collection.

    Ids are assigned by the store on ``add``; documents returned by
    ``list_all`` and ``get`` carry them under the ``id`` key.
    """

    @abstractmethod
    async def list_all(self) -> List[Document]:
        ...

    @abstractmethod
    async def add(self, data: Document) -> str:
        """Insert ``data`` and return the newly assigned id."""

    @abstractmethod
    async def get(self, property_id: str) -> Document | None:
        ...

    @abstractmethod
    async def delete(self, property_id: str) -> None:
        ...
