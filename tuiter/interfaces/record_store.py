"""Record store interface (DIP - access layers depend on this, not on a backend)"""
from abc import ABC, abstractmethod
from typing import Optional, List, Dict
import uuid


def generate_id(prefix: str) -> str:
    """Generate an opaque record id such as ``user_3f9a1c0b7d2e``."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class IRecordStore(ABC):
    """
    Document persistence for one entity type.

    Documents are plain dicts keyed by ``id_field``. Absence is reported as
    ``None``/``False``; backend I/O errors propagate to the caller.
    """

    id_field: str
    id_prefix: str

    def ensure_id(self, item: Dict) -> Dict:
        """Return a copy of ``item`` carrying an id, generating one if missing."""
        item = dict(item)
        if not item.get(self.id_field):
            item[self.id_field] = generate_id(self.id_prefix)
        return item

    @abstractmethod
    async def create(self, item: Dict) -> Dict:
        """
        Store a new document, assigning an id if missing.

        Raises:
            ConflictError: If a document with the same id already exists
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Dict]:
        """Get every document"""
        pass

    @abstractmethod
    async def find_by_id(self, record_id: str) -> Optional[Dict]:
        """Get document by id"""
        pass

    @abstractmethod
    async def find(self, filters: Dict) -> List[Dict]:
        """Get documents whose fields equal every filter value"""
        pass

    async def find_one(self, filters: Dict) -> Optional[Dict]:
        """Get the first document matching ``filters``"""
        items = await self.find(filters)
        return items[0] if items else None

    @abstractmethod
    async def update_by_id(self, record_id: str, patch: Dict) -> bool:
        """Shallow-merge ``patch`` into a document. False if not found."""
        pass

    @abstractmethod
    async def delete_by_id(self, record_id: str) -> bool:
        """Delete document. False if not found."""
        pass
