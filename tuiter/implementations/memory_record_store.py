"""In-memory record store (process lifetime only, no persistence)."""
import copy
import logging
from typing import Optional, List, Dict

from tuiter.errors import ConflictError
from tuiter.interfaces.record_store import IRecordStore
from tuiter.utils.patch import apply_patch

logger = logging.getLogger(__name__)


class InMemoryRecordStore(IRecordStore):
    """
    Ordered list of documents for one entity type.

    Lookups are linear scans. Documents are copied on the way in and out so
    callers never hold a live reference to stored state. Not safe against
    concurrent mutation of the same id (last write wins).
    """

    def __init__(self, id_field: str, id_prefix: str, initial: Optional[List[Dict]] = None):
        self.id_field = id_field
        self.id_prefix = id_prefix
        self._items: List[Dict] = []
        for item in initial or []:
            self._items.append(self.ensure_id(item))

    def _index_of(self, record_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.get(self.id_field) == record_id:
                return i
        return -1

    async def create(self, item: Dict) -> Dict:
        item = self.ensure_id(item)
        if self._index_of(item[self.id_field]) >= 0:
            raise ConflictError(f"Duplicate {self.id_field}: {item[self.id_field]}")
        self._items.append(copy.deepcopy(item))
        logger.debug(f"Created {self.id_field}={item[self.id_field]}")
        return item

    async def find_all(self) -> List[Dict]:
        return copy.deepcopy(self._items)

    async def find_by_id(self, record_id: str) -> Optional[Dict]:
        i = self._index_of(record_id)
        if i < 0:
            return None
        return copy.deepcopy(self._items[i])

    async def find(self, filters: Dict) -> List[Dict]:
        return [
            copy.deepcopy(item) for item in self._items
            if all(item.get(k) == v for k, v in filters.items())
        ]

    async def update_by_id(self, record_id: str, patch: Dict) -> bool:
        i = self._index_of(record_id)
        if i < 0:
            return False
        patch = {k: v for k, v in patch.items() if k != self.id_field}
        self._items[i] = apply_patch(self._items[i], copy.deepcopy(patch))
        return True

    async def delete_by_id(self, record_id: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.get(self.id_field) != record_id]
        return len(self._items) < before
