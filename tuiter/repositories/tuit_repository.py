"""Tuit access layer over a record store"""
import logging
from typing import Optional, List, Dict

from tuiter.config import settings
from tuiter.interfaces.record_store import IRecordStore
from tuiter.interfaces.tuit_repository import ITuitRepository
from tuiter.domain.tuit import Tuit, COUNTER_FIELDS, FLAG_FIELDS
from tuiter.utils.patch import validate_patch

logger = logging.getLogger(__name__)


class TuitRepository(ITuitRepository):
    """Tuit lookups and mutations; stamps engagement defaults on create."""

    def __init__(self, store: IRecordStore):
        self.store = store

    @staticmethod
    def _creation_defaults() -> Dict:
        """Fields every new tuit gets, whatever the caller sent."""
        defaults = {field: 0 for field in COUNTER_FIELDS}
        defaults.update({flag: False for flag in FLAG_FIELDS})
        defaults.update({
            'handle': settings.TUIT_DEFAULT_HANDLE,
            'user_name': settings.TUIT_DEFAULT_USER_NAME,
            'image': settings.TUIT_DEFAULT_IMAGE,
            'time': settings.TUIT_DEFAULT_TIME
        })
        return defaults

    async def find_all_tuits(self) -> List[Tuit]:
        items = await self.store.find_all()
        return [Tuit.from_item(item) for item in items]

    async def find_tuit_by_id(self, tuit_id: str) -> Optional[Tuit]:
        item = await self.store.find_by_id(tuit_id)
        return Tuit.from_item(item) if item else None

    async def create_tuit(self, fields: Dict) -> Tuit:
        """
        Create new tuit.

        Content fields (body, topic, title) pass through; counters and flags
        start at zero/False and the placeholder author identity is applied.
        """
        item = validate_patch(Tuit, fields)
        item.update(self._creation_defaults())

        created = await self.store.create(item)
        logger.info(f"Created tuit {created['tuit_id']}")
        return Tuit.from_item(created)

    async def update_tuit(self, tuit_id: str, patch: Dict) -> Optional[Tuit]:
        """
        Shallow-merge ``patch`` into the tuit.

        Raises:
            ValueError: If a counter would go negative, or the body, a counter
                or a flag is sent as null
        """
        patch = validate_patch(
            Tuit,
            patch,
            immutable=('tuit_id',),
            not_null=('body',) + COUNTER_FIELDS + FLAG_FIELDS
        )

        for field in COUNTER_FIELDS:
            value = patch.get(field)
            if value is not None and value < 0:
                raise ValueError(f"{field} cannot be negative")

        if not await self.store.update_by_id(tuit_id, patch):
            return None

        return await self.find_tuit_by_id(tuit_id)

    async def delete_tuit(self, tuit_id: str) -> bool:
        deleted = await self.store.delete_by_id(tuit_id)
        if deleted:
            logger.info(f"Deleted tuit {tuit_id}")
        return deleted
