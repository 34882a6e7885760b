"""DynamoDB session store implementation"""
import aioboto3
import uuid
from typing import Optional, Dict
from datetime import datetime, timedelta, timezone
from contextlib import asynccontextmanager

from tuiter.interfaces.session_store import ISessionStore
from tuiter.domain.session import Session
from tuiter.domain.user import User


class DynamoDBSessionStore(ISessionStore):
    """
    Sessions table keyed by session_id.

    Items carry a ``ttl`` epoch attribute so DynamoDB can reap them; reads
    also check ``expires_at`` because TTL deletion is lazy.
    """

    def __init__(self, table_name: str, ttl_seconds: int, resource_config: Dict):
        self.table_name = table_name
        self.ttl_seconds = ttl_seconds
        self.session = aioboto3.Session()
        self._resource_config = resource_config

    @asynccontextmanager
    async def _get_table(self):
        async with self.session.resource('dynamodb', **self._resource_config) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            yield table

    def _session_to_item(self, session: Session) -> Dict:
        item = {
            'session_id': session.session_id,
            'created_at': session.created_at.isoformat(),
            'expires_at': session.expires_at.isoformat(),
            'ttl': int(session.expires_at.timestamp())
        }
        if session.current_user:
            item['current_user'] = session.current_user.to_item()
        return item

    def _item_to_session(self, item: Dict) -> Session:
        current_user = item.get('current_user')
        return Session(
            session_id=item['session_id'],
            created_at=datetime.fromisoformat(item['created_at']),
            expires_at=datetime.fromisoformat(item['expires_at']),
            current_user=User.from_item(current_user) if current_user else None
        )

    async def create(self) -> Session:
        now = datetime.now(timezone.utc)
        session = Session(
            session_id=uuid.uuid4().hex,
            created_at=now,
            expires_at=now + timedelta(seconds=self.ttl_seconds)
        )
        async with self._get_table() as table:
            await table.put_item(Item=self._session_to_item(session))
        return session

    async def get(self, session_id: str) -> Optional[Session]:
        async with self._get_table() as table:
            response = await table.get_item(Key={'session_id': session_id})

        if 'Item' not in response:
            return None

        session = self._item_to_session(response['Item'])
        if session.is_expired():
            return None
        return session

    async def save(self, session: Session) -> Session:
        async with self._get_table() as table:
            await table.put_item(Item=self._session_to_item(session))
        return session

    async def destroy(self, session_id: str) -> bool:
        async with self._get_table() as table:
            response = await table.delete_item(
                Key={'session_id': session_id},
                ReturnValues='ALL_OLD'
            )
            return 'Attributes' in response
