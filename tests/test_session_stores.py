"""Unit tests for session stores."""
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

from tuiter.domain.session import Session
from tuiter.domain.user import User
from tuiter.implementations.memory_session_store import InMemorySessionStore
from tuiter.implementations.dynamodb_session_store import DynamoDBSessionStore


class TestInMemorySessionStore:
    """Tests for the in-memory session store."""

    @pytest.mark.asyncio
    async def test_create_is_anonymous(self, session_store):
        session = await session_store.create()

        assert session.session_id
        assert session.current_user is None
        assert not session.is_authenticated()
        assert session.expires_at > session.created_at

    @pytest.mark.asyncio
    async def test_save_and_get_binding(self, session_store, sample_user):
        session = await session_store.create()
        session.current_user = sample_user
        await session_store.save(session)

        fetched = await session_store.get(session.session_id)

        assert fetched.is_authenticated()
        assert fetched.current_user.user_id == sample_user.user_id

    @pytest.mark.asyncio
    async def test_binding_is_a_snapshot(self, session_store, sample_user):
        session = await session_store.create()
        session.current_user = sample_user
        await session_store.save(session)

        sample_user.first_name = "Changed"

        fetched = await session_store.get(session.session_id)
        assert fetched.current_user.first_name == "Alice"

    @pytest.mark.asyncio
    async def test_get_unknown(self, session_store):
        assert await session_store.get("missing") is None

    @pytest.mark.asyncio
    async def test_destroy(self, session_store):
        session = await session_store.create()

        assert await session_store.destroy(session.session_id) is True
        assert await session_store.get(session.session_id) is None
        assert await session_store.destroy(session.session_id) is False

    @pytest.mark.asyncio
    async def test_expired_session_reads_as_absent(self):
        store = InMemorySessionStore(ttl_seconds=0)
        session = await store.create()

        assert await store.get(session.session_id) is None


class TestDynamoDBSessionStore:
    """Tests for the DynamoDB session store."""

    @pytest.fixture
    def store(self):
        with patch('tuiter.implementations.dynamodb_session_store.aioboto3.Session'):
            return DynamoDBSessionStore(
                table_name="sessions",
                ttl_seconds=3600,
                resource_config={'endpoint_url': 'http://localhost:8000'}
            )

    @pytest.fixture
    def mock_table(self, store):
        table = AsyncMock()
        store.session.resource.return_value.__aenter__.return_value.Table = AsyncMock(return_value=table)
        return table

    @pytest.mark.asyncio
    async def test_create_writes_ttl(self, store, mock_table):
        session = await store.create()

        item = mock_table.put_item.call_args.kwargs['Item']
        assert item['session_id'] == session.session_id
        assert item['ttl'] == int(session.expires_at.timestamp())
        assert 'current_user' not in item

    @pytest.mark.asyncio
    async def test_save_stores_user_copy(self, store, mock_table, sample_user):
        now = datetime.now(timezone.utc)
        session = Session("sess1", now, now + timedelta(hours=1), current_user=sample_user)

        await store.save(session)

        item = mock_table.put_item.call_args.kwargs['Item']
        assert item['current_user']['user_id'] == sample_user.user_id
        assert item['current_user']['username'] == "alice"

    @pytest.mark.asyncio
    async def test_get_round_trips_binding(self, store, mock_table):
        now = datetime.now(timezone.utc)
        mock_table.get_item.return_value = {'Item': {
            'session_id': 'sess1',
            'created_at': now.isoformat(),
            'expires_at': (now + timedelta(hours=1)).isoformat(),
            'ttl': int((now + timedelta(hours=1)).timestamp()),
            'current_user': User("user_1", "ana", "hash").to_item()
        }}

        session = await store.get('sess1')

        assert session.current_user.username == "ana"
        mock_table.get_item.assert_called_once_with(Key={'session_id': 'sess1'})

    @pytest.mark.asyncio
    async def test_get_expired(self, store, mock_table):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        mock_table.get_item.return_value = {'Item': {
            'session_id': 'sess1',
            'created_at': past.isoformat(),
            'expires_at': (past + timedelta(hours=1)).isoformat()
        }}

        assert await store.get('sess1') is None

    @pytest.mark.asyncio
    async def test_get_missing(self, store, mock_table):
        mock_table.get_item.return_value = {}

        assert await store.get('nope') is None

    @pytest.mark.asyncio
    async def test_destroy(self, store, mock_table):
        mock_table.delete_item.return_value = {'Attributes': {'session_id': 'sess1'}}

        assert await store.destroy('sess1') is True
