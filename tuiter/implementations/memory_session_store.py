"""In-memory session store."""
import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict

from tuiter.interfaces.session_store import ISessionStore
from tuiter.domain.session import Session


class InMemorySessionStore(ISessionStore):
    """Dict of session_id -> Session. Expired sessions are dropped on read."""

    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds
        self._sessions: Dict[str, Session] = {}

    async def create(self) -> Session:
        now = datetime.now(timezone.utc)
        session = Session(
            session_id=uuid.uuid4().hex,
            created_at=now,
            expires_at=now + timedelta(seconds=self.ttl_seconds)
        )
        self._sessions[session.session_id] = copy.deepcopy(session)
        return session

    async def get(self, session_id: str) -> Optional[Session]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired():
            del self._sessions[session_id]
            return None
        return copy.deepcopy(session)

    async def save(self, session: Session) -> Session:
        self._sessions[session.session_id] = copy.deepcopy(session)
        return session

    async def destroy(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
