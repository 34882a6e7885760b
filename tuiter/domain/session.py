"""Session domain entity"""
from dataclasses import dataclass
from typing import Optional
from datetime import datetime, timezone

from tuiter.domain.user import User


@dataclass
class Session:
    """Server-side session bound to a cookie token.

    ``current_user`` is a copy of the user taken at bind time; later edits to
    the stored user do not show up here until the session is re-bound.
    """
    session_id: str
    created_at: datetime
    expires_at: datetime
    current_user: Optional[User] = None

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
