"""User domain entity"""
from dataclasses import dataclass, asdict
from typing import Optional, Dict


@dataclass
class User:
    """Registered user. ``password`` holds a bcrypt hash, never plaintext."""
    user_id: str
    username: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user_type: Optional[str] = None  # role tag, e.g. 'admin' | 'personal'

    def to_item(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_item(cls, item: Dict) -> "User":
        """Convert a stored document to a User"""
        return cls(
            user_id=item['user_id'],
            username=item['username'],
            password=item.get('password', ''),
            first_name=item.get('first_name'),
            last_name=item.get('last_name'),
            user_type=item.get('user_type')
        )
