"""Tuit domain entity"""
from dataclasses import dataclass, asdict
from typing import Optional, Dict

COUNTER_FIELDS = ('likes', 'dislikes', 'replies', 'retuits')
FLAG_FIELDS = ('liked', 'disliked')


@dataclass
class Tuit:
    """Short post. Authorship fields are display values, not a user reference."""
    tuit_id: str
    body: str = ""
    topic: Optional[str] = None
    title: Optional[str] = None
    user_name: Optional[str] = None
    handle: Optional[str] = None
    image: Optional[str] = None
    time: Optional[str] = None
    likes: int = 0
    dislikes: int = 0
    replies: int = 0
    retuits: int = 0
    liked: bool = False
    disliked: bool = False

    def to_item(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_item(cls, item: Dict) -> "Tuit":
        """Convert a stored document to a Tuit.

        DynamoDB hands numbers back as ``Decimal``, so counters are coerced.
        """
        return cls(
            tuit_id=item['tuit_id'],
            body=item.get('body') or "",
            topic=item.get('topic'),
            title=item.get('title'),
            user_name=item.get('user_name'),
            handle=item.get('handle'),
            image=item.get('image'),
            time=item.get('time'),
            likes=int(item.get('likes') or 0),
            dislikes=int(item.get('dislikes') or 0),
            replies=int(item.get('replies') or 0),
            retuits=int(item.get('retuits') or 0),
            liked=bool(item.get('liked', False)),
            disliked=bool(item.get('disliked', False))
        )
