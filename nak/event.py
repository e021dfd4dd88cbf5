import time
import json
from dataclasses import dataclass, field
from typing import List
from hashlib import sha256



class EventKind:
    TEXT_NOTE = 1



@dataclass
class Event:
    """
        Just enough of a NIP-01 event to test it against a `Filter`. Signing and
        verification are left to whatever produced the event.
    """
    content: str = None
    public_key: str = None
    created_at: int = None
    kind: int = EventKind.TEXT_NOTE
    tags: List[List[str]] = field(default_factory=list)
    signature: str = None


    def __post_init__(self):
        if self.content is not None and not isinstance(self.content, str):
            raise TypeError("Argument 'content' must be of type str")

        if self.created_at is None:
            self.created_at = int(time.time())


    @classmethod
    def from_dict(cls, event_dict: dict):
        return cls(
            public_key=event_dict.get("pubkey"),
            content=event_dict.get("content"),
            created_at=event_dict.get("created_at"),
            kind=event_dict.get("kind"),
            tags=event_dict.get("tags") or [],
            signature=event_dict.get("sig"),
        )


    @staticmethod
    def serialize(public_key: str, created_at: int, kind: int, tags: List[List[str]], content: str) -> bytes:
        data = [0, public_key, created_at, kind, tags, content]
        data_str = json.dumps(data, separators=(',', ':'), ensure_ascii=False)
        return data_str.encode()


    @property
    def id(self) -> str:
        return sha256(Event.serialize(self.public_key, self.created_at, self.kind, self.tags, self.content)).hexdigest()


    def tag_values(self, name: str) -> List[str]:
        """ Values of every tag named `name`, in tag order """
        return [tag[1] for tag in self.tags if len(tag) > 1 and tag[0] == name]


    @property
    def pubkey_refs(self) -> List[str]:
        return self.tag_values('p')


    @property
    def event_refs(self) -> List[str]:
        return self.tag_values('e')
