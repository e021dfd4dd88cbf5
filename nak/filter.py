import json
from collections import UserList
from dataclasses import dataclass

from .event import Event



class TagMap(dict):
    """
        Single-letter tag name -> list of values.

        Keys keep the order they were first seen in and each value list keeps
        the order values were appended in, so a filter always serializes the
        same way.
    """
    def append(self, key: str, value: str) -> None:
        if key not in self:
            self[key] = []
        self[key].append(value)


    @classmethod
    def from_pairs(cls, pairs: "list[tuple[str, str]]") -> "TagMap":
        tag_map = cls()
        for key, value in pairs:
            tag_map.append(key, value)
        return tag_map



@dataclass
class Filter:
    """
        NIP-01 filter. A field left as None places no restriction on events and
        is left out of the JSON form entirely.

        Tag filters are kept in `tags` without the "#" prefix, e.g.
        `TagMap(e=[...])` serializes as `{"#e": [...]}`.
    """
    ids: "list[str]" = None
    kinds: "list[int]" = None
    authors: "list[str]" = None
    tags: TagMap = None
    since: int = None
    until: int = None
    limit: int = None


    def matches(self, event: Event) -> bool:
        if self.ids is not None and event.id not in self.ids:
            return False
        if self.kinds is not None and event.kind not in self.kinds:
            return False
        if self.authors is not None and event.public_key not in self.authors:
            return False
        if self.since is not None and event.created_at < self.since:
            return False
        if self.until is not None and event.created_at > self.until:
            return False

        if self.tags:
            for tag_name, wanted in self.tags.items():
                # Values within a tag group are OR'ed; an Event needs only one
                if not any(value in wanted for value in event.tag_values(tag_name)):
                    return False

        return True


    def to_json_object(self) -> dict:
        res = {}
        if self.ids is not None:
            res["ids"] = self.ids
        if self.kinds is not None:
            res["kinds"] = self.kinds
        if self.authors is not None:
            res["authors"] = self.authors
        if self.tags is not None:
            for tag_name, values in self.tags.items():
                res[f"#{tag_name}"] = values
        if self.since is not None:
            res["since"] = self.since
        if self.until is not None:
            res["until"] = self.until
        if self.limit is not None:
            res["limit"] = self.limit

        return res


    def to_json(self) -> str:
        return json.dumps(self.to_json_object(), separators=(',', ':'), ensure_ascii=False)


    def __str__(self) -> str:
        return self.to_json()



class Filters(UserList):
    def __init__(self, initlist: "list[Filter]" = None) -> None:
        super().__init__(initlist or [])
        self.data: "list[Filter]"

    def match(self, event: Event):
        for filter in self.data:
            if filter.matches(event):
                return True
        return False

    def to_json_array(self) -> list:
        return [filter.to_json_object() for filter in self.data]
