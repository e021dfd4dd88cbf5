from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .filter import Filter, TagMap


TAG_SEPARATOR = "="



@dataclass
class FilterSelectors:
    """ Already-typed selector values, one attribute per `req` flag """
    authors: List[str] = field(default_factory=list)
    ids: List[str] = field(default_factory=list)
    kinds: List[int] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)          # raw "k=v" strings
    event_tags: List[str] = field(default_factory=list)    # shortcut for "e=<value>"
    pubkey_tags: List[str] = field(default_factory=list)   # shortcut for "p=<value>"
    since: Optional[int] = None
    until: Optional[int] = None
    limit: Optional[int] = None
    bare: bool = False



def parse_tag(raw: str) -> Optional[Tuple[str, str]]:
    """
        "e=abc" -> ("e", "abc"). Anything that isn't a single-letter name and a
        value around exactly one "=" gives None.
    """
    parts = raw.split(TAG_SEPARATOR)
    if len(parts) != 2 or len(parts[0]) != 1:
        return None
    return parts[0], parts[1]


def collect_tags(selectors: FilterSelectors) -> List[Tuple[str, str]]:
    """
        Every tag pair the selectors ask for, in the order they end up in the
        filter: generic tags, then "e" shortcuts, then "p" shortcuts.
    """
    pairs = []
    for raw in selectors.tags:
        pair = parse_tag(raw)
        if pair is not None:
            pairs.append(pair)
    pairs.extend(("e", value) for value in selectors.event_tags)
    pairs.extend(("p", value) for value in selectors.pubkey_tags)
    return pairs


def build_filter(selectors: FilterSelectors) -> Filter:
    filter = Filter()

    if selectors.authors:
        filter.authors = list(selectors.authors)
    if selectors.ids:
        filter.ids = list(selectors.ids)
    if selectors.kinds:
        filter.kinds = list(selectors.kinds)

    tag_pairs = collect_tags(selectors)
    if tag_pairs:
        filter.tags = TagMap.from_pairs(tag_pairs)

    # 0 can't be told apart from "not given", so it never sets a bound
    if selectors.since:
        filter.since = selectors.since
    if selectors.until:
        filter.until = selectors.until
    if selectors.limit:
        filter.limit = selectors.limit

    return filter
