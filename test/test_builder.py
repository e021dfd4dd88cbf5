import json

from nak.builder import FilterSelectors, build_filter, collect_tags, parse_tag
from nak.subscription import serialize_filter



class TestParseTag:
    def test_valid_tag(self):
        assert parse_tag("e=abc") == ("e", "abc")


    def test_empty_value_is_accepted(self):
        assert parse_tag("t=") == ("t", "")


    def test_malformed_tags_are_dropped(self):
        """ multi-letter names, missing or extra "=" and empty names all give None """
        assert parse_tag("ab=1") is None
        assert parse_tag("novalue") is None
        assert parse_tag("e=1=2") is None
        assert parse_tag("=1") is None



class TestCollectTags:
    def test_merge_order(self):
        """ generic tags come first, then "e" shortcuts, then "p" shortcuts """
        selectors = FilterSelectors(
            tags=["e=1", "p=2"],
            event_tags=["3"],
            pubkey_tags=["4"],
        )
        assert collect_tags(selectors) == [("e", "1"), ("p", "2"), ("e", "3"), ("p", "4")]


    def test_malformed_generic_tags_skipped(self):
        selectors = FilterSelectors(tags=["ab=1", "t=x", "novalue"])
        assert collect_tags(selectors) == [("t", "x")]



class TestBuildFilter:
    def test_no_selectors(self):
        """ nothing supplied should leave every field unset """
        filter = build_filter(FilterSelectors())
        assert filter.ids is None
        assert filter.kinds is None
        assert filter.authors is None
        assert filter.tags is None
        assert filter.since is None
        assert filter.until is None
        assert filter.limit is None


    def test_lists_copied_in_order(self):
        selectors = FilterSelectors(authors=["b", "a"], ids=["2", "1"], kinds=[7, 1])
        filter = build_filter(selectors)
        assert filter.authors == ["b", "a"]
        assert filter.ids == ["2", "1"]
        assert filter.kinds == [7, 1]


    def test_tag_grouping(self):
        """ generic entries should precede shortcut entries for the same key """
        selectors = FilterSelectors(
            tags=["e=1", "p=2"],
            event_tags=["3"],
            pubkey_tags=["4"],
        )
        filter = build_filter(selectors)
        assert filter.tags == {"e": ["1", "3"], "p": ["2", "4"]}


    def test_only_malformed_tags_leaves_tags_unset(self):
        """ no accepted tags should mean no tag filter, not an empty one """
        filter = build_filter(FilterSelectors(tags=["ab=1", "novalue"]))
        assert filter.tags is None
        assert filter.to_json_object() == {}


    def test_zero_means_absent(self):
        filter = build_filter(FilterSelectors(since=0, until=0, limit=0))
        assert filter.to_json_object() == {}


    def test_since_until_limit(self):
        filter = build_filter(FilterSelectors(since=100, until=200, limit=5))
        assert filter.to_json_object() == {"since": 100, "until": 200, "limit": 5}


    def test_bounds_are_independent(self):
        filter = build_filter(FilterSelectors(since=100, until=0))
        assert filter.since == 100
        assert filter.until is None



class TestSerializeBuiltFilter:
    def test_empty_envelope(self):
        assert serialize_filter(build_filter(FilterSelectors())) == '["REQ","nak",{}]'


    def test_bare_kinds_and_authors(self):
        selectors = FilterSelectors(kinds=[1], authors=["abc"], bare=True)
        result = serialize_filter(build_filter(selectors), bare=selectors.bare)
        assert json.loads(result) == {"kinds": [1], "authors": ["abc"]}
        assert result == '{"kinds":[1],"authors":["abc"]}'


    def test_envelope_with_tags(self):
        selectors = FilterSelectors(tags=["e=1", "p=2"], event_tags=["3"], pubkey_tags=["4"], since=100)
        result = serialize_filter(build_filter(selectors))
        assert result == '["REQ","nak",{"#e":["1","3"],"#p":["2","4"],"since":100}]'


    def test_repeatable(self):
        """ serializing the same built Filter twice should give the same text """
        filter = build_filter(FilterSelectors(tags=["t=a", "r=b", "t=c"], pubkey_tags=["x"]))
        assert serialize_filter(filter) == serialize_filter(filter)
        assert serialize_filter(filter, bare=True) == serialize_filter(filter, bare=True)
