import argparse
import os

from .builder import FilterSelectors, build_filter
from .subscription import serialize_filter


CATEGORY_FILTER_ATTRIBUTES = "FILTER ATTRIBUTES"

REQ_DESCRIPTION = """example usage (with 'nostcat'):
    nak req -k 1 -a 3bf0c63fcb93463407af97a5e5ee64fa883d107ef9e558472c4eb9aaaefa459d | nostcat wss://nostr-pub.wellorder.net
"""



def add_req_parser(subparsers) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "req",
        help="generates an encoded REQ message to be sent to a relay",
        description=REQ_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    attributes = parser.add_argument_group(CATEGORY_FILTER_ATTRIBUTES)
    attributes.add_argument("-a", "--author", dest="authors", action="append", default=[],
                            help="only accept events from these authors (pubkey as hex)")
    attributes.add_argument("-i", "--id", dest="ids", action="append", default=[],
                            help="only accept events with these ids (hex)")
    attributes.add_argument("-k", "--kind", dest="kinds", action="append", type=int, default=[],
                            help="only accept events with these kind numbers")
    attributes.add_argument("-t", "--tag", dest="tags", action="append", default=[],
                            help="takes a tag like -t e=<id>, only accept events with these tags")
    attributes.add_argument("-e", "--event-tag", dest="event_tags", action="append", default=[],
                            help="shortcut for --tag e=<value>")
    attributes.add_argument("-p", "--pubkey-tag", dest="pubkey_tags", action="append", default=[],
                            help="shortcut for --tag p=<value>")
    attributes.add_argument("-s", "--since", type=int,
                            help="only accept events newer than this (unix timestamp)")
    attributes.add_argument("-u", "--until", type=int,
                            help="only accept events older than this (unix timestamp)")
    attributes.add_argument("-l", "--limit", type=int,
                            help="only accept up to this number of events")

    parser.add_argument("--bare", action="store_true",
                        help='print just the filter, not enveloped in a ["REQ", ...] array')
    parser.set_defaults(handler=run_req)
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nak", description="the nostr army knife")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_req_parser(subparsers)
    return parser


def clean_arg(value: str) -> str:
    """
        Undecodable argv bytes arrive as lone surrogates, which can't be printed.
        Swap them for U+FFFD.
    """
    return os.fsencode(value).decode("utf-8", "replace")


def clean_args(values: "list[str]") -> "list[str]":
    return [clean_arg(value) for value in values]


def selectors_from_args(args: argparse.Namespace) -> FilterSelectors:
    return FilterSelectors(
        authors=clean_args(args.authors),
        ids=clean_args(args.ids),
        kinds=args.kinds,
        tags=clean_args(args.tags),
        event_tags=clean_args(args.event_tags),
        pubkey_tags=clean_args(args.pubkey_tags),
        since=args.since,
        until=args.until,
        limit=args.limit,
        bare=args.bare,
    )


def run_req(args: argparse.Namespace) -> int:
    selectors = selectors_from_args(args)
    filter = build_filter(selectors)
    print(serialize_filter(filter, bare=selectors.bare))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.handler(args)
