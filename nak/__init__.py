from .builder import FilterSelectors, build_filter
from .filter import Filter, Filters, TagMap
from .subscription import Subscription, serialize_filter
