import json

from .filter import Filter, Filters
from .message_type import ClientMessageType


# Every REQ this tool prints uses the same subscription id
DEFAULT_SUBSCRIPTION_ID = "nak"



class Subscription:

    def __init__(self, id: str = None, filters: Filters = None) -> None:
        self.id = DEFAULT_SUBSCRIPTION_ID if id is None else id
        self.filters = filters if filters is not None else Filters()


    def to_json_object(self):
        return {
            "id": self.id,
            "filters": self.filters.to_json_array()
        }


    def to_message(self) -> str:
        request = [ClientMessageType.REQUEST, self.id]
        request.extend(self.filters.to_json_array())
        return json.dumps(request, separators=(',', ':'), ensure_ascii=False)



def serialize_filter(filter: Filter, bare: bool = False) -> str:
    """ The bare filter JSON, or by default the filter wrapped in a REQ message """
    if bare:
        return filter.to_json()
    return Subscription(filters=Filters([filter])).to_message()
