from presence_types.errors import NoValueError
from presence_types.option import Option
from presence_types.presence import Presence
from presence_types.collection import OptionalCollection
from presence_types.mapping import OptionalMapping
from presence_types.string import OptionalString
from presence_types.selector import Selector, if_true

__all__ = [
    "NoValueError",
    "Option",
    "Presence",
    "OptionalCollection",
    "OptionalMapping",
    "OptionalString",
    "Selector",
    "if_true",
]
