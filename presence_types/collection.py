import collections.abc as abc
from typing import Any, Collection, Optional, TypeVar

from presence_types.presence import Presence

T = TypeVar("T")


class OptionalCollection(Presence[Collection[T]]):
    """
    Presence wrapper for collections: absent when None or holding no members.

    Strings and mappings are collections to Python but have their own
    wrappers, so strict validation turns them away here.

    Examples:
        >>> OptionalCollection.of([1, 2, 3]).filter(lambda c: 2 in c).is_present()
        True
        >>> OptionalCollection.of_nullable(set()).map(len).or_else(0)
        0
    """

    __slots__ = ()

    @staticmethod
    def _is_empty(value: Optional[Collection[T]]) -> bool:
        return value is None or len(value) == 0

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return isinstance(value, abc.Collection) and not isinstance(value, (str, bytes, abc.Mapping))
