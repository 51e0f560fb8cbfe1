import collections.abc as abc
from typing import Any, Mapping, Optional, TypeVar

from presence_types.presence import Presence

K = TypeVar("K")
V = TypeVar("V")


class OptionalMapping(Presence[Mapping[K, V]]):
    """Presence wrapper for key/value mappings: absent when None or without entries."""

    __slots__ = ()

    @staticmethod
    def _is_empty(value: Optional[Mapping[K, V]]) -> bool:
        return value is None or len(value) == 0

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return isinstance(value, abc.Mapping)
