from typing import Any, Optional

from presence_types.presence import Presence


class OptionalString(Presence[str]):
    """
    Presence wrapper for text: absent when None or zero-length.

    Whitespace counts as content, so ``OptionalString.of(" ")`` is present.

    Examples:
        >>> OptionalString.of_nullable("Alice").map(str.upper).get()
        'ALICE'
        >>> OptionalString.of_nullable("").or_else("anonymous")
        'anonymous'
    """

    __slots__ = ()

    @staticmethod
    def _is_empty(value: Optional[str]) -> bool:
        return value is None or len(value) == 0

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return isinstance(value, str)
