from typing import Callable, Generic, Optional, TypeVar

from presence_types.errors import require_callable

T = TypeVar("T")


class Selector(Generic[T]):
    """
    Fluent replacement for a branching assignment.

    Instead of::

        if condition:
            value = "1"
        else:
            value = "2"

    write::

        value = if_true(condition).get("1").or_else("2")

    The condition is fixed at construction. ``get``/``get_from`` record a
    value only while it is true; when it is false they are no-ops that still
    return the selector, so chains stay legal. The terminal ``or_else`` /
    ``or_else_get`` calls resolve to the recorded value or the fallback.
    """

    __slots__ = ("_condition", "_value", "_committed")

    def __init__(self, condition: bool):
        self._condition = bool(condition)
        self._value: Optional[T] = None
        self._committed = False

    @classmethod
    def if_true(cls, condition: bool) -> "Selector[T]":
        return cls(condition)

    @property
    def condition(self) -> bool:
        return self._condition

    @property
    def is_committed(self) -> bool:
        """True once a value has been recorded under a true condition."""
        return self._committed

    def get(self, value: T) -> "Selector[T]":
        if self._condition:
            self._value = value
            self._committed = True
        return self

    def get_from(self, supplier: Callable[[], T]) -> "Selector[T]":
        """Like ``get`` but the value is only computed when the condition holds."""
        require_callable(supplier, "supplier")
        if self._condition:
            self._value = supplier()
            self._committed = True
        return self

    def or_else(self, other: T) -> Optional[T]:
        if not self._condition:
            return other
        return self._value

    def or_else_get(self, supplier: Callable[[], T]) -> Optional[T]:
        require_callable(supplier, "supplier")
        if not self._condition:
            return supplier()
        return self._value

    def __repr__(self) -> str:
        state = "committed" if self._committed else "uncommitted"
        return f"Selector(condition={self._condition}, {state})"


def if_true(condition: bool) -> Selector:
    """Start a selector on ``condition``."""
    return Selector(condition)
