from typing import Any, Callable, Generic, Optional, TypeVar

from presence_types import config
from presence_types.errors import NoValueError, require_callable


T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """
    Option[T] wraps either no value (None) or a T.

    This is the plain optional that ``Presence.map`` hands back: the only
    absent value is ``None``, so ``Option.of(0)`` and ``Option.of("")`` are
    both present.

    Examples:
        >>> Option.of(3).map(lambda n: n * 2).get()
        6
        >>> Option.of_nullable(None).or_else("fallback")
        'fallback'
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[T] = None):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def empty(cls) -> "Option[T]":
        if not config.SHARE_EMPTY:
            return cls()
        inst = cls.__dict__.get("_empty_instance")
        if inst is None:
            inst = cls()
            cls._empty_instance = inst
        return inst

    @classmethod
    def of(cls, value: T) -> "Option[T]":
        if value is None:
            raise ValueError("value cannot be None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> "Option[T]":
        return cls.empty() if value is None else cls(value)

    def get(self) -> T:
        if self._value is None:
            raise NoValueError()
        return self._value

    def is_present(self) -> bool:
        return self._value is not None

    def if_present(self, action: Callable[[T], Any]) -> None:
        require_callable(action, "action")
        if self._value is not None:
            action(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        require_callable(predicate, "predicate")
        if self._value is None:
            return self
        return self if predicate(self._value) else self.empty()

    def map(self, mapper: Callable[[T], Optional[U]]) -> "Option[U]":
        require_callable(mapper, "mapper")
        if self._value is None:
            return Option.empty()
        return Option.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "Option[U]"]) -> "Option[U]":
        require_callable(mapper, "mapper")
        if self._value is None:
            return Option.empty()
        result = mapper(self._value)
        if not isinstance(result, Option):
            raise TypeError(f"flat_map mapper must return an Option, got {type(result).__name__}")
        return result

    def or_else(self, other: T) -> T:
        return other if self._value is None else self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        require_callable(supplier, "supplier")
        return supplier() if self._value is None else self._value

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        if self._value is None:
            raise error_supplier()
        return self._value

    def __bool__(self):
        return self._value is not None

    def __reduce__(self):
        return (type(self), (self._value,))

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((Option, self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Option.empty()"
        return f"Option({self._value!r})"
