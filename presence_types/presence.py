import abc
from typing import Any, Callable, Generic, Optional, TypeVar

try:
    from typing import Self  # type: ignore
except ImportError:  # pragma: no cover – <3.11
    from typing_extensions import Self  # type: ignore

from presence_types import config
from presence_types.errors import NoValueError, require_callable
from presence_types.option import Option

T = TypeVar("T")
U = TypeVar("U")


class Presence(Generic[T], abc.ABC):
    """
    A single value of T, or nothing, where "nothing" covers both ``None`` and
    any value the binding's emptiness predicate rejects.

    Subclasses supply only ``_is_empty`` (and optionally ``_accepts`` for the
    strict type check). Every construction path runs the predicate, so a
    wrapper that is present but empty cannot exist.

    Examples:
        >>> from presence_types import OptionalString
        >>> OptionalString.of("abc").map(len).get()
        3
        >>> OptionalString.of_nullable("").is_present()
        False
        >>> OptionalString.of("")
        Traceback (most recent call last):
            ...
        ValueError: value cannot be empty
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[T] = None):
        if value is not None:
            self._check_type(value)
            if self._is_empty(value):
                raise ValueError("value cannot be empty")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    @abc.abstractmethod
    def _is_empty(value: Optional[T]) -> bool:
        """True when ``value`` is None or empty for this binding."""

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return True

    @classmethod
    def _check_type(cls, value: Any) -> None:
        if config.STRICT_VALIDATE and not cls._accepts(value):
            raise TypeError(f"{cls.__name__} cannot wrap {type(value).__name__}")

    # ---------------------------------------------------------------------------- #
    #                                 Construction                                 #
    # ---------------------------------------------------------------------------- #

    @classmethod
    def empty(cls) -> Self:
        if not config.SHARE_EMPTY:
            return cls()
        inst = cls.__dict__.get("_empty_instance")
        if inst is None:
            inst = cls()
            cls._empty_instance = inst
        return inst

    @classmethod
    def of(cls, value: T) -> Self:
        if value is None:
            raise ValueError("value cannot be empty")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> Self:
        if value is not None:
            cls._check_type(value)
        return cls.empty() if cls._is_empty(value) else cls(value)

    # ---------------------------------------------------------------------------- #
    #                                    Access                                    #
    # ---------------------------------------------------------------------------- #

    def get(self) -> T:
        if self._is_empty(self._value):
            raise NoValueError()
        return self._value

    def is_present(self) -> bool:
        return not self._is_empty(self._value)

    def if_present(self, action: Callable[[T], Any]) -> None:
        require_callable(action, "action")
        if self.is_present():
            action(self._value)

    def or_else(self, other: T) -> T:
        return self._value if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        require_callable(supplier, "supplier")
        return self._value if self.is_present() else supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        if self.is_present():
            return self._value
        raise error_supplier()

    # ---------------------------------------------------------------------------- #
    #                                  Combinators                                 #
    # ---------------------------------------------------------------------------- #

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        require_callable(predicate, "predicate")
        if not self.is_present():
            return self
        return self if predicate(self._value) else self.empty()

    def map(self, mapper: Callable[[T], Optional[U]]) -> Option[U]:
        """Apply ``mapper`` and wrap its result in a plain ``Option``.

        The result need not satisfy this binding's emptiness predicate, so
        ``OptionalString.of("abc").map(len)`` is an ``Option`` holding 3 and
        a mapper returning ``""`` still yields a present ``Option``.
        """
        require_callable(mapper, "mapper")
        if not self.is_present():
            return Option.empty()
        return Option.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Self]) -> Self:
        require_callable(mapper, "mapper")
        if not self.is_present():
            return self.empty()
        result = mapper(self._value)
        if result is None:
            raise TypeError("flat_map mapper returned None")
        if config.STRICT_VALIDATE and not isinstance(result, type(self)):
            raise TypeError(
                f"flat_map mapper must return {type(self).__name__}, got {type(result).__name__}"
            )
        return result

    # ---------------------------------------------------------------------------- #
    #                                   Dunders                                    #
    # ---------------------------------------------------------------------------- #

    def _live_value(self) -> Optional[T]:
        # A held value emptied from outside compares like the absent instance.
        return self._value if self.is_present() else None

    def __bool__(self):
        return self.is_present()

    def __reduce__(self):
        # Rebuild through the constructor; slot writes are blocked by __setattr__.
        return (type(self), (self._live_value(),))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._live_value() == other._live_value()

    def __hash__(self):
        return hash((type(self), self._live_value()))

    def __repr__(self) -> str:
        if not self.is_present():
            return f"{type(self).__name__}.empty()"
        return f"{type(self).__name__}({self._value!r})"
