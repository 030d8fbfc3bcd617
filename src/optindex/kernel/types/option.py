"""Option[T] monad — Some and Nothing variants.

Both variants implement the same capability set declared on
:class:`OptionBase`; callers never branch on the concrete type.  ``Some``
carries ``__match_args__`` so the exhaustive form reads::

    match find_first_index(3, items):
        case Some(position):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from optindex.kernel.errors import ValueAbsentError

T = TypeVar("T")
U = TypeVar("U")


class OptionBase(abc.ABC, Generic[T]):
    """Capabilities shared by every option variant."""

    __slots__ = ()

    @abc.abstractmethod
    def is_some(self) -> bool: ...

    @abc.abstractmethod
    def is_none(self) -> bool: ...

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the value or raise :class:`ValueAbsentError`."""

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Like :meth:`unwrap` but with a caller-supplied error message."""

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abc.abstractmethod
    def unwrap_or_else(self, factory: Callable[[], T]) -> T: ...

    @abc.abstractmethod
    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Apply *func* to a present value; absence passes through untouched."""

    @abc.abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]": ...

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]": ...

    @abc.abstractmethod
    def or_else(self, other: "Option[T]") -> "Option[T]": ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...


class Some(OptionBase[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, factory: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self._value) else Nothing()

    def or_else(self, other: "Option[T]") -> "Some[T]":  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(OptionBase[T]):
    """Empty option."""

    __slots__ = ()
    __match_args__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueAbsentError()

    def expect(self, message: str) -> NoReturn:
        raise ValueAbsentError(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, factory: Callable[[], T]) -> T:
        return factory()

    def map(self, func: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return Nothing()

    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Nothing[U]":  # noqa: ARG002
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def or_else(self, other: "Option[T]") -> "Option[T]":
        return other

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionBase):
            return NotImplemented
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]


def from_nullable(value: Any) -> Option[Any]:
    """Wrap *value* in ``Some`` unless it is ``None``."""
    return Nothing() if value is None else Some(value)


__all__ = ["Nothing", "Option", "OptionBase", "Some", "from_nullable"]
