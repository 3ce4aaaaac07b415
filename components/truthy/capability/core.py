"""Truthy capability for string-bearing types, plus value-level helpers."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from truthy.classifier import string_is_truthy, string_is_truthy_with
from truthy.terms import DEFAULT_TERMS, Terms


@runtime_checkable
class AsStr(Protocol):
    """Any type able to produce a string view of itself."""

    def as_str(self) -> str: ...


class Truthy(ABC):
    """Provides truthy attributes for an implementing type.

    Subclasses only implement ``is_truthy``; ``is_falsey`` and ``is_truey``
    are expressed in terms of it.
    """

    @abstractmethod
    def is_truthy(self) -> Optional[bool]:
        """Whether the instance is "truthy" and, if so, truey (True) or falsey (False)."""

    def is_falsey(self) -> bool:
        return self.is_truthy() is False

    def is_truey(self) -> bool:
        return self.is_truthy() is True


class StrTruthy(Truthy):
    """Mixin giving any class with ``as_str()`` the Truthy methods.

    Set ``truthy_terms`` on a subclass to classify against a custom Term Set.
    """

    truthy_terms: Terms = DEFAULT_TERMS

    @abstractmethod
    def as_str(self) -> str: ...

    def is_truthy(self) -> Optional[bool]:
        return string_is_truthy_with(self.as_str(), self.truthy_terms)

    def is_truthy_with(self, terms: Optional[Terms]) -> Optional[bool]:
        return string_is_truthy_with(self.as_str(), terms)


class TruthyStr(StrTruthy, str):
    """A ``str`` carrying the Truthy methods.

    Examples:
        >>> TruthyStr("Yes").is_truey()
        True
    """

    def as_str(self) -> str:
        return str.__str__(self)


def is_truthy_with(value: Any, terms: Optional[Terms]) -> Optional[bool]:
    """Classify any value, matching string views against the given terms.

    Args:
        value: ``None``, a ``bool``, a ``str``, an ``AsStr`` or a ``Truthy``.
        terms: The Term Set used for string-viewable values.

    Returns:
        Optional[bool]: The classification; ``None`` for values with no string view.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return string_is_truthy_with(value, terms)
    if isinstance(value, AsStr):
        return string_is_truthy_with(value.as_str(), terms)
    if isinstance(value, Truthy):
        return value.is_truthy()
    return None


def is_truthy(value: Any) -> Optional[bool]:
    """Classify any value using the stock terms.

    ``Truthy`` instances answer for themselves, so a class that pins its own
    ``truthy_terms`` keeps them here.

    Examples:
        >>> is_truthy("yes")
        True
        >>> is_truthy(False)
        False
        >>> is_truthy(None) is None
        True
    """
    if isinstance(value, Truthy):
        return value.is_truthy()
    if isinstance(value, str):
        return string_is_truthy(value)
    return is_truthy_with(value, DEFAULT_TERMS)


def is_falsey(value: Any) -> bool:
    return is_truthy(value) is False


def is_truey(value: Any) -> bool:
    return is_truthy(value) is True


def to_bool(value: Any, default: bool = False) -> bool:
    """Convert a value to a boolean, falling back to ``default`` when unclassified.

    Args:
        value: The value to convert.
        default: Returned if the value is neither truey nor falsey.

    Returns:
        bool: The boolean representation.
    """
    result = is_truthy(value)
    if result is None:
        return default
    return result
