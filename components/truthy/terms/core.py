"""Term Set model and the stock term strings.

A Term Set holds the four lists a candidate string is compared against:

- ``falsey_precise`` / ``truey_precise``: matched with exact, case-sensitive equality.
- ``falsey_lowercase`` / ``truey_lowercase``: matched against the lowercased candidate.

Lists are used verbatim; nothing is normalized, deduplicated or validated here.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from truthy.logging import get_logger

logger = get_logger(__name__)


class DefaultTerms(Enum):
    """Sentinel selecting the stock term strings."""

    DEFAULT = "default"


DEFAULT_TERMS = DefaultTerms.DEFAULT


class TermSet(BaseModel):
    """Immutable configuration of falsey and truey term strings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    falsey_precise: Tuple[str, ...] = ()
    falsey_lowercase: Tuple[str, ...] = ()
    truey_precise: Tuple[str, ...] = ()
    truey_lowercase: Tuple[str, ...] = ()

    @model_validator(mode="after")
    def _warn_on_conflicts(self) -> "TermSet":
        # Falsey wins on conflict; flag it without rejecting.
        for precision in ("precise", "lowercase"):
            falsey = getattr(self, f"falsey_{precision}")
            truey = getattr(self, f"truey_{precision}")
            conflicts = sorted(set(falsey) & set(truey))
            if conflicts:
                logger.warning(
                    f"Terms {conflicts} appear in both falsey_{precision} and truey_{precision}; "
                    "they will classify as falsey"
                )
        return self

    @property
    def is_empty(self) -> bool:
        """True when no list holds any term."""
        return not (self.falsey_precise or self.falsey_lowercase or self.truey_precise or self.truey_lowercase)

    def replace(self, **lists) -> "TermSet":
        """Return a new Term Set with the given lists swapped in.

        Examples:
            >>> custom = stock_term_strings().replace(truey_lowercase=["da", "yup"])
        """
        return TermSet.model_validate({**self.model_dump(), **lists})


Terms = Union[TermSet, DefaultTerms]


STOCK_TERMS = TermSet(
    falsey_precise=("0", "FALSE", "False", "NO", "No", "OFF", "Off", "false", "no", "off"),
    falsey_lowercase=("false", "no", "off", "0", "n", "f"),
    truey_precise=("1", "ON", "On", "TRUE", "True", "YES", "Yes", "on", "true", "yes"),
    truey_lowercase=("true", "yes", "on", "1", "y", "t"),
)


def stock_term_strings() -> TermSet:
    """Obtain the stock term strings of the library.

    Handy when providing your own "truey" terms while relying on the stock
    "falsey" ones.

    Returns:
        TermSet: The built-in Term Set.
    """
    return STOCK_TERMS


def resolve(terms: Optional[Terms] = None) -> TermSet:
    """Resolve a Term Set value to the concrete lists to match against.

    Args:
        terms: A ``TermSet``, ``DEFAULT_TERMS`` or ``None`` (same as ``DEFAULT_TERMS``).

    Returns:
        TermSet: The stock terms for the default sentinel, otherwise ``terms`` itself.

    Raises:
        TypeError: If ``terms`` is neither a Term Set nor the default sentinel.
    """
    if terms is None or terms is DEFAULT_TERMS:
        return STOCK_TERMS
    if isinstance(terms, TermSet):
        return terms
    raise TypeError(f"Expected a TermSet or DEFAULT_TERMS, got {type(terms).__name__}")
