"""
Term Set configuration component.

Lets a deployment override any of the four term lists through the environment
while keeping the stock lists for the rest.

Usage:
    from truthy.terms_config import TermsConfig
    from truthy.classifier import string_is_truthy_with

    config = TermsConfig.from_environment()
    string_is_truthy_with("da", config.to_terms())
"""

import os
from dataclasses import dataclass, fields
from typing import List, Optional

from truthy.classifier import ascii_lower
from truthy.exceptions import TruthyException
from truthy.logging import get_logger
from truthy.terms import DEFAULT_TERMS, Terms, stock_term_strings

logger = get_logger(__name__)

ENV_VARS = {
    "falsey_precise": "TRUTHY_FALSEY_PRECISE",
    "falsey_lowercase": "TRUTHY_FALSEY_LOWERCASE",
    "truey_precise": "TRUTHY_TRUEY_PRECISE",
    "truey_lowercase": "TRUTHY_TRUEY_LOWERCASE",
}


class TermsConfigError(TruthyException):
    """Raised when the term configuration is invalid."""

    pass


def _parse_term_list(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None:
        return None
    return [term.strip() for term in raw.split(",") if term.strip()]


@dataclass
class TermsConfig:
    """
    Overrides for the stock term lists.

    A list left as ``None`` keeps the corresponding stock list; an empty list
    disables that list entirely.

    Attributes:
        falsey_precise: Case-sensitive falsey terms
        falsey_lowercase: Falsey terms matched against the lowercased candidate
        truey_precise: Case-sensitive truey terms
        truey_lowercase: Truey terms matched against the lowercased candidate
    """

    falsey_precise: Optional[List[str]] = None
    falsey_lowercase: Optional[List[str]] = None
    truey_precise: Optional[List[str]] = None
    truey_lowercase: Optional[List[str]] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            TermsConfigError: If configuration is invalid.
        """
        errors = []

        for name, terms in self.overrides.items():
            if not isinstance(terms, (list, tuple)):
                errors.append(f"{name} must be a list of terms, got {type(terms).__name__}")
                continue
            for term in terms:
                if not isinstance(term, str):
                    errors.append(f"{name} term {term!r} must be a string")
                elif not term.strip():
                    errors.append(f"{name} contains a blank term")
                elif name.endswith("_lowercase") and term != ascii_lower(term):
                    errors.append(f"{name} term '{term}' is not lowercase and can never match")

        if errors:
            error_msg = "Truthy terms configuration errors:\n  - " + "\n  - ".join(errors)
            logger.error(error_msg)
            raise TermsConfigError(error_msg)

        logger.info("Truthy terms configuration validated successfully")
        logger.debug(f"  Overridden lists: {sorted(self.overrides) or 'none'}")

    @classmethod
    def from_environment(cls) -> "TermsConfig":
        """
        Load configuration from environment variables.

        Environment Variables:
            TRUTHY_FALSEY_PRECISE: Comma-separated case-sensitive falsey terms
            TRUTHY_FALSEY_LOWERCASE: Comma-separated lowercase falsey terms
            TRUTHY_TRUEY_PRECISE: Comma-separated case-sensitive truey terms
            TRUTHY_TRUEY_LOWERCASE: Comma-separated lowercase truey terms

        Unset variables keep the stock list; a variable set to an empty
        string yields an empty list.

        Returns:
            TermsConfig: Configuration loaded from environment.
        """
        return cls(**{name: _parse_term_list(os.getenv(var)) for name, var in ENV_VARS.items()})

    @property
    def overrides(self) -> dict:
        """The lists that replace their stock counterparts."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def to_terms(self) -> Terms:
        """Build the Term Set this configuration describes."""
        overrides = self.overrides
        if not overrides:
            return DEFAULT_TERMS
        return stock_term_strings().replace(**overrides)
