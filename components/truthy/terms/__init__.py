from truthy.terms.core import (
    DEFAULT_TERMS,
    STOCK_TERMS,
    DefaultTerms,
    Terms,
    TermSet,
    resolve,
    stock_term_strings,
)

__all__ = [
    "DEFAULT_TERMS",
    "STOCK_TERMS",
    "DefaultTerms",
    "Terms",
    "TermSet",
    "resolve",
    "stock_term_strings",
]
