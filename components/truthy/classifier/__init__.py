from truthy.classifier.core import (
    WHITESPACE,
    ascii_lower,
    classify,
    string_is_falsey,
    string_is_truey,
    string_is_truthy,
    string_is_truthy_with,
)

__all__ = [
    "WHITESPACE",
    "ascii_lower",
    "classify",
    "string_is_falsey",
    "string_is_truey",
    "string_is_truthy",
    "string_is_truthy_with",
]
