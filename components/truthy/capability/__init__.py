from truthy.capability.core import (
    AsStr,
    StrTruthy,
    Truthy,
    TruthyStr,
    is_falsey,
    is_truey,
    is_truthy,
    is_truthy_with,
    to_bool,
)

__all__ = [
    "AsStr",
    "StrTruthy",
    "Truthy",
    "TruthyStr",
    "is_falsey",
    "is_truey",
    "is_truthy",
    "is_truthy_with",
    "to_bool",
]
