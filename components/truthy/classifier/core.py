"""Classify strings as truey, falsey or neither."""

import string
from typing import Optional

from truthy.terms import DEFAULT_TERMS, Terms, resolve

# Unicode White_Space; str.strip() with no argument also drops \x1c-\x1f.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(s: str) -> str:
    """Lowercase the ASCII letters A-Z only; other characters are left as-is."""
    return s.translate(_ASCII_LOWER)


def classify(candidate: str, terms: Optional[Terms] = None) -> Optional[bool]:
    """Classify a candidate string against a Term Set.

    The candidate is stripped of surrounding Unicode whitespace, then checked
    against the precise lists before the lowercase lists, falsey before truey
    at each level. The first match wins. Only ASCII letters are lowercased for
    the lowercase lists.

    Args:
        candidate: The string to classify.
        terms: The Term Set to match against; ``None`` selects the stock terms.

    Returns:
        Optional[bool]: ``False`` if falsey, ``True`` if truey, ``None`` if unclassified.

    Examples:
        >>> classify("Yes")
        True
        >>> classify(" off ")
        False
        >>> classify("orange") is None
        True
    """
    resolved = resolve(terms)
    s = candidate.strip(WHITESPACE)

    if s in resolved.falsey_precise:
        return False
    if s in resolved.truey_precise:
        return True

    lowered = ascii_lower(s)
    if lowered in resolved.falsey_lowercase:
        return False
    if lowered in resolved.truey_lowercase:
        return True

    return None


def string_is_falsey(s: str) -> bool:
    """Indicate whether the string is deemed "falsey" by the stock terms.

    It is NOT guaranteed that ``string_is_falsey(x) == not string_is_truey(x)``.
    """
    return classify(s, DEFAULT_TERMS) is False


def string_is_truey(s: str) -> bool:
    """Indicate whether the string is deemed "truey" by the stock terms.

    It is NOT guaranteed that ``string_is_falsey(x) == not string_is_truey(x)``.
    """
    return classify(s, DEFAULT_TERMS) is True


def string_is_truthy(s: str) -> Optional[bool]:
    """Indicate whether the string is "truthy" and, if so, whether truey or falsey.

    Returns:
        Optional[bool]: ``None`` if not truthy, ``False`` if falsey, ``True`` if truey.
    """
    return classify(s, DEFAULT_TERMS)


def string_is_truthy_with(s: str, terms: Optional[Terms]) -> Optional[bool]:
    """Like ``string_is_truthy`` but evaluated against the given terms."""
    return classify(s, terms)
