"""Domain service: Unique Name Resolver.

Product names are unique ignoring case and surrounding whitespace.  A
clashing name gets a numeric suffix, like a file manager does for
copies: ``Widget`` -> ``Widget (1)`` -> ``Widget (2)`` ...
"""

from __future__ import annotations

from collections.abc import Iterable


def _upper_char(char: str) -> str:
    upper = char.upper()
    # "ß" -> "SS" and the like are not one-to-one; leave those alone.
    return upper if len(upper) == 1 else char


def _normalize(name: str) -> str:
    return "".join(_upper_char(c) for c in name.strip())


def resolve_unique_name(name: str, existing_names: Iterable[str]) -> str:
    """Return *name*, trimmed, or the first free ``"<name> (n)"`` variant.

    *existing_names* is treated as a single snapshot; it is consumed
    once up front.
    """
    base = name.strip()
    taken = {_normalize(existing) for existing in existing_names}

    candidate = base
    counter = 1
    while _normalize(candidate) in taken:
        candidate = f"{base} ({counter})"
        counter += 1
    return candidate
