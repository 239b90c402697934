"""Accessor naming helpers.

Entity classes may spell accessors either way:
- camel: ``getBookTitle`` / ``setBookTitle`` -> property ``bookTitle``
- snake: ``get_book_title`` / ``set_book_title`` -> property ``book_title``
"""
from __future__ import annotations

from typing import Optional

__all__ = ['lcfirst', 'ucfirst', 'accessor_suffix', 'property_name', 'setter_name']

GETTER_PREFIX = 'get'
SETTER_PREFIX = 'set'


def lcfirst(name: str) -> str:
    if not name:
        return name
    return name[0].lower() + name[1:]


def ucfirst(name: str) -> str:
    if not name:
        return name
    return name[0].upper() + name[1:]


def accessor_suffix(method_name: str) -> Optional[str]:
    """Return the ``<Suffix>`` of a ``get<Suffix>`` name, ``None`` for anything else.

    The snake spelling keeps its separator so the setter can be rebuilt
    (``get_title`` -> ``_title``).
    """
    if not method_name.startswith(GETTER_PREFIX):
        return None
    suffix = method_name[len(GETTER_PREFIX):]
    if not suffix or suffix == '_':
        return None
    return suffix


def property_name(suffix: str) -> str:
    """``BookTitle`` -> ``bookTitle``; ``_book_title`` -> ``book_title``."""
    if suffix.startswith('_'):
        return suffix[1:]
    return lcfirst(suffix)


def setter_name(suffix: str) -> str:
    if suffix.startswith('_'):
        return SETTER_PREFIX + suffix
    return SETTER_PREFIX + ucfirst(suffix)
