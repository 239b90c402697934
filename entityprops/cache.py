"""Compute-once caches shared by the resolver.

Entries are never invalidated: entity classes are assumed not to change shape
while the process runs. ``clear()`` exists for tests.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

__all__ = ['PropertyCache', 'default_annotation_cache']


class PropertyCache:
    """Thread-safe keyed cache with per-key compute-once semantics.

    Concurrent ``get_or_compute`` calls for the same key block until the first
    caller's value is stored and then return that value. A failing ``compute``
    stores nothing and its exception reaches the caller.
    """

    def __init__(self, name: str = 'cache'):
        self.name = name
        self._entries: Dict[Hashable, Any] = {}
        self._locks: Dict[Hashable, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        try:
            return self._entries[key]
        except KeyError:
            pass
        with self._lock:
            key_lock = self._locks.setdefault(key, threading.Lock())
        with key_lock:
            if key in self._entries:
                return self._entries[key]
            value = compute()
            self._entries[key] = value
        logger.debug("%s: stored entry for %r", self.name, key)
        return value

    def get(self, key: Hashable, default: Optional[Any] = None) -> Any:
        return self._entries.get(key, default)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._locks.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Process-wide cache of per-class docstring properties.
default_annotation_cache = PropertyCache('annotation-properties')
