"""Process-local, namespaced caching layer for lookup results."""

import threading
from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import Generic, TypeVar

V = TypeVar("V")


class CacheNamespace(StrEnum):
    """Independent key spaces, one per lookup direction."""

    FORWARD = "geocoding"
    REVERSE = "reverse-geocoding"


class LookupCache(Generic[V]):
    """Thread-safe key-value store for a single namespace.

    Each operation is atomic for its key. There is no TTL, no capacity
    bound and no automatic eviction; entries live until evicted or cleared.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._entries: dict[str, V] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str) -> V | None:
        """Return the cached value for ``key``, or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises:
            ValueError: If ``value`` is None (None is reserved as the miss signal).
        """
        if value is None:
            msg = f"Cannot cache None under key {key!r} in {self._name!r}"
            raise ValueError(msg)
        with self._lock:
            self._entries[key] = value

    def evict(self, key: str) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry in this namespace."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheRegistry:
    """Holds one LookupCache per namespace.

    Created once at startup and shared by reference with the resolver.

    Args:
        namespaces: Namespaces to create caches for. Defaults to all of
            :class:`CacheNamespace`.
    """

    def __init__(self, namespaces: Iterable[CacheNamespace] | None = None) -> None:
        names = list(namespaces) if namespaces is not None else list(CacheNamespace)
        self._caches: dict[CacheNamespace, LookupCache] = {ns: LookupCache(ns.value) for ns in names}

    def get_cache(self, namespace: CacheNamespace) -> LookupCache:
        """Return the cache for ``namespace``.

        Raises:
            KeyError: If the registry was built without that namespace.
        """
        return self._caches[namespace]

    def caches(self) -> Iterator[LookupCache]:
        """Iterate over all caches in namespace order."""
        return iter(list(self._caches.values()))
