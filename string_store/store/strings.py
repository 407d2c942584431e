"""
String Store Module

This module implements the core string key-value storage.

The contract is four operations, all total over any string input:
- get: Unconditional read ("" for a missing key)
- set: Unconditional write
- safe_set: Write only if the key is absent
- replace_set: Write and hand back the previous value ("" if there was none)

Keys are never removed by these operations and never expire.
"""

import threading
from typing import Dict, Any, Iterable, List, Optional, Tuple

from ..config.settings import settings


class StringStore:
    """
    In-memory mapping of string keys to string values.

    All operations are O(1) average (the batch helpers are O(n) in the
    number of keys passed).

    Absence and the empty string look the same through get() and
    replace_set(); use lookup() or exists() when the difference matters.

    This class does no locking of its own. Share one instance between
    threads only behind external coordination, or use
    SynchronizedStringStore instead.
    """

    synchronized = False

    def __init__(self):
        """Initialize an empty store."""
        self._store: Dict[str, str] = {}

    def get(self, key: str) -> str:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or "" if the key has never been written
        """
        return self._store.get(key, "")

    def set(self, key: str, value: str) -> None:
        """
        Associate value with key, discarding any previous value.

        Args:
            key: The key to store
            value: The value to associate with the key
        """
        self._store[key] = value

    def safe_set(self, key: str, value: str) -> None:
        """
        Associate value with key only if key is not already present.

        An existing value, including an empty one, is left untouched.
        Nothing is returned, so callers cannot tell whether the write happened.

        Args:
            key: The key to store
            value: The value to associate with the key
        """
        if key not in self._store:
            self._store[key] = value

    def replace_set(self, key: str, value: str) -> str:
        """
        Store value under key and return what was there before.

        A missing key is written with the supplied value, same as a
        present one; it just has no previous value to return.

        Args:
            key: The key to store
            value: The new value

        Returns:
            The previous value, or "" if the key was absent
        """
        previous = self._store.get(key, "")
        self._store[key] = value
        return previous

    def lookup(self, key: str) -> Tuple[str, bool]:
        """
        Presence-tagged read.

        Returns:
            (value, True) if key is present, ("", False) otherwise
        """
        if key in self._store:
            return self._store[key], True
        return "", False

    def exists(self, key: str) -> bool:
        """Check if a key has been written."""
        return key in self._store

    def get_many(self, keys: Iterable[str]) -> List[str]:
        """Apply get() to each key, preserving order."""
        return [self._store.get(key, "") for key in keys]

    def set_many(self, pairs: Iterable[Tuple[str, str]]) -> None:
        """
        Apply set() to each (key, value) pair in order.

        A later pair for the same key wins. Pairs are written one at a
        time; this is not a transaction.
        """
        for key, value in pairs:
            self._store[key] = value

    def safe_set_many(self, pairs: Iterable[Tuple[str, str]]) -> None:
        """
        Apply safe_set() to each (key, value) pair in order.

        The first pair for a previously absent key wins.
        """
        for key, value in pairs:
            if key not in self._store:
                self._store[key] = value

    def size(self) -> int:
        """Get the number of keys currently stored."""
        return len(self._store)

    def clear(self) -> None:
        """Remove all keys from the store."""
        self._store.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Number of keys present
            - synchronized: Whether operations are lock-guarded
        """
        return {
            "total_keys": len(self._store),
            "synchronized": self.synchronized,
        }

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)


class SynchronizedStringStore(StringStore):
    """
    StringStore guarded by a single lock.

    Every operation, including the batch helpers, runs inside the same
    critical section, so safe_set() and replace_set() are atomic with
    respect to other threads. Batch helpers hold the lock for the whole
    batch but still write pair by pair.
    """

    synchronized = True

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()

    def get(self, key: str) -> str:
        with self._lock:
            return super().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            super().set(key, value)

    def safe_set(self, key: str, value: str) -> None:
        with self._lock:
            super().safe_set(key, value)

    def replace_set(self, key: str, value: str) -> str:
        with self._lock:
            return super().replace_set(key, value)

    def lookup(self, key: str) -> Tuple[str, bool]:
        with self._lock:
            return super().lookup(key)

    def exists(self, key: str) -> bool:
        with self._lock:
            return super().exists(key)

    def get_many(self, keys: Iterable[str]) -> List[str]:
        with self._lock:
            return super().get_many(keys)

    def set_many(self, pairs: Iterable[Tuple[str, str]]) -> None:
        with self._lock:
            super().set_many(pairs)

    def safe_set_many(self, pairs: Iterable[Tuple[str, str]]) -> None:
        with self._lock:
            super().safe_set_many(pairs)

    def size(self) -> int:
        with self._lock:
            return super().size()

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return super().get_stats()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return super().__contains__(key)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


def create_store(synchronized: Optional[bool] = None) -> StringStore:
    """
    Build the store variant selected by configuration.

    Args:
        synchronized: Use the lock-guarded variant (default from
            settings.SYNCHRONIZED)
    """
    if synchronized is None:
        synchronized = settings.SYNCHRONIZED
    return SynchronizedStringStore() if synchronized else StringStore()
