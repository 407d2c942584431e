"""Store module for String Store."""

from .strings import StringStore, SynchronizedStringStore, create_store

__all__ = ["StringStore", "SynchronizedStringStore", "create_store"]
