"""Network module for String Store."""

from .tcp_server import StoreServer, run_server

__all__ = ["StoreServer", "run_server"]
