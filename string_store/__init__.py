"""
String Store: In-Memory String Key-Value Store

A small in-memory store mapping string keys to string values, with an
optional asyncio TCP front end speaking a line-oriented text protocol.
"""

__version__ = "1.0.0"
