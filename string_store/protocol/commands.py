"""
Protocol Command and Response Definitions

This module defines the data structures for protocol commands and responses.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Enumeration of supported command types."""
    GET = auto()
    SET = auto()
    SAFESET = auto()
    REPLACESET = auto()
    EXISTS = auto()
    QUIT = auto()
    UNKNOWN = auto()


# Commands that carry a value after the key
WRITE_COMMANDS = frozenset(
    {CommandType.SET, CommandType.SAFESET, CommandType.REPLACESET}
)


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed protocol command.

    Attributes:
        type: The type of command
        key: The key for the operation (empty for QUIT and UNKNOWN)
        value: The value for write commands ("" when omitted)
        raw: The original raw command string
    """
    type: CommandType
    key: str = ""
    value: str = ""
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        """Check if the command is valid for its type."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type == CommandType.QUIT:
            return True
        # Every other command addresses a key; the value may be empty
        return bool(self.key)


@dataclass
class Response:
    """
    Represents a protocol response.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        value: The value returned (for GET and REPLACESET)
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[str] = None

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def stored(cls) -> "Response":
        """Create a 'stored' response for SET and SAFESET."""
        return cls.ok(message="stored")

    @classmethod
    def exists_response(cls, exists: bool) -> "Response":
        """Create an EXISTS response."""
        return cls.ok(message="1" if exists else "0")

    @classmethod
    def value_response(cls, value: str) -> "Response":
        """Create a response carrying a stored value (possibly empty)."""
        return cls.ok(value=value)
