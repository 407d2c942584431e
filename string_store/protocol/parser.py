"""
Protocol Parser Module

This module handles parsing of raw protocol commands and formatting of responses.
"""

from .commands import WRITE_COMMANDS, Command, CommandType, Response


class ProtocolParser:
    """
    Parser for the String Store text protocol.

    Protocol Format:
        Request:  <COMMAND> [ARGS...]\n
        Response: <STATUS> [DATA]\n

    Commands:
        GET <key>                 -> OK <value>
        SET <key> [value]         -> OK stored
        SAFESET <key> [value]     -> OK stored
        REPLACESET <key> [value]  -> OK <previous value>
        EXISTS <key>              -> OK 1 | OK 0
        QUIT                      -> (connection closed)

    Keys are a single token without whitespace. A value is everything
    after the key, so it may contain inner spaces; an omitted value is
    the empty string. Missing and empty values both come back as a bare
    "OK".
    """

    _COMMANDS = {
        "GET": CommandType.GET,
        "SET": CommandType.SET,
        "SAFESET": CommandType.SAFESET,
        "REPLACESET": CommandType.REPLACESET,
        "EXISTS": CommandType.EXISTS,
        "QUIT": CommandType.QUIT,
    }

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw request string into a Command object.

        Args:
            data: Raw request string (may include trailing newline)

        Returns:
            Command object representing the parsed request.
            Returns Command with type=UNKNOWN for invalid/malformed requests.

        Examples:
            >>> parser = ProtocolParser()
            >>> cmd = parser.parse_request("SET greeting hello world")
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.key
            'greeting'
            >>> cmd.value
            'hello world'
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        parts = raw.split(maxsplit=2)
        command_type = self._COMMANDS.get(parts[0].upper(), CommandType.UNKNOWN)

        if command_type == CommandType.QUIT:
            # QUIT takes no args
            if len(parts) == 1:
                return Command(type=CommandType.QUIT, raw=raw)
            return Command(type=CommandType.UNKNOWN, raw=raw)

        if command_type in WRITE_COMMANDS:
            return self._parse_write(command_type, parts, raw)

        if command_type in (CommandType.GET, CommandType.EXISTS):
            return self._parse_read(command_type, parts, raw)

        return Command(type=CommandType.UNKNOWN, raw=raw)

    def _parse_write(self, command_type: CommandType, parts: list, raw: str) -> Command:
        """
        Parse SET, SAFESET or REPLACESET.

        Format: <COMMAND> <key> [value]
        """
        if len(parts) < 2:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        value = parts[2] if len(parts) == 3 else ""
        return Command(type=command_type, key=parts[1], value=value, raw=raw)

    def _parse_read(self, command_type: CommandType, parts: list, raw: str) -> Command:
        """
        Parse GET or EXISTS.

        Format: <COMMAND> <key>
        """
        if len(parts) != 2:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(type=command_type, key=parts[1], raw=raw)

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into a protocol string.

        Args:
            response: Response object to format

        Returns:
            Formatted response string WITH trailing newline.

        Examples:
            >>> parser = ProtocolParser()
            >>> parser.format_response(Response.stored())
            'OK stored\\n'
            >>> parser.format_response(Response.value_response(""))
            'OK\\n'
            >>> parser.format_response(Response.error("invalid command"))
            'ERROR invalid command\\n'
        """
        prefix = response.status.value

        # A value (even an empty one) takes precedence over the message
        if response.value is not None:
            body = response.value
        else:
            body = response.message

        if body:
            return f"{prefix} {body}\n"
        return f"{prefix}\n"
