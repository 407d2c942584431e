"""
Async TCP Server Module

This module exposes a StringStore over the line-oriented text protocol.

Each client connection runs in its own coroutine on a single event loop.
Store calls are synchronous and never await, so two commands never
interleave inside the store even with many clients connected.
"""

import asyncio
import logging
from asyncio import StreamReader, StreamWriter
from typing import Optional

from ..config.settings import settings
from ..protocol.commands import Command, CommandType, Response
from ..protocol.parser import ProtocolParser
from ..store.strings import StringStore, create_store

logger = logging.getLogger(__name__)


class StoreServer:
    """
    Asynchronous TCP server for a StringStore.

    Features:
    - Non-blocking I/O with asyncio
    - Persistent connections (multiple commands per connection)
    - Graceful error handling and connection cleanup
    - One store shared by all connections

    Usage:
        server = StoreServer(host='0.0.0.0', port=7272)
        await server.start()  # Runs until stopped or cancelled

    Attributes:
        host: Server bind address
        port: Server port number
        store: The StringStore instance shared by all connections
        parser: The ProtocolParser for parsing commands
    """

    def __init__(
            self,
            host: str = None,
            port: int = None,
            store: StringStore = None,
    ):
        """
        Initialize the server.

        Args:
            host: Bind address (default from settings)
            port: Port number (default from settings)
            store: Store instance (built from settings if not provided)
        """
        self.host = host if host is not None else settings.HOST
        self.port = port if port is not None else settings.PORT
        self.store = store if store is not None else create_store()
        self.parser = ProtocolParser()

        # Server state
        self._server: Optional[asyncio.Server] = None
        self._running = False
        self._connection_count = 0
        self._total_requests = 0

    async def handle_client(
            self,
            reader: StreamReader,
            writer: StreamWriter
    ) -> None:
        """
        Handle a single client connection.

        Reads one command per line, executes it against the store and
        writes one response line back, until the client disconnects or
        sends QUIT.

        Args:
            reader: StreamReader for reading from the client
            writer: StreamWriter for writing to the client
        """
        addr = writer.get_extra_info('peername')
        self._connection_count += 1
        logger.debug(f"Client connected: {addr}")

        try:
            while True:
                try:
                    data = await reader.readline()
                except ValueError:
                    # Line longer than the stream limit; the rest of it is unreadable
                    logger.warning(f"Request line too long from {addr}")
                    await self._send(writer, Response.error("line too long"))
                    break

                if not data:
                    logger.debug(f"Client disconnected: {addr}")
                    break

                try:
                    raw = data.decode().rstrip('\r\n')
                except UnicodeDecodeError:
                    await self._send(writer, Response.error("invalid encoding"))
                    continue

                command = self.parser.parse_request(raw)

                if command.type == CommandType.QUIT:
                    logger.debug(f"Client requested quit: {addr}")
                    break

                if not command.is_valid:
                    response = Response.error("invalid command")
                else:
                    self._total_requests += 1
                    response = self._execute_command(command)

                await self._send(writer, response)

        except ConnectionResetError:
            logger.debug(f"Connection reset by client: {addr}")
        except Exception as exc:  # Log unexpected errors but keep server alive
            logger.exception(f"Error handling client {addr}: {exc}")
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except (ConnectionError, OSError):
                pass

    async def _send(self, writer: StreamWriter, response: Response) -> None:
        writer.write(self.parser.format_response(response).encode())
        await writer.drain()

    def _execute_command(self, command: Command) -> Response:
        """
        Execute a parsed, valid command on the store.

        Args:
            command: The Command object to execute

        Returns:
            Response object with the result
        """
        if command.type == CommandType.GET:
            return self._value_response(self.store.get(command.key))

        if command.type == CommandType.SET:
            self.store.set(command.key, command.value)
            return Response.stored()

        if command.type == CommandType.SAFESET:
            self.store.safe_set(command.key, command.value)
            return Response.stored()

        if command.type == CommandType.REPLACESET:
            previous = self.store.replace_set(command.key, command.value)
            return self._value_response(previous)

        if command.type == CommandType.EXISTS:
            return Response.exists_response(self.store.exists(command.key))

        return Response.error("invalid command")

    def _value_response(self, value: str) -> Response:
        """
        Wrap a stored value for the wire.

        A value holding a line break cannot be sent on one response line,
        so it is reported as an error instead of splitting the stream.
        """
        if "\n" in value or "\r" in value:
            return Response.error("value not representable")
        return Response.value_response(value)

    async def start(self) -> None:
        """
        Start the server and begin accepting connections.

        Runs until stop() is called or the task is cancelled.

        Example:
            server = StoreServer(port=7272)
            asyncio.run(server.start())
        """
        if self._running:
            return

        self._server = await asyncio.start_server(
            self.handle_client,
            self.host,
            self.port,
            limit=settings.READ_BUFFER_SIZE,
        )
        self._running = True

        addrs = ', '.join(str(sock.getsockname()) for sock in self._server.sockets or [])
        logger.info(f"Serving on {addrs}")

        try:
            async with self._server:
                await self._server.serve_forever()
        except asyncio.CancelledError:
            # Expected during shutdown
            logger.debug("Server start cancelled")
        finally:
            self._running = False

    async def stop(self) -> None:
        """Close the listening socket and wait for it to shut down."""
        if self._server is None:
            return

        self._server.close()
        try:
            await self._server.wait_closed()
        finally:
            self._server = None
            self._running = False

    def is_running(self) -> bool:
        """Check if the server is currently running."""
        return self._running

    def get_stats(self) -> dict:
        """
        Get server statistics.

        Returns:
            Dictionary with connection and request counts plus the
            store's own stats.
        """
        return {
            "running": self._running,
            "host": self.host,
            "port": self.port,
            "total_connections": self._connection_count,
            "total_requests": self._total_requests,
            "store_stats": self.store.get_stats(),
        }


async def run_server(host: str = None, port: int = None, store: StringStore = None) -> None:
    """
    Convenience function to create and run the server.

    Usage:
        asyncio.run(run_server(port=7272))
    """
    server = StoreServer(host=host, port=port, store=store)

    try:
        await server.start()
    except asyncio.CancelledError:
        logger.info("Server shutdown requested")
    finally:
        await server.stop()
