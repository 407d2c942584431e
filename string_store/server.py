#!/usr/bin/env python3
"""
String Store Server Entry Point

Usage:
    python -m string_store.server                    # Default settings (0.0.0.0:7272)
    python -m string_store.server --port 8080        # Custom port
    python -m string_store.server --host 127.0.0.1   # Custom host
    python -m string_store.server --synchronized     # Lock-guarded store
    python -m string_store.server --debug            # Enable debug logging

Environment Variables:
    STRING_STORE_HOST           - Server bind address
    STRING_STORE_PORT           - Server port
    STRING_STORE_SYNCHRONIZED   - Use the lock-guarded store (true/false)
    STRING_STORE_DEBUG          - Enable debug mode (true/false)
    STRING_STORE_LOG_LEVEL      - Log level when not in debug mode
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import List, Optional

from .config.settings import settings
from .network.tcp_server import StoreServer
from .store.strings import create_store


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="String Store: In-Memory String Key-Value Server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.HOST,
        help="Host address to bind to",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Port number to listen on",
    )

    parser.add_argument(
        "--synchronized",
        action="store_true",
        default=settings.SYNCHRONIZED,
        help="Guard every store operation with a lock",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    store = create_store(synchronized=args.synchronized)
    server = StoreServer(host=args.host, port=args.port, store=store)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    async def shutdown(sig: signal.Signals) -> None:
        """Handle shutdown signal."""
        logger.info(f"Received signal {sig.name}, initiating shutdown...")
        await server.stop()

    # Register signal handlers (Unix only)
    if sys.platform != 'win32':
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(
                sig,
                lambda s=sig: asyncio.ensure_future(shutdown(s))
            )

    logger.info("Starting String Store server")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  Synchronized: {args.synchronized}")
    logger.info(f"  Debug: {args.debug}")

    try:
        loop.run_until_complete(server.start())
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
        loop.run_until_complete(server.stop())
    except Exception as e:
        logger.error(f"Server error: {e}")
        raise
    finally:
        loop.run_until_complete(loop.shutdown_asyncgens())
        loop.close()
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
