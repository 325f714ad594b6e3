"""CLI for the hello-world target server."""

import argparse
import logging
from typing import List, Optional

from ..sweeps.presets import SERVER_DEFAULTS
from ..target.server import run_server


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the serve CLI."""
    parser = argparse.ArgumentParser(
        prog="abbench serve",
        description="Serve a fixed 'Hello, world' response to benchmark against",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=SERVER_DEFAULTS["host"],
        help=f"Address to bind (default: {SERVER_DEFAULTS['host']})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=SERVER_DEFAULTS["port"],
        help=f"Port to listen on (default: {SERVER_DEFAULTS['port']})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    run_server(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    main()
