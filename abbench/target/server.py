"""Minimal HTTP server to point the load-testing tools at."""

import logging

from aiohttp import web

HELLO_BODY = "Hello, world\n"

logger = logging.getLogger(__name__)


async def hello(request: web.Request) -> web.Response:
    return web.Response(text=HELLO_BODY)


def create_app() -> web.Application:
    """Build an application that answers every GET with a fixed body."""
    app = web.Application()
    app.router.add_get("/{tail:.*}", hello)
    return app


def run_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve until interrupted."""
    logger.info(f"Serving on http://{host}:{port}/")
    web.run_app(create_app(), host=host, port=port, print=None, access_log=None)
