"""
EasyBusy MCP Gateway - FastAPI Application
Exposes EasyBusy booking operations as MCP tools over a JSON-RPC WebSocket.
"""

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from bootstrap import AppContainer, bootstrap, load_config
from src.errors import ConfigurationError
from src.handlers import stream
from src.routers import health, mcp

# Configure Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("easybusy-mcp")


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Unknown paths and unsupported methods both answer a bare 404
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


def create_app(container: Optional[AppContainer] = None) -> FastAPI:
    """Build the gateway app. Without a container, config is read from the environment."""
    if container is None:
        container = bootstrap(load_config())

    app = FastAPI(
        title="EasyBusy MCP Gateway",
        description="MCP tool gateway for the EasyBusy booking API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.container = container

    app.include_router(health.router)
    app.include_router(mcp.router)
    # WS Router
    app.include_router(stream.router)

    if container.config.metrics_enabled:
        app.add_api_route("/metrics", health.metrics, methods=["GET"])

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    return app


def main() -> None:
    try:
        config = load_config()
    except ConfigurationError as e:
        logger.critical(f"{e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    logger.info(f"Startup Config | Upstream: {config.base_url} | Port: {config.port}")

    app = create_app(bootstrap(config))
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
