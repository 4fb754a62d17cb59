import logging

import typer
import uvicorn

from ..config import Config
from ..errors import ValidationError
from ..modules.validate import validate_port

logger = logging.getLogger("k8s_controller.serve")


def serve(
    port: int = typer.Option(Config.SERVER_PORT, "--port", help="Port to run the server on (1-65535)"),
    host: str = typer.Option(Config.SERVER_HOST, "--host", help="Address to bind to"),
):
    """Start the HTTP server with a /health endpoint."""
    try:
        validate_port(port)
    except ValidationError as e:
        logger.error("Invalid port number: %s", e)
        raise typer.Exit(1)

    logger.info("Starting HTTP server on %s:%d", host, port)
    uvicorn.run("k8s_controller.api.main:app", host=host, port=port,
                log_level=logging.getLevelName(logging.getLogger("k8s_controller").getEffectiveLevel()).lower())
