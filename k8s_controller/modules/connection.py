"""Kubernetes API connectivity check."""
from typing import Callable, Optional

from ..config import Config
from ..errors import K8sControllerError
from ..k8s.client import Client
from ..k8s.context import RequestContext
from ..logging import LoggingPort, get_logger
from ..models import ClientConfig
from .validate import validate_timeout


def run_connection_test(config: ClientConfig,
                        timeout: int = Config.K8S_CONNECTION_TIMEOUT,
                        logger: Optional[LoggingPort] = None,
                        client_factory: Callable[[ClientConfig, LoggingPort], Client] = Client.create) -> int:
    """Create a client, ping the API server and return the process exit code."""
    logger = logger or get_logger("k8s_controller.connection")
    logger.info("Testing Kubernetes API connection...")

    try:
        validate_timeout(timeout)
        ctx = RequestContext.with_timeout(timeout)
        with client_factory(config, logger) as client:
            client.test_connection(ctx)
    except K8sControllerError as e:
        logger.error("Connection test failed", error=str(e))
        return 1

    logger.info("Connection test successful! Kubernetes API is reachable.")
    return 0
