"""Listing deployments end to end: validate, fetch, render."""
import sys
from typing import Callable, List, Optional, TextIO

from ..config import Config
from ..errors import APIError, ClusterConnectionError, K8sControllerError
from ..k8s.client import Client
from ..k8s.context import RequestContext
from ..logging import LoggingPort, get_logger
from ..models import ClientConfig, DisplayRecord, ListOptions, OutputFormat
from .diagnose import classify
from .output import render
from .validate import validate_namespace, validate_output_format, validate_timeout

ClientFactory = Callable[[ClientConfig, LoggingPort], Client]


def validate_list_parameters(opts: ListOptions, fmt: str, timeout: int) -> OutputFormat:
    """Check user input before touching the network; returns the parsed format."""
    output_format = validate_output_format(fmt)
    validate_namespace(opts.namespace)
    validate_timeout(timeout)
    return output_format


def fetch_deployments(client: Client, opts: ListOptions, timeout: int) -> List[DisplayRecord]:
    """List deployments, rewriting client failures into actionable errors."""
    ctx = RequestContext.with_timeout(timeout)
    try:
        return client.list_deployments(ctx, opts)
    except (ClusterConnectionError, APIError) as e:
        raise classify(e, opts.namespace) from e


def list_deployments_output(config: ClientConfig, opts: ListOptions, fmt: str,
                            timeout: int, logger: LoggingPort,
                            client_factory: ClientFactory = Client.create) -> str:
    """Return rendered output for the requested deployments.

    Raises:
        K8sControllerError: for validation, configuration, API or output failures.
    """
    output_format = validate_list_parameters(opts, fmt, timeout)

    with client_factory(config, logger) as client:
        records = fetch_deployments(client, opts, timeout)

    return render(records, output_format, opts.all_namespaces)


def run_list_deployments(config: ClientConfig, opts: ListOptions, fmt: str,
                         timeout: int = Config.K8S_TIMEOUT,
                         logger: Optional[LoggingPort] = None,
                         out: Optional[TextIO] = None,
                         client_factory: ClientFactory = Client.create) -> int:
    """Run a deployment listing and return the process exit code."""
    logger = logger or get_logger("k8s_controller.deployments")
    logger.info(
        "Listing deployments",
        namespace=opts.namespace,
        output=fmt,
        label_selector=opts.label_selector,
    )

    try:
        rendered = list_deployments_output(config, opts, fmt, timeout, logger, client_factory)
    except K8sControllerError as e:
        logger.error("Failed to list deployments", error=str(e))
        return 1

    (out or sys.stdout).write(rendered)
    return 0
