"""Kubernetes client with connection testing and deployment listing."""
from datetime import datetime, timezone
from typing import Callable, List, Optional

from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from ..config import Config
from ..errors import APIError, ClusterConnectionError
from ..logging import LoggingPort
from ..models import ClientConfig, ConnectionParameters, DisplayRecord, ListOptions
from ..modules.transform import to_display_records
from .context import RequestContext
from .kubeconfig import resolve_connection
from .session import ApiSession, KubernetesSession

TRANSPORT_ERRORS = (HTTPError, OSError)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Client:
    """An authenticated session plus the parameters it was built from.

    One Client serves a single invocation; use it as a context manager so
    the session is released on every exit path.
    """

    def __init__(self, session: ApiSession, params: Optional[ConnectionParameters],
                 logger: LoggingPort, now: Callable[[], datetime] = _utcnow):
        self.session = session
        self.params = params
        self.logger = logger
        self._now = now
        self._closed = False

    @classmethod
    def create(cls, config: ClientConfig, logger: LoggingPort,
               session_factory: Callable[[ConnectionParameters], ApiSession] = KubernetesSession,
               now: Callable[[], datetime] = _utcnow) -> "Client":
        """Resolve the connection and open a session.

        Raises:
            ConfigError: if no usable kubeconfig or in-cluster config is found.
        """
        logger.debug("Creating Kubernetes client")
        params = resolve_connection(config, logger)
        session = session_factory(params)
        client = cls(session, params, logger, now=now)
        logger.info("Kubernetes client created successfully", host=params.host)
        return client

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_active(self, ctx: RequestContext) -> None:
        if ctx.cancelled:
            raise ClusterConnectionError("request cancelled before it completed")
        if ctx.expired:
            raise ClusterConnectionError("request deadline exceeded")

    def test_connection(self, ctx: Optional[RequestContext] = None) -> None:
        """Verify the API server answers a cheap namespace list.

        A caller deadline no more than K8S_CONNECTION_TIMEOUT seconds away is
        used as is; anything looser is tightened to that bound.

        Raises:
            ClusterConnectionError: if the API cannot be reached in time.
        """
        self.logger.debug("Testing Kubernetes API connection")
        ctx = (ctx or RequestContext.background()).bounded(Config.K8S_CONNECTION_TIMEOUT)
        self._ensure_active(ctx)

        try:
            namespaces = self.session.list_namespaces(limit=1, timeout=ctx.remaining())
        except (ApiException,) + TRANSPORT_ERRORS as e:
            self.logger.error("Failed to connect to Kubernetes API", error=str(e))
            raise ClusterConnectionError(f"failed to connect to Kubernetes API: {e}", cause=e)

        if ctx.cancelled:
            raise ClusterConnectionError("request cancelled before it completed")

        version = self.server_version(ctx)
        self.logger.info(
            "Successfully connected to Kubernetes API",
            namespace_count=len(namespaces),
            host=self.params.host if self.params else "",
            server_version=version or "unknown",
        )

    def server_version(self, ctx: Optional[RequestContext] = None) -> Optional[str]:
        """Best-effort server version lookup with its own timeout; None on failure."""
        if ctx is not None and ctx.cancelled:
            return None
        timeout = RequestContext.background().derive(Config.K8S_VERSION_TIMEOUT).remaining()
        try:
            return self.session.server_version(timeout=timeout)
        except (ApiException, ValueError) + TRANSPORT_ERRORS as e:
            self.logger.debug("Could not determine server version", error=str(e))
            return None

    def list_deployments(self, ctx: Optional[RequestContext],
                         opts: ListOptions) -> List[DisplayRecord]:
        """List deployments in one namespace, or all of them when ``opts.namespace`` is empty.

        Raises:
            ClusterConnectionError: on transport failures, cancellation or timeout.
            APIError: when the API rejects the request.
        """
        ctx = ctx or RequestContext.background()
        self._ensure_active(ctx)
        scope = opts.namespace or "<all>"
        self.logger.debug(
            "Listing deployments",
            namespace=scope,
            label_selector=opts.label_selector,
            field_selector=opts.field_selector,
        )

        try:
            items = self.session.list_deployments(
                namespace=opts.namespace,
                label_selector=opts.label_selector,
                field_selector=opts.field_selector,
                timeout=ctx.remaining(),
            )
        except ApiException as e:
            raise APIError(f"failed to list deployments: {e}", namespace=opts.namespace, cause=e)
        except TRANSPORT_ERRORS as e:
            raise ClusterConnectionError(f"failed to list deployments: {e}", cause=e)

        if ctx.cancelled:
            raise ClusterConnectionError("request cancelled before it completed")

        records = to_display_records(items, self._now())
        self.logger.debug("Fetched deployments", namespace=scope, count=len(records))
        return records

    def close(self) -> None:
        """Release the session. Safe to call more than once; never raises."""
        if self._closed:
            return
        self._closed = True
        self.logger.debug("Closing Kubernetes client")
        try:
            self.session.close()
        except Exception as e:
            self.logger.warning("Failed to close Kubernetes client", error=str(e))
