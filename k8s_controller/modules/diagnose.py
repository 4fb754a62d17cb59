"""Turn Kubernetes client failures into actionable messages."""
from typing import Iterator, Optional

from kubernetes.client.rest import ApiException

from ..errors import APIError, ClusterConnectionError, K8sControllerError


def _chain(err: BaseException) -> Iterator[BaseException]:
    seen = set()
    current: Optional[BaseException] = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _status(err: BaseException) -> Optional[int]:
    for exc in _chain(err):
        if isinstance(exc, ApiException):
            return exc.status
    return None


def _mentions(err: BaseException, needle: str) -> bool:
    return any(needle in str(exc).lower() for exc in _chain(err))


def classify(err: BaseException, namespace: str = "") -> K8sControllerError:
    """Wrap ``err`` in an error whose message says what to check.

    Args:
        err: The failure raised while talking to the API
        namespace: The namespace the caller asked for, empty for all namespaces

    Returns:
        A new error whose ``cause`` is ``err``
    """
    status = _status(err)
    # Report the underlying failure rather than an intermediate wrapper
    detail = err.cause if isinstance(err, K8sControllerError) and err.cause else err

    if _mentions(err, "connection refused"):
        return ClusterConnectionError(
            "cannot reach the Kubernetes API - verify the cluster is running "
            f"and reachable: {detail}",
            cause=err,
        )
    if status == 403 or _mentions(err, "forbidden"):
        return APIError(
            "insufficient permissions to list deployments - "
            f"check your RBAC configuration: {detail}",
            namespace=namespace,
            cause=err,
        )
    if namespace and (status == 404 or _mentions(err, "not found")):
        return APIError(
            f"namespace '{namespace}' not found: {detail}",
            namespace=namespace,
            cause=err,
        )
    return APIError(f"failed to list deployments: {detail}", namespace=namespace, cause=err)
