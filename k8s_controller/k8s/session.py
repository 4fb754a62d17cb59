"""Session handles for talking to the Kubernetes API."""
import abc
from typing import Any, List, Optional

from kubernetes import client

from ..models import ConnectionParameters


class ApiSession(abc.ABC):
    """The subset of the Kubernetes API the client needs.

    ``timeout`` is the per-request timeout in seconds, or None for no bound.
    Implementations let transport and API errors propagate unchanged.
    """

    @abc.abstractmethod
    def list_namespaces(self, limit: int, timeout: Optional[float]) -> List[Any]:
        """Return up to ``limit`` namespaces."""

    @abc.abstractmethod
    def server_version(self, timeout: Optional[float]) -> str:
        """Return the API server's git version string."""

    @abc.abstractmethod
    def list_deployments(self, namespace: str, label_selector: str,
                         field_selector: str, timeout: Optional[float]) -> List[Any]:
        """Return deployments in ``namespace``, or in all namespaces when it is empty."""

    def close(self) -> None:
        """Release any held resources."""


def _selectors(label_selector: str, field_selector: str) -> dict:
    kwargs = {}
    if label_selector:
        kwargs['label_selector'] = label_selector
    if field_selector:
        kwargs['field_selector'] = field_selector
    return kwargs


class KubernetesSession(ApiSession):
    """Live session backed by the official kubernetes client."""

    def __init__(self, params: ConnectionParameters):
        self.params = params
        self.api_client = client.ApiClient(configuration=params.configuration)
        self.core = client.CoreV1Api(self.api_client)
        self.apps = client.AppsV1Api(self.api_client)
        self.version = client.VersionApi(self.api_client)

    def list_namespaces(self, limit, timeout):
        return self.core.list_namespace(limit=limit, _request_timeout=timeout).items

    def server_version(self, timeout):
        info = self.version.get_code(_request_timeout=timeout)
        return info.git_version

    def list_deployments(self, namespace, label_selector, field_selector, timeout):
        kwargs = _selectors(label_selector, field_selector)
        if namespace:
            result = self.apps.list_namespaced_deployment(
                namespace, _request_timeout=timeout, **kwargs)
        else:
            result = self.apps.list_deployment_for_all_namespaces(
                _request_timeout=timeout, **kwargs)
        return result.items

    def close(self):
        self.api_client.close()
