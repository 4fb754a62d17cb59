"""In-memory ApiSession for exercising the client without a cluster."""
from typing import Any, Dict, List, Optional

from kubernetes.client import V1Namespace, V1ObjectMeta
from kubernetes.client.rest import ApiException

from .session import ApiSession


class FakeSession(ApiSession):
    """Serves canned deployments and raises injected failures.

    ``failures`` maps a method name (``list_namespaces``, ``server_version``,
    ``list_deployments``) to the exception that method should raise. Every
    call is recorded in ``calls`` as ``(method, kwargs)``.
    """

    def __init__(self, deployments: Optional[List[Any]] = None,
                 namespaces: Optional[List[str]] = None,
                 version: str = "v1.30.0",
                 failures: Optional[Dict[str, BaseException]] = None):
        self.deployments = list(deployments or [])
        self.namespaces = namespaces
        self.version = version
        self.failures = dict(failures or {})
        self.calls = []
        self.closed = 0

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append((method, kwargs))
        failure = self.failures.get(method)
        if failure is not None:
            raise failure

    def list_namespaces(self, limit, timeout):
        self._record("list_namespaces", limit=limit, timeout=timeout)
        names = self.namespaces
        if names is None:
            names = sorted({d.metadata.namespace for d in self.deployments})
        return [V1Namespace(metadata=V1ObjectMeta(name=n)) for n in names[:limit]]

    def server_version(self, timeout):
        self._record("server_version", timeout=timeout)
        return self.version

    def list_deployments(self, namespace, label_selector, field_selector, timeout):
        self._record("list_deployments", namespace=namespace,
                     label_selector=label_selector, field_selector=field_selector,
                     timeout=timeout)
        if namespace and self.namespaces is not None and namespace not in self.namespaces:
            raise ApiException(status=404, reason=f'namespaces "{namespace}" not found')
        if not namespace:
            return list(self.deployments)
        return [d for d in self.deployments if d.metadata.namespace == namespace]

    def close(self):
        self.closed += 1
