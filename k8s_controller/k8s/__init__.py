"""
Kubernetes access layer.

Resolves kubeconfig or in-cluster configuration, wraps the API behind a
session interface and exposes the Client used by the commands.
"""

from .client import Client
from .context import RequestContext
from .fake import FakeSession
from .kubeconfig import resolve_connection
from .session import ApiSession, KubernetesSession

__all__ = [
    'Client',
    'RequestContext',
    'ApiSession',
    'KubernetesSession',
    'FakeSession',
    'resolve_connection',
]
