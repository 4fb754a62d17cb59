"""
Data models for deployment listing.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from kubernetes.client import Configuration


class OutputFormat(str, Enum):
    """Supported output formats."""
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


@dataclass(frozen=True)
class ClientConfig:
    """How to locate the kubeconfig and which context to use."""
    kubeconfig_path: Optional[str] = None
    context: Optional[str] = None


@dataclass(frozen=True)
class ConnectionParameters:
    """Resolved connection settings for the Kubernetes API."""
    configuration: Configuration
    source: str  # 'in-cluster' or 'kubeconfig'
    path: Optional[str] = None
    context: Optional[str] = None
    cluster: Optional[str] = None

    @property
    def host(self) -> str:
        return self.configuration.host


@dataclass(frozen=True)
class ListOptions:
    """Filters for a deployment list call. An empty namespace means all namespaces."""
    namespace: str = ""
    label_selector: str = ""
    field_selector: str = ""

    @property
    def all_namespaces(self) -> bool:
        return not self.namespace


@dataclass(frozen=True)
class Replicas:
    desired: int = 0
    available: int = 0
    ready: int = 0


@dataclass(frozen=True)
class DisplayRecord:
    """Presentation-ready view of a deployment."""
    name: str
    namespace: str
    created_at: datetime
    age: timedelta = timedelta(0)
    replicas: Replicas = field(default_factory=Replicas)
    images: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the JSON and YAML outputs."""
        created = self.created_at.astimezone(timezone.utc)
        return {
            'name': self.name,
            'namespace': self.namespace,
            'replicas': {
                'desired': self.replicas.desired,
                'available': self.replicas.available,
                'ready': self.replicas.ready,
            },
            'age': int(self.age.total_seconds()),
            'images': list(self.images),
            'createdAt': created.strftime('%Y-%m-%dT%H:%M:%SZ'),
        }
