"""Error types raised by the k8s-controller core."""
from typing import Optional


class K8sControllerError(Exception):
    """Base error; ``cause`` keeps the underlying failure inspectable."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ConfigError(K8sControllerError):
    """Kubeconfig unreadable or invalid, or the requested context is unknown."""

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.path = path


class ClusterConnectionError(K8sControllerError):
    """The Kubernetes API could not be reached, timed out or the call was cancelled."""


class ValidationError(K8sControllerError):
    """User input rejected before any network activity."""


class APIError(K8sControllerError):
    """A list call failed for reasons other than connectivity."""

    def __init__(self, message: str, namespace: str = "",
                 cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.namespace = namespace


class OutputError(K8sControllerError):
    """Rendering failed."""
