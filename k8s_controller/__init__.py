"""k8s-controller - inspect Kubernetes deployments and API connectivity."""

__version__ = "0.1.0"
