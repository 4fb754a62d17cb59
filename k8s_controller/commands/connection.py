import typer

from ..config import Config
from ..models import ClientConfig
from ..modules.connection import run_connection_test


def connection(
    kubeconfig: str = typer.Option("", "--kubeconfig", help="Path to kubeconfig file (default: $KUBECONFIG or $HOME/.kube/config)"),
    context: str = typer.Option("", "--context", help="Kubernetes context to use (default: current context from kubeconfig)"),
    timeout: int = typer.Option(Config.K8S_CONNECTION_TIMEOUT, "--timeout", help="Connection timeout in seconds"),
):
    """Test connectivity to the Kubernetes API server."""
    config = ClientConfig(kubeconfig_path=kubeconfig or None, context=context or None)
    code = run_connection_test(config, timeout=timeout)
    if code:
        raise typer.Exit(code)
    typer.echo("✅ Connection test successful! Kubernetes API is reachable.")
