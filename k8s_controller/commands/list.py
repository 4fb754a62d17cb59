import typer

from ..config import Config
from ..models import ClientConfig, ListOptions
from ..modules.deployments import run_list_deployments

app = typer.Typer(help="List Kubernetes resources")


@app.command("deployments")
def list_deployments(
    namespace: str = typer.Option("", "--namespace", "-n", help="Kubernetes namespace (default: all namespaces)"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table|json|yaml)"),
    selector: str = typer.Option("", "--selector", "-l", help="Label selector to filter deployments"),
    field_selector: str = typer.Option("", "--field-selector", help="Field selector to filter deployments"),
    kubeconfig: str = typer.Option("", "--kubeconfig", help="Path to kubeconfig file (default: $KUBECONFIG or $HOME/.kube/config)"),
    context: str = typer.Option("", "--context", help="Kubernetes context to use (default: current context from kubeconfig)"),
    timeout: int = typer.Option(Config.K8S_TIMEOUT, "--timeout", help="Timeout for Kubernetes operations in seconds"),
):
    """List deployments in a namespace or across all namespaces.

    Examples:
      k8s-controller list deployments
      k8s-controller list deployments -n kube-system -o yaml
      k8s-controller list deployments -l app=nginx --kubeconfig ~/.kube/dev
    """
    config = ClientConfig(kubeconfig_path=kubeconfig or None, context=context or None)
    opts = ListOptions(namespace=namespace, label_selector=selector, field_selector=field_selector)

    code = run_list_deployments(config, opts, output, timeout=timeout)
    if code:
        raise typer.Exit(code)
