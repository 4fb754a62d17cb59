from kubernetes.client.rest import ApiException
from urllib3.exceptions import MaxRetryError, NewConnectionError

from k8s_controller.errors import APIError, ClusterConnectionError
from k8s_controller.modules.diagnose import classify


def refused():
    cause = NewConnectionError(None, "Failed to establish a new connection: [Errno 111] Connection refused")
    return MaxRetryError(None, "/apis/apps/v1/deployments", reason=cause)


def test_connection_refused():
    err = ClusterConnectionError("failed to list deployments", cause=refused())
    result = classify(err)

    assert isinstance(result, ClusterConnectionError)
    assert "cannot reach the Kubernetes API" in str(result)
    assert result.cause is err
    assert result.__cause__ is err


def test_forbidden_by_status():
    raw = ApiException(status=403, reason="Forbidden")
    err = APIError("failed to list deployments", namespace="prod", cause=raw)
    result = classify(err, "prod")

    assert isinstance(result, APIError)
    assert "insufficient permissions" in str(result)
    assert "RBAC" in str(result)
    assert result.cause is err


def test_forbidden_by_message():
    result = classify(RuntimeError('deployments.apps is forbidden: User "bob" cannot list'))
    assert "insufficient permissions" in str(result)


def test_namespace_not_found():
    raw = ApiException(status=404, reason='namespaces "missing-ns" not found')
    err = APIError("failed to list deployments", namespace="missing-ns", cause=raw)
    result = classify(err, "missing-ns")

    assert "namespace 'missing-ns' not found" in str(result)
    assert result.namespace == "missing-ns"
    assert result.cause.cause is raw


def test_not_found_without_namespace_is_generic():
    raw = ApiException(status=404, reason="Not Found")
    result = classify(APIError("boom", cause=raw), "")

    assert str(result).startswith("failed to list deployments")


def test_unknown_failure_is_wrapped():
    raw = ValueError("unexpected payload")
    result = classify(raw)

    assert str(result) == "failed to list deployments: unexpected payload"
    assert result.cause is raw


def test_message_reports_underlying_failure():
    raw = ValueError("bad gateway")
    result = classify(APIError("failed to list deployments: bad gateway", cause=raw))
    assert str(result) == "failed to list deployments: bad gateway"
