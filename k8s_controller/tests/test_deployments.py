import io
import json

from urllib3.exceptions import MaxRetryError, NewConnectionError

from conftest import NOW, make_deployment
from k8s_controller.k8s.client import Client
from k8s_controller.k8s.fake import FakeSession
from k8s_controller.models import ClientConfig, ListOptions
from k8s_controller.modules.connection import run_connection_test
from k8s_controller.modules.deployments import run_list_deployments


def factory_for(session, created=None):
    def factory(config, logger):
        if created is not None:
            created.append(config)
        return Client(session, None, logger, now=lambda: NOW)
    return factory


def run(session, opts, fmt, logger, created=None):
    out = io.StringIO()
    code = run_list_deployments(ClientConfig(), opts, fmt, timeout=30, logger=logger, out=out,
                                client_factory=factory_for(session, created))
    return code, out.getvalue()


def two_namespaces():
    return FakeSession(deployments=[
        make_deployment(name="web", namespace="default"),
        make_deployment(name="api", namespace="prod"),
    ])


def test_table_across_all_namespaces(logger):
    code, out = run(two_namespaces(), ListOptions(), "table", logger)
    lines = out.splitlines()

    assert code == 0
    assert lines[0].startswith("NAMESPACE")
    assert len(lines) == 3


def test_single_namespace_table_has_no_namespace_column(logger):
    code, out = run(two_namespaces(), ListOptions(namespace="default"), "table", logger)

    assert code == 0
    assert out.splitlines()[0].startswith("NAME ")
    assert len(out.splitlines()) == 2


def test_json_output(logger):
    code, out = run(two_namespaces(), ListOptions(), "json", logger)
    doc = json.loads(out)

    assert code == 0
    assert doc["count"] == 2
    assert [item["name"] for item in doc["items"]] == ["web", "api"]


def test_missing_namespace_is_classified(logger):
    session = FakeSession(namespaces=["default"])
    code, out = run(session, ListOptions(namespace="missing-ns"), "table", logger)

    assert code == 1
    assert out == ""
    error = logger.fields("Failed to list deployments")["error"]
    assert "namespace 'missing-ns' not found" in error


def test_connection_refused_is_classified(logger):
    cause = NewConnectionError(None, "Failed to establish a new connection: [Errno 111] Connection refused")
    session = FakeSession(failures={"list_deployments": MaxRetryError(None, "/apis", reason=cause)})
    code, out = run(session, ListOptions(), "json", logger)

    assert code == 1
    assert out == ""
    assert "cannot reach the Kubernetes API" in logger.fields("Failed to list deployments")["error"]


def test_validation_happens_before_any_client_is_built(logger):
    created = []
    session = two_namespaces()

    code, _ = run(session, ListOptions(), "JSON", logger, created)
    assert code == 1
    code, _ = run(session, ListOptions(namespace="Bad_NS"), "table", logger, created)
    assert code == 1

    assert created == []
    assert session.calls == []


def test_client_closed_after_failure(logger):
    session = FakeSession(namespaces=["default"])
    run(session, ListOptions(namespace="missing-ns"), "table", logger)
    assert session.closed == 1


def test_client_closed_after_success(logger):
    session = two_namespaces()
    run(session, ListOptions(), "yaml", logger)
    assert session.closed == 1


def test_connection_test_success(logger):
    session = FakeSession()
    code = run_connection_test(ClientConfig(), timeout=3, logger=logger,
                               client_factory=factory_for(session))

    assert code == 0
    assert session.calls[0][1]["timeout"] <= 3
    assert session.closed == 1


def test_connection_test_failure(logger):
    session = FakeSession(failures={"list_namespaces": OSError("Connection refused")})
    code = run_connection_test(ClientConfig(), timeout=5, logger=logger,
                               client_factory=factory_for(session))

    assert code == 1
    assert "Connection test failed" in logger.messages("error")


def test_connection_test_config_error(tmp_path, logger):
    code = run_connection_test(ClientConfig(kubeconfig_path=str(tmp_path / "missing")), logger=logger)
    assert code == 1
