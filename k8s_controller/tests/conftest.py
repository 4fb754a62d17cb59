from datetime import datetime, timedelta, timezone

import pytest
from kubernetes.client import (
    V1Container,
    V1Deployment,
    V1DeploymentSpec,
    V1DeploymentStatus,
    V1LabelSelector,
    V1ObjectMeta,
    V1PodSpec,
    V1PodTemplateSpec,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

KUBECONFIG = """
apiVersion: v1
kind: Config
current-context: dev
clusters:
- name: dev-cluster
  cluster:
    server: https://dev.example.com:6443
- name: prod-cluster
  cluster:
    server: https://prod.example.com:6443
contexts:
- name: dev
  context:
    cluster: dev-cluster
    user: dev-user
- name: prod
  context:
    cluster: prod-cluster
    user: prod-user
users:
- name: dev-user
  user:
    token: dev-token
- name: prod-user
  user:
    token: prod-token
"""


def make_deployment(name="web", namespace="default", images=("nginx:1.21",),
                    init_images=(), desired=3, available=3, ready=3,
                    age=timedelta(days=2)):
    containers = [V1Container(name=f"c{i}", image=image) for i, image in enumerate(images)]
    init_containers = [V1Container(name=f"init{i}", image=image) for i, image in enumerate(init_images)]
    return V1Deployment(
        metadata=V1ObjectMeta(name=name, namespace=namespace, creation_timestamp=NOW - age),
        spec=V1DeploymentSpec(
            replicas=desired,
            selector=V1LabelSelector(match_labels={"app": name}),
            template=V1PodTemplateSpec(
                spec=V1PodSpec(containers=containers, init_containers=init_containers or None)
            ),
        ),
        status=V1DeploymentStatus(available_replicas=available, ready_replicas=ready),
    )


class RecordingLogger:
    """LoggingPort that keeps entries for assertions."""

    def __init__(self):
        self.entries = []

    def _log(self, level, msg, fields):
        self.entries.append((level, msg, fields))

    def debug(self, msg, **fields):
        self._log("debug", msg, fields)

    def info(self, msg, **fields):
        self._log("info", msg, fields)

    def warning(self, msg, **fields):
        self._log("warning", msg, fields)

    def error(self, msg, **fields):
        self._log("error", msg, fields)

    def messages(self, level=None):
        return [m for lvl, m, _ in self.entries if level is None or lvl == level]

    def fields(self, msg):
        return next(f for _, m, f in self.entries if m == msg)


@pytest.fixture(autouse=True)
def isolated_kube_env(monkeypatch, tmp_path):
    """Keep tests away from a real cluster, kubeconfig or service account."""
    monkeypatch.delenv("KUBERNETES_SERVICE_HOST", raising=False)
    monkeypatch.delenv("KUBERNETES_SERVICE_PORT", raising=False)
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def kubeconfig_file(tmp_path):
    path = tmp_path / "kubeconfig.yaml"
    path.write_text(KUBECONFIG)
    return path
