import pytest

from k8s_controller.errors import ValidationError
from k8s_controller.models import OutputFormat
from k8s_controller.modules.validate import (
    validate_namespace,
    validate_output_format,
    validate_port,
    validate_timeout,
)


@pytest.mark.parametrize("namespace", [
    "",
    "default",
    "kube-system",
    "a",
    "ns-1-2-3",
    "0abc",
    "a" * 63,
])
def test_valid_namespaces(namespace):
    validate_namespace(namespace)


@pytest.mark.parametrize("namespace, reason", [
    ("a" * 64, "too long"),
    ("Default", "invalid character 'D'"),
    ("my_ns", "invalid character '_'"),
    ("ns.prod", "invalid character '.'"),
    ("-leading", "cannot start or end with hyphen"),
    ("trailing-", "cannot start or end with hyphen"),
    ("-", "cannot start or end with hyphen"),
])
def test_invalid_namespaces(namespace, reason):
    with pytest.raises(ValidationError) as exc:
        validate_namespace(namespace)
    assert reason in str(exc.value)


def test_namespace_length_checked_before_characters():
    with pytest.raises(ValidationError, match="too long"):
        validate_namespace("A" * 64)


def test_namespace_first_violation_wins():
    # '-' at position 0 comes before the uppercase letter
    with pytest.raises(ValidationError, match="hyphen"):
        validate_namespace("-Abc")


@pytest.mark.parametrize("fmt, expected", [
    ("table", OutputFormat.TABLE),
    ("json", OutputFormat.JSON),
    ("yaml", OutputFormat.YAML),
])
def test_valid_output_formats(fmt, expected):
    assert validate_output_format(fmt) is expected


@pytest.mark.parametrize("fmt", ["", "JSON", "Table", "yml", "csv", " json", "wide"])
def test_invalid_output_formats(fmt):
    with pytest.raises(ValidationError, match="must be one of: table, json, yaml"):
        validate_output_format(fmt)


def test_timeout_must_be_positive():
    validate_timeout(1)
    with pytest.raises(ValidationError):
        validate_timeout(0)


@pytest.mark.parametrize("port", [0, -1, 65536])
def test_invalid_ports(port):
    with pytest.raises(ValidationError, match="between 1 and 65535"):
        validate_port(port)


def test_valid_port_bounds():
    validate_port(1)
    validate_port(65535)
