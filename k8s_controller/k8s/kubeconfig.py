"""Kubeconfig discovery and connection resolution.

Precedence: in-cluster config > explicit kubeconfig path > $KUBECONFIG > ~/.kube/config.
"""
import os
from typing import List, Optional, Tuple

import yaml
from kubernetes import config as kube_config
from kubernetes.client import Configuration
from kubernetes.config.config_exception import ConfigException
from kubernetes.config.kube_config import ConfigNode, KubeConfigMerger

from ..config import Config
from ..errors import ConfigError
from ..logging import LoggingPort
from ..models import ClientConfig, ConnectionParameters


def load_incluster(logger: LoggingPort) -> Optional[ConnectionParameters]:
    """Return in-cluster parameters, or None when not running inside a pod."""
    configuration = Configuration()
    try:
        kube_config.load_incluster_config(client_configuration=configuration)
    except ConfigException as e:
        logger.debug("In-cluster configuration not available", reason=str(e))
        return None
    logger.info("Using in-cluster Kubernetes configuration", host=configuration.host)
    return ConnectionParameters(configuration=configuration, source="in-cluster")


def explicit_kubeconfig_path(path: str) -> str:
    """Expand a user supplied path and make sure it can be read."""
    resolved = os.path.abspath(os.path.expanduser(path))
    if not os.path.isfile(resolved):
        raise ConfigError(f"kubeconfig file not found at {resolved}", path=resolved)
    if not os.access(resolved, os.R_OK):
        raise ConfigError(f"kubeconfig file is not readable: {resolved}", path=resolved)
    return resolved


def candidate_kubeconfig_paths() -> List[str]:
    """Paths from $KUBECONFIG, or the default location under the home directory."""
    env_value = os.environ.get(Config.KUBECONFIG_ENV, "")
    paths = [p for p in env_value.split(os.pathsep) if p]
    if not paths:
        paths = [Config.DEFAULT_KUBECONFIG]
    return [os.path.expanduser(p) for p in paths]


def default_kubeconfig_path() -> str:
    """Join the existing candidate paths so the kubernetes loader merges them."""
    candidates = candidate_kubeconfig_paths()
    existing = [p for p in candidates if os.path.isfile(p)]
    if not existing:
        attempted = os.pathsep.join(candidates)
        raise ConfigError(f"kubeconfig file not found at {attempted}", path=attempted)
    return os.pathsep.join(existing)


def read_contexts(path: str) -> Tuple[List[dict], Optional[str]]:
    """Merged contexts and the current-context name, which may be unset or stale."""
    merged = KubeConfigMerger(path).config
    if merged is None:
        raise ConfigException("Invalid kube-config file. No configuration found.")
    raw = merged.value
    contexts = [c.value if isinstance(c, ConfigNode) else c for c in raw.get("contexts") or []]
    return contexts, raw.get("current-context") or None


def load_from_kubeconfig(path: str, context: Optional[str],
                         logger: LoggingPort) -> ConnectionParameters:
    """Load ``path`` into a fresh Configuration, selecting ``context`` if given."""
    logger.debug("Loading kubeconfig from file", path=path)
    configuration = Configuration()
    try:
        contexts, current = read_contexts(path)
        name = context or current
        if not name:
            raise ConfigError(f"no current-context set in kubeconfig {path}; pass a context", path=path)
        selected = next((c for c in contexts if c["name"] == name), None)
        if selected is None:
            raise ConfigError(f"context '{name}' not found in kubeconfig {path}", path=path)
        if context:
            logger.debug("Using specified context", context=context)
        kube_config.load_kube_config(
            config_file=path,
            context=name,
            client_configuration=configuration,
            persist_config=False,
        )
    except ConfigError:
        raise
    except (ConfigException, yaml.YAMLError, OSError, KeyError, TypeError, AttributeError) as e:
        raise ConfigError(f"failed to load kubeconfig from {path}: {e}", path=path, cause=e)

    cluster = (selected.get("context") or {}).get("cluster")
    logger.info("Loaded Kubernetes configuration", context=name, cluster=cluster)
    return ConnectionParameters(
        configuration=configuration,
        source="kubeconfig",
        path=path,
        context=name,
        cluster=cluster,
    )


def resolve_connection(config: ClientConfig, logger: LoggingPort) -> ConnectionParameters:
    """Work out how to reach the Kubernetes API.

    Raises:
        ConfigError: if no usable configuration is found.
    """
    logger.debug("Loading Kubernetes configuration")

    params = load_incluster(logger)
    if params is not None:
        return params

    if config.kubeconfig_path:
        path = explicit_kubeconfig_path(config.kubeconfig_path)
    else:
        path = default_kubeconfig_path()

    return load_from_kubeconfig(path, config.context, logger)
