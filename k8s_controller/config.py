"""Configuration management for the k8s-controller application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # Timeouts (in seconds)
    K8S_TIMEOUT: int = int(os.getenv("K8S_TIMEOUT", "30"))
    K8S_CONNECTION_TIMEOUT: int = int(os.getenv("K8S_CONNECTION_TIMEOUT", "10"))
    K8S_VERSION_TIMEOUT: int = int(os.getenv("K8S_VERSION_TIMEOUT", "5"))

    # Kubeconfig discovery
    KUBECONFIG_ENV: str = "KUBECONFIG"
    DEFAULT_KUBECONFIG: str = os.path.join("~", ".kube", "config")

    # HTTP server
    SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8080"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"
