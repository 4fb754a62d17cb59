"""Input validation run before any Kubernetes API call."""
from ..errors import ValidationError
from ..models import OutputFormat

MAX_NAMESPACE_LENGTH = 63


def _is_namespace_char(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('0' <= ch <= '9') or ch == '-'


def validate_namespace(namespace: str) -> None:
    """Check a namespace name against DNS label rules. Empty means all namespaces."""
    if not namespace:
        return

    if len(namespace) > MAX_NAMESPACE_LENGTH:
        raise ValidationError(
            f"namespace name too long (max {MAX_NAMESPACE_LENGTH} characters)"
        )

    last = len(namespace) - 1
    for pos, ch in enumerate(namespace):
        if not _is_namespace_char(ch):
            raise ValidationError(
                f"namespace name contains invalid character '{ch}' "
                "(must be lowercase alphanumeric with hyphens)"
            )
        if ch == '-' and pos in (0, last):
            raise ValidationError("namespace name cannot start or end with hyphen")


def validate_output_format(fmt: str) -> OutputFormat:
    """Return the matching OutputFormat; matching is exact and case-sensitive."""
    for member in OutputFormat:
        if fmt == member.value:
            return member
    allowed = ", ".join(m.value for m in OutputFormat)
    raise ValidationError(f"unsupported format '{fmt}', must be one of: {allowed}")


def validate_timeout(seconds: int) -> None:
    if seconds <= 0:
        raise ValidationError(f"invalid timeout: {seconds}, must be a positive number of seconds")


def validate_port(port: int) -> None:
    """Valid TCP ports are 1-65535."""
    if port <= 0 or port > 65535:
        raise ValidationError(f"invalid port number: {port}, must be between 1 and 65535")
