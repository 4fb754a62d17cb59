"""Conversion of raw Deployment objects into display records."""
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Tuple

from ..models import DisplayRecord, Replicas


def extract_images(pod_spec: Any) -> Tuple[str, ...]:
    """Init-container then container images, non-empty and de-duplicated in first-seen order."""
    if pod_spec is None:
        return ()
    seen = {}
    for container in (pod_spec.init_containers or []) + (pod_spec.containers or []):
        image = getattr(container, 'image', None)
        if image and image not in seen:
            seen[image] = True
    return tuple(seen)


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def to_display_record(raw: Any, now: Optional[datetime] = None) -> DisplayRecord:
    """Build a DisplayRecord from a V1Deployment.

    Args:
        raw: A kubernetes ``V1Deployment`` (or an object of the same shape)
        now: Reference time for the age; defaults to the current UTC time

    Returns:
        DisplayRecord with replica counts, age and image list
    """
    now = _as_utc(now or datetime.now(timezone.utc))
    metadata = raw.metadata
    spec = raw.spec
    status = raw.status

    created_at = metadata.creation_timestamp
    created_at = _as_utc(created_at) if created_at else now
    age = max(now - created_at, timedelta(0))

    template = spec.template if spec else None
    pod_spec = template.spec if template else None

    return DisplayRecord(
        name=metadata.name or '',
        namespace=metadata.namespace or '',
        created_at=created_at,
        age=age,
        replicas=Replicas(
            desired=(spec.replicas if spec and spec.replicas is not None else 0),
            available=(status.available_replicas or 0) if status else 0,
            ready=(status.ready_replicas or 0) if status else 0,
        ),
        images=extract_images(pod_spec),
    )


def to_display_records(items: List[Any], now: Optional[datetime] = None) -> List[DisplayRecord]:
    """Transform a list of raw deployments, keeping API order."""
    now = now or datetime.now(timezone.utc)
    return [to_display_record(item, now) for item in items]
