"""Rendering of display records as a table, JSON or YAML."""
import json
from datetime import timedelta
from typing import Any, Dict, List, Sequence

import yaml

from ..errors import OutputError
from ..models import DisplayRecord, OutputFormat

LIST_KIND = "DeploymentList"
LIST_API_VERSION = "apps/v1"
NO_RECORDS = "No deployments found."
COLUMN_PADDING = 2

ALL_NAMESPACES_HEADER = ["NAMESPACE", "NAME", "READY", "UP-TO-DATE", "AVAILABLE", "AGE", "IMAGES"]
NAMESPACED_HEADER = ALL_NAMESPACES_HEADER[1:]


def format_age(age: timedelta) -> str:
    """Human-scale age in the style of kubectl: 59s, 5m, 3h, 2d."""
    seconds = int(age.total_seconds())
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"
    return f"{seconds // 86400}d"


def truncate(text: str, max_len: int) -> str:
    """Cut ``text`` to at most ``max_len`` characters, ending in '...' when there is room."""
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[:max_len - 3] + "..."


def format_images(images: Sequence[str]) -> str:
    if not images:
        return "<none>"
    if len(images) == 1:
        return truncate(images[0], 40)
    if len(images) <= 3:
        return ",".join(truncate(image, 30) for image in images)
    first = truncate(images[0], 25)
    second = truncate(images[1], 25)
    return f"{first},{second} +{len(images) - 2} more"


def _align(rows: List[List[str]]) -> str:
    """Left-align columns; every column but the last is padded."""
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i] + COLUMN_PADDING) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def render_table(records: Sequence[DisplayRecord], all_namespaces: bool) -> str:
    """Table output; the NAMESPACE column appears only for all-namespace requests."""
    if not records:
        return NO_RECORDS + "\n"

    rows = [list(ALL_NAMESPACES_HEADER if all_namespaces else NAMESPACED_HEADER)]
    for record in records:
        row = [
            record.name,
            f"{record.replicas.ready}/{record.replicas.desired}",
            str(record.replicas.ready),
            str(record.replicas.available),
            format_age(record.age),
            format_images(record.images),
        ]
        if all_namespaces:
            row.insert(0, record.namespace)
        rows.append(row)
    return _align(rows)


def build_envelope(records: Sequence[DisplayRecord]) -> Dict[str, Any]:
    items = [record.to_dict() for record in records]
    return {
        "kind": LIST_KIND,
        "apiVersion": LIST_API_VERSION,
        "items": items,
        "count": len(items),
    }


def render_json(records: Sequence[DisplayRecord]) -> str:
    try:
        return json.dumps(build_envelope(records), indent=2) + "\n"
    except (TypeError, ValueError) as e:
        raise OutputError(f"failed to marshal JSON: {e}", cause=e)


def render_yaml(records: Sequence[DisplayRecord]) -> str:
    try:
        return yaml.safe_dump(build_envelope(records), sort_keys=False, default_flow_style=False)
    except yaml.YAMLError as e:
        raise OutputError(f"failed to marshal YAML: {e}", cause=e)


def render(records: Sequence[DisplayRecord], fmt: OutputFormat, all_namespaces: bool) -> str:
    """Render ``records`` in ``fmt``.

    Raises:
        OutputError: on serialization failure or an unsupported format.
    """
    if fmt == OutputFormat.TABLE:
        return render_table(records, all_namespaces)
    if fmt == OutputFormat.JSON:
        return render_json(records)
    if fmt == OutputFormat.YAML:
        return render_yaml(records)
    raise OutputError(f"unsupported output format: {fmt}")
