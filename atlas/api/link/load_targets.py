"""Load link targets from a JSON file (UNO: single function)."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .LinkTarget import LinkTarget

_TARGETS_ADAPTER = TypeAdapter(list[LinkTarget])


def load_targets(path: Path) -> list[LinkTarget]:
    """Load and validate link targets.

    The file holds either a JSON array of targets or an object with a
    ``targets`` array.

    Raises:
        ValueError: If the JSON is invalid or a target fails validation
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in targets file {path}: {e}") from e

    if isinstance(raw, dict) and "targets" in raw:
        raw = raw["targets"]

    try:
        return _TARGETS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(x) for x in first.get("loc", ()))
        detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
        raise ValueError(f"Invalid link target in {path}: {detail}") from e
