"""Loading of JSON resource files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from storagekit.core.exceptions import ResourceLoadError


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)


def load_resource(path: Path) -> dict[str, Any]:
    """Read a JSON file holding a single API resource.

    Args:
        path: File to read, e.g. the output of ``gcloud storage objects describe
            --format=json``.

    Returns:
        The decoded JSON object.

    Raises:
        ResourceLoadError: If the file cannot be read, is not valid JSON,
            or does not hold a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceLoadError(
            f"Cannot read {path}: {e.strerror or e}", path=path, cause=e
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResourceLoadError(
            f"Invalid JSON in {path.name}: {e.msg}",
            path=path,
            line=e.lineno,
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise ResourceLoadError(
            f"Expected a JSON object in {path.name}, got {type(data).__name__}",
            path=path,
        )
    logger.debug("Loaded resource file %s", path)
    return data
