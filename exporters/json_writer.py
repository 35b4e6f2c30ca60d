"""
JSON sink for the calendar document.
"""

import json
import logging
from pathlib import Path
from typing import Union

from models.errors import SinkError
from models.schema import CalendarDocument

logger = logging.getLogger(__name__)


def generate_export_json(document: CalendarDocument) -> str:
    """Serialize the document as pretty-printed JSON."""
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


def write_json(document: CalendarDocument, file_name: Union[str, Path] = "data.json") -> Path:
    """
    Write ``{"races": [...]}`` to ``file_name``.

    Returns:
        Path written

    Raises:
        SinkError: If the file cannot be written
    """
    path = Path(file_name)
    payload = generate_export_json(document)

    try:
        path.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise SinkError(f"Could not write {path}: {e}") from e

    logger.info("Wrote %d races to %s", len(document.races), path)
    return path
