"""Post record discovery and JSON loading"""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from postmd.core.models import PostRecord


log = logging.getLogger(__name__)

JSON_SUFFIX = '.json'


def discover_files(root: Path) -> list[Path]:
    """Return sorted regular files ending in .json anywhere under root."""
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")
    return sorted(p for p in root.rglob('*') if p.is_file() and p.name.endswith(JSON_SUFFIX))


def load_record(path: Path) -> Optional[PostRecord]:
    """Parse one JSON file into a PostRecord, or None when it cannot be used."""
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Skipping %s: unreadable (%s)", path, e)
        return None
    except json.JSONDecodeError as e:
        log.debug("Skipping %s: invalid JSON (%s)", path, e)
        return None

    if not isinstance(data, dict):
        log.debug("Skipping %s: expected a JSON object, got %s", path, type(data).__name__)
        return None

    try:
        return PostRecord.model_validate(data)
    except ValidationError as e:
        log.debug("Skipping %s: %s", path, e)
        return None


def iter_records(root: Path) -> Iterator[tuple[Path, Optional[PostRecord]]]:
    """Yield (path, record) for each JSON file under root; record is None when skipped."""
    for path in discover_files(root):
        yield path, load_record(path)
