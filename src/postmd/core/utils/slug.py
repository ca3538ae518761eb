"""Output file slug resolution for post records"""

import re
from pathlib import Path

from postmd.core.models import PostRecord


_SEPARATOR_RE = re.compile(r'[/\\]')


def sanitize_slug(slug: str) -> str:
    """Replace path separators so the slug is always a single file name."""
    return _SEPARATOR_RE.sub('-', slug)


def resolve_slug(record: PostRecord, source: Path) -> str:
    """Return the record slug, else its title, else the source file stem, sanitized."""
    return sanitize_slug(record.slug or record.title or source.stem)
