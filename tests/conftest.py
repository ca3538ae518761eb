"""Root test configuration: helpers for building JSON post directories"""

import json
from pathlib import Path

import pytest


@pytest.fixture(name="write_post")
def write_post_fixture():
    """Return a helper that writes a JSON post (dict or raw text) to path, creating parents."""
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
