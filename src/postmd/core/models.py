"""Data models for post records and conversion results"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _json_text(value: Any) -> str:
    """Render a decoded JSON value as it is spelled in JSON (null, true, 1 for 1.0)."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return json.dumps(value, ensure_ascii=False)


def _scalar_text(value: Any) -> Optional[str]:
    if not value or isinstance(value, (dict, list)):
        return None
    return _json_text(value)


class PostRecord(BaseModel):
    """One blog post as exported to JSON. Every field is optional."""
    model_config = ConfigDict(extra='ignore')

    slug:       Optional[str] = None
    title:      Optional[str] = None
    date:       Optional[str] = None    # passed through verbatim
    categories: list[str] = Field(default_factory=list)
    tags:       list[str] = Field(default_factory=list)
    content:    str = ''                # HTML body

    @field_validator('slug', 'title', 'date', mode='before')
    @classmethod
    def _text_or_none(cls, v: Any) -> Optional[str]:
        return _scalar_text(v)

    @field_validator('categories', 'tags', mode='before')
    @classmethod
    def _string_list(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [_json_text(item) for item in v]

    @field_validator('content', mode='before')
    @classmethod
    def _html_or_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ''


class ConvertResult(BaseModel):
    """Outcome of a conversion pass: written (source, destination) pairs and skipped sources."""
    written: list[tuple[Path, Path]] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.skipped)
