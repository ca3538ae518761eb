"""Markdown export: front matter assembly and output file writing"""

from pathlib import Path

from postmd.core.convert import convert
from postmd.core.models import PostRecord
from postmd.core.utils.slug import resolve_slug


def _list_block(name: str, values: list[str]) -> list[str]:
    if not values:
        return []
    return [f"{name}:"] + [f"  - {v}" for v in values]


def build_frontmatter(record: PostRecord, slug: str) -> str:
    """Return the front matter block, closing delimiter and blank line included.

    Values are written verbatim; YAML special characters are not escaped.
    """
    lines = ["---", f"title: {record.title or slug}"]
    if record.date:
        lines.append(f"date: {record.date}")
    lines += _list_block("categories", record.categories)
    lines += _list_block("tags", record.tags)
    lines.append("---")
    return "\n".join(lines) + "\n\n"


def build_markdown(record: PostRecord, slug: str) -> str:
    """Return front matter followed by the converted content body."""
    return build_frontmatter(record, slug) + convert(record.content)


def write_post(record: PostRecord, source: Path, output_dir: Path) -> Path:
    """Write <output_dir>/<slug>.md for a record, overwriting any existing file.

    Returns the written path.
    """
    slug = resolve_slug(record, source)
    md_path = output_dir / f"{slug}.md"
    md_path.write_text(build_markdown(record, slug), encoding='utf-8')
    return md_path
