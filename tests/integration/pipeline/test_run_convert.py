"""Integration tests for the load -> convert -> write pipeline"""

import pytest
import yaml

from postmd.core.pipeline import run_convert


@pytest.fixture(name="source_dir")
def source_dir_fixture(tmp_path, write_post):
    """A source tree with two good posts, two unusable files, and a non-JSON file."""
    src = tmp_path / "api"
    write_post(src / "1.json", {
        "slug": "first-post",
        "title": "First Post",
        "date": "2024-03-01",
        "categories": ["Notes"],
        "tags": ["html", "markdown"],
        "content": "<h2>Intro</h2><p>Hello &amp; welcome</p>",
    })
    write_post(src / "nested" / "2.json", {"title": "Second/Part"})
    write_post(src / "broken.json", "{oops")
    write_post(src / "list.json", "[1, 2]")
    (src / "readme.txt").write_text("ignore me")
    return src


def test_run_convert_writes_and_skips(tmp_path, source_dir):
    """Good posts are written; unusable files are skipped without aborting."""
    out = tmp_path / "out"
    result = run_convert(source_dir, out)

    assert sorted(p.name for _, p in result.written) == ["Second-Part.md", "first-post.md"]
    assert sorted(p.name for p in result.skipped) == ["broken.json", "list.json"]
    assert result.total == 4
    assert sorted(p.name for p in out.iterdir()) == ["Second-Part.md", "first-post.md"]


def test_run_convert_document_content(tmp_path, source_dir):
    """The written document holds front matter followed by the converted body."""
    out = tmp_path / "out"
    run_convert(source_dir, out)
    text = (out / "first-post.md").read_text(encoding="utf-8")

    _, header, body = text.split("---\n", 2)
    fm = yaml.safe_load(header)
    assert fm["title"] == "First Post"
    assert fm["categories"] == ["Notes"]
    assert fm["tags"] == ["html", "markdown"]
    assert body == "\n## Intro\n\nHello & welcome\n"


def test_run_convert_flat_output(tmp_path, source_dir):
    """Nested sources and slugs with separators never create output subdirectories."""
    out = tmp_path / "out"
    run_convert(source_dir, out)
    assert all(p.is_file() for p in out.iterdir())


def test_run_convert_creates_output_dir(tmp_path, source_dir):
    """Missing output directories are created, parents included."""
    out = tmp_path / "a" / "b" / "out"
    run_convert(source_dir, out)
    assert out.is_dir()


def test_run_convert_missing_source(tmp_path):
    """A missing source directory aborts the run."""
    with pytest.raises(FileNotFoundError):
        run_convert(tmp_path / "missing", tmp_path / "out")


def test_run_convert_duplicate_slug_last_wins(tmp_path, write_post, caplog):
    """Two posts with the same slug leave the later one on disk and log a warning."""
    src = tmp_path / "src"
    write_post(src / "a.json", {"slug": "dup", "content": "<p>first</p>"})
    write_post(src / "b.json", {"slug": "dup", "content": "<p>second</p>"})
    out = tmp_path / "out"

    with caplog.at_level("WARNING", logger="postmd.core.pipeline"):
        result = run_convert(src, out)

    assert len(result.written) == 2
    assert (out / "dup.md").read_text(encoding="utf-8").endswith("second\n")
    assert "overwrites" in caplog.text


def test_run_convert_unwritable_output(tmp_path, source_dir):
    """An output path that cannot be created aborts the run."""
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        run_convert(source_dir, blocker / "out")
