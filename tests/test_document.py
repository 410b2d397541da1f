# tests/test_document.py
from pathlib import Path

import pytest

from flattree import (
    DirectoryReadError,
    FlattenConfig,
    build_tree_and_contents,
    write_document,
)
from flattree.content import ContentSections
from flattree.document import render_document


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _tree_part(s: str) -> str:
    """Return the lines between the first pair of fences."""
    return s.split("```\n", 2)[1].rstrip("\n")


def test_render_document_layout():
    sections = ContentSections(priority=["P\n"], ordinary=["O\n"])
    out = render_document("a.py\nsrc/", sections)
    assert out == "# Directory Structure\n\n```\na.py\nsrc/\n```\n\nP\nO\n"


def test_scenario_readme_source_and_node_modules(tmp_path: Path):
    _make_file(tmp_path / "README.md", "# Demo\n\nHello.\n")
    _make_file(tmp_path / "src/index.ts", "a\nb\nc\nd\ne\n")
    _make_file(tmp_path / "node_modules/pkg/index.js", "ignored")

    out = build_tree_and_contents(tmp_path)

    assert out == (
        "# Directory Structure\n\n"
        "```\n"
        "README.md\n"
        "src/\n"
        "  index.ts\n"
        "```\n\n"
        "## README.md\n\n"
        "```md\n"
        "# Demo\n\nHello.\n\n"
        "```\n\n"
        "## src/index.ts\n\n"
        "```ts\n"
        "a\nb\nc\nd\ne\n\n"
        "```\n\n"
    )


def test_include_ignored_applies_to_tree_and_content(tmp_path: Path):
    _make_file(tmp_path / "node_modules/pkg/index.js", "x")
    _make_file(tmp_path / ".git/config", "[core]")

    out = build_tree_and_contents(tmp_path, FlattenConfig(include_ignored=True))

    tree = _tree_part(out)
    assert "node_modules/" in tree
    assert "config" in tree
    assert "## node_modules/pkg/index.js" in out
    assert "## .git/config" not in out


def test_readme_before_source_even_when_walked_later(tmp_path: Path):
    _make_file(tmp_path / "a.py", "a")
    _make_file(tmp_path / "zz/README.md", "r")

    out = build_tree_and_contents(tmp_path)
    assert out.index("## zz/README.md") < out.index("## a.py")


def test_output_is_deterministic(tmp_path: Path):
    for name in ["b.py", "A.py", "pkg/c.ts", "README.md"]:
        _make_file(tmp_path / name, name)

    assert build_tree_and_contents(tmp_path) == build_tree_and_contents(tmp_path)


def test_max_lines_from_config(tmp_path: Path):
    _make_file(tmp_path / "a.py", "1\n2\n3\n")

    out = build_tree_and_contents(tmp_path, FlattenConfig(max_lines=2))
    assert "```py\nFile exceeds 2 lines. Skipped.\n```" in out


def test_invalid_max_lines_rejected():
    with pytest.raises(ValueError):
        FlattenConfig(max_lines=-1)


def test_zero_max_lines_replaces_every_body(tmp_path: Path):
    _make_file(tmp_path / "a.py", "")
    _make_file(tmp_path / "README.md", "one line")

    out = build_tree_and_contents(tmp_path, FlattenConfig(max_lines=0))
    assert out.count("File exceeds 0 lines. Skipped.") == 2


def test_write_document(tmp_path: Path):
    src = tmp_path / "src"
    _make_file(src / "a.py", "a")
    target = tmp_path / "out" / "combined.md"
    target.parent.mkdir()

    written = write_document(src, FlattenConfig(output=target))

    assert written == target
    assert target.read_text(encoding="utf-8") == build_tree_and_contents(src)


def _deny_listing(monkeypatch, denied: Path):
    """Make ``Path.iterdir`` fail for ``denied`` regardless of the caller's privileges."""
    denied = denied.resolve()
    original_iterdir = Path.iterdir

    def fake_iterdir(self):
        if self == denied:
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", fake_iterdir)


def test_unlistable_directory_aborts_build(tmp_path: Path, monkeypatch):
    _make_file(tmp_path / "README.md", "r")
    _make_file(tmp_path / "pkg/mod.py", "m")
    _deny_listing(monkeypatch, tmp_path / "pkg")

    with pytest.raises(DirectoryReadError):
        build_tree_and_contents(tmp_path)


def test_write_document_writes_nothing_on_directory_failure(tmp_path: Path, monkeypatch):
    src = tmp_path / "src"
    _make_file(src / "a.py", "a")
    _make_file(src / "deep/b.py", "b")
    target = tmp_path / "combined.md"
    _deny_listing(monkeypatch, src / "deep")

    with pytest.raises(DirectoryReadError) as excinfo:
        write_document(src, FlattenConfig(output=target))

    assert excinfo.value.path == (src / "deep").resolve()
    assert not target.exists()
