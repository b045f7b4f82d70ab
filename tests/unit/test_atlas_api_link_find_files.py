"""Unit tests for atlas.api.link.find_files."""

from atlas.api.link.find_files import find_files


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_find_files_by_extension(tmp_path):
    md = _touch(tmp_path / "a.md")
    mdx = _touch(tmp_path / "sub" / "b.MDX")
    _touch(tmp_path / "c.txt")
    assert find_files(tmp_path, ["**/*.md", "**/*.mdx"]) == [md, mdx]


def test_find_files_by_suffix(tmp_path):
    readme = _touch(tmp_path / "docs" / "README.md")
    _touch(tmp_path / "docs" / "other.md")
    assert find_files(tmp_path, ["README.md"]) == [readme]


def test_find_files_skips_named_directories(tmp_path):
    kept = _touch(tmp_path / "keep" / "a.md")
    _touch(tmp_path / "node_modules" / "pkg" / "b.md")
    _touch(tmp_path / "build" / "c.md")
    assert find_files(tmp_path, ["**/*.md"], skip_names={"node_modules", "build"}) == [kept]


def test_find_files_sorted(tmp_path):
    paths = [_touch(tmp_path / name) for name in ("b.md", "a.md", "c.md")]
    assert find_files(tmp_path, ["**/*.md"]) == sorted(paths)


def test_find_files_missing_root(tmp_path):
    assert find_files(tmp_path / "nope", ["**/*.md"]) == []
