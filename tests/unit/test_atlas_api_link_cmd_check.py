"""Unit tests for atlas.api.link.cmd_check."""

from pathlib import Path

from atlas.api.link.cmd_check import cmd_check
from atlas.api.validate_output import validate_output


def test_cmd_check_explicit_paths(run_cmd, content_dir, targets_file, monkeypatch, tmp_path):
    monkeypatch.setenv("ATLAS_CONFIG", str(tmp_path / "absent.json"))
    result = run_cmd(cmd_check, content_dir=str(content_dir), targets_file=str(targets_file))

    assert result.success is False
    assert result.output["files_checked"] == 2
    assert result.output["broken"] == [{"file": str(content_dir / "guide" / "next.mdx"), "line": 4, "id": "ghost"}]
    assert [p["id"] for p in result.output["placeholders"]] == ["roadmap"]
    assert "broken link 'ghost'" in result.output["errors"][0]
    assert "placeholder link 'roadmap'" in result.output["warnings"][0]
    assert result.result == "Checked 2 files: 1 broken, 1 placeholder links"
    validate_output(cmd_check, result.output)


def test_cmd_check_from_config(run_cmd, atlas_project, content_dir):
    result = run_cmd(cmd_check)
    assert result.output["content_dir"] == str(content_dir)
    assert result.output["files_checked"] == 2


def test_cmd_check_success_without_broken_links(run_cmd, tmp_path, targets_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.md").write_text("[:config] [:roadmap]", encoding="utf-8")

    result = run_cmd(cmd_check, content_dir=str(docs), targets_file=str(targets_file))
    assert result.success is True
    assert result.output["errors"] == []
    assert len(result.output["warnings"]) == 1


def test_cmd_check_patterns(run_cmd, tmp_path, targets_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.md").write_text("[:ghost]", encoding="utf-8")
    (docs / "b.rst").write_text("[:config]", encoding="utf-8")

    result = run_cmd(cmd_check, content_dir=str(docs), targets_file=str(targets_file), patterns=["**/*.rst"])
    assert result.success is True
    assert result.output["files_checked"] == 1


def test_cmd_check_missing_config(run_cmd, tmp_path, monkeypatch):
    monkeypatch.setenv("ATLAS_CONFIG", str(tmp_path / "absent.json"))
    result = run_cmd(cmd_check)
    assert result.success is False
    assert "Configuration file not found" in result.output["errors"][0]
    assert result.result.startswith("Configuration error")


def test_cmd_check_bad_targets(run_cmd, tmp_path, content_dir):
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")
    result = run_cmd(cmd_check, content_dir=str(content_dir), targets_file=str(bad))
    assert result.success is False
    assert result.output["errors"][0].startswith("Cannot load targets")


def test_cmd_check_read_error(run_cmd, content_dir, targets_file, monkeypatch):
    def _fail(self, *args, **kwargs):
        raise PermissionError("denied")

    original = Path.read_text
    monkeypatch.setattr(
        Path, "read_text", lambda self, *a, **kw: original(self, *a, **kw) if self == targets_file else _fail(self)
    )
    result = run_cmd(cmd_check, content_dir=str(content_dir), targets_file=str(targets_file))
    assert result.success is False
    assert "Cannot read content" in result.output["errors"][0]


def test_cmd_check_invalid_utf8(run_cmd, tmp_path, targets_file):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "bad.md").write_bytes(b"[:config] \xff\xfe broken bytes")

    result = run_cmd(cmd_check, content_dir=str(docs), targets_file=str(targets_file))
    assert result.success is False
    assert result.output["errors"][0].startswith("Cannot read content")
    assert result.output["files_checked"] == 0
    assert result.result.startswith(f"Error scanning {docs}")
