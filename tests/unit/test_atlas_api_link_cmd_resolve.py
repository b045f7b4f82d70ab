"""Unit tests for atlas.api.link.cmd_resolve."""

from atlas.api.link.cmd_resolve import cmd_resolve
from atlas.api.validate_output import validate_output


def test_cmd_resolve_resolved(run_cmd, targets_file):
    result = run_cmd(cmd_resolve, ids=["ghost", "Intro"], targets_file=str(targets_file))
    assert result.success is True
    assert result.output["status"] == "resolved"
    assert result.output["matched_id"] == "Intro"
    assert result.output["target"]["id"] == "getting-started"
    assert result.result == "Intro -> /docs/getting-started/"
    validate_output(cmd_resolve, result.output)


def test_cmd_resolve_placeholder_warns(run_cmd, targets_file):
    result = run_cmd(cmd_resolve, ids=["roadmap"], targets_file=str(targets_file))
    assert result.success is True
    assert result.output["status"] == "placeholder"
    assert result.output["warnings"] == ["Target 'roadmap' is a placeholder"]


def test_cmd_resolve_unresolved(run_cmd, targets_file):
    result = run_cmd(cmd_resolve, ids=["ghost", "phantom"], targets_file=str(targets_file))
    assert result.success is False
    assert result.output["status"] == "unresolved"
    assert result.output["matched_id"] == "ghost"
    assert result.output["target"] is None


def test_cmd_resolve_targets_from_config(run_cmd, atlas_project):
    result = run_cmd(cmd_resolve, ids=["config"])
    assert result.success is True


def test_cmd_resolve_missing_targets(run_cmd, tmp_path):
    result = run_cmd(cmd_resolve, ids=["config"], targets_file=str(tmp_path / "missing.json"))
    assert result.success is False
    assert result.output["errors"][0].startswith("Cannot load targets")
