"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from atlas.api.link.LinkTarget import LinkTarget


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")
    config.addinivalue_line("markers", "integration: tests that combine several domains")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Command Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


# =============================================================================
# Link Target Helpers
# =============================================================================


def sample_targets_data() -> list[dict]:
    """Targets used across the link tests."""
    return [
        {"id": "getting-started", "slug": "start", "url": "/docs/getting-started/", "aliases": ["intro", "Quickstart"]},
        {"id": "config", "slug": "configuration", "url": "/docs/config/"},
        {"id": "roadmap", "slug": "roadmap", "url": "/docs/roadmap/", "placeholder": True},
    ]


@pytest.fixture
def targets() -> list[LinkTarget]:
    return [LinkTarget(**data) for data in sample_targets_data()]


@pytest.fixture
def targets_file(tmp_path: Path) -> Path:
    path = tmp_path / "targets.json"
    path.write_text(json.dumps(sample_targets_data()), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content directory with one broken and one placeholder link."""
    root = tmp_path / "content"
    (root / "guide").mkdir(parents=True)
    (root / "index.md").write_text("# Home\n\nSee [:getting-started] and [[config|Config]].\n", encoding="utf-8")
    (root / "guide" / "next.mdx").write_text("Intro\n\nComing soon: [:roadmap]\nMissing: [[ghost]]\n", encoding="utf-8")
    return root


@pytest.fixture
def atlas_project(tmp_path: Path, content_dir: Path, targets_file: Path, monkeypatch) -> Path:
    """Write an atlas.json next to the content and point ATLAS_CONFIG at it."""
    config_path = tmp_path / "atlas.json"
    config_path.write_text(
        json.dumps({"content_dir": "content", "targets_file": "targets.json"}),
        encoding="utf-8",
    )
    monkeypatch.setenv("ATLAS_CONFIG", str(config_path))
    return config_path
