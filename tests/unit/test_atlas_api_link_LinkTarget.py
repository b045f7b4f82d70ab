"""Unit tests for atlas.api.link.LinkTarget."""

import pytest
from pydantic import ValidationError

from atlas.api.link.LinkTarget import LinkTarget


def test_link_target_defaults():
    target = LinkTarget(id="a", slug="a", url="/a/")
    assert target.aliases == ()
    assert target.placeholder is False


def test_link_target_aliases_keep_order():
    target = LinkTarget(id="a", slug="a", url="/a/", aliases=["z", "b", "m"])
    assert target.aliases == ("z", "b", "m")


def test_link_target_is_frozen():
    target = LinkTarget(id="a", slug="a", url="/a/")
    with pytest.raises(ValidationError):
        target.url = "/b/"  # type: ignore[misc]


def test_link_target_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        LinkTarget(id="a", slug="a", url="/a/", title="A")


def test_link_target_requires_url():
    with pytest.raises(ValidationError):
        LinkTarget(id="a", slug="a")
