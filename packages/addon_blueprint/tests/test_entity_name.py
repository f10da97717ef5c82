from __future__ import annotations

import pytest

from addon_blueprint import (
    NameFormatError,
    StaticProjectContext,
    UnsupportedContextError,
    normalize_addon_entity_name,
    normalize_entity_name,
)


def test_existing_app_project_rejects_addon_generation() -> None:
    ctx = StaticProjectContext(project_name="my-app", existing_project=True, addon=False)
    with pytest.raises(UnsupportedContextError) as exc:
        normalize_addon_entity_name("foo", ctx)
    assert str(exc.value) == "Generating an addon in an existing ember-cli project is not supported."
    assert "existing ember-cli project" in str(exc.value)


@pytest.mark.parametrize("existing_project", [True, False])
def test_addon_project_always_allows_addon_generation(existing_project: bool) -> None:
    ctx = StaticProjectContext(project_name="my-addon", existing_project=existing_project, addon=True)
    assert normalize_addon_entity_name("foo", ctx) == "foo"


def test_fresh_location_allows_addon_generation() -> None:
    ctx = StaticProjectContext(project_name="somewhere")
    assert normalize_addon_entity_name("foo", ctx) == "foo"


def test_addon_name_goes_through_generic_rules() -> None:
    ctx = StaticProjectContext(project_name="my-addon", existing_project=True, addon=True)
    with pytest.raises(NameFormatError, match="trailing slash"):
        normalize_addon_entity_name("foo/", ctx)


def test_context_override_wins_over_format_rules() -> None:
    ctx = StaticProjectContext(project_name="my-app", existing_project=True)
    with pytest.raises(UnsupportedContextError):
        normalize_addon_entity_name("foo/", ctx)


@pytest.mark.parametrize(
    ("name", "suggestion"),
    [("foo/", "foo"), ("foo\\", "foo"), ("nested/foo/", "nested/foo")],
)
def test_trailing_separator_is_rejected(name: str, suggestion: str) -> None:
    with pytest.raises(NameFormatError, match="trailing slash") as exc:
        normalize_entity_name(name)
    assert f're-run the command with "{suggestion}"' in str(exc.value)


@pytest.mark.parametrize("name", ["", None])
def test_missing_name_is_rejected(name: str | None) -> None:
    with pytest.raises(NameFormatError, match="requires an entity name"):
        normalize_entity_name(name)


@pytest.mark.parametrize("name", ["foo", "Foo", " foo ", "nested/foo", "foo-bar_baz"])
def test_valid_names_are_returned_unchanged(name: str) -> None:
    assert normalize_entity_name(name) == name
