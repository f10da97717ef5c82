from __future__ import annotations

import pytest

from addon_blueprint import addon_locals
from addon_blueprint.naming import classify, dasherize


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("my-addon", "my-addon"),
        ("myAddon", "my-addon"),
        ("MyAddon", "my-addon"),
        ("my_addon", "my-addon"),
        ("my addon", "my-addon"),
        ("innerHTML2Go", "inner-html2-go"),
    ],
)
def test_dasherize(raw: str, expected: str) -> None:
    assert dasherize(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("my-addon", "MyAddon"),
        ("my_addon", "MyAddon"),
        ("my.addon", "MyAddon"),
        ("myAddon", "MyAddon"),
        ("my-addon/sub_part", "MyAddon/SubPart"),
    ],
)
def test_classify(raw: str, expected: str) -> None:
    assert classify(raw) == expected


def test_addon_locals() -> None:
    assert addon_locals("myAddon") == {
        "name": "dummy",
        "modulePrefix": "dummy",
        "namespace": "Dummy",
        "addonName": "my-addon",
        "addonModulePrefix": "my-addon",
        "addonNamespace": "MyAddon",
    }
