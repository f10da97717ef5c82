from __future__ import annotations

import json
from pathlib import Path

import pytest

from addon_blueprint import LocalFileSystem, ManifestParseError, detect_project_context


def _write_package(root: Path, data: object) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


def test_fresh_directory_is_neither_project_nor_addon(tmp_path: Path) -> None:
    root = tmp_path / "my-addon"
    root.mkdir()
    ctx = detect_project_context(root, LocalFileSystem())
    assert ctx.name() == "my-addon"
    assert not ctx.is_existing_project()
    assert not ctx.is_addon()


def test_app_project_is_detected(tmp_path: Path) -> None:
    _write_package(tmp_path, {"name": "my-app", "devDependencies": {"ember-cli": "2.4.0"}})
    ctx = detect_project_context(tmp_path, LocalFileSystem())
    assert ctx.name() == "my-app"
    assert ctx.is_existing_project()
    assert not ctx.is_addon()


def test_addon_project_is_detected(tmp_path: Path) -> None:
    _write_package(
        tmp_path,
        {"name": "my-addon", "keywords": ["ember-addon"], "dependencies": {"ember-cli": "2.4.0"}},
    )
    ctx = detect_project_context(tmp_path, LocalFileSystem())
    assert ctx.is_existing_project()
    assert ctx.is_addon()


def test_unnamed_package_falls_back_to_directory_name(tmp_path: Path) -> None:
    root = tmp_path / "plain"
    _write_package(root, {"dependencies": {"left-pad": "1.0.0"}})
    ctx = detect_project_context(root, LocalFileSystem())
    assert ctx.name() == "plain"
    assert not ctx.is_existing_project()


@pytest.mark.parametrize(
    "data",
    [[1, 2], {"dependencies": ["ember-cli"]}, {"keywords": "ember-addon"}],
)
def test_invalid_package_json_is_an_error(tmp_path: Path, data: object) -> None:
    _write_package(tmp_path, data)
    with pytest.raises(ManifestParseError):
        detect_project_context(tmp_path, LocalFileSystem())


def test_malformed_package_json_is_an_error(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{", encoding="utf-8")
    with pytest.raises(ManifestParseError):
        detect_project_context(tmp_path, LocalFileSystem())
