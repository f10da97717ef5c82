from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from addon_blueprint.errors import ManifestParseError

if TYPE_CHECKING:  # pragma: no cover
    from addon_blueprint.filesystem import FileSystem

_FRAMEWORK_PACKAGE = "ember-cli"
_ADDON_KEYWORD = "ember-addon"


class ProjectContext(Protocol):
    def name(self) -> str: ...

    def is_existing_project(self) -> bool: ...

    def is_addon(self) -> bool: ...


@dataclass(frozen=True)
class StaticProjectContext:
    project_name: str
    existing_project: bool = False
    addon: bool = False

    def name(self) -> str:
        return self.project_name

    def is_existing_project(self) -> bool:
        return self.existing_project

    def is_addon(self) -> bool:
        return self.addon


def _mapping_field(pkg: dict[str, Any], key: str, *, source: Path) -> dict[str, Any]:
    value = pkg.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestParseError(f"Expected a JSON object for {key!r} in {source}.", source=source)
    return value


def detect_project_context(root: Path, fs: FileSystem) -> StaticProjectContext:
    """
    Inspect the `package.json` at `root` and describe the surrounding project.

    A directory without a `package.json` is treated as a fresh location. A malformed
    `package.json` is an error, not a fresh location.
    """

    manifest_path = root / "package.json"
    pkg = fs.read_json(manifest_path)
    if pkg is None:
        return StaticProjectContext(project_name=root.name)
    if not isinstance(pkg, dict):
        raise ManifestParseError(
            f"Expected a JSON object in {manifest_path}, got {type(pkg).__name__}.",
            source=manifest_path,
        )

    deps = _mapping_field(pkg, "dependencies", source=manifest_path)
    dev_deps = _mapping_field(pkg, "devDependencies", source=manifest_path)
    keywords = pkg.get("keywords")
    if keywords is None:
        keywords = []
    if not isinstance(keywords, list):
        raise ManifestParseError(f"Expected a JSON array for 'keywords' in {manifest_path}.", source=manifest_path)

    name = pkg.get("name")
    project_name = name.strip() if isinstance(name, str) and name.strip() else root.name
    return StaticProjectContext(
        project_name=project_name,
        existing_project=_FRAMEWORK_PACKAGE in deps or _FRAMEWORK_PACKAGE in dev_deps,
        addon=_ADDON_KEYWORD in keywords,
    )
