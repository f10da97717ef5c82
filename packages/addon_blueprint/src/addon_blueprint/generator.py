from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from addon_blueprint.manifest_merge import merge_manifest
from addon_blueprint.manifest_rules import NAME_ONLY_MANIFEST_RULES, PACKAGE_MANIFEST_RULES, RuleSet

if TYPE_CHECKING:  # pragma: no cover
    from addon_blueprint.filesystem import FileSystem
    from addon_blueprint.project import ProjectContext
    from addon_blueprint.registry import Blueprint, BlueprintRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManifestKind:
    file_name: str
    rules: RuleSet


PACKAGE_MANIFEST = ManifestKind("package.json", PACKAGE_MANIFEST_RULES)
BOWER_MANIFEST = ManifestKind("bower.json", NAME_ONLY_MANIFEST_RULES)


class ManifestGenerator:
    """
    Write a blueprint's manifests by merging rules into the host blueprint's templates.

    Reads come from the host blueprint's `files/` tree, writes go to the blueprint's own
    `files/` tree. All file access goes through the injected `FileSystem`.
    """

    def __init__(
        self,
        *,
        blueprint: Blueprint,
        host_blueprint: Blueprint,
        project: ProjectContext,
        fs: FileSystem,
    ) -> None:
        self.blueprint = blueprint
        self.host_blueprint = host_blueprint
        self.project = project
        self.fs = fs

    @classmethod
    def from_registry(
        cls,
        registry: BlueprintRegistry,
        blueprint_name: str,
        *,
        project: ProjectContext,
        fs: FileSystem,
    ) -> ManifestGenerator:
        blueprint = registry.lookup(blueprint_name)
        return cls(
            blueprint=blueprint,
            host_blueprint=registry.host_of(blueprint),
            project=project,
            fs=fs,
        )

    def read_path(self, kind: ManifestKind) -> Path:
        return self.host_blueprint.files_path / kind.file_name

    def write_path(self, kind: ManifestKind) -> Path:
        return self.blueprint.files_path / kind.file_name

    def render(self, kind: ManifestKind) -> str:
        read_path = self.read_path(kind)
        existing: Any = self.fs.read_json(read_path)
        if existing is None:
            logger.warning("no %s at %s; starting from an empty manifest", kind.file_name, read_path)
            existing = {}

        return merge_manifest(existing, kind.rules, self.project.name())

    def _write(self, kind: ManifestKind, text: str) -> None:
        write_path = self.write_path(kind)
        self.fs.write_text(write_path, text)
        logger.debug("generated %s for %s", write_path, self.project.name())

    def generate(self, kind: ManifestKind) -> str:
        text = self.render(kind)
        self._write(kind, text)
        return text

    def generate_package_json(self) -> str:
        return self.generate(PACKAGE_MANIFEST)

    def generate_bower_json(self) -> str:
        return self.generate(BOWER_MANIFEST)

    def generate_all(self) -> dict[str, str]:
        # Render every manifest before writing any, so a failure leaves no partial output.
        kinds = (PACKAGE_MANIFEST, BOWER_MANIFEST)
        texts = {kind.file_name: self.render(kind) for kind in kinds}
        for kind in kinds:
            self._write(kind, texts[kind.file_name])
        return texts
