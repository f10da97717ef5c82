from addon_blueprint.entity_name import normalize_addon_entity_name, normalize_entity_name
from addon_blueprint.errors import (
    BlueprintError,
    ManifestParseError,
    NameFormatError,
    RegistryError,
    UnsupportedContextError,
)
from addon_blueprint.filesystem import FileSystem, LocalFileSystem
from addon_blueprint.generator import BOWER_MANIFEST, PACKAGE_MANIFEST, ManifestGenerator, ManifestKind
from addon_blueprint.manifest_merge import merge_manifest, parse_manifest_text, render_manifest
from addon_blueprint.manifest_rules import NAME_ONLY_MANIFEST_RULES, PACKAGE_MANIFEST_RULES
from addon_blueprint.naming import addon_locals
from addon_blueprint.project import ProjectContext, StaticProjectContext, detect_project_context
from addon_blueprint.registry import Blueprint, BlueprintRegistry, load_registry

__all__ = [
    "BOWER_MANIFEST",
    "Blueprint",
    "BlueprintError",
    "BlueprintRegistry",
    "FileSystem",
    "LocalFileSystem",
    "ManifestGenerator",
    "ManifestKind",
    "ManifestParseError",
    "NAME_ONLY_MANIFEST_RULES",
    "NameFormatError",
    "PACKAGE_MANIFEST",
    "PACKAGE_MANIFEST_RULES",
    "ProjectContext",
    "RegistryError",
    "StaticProjectContext",
    "UnsupportedContextError",
    "addon_locals",
    "detect_project_context",
    "load_registry",
    "merge_manifest",
    "normalize_addon_entity_name",
    "normalize_entity_name",
    "parse_manifest_text",
    "render_manifest",
]
