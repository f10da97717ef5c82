"""
Deterministic merge of blueprint defaults into an existing JSON manifest.

Everything here is pure: callers parse or read the existing document, hand it in as a
mapping, and receive finished text. The input mapping is never mutated.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from addon_blueprint.errors import ManifestParseError
from addon_blueprint.manifest_rules import (
    DEPENDENCY_MAP_KEYS,
    PROJECT_NAME,
    DeleteIfPresent,
    EnsureArrayContainsOnce,
    FieldRule,
    MergeDependencyMap,
    Overwrite,
    RelocateDependency,
    RuleSet,
    SortMapKeys,
)


def parse_manifest_text(text: str, *, source: Path | None = None) -> dict[str, Any]:
    where = f" in {source}" if source is not None else ""

    def _reject_constant(name: str) -> Any:
        raise ManifestParseError(f"Invalid JSON constant {name}{where}.", source=source)

    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Failed to parse JSON{where}: {e}", source=source) from e
    if not isinstance(raw, dict):
        raise ManifestParseError(
            f"Expected a JSON object{where}, got {type(raw).__name__}.",
            source=source,
        )
    return raw


def render_manifest(document: Mapping[str, Any]) -> str:
    try:
        text = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise ManifestParseError(f"Manifest cannot be written as JSON: {e}") from e
    return text + "\n"


def _require_object(doc: dict[str, Any], key: str, *, where: str) -> dict[str, Any]:
    value = doc.get(key)
    if value is None:
        value = {}
        doc[key] = value
    if not isinstance(value, dict):
        raise ManifestParseError(f"Expected a JSON object for {where!r}, got {type(value).__name__}.")
    return value


def _existing_map(doc: dict[str, Any], key: str) -> dict[str, Any]:
    value = doc.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestParseError(f"Expected a JSON object for {key!r}, got {type(value).__name__}.")
    return value


def _apply_overwrite(doc: dict[str, Any], rule: Overwrite, project_name: str) -> None:
    if not rule.path:
        raise ValueError("Overwrite rule requires a non-empty path")
    value = project_name if rule.value is PROJECT_NAME else copy.deepcopy(rule.value)
    target = doc
    for depth, key in enumerate(rule.path[:-1]):
        target = _require_object(target, key, where=".".join(rule.path[: depth + 1]))
    target[rule.path[-1]] = value


def _apply_ensure_array(doc: dict[str, Any], rule: EnsureArrayContainsOnce) -> None:
    items = doc.get(rule.key)
    if items is None:
        items = []
        doc[rule.key] = items
    if not isinstance(items, list):
        raise ManifestParseError(f"Expected a JSON array for {rule.key!r}, got {type(items).__name__}.")
    if rule.value not in items:
        items.append(rule.value)


def _apply_merge_dependencies(doc: dict[str, Any], rule: MergeDependencyMap) -> None:
    deps = _require_object(doc, rule.key, where=rule.key)
    declared: set[str] = set(deps)
    for other_key in DEPENDENCY_MAP_KEYS:
        if other_key != rule.key:
            declared.update(_existing_map(doc, other_key))
    for name, version in rule.defaults:
        if name not in declared:
            deps[name] = version
    for name, version in rule.forced_versions:
        deps[name] = version


def _apply_relocate(doc: dict[str, Any], rule: RelocateDependency) -> None:
    source = _existing_map(doc, rule.from_key)
    if rule.name not in source:
        return
    version = source.pop(rule.name)
    _require_object(doc, rule.to_key, where=rule.to_key)[rule.name] = version


def _apply_sort(doc: dict[str, Any], rule: SortMapKeys) -> None:
    if rule.key not in doc:
        return
    mapping = _existing_map(doc, rule.key)
    doc[rule.key] = {k: mapping[k] for k in sorted(mapping)}


def _apply_rule(doc: dict[str, Any], rule: FieldRule, project_name: str) -> None:
    if isinstance(rule, Overwrite):
        _apply_overwrite(doc, rule, project_name)
    elif isinstance(rule, DeleteIfPresent):
        doc.pop(rule.key, None)
    elif isinstance(rule, EnsureArrayContainsOnce):
        _apply_ensure_array(doc, rule)
    elif isinstance(rule, MergeDependencyMap):
        _apply_merge_dependencies(doc, rule)
    elif isinstance(rule, RelocateDependency):
        _apply_relocate(doc, rule)
    elif isinstance(rule, SortMapKeys):
        _apply_sort(doc, rule)
    else:
        raise TypeError(f"Unsupported manifest rule: {rule!r}")


def merge_manifest(existing: Mapping[str, Any], rules: RuleSet, project_name: str) -> str:
    """
    Apply `rules` left to right to a copy of `existing` and render the result.

    Later rules observe the effects of earlier ones, so relocations must precede the
    sorts that fix dependency-map ordering.

    Raises
    ------
    ManifestParseError
        If `existing` is not a mapping or one of its fields has the wrong JSON type.
    """

    if not isinstance(existing, Mapping):
        raise ManifestParseError(f"Expected a JSON object manifest, got {type(existing).__name__}.")
    doc: dict[str, Any] = copy.deepcopy(dict(existing))
    for rule in rules:
        _apply_rule(doc, rule, project_name)
    return render_manifest(doc)
