from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from addon_blueprint.errors import RegistryError

logger = logging.getLogger(__name__)

_REGISTRY_VERSION = 1
_ALLOWED_TOP_LEVEL_KEYS: frozenset[str] = frozenset({"version", "blueprints", "meta"})
_ALLOWED_ENTRY_KEYS: frozenset[str] = frozenset({"path", "host"})


@dataclass(frozen=True)
class Blueprint:
    name: str
    path: Path
    host: str | None = None

    @property
    def files_path(self) -> Path:
        return self.path / "files"


class BlueprintRegistry:
    """Name -> blueprint lookup, populated once at startup and passed to whoever needs it."""

    def __init__(self, blueprints: list[Blueprint] | None = None) -> None:
        self._blueprints: dict[str, Blueprint] = {}
        for blueprint in blueprints or []:
            self.register(blueprint)

    def register(self, blueprint: Blueprint) -> None:
        if blueprint.name in self._blueprints:
            raise RegistryError(
                f"Blueprint already registered: {blueprint.name}",
                code="duplicate_blueprint",
                details={"name": blueprint.name},
            )
        self._blueprints[blueprint.name] = blueprint

    def names(self) -> list[str]:
        return sorted(self._blueprints)

    def lookup(self, name: str) -> Blueprint:
        blueprint = self._blueprints.get(name)
        if blueprint is None:
            known = ", ".join(self.names()) or "(none)"
            raise RegistryError(
                f"Unknown blueprint: {name}. Known blueprints: {known}.",
                code="unknown_blueprint",
                details={"name": name, "known": self.names()},
            )
        return blueprint

    def host_of(self, blueprint: Blueprint) -> Blueprint:
        if blueprint.host is None:
            raise RegistryError(
                f"Blueprint {blueprint.name!r} does not declare a host blueprint.",
                code="missing_host",
                details={"name": blueprint.name},
            )
        return self.lookup(blueprint.host)


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RegistryError(f"Failed to read {path}: {e}", code="unreadable") from e
    except yaml.YAMLError as e:
        raise RegistryError(f"Failed to parse YAML in {path}: {e}", code="invalid_yaml") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RegistryError(
            f"Expected a YAML mapping in {path}, got {type(raw).__name__}.",
            code="invalid_root",
        )
    return raw


def _ensure_no_unknown_keys(*, data: dict[str, Any], allowed: frozenset[str], where: str) -> None:
    unknown = set(data) - allowed
    if not unknown:
        return
    unknown_list = ", ".join(sorted(str(k) for k in unknown))
    allowed_list = ", ".join(sorted(allowed))
    raise RegistryError(
        f"Unknown keys in {where}: {unknown_list}. Allowed: {allowed_list}.",
        code="unknown_keys",
        details={"where": where, "unknown": sorted(str(k) for k in unknown)},
    )


def _optional_str(value: Any, *, where: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise RegistryError(f"Expected non-empty string for {where}.", code="invalid_field")
    return value.strip()


def _parse_entry(name: Any, data: Any, *, root: Path, path: Path) -> Blueprint:
    if not isinstance(name, str) or not name.strip():
        raise RegistryError(f"Blueprint names must be non-empty strings in {path}.", code="invalid_field")
    where = f"{path}: blueprints.{name}"
    if not isinstance(data, dict):
        raise RegistryError(f"Expected a mapping for {where}.", code="invalid_field")
    _ensure_no_unknown_keys(data=data, allowed=_ALLOWED_ENTRY_KEYS, where=where)

    raw_path = _optional_str(data.get("path"), where=f"{where}.path")
    if raw_path is None:
        raise RegistryError(f"Missing required field {where}.path.", code="invalid_field")
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        candidate = root / candidate

    return Blueprint(
        name=name,
        path=candidate,
        host=_optional_str(data.get("host"), where=f"{where}.host"),
    )


def _check_hosts(blueprints: dict[str, Blueprint], *, path: Path) -> None:
    for blueprint in blueprints.values():
        seen: list[str] = [blueprint.name]
        current = blueprint
        while current.host is not None:
            if current.host not in blueprints:
                raise RegistryError(
                    f"{path}: blueprints.{current.name}.host refers to unknown blueprint {current.host!r}.",
                    code="unknown_host",
                    details={"name": current.name, "host": current.host},
                )
            if current.host in seen:
                cycle = " -> ".join([*seen, current.host])
                raise RegistryError(
                    f"{path}: blueprint host chain forms a cycle: {cycle}.",
                    code="host_cycle",
                    details={"cycle": [*seen, current.host]},
                )
            seen.append(current.host)
            current = blueprints[current.host]


def load_registry(path: Path) -> BlueprintRegistry:
    """
    Build a registry from a YAML config file.

    Relative blueprint paths are resolved against the directory holding the config file.

    Raises
    ------
    RegistryError
        If the file cannot be read or parsed, or describes an invalid registry.
    """

    data = _load_yaml_mapping(path)
    _ensure_no_unknown_keys(data=data, allowed=_ALLOWED_TOP_LEVEL_KEYS, where=str(path))

    version = data.get("version", _REGISTRY_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        raise RegistryError(f"{path}: version must be an integer.", code="invalid_version")
    if version != _REGISTRY_VERSION:
        raise RegistryError(
            f"{path}: unsupported registry version {version} (expected {_REGISTRY_VERSION}).",
            code="invalid_version",
            details={"version": version},
        )

    entries = data.get("blueprints")
    if entries is None:
        entries = {}
    if not isinstance(entries, dict):
        raise RegistryError(f"{path}: blueprints must be a mapping.", code="invalid_field")

    root = path.parent
    parsed: dict[str, Blueprint] = {}
    for name, entry in entries.items():
        blueprint = _parse_entry(name, entry, root=root, path=path)
        parsed[blueprint.name] = blueprint
    _check_hosts(parsed, path=path)

    logger.debug("loaded %d blueprints from %s", len(parsed), path)
    return BlueprintRegistry(list(parsed.values()))
