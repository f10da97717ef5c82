from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

ADDON_DESCRIPTION = "The default blueprint for ember-cli addons."
TEST_SCRIPT = "ember try:each"
ADDON_KEYWORD = "ember-addon"
PROTOTYPE_EXTENSIONS_PACKAGE = "ember-disable-prototype-extensions"
PROTOTYPE_EXTENSIONS_VERSION = "^1.1.0"
BABEL_PACKAGE = "ember-cli-babel"
ADDON_CONFIG_PATH = "tests/dummy/config"

DEPENDENCY_MAP_KEYS: tuple[str, ...] = ("dependencies", "devDependencies")


class _ProjectNameSentinel:
    def __repr__(self) -> str:
        return "PROJECT_NAME"


# Placeholder resolved to the generating project's name at merge time.
PROJECT_NAME: Any = _ProjectNameSentinel()


@dataclass(frozen=True)
class Overwrite:
    path: tuple[str, ...]
    value: Any


@dataclass(frozen=True)
class DeleteIfPresent:
    key: str


@dataclass(frozen=True)
class EnsureArrayContainsOnce:
    key: str
    value: Any


@dataclass(frozen=True)
class MergeDependencyMap:
    key: str
    defaults: tuple[tuple[str, str], ...] = ()
    forced_versions: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        # Accept plain mappings but store immutable pairs.
        for name in ("defaults", "forced_versions"):
            value = getattr(self, name)
            pairs = tuple(value.items()) if isinstance(value, Mapping) else tuple(tuple(p) for p in value)
            object.__setattr__(self, name, pairs)


@dataclass(frozen=True)
class RelocateDependency:
    name: str
    from_key: str
    to_key: str


@dataclass(frozen=True)
class SortMapKeys:
    key: str


FieldRule = Union[
    Overwrite,
    DeleteIfPresent,
    EnsureArrayContainsOnce,
    MergeDependencyMap,
    RelocateDependency,
    SortMapKeys,
]
RuleSet = tuple[FieldRule, ...]


PACKAGE_MANIFEST_RULES: RuleSet = (
    Overwrite(("name",), PROJECT_NAME),
    Overwrite(("description",), ADDON_DESCRIPTION),
    DeleteIfPresent("private"),
    Overwrite(("scripts", "test"), TEST_SCRIPT),
    EnsureArrayContainsOnce("keywords", ADDON_KEYWORD),
    MergeDependencyMap("dependencies"),
    MergeDependencyMap(
        "devDependencies",
        forced_versions={PROTOTYPE_EXTENSIONS_PACKAGE: PROTOTYPE_EXTENSIONS_VERSION},
    ),
    # npm rejects a package listed in both maps; babel must ship as a runtime dependency.
    RelocateDependency(BABEL_PACKAGE, from_key="devDependencies", to_key="dependencies"),
    Overwrite(("ember-addon", "configPath"), ADDON_CONFIG_PATH),
    SortMapKeys("dependencies"),
    SortMapKeys("devDependencies"),
)

NAME_ONLY_MANIFEST_RULES: RuleSet = (Overwrite(("name",), PROJECT_NAME),)
