from __future__ import annotations

import re

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z\d])([A-Z])")
_DASH_SEPARATOR_RE = re.compile(r"[ _]")
_WORD_SEPARATOR_RE = re.compile(r"[-_.\s]+")

_DUMMY_APP_NAME = "dummy"


def dasherize(value: str) -> str:
    decamelized = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", value).lower()
    return _DASH_SEPARATOR_RE.sub("-", decamelized)


def classify(value: str) -> str:
    """`my-addon/sub_part` -> `MyAddon/SubPart`."""
    segments: list[str] = []
    for segment in value.split("/"):
        words = [w for w in _WORD_SEPARATOR_RE.split(segment) if w]
        segments.append("".join(w[:1].upper() + w[1:] for w in words))
    return "/".join(segments)


def addon_locals(entity_name: str) -> dict[str, str]:
    """Template variables for the addon blueprint; the nested test app is always `dummy`."""
    addon_name = dasherize(entity_name)
    return {
        "name": _DUMMY_APP_NAME,
        "modulePrefix": _DUMMY_APP_NAME,
        "namespace": classify(_DUMMY_APP_NAME),
        "addonName": addon_name,
        "addonModulePrefix": addon_name,
        "addonNamespace": classify(entity_name),
    }
