from __future__ import annotations

import re
from typing import TYPE_CHECKING

from addon_blueprint.errors import NameFormatError, UnsupportedContextError

if TYPE_CHECKING:  # pragma: no cover
    from addon_blueprint.project import ProjectContext

_TRAILING_SEPARATOR_RE = re.compile(r"(/|\\)$")


def normalize_entity_name(name: str | None) -> str:
    """Validate an entity name for any blueprint kind and return it unchanged."""
    if not name:
        raise NameFormatError(
            "The `generate <entity-name>` command requires an entity name to be specified."
        )
    if _TRAILING_SEPARATOR_RE.search(name):
        suggestion = _TRAILING_SEPARATOR_RE.sub("", name)
        raise NameFormatError(
            f'You specified "{name}", but you can\'t use a trailing slash as an entity name '
            f'with generators. Please re-run the command with "{suggestion}".'
        )
    return name


def normalize_addon_entity_name(name: str | None, context: ProjectContext) -> str:
    # Addons may be generated inside other addons, never inside an app.
    if context.is_existing_project() and not context.is_addon():
        raise UnsupportedContextError("Generating an addon in an existing ember-cli project is not supported.")
    return normalize_entity_name(name)
