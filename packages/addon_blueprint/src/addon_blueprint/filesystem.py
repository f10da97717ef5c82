from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from addon_blueprint.errors import ManifestParseError
from addon_blueprint.manifest_merge import parse_manifest_text

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    def read_json(self, path: Path) -> Any | None:
        """Return the parsed document at `path`, or None when nothing exists there."""
        ...

    def write_text(self, path: Path, text: str) -> None: ...


class LocalFileSystem:
    """Synchronous local-disk implementation; every call opens and releases one handle."""

    def read_json(self, path: Path) -> dict[str, Any] | None:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise ManifestParseError(f"Manifest is not valid UTF-8: {path}: {e}", source=path) from e
        logger.debug("read %s (%d bytes)", path, len(text))
        if not text.strip():
            return None
        return parse_manifest_text(text, source=path)

    def write_text(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.debug("wrote %s (%d bytes)", path, len(text))
