from __future__ import annotations

from pathlib import Path
from typing import Any


class BlueprintError(RuntimeError):
    pass


class UnsupportedContextError(BlueprintError):
    pass


class NameFormatError(BlueprintError):
    pass


class ManifestParseError(BlueprintError):
    def __init__(self, message: str, *, source: Path | None = None) -> None:
        super().__init__(message)
        self.source = source


class RegistryError(BlueprintError):
    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
