"""Exceptions raised by the apiref rendering pipeline.

Structural problems with a symbol record are fatal for that record and
propagate to the caller. Whether a batch keeps going is the orchestrator's
decision (see ``apiref.reference.site_writer.render_package``).
"""

from __future__ import annotations


class ApirefError(Exception):
    """Base exception for apiref errors."""

    pass


class RecordError(ApirefError, ValueError):
    """Raised when a symbol record is missing its discriminant or payload.

    This occurs when:
    - ``kind`` or ``name`` is absent or not a string
    - the kind-specific payload (e.g. ``importDef``) is missing or malformed
    """

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownKindError(RecordError):
    """Raised when a record's ``kind`` is outside the closed kind set."""

    def __init__(self, kind: str, *, name: str | None = None) -> None:
        label = f" for symbol '{name}'" if name else ""
        super().__init__(f"Unknown symbol kind '{kind}'{label}", name=name)
        self.kind = kind


class DocumentLoadError(ApirefError):
    """Raised when extractor output cannot be read or decoded."""

    pass
