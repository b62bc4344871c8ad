from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from apiref.core.exceptions import RecordError, UnknownKindError
from apiref.reference.models import DocKind, SymbolRecord, _SymbolBase

_RECORD_ADAPTER: TypeAdapter[SymbolRecord] = TypeAdapter(SymbolRecord)
_KIND_VALUES = frozenset(kind.value for kind in DocKind)


def parse_record(data: Mapping[str, Any] | SymbolRecord) -> SymbolRecord:
    """Validate one raw symbol record into its kind-specific model.

    Already-parsed records are returned unchanged.

    Raises:
        UnknownKindError: ``kind`` is a string outside the closed kind set
        RecordError: the record is not a mapping, or its discriminant,
            name or kind-specific payload is missing or malformed
    """
    if isinstance(data, _SymbolBase):
        return data
    if not isinstance(data, Mapping):
        raise RecordError(
            f"Symbol record must be a mapping, got {type(data).__name__}"
        )

    raw_name = data.get("name")
    name = raw_name if isinstance(raw_name, str) else None

    kind = data.get("kind")
    if kind is None:
        raise RecordError(f"Symbol record{_label(name)} is missing 'kind'", name=name)
    if not isinstance(kind, str):
        raise RecordError(
            f"Symbol record{_label(name)} has non-string 'kind': {kind!r}", name=name
        )
    if kind not in _KIND_VALUES:
        raise UnknownKindError(kind, name=name)

    try:
        return _RECORD_ADAPTER.validate_python(dict(data))
    except ValidationError as exc:
        raise RecordError(_describe_errors(exc, kind, name), name=name) from exc


def parse_records(items: Iterable[Mapping[str, Any] | SymbolRecord]) -> list[SymbolRecord]:
    """Validate a batch of records, failing on the first invalid one."""
    return [parse_record(item) for item in items]


def _label(name: str | None) -> str:
    return f" '{name}'" if name else ""


def _describe_errors(exc: ValidationError, kind: str, name: str | None) -> str:
    details: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # Discriminated unions prefix the location with the tag value.
        if loc and loc[0] == kind:
            loc = loc[1:]
        where = ".".join(loc) or "<record>"
        details.append(f"{where}: {error.get('msg', 'invalid')}")
    return f"Invalid '{kind}' record{_label(name)}: " + "; ".join(details)
