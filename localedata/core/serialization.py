"""JSON encoding of display-name tables.

The packaged resources are flat JSON objects, ASCII only, with every
non-ASCII code point written as a ``\\uXXXX`` escape. Timezone entries are
arrays of exactly six strings; everything else is a plain string.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from .errors import DuplicateKeyError, MalformedTableError
from .models import EXEMPLAR_CITY_PREFIX, TableKind, TimeZoneNames

TableValue = Union[str, TimeZoneNames]
Table = Mapping[str, TableValue]


def _reject_duplicates(source: str) -> Callable[[List[Tuple[str, Any]]], Dict[str, Any]]:
    def hook(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key, value in pairs:
            if key in data:
                raise DuplicateKeyError(f"{source}: duplicate key {key!r}")
            data[key] = value
        return data

    return hook


def _coerce_value(kind: TableKind, key: str, value: Any, source: str) -> TableValue:
    if kind is TableKind.TIMEZONE and not key.startswith(EXEMPLAR_CITY_PREFIX):
        if not isinstance(value, (list, tuple)) or len(value) != len(TimeZoneNames._fields):
            raise MalformedTableError(
                f"{source}: {key!r} must hold {len(TimeZoneNames._fields)} names, got {value!r}"
            )
        if not all(isinstance(name, str) for name in value):
            raise MalformedTableError(f"{source}: {key!r} holds a non-string name")
        return TimeZoneNames(*value)
    if not isinstance(value, str):
        raise MalformedTableError(f"{source}: {key!r} must map to a string, got {value!r}")
    return value


def parse_table(kind: TableKind | str, text: str, source: str = "<string>") -> Table:
    """Decode one JSON resource into an immutable table."""
    kind = TableKind(kind)
    try:
        raw = json.loads(text, object_pairs_hook=_reject_duplicates(source))
    except json.JSONDecodeError as e:
        raise MalformedTableError(f"{source}: invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise MalformedTableError(f"{source}: expected a JSON object, got {type(raw).__name__}")

    table: Dict[str, TableValue] = {}
    for key, value in raw.items():
        table[key] = _coerce_value(kind, key, value, source)
    return MappingProxyType(table)


def dump_table(kind: TableKind | str, table: Table) -> str:
    """Encode a table in the packaged resource format."""
    kind = TableKind(kind)
    data: Dict[str, Any] = {}
    for key, value in table.items():
        if not isinstance(key, str):
            raise MalformedTableError(f"<dump>: key {key!r} is not a string")
        value = _coerce_value(kind, key, value, "<dump>")
        data[key] = list(value) if isinstance(value, TimeZoneNames) else value
    return json.dumps(data, indent=2, ensure_ascii=True) + "\n"
