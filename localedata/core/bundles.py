from __future__ import annotations

import logging
import re
import threading
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import (
    InvalidLocaleError,
    MalformedTableError,
    ResourcePackageError,
    TableNotFoundError,
)
from .models import TableKind
from .serialization import Table, parse_table


log = logging.getLogger(__name__)

DEFAULT_RESOURCE_PACKAGE = "localedata.locales"

_TAG_RE = re.compile(r"^[A-Za-z0-9]+(?:[_-][A-Za-z0-9]+)*$")


def normalize_locale(tag: str) -> str:
    """Return the resource spelling of a locale tag.

    ``zh-hant-hk`` becomes ``zh_Hant_HK`` and ``EN-001`` becomes ``en_001``.
    """
    if not isinstance(tag, str) or not _TAG_RE.match(tag.strip()):
        raise InvalidLocaleError(f"Invalid locale tag: {tag!r}")
    language, *rest = tag.strip().replace("-", "_").split("_")
    parts = [language.lower()]
    for sub in rest:
        if len(sub) == 4 and sub.isalpha():
            parts.append(sub.title())
        elif (len(sub) == 2 and sub.isalpha()) or (len(sub) == 3 and sub.isdigit()):
            parts.append(sub.upper())
        else:
            parts.append(sub)
    return "_".join(parts)


class LocaleData:
    _package: str = DEFAULT_RESOURCE_PACKAGE
    _tables: Dict[Tuple[TableKind, str], Table] = {}
    _lock = threading.RLock()

    @classmethod
    def configure(cls, resource_package: str) -> None:
        try:
            root = resources.files(resource_package)
        except (ModuleNotFoundError, TypeError) as e:
            raise ResourcePackageError(f"Cannot use {resource_package!r} for tables: {e}") from e
        if not root.is_dir():
            raise ResourcePackageError(f"{resource_package!r} is not a resource package")
        with cls._lock:
            if resource_package != cls._package:
                log.info("Using table resources from %s", resource_package)
            cls._package = resource_package
            cls._tables = {}

    @classmethod
    def clear_cache(cls) -> None:
        with cls._lock:
            cls._tables = {}

    @classmethod
    def _kind_dir(cls, kind: TableKind) -> Traversable:
        return resources.files(cls._package).joinpath(kind.value)

    @classmethod
    def available_locales(cls, kind: TableKind | str) -> List[str]:
        kind = TableKind(kind)
        folder = cls._kind_dir(kind)
        if not folder.is_dir():
            return []
        return sorted(
            entry.name[: -len(".json")]
            for entry in folder.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        )

    @classmethod
    def has_table(cls, kind: TableKind | str, locale: str) -> bool:
        kind = TableKind(kind)
        locale = normalize_locale(locale)
        if (kind, locale) in cls._tables:
            return True
        return cls._kind_dir(kind).joinpath(f"{locale}.json").is_file()

    @classmethod
    def load_table(cls, kind: TableKind | str, locale: str) -> Table:
        kind = TableKind(kind)
        locale = normalize_locale(locale)
        key = (kind, locale)
        table = cls._tables.get(key)
        if table is not None:
            return table

        with cls._lock:
            # Another thread may have loaded it while we waited
            table = cls._tables.get(key)
            if table is not None:
                return table
            resource = cls._kind_dir(kind).joinpath(f"{locale}.json")
            if not resource.is_file():
                log.debug("No %s table for locale %s", kind.value, locale)
                raise TableNotFoundError(f"No {kind.value} table for locale {locale!r}")
            source = f"{cls._package}/{kind.value}/{locale}.json"
            try:
                table = parse_table(kind, resource.read_text(encoding="utf-8"), source=source)
            except MalformedTableError as e:
                log.error("Rejected table %s: %s", source, e.message)
                raise
            cls._tables = {**cls._tables, key: table}
            log.debug("Loaded %s table for %s (%d entries)", kind.value, locale, len(table))
            return table

    @classmethod
    def find_table(cls, kind: TableKind | str, locale: str) -> Optional[Table]:
        try:
            return cls.load_table(kind, locale)
        except TableNotFoundError:
            return None

    @classmethod
    def preload(cls, kinds: Optional[Iterable[TableKind | str]] = None) -> int:
        selected = list(TableKind) if kinds is None else [TableKind(k) for k in kinds]
        count = 0
        for kind in selected:
            for locale in cls.available_locales(kind):
                cls.load_table(kind, locale)
                count += 1
        log.info("Preloaded %d tables (%s)", count, ", ".join(k.value for k in selected) or "none")
        return count
