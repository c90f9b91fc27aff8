"""Display-name lookups.

Each lookup reads exactly one table, selected by kind and locale, and
returns ``None`` when the key is missing from it or when the locale has no
table of that kind. Parent locales are never consulted; callers that want
a fallback chain build it on top of these functions.
"""

from __future__ import annotations

from typing import Optional

from .bundles import LocaleData
from .models import EXEMPLAR_CITY_PREFIX, TableKind, TimeZoneNames
from .serialization import TableValue


def _lookup(kind: TableKind, locale: str, key: str) -> Optional[TableValue]:
    table = LocaleData.find_table(kind, locale)
    if table is None:
        return None
    return table.get(key)


def _text(kind: TableKind, locale: str, key: str) -> Optional[str]:
    value = _lookup(kind, locale, key)
    return value if isinstance(value, str) else None


def currency_display_name(locale: str, currency_code: str) -> Optional[str]:
    """Look up a currency table key as written.

    Upper-case codes carry symbol overrides, lower-case codes display names.
    """
    return _text(TableKind.CURRENCY, locale, currency_code)


def currency_symbol(locale: str, currency_code: str) -> Optional[str]:
    return _text(TableKind.CURRENCY, locale, currency_code.upper())


def currency_name(locale: str, currency_code: str) -> Optional[str]:
    return _text(TableKind.CURRENCY, locale, currency_code.lower())


def locale_display_name(locale: str, code: str) -> Optional[str]:
    """Look up a locale-names key as written: a language, script, territory,
    ``%%`` variant, full locale id, or ``key.*``/``type.*`` metadata key."""
    return _text(TableKind.LOCALE, locale, code)


def language_display_name(locale: str, language: str) -> Optional[str]:
    return _text(TableKind.LOCALE, locale, language.lower())


def script_display_name(locale: str, script: str) -> Optional[str]:
    return _text(TableKind.LOCALE, locale, script.title())


def territory_display_name(locale: str, territory: str) -> Optional[str]:
    return _text(TableKind.LOCALE, locale, territory.upper())


def variant_display_name(locale: str, variant: str) -> Optional[str]:
    return _text(TableKind.LOCALE, locale, "%%" + variant.upper())


def key_display_name(locale: str, key: str) -> Optional[str]:
    # Unicode locale extension key, e.g. "ca" for calendar
    return _text(TableKind.LOCALE, locale, f"key.{key}")


def type_display_name(locale: str, key: str, type_: str) -> Optional[str]:
    return _text(TableKind.LOCALE, locale, f"type.{key}.{type_}")


def timezone_display_names(locale: str, tzid: str) -> Optional[TimeZoneNames]:
    value = _lookup(TableKind.TIMEZONE, locale, tzid)
    return value if isinstance(value, TimeZoneNames) else None


def exemplar_city(locale: str, tzid: str) -> Optional[str]:
    return _text(TableKind.TIMEZONE, locale, EXEMPLAR_CITY_PREFIX + tzid)
