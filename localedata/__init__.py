"""CLDR display names for currencies, locales and time zones."""

from __future__ import annotations

import logging

from .core.bundles import LocaleData, normalize_locale
from .core.errors import (
    DuplicateKeyError,
    InvalidLocaleError,
    LocaleDataError,
    MalformedTableError,
    ResourcePackageError,
    TableNotFoundError,
)
from .core.models import NO_INHERITANCE_MARKER, TableKind, TimeZoneNames
from .core.names import (
    currency_display_name,
    currency_name,
    currency_symbol,
    exemplar_city,
    key_display_name,
    language_display_name,
    locale_display_name,
    script_display_name,
    territory_display_name,
    timezone_display_names,
    type_display_name,
    variant_display_name,
)
from .core.serialization import dump_table, parse_table
from .startup import init

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "DuplicateKeyError",
    "InvalidLocaleError",
    "LocaleData",
    "LocaleDataError",
    "MalformedTableError",
    "NO_INHERITANCE_MARKER",
    "ResourcePackageError",
    "TableKind",
    "TableNotFoundError",
    "TimeZoneNames",
    "currency_display_name",
    "currency_name",
    "currency_symbol",
    "dump_table",
    "exemplar_city",
    "init",
    "key_display_name",
    "language_display_name",
    "locale_display_name",
    "normalize_locale",
    "parse_table",
    "script_display_name",
    "territory_display_name",
    "timezone_display_names",
    "type_display_name",
    "variant_display_name",
]
