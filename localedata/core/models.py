from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional


# CLDR marker for "no name in this locale, do not inherit one either"
NO_INHERITANCE_MARKER = "∅∅∅"
# Timezone tables keep exemplar city names next to the zone tuples
EXEMPLAR_CITY_PREFIX = "timezone.excity."


class TableKind(str, Enum):
    CURRENCY = "currency_names"
    LOCALE = "locale_names"
    TIMEZONE = "timezone_names"


class TimeZoneNames(NamedTuple):
    """Localized names of one time zone.

    Empty strings mean the name is not translated in this locale. The
    no-inheritance marker means the locale deliberately has no name and the
    GMT offset should be shown instead.
    """

    standard_long: str
    standard_short: str
    daylight_long: str
    daylight_short: str
    generic_long: str
    generic_short: str

    def display_name(
        self, daylight: bool = False, short: bool = False, generic: bool = False
    ) -> Optional[str]:
        if generic:
            name = self.generic_short if short else self.generic_long
        elif daylight:
            name = self.daylight_short if short else self.daylight_long
        else:
            name = self.standard_short if short else self.standard_long
        if not name or name == NO_INHERITANCE_MARKER:
            return None
        return name
