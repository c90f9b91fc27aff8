"""
Display-name lookups against the packaged CLDR tables.
"""

import pytest

from localedata import (
    InvalidLocaleError,
    NO_INHERITANCE_MARKER,
    TimeZoneNames,
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


def test_swiss_german_franc_name_and_symbol():
    assert currency_display_name("gsw", "chf") == "Schwiizer Franke"
    assert currency_display_name("gsw", "CHF") == "CHF"


def test_currency_symbol_keeps_code_points():
    assert currency_display_name("gsw", "ATS") == "öS"
    assert currency_symbol("gsw", "ats") == "öS"
    assert currency_name("gsw", "ATS") == "Öschtriichische Schilling"


def test_currency_lookup_is_case_sensitive():
    # Upper case is the symbol, lower case the name
    assert currency_display_name("gsw", "usd") == "US-Dollar"
    assert currency_display_name("gsw", "USD") == "$"


def test_akan_shares_language_and_territory_name():
    assert locale_display_name("ak", "DE") == "Gyaaman"
    assert locale_display_name("ak", "de") == "Gyaaman"


def test_akan_language_and_territory_can_differ():
    assert language_display_name("ak", "RO") == "Romenia kasa"
    assert territory_display_name("ak", "ro") == "Romenia"


def test_en_001_los_angeles_is_pacific_time():
    names = timezone_display_names("en_001", "America/Los_Angeles")
    assert isinstance(names, TimeZoneNames)
    assert names[0] == "Pacific Standard Time"
    assert names == (
        "Pacific Standard Time",
        NO_INHERITANCE_MARKER,
        "Pacific Daylight Time",
        NO_INHERITANCE_MARKER,
        "Pacific Time",
        NO_INHERITANCE_MARKER,
    )


def test_zones_sharing_a_metazone_get_equal_names():
    assert timezone_display_names("en_001", "America/Denver") == timezone_display_names(
        "en_001", "America/Phoenix"
    )


@pytest.mark.parametrize(
    "lookup, locale, key, other_locale",
    [
        (currency_display_name, "ps", "USD", "gsw"),
        (locale_display_name, "yo_BJ", "key.ca", "zgh"),
        (timezone_display_names, "en_001", "Europe/London", "en"),
        (exemplar_city, "en_001", "Etc/Unknown", "en"),
    ],
)
def test_no_cross_locale_leak(lookup, locale, key, other_locale):
    assert lookup(other_locale, key) is not None
    assert lookup(locale, key) is None


def test_missing_key_is_none():
    assert currency_display_name("gsw", "xyz") is None
    assert locale_display_name("ak", "Klingon") is None
    assert timezone_display_names("en", "Mars/Olympus_Mons") is None


def test_locale_without_table_of_that_kind_is_none():
    # gsw has currency and timezone tables but no locale-names table
    assert locale_display_name("gsw", "DE") is None
    assert currency_display_name("xx", "CHF") is None
    assert timezone_display_names("ak", "Africa/Accra") is None


def test_locale_tags_are_normalized():
    assert timezone_display_names("EN-001", "America/Los_Angeles") is not None
    assert locale_display_name("zh-hant-hk", "Latn") == "拉丁字母"


def test_malformed_locale_raises():
    with pytest.raises(InvalidLocaleError):
        currency_display_name("", "CHF")
    with pytest.raises(InvalidLocaleError):
        locale_display_name("en/../../etc", "DE")


def test_script_and_variant_names():
    assert script_display_name("zh_Hant_HK", "LATN") == "拉丁字母"
    assert variant_display_name("zh_Hant_HK", "1901") == "傳統德國拼字法"
    assert variant_display_name("zh_Hant_HK", "scotland") == "蘇格蘭標準英語"


def test_full_locale_names():
    assert locale_display_name("pt_PT", "en_GB") == "inglês britânico"


def test_extension_key_and_type_names():
    assert key_display_name("pt_PT", "cf") == "Formato monetário"
    assert type_display_name("pt_PT", "ca", "gregorian") == "Calendário gregoriano"
    assert key_display_name("zh_Hant_HK", "ms") == "度量衡系統"
    assert type_display_name("pt_PT", "ca", "no-such-calendar") is None


def test_exemplar_city():
    assert exemplar_city("dsb", "Asia/Yakutsk") == "Jakutsk"
    assert exemplar_city("en", "Etc/Unknown") == "Unknown City"


def test_exemplar_city_key_is_not_a_zone():
    assert timezone_display_names("dsb", "timezone.excity.Asia/Yakutsk") is None


def test_empty_timezone_names_are_kept():
    names = timezone_display_names("dsb", "Europe/London")
    assert names == ("Greenwichski cas", "", "Britiski lěśojski cas", "", "", "")
    assert names.display_name() == "Greenwichski cas"
    assert names.display_name(short=True) is None
    assert names.display_name(generic=True) is None
