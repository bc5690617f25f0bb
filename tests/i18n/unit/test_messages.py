import pytest

from tabhtml.i18n import MESSAGES, get_message, resolve_locale

REQUIRED_KEYS = {
    "name",
    "mytabs",
    "ashtml",
    "window",
    "stack",
    "host",
    "indent",
    "windowLabel",
    "stackLabel",
    "stackUnavailable",
}


def test_every_locale_has_the_full_catalog():
    for locale, catalog in MESSAGES.items():
        assert REQUIRED_KEYS <= set(catalog), locale
        assert "%s" in catalog["mytabs"], locale


def test_resolve_locale_matches_region_tags_and_falls_back_to_english():
    assert resolve_locale("de") == "de"
    assert resolve_locale("de_AT") == "de"
    assert resolve_locale("FR-ca") == "fr"
    assert resolve_locale("ja") == "en"
    assert resolve_locale(None) == "en"


def test_get_message_looks_up_localized_strings():
    assert get_message("stackLabel") == "Stack"
    assert get_message("stackLabel", "de") == "Stapel"
    assert get_message("mytabs", "xx") == "My tabs %s"


def test_get_message_unknown_key_raises():
    with pytest.raises(KeyError):
        get_message("missing-key")
