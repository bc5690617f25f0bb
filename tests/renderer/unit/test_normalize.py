from tabhtml.renderer.models import Tab
from tabhtml.renderer.normalize import _as_int, _ext_data, _normalize_tabs, _normalize_title


def test_normalize_tabs_accepts_browser_camel_case_records():
    tabs = _normalize_tabs(
        [
            {
                "url": " https://example.com/a ",
                "title": "Example\n  page",
                "windowId": 12,
                "index": 3,
                "extData": '{"group":"work"}',
                "active": True,
            }
        ]
    )

    assert tabs == [
        Tab(
            url="https://example.com/a",
            title="Example page",
            window_id=12,
            index=3,
            ext_data='{"group":"work"}',
        )
    ]


def test_normalize_tabs_accepts_snake_case_and_defaults_missing_fields():
    tabs = _normalize_tabs(
        [
            {"url": "https://a.com", "title": "A", "window_id": "4", "ext_data": None},
            {"url": "https://b.com"},
        ]
    )

    assert tabs[0].window_id == 4
    assert tabs[0].index == 0
    assert tabs[0].ext_data is None
    assert tabs[1].window_id == 0
    assert tabs[1].index == 1
    assert tabs[1].title == "https://b.com"


def test_normalize_tabs_skips_non_object_records():
    tabs = _normalize_tabs(["https://a.com", None, {"url": "https://b.com", "title": "B"}])

    assert [t.title for t in tabs] == ["B"]
    assert tabs[0].index == 2


def test_normalize_title_collapses_whitespace():
    assert _normalize_title("  a\r\nb\t c  ") == "a b c"


def test_as_int_falls_back_for_non_numeric_values():
    assert _as_int("7", default=0) == 7
    assert _as_int(None, default=5) == 5
    assert _as_int("x", default=5) == 5
    assert _as_int(True, default=5) == 5


def test_ext_data_keeps_strings_and_encodes_decoded_metadata():
    assert _ext_data(None) is None
    assert _ext_data("") == ""
    assert _ext_data("not json") == "not json"
    assert _ext_data({"group": "work"}) == '{"group": "work"}'
