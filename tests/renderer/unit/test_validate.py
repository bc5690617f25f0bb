import pytest

from tabhtml.renderer.models import Node, Tab
from tabhtml.renderer.rendering import render
from tabhtml.renderer.validate import _validate_coverage, _validate_rendered


def _tab(url="https://a.com/", index=0):
    return Tab(url=url, title="T", window_id=1, index=index)


def test_validate_coverage_accepts_exact_partition():
    a, b = _tab(index=0), _tab(index=1)
    grouped = {"all": {"none": {"a.com": [a], "other": [b]}}}

    _validate_coverage([a, b], grouped)


def test_validate_coverage_rejects_double_counted_tab():
    a = _tab()
    grouped = {"all": {"none": {"all": [a]}, "work": {"all": [a]}}}

    with pytest.raises(ValueError, match="Duplicate tab across buckets"):
        _validate_coverage([a], grouped)


def test_validate_coverage_rejects_missing_tab():
    a, b = _tab(url="https://a.com/"), _tab(url="https://b.com/")
    grouped = {"all": {"none": {"all": [a]}}}

    with pytest.raises(ValueError, match="Not all tabs assigned"):
        _validate_coverage([a, b], grouped)


def test_validate_coverage_tracks_equal_tabs_separately():
    a, a_again = _tab(), _tab()
    grouped = {"all": {"none": {"all": [a, a_again]}}}

    _validate_coverage([a, a_again], grouped)


def test_validate_rendered_checks_link_count():
    grouped = {"all": {"none": {"all": [_tab()]}}}
    doc = render(grouped, "T")
    _validate_rendered(doc, grouped)

    with pytest.raises(ValueError, match="Rendered 1 tab links for 2 tabs"):
        _validate_rendered(doc, {"all": {"none": {"all": [_tab(), _tab()]}}})


def test_validate_rendered_checks_order_within_host():
    grouped = {"all": {"none": {"all": [_tab(index=0), _tab(index=1)]}}}
    host = Node(
        "container",
        attrs={"class": "host", "data-key": "all"},
        children=[
            Node("paragraph", attrs={"data-index": "1"}, children=[Node("link", text="b")]),
            Node("paragraph", attrs={"data-index": "0"}, children=[Node("link", text="a")]),
        ],
    )
    doc = Node("document", text="T", children=[host])

    with pytest.raises(ValueError, match="Tab order incorrect"):
        _validate_rendered(doc, grouped)
