from tabhtml.renderer.config import DEFAULT_CFG, TOGGLE_KEYS, enabled_dimensions, merge_cfg


def test_defaults_turn_every_toggle_off():
    for key in TOGGLE_KEYS:
        assert DEFAULT_CFG[key] is False
    assert DEFAULT_CFG["stackSupported"] is None
    assert DEFAULT_CFG["locale"] == "en"


def test_merge_cfg_applies_stored_then_override():
    stored = {"groupByWindow": True, "groupByHost": True, "locale": "de"}
    override = {"groupByHost": False, "indentStyle": 1}

    merged = merge_cfg(stored, override)

    assert merged["groupByWindow"] is True
    assert merged["groupByHost"] is False
    assert merged["indentStyle"] is True
    assert merged["groupByStack"] is False
    assert merged["locale"] == "de"


def test_merge_cfg_treats_absent_and_null_toggles_as_false():
    merged = merge_cfg({"groupByWindow": None}, None)

    assert merged["groupByWindow"] is False
    assert DEFAULT_CFG["groupByWindow"] is False


def test_enabled_dimensions_forces_stack_off_without_browser_support():
    cfg = merge_cfg({"groupByWindow": True, "groupByStack": True}, None)

    assert enabled_dimensions(cfg) == {"window": True, "stack": True, "host": False}
    assert enabled_dimensions(cfg, stacks_available=False) == {"window": True, "stack": False, "host": False}


def test_merge_cfg_parses_string_toggles_from_hand_edited_prefs():
    merged = merge_cfg({"groupByHost": "false", "groupByWindow": "Yes", "indentStyle": "0"}, None)

    assert merged["groupByHost"] is False
    assert merged["groupByWindow"] is True
    assert merged["indentStyle"] is False
