from hkbus_stops.names import localized_name, normalize_text


def test_preferred_language_first():
    assert localized_name({"en": "Star Ferry", "zh": "天星碼頭"}, preferred=("zh", "tc"), fallback="en") == "天星碼頭"


def test_fallback_language():
    assert localized_name({"en": "Star Ferry", "zh": "天星碼頭"}, preferred=("ja",), fallback="en") == "Star Ferry"


def test_first_available_when_no_match():
    assert localized_name({"ja": "スターフェリー"}, preferred=("zh",), fallback="en") == "スターフェリー"


def test_empty_entries_are_skipped():
    assert localized_name({"zh": "", "en": "Star Ferry"}, preferred=("zh",), fallback="en") == "Star Ferry"


def test_missing_or_plain_names():
    assert localized_name(None) == ""
    assert localized_name({}) == ""
    assert localized_name("Central") == "Central"


def test_normalize_text():
    assert normalize_text("  Café ROAD ") == "cafe road"
    assert normalize_text("彌敦道") == "彌敦道"
    assert normalize_text(None) == ""
