import pytest

from cliplugins import i18n
from cliplugins.i18n import (
    Translator,
    init,
    load_translations,
    normalize_locale,
    render,
    supported_locales,
    translate,
)
from cliplugins.resources import AssetNotFoundError

EN = "i18n/resources/en_US.all.json"
ZH = "i18n/resources/zh_Hans.all.json"


@pytest.fixture(autouse=True)
def english_afterwards():
    yield
    init("en_US", {})


def test_render_fills_placeholders():
    assert render("Services {{.Count}}/{{.Limit}} used", {"Count": 2, "Limit": 10}) == "Services 2/10 used"


def test_render_missing_key():
    assert render("x {{.Missing}}", {}) == "x <no value>"


def test_normalize_locale():
    assert normalize_locale("zh_Hans") == "zh-hans"
    assert normalize_locale("en_US") == "en-us"


def test_supported_locales():
    assert supported_locales() == {"en-us": EN, "zh-hans": ZH}


def test_load_translations():
    assert load_translations(EN)["Name"] == "Name"
    assert load_translations(ZH)["Name"] == "名称"


def test_load_missing_translations_raises():
    with pytest.raises(AssetNotFoundError):
        load_translations("i18n/resources/de_DE.all.json")


@pytest.mark.parametrize(
    "locale, environ",
    [
        ("zh_CN", {}),
        ("zh_Hans", {}),
        (None, {"LC_ALL": "zh_TW.UTF-8"}),
        ("", {"LANG": "zh_HK"}),
    ],
)
def test_chinese_locales_select_simplified(locale, environ):
    translator = init(locale, environ)
    assert translator("Name") == "名称"
    assert translate("Plan") == "套餐"


def test_unsupported_locale_falls_back_to_english():
    translator = init("fr_FR", {"LANG": "C"})
    assert translator("Name") == "Name"
    assert translate("Services {{.Count}}/{{.Limit}} used", {"Count": 2, "Limit": 10}) == "Services 2/10 used"


def test_locale_argument_wins_over_environment():
    assert init("en_US", {"LANG": "zh_CN"})("Name") == "Name"


def test_unknown_id_is_returned_unrendered():
    message = "No CF API endpoint set. Use '{{.Command}}' to target a CloudFoundry environment."
    assert init("en_US", {})(message, {"Command": "cmd"}) == message


def test_translated_messages_are_rendered():
    translator = init("zh_CN", {})
    assert translator("Services {{.Count}}/{{.Limit}} used", {"Count": 2, "Limit": 10}) == "服务 2/10 已使用"


def test_translator_uses_fallback_for_untranslated_ids():
    translator = Translator({}, fallback=Translator({"Name": "Label"}))
    assert translator("Name") == "Label"
    assert Translator({})("Name") == "Name"


def test_translate_without_init_uses_english(monkeypatch):
    monkeypatch.setattr(i18n, "_active", None)
    assert translate("Routes") == "Routes"