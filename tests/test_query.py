from gtranslate.base import TextInput
from gtranslate.query import build_params, build_query, prepare_text

KEY = "K" * 39


def test_prepare_text_wraps_single_string():
    assert prepare_text("Hello") == TextInput(texts=["Hello"], single=True)


def test_prepare_text_keeps_sequence_order():
    prepared = prepare_text(("Hello", "Bye"))
    assert prepared.texts == ["Hello", "Bye"]
    assert prepared.single is False


def test_prepare_text_single_item_list_is_not_single():
    assert prepare_text(["Hello"]).single is False


def test_build_params_omits_missing_values():
    params = build_params(KEY, texts=["Hello"], target="bn")
    assert params == {"q": ["Hello"], "target": "bn", "key": KEY}


def test_build_params_languages_without_text():
    assert build_params(KEY) == {"key": KEY}
    assert build_params(KEY, target="de") == {"target": "de", "key": KEY}


def test_repeated_keys_for_sequence_values():
    query = build_query(build_params(KEY, texts=["Hello", "Bye"], target="bn", source="en"))
    assert query == f"q=Hello&q=Bye&target=bn&source=en&key={KEY}"


def test_values_are_form_encoded():
    query = build_query({"q": ["Hello world", "a&b=c", "ñ"], "target": "es"})
    assert query == "q=Hello+world&q=a%26b%3Dc&q=%C3%B1&target=es"


def test_scalar_only_query():
    assert build_query({"key": KEY, "target": "fr"}) == f"key={KEY}&target=fr"


def test_empty_params():
    assert build_query({}) == ""
