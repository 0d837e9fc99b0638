from browserkit.urls import decode_params, drop_empty, encode_params, pick, strip_fragment


def test_encode_params_uses_uri_component_rules():
    assert encode_params({"name": "张三", "q": "a b&c", "mark": "it's(ok)!"}) == (
        "?name=%E5%BC%A0%E4%B8%89&q=a%20b%26c&mark=it's(ok)!"
    )
    assert encode_params({"page": 2}, prefix="") == "page=2"
    assert encode_params({}) == ""


def test_decode_params_strips_fragment_and_decodes():
    url = "https://example.com/list?name=%E5%BC%A0%E4%B8%89&page=2&flag#section?x=1"
    assert decode_params(url) == {"name": "张三", "page": "2", "flag": ""}


def test_decode_params_without_query():
    assert decode_params("https://example.com/") == {}
    assert decode_params("https://example.com/#a?b=1") == {}


def test_decode_params_splits_on_first_equals():
    assert decode_params("?token=abc==") == {"token": "abc=="}


def test_encode_then_decode_keeps_reserved_characters():
    params = {"redirect": "https://example.com/a?b=1&c=2"}
    assert decode_params(encode_params(params)) == params


def test_strip_fragment():
    assert strip_fragment("/a?b=1#top") == "/a?b=1"
    assert strip_fragment("/a") == "/a"


def test_drop_empty_keeps_falsy_non_empty_values():
    assert drop_empty({"a": "", "b": None, "c": 0, "d": False, "e": "x"}) == {
        "c": 0,
        "d": False,
        "e": "x",
    }


def test_pick():
    assert pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"]) == {"a": 1, "c": 3}


def test_encode_params_formats_bool_and_none_like_javascript():
    assert encode_params({"on": True, "off": False, "empty": None}) == "?on=true&off=false&empty=null"
