import pytest

from argvtree import OptionsError, ParserOptions


def test_single_names_are_wrapped():
    options = ParserOptions(string="s", boolean="b", alias={"a": "alpha"})
    assert options.string == ["s"]
    assert options.boolean == ["b"]
    assert options.alias == {"a": ["alpha"]}
    assert options.boolean_keys == ["b"]
    assert options.all_boolean is False


def test_classic_names():
    options = ParserOptions.from_value({"stopEarly": True, "--": True, "boolean": True})
    assert options.stop_early is True
    assert options.capture_separator is True
    assert options.all_boolean is True
    assert options.boolean_keys == []


def test_none_means_empty():
    options = ParserOptions(string=None, boolean=None, alias=None, default=None)
    assert options.string == []
    assert options.boolean is False
    assert options.alias == {}
    assert options.default == {}


def test_from_value_returns_same_instance():
    options = ParserOptions(string="s")
    assert ParserOptions.from_value(options) is options


def test_from_value_with_overrides():
    options = ParserOptions(string="s", stop_early=True)
    updated = ParserOptions.from_value(options, boolean="b", stopEarly=False)
    assert updated.string == ["s"]
    assert updated.boolean == ["b"]
    assert updated.stop_early is False
    assert options.boolean is False


def test_unknown_must_be_callable():
    with pytest.raises(OptionsError):
        ParserOptions.from_value({"unknown": "nope"})


def test_unknown_option_field_is_rejected():
    with pytest.raises(OptionsError):
        ParserOptions.from_value({"strings": ["s"]})


def test_options_must_be_a_mapping():
    with pytest.raises(OptionsError):
        ParserOptions.from_value(["string"])


def test_invalid_alias_type():
    with pytest.raises(OptionsError):
        ParserOptions.from_value({"alias": ["a", "b"]})
