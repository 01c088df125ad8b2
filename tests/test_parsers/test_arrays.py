from argvtree import parse_args


def test_repeated_short_values_accumulate():
    assert parse_args(["-v", "a", "-v", "b", "-v", "c"]) == {"v": ["a", "b", "c"], "_": []}


def test_repeated_auto_strings_accumulate():
    assert parse_args(["-s", "foo", "-s", "bar"]) == {"s": ["foo", "bar"], "_": []}


def test_repeated_declared_strings_accumulate():
    args = parse_args(["-s", "foo", "-s", "bar", "-s"], string=["s"])
    assert args == {"s": ["foo", "bar", ""], "_": []}


def test_repeated_auto_booleans_overwrite():
    assert parse_args(["--bool", "--bool"]) == {"bool": True, "_": []}


def test_repeated_declared_booleans_overwrite():
    args = parse_args(["--bool", "moo", "--bool"], boolean=["bool"])
    assert args == {"bool": True, "_": ["moo"]}


def test_auto_string_overwrites_auto_bool():
    assert parse_args(["--mixed", "--mixed", "str"]) == {"mixed": "str", "_": []}


def test_auto_bool_accumulates_with_auto_string():
    assert parse_args(["--mixed", "str", "--mixed"]) == {"mixed": ["str", True], "_": []}


def test_declared_boolean_overwrites_string():
    options = {"boolean": ["b"]}
    assert parse_args(["-b=xyz"], options) == {"b": "xyz", "_": []}
    assert parse_args(["-b=xyz", "-b"], options) == {"b": True, "_": []}


def test_declared_boolean_alias_overwrites_string():
    options = {"boolean": ["b"], "alias": {"b": "B"}}
    assert parse_args(["-B=xyz"], options) == {"b": "xyz", "B": "xyz", "_": []}
    assert parse_args(["-B=xyz", "-B"], options) == {"b": True, "B": True, "_": []}


def test_repeated_equals_options_accumulate():
    args = parse_args(["--multi=quux", "--multi=baz", "--multi=7"])
    assert args == {"multi": ["quux", "baz", 7], "_": []}
