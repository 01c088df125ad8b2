from argvtree import parse_args


def test_flag_boolean():
    args = parse_args(["-t", "moo"], boolean="t")
    assert args == {"t": True, "_": ["moo"]}
    assert args["t"] is True


def test_flag_boolean_value():
    args = parse_args(
        ["--verbose", "false", "moo", "-t", "true"],
        boolean=["t", "verbose"],
        default={"verbose": True},
    )
    assert args == {"verbose": False, "t": True, "_": ["moo"]}


def test_flag_boolean_default_false():
    args = parse_args(
        ["moo"], boolean=["t", "verbose"], default={"verbose": False, "t": False}
    )
    assert args == {"verbose": False, "t": False, "_": ["moo"]}


def test_boolean_groups():
    """Declared flags that never appear are preset to False."""
    args = parse_args(["-x", "-z", "one", "two", "three"], boolean=["x", "y", "z"])
    assert args == {"x": True, "y": False, "z": True, "_": ["one", "two", "three"]}
    assert args["y"] is False


def test_boolean_and_alias():
    opts = {"alias": {"h": "herp"}, "boolean": "herp"}
    expected = {"herp": True, "h": True, "_": ["derp"]}
    assert parse_args(["-h", "derp"], opts) == expected
    assert parse_args(["--herp", "derp"], opts) == expected


def test_boolean_and_alias_list():
    opts = {"alias": {"h": ["herp", "harp"]}, "boolean": "h"}
    expected = {"harp": True, "herp": True, "h": True, "_": ["derp"]}
    assert parse_args(["-h", "derp"], opts) == expected
    assert parse_args(["--herp", "derp"], opts) == expected
    assert parse_args(["--harp", "derp"], opts) == expected


def test_boolean_and_alias_explicit_true():
    opts = {"alias": {"h": "herp"}, "boolean": "h"}
    expected = {"herp": True, "h": True, "_": []}
    assert parse_args(["-h", "true"], opts) == expected
    assert parse_args(["--herp", "true"], opts) == expected


def test_boolean_does_not_affect_other_equals_values():
    args = parse_args(["--boool", "--other=true"], boolean="boool")
    assert args["boool"] is True
    assert args["other"] == "true"

    args = parse_args(["--boool", "--other=false"], boolean="boool")
    assert args["boool"] is True
    assert args["other"] == "false"


def test_boolean_equals_true_and_false():
    args = parse_args(["--boool=true"], default={"boool": False}, boolean=["boool"])
    assert args["boool"] is True
    args = parse_args(["--boool=false"], default={"boool": True}, boolean=["boool"])
    assert args["boool"] is False


def test_boolean_equals_anything_else_is_true():
    assert parse_args(["--boool=nope"], boolean="boool")["boool"] is True


def test_boolean_something_similar_to_true():
    assert parse_args(["-h", "true.txt"], boolean="h") == {"h": True, "_": ["true.txt"]}


def test_supplied_default_for_boolean_using_alias():
    args = parse_args(["moo"], boolean=["bool"], alias={"bool": "b"}, default={"b": True})
    assert args == {"bool": True, "b": True, "_": ["moo"]}


def test_boolean_and_alias_equals_false():
    args = parse_args(
        ["--boool=false"], default={"b": True}, alias={"b": "boool"}, boolean=["b"]
    )
    assert args["boool"] is False
    assert args["b"] is False


def test_boolean_number_goes_to_positional():
    assert parse_args(["-b", "123"], boolean="b") == {"b": True, "_": [123]}


def test_all_boolean():
    args = parse_args(["moo", "--honk", "cow"], boolean=True)
    assert args == {"honk": True, "_": ["moo", "cow"]}


def test_all_boolean_only_affects_bare_long_options():
    args = parse_args(["moo", "--honk", "cow", "-p", "55", "--tacos=good"], boolean=True)
    assert args == {"honk": True, "tacos": "good", "p": 55, "_": ["moo", "cow"]}


def test_default_boolean_values():
    args = parse_args([], boolean="sometrue", default={"sometrue": True})
    assert args["sometrue"] is True
    args = parse_args([], boolean="somefalse", default={"somefalse": False})
    assert args["somefalse"] is False


def test_boolean_default_none():
    assert parse_args([], boolean="maybe", default={"maybe": None})["maybe"] is None
    args = parse_args(["--maybe"], boolean="maybe", default={"maybe": None})
    assert args["maybe"] is True


def test_string_declaration_wins_over_boolean():
    """A key declared both ways gets '' for a bare flag and never takes a value."""
    args = parse_args(["--both", "next"], boolean="both", string="both")
    assert args == {"both": "", "_": ["next"]}
