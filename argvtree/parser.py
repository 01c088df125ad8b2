# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgvParser` and `parse_args`, the entry points of argvtree.

`parse_args` turns a flat list of argument tokens into a nested mapping of
option names to values plus the list of positional arguments under `"_"`.
Nothing about the options has to be declared up front: `--port 8080` yields
`{"port": 8080}`, `-abc` yields three flags, and `--db.host=x` yields
`{"db": {"host": "x"}}`. Declarations only refine that behavior.

Key Features:
- Long options with attached (`--k=v`) or following (`--k v`) values
- Negated flags (`--no-k`)
- Short clusters (`-abc`) with attached values (`-n5`, `-k=v`, `-I/path`)
- Number coercion, with string-typed keys as an opt-out
- Symmetric alias groups
- Dotted keys written as nested mappings
- Repeated options accumulate into lists; flags overwrite
- Defaults for unset paths
- Optional stop at the first positional and capture of tokens after `--`
- An unknown-token handler that can drop undeclared options

Example Usage:
    args = parse_args(
        ["-v", "--port", "8080", "--no-color", "serve", "--", "-x"],
        boolean=["v"],
        alias={"v": "verbose"},
    )

    # args == {
    #     "v": True, "verbose": True, "port": 8080, "color": False,
    #     "_": ["serve", "-x"],
    # }
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from argvtree.options import ParserOptions
from argvtree.result import ResultAssembler
from argvtree.schema import build_schema
from argvtree.tokenizer import Tokenizer, split_at_separator


class ArgvParser:
    """
    Reusable argument tokenizer.

    Options are validated once. Each call to `parse` builds its own schema and
    result, so one parser can be used for many argument lists.
    """

    def __init__(
        self,
        options: ParserOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        self.options: ParserOptions = ParserOptions.from_value(options, **overrides)

    def parse(self, args: Sequence[Any] | None = None) -> dict[str, Any]:
        """
        Parse an argument list into a nested mapping.

        Args:
            args (Sequence[Any] | None): Tokens to parse, without the program
                name. Defaults to an empty list.

        Returns:
            dict[str, Any]: Option values by name, positional arguments under
            "_", and, when `capture_separator` is set, tokens after `--` under
            "--".
        """
        schema = build_schema(self.options)
        result = ResultAssembler(schema)
        tokens, separated = split_at_separator(list(args or []))

        result.preset_booleans()
        Tokenizer(schema, result, stop_early=self.options.stop_early).scan(tokens)
        return result.finish(separated, capture=self.options.capture_separator)

    def __str__(self) -> str:
        options = self.options
        boolean = "all" if options.all_boolean else len(options.boolean_keys)
        return (
            f"ArgvParser(string={len(options.string)}, boolean={boolean}, "
            f"alias={len(options.alias)}, default={len(options.default)})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse_args(
    args: Sequence[Any] | None = None,
    options: ParserOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """
    Parse an argument list into a nested mapping.

    Args:
        args (Sequence[Any] | None): Tokens to parse, typically `sys.argv[1:]`.
        options (ParserOptions | Mapping | None): Parser options.
        **overrides: Option fields given as keywords, e.g. `string="s"`.

    Returns:
        dict[str, Any]: The parsed arguments.

    Raises:
        OptionsError: If the options cannot be validated.
    """
    return ArgvParser(options, **overrides).parse(args)
