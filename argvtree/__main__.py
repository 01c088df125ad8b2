"""
argvtree Argument Tokenizer

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Prints how a list of tokens is parsed:

    python -m argvtree --boolean v --alias v=verbose -- -v --port 8080 serve
"""

import json
import logging
import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from typing import Any, Sequence

from rich.markup import escape
from rich.pretty import Pretty

from argvtree.console import console
from argvtree.exceptions import ArgvTreeError
from argvtree.parser import ArgvParser
from argvtree.tokenizer import split_at_separator
from argvtree.utils import setup_logging
from argvtree.version import __version__


def get_root_parser(
    prog: str | None = "argvtree",
    description: str | None = "Show how argvtree parses a list of tokens.",
    epilog: str | None = "Everything after the first '--' is parsed as the token list.",
) -> ArgumentParser:
    """
    Construct the ArgumentParser for the argvtree command line.

    The tokens to inspect are not handled by this parser. They follow the
    first `--` and are split off before it runs.

    Args:
        prog (str | None): Name of the program.
        description (str | None): Description shown in the help.
        epilog (str | None): Message displayed at the end of the help.

    Returns:
        ArgumentParser: The root parser.
    """
    parser = ArgumentParser(
        prog=prog,
        usage=f"{prog} [OPTIONS] -- TOKEN ...",
        description=description,
        epilog=epilog,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--string",
        action="append",
        default=[],
        metavar="NAME",
        help="Key whose values stay text. Use '_' for positionals.",
    )
    booleans = parser.add_mutually_exclusive_group()
    booleans.add_argument(
        "-b",
        "--boolean",
        action="append",
        default=[],
        metavar="NAME",
        help="Key that is always a flag.",
    )
    booleans.add_argument(
        "--all-boolean",
        action="store_true",
        help="Treat every bare --name as a flag.",
    )
    parser.add_argument(
        "-a",
        "--alias",
        action="append",
        default=[],
        metavar="NAME=ALT[,ALT]",
        help="Alias group.",
    )
    parser.add_argument(
        "-d",
        "--default",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="Default for a dotted path. VALUE is read as JSON when possible.",
    )
    parser.add_argument(
        "--stop-early",
        action="store_true",
        help="Stop option parsing at the first positional.",
    )
    parser.add_argument(
        "--capture-separator",
        action="store_true",
        help="Keep tokens after a second '--' under the '--' key.",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    return parser


def _split_pair(parser: ArgumentParser, option: str, text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        parser.error(f"{option} expects NAME=VALUE, got '{text}'")
    return name, value


def _read_default(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def options_from_namespace(parser: ArgumentParser, args: Namespace) -> dict[str, Any]:
    """Translate command line options into argvtree parser options."""
    aliases: dict[str, list[str]] = {}
    for text in args.alias:
        name, value = _split_pair(parser, "--alias", text)
        aliases[name] = value.split(",")

    defaults: dict[str, Any] = {}
    for text in args.default:
        path, value = _split_pair(parser, "--default", text)
        defaults[path] = _read_default(value)

    return {
        "string": args.string,
        "boolean": True if args.all_boolean else args.boolean,
        "alias": aliases,
        "default": defaults,
        "stop_early": args.stop_early,
        "capture_separator": args.capture_separator,
    }


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    own_args, tokens = split_at_separator(argv)

    root_parser = get_root_parser()
    args = root_parser.parse_args(own_args)
    if args.verbose:
        setup_logging(console_log_level=logging.DEBUG)

    try:
        parser = ArgvParser(options_from_namespace(root_parser, args))
    except ArgvTreeError as error:
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    result = parser.parse(tokens)
    if args.json:
        console.print_json(data=result)
    else:
        console.print(Pretty(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
