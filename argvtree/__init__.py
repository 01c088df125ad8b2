"""
argvtree Argument Tokenizer

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import AliasConfigError, ArgvTreeError, OptionsError
from .options import ParserOptions
from .parser import ArgvParser, parse_args
from .result import POSITIONAL_KEY, SEPARATOR_KEY
from .version import __version__

__all__ = [
    "ArgvParser",
    "parse_args",
    "ParserOptions",
    "ArgvTreeError",
    "OptionsError",
    "AliasConfigError",
    "POSITIONAL_KEY",
    "SEPARATOR_KEY",
    "__version__",
]
