# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argvtree.

Token input is never an error: every argument vector produces a result. The
exceptions below only cover configuration problems and broken internal
invariants.

Exception Hierarchy:
- ArgvTreeError
    ├── OptionsError
    └── AliasConfigError
"""


class ArgvTreeError(Exception):
    """Base exception for argvtree."""


class OptionsError(ArgvTreeError):
    """Exception raised when parser options cannot be validated."""


class AliasConfigError(ArgvTreeError):
    """Exception raised when an alias group is not in normalized form."""
