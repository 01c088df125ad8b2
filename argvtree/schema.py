# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds the `OptionSchema` that drives one parse call.

The schema is derived from `ParserOptions` once per call and never changes
while tokens are scanned. It holds:
- the alias closure: every name mapped to all the other names of its group,
- the string-typed keys (aliases included), in declaration order,
- the boolean-typed keys (aliases included), in declaration order,
- the "every bare long option is a flag" switch,
- the defaults and the unknown-token handler.

Boolean declarations are applied before string declarations. A key declared
as both is in both sets; value coercion checks string-ness first, so the
string declaration wins.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from argvtree.exceptions import AliasConfigError
from argvtree.logger import logger
from argvtree.options import ParserOptions

BARE_LONG_OPTION = re.compile(r"--[^=]+")


@dataclass
class OptionSchema:
    """Derived, per-call view of the parser options."""

    aliases: dict[str, list[str]] = field(default_factory=dict)
    strings: dict[str, bool] = field(default_factory=dict)
    bools: dict[str, bool] = field(default_factory=dict)
    all_bools: bool = False
    defaults: dict[str, Any] = field(default_factory=dict)
    unknown_fn: Callable[[str], Any] | None = None

    def aliases_of(self, key: str) -> list[str]:
        """Return the other names of the group `key` belongs to."""
        return self.aliases.get(key, [])

    def is_string_key(self, key: str) -> bool:
        return key in self.strings

    def is_boolean_key(self, key: str) -> bool:
        """Check whether `key`, or any of its aliases, is a flag."""
        if key in self.bools:
            return True
        return any(alias in self.bools for alias in self.aliases_of(key))

    def is_known(self, key: str, token: str) -> bool:
        """
        Check whether an assignment to `key` from `token` needs no gate.

        A key is known when it is typed, declared in an alias group (even an
        empty one), or when every bare long option is a flag and `token` is one.
        """
        if self.all_bools and BARE_LONG_OPTION.fullmatch(token):
            return True
        return key in self.strings or key in self.bools or key in self.aliases

    def accepts(self, key: str, token: str) -> bool:
        """
        Run the unknown-token gate for an assignment that came from `token`.

        Returns:
            bool: False when the unknown handler rejected the token.
        """
        if self.unknown_fn is None or self.is_known(key, token):
            return True
        return self.accepts_positional(token)

    def accepts_positional(self, token: Any) -> bool:
        """Run the unknown handler on a positional token."""
        if self.unknown_fn is None:
            return True
        if self.unknown_fn(token) is False:
            logger.debug("Unknown handler rejected token: %r", token)
            return False
        return True


def _is_blank(name: Any) -> bool:
    return isinstance(name, str) and name.strip() == ""


def build_aliases(declarations: Mapping[str, Iterable[str]]) -> dict[str, list[str]]:
    """
    Expand alias declarations into a symmetric alias closure.

    A declaration `{"x": ["y", "z"]}` yields `x -> [y, z]`, `y -> [x, z]` and
    `z -> [x, y]`. A declaration with a blank alias name is skipped. An empty
    list still registers the key, so it counts as known to the unknown handler.
    A later declaration that repeats a name replaces that name's group.

    Args:
        declarations (Mapping[str, Iterable[str]]): Canonical name to alternates.

    Returns:
        dict[str, list[str]]: Each name mapped to all other names in its group.

    Raises:
        AliasConfigError: If a group was not normalized into a list of names.
    """
    aliases: dict[str, list[str]] = {}
    for key, names in declarations.items():
        if isinstance(names, str):
            raise AliasConfigError(
                f"Alias group for '{key}' must be a list of names, got {names!r}"
            )
        names = list(names)
        if any(_is_blank(name) for name in names):
            logger.debug("Skipping alias group with an empty name: %r -> %r", key, names)
            continue
        aliases[key] = names
        for name in names:
            aliases[name] = [other for other in [key, *names] if other != name]
    return aliases


def _mark(
    target: dict[str, bool], keys: Iterable[str], aliases: dict[str, list[str]]
) -> None:
    for key in keys:
        if not key:
            continue
        target[key] = True
        for alias in aliases.get(key, []):
            target[alias] = True


def build_schema(options: ParserOptions) -> OptionSchema:
    """
    Build the `OptionSchema` for one parse call.

    Args:
        options (ParserOptions): Validated options.

    Returns:
        OptionSchema: The alias closure, typed key sets, and handler.
    """
    aliases = build_aliases(options.alias)
    schema = OptionSchema(
        aliases=aliases,
        all_bools=options.all_boolean,
        defaults=dict(options.default),
        unknown_fn=options.unknown,
    )
    _mark(schema.bools, options.boolean_keys, aliases)
    _mark(schema.strings, options.string, aliases)
    return schema
