# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Assembles parsed (key, value) pairs into the nested result mapping.

Dotted keys such as `foo.bar` address nested levels. Writing a key follows the
merge rule:
- an empty slot, a flag key, or a slot holding a boolean is overwritten,
- a slot holding a list gets the value appended,
- any other slot becomes `[old, new]`.

Every write is repeated for the key's aliases. The path segments `__proto__`
and `constructor` are never written; an assignment that reaches one of them is
dropped at that point.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any

from argvtree.logger import logger
from argvtree.schema import OptionSchema
from argvtree.values import ValueKind, coerce_value, kind_of

POSITIONAL_KEY = "_"
SEPARATOR_KEY = "--"
RESERVED_SEGMENTS = frozenset({"__proto__", "constructor"})


class ResultAssembler:
    """
    Owns the result mapping for one parse call.

    Attributes:
        schema (OptionSchema): The schema of the current call.
        argv (dict[str, Any]): The result being assembled. Starts as
            `{"_": []}`.
    """

    def __init__(self, schema: OptionSchema) -> None:
        self.schema: OptionSchema = schema
        self.argv: dict[str, Any] = {POSITIONAL_KEY: []}

    @property
    def positional(self) -> list[Any]:
        return self.argv[POSITIONAL_KEY]

    def set_key(self, name: str, value: Any) -> None:
        """
        Write `value` at the dotted path `name`, applying the merge rule.

        Missing intermediate levels are created. The write is dropped when a
        segment is reserved or an intermediate level is not a mapping.
        """
        level = self.argv
        *parents, last = name.split(".")
        for segment in parents:
            if segment in RESERVED_SEGMENTS:
                logger.debug("Dropped assignment to reserved path: %s", name)
                return
            if segment not in level:
                level[segment] = {}
            child = level[segment]
            if not isinstance(child, dict):
                logger.debug(
                    "Dropped assignment to %s: '%s' holds a %s",
                    name,
                    segment,
                    kind_of(child),
                )
                return
            level = child

        if last in RESERVED_SEGMENTS:
            logger.debug("Dropped assignment to reserved path: %s", name)
            return

        if last not in level or self.schema.is_boolean_key(last):
            level[last] = value
            return

        current = level[last]
        kind = kind_of(current)
        if kind is ValueKind.BOOLEAN:
            level[last] = value
        elif kind is ValueKind.LIST:
            current.append(value)
        else:
            level[last] = [current, value]

    def alias_paths(self, key: str) -> list[str]:
        """
        Return every other path that receives the value written to `key`.

        The aliases of the full key come first. For a dotted key, the aliases
        of its leading segment follow, with the remaining segments kept.
        """
        paths = list(self.schema.aliases_of(key))
        head, dot, rest = key.partition(".")
        if dot:
            for alias in self.schema.aliases_of(head):
                path = f"{alias}.{rest}"
                if path != key and path not in paths:
                    paths.append(path)
        return paths

    def set_with_aliases(self, key: str, value: Any) -> None:
        self.set_key(key, value)
        for path in self.alias_paths(key):
            self.set_key(path, value)

    def set_arg(self, key: str, value: Any, token: str | None = None) -> None:
        """
        Store a value that was parsed for `key`.

        Args:
            key (str): The option name, possibly dotted.
            value (Any): The raw value. Numeric-looking values become numbers
                unless the key is string-typed.
            token (str | None): The token the value came from. When given, the
                unknown-token gate runs first and may drop the assignment.
        """
        if token is not None and not self.schema.accepts(key, token):
            return
        value = coerce_value(value, string_typed=self.schema.is_string_key(key))
        self.set_with_aliases(key, value)

    def add_positional(self, token: Any) -> None:
        """Append a positional token, unless the unknown handler rejects it."""
        if not self.schema.accepts_positional(token):
            return
        keep_text = self.schema.is_string_key(POSITIONAL_KEY)
        self.positional.append(coerce_value(token, string_typed=keep_text))

    def has_key(self, name: str) -> bool:
        """Check whether the dotted path `name` is present in the result."""
        level: Any = self.argv
        *parents, last = name.split(".")
        for segment in parents:
            level = level.get(segment, {}) if isinstance(level, dict) else {}
        return isinstance(level, dict) and last in level

    def preset_booleans(self) -> None:
        """Set every flag key to False, then apply defaults given for flags."""
        for key in self.schema.bools:
            self.set_arg(key, False)
        for key, value in self.schema.defaults.items():
            if self.schema.is_boolean_key(key):
                self.set_arg(key, deepcopy(value))

    def apply_defaults(self) -> None:
        """Write each default whose path is still unset, with its aliases."""
        for key, value in self.schema.defaults.items():
            if not self.has_key(key):
                self.set_with_aliases(key, deepcopy(value))

    def finish(self, separated: list[Any], capture: bool) -> dict[str, Any]:
        """
        Layer in defaults and place the tokens that followed `--`.

        Returns:
            dict[str, Any]: The finished result mapping.
        """
        self.apply_defaults()
        if capture:
            self.argv[SEPARATOR_KEY] = list(separated)
        else:
            self.positional.extend(separated)
        return self.argv
