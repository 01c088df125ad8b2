# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParserOptions`, the validated configuration for one argvtree parser.

Options can be given as a `ParserOptions` instance, as a mapping that uses the
Python field names (`stop_early`, `capture_separator`), or as a mapping that
uses the classic names (`stopEarly`, `--`). Single names are accepted wherever
a list of names is expected.

Example:
    ParserOptions(string="s", alias={"h": "help"}, stopEarly=True)
    ParserOptions.from_value({"boolean": True, "--": True})
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argvtree.exceptions import OptionsError


FIELD_ALIASES = {"stopEarly": "stop_early", "--": "capture_separator"}


def _field_names(data: Mapping[str, Any]) -> dict[str, Any]:
    return {FIELD_ALIASES.get(key, key): value for key, value in data.items()}


def _as_name_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class ParserOptions(BaseModel):
    """
    Configuration for one parse call.

    Attributes:
        string (list[str]): Keys whose values are always kept as text.
            Include "_" to keep positional arguments as text.
        boolean (bool | list[str]): True treats every bare `--name` as a flag;
            a list names the keys (and their aliases) that are flags.
        alias (dict[str, list[str]]): Canonical name to alternate names.
        default (dict[str, Any]): Dotted path to value, used when unset.
        stop_early (bool): Stop option scanning at the first positional.
        unknown (Callable[[str], Any] | None): Called with the raw token for
            keys not known to the schema. Returning False drops the token.
        capture_separator (bool): Store tokens after `--` under "--".
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    string: list[str] = Field(default_factory=list)
    boolean: bool | list[str] = False
    alias: dict[str, list[str]] = Field(default_factory=dict)
    default: dict[str, Any] = Field(default_factory=dict)
    stop_early: bool = Field(default=False, alias="stopEarly")
    unknown: Callable[[str], Any] | None = None
    capture_separator: bool = Field(default=False, alias="--")

    @field_validator("string", mode="before")
    @classmethod
    def _wrap_string(cls, value: Any) -> Any:
        return _as_name_list(value)

    @field_validator("boolean", mode="before")
    @classmethod
    def _wrap_boolean(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        return _as_name_list(value)

    @field_validator("alias", mode="before")
    @classmethod
    def _wrap_alias(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {key: _as_name_list(names) for key, names in value.items()}
        return value

    @field_validator("default", mode="before")
    @classmethod
    def _empty_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_value(
        cls,
        value: ParserOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ParserOptions:
        """
        Build options from an instance, a mapping, or nothing.

        Args:
            value (ParserOptions | Mapping | None): The base options.
            **overrides: Fields that replace those in `value`.

        Returns:
            ParserOptions: The validated options.

        Raises:
            OptionsError: If the options cannot be validated.
        """
        if isinstance(value, ParserOptions):
            if not overrides:
                return value
            data: dict[str, Any] = {
                name: getattr(value, name) for name in cls.model_fields
            }
        elif value is None:
            data = {}
        elif isinstance(value, Mapping):
            data = _field_names(value)
        else:
            raise OptionsError(
                f"Options must be a ParserOptions or a mapping, not "
                f"'{type(value).__name__}'"
            )
        data.update(_field_names(overrides))
        try:
            return cls.model_validate(data)
        except ValidationError as error:
            raise OptionsError(f"Invalid parser options: {error}") from error

    @property
    def all_boolean(self) -> bool:
        """True when every bare long option is a flag."""
        return self.boolean is True

    @property
    def boolean_keys(self) -> list[str]:
        """Declared boolean keys, empty when `boolean` is a bool."""
        if isinstance(self.boolean, bool):
            return []
        return list(self.boolean)
