# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies argument tokens and drives the single left-to-right parse pass.

Token kinds:
- `--name=value`: long option with an attached value.
- `--no-name`: negated long option, stores False.
- `--name`: long option; may take the next token as its value.
- `-abc`: short cluster; each letter is a flag unless a value is attached.
- `--`: separator; everything after it is not parsed.
- anything else (including a lone `-`): positional.

The `Tokenizer` walks the tokens with an explicit cursor. Branches that take
their value from the following token advance the cursor by two.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Sequence

from argvtree.logger import logger
from argvtree.result import ResultAssembler
from argvtree.schema import OptionSchema
from argvtree.values import coerce_flag

SEPARATOR = "--"

LONG_WITH_VALUE = re.compile(r"--([^=]+)=(.*)", re.DOTALL)
LONG_NEGATED = re.compile(r"--no-(.+)")
LONG_OPTION = re.compile(r"--(.+)")
SHORT_CLUSTER = re.compile(r"-[^-]+")
OPTION_LIKE = re.compile(r"(-|--)[^-]")
BOOLEAN_TEXT = re.compile(r"true|false")
LETTER = re.compile(r"[A-Za-z]")
NON_WORD = re.compile(r"\W", re.ASCII)
NUMERIC_TAIL = re.compile(r"-?\d+(\.\d*)?(e-?\d+)?\Z", re.ASCII)


class TokenKind(Enum):
    """The shapes a raw token can take."""

    LONG_WITH_VALUE = "long_with_value"
    LONG_NEGATED = "long_negated"
    LONG = "long"
    SHORT_CLUSTER = "short_cluster"
    SEPARATOR = "separator"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


def token_text(token: Any) -> str:
    """Return the text form of a token used for classification."""
    return token if isinstance(token, str) else str(token)


def classify_token(token: Any) -> TokenKind:
    """
    Classify a raw token by its shape.

    Args:
        token (Any): A raw token. Non-text tokens are classified by their
            text form.

    Returns:
        TokenKind: The kind of the token.
    """
    text = token_text(token)
    if text == SEPARATOR:
        return TokenKind.SEPARATOR
    if LONG_WITH_VALUE.fullmatch(text):
        return TokenKind.LONG_WITH_VALUE
    if LONG_NEGATED.match(text):
        return TokenKind.LONG_NEGATED
    if LONG_OPTION.match(text):
        return TokenKind.LONG
    if SHORT_CLUSTER.match(text):
        return TokenKind.SHORT_CLUSTER
    return TokenKind.POSITIONAL


def looks_like_option(token: Any) -> bool:
    """Check whether a token starts like `-x` or `--xx`."""
    return OPTION_LIKE.match(token_text(token)) is not None


def is_boolean_text(token: Any) -> bool:
    return BOOLEAN_TEXT.fullmatch(token_text(token)) is not None


def split_at_separator(tokens: list[Any]) -> tuple[list[Any], list[Any]]:
    """Split tokens at the first `--` into (to parse, after separator)."""
    if SEPARATOR not in tokens:
        return tokens, []
    index = tokens.index(SEPARATOR)
    logger.debug("Separator found at position %d", index)
    return tokens[:index], tokens[index + 1 :]


class Tokenizer:
    """
    Scans tokens once and feeds the results into a `ResultAssembler`.

    Attributes:
        schema (OptionSchema): Schema for the current call.
        result (ResultAssembler): Receives every parsed assignment.
        stop_early (bool): Stop option scanning at the first positional.
    """

    def __init__(
        self,
        schema: OptionSchema,
        result: ResultAssembler,
        stop_early: bool = False,
    ) -> None:
        self.schema = schema
        self.result = result
        self.stop_early = stop_early

    def flag_value(self, key: str) -> bool | str:
        """The value of a flag given without one: '' for string keys, else True."""
        return "" if self.schema.is_string_key(key) else True

    def scan(self, tokens: Sequence[Any]) -> None:
        """Parse `tokens` from left to right."""
        tokens = list(tokens)
        i = 0
        while i < len(tokens):
            token = tokens[i]
            kind = classify_token(token)
            if kind is TokenKind.LONG_WITH_VALUE:
                self._long_with_value(token_text(token))
                i += 1
            elif kind is TokenKind.LONG_NEGATED:
                text = token_text(token)
                key = LONG_NEGATED.match(text).group(1)
                self.result.set_arg(key, False, text)
                i += 1
            elif kind is TokenKind.LONG:
                i += self._long(token_text(token), tokens, i)
            elif kind is TokenKind.SHORT_CLUSTER:
                i += self._short_cluster(token_text(token), tokens, i)
            else:
                self.result.add_positional(token)
                if self.stop_early:
                    self.result.positional.extend(tokens[i + 1 :])
                    break
                i += 1

    def _long_with_value(self, text: str) -> None:
        key, value = LONG_WITH_VALUE.fullmatch(text).groups()
        if self.schema.is_boolean_key(key):
            self.result.set_arg(key, coerce_flag(value), text)
        else:
            self.result.set_arg(key, value, text)

    def _long(self, text: str, tokens: list[Any], i: int) -> int:
        key = LONG_OPTION.match(text).group(1)
        has_next = i + 1 < len(tokens)
        following = tokens[i + 1] if has_next else None
        if (
            has_next
            and not looks_like_option(following)
            and not self.schema.is_boolean_key(key)
            and not self.schema.all_bools
        ):
            self.result.set_arg(key, following, text)
            return 2
        if has_next and is_boolean_text(following):
            self.result.set_arg(key, token_text(following) == "true", text)
            return 2
        self.result.set_arg(key, self.flag_value(key), text)
        return 1

    def _short_cluster(self, text: str, tokens: list[Any], i: int) -> int:
        letters = text[1:-1]
        broken = False
        for j, letter in enumerate(letters):
            tail = text[j + 2 :]

            if tail == "-":
                self.result.set_arg(letter, tail, text)
                continue

            if LETTER.match(letter) and tail.startswith("="):
                self.result.set_arg(letter, tail[1:], text)
                broken = True
                break

            if LETTER.match(letter) and NUMERIC_TAIL.search(tail):
                self.result.set_arg(letter, tail, text)
                broken = True
                break

            if j + 1 < len(letters) and NON_WORD.match(letters[j + 1]):
                self.result.set_arg(letter, tail, text)
                broken = True
                break

            self.result.set_arg(letter, self.flag_value(letter), text)

        key = text[-1]
        if broken or key == "-":
            return 1

        following = tokens[i + 1] if i + 1 < len(tokens) else None
        if (
            following
            and not looks_like_option(following)
            and not self.schema.is_boolean_key(key)
        ):
            self.result.set_arg(key, following, text)
            return 2
        if following and is_boolean_text(following):
            self.result.set_arg(key, token_text(following) == "true", text)
            return 2
        self.result.set_arg(key, self.flag_value(key), text)
        return 1
