# SPDX-License-Identifier: MIT
"""
Key/value parsing for matched password fragments.

A fragment such as ``my.property = secret`` or ``"pw": "secret"`` is split on
the first ``=`` or ``:`` it contains. Fragments without a delimiter are bare
values with an empty key.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

QUOTE_CHARS = "\"'`"

# Trailing punctuation left behind by source-code assignments (JSON, JS, Java...)
TRAILING_PUNCTUATION = ",;"

BRACKET_PAIRS = {"{": "}", "[": "]"}


class Delimiter(Enum):
    """Recognized key/value delimiters."""

    EQUALS = "="
    COLON = ":"


@dataclass(frozen=True)
class KeyValue:
    """A fragment split into its key and value parts."""

    key: str
    value: str
    delimiter: Optional[Delimiter] = None
    key_quote_char: Optional[str] = None  # quote that enclosed the raw key
    value_quote_char: Optional[str] = None

    @property
    def is_bare(self) -> bool:
        """True when the fragment had no delimiter at all."""
        return self.delimiter is None

    @property
    def key_quoted(self) -> bool:
        return self.key_quote_char is not None

    @property
    def value_quoted(self) -> bool:
        return self.value_quote_char is not None

    @property
    def is_json_style(self) -> bool:
        """True for ``"key": "value"`` shaped fragments."""
        return (
            self.delimiter is Delimiter.COLON
            and self.key_quote_char == '"'
            and self.value_quote_char == '"'
        )


def parse_key_value(fragment: str) -> KeyValue:
    """
    Split a fragment on its first delimiter.

    Surrounding whitespace, an enclosing {} or [] and surrounding quote
    characters are trimmed from both sides. Never raises.
    """
    position = _first_delimiter(fragment)
    if position < 0:
        value, quote = _trim(fragment)
        return KeyValue(key="", value=value, value_quote_char=quote)

    raw_key, raw_value = _unwrap(fragment[:position], fragment[position + 1:])
    key, key_quote = _trim(raw_key)
    value, value_quote = _trim(raw_value)
    return KeyValue(
        key=key,
        value=value,
        delimiter=Delimiter(fragment[position]),
        key_quote_char=key_quote,
        value_quote_char=value_quote,
    )


def _first_delimiter(text: str) -> int:
    positions = [text.find(d.value) for d in Delimiter]
    positions = [p for p in positions if p >= 0]
    return min(positions) if positions else -1


def _unwrap(raw_key: str, raw_value: str):
    """Drop an enclosing object/array bracket split across key and value.

    ``{"pw": "x"}`` splits into ``{"pw"`` and ``"x"}``; the opening bracket is
    removed from the key and its partner from the end of the value.
    """
    raw_key = raw_key.strip()
    if not raw_key or raw_key[0] not in BRACKET_PAIRS:
        return raw_key, raw_value
    closing = BRACKET_PAIRS[raw_key[0]]
    raw_value = raw_value.strip().rstrip(TRAILING_PUNCTUATION).rstrip()
    if raw_value.endswith(closing):
        raw_value = raw_value[:-1]
    return raw_key[1:], raw_value


def _trim(text: str):
    """Strip whitespace and one level of enclosing quotes.

    Returns the trimmed text and the quote character that enclosed it, if any.
    """
    text = text.strip().rstrip(TRAILING_PUNCTUATION).strip()
    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        return text[1:-1].strip(), text[0]
    return text.strip(QUOTE_CHARS).strip(), None
