# SPDX-License-Identifier: MIT
"""
Unicode artifact detection.

Password-looking matches in localized resource files are often UI strings
written with unicode escapes. A fragment is treated as foreign when, after
decoding its escapes, it holds anything outside printable ASCII, or when an
escape cannot be decoded at all.
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Backslash-u with 4 hex digits, backslash-U with 8, anything else after a
# backslash-u/U prefix is malformed.
ESCAPE_PATTERN = re.compile(
    r"\\(?:u(?P<short>[0-9A-Fa-f]{4})|U(?P<long>[0-9A-Fa-f]{8})|[uU])"
)

PRINTABLE_ASCII_MIN = 0x20
PRINTABLE_ASCII_MAX = 0x7E


class UnicodeOutcome(Enum):
    """Result of inspecting a fragment for unicode artifacts."""

    PLAIN = "plain"
    ESCAPED_ASCII = "escaped_ascii"
    NON_ASCII = "non_ascii"
    MALFORMED = "malformed_escape"

    @property
    def is_foreign(self) -> bool:
        return self in (UnicodeOutcome.NON_ASCII, UnicodeOutcome.MALFORMED)


@dataclass(frozen=True)
class UnicodeInspection:
    outcome: UnicodeOutcome
    decoded: str
    escapes: int = 0


def inspect_unicode(fragment: str) -> UnicodeInspection:
    """Decode unicode escapes in a fragment and report what was found."""
    pieces = []
    last = 0
    escapes = 0

    for match in ESCAPE_PATTERN.finditer(fragment):
        escapes += 1
        char = _decode_escape(match.group("short") or match.group("long"))
        if char is None:
            return UnicodeInspection(UnicodeOutcome.MALFORMED, fragment, escapes)
        pieces.append(fragment[last:match.start()])
        pieces.append(char)
        last = match.end()

    pieces.append(fragment[last:])
    decoded = "".join(pieces)

    if not all(_is_printable_ascii(c) for c in decoded):
        outcome = UnicodeOutcome.NON_ASCII
    elif escapes:
        outcome = UnicodeOutcome.ESCAPED_ASCII
    else:
        outcome = UnicodeOutcome.PLAIN

    return UnicodeInspection(outcome, decoded, escapes)


def has_foreign_unicode(fragment: str) -> bool:
    """
    Check whether a fragment looks like a localized string rather than a secret.

    Args:
        fragment: The matched fragment, escapes not yet decoded

    Returns:
        True if the finding should be ignored
    """
    return inspect_unicode(fragment).outcome.is_foreign


def _decode_escape(digits: Optional[str]) -> Optional[str]:
    if not digits:
        return None
    code_point = int(digits, 16)
    if code_point > sys.maxunicode:
        return None
    return chr(code_point)


def _is_printable_ascii(char: str) -> bool:
    return PRINTABLE_ASCII_MIN <= ord(char) <= PRINTABLE_ASCII_MAX
