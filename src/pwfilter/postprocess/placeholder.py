# SPDX-License-Identifier: MIT
"""
Detect placeholder findings where the value just restates a key name.

Example configs often contain ``DB_PASSWORD: db_password`` or
``password: ${db.password}``. The matched fragment and the full source line
are both parsed, since the scanner's match may start partway through the key.
"""
from __future__ import annotations

import re
from typing import Optional

from .keyvalue import parse_key_value

NON_ALPHANUMERIC = re.compile(r"[^0-9a-z]")

KEY_VALUE_IDENTITY = "key_value_identity"
CROSS_KEY_CONTAINMENT = "cross_key_containment"


def normalize(token: str) -> str:
    """Lower-case a token and drop everything that is not a letter or digit."""
    return NON_ALPHANUMERIC.sub("", token.lower())


def related_tokens(a: str, b: str, partial: bool = False) -> bool:
    """
    Compare two normalized tokens.

    Empty tokens never relate. With partial=True either token containing the
    other is enough.
    """
    if not a or not b:
        return False
    if partial:
        return a in b or b in a
    return a == b


def placeholder_reason(match_value: str, line_value: str) -> Optional[str]:
    """Return which placeholder check fired, or None for a real finding."""
    match_kv = parse_key_value(match_value)
    line_kv = parse_key_value(line_value)

    match_key, match_val = normalize(match_kv.key), normalize(match_kv.value)
    line_key, line_val = normalize(line_kv.key), normalize(line_kv.value)

    if related_tokens(match_key, match_val) or related_tokens(line_key, line_val):
        return KEY_VALUE_IDENTITY

    if related_tokens(match_val, line_key, partial=True) or related_tokens(
        line_val, match_key, partial=True
    ):
        return CROSS_KEY_CONTAINMENT

    return None


def is_placeholder(match_value: str, line_value: str) -> bool:
    """
    Check whether a finding is a key name restated as its own value.

    Args:
        match_value: The matched fragment
        line_value: The full source line containing the match

    Returns:
        True if the finding should be ignored
    """
    return placeholder_reason(match_value, line_value) is not None
