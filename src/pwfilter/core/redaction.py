# SPDX-License-Identifier: MIT
"""
Central redaction utilities for pwfilter.

Everything the CLI prints or writes passes through here so that matched
passwords never appear in plaintext.
"""

from __future__ import annotations
from typing import Dict, Any, List

REDACTED_FIELDS = ("match", "line_text")


def redact_secret(secret: str) -> str:
    """
    Redact secret showing first 6 + last 4 characters.

    For secrets <= 10 characters, shows only ****.
    For secrets > 10 characters, shows first6****last4.

    Args:
        secret: The secret string to redact

    Returns:
        Redacted string
    """
    if len(secret) <= 10:
        return "****"
    return secret[:6] + "****" + secret[-4:]


def redact_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact the matched text in a finding dictionary.

    Args:
        record: Finding dictionary that may contain secrets

    Returns:
        Copy of the dictionary with secrets redacted
    """
    redacted = record.copy()
    for key in REDACTED_FIELDS:
        if isinstance(redacted.get(key), str):
            redacted[key] = redact_secret(redacted[key])
    return redacted


def redact_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Redact secrets in a list of finding dictionaries."""
    return [redact_record(record) for record in records]
