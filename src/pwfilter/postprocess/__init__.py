# SPDX-License-Identifier: MIT
"""
Password finding post-processing.

Three independent checks decide whether a candidate password finding is noise:
- classify: confidence tier and ignore flag from the shape of the value
- is_placeholder: the value merely restates a key name
- has_foreign_unicode: the value is a localized, non-ASCII string
"""

from .confidence import classify, match_rule, build_rules, Confidence, Rule
from .placeholder import is_placeholder, placeholder_reason
from .unicode import has_foreign_unicode, inspect_unicode, UnicodeOutcome
from .keyvalue import parse_key_value, KeyValue, Delimiter
from .pipeline import evaluate, filter_findings

__all__ = [
    "classify",
    "match_rule",
    "build_rules",
    "Confidence",
    "Rule",
    "is_placeholder",
    "placeholder_reason",
    "has_foreign_unicode",
    "inspect_unicode",
    "UnicodeOutcome",
    "parse_key_value",
    "KeyValue",
    "Delimiter",
    "evaluate",
    "filter_findings",
]
