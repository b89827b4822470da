# SPDX-License-Identifier: MIT
"""
Confidence and ignore classification for password findings.

Rules are evaluated in order and the first matching rule decides:

1. too_short: value shorter than the minimum length => (3, ignore)
2. variable: value starts with a variable sigil ($) => (3, ignore)
3. function_call: value looks like ``name(...)`` => (3, ignore)
4. unquoted_text: unquoted value containing whitespace => (3, ignore)
5. dotted_reference: value contains a dot outside a JSON pair => (3, ignore)
6. double_equals: value contains ``==`` => (3, ignore)
7. json_pair: ``"key": "value"`` => (3, keep)
8. default => (2, keep)
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence, Tuple

from .keyvalue import KeyValue, parse_key_value

MIN_VALUE_LENGTH = 3
VARIABLE_SIGILS = ("$",)

FUNCTION_CALL_PATTERN = re.compile(r"[A-Za-z_$][\w.$]*\s*\(.*\)\s*;?", re.DOTALL)
WHITESPACE_PATTERN = re.compile(r"\s")


class Confidence(IntEnum):
    """Confidence tiers. Lower means the finding is more trustworthy."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3


@dataclass(frozen=True)
class Rule:
    """A named predicate over a parsed fragment and the outcome it forces."""

    name: str
    predicate: Callable[[KeyValue], bool]
    confidence: Confidence
    ignore: bool

    def matches(self, kv: KeyValue) -> bool:
        return self.predicate(kv)

    @property
    def outcome(self) -> Tuple[int, bool]:
        return int(self.confidence), self.ignore


DEFAULT_RULE = Rule(
    name="default",
    predicate=lambda kv: True,
    confidence=Confidence.MEDIUM,
    ignore=False,
)


def build_rules(
    min_value_length: int = MIN_VALUE_LENGTH,
    variable_sigils: Iterable[str] = VARIABLE_SIGILS,
) -> Tuple[Rule, ...]:
    """Build the ordered rule list for the given thresholds."""
    sigils = tuple(variable_sigils)

    return (
        Rule(
            "too_short",
            lambda kv: len(kv.value) < min_value_length,
            Confidence.LOW,
            True,
        ),
        Rule(
            "variable",
            lambda kv: bool(sigils) and kv.value.startswith(sigils),
            Confidence.LOW,
            True,
        ),
        Rule(
            "function_call",
            lambda kv: FUNCTION_CALL_PATTERN.fullmatch(kv.value) is not None,
            Confidence.LOW,
            True,
        ),
        Rule(
            "unquoted_text",
            lambda kv: not kv.value_quoted
            and WHITESPACE_PATTERN.search(kv.value) is not None,
            Confidence.LOW,
            True,
        ),
        Rule(
            "dotted_reference",
            lambda kv: "." in kv.value and not kv.is_json_style,
            Confidence.LOW,
            True,
        ),
        Rule(
            "double_equals",
            lambda kv: "==" in kv.value,
            Confidence.LOW,
            True,
        ),
        Rule(
            "json_pair",
            lambda kv: kv.is_json_style,
            Confidence.LOW,
            False,
        ),
    )


RULES = build_rules()


def match_rule(fragment: str, rules: Optional[Sequence[Rule]] = None) -> Rule:
    """Return the first rule matching the fragment, or DEFAULT_RULE."""
    kv = parse_key_value(fragment)
    for rule in RULES if rules is None else rules:
        if rule.matches(kv):
            return rule
    return DEFAULT_RULE


def classify(
    fragment: str, rules: Optional[Sequence[Rule]] = None
) -> Tuple[int, bool]:
    """
    Classify a matched password fragment.

    Args:
        fragment: The matched key/value text (or a bare value)
        rules: Optional rule list from build_rules(); defaults to RULES

    Returns:
        Tuple of (confidence, ignore)
    """
    return match_rule(fragment, rules).outcome
