# SPDX-License-Identifier: MIT
"""
Combine the post-processing checks into a single keep/drop verdict.

A candidate is dropped when any enabled check says ignore, or when its
confidence tier is above the configured maximum.
"""
from __future__ import annotations

import logging
from typing import Dict, Any, Iterable, List, Optional

from pwfilter.config import get_default_config
from pwfilter.core.findings import Candidate, Verdict
from .confidence import Confidence, build_rules, match_rule
from .placeholder import placeholder_reason
from .unicode import inspect_unicode

logger = logging.getLogger(__name__)


def evaluate(candidate: Candidate, config: Optional[Dict[str, Any]] = None) -> Verdict:
    """
    Run the enabled checks against one candidate.

    Args:
        candidate: The matched fragment and its source line
        config: Post-processing configuration (defaults if omitted)

    Returns:
        Verdict with confidence, ignore flag and reasons
    """
    config = config or get_default_config()
    checks = config.get("checks", {})
    reasons = []
    confidence = int(Confidence.MEDIUM)
    ignore = False

    if checks.get("confidence", True):
        rules = build_rules(
            min_value_length=config.get("min_value_length", 3),
            variable_sigils=config.get("variable_sigils", ["$"]),
        )
        rule = match_rule(candidate.fragment, rules)
        confidence, ignore = rule.outcome
        reasons.append(f"confidence:{rule.name}")

    if checks.get("placeholder", True):
        reason = placeholder_reason(candidate.fragment, candidate.line_text)
        if reason:
            ignore = True
            reasons.append(f"placeholder:{reason}")

    if checks.get("unicode", True):
        outcome = inspect_unicode(candidate.fragment).outcome
        if outcome.is_foreign:
            ignore = True
            reasons.append(f"unicode:{outcome.value}")

    max_confidence = config.get("max_confidence", 3)
    if not ignore and confidence > max_confidence:
        ignore = True
        reasons.append(f"threshold:confidence_above_{max_confidence}")

    return Verdict(confidence=confidence, ignore=ignore, reasons=tuple(reasons))


def filter_findings(
    records: Iterable[Dict[str, Any]],
    config: Optional[Dict[str, Any]] = None,
    include_ignored: bool = False,
) -> List[Dict[str, Any]]:
    """
    Post-process scanner findings.

    Each record needs a ``match`` field and may carry ``line_text``. Records
    are annotated with ``confidence`` and a ``postprocess`` section.

    Args:
        records: Finding dictionaries from the scanner
        config: Post-processing configuration (defaults if omitted)
        include_ignored: Keep ignored findings in the output (flagged)

    Returns:
        List of annotated finding dictionaries
    """
    config = config or get_default_config()
    results = []
    dropped = 0

    for record in records:
        verdict = evaluate(Candidate.from_record(record), config)
        if verdict.ignore:
            dropped += 1
            logger.debug(
                "Dropping finding at %s:%s (%s)",
                record.get("path", "?"),
                record.get("line", "?"),
                ", ".join(verdict.reasons),
            )
            if not include_ignored:
                continue

        annotated = dict(record)
        annotated["confidence"] = verdict.confidence
        annotated["postprocess"] = {
            "ignore": verdict.ignore,
            "reasons": list(verdict.reasons),
        }
        results.append(annotated)

    kept = len(results) - (dropped if include_ignored else 0)
    logger.info("Post-processed findings: %d kept, %d dropped", kept, dropped)
    return results
