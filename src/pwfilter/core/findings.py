"""Candidate and verdict data structures for pwfilter."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple


@dataclass(frozen=True)
class Candidate:
    """A password match handed over by the scanner."""

    fragment: str  # matched key/value text
    line: Optional[str] = None  # full source line; defaults to the fragment

    @property
    def line_text(self) -> str:
        return self.fragment if self.line is None else self.line

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Candidate":
        """Create a Candidate from a finding dictionary."""
        return cls(
            fragment=record.get("match") or "",
            line=record.get("line_text"),
        )


@dataclass(frozen=True)
class Verdict:
    """Outcome of post-processing one candidate."""

    confidence: int  # 1-3, lower is more trustworthy
    ignore: bool
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Verdict to dictionary format."""
        return {
            "confidence": self.confidence,
            "ignore": self.ignore,
            "reasons": list(self.reasons),
        }
