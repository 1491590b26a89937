"""
Find Chilean RUTs in free text.

A regex picks out RUT-shaped candidates (`12.345.678-5`, `12345678-5`,
`1.000.005-k`) and the Module 11 check gates them, so random digit runs with a
hyphen are mostly rejected. Matches keep their character offsets so callers can
highlight or replace them in the original text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import re

from .validators import RutValidator


@dataclass
class Span:
    """
    A RUT found in text.

    Attributes:
        start:     Start character offset (inclusive).
        end:       End character offset (exclusive).
        text:      Raw matched slice.
        formatted: Canonical form, e.g. '12.345.678-5'.
    """
    start: int
    end: int
    text: str
    formatted: str


# Dotted thousands or a plain digit run, a hyphen, then the check character.
# Not preceded by a word char or '.', not followed by a word char.
_CANDIDATE = re.compile(
    r"(?<![\w.])(?:[0-9]{1,3}(?:\.[0-9]{3})+|[0-9]+)-[0-9kK](?!\w)"
)


class RutDetector:
    def __init__(self, validator: Optional[RutValidator] = None) -> None:
        self.validator = validator or RutValidator()

    def detect(self, text: str) -> List[Span]:
        """Return every valid RUT in `text`, in order of appearance."""
        spans: List[Span] = []
        for m in _CANDIDATE.finditer(text):
            raw = m.group(0)
            formatted = self.validator.format(raw)
            # Checksum failures and oversized runs are dropped.
            if formatted is None:
                continue
            spans.append(Span(start=m.start(), end=m.end(), text=raw, formatted=formatted))
        return spans


def find_ruts(text: str) -> List[Span]:
    return RutDetector().detect(text)
