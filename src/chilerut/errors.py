from __future__ import annotations

from typing import Literal, Optional

Reason = Literal[
    "empty", "too_short", "too_long", "malformed", "uncomputable", "checksum_mismatch"
]


class RutError(ValueError):
    """Base class for errors raised by chilerut."""


class InvalidRutError(RutError):
    """
    A cleaned token that is not a valid RUT.

    Attributes:
        raw:      The cleaned token that was rejected.
        reason:   Why it was rejected.
        expected: The computed check character, set only for checksum mismatches.
    """

    def __init__(self, raw: str, reason: Reason, expected: Optional[str] = None) -> None:
        self.raw = raw
        self.reason = reason
        self.expected = expected
        msg = f"invalid RUT {raw!r}: {reason}"
        if expected is not None:
            msg += f" (expected check character {expected!r})"
        super().__init__(msg)
