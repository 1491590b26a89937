"""
Normalization, Module 11 checksum and formatting for Chilean RUTs.

A RUT (Rol Único Tributario) is a digit sequence followed by one check
character, `0`-`9` or `K`, e.g. `12.345.678-5`.

Contract
--------
- `clean_rut`, `calculate_verification_digit`, `is_valid_rut`, `format_rut` and
  `validate_rut` are **total**: they accept anything and never raise. Malformed,
  oversized and unconvertible input all collapse to the same "invalid" value
  ('' / False / None / an invalid result).
- `parse_rut` is the strict variant and raises `InvalidRutError` with a reason.
- Work is linear in input length and capped by `RutConfig.max_length`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Tuple

from .config import MIN_LENGTH, RutConfig
from .errors import InvalidRutError
from .schema import RutValidationResult

logger = logging.getLogger(__name__)

# Periods, hyphens and whitespace.
_FORMATTING = re.compile(r"[.\-\s]")
_DIGITS = re.compile(r"[0-9]+")
# One or more digits, then a single check character.
_RUT = re.compile(r"([0-9]+)([0-9K])")

# Weights applied from the least significant digit, repeating.
_WEIGHTS: Tuple[int, ...] = (2, 3, 4, 5, 6, 7)


def _to_text(value: Any) -> str:
    """Render a caller-supplied value as text. May raise for exotic values."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("ascii")
    if isinstance(value, float) and value.is_integer():
        value = int(value)  # 12345678.0 -> "12345678", not "12345678.0"
    return str(value)


def clean_rut(value: Any) -> str:
    """
    Strip periods, hyphens and whitespace and uppercase the rest.

    Never raises: values that cannot be rendered as text (e.g. a `__str__` that
    raises, or an int past the interpreter's digit limit) give ''.
    """
    try:
        text = _to_text(value)
    except Exception as e:
        logger.debug(f"Unconvertible RUT input of type {type(value).__name__}: {e}")
        return ""
    return _FORMATTING.sub("", text).upper()


def _group_thousands(digits: str) -> str:
    # "12345678" -> "12.345.678"
    groups = []
    while digits:
        groups.append(digits[-3:])
        digits = digits[:-3]
    return ".".join(reversed(groups))


class RutValidator:
    """
    RUT operations bound to a `RutConfig`.

    The module-level functions use a default instance; build your own to change
    the length bound or the default formatting style.
    """

    def __init__(self, config: Optional[RutConfig] = None) -> None:
        self.config = config or RutConfig()

    @property
    def max_length(self) -> int:
        return self.config.max_length

    # -- Checksum ---------------------------------------------------------------------------

    def calculate_verification_digit(self, rut_number: Any) -> str:
        """
        Compute the Module 11 check character for a digit sequence.

        Digits are weighted 2,3,4,5,6,7,2,3,... from the right and summed;
        `11 - sum % 11` maps 11 -> '0', 10 -> 'K', otherwise the digit itself.

        Returns '' when the input is not purely ASCII digits or is longer than
        `max_length`.
        """
        try:
            digits = _to_text(rut_number)
        except Exception:
            return ""
        if not _DIGITS.fullmatch(digits) or len(digits) > self.max_length:
            return ""

        total = 0
        for i, ch in enumerate(reversed(digits)):
            total += (ord(ch) - 48) * _WEIGHTS[i % len(_WEIGHTS)]

        check = 11 - total % 11
        if check == 11:
            return "0"
        if check == 10:
            return "K"
        return str(check)

    # -- Validation -------------------------------------------------------------------------

    def _decompose(self, token: str) -> Tuple[str, str]:
        """Split a cleaned token into (digits, check character) or raise InvalidRutError."""
        if not token:
            raise InvalidRutError(token, "empty")
        if len(token) < MIN_LENGTH:
            raise InvalidRutError(token, "too_short")
        if len(token) > self.max_length:
            raise InvalidRutError(token, "too_long")

        m = _RUT.fullmatch(token)
        if m is None:
            raise InvalidRutError(token, "malformed")
        digits, provided = m.groups()
        if len(digits) > self.max_length:
            raise InvalidRutError(token, "too_long")

        expected = self.calculate_verification_digit(digits)
        if not expected:
            raise InvalidRutError(token, "uncomputable")
        if expected != provided:
            raise InvalidRutError(token, "checksum_mismatch", expected=expected)
        return digits, provided

    def is_valid(self, value: Any) -> bool:
        try:
            self._decompose(clean_rut(value))
        except InvalidRutError:
            return False
        except Exception as e:  # pragma: no cover
            logger.exception(f"Unexpected error in is_valid: {e}")
            return False
        return True

    def format(self, value: Any, dots: Optional[bool] = None) -> Optional[str]:
        """
        Render a valid RUT as `12.345.678-5` (or `12345678-5` with dots=False).

        Returns None for anything that does not validate.
        """
        if dots is None:
            dots = self.config.group_digits
        try:
            token = clean_rut(value)
            if not token or not self.is_valid(token):
                return None
            digits, check = token[:-1], token[-1]
            if dots:
                digits = _group_thousands(digits)
            return f"{digits}-{check}"
        except Exception as e:  # pragma: no cover
            logger.exception(f"Unexpected error in format: {e}")
            return None

    def parse(self, value: Any) -> RutValidationResult:
        """
        Strict validation: return a valid result or raise `InvalidRutError`.
        """
        token = clean_rut(value)
        rut_number, check = self._decompose(token)
        return RutValidationResult(
            is_valid=True,
            formatted=self.format(token),
            raw=token,
            rut_number=rut_number,
            verification_digit=check,
        )

    def validate(self, value: Any) -> RutValidationResult:
        """Detailed, non-raising validation. Invalid input gives `is_valid=False`."""
        token = ""
        try:
            token = clean_rut(value)
            return self.parse(token)
        except InvalidRutError:
            return RutValidationResult(is_valid=False, raw=token)
        except Exception as e:  # pragma: no cover
            logger.exception(f"Unexpected error in validate: {e}")
            return RutValidationResult(is_valid=False, raw=token)


_default = RutValidator()


def calculate_verification_digit(rut_number: Any) -> str:
    return _default.calculate_verification_digit(rut_number)


def is_valid_rut(value: Any) -> bool:
    """True if `value` cleans to digits plus a matching Module 11 check character."""
    return _default.is_valid(value)


def format_rut(value: Any, dots: Optional[bool] = None) -> Optional[str]:
    return _default.format(value, dots=dots)


def validate_rut(value: Any) -> RutValidationResult:
    return _default.validate(value)


def parse_rut(value: Any) -> RutValidationResult:
    return _default.parse(value)
