from __future__ import annotations
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class RutValidationResult(BaseModel):
    """
    Outcome of validating one RUT.

    `rut_number`, `formatted` and `verification_digit` are set only when the
    RUT is valid. `raw` always holds the cleaned token.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_valid: bool = Field(alias="isValid")
    formatted: Optional[str] = None
    raw: str = ""
    rut_number: Optional[str] = Field(default=None, alias="rutNumber")
    verification_digit: Optional[str] = Field(default=None, alias="verificationDigit")

    @model_validator(mode="after")
    def _fields_match_validity(self) -> "RutValidationResult":
        parts = (self.formatted, self.rut_number, self.verification_digit)
        if self.is_valid and any(p is None for p in parts):
            raise ValueError("valid result needs formatted, rut_number and verification_digit")
        if not self.is_valid and any(p is not None for p in parts):
            raise ValueError("invalid result cannot carry formatted, rut_number or verification_digit")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """camelCase record; invalid results omit rutNumber and verificationDigit."""
        exclude = None if self.is_valid else {"rut_number", "verification_digit"}
        return self.model_dump(by_alias=True, exclude=exclude)
