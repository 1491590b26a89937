import pytest
from pydantic import ValidationError
from chilerut import RutValidationResult, validate_rut


def test_valid_record():
    assert validate_rut("1000005K").to_dict() == {
        "isValid": True,
        "formatted": "1.000.005-K",
        "raw": "1000005K",
        "rutNumber": "1000005",
        "verificationDigit": "K",
    }


def test_valid_fields():
    result = validate_rut("12.345.678-5")
    assert result.is_valid is True
    assert result.formatted == "12.345.678-5"
    assert result.raw == "123456785"
    assert result.rut_number == "12345678"
    assert result.verification_digit == "5"


def test_invalid_record_omits_parts():
    assert validate_rut("12.345.678-9").to_dict() == {
        "isValid": False,
        "formatted": None,
        "raw": "123456789",
    }


@pytest.mark.parametrize("value", [None, "", {}, [], True, object(), "1" * 40])
def test_never_raises(value):
    result = validate_rut(value)
    assert result.is_valid is False
    assert result.rut_number is None
    assert result.verification_digit is None


def test_none_raw_is_empty():
    assert validate_rut(None).raw == ""


def test_result_invariant_enforced():
    with pytest.raises(ValidationError):
        RutValidationResult(is_valid=True, raw="19")
    with pytest.raises(ValidationError):
        RutValidationResult(is_valid=False, raw="19", rut_number="1")


def test_accepts_aliases():
    result = RutValidationResult.model_validate(
        {"isValid": True, "formatted": "1-9", "raw": "19", "rutNumber": "1", "verificationDigit": "9"}
    )
    assert result.rut_number == "1"
