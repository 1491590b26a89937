"""Validate and format Chilean RUT (Rol Único Tributario) numbers."""

from .config import DEFAULT_MAX_LENGTH, RutConfig, load_config
from .detect import RutDetector, Span, find_ruts
from .errors import InvalidRutError, RutError
from .schema import RutValidationResult
from .validators import (
    RutValidator,
    calculate_verification_digit,
    clean_rut,
    format_rut,
    is_valid_rut,
    parse_rut,
    validate_rut,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "InvalidRutError",
    "RutConfig",
    "RutDetector",
    "RutError",
    "RutValidationResult",
    "RutValidator",
    "Span",
    "calculate_verification_digit",
    "clean_rut",
    "find_ruts",
    "format_rut",
    "is_valid_rut",
    "load_config",
    "parse_rut",
    "validate_rut",
]
