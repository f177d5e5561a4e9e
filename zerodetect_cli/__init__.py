from zerodetect_cli.engine import (
    MIN_TEXT_LENGTH,
    EmptyTextError,
    TextTooShortError,
    TextValidationError,
    detect_ai_text,
    validate_text,
)

__all__ = [
    "MIN_TEXT_LENGTH",
    "EmptyTextError",
    "TextTooShortError",
    "TextValidationError",
    "detect_ai_text",
    "validate_text",
]

__version__ = "1.0.0"
