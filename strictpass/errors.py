"""
strictpass.errors
Validation failures reported to callers of generate / generate_multiple.
"""


class ValidationError(ValueError):
    """Base class for every user-visible strictpass failure."""

    code = "ValidationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class EmptyPool(ValidationError):
    code = "EmptyPool"


class StrictLengthViolation(ValidationError):
    code = "StrictLengthViolation"


class UnsatisfiableConstraints(ValidationError):
    code = "UnsatisfiableConstraints"


class InvalidOption(ValidationError):
    code = "InvalidOption"
