"""Domain-specific exceptions"""

from dataclasses import dataclass
from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


@dataclass(frozen=True)
class FieldError:
    """Single offending field in a score payload"""

    field: str
    message: str


class ValidationError(DomainException):
    """Score payload is missing fields, wrongly typed, or out of range"""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(summary or "Invalid score input")


class ComputationError(DomainException):
    """Calculator was handed input outside its validated domain"""

    pass
