"""
Error taxonomy for the step machine.

User-input problems are values (ErrorKind on a StepResult); caller bugs are
exceptions.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_FIELDS = "missing-fields"
    INVALID_FORMAT = "invalid-format"
    DUPLICATE = "duplicate"


class StepContractError(AssertionError):
    """The presentation layer drove the step machine somewhere it cannot go."""


class UnknownStepError(StepContractError):
    def __init__(self, step):
        super().__init__(f"Unknown step: {step!r}")
        self.step = step


class StepOrderError(StepContractError):
    pass
