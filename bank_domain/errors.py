"""
Domain Errors Module

Tagged error values raised by account operations. Callers inspect
``kind`` and ``param_name`` instead of parsing the message text.
"""

from enum import Enum
from typing import Any, Dict


class ErrorKind(Enum):
    """Kinds of domain errors"""
    OUT_OF_RANGE = "out_of_range"


class AmountOutOfRangeError(ValueError):
    """
    Raised when an amount falls outside the range an operation accepts.
    Balance is left untouched whenever this is raised.
    """

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, message: str, param_name: str = "amount", actual_value: Any = None):
        self.message = message
        self.param_name = param_name
        self.actual_value = actual_value
        super().__init__(f"{message} (Parameter '{param_name}')")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging"""
        return {
            "kind": self.kind.value,
            "param_name": self.param_name,
            "actual_value": self.actual_value,
            "message": self.message
        }
