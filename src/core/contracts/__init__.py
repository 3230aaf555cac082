"""
Contract Validation Module

Модуль для валидации JSON контрактов checked-значений.
"""

from .validators import (
    CheckedIntValidator,
    ContractValidator,
    SchemaLoader,
    parse_checked_int,
    validate_checked_int,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CheckedIntValidator",
    # Functions
    "validate_checked_int",
    "parse_checked_int",
]
