"""
Contract Validation Module

Модуль для валидации JSON контрактов occurrence multiplicity.
"""

from .validators import (
    ContractValidator,
    OccurrenceValidator,
    SchemaLoader,
    multiplicity_from_contract,
    validate_occurrence,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OccurrenceValidator",
    # Functions
    "validate_occurrence",
    "multiplicity_from_contract",
]
