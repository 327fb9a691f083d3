"""
Domain models and value objects.

Contains the Multiplicity value type, occurrence indicator adapters
and content-model folding.
"""

from src.core.domain.multiplicity import (
    ONE,
    OPTIONAL,
    PLUS,
    STAR,
    ZERO,
    Multiplicity,
    choice,
    create,
    group,
    multiply,
    one_or_more,
)
from src.core.domain.occurrence import (
    DtdIndicator,
    OccurrenceBounds,
    OccurrenceContractViolation,
    from_dtd_indicator,
    from_occurs,
)
from src.core.domain.folding import fold_choice, fold_group, fold_multiply, nest

__all__ = [
    # Multiplicity
    "Multiplicity",
    "create",
    "ZERO",
    "ONE",
    "OPTIONAL",
    "STAR",
    "PLUS",
    "choice",
    "group",
    "multiply",
    "one_or_more",
    # Occurrence indicators
    "DtdIndicator",
    "OccurrenceBounds",
    "OccurrenceContractViolation",
    "from_dtd_indicator",
    "from_occurs",
    # Folding
    "fold_choice",
    "fold_group",
    "fold_multiply",
    "nest",
]
