"""
Occurrence — построение Multiplicity из разобранных индикаторов появления

Граница между парсером грамматики и алгеброй Multiplicity:
- DTD индикаторы: '', '?', '*', '+'
- XSD атрибуты: minOccurs / maxOccurs (maxOccurs может быть 'unbounded')

В отличие от самой алгебры, здесь входные данные валидируются:
отрицательные значения и min > max отклоняются с OccurrenceContractViolation.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.core.domain.multiplicity import ONE, OPTIONAL, PLUS, STAR, Multiplicity, create
from src.core.math.extended_arithmetic import Bound, Unbounded, bound_le, parse_bound


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OccurrenceContractViolation(ValueError):
    """Некорректный индикатор появления на входе из парсера грамматики."""

    pass


# =============================================================================
# DTD INDICATORS
# =============================================================================


class DtdIndicator(str, Enum):
    """Индикатор появления в content model DTD"""

    ONCE = ""
    OPTIONAL = "?"
    STAR = "*"
    PLUS = "+"


_DTD_MULTIPLICITY = {
    DtdIndicator.ONCE: ONE,
    DtdIndicator.OPTIONAL: OPTIONAL,
    DtdIndicator.STAR: STAR,
    DtdIndicator.PLUS: PLUS,
}


def from_dtd_indicator(token: Union[str, DtdIndicator]) -> Multiplicity:
    """
    Multiplicity для DTD индикатора.

    Args:
        token: '', '?', '*' или '+'

    Returns:
        ONE / OPTIONAL / STAR / PLUS

    Raises:
        OccurrenceContractViolation: если индикатор неизвестен
    """
    try:
        indicator = DtdIndicator(token)
    except ValueError:
        raise OccurrenceContractViolation(f"Unknown DTD occurrence indicator: {token!r}") from None
    return _DTD_MULTIPLICITY[indicator]


# =============================================================================
# XSD OCCURRENCE BOUNDS
# =============================================================================


class OccurrenceBounds(BaseModel):
    """
    Пара minOccurs / maxOccurs частицы XSD.

    Immutable модель (frozen=True). По умолчанию (1,1), как в XML Schema.
    """

    min_occurs: int = Field(1, ge=0, description="minOccurs (неотрицательное целое)")
    max_occurs: Union[int, Unbounded] = Field(
        1, description="maxOccurs: неотрицательное целое или 'unbounded'"
    )

    model_config = {"frozen": True}

    @field_validator("max_occurs", mode="before")
    @classmethod
    def parse_max_occurs(cls, v: Union[int, str]) -> Bound:
        """Приведение '5' / 'unbounded' к int / UNBOUNDED."""
        return parse_bound(v)

    @model_validator(mode="after")
    def validate_order(self) -> "OccurrenceBounds":
        """minOccurs не может превышать maxOccurs."""
        if not bound_le(self.min_occurs, self.max_occurs):
            raise ValueError(
                f"minOccurs {self.min_occurs} exceeds maxOccurs {self.max_occurs}"
            )
        return self

    def to_multiplicity(self) -> Multiplicity:
        """Конверсия в Multiplicity через фабрику (с interning)."""
        return create(self.min_occurs, self.max_occurs)


def from_occurs(min_occurs: Union[int, str] = 1, max_occurs: Union[int, str] = 1) -> Multiplicity:
    """
    Multiplicity для пары XSD minOccurs / maxOccurs.

    Examples:
        >>> str(from_occurs(0, "unbounded"))
        '(0,unbounded)'

    Raises:
        OccurrenceContractViolation: если значения невалидны
    """
    try:
        bounds = OccurrenceBounds(min_occurs=min_occurs, max_occurs=max_occurs)
    except ValidationError as e:
        raise OccurrenceContractViolation(
            f"Invalid occurrence bounds minOccurs={min_occurs!r}, maxOccurs={max_occurs!r}: {e}"
        ) from e
    return bounds.to_multiplicity()
