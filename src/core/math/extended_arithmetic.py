"""
Extended Arithmetic — целые числа с точкой на бесконечности

Арифметика над ℕ ∪ {unbounded}, используемая алгеброй Multiplicity:
- Сложение (sequence sum): unbounded поглощает любое слагаемое
- Умножение (nested repetition): конечный ноль поглощает даже unbounded
- Максимум (choice): unbounded является верхним элементом порядка
- Сравнение в расширенном порядке

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int в Python имеет произвольную точность → переполнения нет
2. Zero absorption в bound_mul проверяется ДО распространения unbounded
3. Все операции чистые и детерминированные
"""

from enum import Enum
from typing import Final, Union

# =============================================================================
# UNBOUNDED SENTINEL
# =============================================================================

UNBOUNDED_TOKEN: Final[str] = "unbounded"


class Unbounded(str, Enum):
    """Отсутствие конечной верхней границы"""

    UNBOUNDED = UNBOUNDED_TOKEN

    def __str__(self) -> str:
        return self.value


UNBOUNDED: Final[Unbounded] = Unbounded.UNBOUNDED

# Верхняя граница: конечное неотрицательное целое или UNBOUNDED
Bound = Union[int, Unbounded]


# =============================================================================
# PREDICATES
# =============================================================================


def is_unbounded(bound: Bound) -> bool:
    """True если граница равна UNBOUNDED."""
    return bound is UNBOUNDED


def is_finite(bound: Bound) -> bool:
    """True если граница конечна."""
    return bound is not UNBOUNDED


def is_finite_zero(bound: Bound) -> bool:
    """True только для конечного нуля (UNBOUNDED никогда не ноль)."""
    return bound is not UNBOUNDED and bound == 0


# =============================================================================
# ARITHMETIC
# =============================================================================


def bound_add(lhs: Bound, rhs: Bound) -> Bound:
    """
    Сумма двух границ.

    Returns:
        UNBOUNDED если хотя бы одна граница не ограничена, иначе lhs + rhs

    Examples:
        >>> bound_add(2, 3)
        5
        >>> bound_add(2, UNBOUNDED)
        <Unbounded.UNBOUNDED: 'unbounded'>
    """
    if lhs is UNBOUNDED or rhs is UNBOUNDED:
        return UNBOUNDED
    return lhs + rhs


def bound_mul(lhs: Bound, rhs: Bound) -> Bound:
    """
    Произведение двух границ.

    Конечный ноль поглощает всё, включая UNBOUNDED: ноль повторений
    внешней группы означает ноль повторений вложенной частицы.

    Returns:
        0 если хотя бы одна граница равна конечному нулю;
        UNBOUNDED если хотя бы одна не ограничена;
        иначе lhs * rhs

    Examples:
        >>> bound_mul(0, UNBOUNDED)
        0
        >>> bound_mul(3, UNBOUNDED)
        <Unbounded.UNBOUNDED: 'unbounded'>
        >>> bound_mul(3, 4)
        12
    """
    if is_finite_zero(lhs) or is_finite_zero(rhs):
        return 0
    if lhs is UNBOUNDED or rhs is UNBOUNDED:
        return UNBOUNDED
    return lhs * rhs


def bound_max(lhs: Bound, rhs: Bound) -> Bound:
    """Максимум двух границ; UNBOUNDED больше любого конечного значения."""
    if lhs is UNBOUNDED or rhs is UNBOUNDED:
        return UNBOUNDED
    return max(lhs, rhs)


def bound_le(lhs: Bound, rhs: Bound) -> bool:
    """
    lhs ≤ rhs в расширенном порядке.

    Examples:
        >>> bound_le(5, UNBOUNDED)
        True
        >>> bound_le(UNBOUNDED, 5)
        False
        >>> bound_le(UNBOUNDED, UNBOUNDED)
        True
    """
    if rhs is UNBOUNDED:
        return True
    if lhs is UNBOUNDED:
        return False
    return lhs <= rhs


# =============================================================================
# RENDERING / PARSING
# =============================================================================


def bound_to_str(bound: Bound) -> str:
    """Десятичная запись или токен 'unbounded'."""
    if bound is UNBOUNDED:
        return UNBOUNDED_TOKEN
    return str(bound)


def parse_bound(token: Union[int, str]) -> Bound:
    """
    Разбор верхней границы из атрибута схемы (например, XSD maxOccurs).

    Args:
        token: int, десятичная строка или 'unbounded'

    Returns:
        Конечная граница (int) или UNBOUNDED

    Raises:
        ValueError: если токен не число, отрицателен или имеет неверный тип
    """
    if isinstance(token, Unbounded):
        return UNBOUNDED
    if isinstance(token, bool):
        raise ValueError(f"Bound must be an integer or '{UNBOUNDED_TOKEN}', got {token!r}")
    if isinstance(token, int):
        value = token
    elif isinstance(token, str):
        text = token.strip()
        if text == UNBOUNDED_TOKEN:
            return UNBOUNDED
        if not text.isdecimal():
            raise ValueError(f"Bound must be an integer or '{UNBOUNDED_TOKEN}', got {token!r}")
        value = int(text)
    else:
        raise ValueError(f"Bound must be an integer or '{UNBOUNDED_TOKEN}', got {token!r}")

    if value < 0:
        raise ValueError(f"Bound cannot be negative: {value}")
    return value
