"""
Content-model folding — n-арная свёртка Multiplicity

Свёртка выражений content model в один диапазон появлений:
- choice group   → fold_choice (нейтрального элемента нет)
- sequence group → fold_group (нейтральный элемент ZERO)
- вложенные повторения → fold_multiply (нейтральный элемент ONE)
"""

import logging
from functools import reduce
from typing import Iterable

from src.core.domain.multiplicity import ONE, ZERO, Multiplicity, choice, group, multiply

logger = logging.getLogger(__name__)


def fold_choice(multiplicities: Iterable[Multiplicity]) -> Multiplicity:
    """
    Объединение всех веток choice group.

    Args:
        multiplicities: Multiplicity каждой ветки (минимум одна)

    Returns:
        choice(...choice(m1, m2)..., mN)

    Raises:
        ValueError: если веток нет
    """
    items = list(multiplicities)
    if not items:
        raise ValueError("Choice group must contain at least one branch")

    result = reduce(choice, items)
    logger.debug("Folded choice of %d branches into %s", len(items), result)
    return result


def fold_group(multiplicities: Iterable[Multiplicity]) -> Multiplicity:
    """
    Сумма частиц sequence group.

    Пустая последовательность даёт ZERO.
    """
    items = list(multiplicities)
    result = reduce(group, items, ZERO)
    logger.debug("Folded sequence of %d particles into %s", len(items), result)
    return result


def fold_multiply(multiplicities: Iterable[Multiplicity]) -> Multiplicity:
    """
    Произведение вложенных повторений, от внешнего к внутреннему.

    Пустой список даёт ONE.
    """
    items = list(multiplicities)
    result = reduce(multiply, items, ONE)
    logger.debug("Folded %d nesting levels into %s", len(items), result)
    return result


def nest(outer: Multiplicity, inner: Multiplicity) -> Multiplicity:
    """Частица с multiplicity inner внутри группы с multiplicity outer."""
    return multiply(outer, inner)
