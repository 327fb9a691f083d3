"""
Multiplicity — допустимое число появлений частицы content model

Интервал [min, max] неотрицательных целых, где max может быть UNBOUNDED.
Используется компилятором схем для свёртки choice/sequence/вложенных
повторений в один диапазон на символ.

Соответствие индикаторам DTD:
- (1,1)         → без индикатора
- (0,1)         → '?'
- (0,unbounded) → '*'
- (1,unbounded) → '+'

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable: любая операция возвращает новый экземпляр (или interned константу)
2. create() возвращает ZERO/ONE/OPTIONAL/STAR/PLUS по identity для пяти
   канонических пар
3. Предикаты, проверяющие max численно, всегда False для UNBOUNDED
4. Пары с min > max не отклоняются: алгебра их просто пропагирует
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from src.core.math.extended_arithmetic import (
    UNBOUNDED,
    UNBOUNDED_TOKEN,
    Bound,
    bound_add,
    bound_le,
    bound_max,
    bound_mul,
    bound_to_str,
    is_finite_zero,
)


# =============================================================================
# MULTIPLICITY VALUE TYPE
# =============================================================================


@dataclass(frozen=True, repr=False)
class Multiplicity:
    """
    Immutable интервал числа появлений [min, max].

    Экземпляры создаются только через Multiplicity.create() / create():
    прямой вызов конструктора обходит interning канонических констант.
    """

    min: int
    max: Bound

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, min: int, max: Union[Bound, str, None]) -> "Multiplicity":
        """
        Фабрика с interning пяти канонических форм.

        Args:
            min: Нижняя граница (неотрицательное целое)
            max: Верхняя граница: int, UNBOUNDED, 'unbounded', десятичная строка
                или None (= UNBOUNDED)

        Returns:
            Interned константу для (0,0), (1,1), (0,1), (0,*), (1,*),
            иначе новый экземпляр
        """
        if max is None or max == UNBOUNDED_TOKEN:
            max = UNBOUNDED
        elif isinstance(max, str) and max.isdecimal():
            max = int(max)
        interned = _INTERNED.get((min, max))
        if interned is not None:
            return interned
        return cls(min, max)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_unique(self) -> bool:
        """True если multiplicity равна (1,1)."""
        return self.max is not UNBOUNDED and self.min == 1 and self.max == 1

    def is_optional(self) -> bool:
        """True если multiplicity равна (0,1)."""
        return self.max is not UNBOUNDED and self.min == 0 and self.max == 1

    def is_at_most_once(self) -> bool:
        """True если max конечен и max ≤ 1: (0,0), (0,1), (1,1)."""
        return self.max is not UNBOUNDED and self.max <= 1

    def is_zero(self) -> bool:
        """
        True если max равен конечному нулю.

        min не проверяется: некорректная пара (5,0) тоже даст True.
        """
        return is_finite_zero(self.max)

    def is_unbounded(self) -> bool:
        """True если max равен UNBOUNDED."""
        return self.max is UNBOUNDED

    def includes(self, other: "Multiplicity") -> bool:
        """
        Проверка, что интервал self полностью содержит интервал other.

        Examples:
            >>> create(1, 3).includes(create(1, 2))
            True
            >>> create(2, 4).includes(create(1, 3))
            False
        """
        if other.min < self.min:
            return False
        return bound_le(other.max, self.max)

    def __contains__(self, other: "Multiplicity") -> bool:
        return self.includes(other)

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    @staticmethod
    def choice(lhs: "Multiplicity", rhs: "Multiplicity") -> "Multiplicity":
        """
        Объединение альтернативных веток choice.

        min = min(lhs.min, rhs.min); max = max(lhs.max, rhs.max),
        UNBOUNDED любой ветки пропагирует.
        """
        return Multiplicity.create(min(lhs.min, rhs.min), bound_max(lhs.max, rhs.max))

    @staticmethod
    def group(lhs: "Multiplicity", rhs: "Multiplicity") -> "Multiplicity":
        """Сумма для последовательности частиц (sequence)."""
        return Multiplicity.create(lhs.min + rhs.min, bound_add(lhs.max, rhs.max))

    @staticmethod
    def multiply(lhs: "Multiplicity", rhs: "Multiplicity") -> "Multiplicity":
        """
        Произведение для вложенного повторения: группа появляется lhs раз,
        внутри неё частица появляется rhs раз.

        Конечный ноль в max любого операнда даёт max = 0 даже при UNBOUNDED
        у другого операнда.
        """
        return Multiplicity.create(lhs.min * rhs.min, bound_mul(lhs.max, rhs.max))

    @staticmethod
    def one_or_more(m: "Multiplicity") -> "Multiplicity":
        """Применение '+' к multiplicity: (x,*) → (x,*), (0,0) → (0,0), (x,y) → (x,*)."""
        if m.max is UNBOUNDED or is_finite_zero(m.max):
            return m
        return Multiplicity.create(m.min, UNBOUNDED)

    def make_optional(self) -> "Multiplicity":
        """Расширение нижней границы до нуля; max сохраняется."""
        if self.min == 0:
            return self
        return Multiplicity.create(0, self.max)

    def make_repeated(self) -> "Multiplicity":
        """Расширение верхней границы до UNBOUNDED; min сохраняется."""
        # (0,0)* = (0,0), (n,*)* = (n,*)
        if self.max is UNBOUNDED or is_finite_zero(self.max):
            return self
        return Multiplicity.create(self.min, UNBOUNDED)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def max_string(self) -> str:
        """Верхняя граница как число или токен 'unbounded'."""
        return bound_to_str(self.max)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в форму контракта occurrence.json."""
        return {"min": self.min, "max": self.max_string() if self.is_unbounded() else self.max}

    def __str__(self) -> str:
        return f"({self.min},{self.max_string()})"

    def __repr__(self) -> str:
        return f"Multiplicity{self}"


# =============================================================================
# CANONICAL CONSTANTS
# =============================================================================

ZERO = Multiplicity(0, 0)
ONE = Multiplicity(1, 1)
OPTIONAL = Multiplicity(0, 1)
STAR = Multiplicity(0, UNBOUNDED)
PLUS = Multiplicity(1, UNBOUNDED)

_INTERNED: Dict[Tuple[int, Bound], Multiplicity] = {
    (m.min, m.max): m for m in (ZERO, ONE, OPTIONAL, STAR, PLUS)
}


# =============================================================================
# MODULE-LEVEL API
# =============================================================================


def create(min: int, max: Optional[Union[Bound, str]] = None) -> Multiplicity:
    """
    Создание multiplicity; max=None означает UNBOUNDED.

    Examples:
        >>> create(0, 1) is OPTIONAL
        True
        >>> str(create(2))
        '(2,unbounded)'
    """
    return Multiplicity.create(min, max)


choice = Multiplicity.choice
group = Multiplicity.group
multiply = Multiplicity.multiply
one_or_more = Multiplicity.one_or_more
