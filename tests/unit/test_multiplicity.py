"""
Тесты для Multiplicity — значения и алгебры

Проверяет:
1. Фабрику create() и interning канонических констант
2. Предикаты (unique, optional, at-most-once, zero)
3. Subsumption (includes)
4. Алгебру: choice, group, multiply, one_or_more
5. Расширения диапазона: make_optional, make_repeated
6. Рендеринг и сериализацию
7. Immutability и структурное равенство
"""

import dataclasses

import pytest

from src.core.domain import (
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
from src.core.math import UNBOUNDED


SAMPLES = [
    ZERO,
    ONE,
    OPTIONAL,
    STAR,
    PLUS,
    create(2, 5),
    create(3, 3),
    create(0, 7),
    create(4, None),
]


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestCreate:
    """Тесты фабрики create()"""

    @pytest.mark.parametrize(
        "min_, max_, expected",
        [
            (0, 0, ZERO),
            (1, 1, ONE),
            (0, 1, OPTIONAL),
            (0, UNBOUNDED, STAR),
            (1, UNBOUNDED, PLUS),
        ],
    )
    def test_canonical_pairs_are_interned(self, min_, max_, expected) -> None:
        """Пять канонических пар возвращаются по identity"""
        assert create(min_, max_) is expected
        assert Multiplicity.create(min_, max_) is expected

    def test_none_means_unbounded(self) -> None:
        """max=None трактуется как UNBOUNDED"""
        assert create(0) is STAR
        assert create(1, None) is PLUS
        assert create(7).max is UNBOUNDED

    def test_unbounded_token_string_accepted(self) -> None:
        """Строка 'unbounded' нормализуется в UNBOUNDED"""
        assert create(0, "unbounded") is STAR
        assert create(3, "unbounded").max is UNBOUNDED

    def test_decimal_string_max_converted(self) -> None:
        """Десятичная строка max приводится к int"""
        m = create(0, "5")
        assert m.max == 5
        assert type(m.max) is int
        assert not m.is_at_most_once()
        assert create(0, "1") is OPTIONAL

    @pytest.mark.parametrize("min_, max_", [(2, 5), (0, 7), (3, 3), (4, UNBOUNDED), (0, 2)])
    def test_non_canonical_preserves_bounds(self, min_, max_) -> None:
        """Неканонические пары сохраняют (min, max)"""
        m = create(min_, max_)
        assert m.min == min_
        assert m.max == max_

    def test_non_canonical_is_fresh_but_equal(self) -> None:
        """Неканонические значения не interned, но структурно равны"""
        a = create(2, 5)
        b = create(2, 5)
        assert a == b
        assert a is not b
        assert hash(a) == hash(b)

    def test_arbitrary_precision(self) -> None:
        """Большие значения не переполняются"""
        big = 10**40
        m = multiply(create(big, big), create(big, big))
        assert m.min == big * big
        assert m.max == big * big

    def test_inverted_pair_not_rejected(self) -> None:
        """min > max не валидируется самим типом"""
        m = create(5, 0)
        assert m.min == 5
        assert m.max == 0


class TestValueSemantics:
    """Immutability и равенство"""

    def test_immutable(self) -> None:
        """Поля нельзя изменить"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ONE.min = 2  # type: ignore

    def test_unbounded_equals_only_unbounded(self) -> None:
        """UNBOUNDED равен только UNBOUNDED"""
        assert STAR != create(0, 10**9)
        assert STAR == create(0, None)

    def test_hashable_in_sets(self) -> None:
        """Multiplicity пригодна как ключ dict/set"""
        assert {create(2, 5), create(2, 5), STAR, create(0)} == {create(2, 5), STAR}

    def test_not_equal_to_tuple(self) -> None:
        """Сравнение с не-Multiplicity даёт False"""
        assert ONE != (1, 1)


# =============================================================================
# PREDICATES
# =============================================================================


class TestPredicates:
    """Тесты предикатов"""

    def test_is_unique(self) -> None:
        assert ONE.is_unique()
        assert not OPTIONAL.is_unique()
        assert not PLUS.is_unique()
        assert not create(1, 2).is_unique()

    def test_is_optional(self) -> None:
        assert OPTIONAL.is_optional()
        assert not ONE.is_optional()
        assert not STAR.is_optional()
        assert not ZERO.is_optional()

    def test_is_at_most_once(self) -> None:
        """Только конечный max ≤ 1"""
        assert ZERO.is_at_most_once()
        assert OPTIONAL.is_at_most_once()
        assert ONE.is_at_most_once()
        assert not STAR.is_at_most_once()
        assert not PLUS.is_at_most_once()
        assert not create(0, 2).is_at_most_once()

    def test_is_zero(self) -> None:
        assert ZERO.is_zero()
        assert not ONE.is_zero()
        assert not STAR.is_zero()

    def test_is_zero_ignores_min(self) -> None:
        """Некорректная пара (5,0) тоже сообщает is_zero"""
        assert create(5, 0).is_zero()
        assert create(5, 0).is_at_most_once()

    def test_is_unbounded(self) -> None:
        assert STAR.is_unbounded()
        assert PLUS.is_unbounded()
        assert not create(2, 5).is_unbounded()


# =============================================================================
# SUBSUMPTION
# =============================================================================


class TestIncludes:
    """Тесты includes()"""

    @pytest.mark.parametrize("m", SAMPLES)
    def test_reflexive(self, m: Multiplicity) -> None:
        """Любая multiplicity включает саму себя"""
        assert m.includes(m)

    def test_examples(self) -> None:
        """[1,3] включает [1,2]; [2,4] не включает [1,3]"""
        assert create(1, 3).includes(create(1, 2))
        assert not create(2, 4).includes(create(1, 3))

    def test_unbounded_includes_finite(self) -> None:
        assert STAR.includes(create(3, 10))
        assert STAR.includes(PLUS)
        assert PLUS.includes(create(1, 1000))

    def test_finite_never_includes_unbounded(self) -> None:
        assert not create(0, 10**6).includes(STAR)
        assert not ONE.includes(PLUS)

    def test_lower_bound_checked(self) -> None:
        assert not PLUS.includes(STAR)
        assert not ONE.includes(OPTIONAL)
        assert OPTIONAL.includes(ONE)

    def test_contains_operator(self) -> None:
        """`in` делегирует в includes"""
        assert ONE in STAR
        assert STAR not in ONE


# =============================================================================
# ALGEBRA
# =============================================================================


class TestChoice:
    """Тесты choice (объединение веток)"""

    def test_basic(self) -> None:
        assert choice(create(2, 5), create(3, 8)) == create(2, 8)

    def test_optional_or_one(self) -> None:
        assert choice(OPTIONAL, ONE) is OPTIONAL

    def test_unbounded_propagates(self) -> None:
        assert choice(ONE, PLUS) is PLUS
        assert choice(create(3, 4), STAR) is STAR

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_commutative(self, a: Multiplicity, b: Multiplicity) -> None:
        assert choice(a, b) == choice(b, a)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_idempotent(self, a: Multiplicity) -> None:
        assert choice(a, a) == a

    def test_result_includes_both_branches(self) -> None:
        a, b = create(2, 5), create(0, 3)
        c = choice(a, b)
        assert c.includes(a)
        assert c.includes(b)


class TestGroup:
    """Тесты group (сумма для sequence)"""

    def test_basic(self) -> None:
        assert group(create(1, 2), create(3, 4)) == create(4, 6)

    def test_zero_is_neutral(self) -> None:
        assert group(ZERO, create(2, 5)) == create(2, 5)

    def test_unbounded_propagates(self) -> None:
        assert group(ONE, STAR) is PLUS
        assert group(STAR, STAR) is STAR

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_commutative(self, a: Multiplicity, b: Multiplicity) -> None:
        assert group(a, b) == group(b, a)

    @pytest.mark.parametrize("a", SAMPLES[:5])
    @pytest.mark.parametrize("b", SAMPLES[3:7])
    @pytest.mark.parametrize("c", SAMPLES[5:])
    def test_associative(self, a: Multiplicity, b: Multiplicity, c: Multiplicity) -> None:
        assert group(group(a, b), c) == group(a, group(b, c))


class TestMultiply:
    """Тесты multiply (вложенное повторение)"""

    def test_basic(self) -> None:
        assert multiply(create(2, 3), create(4, 5)) == create(8, 15)

    def test_zero_absorbs_unbounded(self) -> None:
        """Конечный ноль важнее UNBOUNDED"""
        assert multiply(ZERO, STAR).max == 0
        assert multiply(STAR, ZERO).max == 0
        assert multiply(ZERO, PLUS) is ZERO

    def test_unbounded_propagates(self) -> None:
        assert multiply(PLUS, create(2, 3)) == create(2, None)
        assert multiply(OPTIONAL, PLUS) is STAR

    @pytest.mark.parametrize("x", SAMPLES)
    def test_one_is_identity(self, x: Multiplicity) -> None:
        result = multiply(ONE, x)
        assert result.min == x.min
        assert result.max == x.max

    def test_min_zero_with_nonzero_max(self) -> None:
        assert multiply(OPTIONAL, create(3, 4)) == create(0, 4)


class TestOneOrMore:
    """Тесты one_or_more"""

    def test_finite_becomes_unbounded(self) -> None:
        assert one_or_more(create(2, 5)) == create(2, UNBOUNDED)

    def test_zero_unchanged(self) -> None:
        assert one_or_more(ZERO) is ZERO

    def test_unbounded_unchanged(self) -> None:
        assert one_or_more(STAR) is STAR
        assert one_or_more(PLUS) is PLUS

    def test_canonical_results(self) -> None:
        assert one_or_more(ONE) is PLUS
        assert one_or_more(OPTIONAL) is STAR


class TestMakeOptional:
    """Тесты make_optional"""

    def test_one_becomes_optional(self) -> None:
        assert ONE.make_optional() is OPTIONAL

    def test_idempotent(self) -> None:
        assert OPTIONAL.make_optional() is OPTIONAL
        assert STAR.make_optional() is STAR

    def test_max_preserved(self) -> None:
        assert create(3, 7).make_optional() == create(0, 7)
        assert PLUS.make_optional() is STAR

    def test_returns_self_when_min_zero(self) -> None:
        m = create(0, 9)
        assert m.make_optional() is m


class TestMakeRepeated:
    """Тесты make_repeated"""

    def test_one_becomes_plus(self) -> None:
        assert ONE.make_repeated() is PLUS

    def test_unbounded_unchanged(self) -> None:
        assert STAR.make_repeated() is STAR

    def test_zero_unchanged(self) -> None:
        assert ZERO.make_repeated() is ZERO

    def test_min_preserved(self) -> None:
        assert create(3, 7).make_repeated() == create(3, None)
        assert OPTIONAL.make_repeated() is STAR


# =============================================================================
# RENDERING
# =============================================================================


class TestRendering:
    """Тесты строкового представления"""

    def test_str(self) -> None:
        assert str(STAR) == "(0,unbounded)"
        assert str(ONE) == "(1,1)"
        assert str(create(2, 5)) == "(2,5)"

    def test_max_string(self) -> None:
        assert PLUS.max_string() == "unbounded"
        assert create(2, 5).max_string() == "5"

    def test_repr(self) -> None:
        assert repr(PLUS) == "Multiplicity(1,unbounded)"

    def test_to_dict(self) -> None:
        assert STAR.to_dict() == {"min": 0, "max": "unbounded"}
        assert create(2, 5).to_dict() == {"min": 2, "max": 5}


# =============================================================================
# END-TO-END
# =============================================================================


def test_fold_choice_then_sequence() -> None:
    """(a? | a), a* → (0,unbounded)"""
    assert group(choice(OPTIONAL, ONE), STAR) == create(0, UNBOUNDED)
