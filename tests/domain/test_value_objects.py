"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.value_objects import Money, Option, OptionKind


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("50"))
        assert m.amount == Decimal("50")
        assert m.currency == "UAH"

    def test_of_factory_from_string(self):
        assert Money.of("7.5").amount == Decimal("7.5")

    def test_of_factory_from_int(self):
        assert Money.of(9) == Money(Decimal("9"))

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("lots")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(50)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of(50) + Money.of(9) == Money.of(59)

    def test_addition_keeps_fractions(self):
        assert Money.of("0.1") + Money.of("0.2") == Money.of("0.3")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "UAH") + Money(Decimal("5"), "EUR")

    def test_zero(self):
        assert Money.zero() + Money.of(5) == Money.of(5)

    def test_str_formatting(self):
        assert str(Money.of(114)) == "114UAH"
        assert str(Money.of("7.50")) == "7.50UAH"


# ── Option ───────────────────────────────────────────────────────────────────


class TestOption:

    def test_equal_by_value(self):
        a = Option(OptionKind.EXTRA, "MEAT", Money.of(9))
        b = Option(OptionKind.EXTRA, "MEAT", Money.of("9"))
        assert a == b
        assert a is not b
        assert hash(a) == hash(b)

    def test_kind_takes_part_in_equality(self):
        size = Option(OptionKind.SIZE, "SMALL", Money.of(50))
        extra = Option(OptionKind.EXTRA, "SMALL", Money.of(50))
        assert size != extra

    def test_immutable(self):
        option = Option(OptionKind.SIZE, "SMALL", Money.of(50))
        with pytest.raises(AttributeError):
            option.name = "HUGE"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Option(OptionKind.TYPE, "  ", Money.of(1))

    def test_str_is_name(self):
        assert str(Option(OptionKind.TYPE, "VEGGIE", Money.of(50))) == "VEGGIE"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Option(OptionKind.EXTRA, "BASIL", Money.of(-5))

    def test_raw_number_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be Money, got int"):
            Option(OptionKind.EXTRA, "BASIL", -5)

    def test_float_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be Money, got float"):
            Option(OptionKind.EXTRA, "BASIL", 2.5)

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError, match="name must be a str, got int"):
            Option(OptionKind.EXTRA, 42, Money.of(1))

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="kind must be an OptionKind, got str"):
            Option("EXTRA", "BASIL", Money.of(1))
