# tests/test_domain_models.py
"""
Domain Model Tests - Unit Tests for Value Types

This module contains unit tests for Money, Denomination, NotePack, Card,
PinCode and the Withdrawal receipt.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cashpoint.domain.models (value types under test)
- cashpoint.domain.errors (WithdrawalError, ErrorCode)
- pytest (testing framework)
"""
import dataclasses
import pytest  # Testing framework for writing and running tests

from decimal import Decimal

from cashpoint.domain.errors import ErrorCode, WithdrawalError
from cashpoint.domain.models import Card, Denomination, Money, NotePack, PinCode, Withdrawal


class TestMoney:
    def test_default_currency(self):
        assert Money(100).currency == Money.DEFAULT_CURRENCY == "PLN"

    def test_amount_converted_to_decimal(self):
        assert Money(3000).amount == Decimal("3000")
        assert Money("3000").amount == Decimal("3000")

    def test_float_keeps_written_value(self):
        assert Money(100.50).amount == Decimal("100.5")

    def test_value_equality(self):
        assert Money(3000, "PLN") == Money(Decimal("3000"), "PLN")
        assert Money(3000, "PLN") != Money(3000, "USD")

    def test_is_whole(self):
        assert Money(3000).is_whole()
        assert Money("3000.00").is_whole()
        assert not Money(100.50).is_whole()

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Money(100).amount = Decimal(5)

    @pytest.mark.parametrize("currency", ["", "   ", None])
    def test_invalid_currency(self, currency):
        with pytest.raises(ValueError, match="Invalid currency"):
            Money(100, currency)

    @pytest.mark.parametrize("currency", ["usd", "PL", "PLNX"])
    def test_any_currency_identifier_accepted(self, currency):
        # Whether the terminal dispenses it is decided at withdrawal time
        assert Money(100, currency).currency == currency

    @pytest.mark.parametrize("amount", ["abc", None, True])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValueError, match="Invalid amount"):
            Money(amount)

    def test_str(self):
        assert str(Money(3000)) == "3000 PLN"


class TestDenomination:
    def test_descending(self):
        values = [d.value for d in Denomination.descending()]
        assert values == [500, 200, 100, 50, 20, 10]


class TestNotePack:
    def test_create(self):
        pack = NotePack.create(5, Denomination.PL_500)
        assert pack == NotePack(Denomination.PL_500, 5)
        assert pack.value == 2500

    def test_negative_count(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            NotePack(Denomination.PL_100, -1)


class TestCard:
    def test_masked(self):
        card = Card.create("4111111111111111")
        assert card.masked() == "************1111"
        assert "4111111111111111" not in repr(card)

    def test_short_number_not_masked(self):
        assert Card.create("1234").masked() == "1234"


class TestPinCode:
    def test_create(self):
        pin = PinCode.create(0, 0, 0, 0)
        assert pin.digits == (0, 0, 0, 0)
        assert pin.as_string() == "0000"

    def test_parse(self):
        assert PinCode.parse("1234") == PinCode.create(1, 2, 3, 4)

    def test_repr_hides_digits(self):
        assert "1234" not in repr(PinCode.parse("1234"))

    @pytest.mark.parametrize("digits", [(1, 2, 3), (1, 2, 3, 4, 5), (1, 2, 3, 10), (1, 2, 3, -1)])
    def test_invalid_digits(self, digits):
        with pytest.raises(ValueError):
            PinCode.create(*digits)

    def test_parse_rejects_letters(self):
        with pytest.raises(ValueError, match="digits only"):
            PinCode.parse("12a4")


class TestWithdrawal:
    def test_drops_zero_packs_and_sorts(self):
        receipt = Withdrawal.create([
            NotePack(Denomination.PL_100, 1),
            NotePack(Denomination.PL_50, 0),
            NotePack(Denomination.PL_500, 5),
        ])
        assert receipt.packs == (
            NotePack(Denomination.PL_500, 5),
            NotePack(Denomination.PL_100, 1),
        )

    def test_total_and_count_of(self):
        receipt = Withdrawal.create([NotePack(Denomination.PL_200, 2), NotePack(Denomination.PL_20, 3)])
        assert receipt.total == 460
        assert receipt.count_of(Denomination.PL_200) == 2
        assert receipt.count_of(Denomination.PL_500) == 0

    def test_equality_uses_full_sequence(self):
        a = Withdrawal.create([NotePack(Denomination.PL_500, 5), NotePack(Denomination.PL_200, 2)])
        b = Withdrawal.create([NotePack(Denomination.PL_200, 2), NotePack(Denomination.PL_500, 5)])
        c = Withdrawal.create([NotePack(Denomination.PL_500, 5), NotePack(Denomination.PL_200, 1)])
        assert a == b
        assert a != c


class TestWithdrawalError:
    def test_carries_code_and_message(self):
        error = WithdrawalError(ErrorCode.WRONG_AMOUNT, "too much")
        assert error.code is ErrorCode.WRONG_AMOUNT
        assert error.message == "too much"
        assert str(error) == "WRONG_AMOUNT: too much"

    def test_message_optional(self):
        error = WithdrawalError(ErrorCode.AUTHORIZATION)
        assert error.message is None
        assert str(error) == "AUTHORIZATION"
