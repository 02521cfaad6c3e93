"""
test_core_types.py - Unit tests for core data structures

Tests:
- Bank, Step, Corridor: construction, Decimal conversion, immutability
- DerivedStep: conveniences and dict view
- Selector coercion
- Amount rounding and formatting
"""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from nostro import (
    Bank, BankRole, ChargeBearer, DerivedStep, Direction, SettlementMethod, Step,
    UnknownSelectorError,
    coerce_charge_bearer, coerce_method, format_amount, round_amount,
)
from nostro.core import is_valid_bic, is_valid_currency, to_decimal


def _step(**overrides) -> Step:
    fields = dict(
        id=1, from_index=0, to_index=1, direction=Direction.FORWARD,
        message_type="pacs.008.001.13", message_name="FI to FI Customer Credit Transfer",
        description="hop", duration="~1 min",
    )
    fields.update(overrides)
    return Step(**fields)


class TestBank:

    def test_role_string_is_coerced(self):
        bank = Bank("DBS Bank", "DBSSSGSG", "Singapore", "SG", "originator")
        assert bank.role is BankRole.ORIGINATOR

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Bank("  ", "DBSSSGSG", "Singapore", "SG", BankRole.ORIGINATOR)

    def test_bank_is_frozen(self):
        bank = Bank("DBS Bank", "DBSSSGSG", "Singapore", "SG", BankRole.ORIGINATOR)
        with pytest.raises(FrozenInstanceError):
            bank.name = "Other"


class TestStep:

    def test_float_fee_converted_via_str(self):
        """0.1 must not pick up binary float noise."""
        step = _step(fee=0.1, fx_rate=0.5812, fx_from="SGD", fx_to="GBP")
        assert step.fee == Decimal("0.1")
        assert step.fx_rate == Decimal("0.5812")

    def test_missing_fee_stays_none(self):
        step = _step()
        assert step.fee is None
        assert step.fx_rate is None
        assert not step.is_fx

    def test_direction_string_is_coerced(self):
        step = _step(direction="backward", from_index=1, to_index=0)
        assert step.direction is Direction.BACKWARD
        assert not step.is_forward

    def test_hop(self):
        assert _step(from_index=2, to_index=3).hop == (2, 3)


class TestCorridor:

    def test_steps_for_each_method(self, sgd_gbp):
        assert sgd_gbp.steps_for(SettlementMethod.SERIAL) is sgd_gbp.serial_steps
        assert sgd_gbp.steps_for(SettlementMethod.COVER) is sgd_gbp.cover_steps

    def test_steps_for_unknown_method_raises(self, sgd_gbp):
        with pytest.raises(UnknownSelectorError):
            sgd_gbp.steps_for("wire")

    def test_default_amount_is_decimal(self, sgd_gbp):
        assert sgd_gbp.default_amount == Decimal("50000")
        assert isinstance(sgd_gbp.fx_rate, Decimal)

    def test_role_lookup(self, sgd_gbp):
        assert sgd_gbp.originator_index == 0
        assert sgd_gbp.beneficiary_index == len(sgd_gbp.banks) - 1
        assert sgd_gbp.originator.bic == "DBSSSGSG"
        assert sgd_gbp.beneficiary.bic == "BARCGB22"


class TestDerivedStep:

    def test_fee_applied_on_forward_step(self):
        d = DerivedStep(_step(fee=35), Decimal("50000"), Decimal("49965"), "SGD")
        assert d.fee_applied == Decimal("35")
        assert d.id == 1
        assert d.direction is Direction.FORWARD

    def test_fee_applied_zero_without_fee(self):
        d = DerivedStep(_step(), Decimal("10"), Decimal("10"), "USD")
        assert d.fee_applied == Decimal("0")
        assert not d.converted

    def test_to_dict_uses_strings_for_amounts(self):
        d = DerivedStep(_step(fee=35), Decimal("50000"), Decimal("49965"), "SGD")
        data = d.to_dict()
        assert data['amount_after'] == "49965"
        assert data['fee'] == "35"
        assert data['direction'] == "forward"
        assert data['fx_rate'] is None


class TestSelectorCoercion:

    @pytest.mark.parametrize("value,expected", [
        ("serial", SettlementMethod.SERIAL),
        ("cover", SettlementMethod.COVER),
        (SettlementMethod.COVER, SettlementMethod.COVER),
    ])
    def test_coerce_method(self, value, expected):
        assert coerce_method(value) is expected

    def test_coerce_method_unknown(self):
        with pytest.raises(UnknownSelectorError, match="settlement method"):
            coerce_method("SERIAL")

    @pytest.mark.parametrize("value", ["SHA", "OUR", "BEN"])
    def test_coerce_charge_bearer(self, value):
        assert coerce_charge_bearer(value) is ChargeBearer(value)

    def test_coerce_charge_bearer_unknown(self):
        with pytest.raises(UnknownSelectorError, match="charge bearer"):
            coerce_charge_bearer("SLEV")


class TestAmountHelpers:

    def test_to_decimal_rejects_bool(self):
        with pytest.raises(TypeError):
            to_decimal(True)

    def test_round_half_even(self):
        assert round_amount(Decimal("29025.125"), "GBP") == Decimal("29025.12")
        assert round_amount(Decimal("29025.135"), "GBP") == Decimal("29025.14")

    def test_jpy_has_no_minor_unit(self):
        assert round_amount(Decimal("994500.6"), "JPY") == Decimal("994501")

    def test_format_amount(self):
        assert format_amount(Decimal("29010.128"), "GBP") == "£29,010.13"
        assert format_amount(Decimal("1000000"), "JPY") == "¥1,000,000"
        assert format_amount(Decimal("-12.5"), "USD") == "-$12.50"

    def test_format_unknown_currency_uses_code(self):
        assert format_amount(Decimal("5"), "CHF") == "CHF 5.00"

    @pytest.mark.parametrize("bic,ok", [
        ("DBSSSGSG", True),
        ("ABORAEADXXX", True),
        ("DBSSSG", False),
        ("dbsssgsg", False),
        ("DBSSSGSGX", False),
    ])
    def test_bic_format(self, bic, ok):
        assert is_valid_bic(bic) is ok

    @pytest.mark.parametrize("code,ok", [("USD", True), ("usd", False), ("US", False), ("", False)])
    def test_currency_format(self, code, ok):
        assert is_valid_currency(code) is ok
