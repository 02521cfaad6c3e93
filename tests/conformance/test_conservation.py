"""
Conservation Conformance Tests

INVARIANT: Money changes only where a fee or a conversion says so.

    ∀ forward step s with fee f (0 if none) and rate r (1 if none):
        after(s) = (before(s) - f) × r

    ∀ backward step s:
        after(s) = before(s)

Consequences checked here:
    fee-free walk final = principal × ∏ r
    OUR outlay = principal + Σ fees
    Σ fees_by_currency = Σ fees (nominal)
    no conversion ⟹ SHA final = principal - Σ fees = BEN final
    Σ fees > 0 ⟹ SHA, OUR and BEN give three distinct (outlay, received) pairs
    Σ fees = 0 ⟹ all three pairs coincide
"""

from decimal import Decimal
from hypothesis import given, settings
from hypothesis import strategies as st

from nostro import (
    ChargeBearer, SettlementMethod,
    derive_steps, fees_by_currency, sender_fee, simulate, total_forward_fees,
)

from tests.fake_corridor import corridor_plans, make_corridor


principals = st.decimals(min_value=Decimal("0.01"), max_value=Decimal("10000000"), places=2)


def _rate_product(steps):
    product = Decimal("1")
    for s in steps:
        if s.is_forward and s.fx_rate is not None:
            product *= s.fx_rate
    return product


class TestConservationProperties:
    """Property-based conservation tests."""

    @given(corridor_plans(), principals, st.sampled_from(list(SettlementMethod)))
    @settings(max_examples=100)
    def test_each_step_moves_money_by_its_own_terms(self, plan, principal, method):
        fees, fx = plan
        steps = make_corridor(fees=fees, fx=fx).steps_for(method)
        for d in derive_steps(steps, principal, "USD"):
            if d.step.is_forward:
                fee = d.step.fee if d.step.fee is not None else Decimal("0")
                rate = d.step.fx_rate if d.step.fx_rate is not None else Decimal("1")
                assert d.amount_after == (d.amount_before - fee) * rate
            else:
                assert d.amount_after == d.amount_before

    @given(corridor_plans(), principals)
    @settings(max_examples=100)
    def test_fee_free_walk_only_converts(self, plan, principal):
        fees, fx = plan
        steps = make_corridor(fees=fees, fx=fx).serial_steps
        derived = derive_steps(steps, principal, "USD", apply_fees=False)
        assert derived[-1].amount_after == principal * _rate_product(steps)

    @given(corridor_plans(), principals)
    @settings(max_examples=100)
    def test_our_outlay_covers_every_fee(self, plan, principal):
        fees, fx = plan
        steps = make_corridor(fees=fees, fx=fx).serial_steps
        summary = simulate(steps, principal, "USD", ChargeBearer.OUR).summary
        assert summary.sender_outlay == principal + total_forward_fees(steps)
        assert summary.beneficiary_received == principal * _rate_product(steps)

    @given(corridor_plans())
    @settings(max_examples=100)
    def test_grouped_fees_add_up_to_nominal_total(self, plan):
        fees, fx = plan
        steps = make_corridor(fees=fees, fx=fx).serial_steps
        grouped = fees_by_currency(derive_steps(steps, 1000, "USD"))
        assert sum(grouped.values(), Decimal("0")) == total_forward_fees(steps)

    @given(corridor_plans(allow_fx=False), principals)
    @settings(max_examples=100)
    def test_without_conversion_fees_come_straight_off(self, plan, principal):
        fees, _ = plan
        steps = make_corridor(fees=fees).serial_steps
        expected = principal - total_forward_fees(steps)
        sha = simulate(steps, principal, "USD", ChargeBearer.SHA).summary
        ben = simulate(steps, principal, "USD", ChargeBearer.BEN).summary
        assert sha.beneficiary_received == expected
        assert ben.beneficiary_received == expected
        assert sha.sender_outlay == principal + sender_fee(steps)
        assert ben.sender_outlay == principal

    @given(corridor_plans(), principals, st.sampled_from(list(SettlementMethod)))
    @settings(max_examples=100)
    def test_policies_diverge_exactly_when_fees_are_charged(self, plan, principal, method):
        fees, fx = plan
        steps = make_corridor(fees=fees, fx=fx).steps_for(method)
        pairs = {
            (s.sender_outlay, s.beneficiary_received)
            for s in (simulate(steps, principal, "USD", p).summary for p in ChargeBearer)
        }
        if total_forward_fees(steps) > 0:
            assert len(pairs) == 3
        else:
            assert len(pairs) == 1


class TestConservationExamples:
    """Explicit conservation examples on bundled corridors."""

    def test_sgd_gbp_serial_walk(self, sgd_gbp):
        derived = derive_steps(sgd_gbp.serial_steps, 50000, "SGD")
        assert [d.amount_after for d in derived] == [
            Decimal("49965"), Decimal("49965"),
            Decimal("29025.128"), Decimal("29025.128"),
            Decimal("29010.128"), Decimal("29010.128"), Decimal("29010.128"),
        ]

    def test_jpy_mxn_double_conversion(self, jpy_mxn):
        derived = derive_steps(jpy_mxn.serial_steps, 1000000, "JPY")
        forward = [d for d in derived if d.step.is_forward]
        assert [d.amount_after for d in forward] == [
            Decimal("994500"), Decimal("6494.7085"), Decimal("112376.474985"),
        ]
        assert forward[-1].running_currency == "MXN"

    def test_usd_ngn_fee_free(self, usd_ngn):
        derived = derive_steps(usd_ngn.serial_steps, 1000, "USD", apply_fees=False)
        assert derived[-1].amount_after == Decimal("1580500")
