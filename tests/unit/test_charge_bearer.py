"""
test_charge_bearer.py - Unit tests for SHA / OUR / BEN aggregates

Uses the fx_corridor fixture: 1000 USD, fees 10 USD, 5 USD (then ×0.5 into
GBP), 2 GBP. Nominal fee total 17.

    SHA: outlay 1000 + 10 = 1010, received ((1000 - 10 - 5) × 0.5) - 2 = 490.5
    OUR: outlay 1017, received 1000 × 0.5 = 500
    BEN: outlay 1000, received 500 - 17 = 483
"""

import pytest
from decimal import Decimal

from nostro import ChargeBearer, sender_fee, simulate


def _summary(corridor, policy, amount=1000):
    return simulate(corridor.serial_steps, amount, corridor.source_currency, policy).summary


class TestPolicies:

    def test_sha(self, fx_corridor):
        s = _summary(fx_corridor, ChargeBearer.SHA)
        assert s.sender_outlay == Decimal("1010")
        assert s.beneficiary_received == Decimal("490.5")

    def test_our(self, fx_corridor):
        s = _summary(fx_corridor, ChargeBearer.OUR)
        assert s.sender_outlay == Decimal("1017")
        assert s.beneficiary_received == Decimal("500")

    def test_ben(self, fx_corridor):
        s = _summary(fx_corridor, ChargeBearer.BEN)
        assert s.sender_outlay == Decimal("1000")
        assert s.beneficiary_received == Decimal("483")

    def test_summary_fields(self, fx_corridor):
        s = _summary(fx_corridor, ChargeBearer.OUR)
        assert s.total_fees == Decimal("17")
        assert s.source_currency == "USD"
        assert s.target_currency == "GBP"
        assert s.fees_by_currency == {"USD": Decimal("15"), "GBP": Decimal("2")}

    def test_to_dict(self, fx_corridor):
        data = _summary(fx_corridor, ChargeBearer.BEN).to_dict()
        assert data['policy'] == "BEN"
        assert data['beneficiary_received'] == "483.0"
        assert data['fees_by_currency'] == {"USD": "15", "GBP": "2"}


class TestDivergence:

    def test_three_distinct_pairs_with_fees(self, fx_corridor):
        pairs = {
            (s.sender_outlay, s.beneficiary_received)
            for s in (_summary(fx_corridor, p) for p in ChargeBearer)
        }
        assert len(pairs) == 3

    def test_identical_pairs_without_fees(self, fee_free_corridor):
        pairs = {
            (s.sender_outlay, s.beneficiary_received)
            for s in (_summary(fee_free_corridor, p, 100) for p in ChargeBearer)
        }
        assert pairs == {(Decimal("100"), Decimal("90"))}

    def test_fee_only_chain_keeps_policies_apart(self, fee_only_corridor):
        """Without conversion SHA and BEN deliver the same figure; the sender's first fee tells them apart."""
        summaries = {p: _summary(fee_only_corridor, p) for p in ChargeBearer}
        pairs = {p: (s.sender_outlay, s.beneficiary_received) for p, s in summaries.items()}
        assert pairs == {
            ChargeBearer.SHA: (Decimal("1010"), Decimal("983")),
            ChargeBearer.OUR: (Decimal("1017"), Decimal("1000")),
            ChargeBearer.BEN: (Decimal("1000"), Decimal("983")),
        }
        assert len(set(pairs.values())) == 3

    def test_sender_fee_skips_fee_free_instruction(self, fee_only_corridor):
        """In a cover sequence the direct pacs.008 carries no fee; the first funding leg's fee is used."""
        assert sender_fee(fee_only_corridor.serial_steps) == Decimal("10")
        assert sender_fee(fee_only_corridor.cover_steps) == Decimal("10")
        cover = simulate(fee_only_corridor.cover_steps, 1000, "USD", ChargeBearer.SHA).summary
        assert cover.sender_outlay == Decimal("1010")

    def test_our_received_does_not_depend_on_fees(self, fx_corridor):
        s = _summary(fx_corridor, ChargeBearer.OUR, 2000)
        assert s.beneficiary_received == Decimal("1000")


class TestBundledCorridors:

    def test_sgd_gbp_policies(self, sgd_gbp):
        sha = _summary(sgd_gbp, ChargeBearer.SHA, 50000)
        our = _summary(sgd_gbp, ChargeBearer.OUR, 50000)
        ben = _summary(sgd_gbp, ChargeBearer.BEN, 50000)
        assert sha.sender_outlay == Decimal("50035")
        assert sha.beneficiary_received == Decimal("29010.128")
        assert our.sender_outlay == Decimal("50075")
        assert our.beneficiary_received == Decimal("29060")
        assert ben.beneficiary_received == Decimal("28985")

    def test_usd_ngn_policies(self, usd_ngn):
        sha = _summary(usd_ngn, ChargeBearer.SHA)
        ben = _summary(usd_ngn, ChargeBearer.BEN)
        assert sha.beneficiary_received == Decimal("1414547.5")
        assert ben.beneficiary_received == Decimal("1580395")

    @pytest.mark.parametrize("policy", list(ChargeBearer))
    def test_serial_and_cover_agree(self, registry, policy):
        """Both topologies move the same money through the same fees."""
        for corridor in registry:
            serial = simulate(corridor.serial_steps, corridor.default_amount, corridor.source_currency, policy)
            cover = simulate(corridor.cover_steps, corridor.default_amount, corridor.source_currency, policy)
            assert serial.summary.beneficiary_received == cover.summary.beneficiary_received
            assert serial.summary.sender_outlay == cover.summary.sender_outlay
