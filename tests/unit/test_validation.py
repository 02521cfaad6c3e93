"""
test_validation.py - Unit tests for load-time corridor validation

Tests:
- Bundled corridors are valid
- Each configuration defect is reported
- All problems are collected, not just the first
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from nostro import (
    BankRole, CorridorDefinitionError, Direction,
    check_corridor, load_corridors, validate_corridor, validate_corridors,
)
from nostro.corridors.common import PACS_002, backward

from tests.fake_corridor import make_corridor, with_bank, with_serial_step


class TestBundledData:

    @pytest.mark.parametrize("corridor", load_corridors(), ids=lambda c: c.id)
    def test_bundled_corridor_is_valid(self, corridor):
        assert check_corridor(corridor) == []

    def test_synthetic_corridors_are_valid(self, fee_only_corridor, fx_corridor, double_fx_corridor):
        for corridor in (fee_only_corridor, fx_corridor, double_fx_corridor):
            validate_corridor(corridor)


class TestBankDefects:

    def test_malformed_bic(self, fee_only_corridor):
        bad = with_bank(fee_only_corridor, 1, bic="BAD")
        assert any("malformed BIC" in p for p in check_corridor(bad))

    def test_two_originators(self, fee_only_corridor):
        bad = with_bank(fee_only_corridor, 1, role=BankRole.ORIGINATOR)
        assert any("exactly one originator" in p for p in check_corridor(bad))

    def test_beneficiary_not_last(self, fee_only_corridor):
        bad = with_bank(fee_only_corridor, 2, role=BankRole.BENEFICIARY)
        bad = with_bank(bad, 3, role=BankRole.INTERMEDIARY)
        assert any("beneficiary must be the last bank" in p for p in check_corridor(bad))

    def test_single_bank(self, fee_only_corridor):
        bad = replace(fee_only_corridor, banks=fee_only_corridor.banks[:1])
        assert any("at least 2 banks" in p for p in check_corridor(bad))


class TestStepDefects:

    def test_negative_fee(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 0, fee=-5)
        assert any("non-negative" in p for p in check_corridor(bad))

    def test_fee_on_backward_step(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 3, fee=1)
        assert any("backward step carries a fee" in p for p in check_corridor(bad))

    def test_fx_on_backward_step(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 3, fx_rate=Decimal("2"), fx_from="USD", fx_to="EUR")
        assert any("backward step carries an FX" in p for p in check_corridor(bad))

    def test_non_positive_rate(self, fx_corridor):
        bad = with_serial_step(fx_corridor, 1, fx_rate=Decimal("0"))
        assert any("fx_rate must be" in p for p in check_corridor(bad))

    def test_fx_without_currencies(self, fx_corridor):
        bad = with_serial_step(fx_corridor, 1, fx_to=None)
        assert any("needs both fx_from and fx_to" in p for p in check_corridor(bad))

    def test_fx_from_not_running_currency(self, fx_corridor):
        bad = with_serial_step(fx_corridor, 1, fx_from="EUR")
        assert any("running currency is USD" in p for p in check_corridor(bad))

    def test_index_out_of_range(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 2, to_index=9)
        assert any("out of range" in p for p in check_corridor(bad))

    def test_self_referencing_step(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 1, to_index=1)
        assert any("same bank" in p for p in check_corridor(bad))

    def test_direction_against_index_order(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 0, direction=Direction.BACKWARD)
        assert any("backward step must move to a lower" in p for p in check_corridor(bad))

    def test_non_contiguous_ids(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 1, id=7)
        assert any("step ids must be" in p for p in check_corridor(bad))


class TestSequenceDefects:

    def test_wrong_target_currency(self, fx_corridor):
        bad = replace(fx_corridor, target_currency="EUR")
        problems = check_corridor(bad)
        assert any("ends in GBP, expected EUR" in p for p in problems)

    def test_serial_skipping_a_bank(self, fee_only_corridor):
        steps = fee_only_corridor.serial_steps
        skipped = (
            steps[0],
            replace(steps[2], id=2, from_index=1),
            replace(steps[3], id=3),
        )
        bad = replace(fee_only_corridor, serial_steps=skipped)
        assert any("serial forward hops" in p for p in check_corridor(bad))

    def test_cover_without_direct_step(self, fee_only_corridor):
        cover = fee_only_corridor.cover_steps[1:]
        cover = tuple(replace(s, id=i + 1) for i, s in enumerate(cover))
        # pad so cover is still longer than serial
        cover = cover + (backward(len(cover) + 1, 3, 0, PACS_002, "status", "~1 min", "", ""),)
        bad = replace(fee_only_corridor, cover_steps=cover)
        assert any("exactly one direct" in p for p in check_corridor(bad))

    def test_sequence_must_end_back_at_originator(self, fee_only_corridor):
        steps = fee_only_corridor.serial_steps
        bad = with_serial_step(fee_only_corridor, len(steps) - 1, to_index=2)
        assert any("must end with a backward step" in p for p in check_corridor(bad))

    def test_cover_not_longer_than_serial(self, fee_only_corridor):
        bad = replace(fee_only_corridor, serial_steps=fee_only_corridor.serial_steps + (
            backward(5, 3, 0, PACS_002, "status", "~1 min", "", ""),
            backward(6, 3, 0, PACS_002, "status", "~1 min", "", ""),
        ))
        assert any("must be longer than serial" in p for p in check_corridor(bad))

    def test_non_positive_default_amount(self, fee_only_corridor):
        bad = replace(fee_only_corridor, default_amount=Decimal("0"))
        assert any("default amount must be positive" in p for p in check_corridor(bad))


class TestValidateRaises:

    def test_validate_corridor_lists_problems(self, fee_only_corridor):
        bad = with_bank(fee_only_corridor, 0, bic="X")
        bad = with_serial_step(bad, 0, fee=-1)
        with pytest.raises(CorridorDefinitionError) as exc_info:
            validate_corridor(bad)
        assert len(exc_info.value.problems) >= 1
        assert "test-corridor" in str(exc_info.value)

    def test_all_problems_collected(self, fee_only_corridor):
        bad = with_serial_step(fee_only_corridor, 0, fee=-1)
        bad = with_serial_step(bad, 1, fee=-2)
        problems = check_corridor(bad)
        assert len([p for p in problems if "non-negative" in p]) == 2

    def test_duplicate_ids_rejected(self, fee_only_corridor):
        with pytest.raises(CorridorDefinitionError, match="duplicate corridor id"):
            validate_corridors([fee_only_corridor, fee_only_corridor])
