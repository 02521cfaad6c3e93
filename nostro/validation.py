"""
validation.py - Load-time validation of corridor reference data

Malformed corridor data is a configuration defect. It is detected here, once,
before any corridor is made available for simulation, and never surfaces
mid-playback.

Checks performed per corridor:
1. Banks: BIC format, role cardinality, originator first, beneficiary last
2. Sequences: contiguous ids, valid indices, direction vs. index order,
   fee/FX only on forward steps, FX fields complete and currency-consistent
3. Topology: serial and cover shapes, closing backward step to index 0

Validation functions collect every problem they find rather than stopping at
the first, so one run reports the whole defect list.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Iterable, List, Sequence

from .core import (
    Bank, BankRole, Corridor, CorridorDefinitionError, Direction,
    SettlementMethod, Step,
    is_valid_bic, is_valid_currency,
)


def check_banks(corridor_id: str, banks: Sequence[Bank]) -> List[str]:
    """Return problems with a corridor's bank list."""
    problems: List[str] = []
    if len(banks) < 2:
        problems.append(f"{corridor_id}: needs at least 2 banks, got {len(banks)}")
        return problems

    for i, bank in enumerate(banks):
        if not is_valid_bic(bank.bic):
            problems.append(f"{corridor_id}: bank {i} ({bank.name}) has malformed BIC {bank.bic!r}")
        if not bank.country_code or len(bank.country_code) != 2:
            problems.append(f"{corridor_id}: bank {i} ({bank.name}) has malformed country code {bank.country_code!r}")

    originators = [i for i, b in enumerate(banks) if b.role is BankRole.ORIGINATOR]
    beneficiaries = [i for i, b in enumerate(banks) if b.role is BankRole.BENEFICIARY]
    if len(originators) != 1:
        problems.append(f"{corridor_id}: expected exactly one originator, found {len(originators)}")
    elif originators[0] != 0:
        problems.append(f"{corridor_id}: originator must be bank 0, found at {originators[0]}")
    if len(beneficiaries) != 1:
        problems.append(f"{corridor_id}: expected exactly one beneficiary, found {len(beneficiaries)}")
    elif beneficiaries[0] != len(banks) - 1:
        problems.append(
            f"{corridor_id}: beneficiary must be the last bank ({len(banks) - 1}), found at {beneficiaries[0]}"
        )
    return problems


def _check_step_fields(label: str, step: Step, bank_count: int) -> List[str]:
    problems: List[str] = []
    for name, index in (("from", step.from_index), ("to", step.to_index)):
        if not 0 <= index < bank_count:
            problems.append(f"{label}: {name} index {index} out of range 0..{bank_count - 1}")
    if step.from_index == step.to_index:
        problems.append(f"{label}: from and to are the same bank ({step.from_index})")
    elif step.direction is Direction.FORWARD and step.from_index > step.to_index:
        problems.append(f"{label}: forward step must move to a higher bank index")
    elif step.direction is Direction.BACKWARD and step.from_index < step.to_index:
        problems.append(f"{label}: backward step must move to a lower bank index")

    if step.fee is not None:
        if step.direction is Direction.BACKWARD:
            problems.append(f"{label}: backward step carries a fee")
        if not step.fee.is_finite() or step.fee < 0:
            problems.append(f"{label}: fee must be a finite non-negative amount, got {step.fee}")

    fx_fields = (step.fx_rate, step.fx_from, step.fx_to)
    if any(f is not None for f in fx_fields):
        if step.direction is Direction.BACKWARD:
            problems.append(f"{label}: backward step carries an FX conversion")
        if step.fx_rate is None or not step.fx_rate.is_finite() or step.fx_rate <= 0:
            problems.append(f"{label}: fx_rate must be a finite positive number, got {step.fx_rate}")
        if not step.fx_from or not step.fx_to:
            problems.append(f"{label}: FX step needs both fx_from and fx_to")
        elif step.fx_from == step.fx_to:
            problems.append(f"{label}: FX step converts {step.fx_from} into itself")
        else:
            for code in (step.fx_from, step.fx_to):
                if not is_valid_currency(code):
                    problems.append(f"{label}: malformed currency code {code!r}")
    return problems


def _check_topology(label: str, method: SettlementMethod, steps: Sequence[Step], bank_count: int) -> List[str]:
    problems: List[str] = []
    forward = [s for s in steps if s.direction is Direction.FORWARD]
    beneficiary = bank_count - 1
    chain = [(i, i + 1) for i in range(bank_count - 1)]

    if not forward:
        return [f"{label}: has no forward steps"]
    if forward[0].from_index != 0:
        problems.append(f"{label}: first forward step must start at the originator (0), starts at {forward[0].from_index}")

    if method is SettlementMethod.SERIAL:
        hops = [s.hop for s in forward]
        if hops != chain:
            problems.append(f"{label}: serial forward hops must be {chain}, got {hops}")
    else:
        direct = [s for s in forward if s.hop == (0, beneficiary)]
        if len(direct) != 1:
            problems.append(f"{label}: cover needs exactly one direct originator→beneficiary step, found {len(direct)}")
        if bank_count > 2:
            cover_leg = [s.hop for s in forward if s.hop != (0, beneficiary)]
            if cover_leg != chain:
                problems.append(f"{label}: cover settlement leg must be {chain}, got {cover_leg}")

    last = steps[-1]
    if last.direction is not Direction.BACKWARD or last.to_index != 0:
        problems.append(f"{label}: must end with a backward step to the originator (0)")
    return problems


def check_sequence(corridor: Corridor, method: SettlementMethod) -> List[str]:
    """
    Return problems with one of a corridor's step sequences.

    Also walks the forward steps in order to check that each FX step converts
    from the currency prevailing at that point, and that the chain ends in
    the corridor's target currency.
    """
    label = f"{corridor.id}/{method.value}"
    steps = corridor.steps_for(method)
    if not steps:
        return [f"{label}: sequence is empty"]

    problems: List[str] = []
    ids = [s.id for s in steps]
    if ids != list(range(1, len(steps) + 1)):
        problems.append(f"{label}: step ids must be 1..{len(steps)} in order, got {ids}")

    bank_count = len(corridor.banks)
    for step in steps:
        problems.extend(_check_step_fields(f"{label} step {step.id}", step, bank_count))
    if problems:
        return problems

    currency = corridor.source_currency
    for step in steps:
        if step.direction is Direction.FORWARD and step.fx_rate is not None:
            if step.fx_from != currency:
                problems.append(
                    f"{label} step {step.id}: converts from {step.fx_from} but running currency is {currency}"
                )
            currency = step.fx_to
    if currency != corridor.target_currency:
        problems.append(f"{label}: sequence ends in {currency}, expected {corridor.target_currency}")

    problems.extend(_check_topology(label, method, steps, bank_count))
    return problems


def check_corridor(corridor: Corridor) -> List[str]:
    """Return every problem found in a corridor. Empty list means valid."""
    problems: List[str] = []
    if not corridor.id or not corridor.id.strip():
        problems.append("corridor id cannot be empty")
    for code in (corridor.source_currency, corridor.target_currency):
        if not is_valid_currency(code):
            problems.append(f"{corridor.id}: malformed currency code {code!r}")
    if not corridor.default_amount.is_finite() or corridor.default_amount <= Decimal("0"):
        problems.append(f"{corridor.id}: default amount must be positive, got {corridor.default_amount}")
    if not corridor.fx_rate.is_finite() or corridor.fx_rate <= Decimal("0"):
        problems.append(f"{corridor.id}: headline fx_rate must be positive, got {corridor.fx_rate}")

    bank_problems = check_banks(corridor.id, corridor.banks)
    problems.extend(bank_problems)
    if bank_problems:
        return problems

    for method in SettlementMethod:
        problems.extend(check_sequence(corridor, method))

    if corridor.serial_steps and len(corridor.cover_steps) <= len(corridor.serial_steps):
        problems.append(
            f"{corridor.id}: cover sequence ({len(corridor.cover_steps)} steps) must be longer "
            f"than serial ({len(corridor.serial_steps)} steps)"
        )
    return problems


def validate_corridor(corridor: Corridor) -> None:
    """
    Validate one corridor.

    Raises:
        CorridorDefinitionError: listing every problem found
    """
    problems = check_corridor(corridor)
    if problems:
        raise CorridorDefinitionError(f"Corridor {corridor.id!r} is malformed", problems)


def validate_corridors(corridors: Iterable[Corridor]) -> None:
    """
    Validate a whole corridor set, including id uniqueness.

    Raises:
        CorridorDefinitionError: listing every problem across all corridors
    """
    problems: List[str] = []
    seen = set()
    for corridor in corridors:
        if corridor.id in seen:
            problems.append(f"duplicate corridor id {corridor.id!r}")
        seen.add(corridor.id)
        problems.extend(check_corridor(corridor))
    if problems:
        raise CorridorDefinitionError("Corridor data is malformed", problems)
