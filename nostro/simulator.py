"""
simulator.py - Monetary Flow Simulator

Pure functions that walk a corridor's step sequence and compute how the
principal evolves hop by hop, then apply a charge-bearer policy on top.

Architecture:
- derive_steps(): per-step running amounts (fees deducted, FX applied)
- total_forward_fees() / sender_fee() / fees_by_currency(): fee aggregates
- summarize(): sender outlay and beneficiary receipt under SHA/OUR/BEN
- simulate() / simulate_corridor(): convenience wrappers returning FlowResult

The per-step view is always the SHA walk. Charge-bearer policies only change
the aggregates in FlowSummary, never the derived steps.

Arithmetic is unrounded Decimal throughout; rounding to minor units happens
only for display (see core.round_amount).
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from .core import (
    ChargeBearer, Corridor, DerivedStep, InvalidAmountError, Number,
    SettlementMethod, Step,
    coerce_charge_bearer, coerce_method, to_decimal,
)


logger = logging.getLogger(__name__)


# ============================================================================
# RESULT TYPES
# ============================================================================

@dataclass(frozen=True, slots=True)
class FlowSummary:
    """
    Aggregates for one simulation under a charge-bearer policy.

    Attributes:
        policy: ChargeBearer applied
        principal: Amount the sender instructed, in source currency
        source_currency: Currency of principal and sender_outlay
        target_currency: Currency the chain ends in (beneficiary_received)
        total_fees: Nominal sum of forward-step fees, as authored
        fees_by_currency: The same fees grouped by the currency charged in
        sender_outlay: What leaves the sender's account (SHA adds the first leg's fee)
        beneficiary_received: What lands in the beneficiary's account
    """
    policy: ChargeBearer
    principal: Decimal
    source_currency: str
    target_currency: str
    total_fees: Decimal
    fees_by_currency: Dict[str, Decimal]
    sender_outlay: Decimal
    beneficiary_received: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'policy': self.policy.value,
            'principal': str(self.principal),
            'source_currency': self.source_currency,
            'target_currency': self.target_currency,
            'total_fees': str(self.total_fees),
            'fees_by_currency': {k: str(v) for k, v in self.fees_by_currency.items()},
            'sender_outlay': str(self.sender_outlay),
            'beneficiary_received': str(self.beneficiary_received),
        }


@dataclass(frozen=True, slots=True)
class FlowResult:
    """Derived steps plus the policy summary."""
    steps: Tuple[DerivedStep, ...]
    summary: FlowSummary

    @property
    def final_amount(self) -> Decimal:
        """Running amount after the last step of the per-step (SHA) walk."""
        return self.steps[-1].amount_after if self.steps else self.summary.principal


# ============================================================================
# PURE CALCULATIONS
# ============================================================================

def validate_principal(principal: Number) -> Decimal:
    """
    Convert and check a transfer amount.

    Raises:
        InvalidAmountError: if the amount is not a finite number greater than zero
    """
    try:
        value = to_decimal(principal)
    except (TypeError, ValueError, InvalidOperation):
        raise InvalidAmountError(f"Amount must be a number, got {principal!r}") from None
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError(f"Amount must be finite and positive, got {principal!r}")
    return value


def derive_steps(
    steps: Sequence[Step],
    principal: Number,
    source_currency: str,
    apply_fees: bool = True,
) -> Tuple[DerivedStep, ...]:
    """
    Walk the sequence and compute running amounts.

    On each forward step the fee (if any) is deducted first, in the currency
    prevailing at that step, and then the FX rate (if any) converts the
    remainder into fx_to. Backward steps carry no money.

    Args:
        steps: Steps of one sequence, walked in ascending id order
        principal: Starting amount in source_currency
        source_currency: Currency of the principal
        apply_fees: False computes the fee-free walk (FX only)

    Returns:
        One DerivedStep per input step, in ascending id order

    Raises:
        InvalidAmountError: if principal is not finite and positive
    """
    current = validate_principal(principal)
    currency = source_currency
    derived = []

    for step in sorted(steps, key=lambda s: s.id):
        before = current
        if step.is_forward:
            if apply_fees and step.fee is not None:
                current = current - step.fee
            if step.fx_rate is not None:
                current = current * step.fx_rate
                currency = step.fx_to
        derived.append(DerivedStep(
            step=step,
            amount_before=before,
            amount_after=current,
            running_currency=currency,
        ))

    return tuple(derived)


def total_forward_fees(steps: Sequence[Step]) -> Decimal:
    """
    Sum of fees over forward steps.

    This is a nominal sum of the authored numbers: fees charged in different
    currencies are added as-is. Use fees_by_currency() to see them apart.
    """
    return sum((s.fee for s in steps if s.is_forward and s.fee is not None), Decimal("0"))


def sender_fee(steps: Sequence[Step]) -> Decimal:
    """
    Fee the sender pays on top of the principal under SHA.

    This is the charge on the first forward leg that carries one, i.e. the
    sending bank's own fee. In a cover sequence the direct pacs.008 is fee-free,
    so the charge comes from the first funding leg.
    """
    for step in sorted(steps, key=lambda s: s.id):
        if step.is_forward and step.fee is not None and step.fee > 0:
            return step.fee
    return Decimal("0")


def fees_by_currency(derived: Sequence[DerivedStep]) -> Dict[str, Decimal]:
    """
    Forward-step fees grouped by the currency they were deducted in.

    The fee on an FX step is charged before conversion, so it is in fx_from.
    """
    totals: Dict[str, Decimal] = {}
    for d in derived:
        if not d.step.is_forward or d.step.fee is None:
            continue
        charged_in = d.step.fx_from if d.step.is_fx else d.running_currency
        totals[charged_in] = totals.get(charged_in, Decimal("0")) + d.fee_applied
    return totals


def summarize(
    steps: Sequence[Step],
    derived: Sequence[DerivedStep],
    principal: Number,
    source_currency: str,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> FlowSummary:
    """
    Apply a charge-bearer policy to a derived walk.

    - SHA: sender pays the principal plus the first leg's fee (sender_fee);
      beneficiary gets the per-step result.
    - OUR: sender pays principal + all fees; beneficiary gets the fee-free result.
    - BEN: sender pays the principal; beneficiary gets the fee-free result less
      all fees as one deduction in the target currency.
    """
    policy = coerce_charge_bearer(policy)
    principal = validate_principal(principal)
    total_fees = total_forward_fees(steps)
    target_currency = derived[-1].running_currency if derived else source_currency

    if policy is ChargeBearer.SHA:
        outlay = principal + sender_fee(steps)
        received = derived[-1].amount_after if derived else principal
    else:
        fee_free = derive_steps(steps, principal, source_currency, apply_fees=False)
        fee_free_final = fee_free[-1].amount_after if fee_free else principal
        if policy is ChargeBearer.OUR:
            outlay = principal + total_fees
            received = fee_free_final
        else:
            outlay = principal
            received = fee_free_final - total_fees

    return FlowSummary(
        policy=policy,
        principal=principal,
        source_currency=source_currency,
        target_currency=target_currency,
        total_fees=total_fees,
        fees_by_currency=fees_by_currency(derived),
        sender_outlay=outlay,
        beneficiary_received=received,
    )


# ============================================================================
# CONVENIENCE WRAPPERS
# ============================================================================

def simulate(
    steps: Sequence[Step],
    principal: Number,
    source_currency: str,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> FlowResult:
    """Derive steps and summarize them under a policy."""
    derived = derive_steps(steps, principal, source_currency)
    summary = summarize(steps, derived, principal, source_currency, policy)
    return FlowResult(steps=derived, summary=summary)


def simulate_corridor(
    corridor: Corridor,
    method: SettlementMethod = SettlementMethod.SERIAL,
    amount: Optional[Number] = None,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> FlowResult:
    """
    Simulate one of a corridor's sequences.

    Args:
        corridor: Corridor to simulate
        method: SERIAL or COVER (enum or its string value)
        amount: Principal in the corridor's source currency; defaults to
            corridor.default_amount
        policy: Charge-bearer policy (enum or its string value)
    """
    method = coerce_method(method)
    principal = corridor.default_amount if amount is None else amount
    result = simulate(corridor.steps_for(method), principal, corridor.source_currency, policy)
    logger.debug(
        "Simulated %s/%s %s %s: received %s %s",
        corridor.id, method.value, principal, corridor.source_currency,
        result.summary.beneficiary_received, result.summary.target_currency,
    )
    return result
