"""
analytics.py - Vectorised corridor analytics

Figures computed across many principals at once, plus cost measures that
compare a simulated receipt against a reference rate.

Provides:
- received_curve(): beneficiary receipt for an array of principals
- cost_curve(): effective cost fraction for an array of principals
- effective_cost(): effective cost fraction for one simulation (Decimal)
- compare_charge_bearers(): FlowSummary per charge-bearer policy
- headline_estimate(): receipt estimated from a corridor's headline rate

The received amount is affine in the principal under every policy: fees are
fixed amounts and FX rates are multiplicative. Two exact Decimal simulations
therefore pin down slope and intercept, and the curve is evaluated in float
with numpy.

Computed costs are separate from a corridor's authored total_cost_pct and are
never written back into it.
"""

import numpy as np
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Dict, Optional, Sequence, Tuple, Union

from .core import (
    ChargeBearer, Corridor, InvalidAmountError, Number, SettlementMethod, Step,
    coerce_method, to_decimal,
)
from .simulator import FlowSummary, simulate, total_forward_fees, validate_principal


# Type alias for scalar or array inputs
Numeric = Union[float, np.ndarray]

COST_PRECISION = Decimal("0.00000001")


def _validate_amounts(amounts: Numeric) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(amounts, dtype=float))
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise InvalidAmountError("amounts must be finite and positive")
    return arr


def affine_coefficients(
    steps: Sequence[Step],
    source_currency: str,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> Tuple[Decimal, Decimal]:
    """
    Exact (slope, intercept) of received = slope * principal + intercept.

    The slope is the product of the FX rates along the chain.
    """
    r1 = simulate(steps, 1, source_currency, policy).summary.beneficiary_received
    r2 = simulate(steps, 2, source_currency, policy).summary.beneficiary_received
    slope = r2 - r1
    return slope, r1 - slope


def received_curve(
    steps: Sequence[Step],
    amounts: Numeric,
    source_currency: str,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> np.ndarray:
    """
    Beneficiary receipt for each principal in `amounts`.

    Raises:
        InvalidAmountError: if any amount is not finite and positive
    """
    arr = _validate_amounts(amounts)
    slope, intercept = affine_coefficients(steps, source_currency, policy)
    return float(slope) * arr + float(intercept)


def cost_curve(
    steps: Sequence[Step],
    amounts: Numeric,
    source_currency: str,
    reference_rate: Number,
    policy: ChargeBearer = ChargeBearer.SHA,
) -> np.ndarray:
    """
    Effective cost fraction for each principal: 1 - received / (amount * reference_rate).

    Fixed fees weigh more on small transfers, so the curve falls as the
    principal grows.
    """
    rate = float(_validate_rate(reference_rate))
    arr = _validate_amounts(amounts)
    received = received_curve(steps, arr, source_currency, policy)
    return 1.0 - received / (arr * rate)


def _validate_rate(reference_rate: Number) -> Decimal:
    rate = to_decimal(reference_rate)
    if not rate.is_finite() or rate <= 0:
        raise ValueError(f"reference rate must be positive and finite, got {reference_rate!r}")
    return rate


def effective_cost(principal: Number, received: Number, reference_rate: Number) -> Decimal:
    """
    Fraction of value lost against a reference rate.

    effective_cost(1000, 1450000, 1649.20) is the share of 1000 USD at the
    mid-market rate that did not reach the beneficiary.
    """
    principal = validate_principal(principal)
    rate = _validate_rate(reference_rate)
    cost = Decimal("1") - to_decimal(received) / (principal * rate)
    return cost.quantize(COST_PRECISION, rounding=ROUND_HALF_EVEN)


def compare_charge_bearers(
    steps: Sequence[Step],
    principal: Number,
    source_currency: str,
) -> Dict[ChargeBearer, FlowSummary]:
    """FlowSummary for SHA, OUR and BEN over the same walk."""
    return {
        policy: simulate(steps, principal, source_currency, policy).summary
        for policy in ChargeBearer
    }


def headline_estimate(
    corridor: Corridor,
    amount: Optional[Number] = None,
    method: SettlementMethod = SettlementMethod.SERIAL,
) -> Decimal:
    """
    Quick receipt estimate from the corridor's headline rate.

    (amount - total fees) * corridor.fx_rate, with fees summed nominally as if
    all were charged in source currency. Indicative only.
    """
    principal = validate_principal(corridor.default_amount if amount is None else amount)
    fees = total_forward_fees(corridor.steps_for(coerce_method(method)))
    return (principal - fees) * corridor.fx_rate
