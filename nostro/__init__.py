"""
nostro - Correspondent Banking Payment Simulator

Replays a cross-border payment hop by hop through a chain of correspondent
banks, under serial or cover settlement, showing fees, FX conversion and
message status at each step.

Usage:
    from nostro import SimulationSession, ChargeBearer, SettlementMethod

    session = SimulationSession(corridor_id="sgd-gbp")
    session.select_method(SettlementMethod.COVER)
    session.set_charge_bearer(ChargeBearer.OUR)

    # Step manually
    session.next()
    print(session.current_step.amount_after, session.current_step.running_currency)

    # Or autoplay on a logical clock (one step per 2.5 time units)
    session.toggle_play()
    session.advance_clock(10)

    summary = session.summary
    print(summary.sender_outlay, summary.beneficiary_received)

Pure simulation without a session:
    from nostro import default_registry, simulate_corridor

    corridor = default_registry().get_corridor("usd-ngn")
    result = simulate_corridor(corridor, "serial", amount=1000, policy="BEN")
"""

# Core types
from .core import (
    Bank,
    Step,
    Corridor,
    DerivedStep,
    Direction,
    BankRole,
    SettlementMethod,
    ChargeBearer,
    StepStatus,
    NostroError,
    CorridorDefinitionError,
    NotFoundError,
    UnknownSelectorError,
    InvalidAmountError,
    StepOutOfRange,
    NOT_STARTED,
    AUTOPLAY_PERIOD,
    coerce_method,
    coerce_charge_bearer,
    round_amount,
    format_amount,
)

# Validation
from .validation import (
    check_corridor,
    validate_corridor,
    validate_corridors,
)

# Corridor data
from .corridors import (
    ALL_CORRIDOR_FACTORIES,
    load_corridors,
    create_sgd_gbp_corridor,
    create_usd_ngn_corridor,
    create_inr_usd_corridor,
    create_aed_php_corridor,
    create_jpy_mxn_corridor,
)

# Registry
from .registry import CorridorRegistry, default_registry

# Simulation
from .simulator import (
    FlowSummary,
    FlowResult,
    derive_steps,
    total_forward_fees,
    sender_fee,
    fees_by_currency,
    summarize,
    simulate,
    simulate_corridor,
    validate_principal,
)

# Analytics
from .analytics import (
    affine_coefficients,
    received_curve,
    cost_curve,
    effective_cost,
    compare_charge_bearers,
    headline_estimate,
)

# Playback
from .playback import Playback
from .autoplay import AutoplayTimer
from .session import SimulationSession, SessionView

__all__ = [
    # Core
    'Bank', 'Step', 'Corridor', 'DerivedStep',
    'Direction', 'BankRole', 'SettlementMethod', 'ChargeBearer', 'StepStatus',
    'NostroError', 'CorridorDefinitionError', 'NotFoundError', 'UnknownSelectorError',
    'InvalidAmountError', 'StepOutOfRange',
    'NOT_STARTED', 'AUTOPLAY_PERIOD',
    'coerce_method', 'coerce_charge_bearer', 'round_amount', 'format_amount',
    # Validation
    'check_corridor', 'validate_corridor', 'validate_corridors',
    # Corridors
    'ALL_CORRIDOR_FACTORIES', 'load_corridors',
    'create_sgd_gbp_corridor', 'create_usd_ngn_corridor', 'create_inr_usd_corridor',
    'create_aed_php_corridor', 'create_jpy_mxn_corridor',
    # Registry
    'CorridorRegistry', 'default_registry',
    # Simulation
    'FlowSummary', 'FlowResult', 'derive_steps', 'total_forward_fees', 'sender_fee', 'fees_by_currency',
    'summarize', 'simulate', 'simulate_corridor', 'validate_principal',
    # Analytics
    'affine_coefficients', 'received_curve', 'cost_curve', 'effective_cost', 'compare_charge_bearers',
    'headline_estimate',
    # Playback
    'Playback', 'AutoplayTimer', 'SimulationSession', 'SessionView',
]

__version__ = '1.0.0'
