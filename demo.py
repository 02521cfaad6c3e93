#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Follow a Payment Across Borders

A step-by-step walk through correspondent banking. Each step builds on the
previous one. Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2:  The Corridors    - Registry, banks and their roles
  3-4:  Serial Payments  - One message hops bank to bank, fees and FX
  5-6:  Who Pays         - SHA, OUR, BEN and cover settlement
  7-8:  Replay           - Playback cursor and the autoplay clock
  9-10: Beyond One Run   - Cost curves and corridor validation

Run:
    python demo.py             # Interactive mode (press Enter for each step)
    python demo.py --quick     # Run all steps without pausing
    python demo.py --verbose   # Also show the package's log output
"""

from dataclasses import dataclass, replace
from decimal import Decimal
import logging
import sys

import numpy as np

from nostro import (
    ChargeBearer, CorridorDefinitionError, CorridorRegistry, Direction,
    SettlementMethod, SimulationSession,
    compare_charge_bearers, cost_curve, default_registry, effective_cost,
    format_amount, headline_estimate, load_corridors, simulate_corridor,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    corridor_id: str = "sgd-gbp"
    comparison_corridor_id: str = "usd-ngn"

    # Amounts in the corridor's source currency
    custom_amount: Decimal = Decimal("12500")

    # Cost curve (Step 9)
    curve_min: float = 100.0
    curve_max: float = 100_000.0
    curve_points: int = 8

    # Autoplay (Step 8)
    clock_tick: Decimal = Decimal("1")


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv
VERBOSE = "--verbose" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    print(f"\n--- {text} ---\n")


def print_walk(session: SimulationSession):
    """Print every step of the session's active sequence with running amounts."""
    banks = session.corridor.banks
    for derived in session.derived_steps:
        step = derived.step
        arrow = "→" if step.direction is Direction.FORWARD else "←"
        hop = f"{banks[step.from_index].name} {arrow} {banks[step.to_index].name}"
        money = format_amount(derived.amount_after, derived.running_currency)
        notes = []
        if derived.fee_applied:
            notes.append(f"fee {derived.fee_applied}")
        if derived.converted:
            notes.append(f"FX {step.fx_from}→{step.fx_to} @ {step.fx_rate}")
        print(f"  {step.id:>2}. {step.message_type:<16} {hop:<40} {money:>16}  {', '.join(notes)}")


# ============================================================================
# PHASE 1: THE CORRIDORS (Steps 1-2)
# ============================================================================

def step_01_registry() -> CorridorRegistry:
    """Load the corridor registry."""
    step_header(1, "The Corridor Registry",
        "See which payment corridors are available and what they promise.")

    registry = default_registry()
    print(f"    {len(registry)} corridors, validated at load:\n")
    for corridor in registry:
        print(f"    {corridor.id:<8} {corridor.name:<30} "
              f"rate {corridor.fx_rate:<10} cost {corridor.total_cost_pct:<8} {corridor.settlement_time}")

    print("""
    A corridor is a route from one currency to another through a chain of
    banks. Every corridor ships with two ways of settling: serial and cover.
    """)
    return registry


def step_02_banks(registry: CorridorRegistry):
    """Inspect the banks of one corridor."""
    step_header(2, "The Banks",
        "Understand the roles: originator, correspondent, intermediary, beneficiary.")

    corridor = registry.get_corridor(CONFIG.corridor_id)
    for i, bank in enumerate(corridor.banks):
        print(f"    [{i}] {bank.name:<14} {bank.bic:<12} {bank.country:<16} {bank.role.value}")

    print(f"""
    Money leaves {corridor.originator.name} in {corridor.source_currency} and lands at
    {corridor.beneficiary.name} in {corridor.target_currency}. The banks in between hold
    nostro accounts with each other; that is how value crosses the border.
    """)


# ============================================================================
# PHASE 2: SERIAL PAYMENTS (Steps 3-4)
# ============================================================================

def step_03_serial_walk(registry: CorridorRegistry) -> SimulationSession:
    """Walk the serial sequence."""
    step_header(3, "A Serial Payment",
        "Follow one pacs.008 as it hops through every bank.")

    session = SimulationSession(registry, CONFIG.corridor_id)
    print(f"    Sending {format_amount(session.amount, session.corridor.source_currency)}\n")
    print_walk(session)

    print("""
    Forward steps move money: each bank takes its fee first, in the currency
    it holds, and a converting bank then applies its rate. Backward steps are
    status messages; they never change the amount.
    """)
    return session


def step_04_custom_amount(session: SimulationSession):
    """Re-run with a different principal."""
    step_header(4, "Changing the Amount",
        "See that fees are fixed amounts, so they weigh more on small payments.")

    session.set_amount(CONFIG.custom_amount)
    summary = session.summary
    print(f"    Principal:  {format_amount(summary.principal, summary.source_currency)}")
    print(f"    Fees:       {summary.total_fees} (nominal)")
    for currency, fee in summary.fees_by_currency.items():
        print(f"                {format_amount(fee, currency)}")
    print(f"    Received:   {format_amount(summary.beneficiary_received, summary.target_currency)}")
    print(f"    Headline:   {format_amount(headline_estimate(session.corridor, session.amount), summary.target_currency)}"
          "  (principal less fees at the quoted rate)")


# ============================================================================
# PHASE 3: WHO PAYS (Steps 5-6)
# ============================================================================

def step_05_charge_bearers(registry: CorridorRegistry):
    """Compare SHA, OUR and BEN."""
    step_header(5, "Who Pays the Fees?",
        "Compare the three charge-bearer options on the same payment.")

    corridor = registry.get_corridor(CONFIG.corridor_id)
    summaries = compare_charge_bearers(corridor.serial_steps, corridor.default_amount, corridor.source_currency)
    for policy, summary in summaries.items():
        print(f"    {policy.value}: sender pays {format_amount(summary.sender_outlay, summary.source_currency):>14}"
              f"   beneficiary gets {format_amount(summary.beneficiary_received, summary.target_currency):>14}")

    print("""
    SHA shares the cost: the sender is billed its own bank's fee, and the
    beneficiary gets what is left after each hop's deduction.
    OUR puts everything on the sender, so the beneficiary gets the full amount.
    BEN puts everything on the beneficiary as one deduction at the end.
    """)


def step_06_cover(registry: CorridorRegistry):
    """Compare serial with cover settlement."""
    step_header(6, "Cover Settlement",
        "See how a direct instruction plus a separate funding leg reaches the same result.")

    corridor = registry.get_corridor(CONFIG.corridor_id)
    serial = simulate_corridor(corridor, SettlementMethod.SERIAL)
    cover = simulate_corridor(corridor, SettlementMethod.COVER)
    print(f"    Serial: {len(serial.steps)} messages, beneficiary gets "
          f"{format_amount(serial.summary.beneficiary_received, serial.summary.target_currency)}")
    print(f"    Cover:  {len(cover.steps)} messages, beneficiary gets "
          f"{format_amount(cover.summary.beneficiary_received, cover.summary.target_currency)}")

    section_header("Cover sequence")
    session = SimulationSession(registry, CONFIG.corridor_id, method=SettlementMethod.COVER)
    print_walk(session)
    session.close()


# ============================================================================
# PHASE 4: REPLAY (Steps 7-8)
# ============================================================================

def step_07_playback(session: SimulationSession):
    """Step through the sequence by hand."""
    step_header(7, "Stepping Through",
        "Move the cursor and watch banks light up as the payment travels.")

    session.reset()
    names = [b.name for b in session.corridor.banks]
    for _ in range(3):
        session.next()
        completed, active = session.bank_activity()
        print(f"    step {session.current_step.id}: active {[names[i] for i in sorted(active)]}, "
              f"done {[names[i] for i in sorted(completed)]}")
    session.prev()
    print(f"\n    After prev(): cursor {session.cursor}, control reads '{session.playback.control_label()}'")


def step_08_autoplay(session: SimulationSession):
    """Drive autoplay with a logical clock."""
    step_header(8, "Autoplay",
        "Let the clock run: one step every 2.5 seconds of logical time.")

    session.reset()
    session.toggle_play()
    elapsed = Decimal("0")
    while session.is_playing:
        moved = session.advance_clock(CONFIG.clock_tick)
        elapsed += CONFIG.clock_tick
        if moved:
            print(f"    t={elapsed:>4}s  step {session.current_step.id}: {session.current_step.step.description}")
    print(f"\n    Finished. Control now reads '{session.playback.control_label()}'.")

    section_header("Switching method mid-replay")
    session.toggle_play()
    session.advance_clock(5)
    print(f"    Replaying, cursor at {session.cursor}")
    session.select_method(SettlementMethod.COVER)
    print(f"    Switched to cover: cursor {session.cursor}, playing {session.is_playing}")
    print(f"    Clock runs 100s while stopped: {session.advance_clock(100)} steps moved")
    session.close()


# ============================================================================
# PHASE 5: BEYOND ONE RUN (Steps 9-10)
# ============================================================================

def step_09_cost_curve(registry: CorridorRegistry):
    """Effective cost across principals."""
    step_header(9, "Cost Curve",
        "Measure how much value is lost against the headline rate, across many amounts.")

    corridor = registry.get_corridor(CONFIG.comparison_corridor_id)
    amounts = np.geomspace(CONFIG.curve_min, CONFIG.curve_max, CONFIG.curve_points)
    for policy in ChargeBearer:
        costs = cost_curve(corridor.serial_steps, amounts, corridor.source_currency, corridor.fx_rate, policy)
        row = "  ".join(f"{c:7.2%}" for c in costs)
        print(f"    {policy.value}: {row}")
    print("    amounts: " + "  ".join(f"{a:>7.0f}" for a in amounts))

    result = simulate_corridor(corridor)
    cost = effective_cost(result.summary.principal, result.summary.beneficiary_received, corridor.fx_rate)
    print(f"\n    At {corridor.default_amount} {corridor.source_currency}: {cost:.4%} lost "
          f"(corridor quotes {corridor.total_cost_pct})")


def step_10_validation():
    """Show that a malformed corridor is rejected."""
    step_header(10, "Validation",
        "See that a corridor with a broken sequence never makes it into a registry.")

    corridor = load_corridors()[0]
    broken = replace(corridor, serial_steps=corridor.serial_steps[:-1])
    try:
        CorridorRegistry([broken])
    except CorridorDefinitionError as e:
        print(f"    Rejected: {e}")
        for problem in e.problems:
            print(f"      - {problem}")


# ============================================================================
# MAIN
# ============================================================================

def main():
    if VERBOSE:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("       NOSTRO: CROSS-BORDER PAYMENT TUTORIAL")
    print("=" * 70)

    registry = step_01_registry()
    wait_for_enter()
    step_02_banks(registry)
    wait_for_enter()

    session = step_03_serial_walk(registry)
    wait_for_enter()
    step_04_custom_amount(session)
    wait_for_enter()

    step_05_charge_bearers(registry)
    wait_for_enter()
    step_06_cover(registry)
    wait_for_enter()

    step_07_playback(session)
    wait_for_enter()
    step_08_autoplay(session)
    wait_for_enter()

    step_09_cost_curve(registry)
    wait_for_enter()
    step_10_validation()

    print("\n" + "=" * 70)
    print("       TUTORIAL COMPLETE!")
    print("=" * 70)
    print("""
    Next steps:
      - See nostro/corridors/*.py for the corridor data and message templates
      - Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()
