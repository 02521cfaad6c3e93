"""
Core types and pure helpers for the correspondent banking simulator.

This module provides the foundational data structures for the simulator:
1. Enums: Direction, BankRole, SettlementMethod, ChargeBearer, StepStatus
2. Immutable reference data: Bank, Step, Corridor
3. Derived data: DerivedStep (a Step plus computed amounts)
4. Exceptions: NostroError and domain-specific error types
5. Amount helpers: rounding to currency minor units and display formatting

Everything defined here is immutable. The only mutable state in the package
lives in SimulationSession (session.py).
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN, getcontext
from enum import Enum
import re
from typing import Any, Dict, List, Optional, Tuple, Union


# ============================================================================
# DECIMAL CONTEXT CONFIGURATION
# ============================================================================
#
# Monetary arithmetic is done in Decimal with a fixed global context so that
# repeated simulations produce identical output.
#
#   - prec=50: enough headroom for chained FX conversions
#   - rounding=ROUND_HALF_EVEN: banker's rounding
#
_NOSTRO_DECIMAL_CONTEXT = getcontext()
_NOSTRO_DECIMAL_CONTEXT.prec = 50
_NOSTRO_DECIMAL_CONTEXT.rounding = ROUND_HALF_EVEN


# ============================================================================
# CONSTANTS
# ============================================================================

# Cursor value meaning "playback not started".
NOT_STARTED = -1

# Autoplay fires one next() per period (logical time units).
AUTOPLAY_PERIOD = Decimal("2.5")

# Minor units per currency. Anything not listed uses two decimal places.
CURRENCY_DECIMALS = {
    'JPY': 0,
}
DEFAULT_CURRENCY_DECIMALS = 2

# Display prefixes. Unknown currencies fall back to the ISO code.
CURRENCY_SYMBOLS = {
    'USD': '$',
    'SGD': 'S$',
    'GBP': '£',
    'INR': '₹',
    'JPY': '¥',
    'AED': 'AED ',
    'NGN': '₦',
    'PHP': '₱',
    'MXN': 'MX$',
}

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_BIC_RE = re.compile(r"^[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?$")

Number = Union[Decimal, int, float, str]


# ============================================================================
# ENUMS
# ============================================================================

class Direction(str, Enum):
    """
    Which way a message travels along the bank chain.

    FORWARD: instruction/funds move toward the beneficiary (increasing index).
    BACKWARD: status confirmations move toward the originator (decreasing index).
    """
    FORWARD = "forward"
    BACKWARD = "backward"


class BankRole(str, Enum):
    """Role a bank plays in a corridor."""
    ORIGINATOR = "originator"
    CORRESPONDENT = "correspondent"
    INTERMEDIARY = "intermediary"
    BENEFICIARY = "beneficiary"


class SettlementMethod(str, Enum):
    """
    Settlement topology.

    SERIAL: one instruction hops through every bank in turn.
    COVER: a direct instruction to the beneficiary bank plus a separate
           settlement leg (the "cover") threading through the correspondents.
    """
    SERIAL = "serial"
    COVER = "cover"


class ChargeBearer(str, Enum):
    """
    Who absorbs the inter-bank fees.

    SHA: shared - fees are deducted hop by hop as the payment travels.
    OUR: sender pays every fee on top of the principal.
    BEN: beneficiary bears every fee as a lump deduction in target currency.
    """
    SHA = "SHA"
    OUR = "OUR"
    BEN = "BEN"


class StepStatus(str, Enum):
    """Playback status of a step relative to the cursor."""
    COMPLETED = "completed"
    ACTIVE = "active"
    PENDING = "pending"


# ============================================================================
# EXCEPTIONS
# ============================================================================

class NostroError(Exception):
    """Base exception for all simulator errors."""
    pass


class CorridorDefinitionError(NostroError):
    """
    Raised when corridor reference data is malformed.

    This is a configuration defect detected at load time, never mid-playback.
    The `problems` attribute lists every defect found.
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems: List[str] = list(problems or [])
        if self.problems:
            message = f"{message}:\n  - " + "\n  - ".join(self.problems)
        super().__init__(message)


class NotFoundError(NostroError):
    """Raised when a corridor id is not in the registry."""
    pass


class UnknownSelectorError(NostroError):
    """Raised when a settlement method or charge bearer value is not recognised."""
    pass


class InvalidAmountError(NostroError):
    """Raised when a transfer amount is not a finite positive number."""
    pass


class StepOutOfRange(NostroError):
    """Raised when jumping to a step index outside the active sequence."""
    pass


# ============================================================================
# HELPERS
# ============================================================================

def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal without binary float artifacts.

    Floats go through str() so that 0.5812 becomes Decimal("0.5812").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary amount")
    return Decimal(str(value))


def _optional_decimal(value: Optional[Number]) -> Optional[Decimal]:
    return None if value is None else to_decimal(value)


def is_valid_currency(code: str) -> bool:
    """Return True for a three-letter upper-case ISO 4217 style code."""
    return bool(code) and bool(_CURRENCY_RE.match(code))


def is_valid_bic(bic: str) -> bool:
    """Return True for an 8 or 11 character BIC."""
    return bool(bic) and bool(_BIC_RE.match(bic))


def _coerce_selector(enum_type, value, label: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_type)
        raise UnknownSelectorError(f"Unknown {label} {value!r}; expected one of: {choices}") from None


def coerce_method(value: Union[SettlementMethod, str]) -> SettlementMethod:
    """Accept a SettlementMethod or its value ("serial"/"cover")."""
    return _coerce_selector(SettlementMethod, value, "settlement method")


def coerce_charge_bearer(value: Union[ChargeBearer, str]) -> ChargeBearer:
    """Accept a ChargeBearer or its value ("SHA"/"OUR"/"BEN")."""
    return _coerce_selector(ChargeBearer, value, "charge bearer")


def currency_decimals(currency: str) -> int:
    return CURRENCY_DECIMALS.get(currency, DEFAULT_CURRENCY_DECIMALS)


def round_amount(value: Decimal, currency: str) -> Decimal:
    """
    Round an amount to the currency's minor unit using banker's rounding.

    Simulation arithmetic stays unrounded; this is for display and for
    comparing against amounts quoted in message templates.
    """
    quantizer = Decimal(10) ** -currency_decimals(currency)
    return to_decimal(value).quantize(quantizer, rounding=ROUND_HALF_EVEN)


def format_amount(value: Decimal, currency: str) -> str:
    """
    Format an amount for display, e.g. format_amount(Decimal("28970"), "GBP") -> "£28,970.00".

    Negative amounts keep the sign in front of the symbol.
    """
    rounded = round_amount(value, currency)
    places = currency_decimals(currency)
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{places}f}"


# ============================================================================
# REFERENCE DATA
# ============================================================================

@dataclass(frozen=True, slots=True)
class Bank:
    """
    A bank in a corridor's chain.

    Banks are identified by their position in the corridor's bank tuple;
    steps refer to them by index.

    Attributes:
        name: Display name (e.g., "HSBC London")
        bic: SWIFT BIC (8 or 11 characters)
        country: Country name
        country_code: ISO 3166 alpha-2 code
        role: BankRole of this bank in the corridor
    """
    name: str
    bic: str
    country: str
    country_code: str
    role: BankRole

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Bank name cannot be empty")
        if not isinstance(self.role, BankRole):
            object.__setattr__(self, 'role', BankRole(self.role))

    def __repr__(self) -> str:
        return f"Bank({self.name} [{self.bic}] {self.role.value})"


@dataclass(frozen=True, slots=True)
class Step:
    """
    One message exchanged between two banks of a corridor.

    Attributes:
        id: Position in the sequence, 1-based and contiguous
        from_index: Index of the sending bank in the corridor's banks
        to_index: Index of the receiving bank
        direction: FORWARD (instruction/funds) or BACKWARD (status)
        message_type: ISO 20022 message identifier (e.g., "pacs.008.001.13")
        message_name: Human-readable message name
        description: One-line summary
        duration: Typical elapsed time, free text (e.g., "4-8 hrs")
        message_template: Pre-rendered message document, opaque to the simulator
        detail: Narrative of what happens at this step
        fee: Fee deducted on a forward step, in the currency prevailing there
        fx_rate: Conversion rate from fx_from units to fx_to units
        fx_from: Currency converted from
        fx_to: Currency converted to
        nostro_action: Display-only note on which accounts are debited/credited
    """
    id: int
    from_index: int
    to_index: int
    direction: Direction
    message_type: str
    message_name: str
    description: str
    duration: str
    message_template: str = ""
    detail: str = ""
    fee: Optional[Decimal] = None
    fx_rate: Optional[Decimal] = None
    fx_from: Optional[str] = None
    fx_to: Optional[str] = None
    nostro_action: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.direction, Direction):
            object.__setattr__(self, 'direction', Direction(self.direction))
        object.__setattr__(self, 'fee', _optional_decimal(self.fee))
        object.__setattr__(self, 'fx_rate', _optional_decimal(self.fx_rate))

    @property
    def is_forward(self) -> bool:
        return self.direction is Direction.FORWARD

    @property
    def is_fx(self) -> bool:
        """True if this step converts currency."""
        return self.fx_rate is not None

    @property
    def hop(self) -> Tuple[int, int]:
        return (self.from_index, self.to_index)

    def __repr__(self) -> str:
        arrow = "→" if self.is_forward else "←"
        return f"Step({self.id}: {self.from_index}{arrow}{self.to_index} {self.message_type})"


@dataclass(frozen=True, slots=True)
class Corridor:
    """
    A complete, self-contained payment scenario.

    Both step sequences run over the same bank chain and are independently
    valid ways of making the same payment.

    The summary figures (fx_rate, fx_spread, total_cost_pct, settlement_time)
    are authored headline values. They are kept as given and are not derived
    from, or reconciled with, the per-step fees and rates.
    """
    id: str
    name: str
    sender_country: str
    sender_flag: str
    receiver_country: str
    receiver_flag: str
    source_currency: str
    target_currency: str
    default_amount: Decimal
    fx_rate: Decimal
    fx_spread: str
    total_cost_pct: str
    settlement_time: str
    banks: Tuple[Bank, ...]
    serial_steps: Tuple[Step, ...]
    cover_steps: Tuple[Step, ...]
    uetr: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'default_amount', to_decimal(self.default_amount))
        object.__setattr__(self, 'fx_rate', to_decimal(self.fx_rate))
        object.__setattr__(self, 'banks', tuple(self.banks))
        object.__setattr__(self, 'serial_steps', tuple(self.serial_steps))
        object.__setattr__(self, 'cover_steps', tuple(self.cover_steps))

    def steps_for(self, method: SettlementMethod) -> Tuple[Step, ...]:
        """Return the step sequence for a settlement method."""
        if method is SettlementMethod.SERIAL:
            return self.serial_steps
        if method is SettlementMethod.COVER:
            return self.cover_steps
        raise UnknownSelectorError(f"Unknown settlement method: {method!r}")

    def bank(self, index: int) -> Bank:
        return self.banks[index]

    def index_of_role(self, role: BankRole) -> int:
        """Index of the first bank with the given role, or -1."""
        for i, bank in enumerate(self.banks):
            if bank.role is role:
                return i
        return -1

    @property
    def originator_index(self) -> int:
        return self.index_of_role(BankRole.ORIGINATOR)

    @property
    def beneficiary_index(self) -> int:
        return self.index_of_role(BankRole.BENEFICIARY)

    @property
    def originator(self) -> Bank:
        return self.banks[self.originator_index]

    @property
    def beneficiary(self) -> Bank:
        return self.banks[self.beneficiary_index]

    def __repr__(self) -> str:
        return (
            f"Corridor({self.id}: {self.source_currency}→{self.target_currency}, "
            f"{len(self.banks)} banks, serial={len(self.serial_steps)}, cover={len(self.cover_steps)})"
        )


# ============================================================================
# DERIVED DATA
# ============================================================================

@dataclass(frozen=True, slots=True)
class DerivedStep:
    """
    A Step enriched with the amounts computed by the simulator.

    The source step is held by reference and never modified.

    Attributes:
        step: The authored Step
        amount_before: Running amount when the step starts
        amount_after: Running amount once fee and FX at this step are applied
        running_currency: Currency of amount_after
    """
    step: Step
    amount_before: Decimal
    amount_after: Decimal
    running_currency: str

    @property
    def id(self) -> int:
        return self.step.id

    @property
    def direction(self) -> Direction:
        return self.step.direction

    @property
    def fee_applied(self) -> Decimal:
        """Fee charged at this step (zero for backward steps)."""
        if self.step.is_forward and self.step.fee is not None:
            return self.step.fee
        return Decimal("0")

    @property
    def converted(self) -> bool:
        return self.step.is_forward and self.step.is_fx

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-friendly view (amounts as strings)."""
        step = self.step
        return {
            'id': step.id,
            'from': step.from_index,
            'to': step.to_index,
            'direction': step.direction.value,
            'message_type': step.message_type,
            'fee': None if step.fee is None else str(step.fee),
            'fx_rate': None if step.fx_rate is None else str(step.fx_rate),
            'amount_before': str(self.amount_before),
            'amount_after': str(self.amount_after),
            'running_currency': self.running_currency,
        }

    def __repr__(self) -> str:
        return (
            f"DerivedStep({self.step.id}: {self.amount_before} → "
            f"{self.amount_after} {self.running_currency})"
        )
