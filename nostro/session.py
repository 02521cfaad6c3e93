"""
session.py - Simulation Session

SimulationSession holds the only mutable state in the package: which corridor
and settlement method are selected, the charge-bearer policy, the transfer
amount, and the playback cursor. Everything else is derived from that state
on read.

Selection rules:
- select_corridor() and select_method() reset playback to NOT_STARTED and
  replace the autoplay timer, so no timer armed for the old sequence can
  move the cursor of the new one.
- Selecting a different corridor also resets the amount to that corridor's
  default amount.
- set_charge_bearer() and set_amount() change the figures only; the cursor
  stays where it is.
- A call that raises leaves the session exactly as it was.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from .autoplay import AutoplayTimer
from .core import (
    AUTOPLAY_PERIOD, NOT_STARTED, ChargeBearer, Corridor, DerivedStep, Number,
    SettlementMethod, Step, StepStatus,
    coerce_charge_bearer, coerce_method,
)
from .playback import Playback
from .registry import CorridorRegistry, default_registry
from .simulator import FlowResult, FlowSummary, simulate, validate_principal


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionView:
    """
    Immutable snapshot of a session, for consumers that render state.

    Attributes:
        corridor_id: Selected corridor
        method: Selected settlement method
        charge_bearer: Selected charge-bearer policy
        amount: Principal in source currency
        cursor: Playback cursor (NOT_STARTED is -1)
        is_playing: Autoplay flag
        is_complete: Cursor has reached the last step
        statuses: StepStatus per step of the active sequence
        current_step: DerivedStep at the cursor, or None
        summary: Policy aggregates for the current selection
    """
    corridor_id: str
    method: SettlementMethod
    charge_bearer: ChargeBearer
    amount: Decimal
    cursor: int
    is_playing: bool
    is_complete: bool
    statuses: Tuple[StepStatus, ...]
    current_step: Optional[DerivedStep]
    summary: FlowSummary


class SimulationSession:
    """
    Single-user replay of one corridor at a time.

    Example:
        session = SimulationSession(corridor_id="sgd-gbp")
        session.toggle_play()
        session.advance_clock(Decimal("5"))
        session.current_step.amount_after
    """

    def __init__(
        self,
        registry: Optional[CorridorRegistry] = None,
        corridor_id: Optional[str] = None,
        method: Union[SettlementMethod, str] = SettlementMethod.SERIAL,
        charge_bearer: Union[ChargeBearer, str] = ChargeBearer.SHA,
        amount: Optional[Number] = None,
        autoplay_period: Number = AUTOPLAY_PERIOD,
    ):
        """
        Create a session.

        Args:
            registry: Corridor source (defaults to the bundled corridors)
            corridor_id: Initial corridor (defaults to the registry's first)
            method: Initial settlement method
            charge_bearer: Initial charge-bearer policy
            amount: Initial principal (defaults to the corridor's default amount)
            autoplay_period: Logical time between autoplay advances
        """
        self.registry = default_registry() if registry is None else registry
        corridor = self.registry.get_corridor(corridor_id) if corridor_id is not None else self.registry.first()

        self._corridor: Corridor = corridor
        self._method = coerce_method(method)
        self._charge_bearer = coerce_charge_bearer(charge_bearer)
        self._amount = corridor.default_amount if amount is None else validate_principal(amount)
        self._autoplay_period = autoplay_period

        self.playback = Playback(len(self.steps))
        self._timer = AutoplayTimer(self.playback, self._autoplay_period)
        self._result_key: Optional[tuple] = None
        self._result: Optional[FlowResult] = None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_corridor(self, corridor_id: str) -> None:
        """
        Select a corridor by id and reset playback.

        Raises:
            NotFoundError: if the id is unknown (session unchanged)
        """
        corridor = self.registry.get_corridor(corridor_id)
        changed = corridor.id != self._corridor.id
        self._corridor = corridor
        if changed:
            self._amount = corridor.default_amount
        logger.info("Selected corridor %s (%s)", corridor.id, self._method.value)
        self._rearm()

    def select_method(self, method: Union[SettlementMethod, str]) -> None:
        """
        Select serial or cover settlement and reset playback.

        Raises:
            UnknownSelectorError: for anything but "serial"/"cover" (session unchanged)
        """
        self._method = coerce_method(method)
        logger.info("Selected %s settlement for %s", self._method.value, self._corridor.id)
        self._rearm()

    def set_charge_bearer(self, policy: Union[ChargeBearer, str]) -> None:
        """
        Raises:
            UnknownSelectorError: for anything but SHA/OUR/BEN (session unchanged)
        """
        self._charge_bearer = coerce_charge_bearer(policy)

    def set_amount(self, amount: Number) -> None:
        """
        Raises:
            InvalidAmountError: if the amount is not finite and positive (session unchanged)
        """
        self._amount = validate_principal(amount)

    def _rearm(self) -> None:
        self._timer.cancel()
        self.playback.configure(len(self.steps))
        self._timer = AutoplayTimer(self.playback, self._autoplay_period)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def next(self) -> None:
        self.playback.next()

    def prev(self) -> None:
        self.playback.prev()

    def reset(self) -> None:
        self.playback.reset()

    def toggle_play(self) -> None:
        self.playback.toggle_play()

    def jump_to(self, index: int) -> None:
        """
        Raises:
            StepOutOfRange: if index is outside the active sequence (session unchanged)
        """
        self.playback.jump_to(index)

    def advance_clock(self, elapsed: Number) -> int:
        """Feed logical time to the autoplay timer. Returns steps advanced."""
        return self._timer.advance(elapsed)

    def close(self) -> None:
        """Cancel the autoplay timer and pause. A later selection arms a fresh timer."""
        self._timer.cancel()
        self.playback.is_playing = False

    @property
    def timer(self) -> AutoplayTimer:
        return self._timer

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    @property
    def corridor(self) -> Corridor:
        return self._corridor

    @property
    def method(self) -> SettlementMethod:
        return self._method

    @property
    def charge_bearer(self) -> ChargeBearer:
        return self._charge_bearer

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def cursor(self) -> int:
        return self.playback.cursor

    @property
    def is_playing(self) -> bool:
        return self.playback.is_playing

    @property
    def is_complete(self) -> bool:
        return self.playback.is_complete

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._corridor.steps_for(self._method)

    @property
    def result(self) -> FlowResult:
        """Simulation for the current selection, recomputed only when an input changes."""
        key = (self._corridor.id, self._method, self._amount, self._charge_bearer)
        if key != self._result_key:
            self._result = simulate(self.steps, self._amount, self._corridor.source_currency, self._charge_bearer)
            self._result_key = key
        return self._result

    @property
    def derived_steps(self) -> Tuple[DerivedStep, ...]:
        return self.result.steps

    @property
    def summary(self) -> FlowSummary:
        return self.result.summary

    @property
    def current_step(self) -> Optional[DerivedStep]:
        if not self.playback.started:
            return None
        return self.derived_steps[self.playback.cursor]

    def bank_activity(self) -> Tuple[FrozenSet[int], FrozenSet[int]]:
        """
        Banks touched so far, as (completed, active) index sets.

        A bank is completed once it has sent or received a completed step, and
        active if it is an endpoint of the current step. A bank in both sets
        is reported as active only.
        """
        steps = self.steps
        active = set()
        if self.playback.started:
            active.update(steps[self.playback.cursor].hop)
        completed = set()
        for i in self.playback.completed():
            completed.update(steps[i].hop)
        return frozenset(completed - active), frozenset(active)

    def snapshot(self) -> SessionView:
        return SessionView(
            corridor_id=self._corridor.id,
            method=self._method,
            charge_bearer=self._charge_bearer,
            amount=self._amount,
            cursor=self.playback.cursor,
            is_playing=self.playback.is_playing,
            is_complete=self.playback.is_complete,
            statuses=tuple(self.playback.status_of(i) for i in range(self.playback.length)),
            current_step=self.current_step,
            summary=self.summary,
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe dump of the mutable state (amount as a string)."""
        return {
            'corridor_id': self._corridor.id,
            'method': self._method.value,
            'charge_bearer': self._charge_bearer.value,
            'amount': str(self._amount),
            'cursor': self.playback.cursor,
            'is_playing': self.playback.is_playing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], registry: Optional[CorridorRegistry] = None) -> SimulationSession:
        """
        Rebuild a session from to_dict() output.

        Raises:
            NotFoundError, UnknownSelectorError, InvalidAmountError: for bad fields
            StepOutOfRange: if the cursor does not fit the selected sequence
        """
        session = cls(
            registry=registry,
            corridor_id=data['corridor_id'],
            method=data.get('method', SettlementMethod.SERIAL),
            charge_bearer=data.get('charge_bearer', ChargeBearer.SHA),
            amount=data.get('amount'),
        )
        cursor = data.get('cursor', NOT_STARTED)
        if cursor != NOT_STARTED:
            session.playback.jump_to(cursor)
        session.playback.is_playing = (
            bool(data.get('is_playing', False))
            and session.playback.started
            and not session.playback.is_complete
        )
        return session

    def __repr__(self) -> str:
        return (
            f"SimulationSession({self._corridor.id}/{self._method.value}, "
            f"{self._amount} {self._corridor.source_currency}, {self._charge_bearer.value}, {self.playback!r})"
        )
