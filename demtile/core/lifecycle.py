"""Lifecycle state machine for a single elevation tile.

Uses python-statemachine so illegal orderings (configuring twice, writing a
finalized tile) are refused by the transition table rather than by ad-hoc flags.

States:
    EMPTY: Constructed, no geometry yet
    GEOMETRY_CONFIGURED: Geometry set, no sample written
    POPULATING: At least one sample written
    FINALIZED: Loader reported the update completed, tile is read-only

Transitions:
    EMPTY -> GEOMETRY_CONFIGURED: configure_geometry
    GEOMETRY_CONFIGURED -> POPULATING: store_elevation
    POPULATING -> POPULATING: store_elevation
    GEOMETRY_CONFIGURED/POPULATING -> FINALIZED: complete_update
    FINALIZED -> FINALIZED: complete_update (idempotent)
"""

import logging

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from demtile.core.errors import TileLifecycleError

logger = logging.getLogger(__name__)


class TileLifecycle(StateMachine):
    """Tracks which tile operations are legal.

    Reads (elevation lookup, coverage test, bounds query) are not events:
    they are legal in every configured state and never change the state.
    """

    empty = State("Empty", initial=True)
    geometry_configured = State("GeometryConfigured")
    populating = State("Populating")
    finalized = State("Finalized")

    configure_geometry = empty.to(geometry_configured)
    store_elevation = geometry_configured.to(populating) | populating.to(populating)
    complete_update = (
        geometry_configured.to(finalized) | populating.to(finalized) | finalized.to(finalized)
    )

    @property
    def is_configured(self) -> bool:
        """True once geometry has been set."""
        return not self.empty.is_active

    @property
    def is_populating(self) -> bool:
        return self.populating.is_active

    @property
    def is_finalized(self) -> bool:
        return self.finalized.is_active

    def get_state_name(self) -> str:
        """Get current state name for diagnostics."""
        return self.current_state.name

    def advance(self, event: str) -> None:
        """Fire a lifecycle event.

        Raises:
            TileLifecycleError: If the event is not allowed from the current state.
        """
        try:
            self.send(event)
        except TransitionNotAllowed as e:
            raise TileLifecycleError(event=event, state=self.get_state_name()) from e

    def after_transition(self, event: str, source: State, target: State) -> None:
        if source.id != target.id:
            logger.debug(f"[TILE] {source.name} --({event})--> {target.name}")
