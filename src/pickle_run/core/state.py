"""
Game state machine.

States:
    START: Instructions screen, waiting for the first tap
    PLAYING: A run is in progress
    WIN: All pickles collected; celebration plays until the window closes

WIN has no outgoing transition. Once reached, taps and collisions
no longer change the state.
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states."""
    START = auto()
    PLAYING = auto()
    WIN = auto()


StateListener = Callable[[GameState, GameState], None]


class StateMachine:
    """
    Holds the single active game state and validates transitions.

    Listeners are notified after every successful transition.
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        (GameState.START, GameState.PLAYING),   # First tap
        (GameState.PLAYING, GameState.WIN),     # Every pickle collected
        (GameState.PLAYING, GameState.START),   # A pickle escaped off the left edge
    ]

    def __init__(self, initial_state: GameState = GameState.START) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """True when no transition out of the current state exists."""
        return not any(src == self._state for src, _ in self._valid_transitions)

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)
