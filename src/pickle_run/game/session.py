"""
Game session: all mutable state of one running game.

The session owns the player, the pickles, the confetti, the run counters
and the state machine. The window feeds it jumps, resizes and frame
ticks (directly or through the event bus) and the renderer reads it.
"""

from typing import Callable, List, Optional, Sequence
import logging
import random

from pickle_run.audio.engine import AudioEngine
from pickle_run.config.settings import Settings
from pickle_run.core.events import Event, EventBus, EventType
from pickle_run.core.state import GameState, StateMachine
from pickle_run.core.viewport import Viewport
from pickle_run.game import physics
from pickle_run.game.celebration import Celebration
from pickle_run.game.entities import (
    Collectible,
    ConfettiParticle,
    Player,
    create_collectibles,
    place_player,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFETTI_WORDS = ["sort", "of", "confetti", "pickle", "crunch", "yum"]


class GameSession:
    """State of one game, from the instructions screen to the win screen.

    Lifecycle:
        1. Created in START with a run already laid out
        2. handle_jump() in START begins a fresh run (PLAYING)
        3. update() once per frame advances physics or confetti
        4. Collecting every pickle enters WIN; letting one escape
           returns to START
    """

    def __init__(
        self,
        settings: Settings | None = None,
        viewport: Viewport | None = None,
        audio: AudioEngine | None = None,
        confetti_words: Sequence[str] | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or Settings()
        self.gameplay = self.settings.gameplay
        self.viewport = viewport or Viewport(
            self.settings.display.width, self.settings.display.height
        )
        self.audio = audio or AudioEngine(self.settings.audio)
        self.rng = rng or random.Random()

        self.state_machine = StateMachine(GameState.START)
        self.state_machine.add_listener(self._on_state_changed)

        self.player = Player()
        self.collectibles: List[Collectible] = []
        self.celebration = Celebration(
            confetti_words or DEFAULT_CONFETTI_WORDS,
            count=self.gameplay.confetti_count,
            rng=self.rng,
        )

        # Run counters
        self.collected = 0
        self.scroll_speed = self.gameplay.base_speed

        self._event_bus: Optional[EventBus] = None
        self._unsubscribers: List[Callable[[], None]] = []

        self.create_collectibles()

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def confetti(self) -> List[ConfettiParticle]:
        return self.celebration.particles

    @property
    def ground_y(self) -> float:
        """Ground line, from the current viewport height."""
        return self.viewport.height * self.gameplay.ground_ratio

    # Entity factory

    def create_collectibles(self) -> None:
        """Reset run counters, lay out fresh pickles and put the player back."""
        self.collected = 0
        self.scroll_speed = self.gameplay.base_speed
        self.collectibles = create_collectibles(self.viewport, self.gameplay, self.rng)
        place_player(self.player, self.viewport, self.gameplay)
        logger.debug(
            f"Run laid out: {len(self.collectibles)} pickles on {self.viewport}"
        )

    # Input

    def handle_jump(self) -> bool:
        """Handle a tap. Returns True if it changed anything.

        Must be called from input handling: the first tap is also what
        unlocks audio.
        """
        self.audio.ensure_initialized()

        if self.state == GameState.START:
            self.state_machine.transition(GameState.PLAYING)
            self.create_collectibles()
            self._emit(EventType.RUN_STARTED)
            return True

        if self.state == GameState.WIN:
            return False

        return physics.try_jump(self.player, self.gameplay)

    def handle_resize(self, width: int, height: int) -> None:
        self.viewport.resize(width, height)

    # Frame update

    def update(self) -> None:
        """Advance one frame."""
        if self.state == GameState.PLAYING:
            self._step_playing()
        elif self.state == GameState.WIN:
            self.celebration.update(self.viewport)

    def _step_playing(self) -> None:
        physics.apply_gravity(self.player, self.gameplay, self.ground_y)
        physics.advance_collectibles(self.collectibles, self.scroll_speed, self.gameplay)

        for pickle in physics.find_touching(self.player, self.collectibles):
            self._collect(pickle)

        if self.state == GameState.PLAYING and physics.any_escaped(self.collectibles):
            logger.info(f"A pickle got away after {self.collected} collected")
            self.state_machine.transition(GameState.START)
            self._emit(EventType.RUN_FAILED, collected=self.collected)

    def _collect(self, pickle: Collectible) -> None:
        pickle.collected = True
        self.collected += 1
        self.scroll_speed += self.gameplay.speed_step
        self.audio.play_collect_tone()

        logger.debug(f"Collected {self.collected}/{len(self.collectibles)}, speed {self.scroll_speed:.2f}")
        self._emit(EventType.COLLECTED, collected=self.collected, speed=self.scroll_speed)

        if self.collected == self.gameplay.collectible_count:
            self.state_machine.transition(GameState.WIN)
            self.celebration.spawn(self.viewport)
            self._emit(EventType.WIN)

    # Event bus wiring

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to input and tick events and publish game events."""
        self.detach()
        self._event_bus = event_bus
        self._unsubscribers = [
            event_bus.subscribe(EventType.JUMP, lambda e: self.handle_jump()),
            event_bus.subscribe(
                EventType.RESIZE,
                lambda e: self.handle_resize(e.data["width"], e.data["height"]),
            ),
            event_bus.subscribe(EventType.TICK, lambda e: self.update()),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._event_bus = None

    def _emit(self, event_type: EventType, **data) -> None:
        if self._event_bus:
            self._event_bus.emit(Event(event_type, data=data, source="session"))

    def _on_state_changed(self, old_state: GameState, new_state: GameState) -> None:
        self._emit(EventType.STATE_CHANGED, old=old_state.name, new=new_state.name)
