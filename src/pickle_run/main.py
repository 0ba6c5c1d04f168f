"""
Main entry point for Pickle Run.

Loads settings, builds the session and opens the game window.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from pickle_run.audio.engine import get_audio_engine
from pickle_run.config.settings import Settings, get_settings
from pickle_run.config.theme import load_theme
from pickle_run.core.events import EventBus
from pickle_run.core.viewport import Viewport
from pickle_run.game.session import GameSession
from pickle_run.graphics.renderer import Renderer
from pickle_run.graphics.sprites import SpriteLoader


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_game(settings: Settings) -> None:
    """Wire the components together and run the window until closed."""
    from pickle_run.app.window import GameWindow, WindowConfig

    theme = load_theme(settings.theme, settings.themes_path)
    event_bus = EventBus()

    session = GameSession(
        settings=settings,
        viewport=Viewport(settings.display.width, settings.display.height),
        audio=get_audio_engine(settings.audio),
        confetti_words=theme.confetti_words,
    )
    renderer = Renderer(
        theme=theme,
        sprites=SpriteLoader(settings.sprite_path, fallback_size=int(settings.gameplay.collectible_size)),
    )

    window = GameWindow(
        session=session,
        renderer=renderer,
        config=WindowConfig.from_settings(settings.display, debug=settings.debug),
        event_bus=event_bus,
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Pickle Run starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Pickle Run stopped")


if __name__ == "__main__":
    main()
