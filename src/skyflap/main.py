"""
Main entry point for SKYFLAP.

Loads settings (environment and .env), configures logging and opens
the game window.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator() -> None:
    """Run the game in a pygame window."""
    from skyflap.config.settings import get_settings
    from skyflap.core.events import EventBus
    from skyflap.simulator.window import SimulatorWindow

    settings = get_settings()
    window = SimulatorWindow(settings=settings, event_bus=EventBus())
    await window.run()


def main() -> None:
    """Main entry point."""
    from pydantic import ValidationError
    from skyflap.config.settings import get_settings

    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.debug)
    logger = logging.getLogger(__name__)
    logger.info("SKYFLAP starting...")

    try:
        if settings.is_simulator:
            logger.info("Running in simulator mode")
            asyncio.run(run_simulator())
        else:
            logger.error(f"Unknown environment: {settings.env}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("SKYFLAP stopped")


if __name__ == "__main__":
    main()
