"""
Console entry point for the smartphone recommender.

Loads the catalog, trains the classifier once, then runs one interactive
recommendation session on stdin/stdout. Takes no arguments; configure through
environment variables or a .env file (see cli/config.py).

Usage:
    phone-recommender
    python -m cli
"""

import logging
import sys
from typing import Optional

from recommender.errors import (
    ClassifierError,
    ConfigError,
    EndOfInputError,
    LoadError,
)
from recommender.services.catalog_loader import CatalogLoader
from recommender.services.classifier import BoostedTreeClassifier
from recommender.services.history import RecommendationHistory
from recommender.services.line_io import ConsoleIO, LineIO
from recommender.session import RecommendationSession

from .config import AppConfig, get_config

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to the Smartphone Recommendation System, "
    "hopefully we can recommend a phone you will like!"
)
CLOSE_PROMPT = "Please press Enter to close the program..."

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_END_OF_INPUT = 2


def main(io: Optional[LineIO] = None, config: Optional[AppConfig] = None) -> int:
    """Run one session. Returns the process exit code."""
    io = io if io is not None else ConsoleIO()
    try:
        config = config if config is not None else get_config()
        recommender_config = config.load_recommender_config()
    except ConfigError as e:
        io.write(f"Configuration error: {e}")
        return EXIT_FATAL

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    io.write(WELCOME)
    io.write()

    try:
        catalog = CatalogLoader(config.catalog_path).load()
        classifier = BoostedTreeClassifier.train(catalog, recommender_config)
        session = RecommendationSession(
            classifier,
            io,
            history=RecommendationHistory(),
            config=recommender_config,
        )
        result = session.run()
    except LoadError as e:
        logger.error("Catalog load failed: %s", e)
        io.write(f"Could not load the smartphone catalog: {e}")
        return EXIT_FATAL
    except ClassifierError as e:
        logger.error("Classifier failed: %s", e)
        io.write(f"The recommendation model failed: {e}")
        return EXIT_FATAL
    except EndOfInputError:
        io.write()
        io.write("Input closed before a recommendation was accepted. Goodbye.")
        return EXIT_END_OF_INPUT

    logger.info(
        "Session finished: %r accepted after %d predictions", result.device_name, result.predict_calls
    )
    io.write(CLOSE_PROMPT)
    try:
        io.read_line()
    except EndOfInputError:
        pass
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
