"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys

from quickfix.config.settings import settings


def setup_logging() -> None:
    """Configure library logging for host applications and scripts.

    Uses the log level from settings and writes to stdout.
    """
    log_level = getattr(logging, settings.log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,  # Reconfigure if already setup
    )


def setup_observability() -> None:
    """Setup logging and, when a token is configured, Logfire tracing."""
    setup_logging()

    logger = logging.getLogger(__name__)

    if settings.logfire_token:
        try:
            import logfire

            logfire.configure(token=settings.logfire_token)

            # Route stdlib log records from this package into Logfire
            logging.getLogger("quickfix").addHandler(logfire.LogfireLoggingHandler())

            logger.info(
                f"Logfire observability enabled for {settings.environment} environment"
            )

        except ImportError:
            logger.warning(
                "Logfire package not installed. Install with: pip install 'quickfix-prompts[logfire]'"
            )
        except Exception as e:
            logger.error(f"Failed to setup Logfire observability: {e}")
    else:
        logger.info("Logfire token not configured, skipping observability setup")
