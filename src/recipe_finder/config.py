"""
Configuration and Logging Setup

Provides centralized configuration and logging for the recipe finder agent.
Reads LOG_LEVEL and RECIPE_FINDER_* variables from the environment.

Usage:
    from recipe_finder.config import AgentConfig, configure_logging, get_logger

    # Configure at application startup
    configure_logging()

    # Get logger in any module
    logger = get_logger(__name__)

    # Agent runtime settings
    config = AgentConfig.from_env()
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Literal, Optional

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

# Valid log levels
VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Model tier names understood by the agent runtime
ModelTier = Literal["haiku", "sonnet", "opus"]
MODEL_TIERS: tuple[str, ...] = ("haiku", "sonnet", "opus")

DEFAULT_MODEL: ModelTier = "haiku"
DEFAULT_MAX_TURNS = 50

logger = logging.getLogger(__name__)


def get_log_level() -> int:
    """
    Get the log level from LOG_LEVEL environment variable.

    Returns:
        Logging level constant (e.g., logging.INFO)

    Supported values:
        DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    level_str = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    if level_str not in VALID_LEVELS:
        # Logging is not configured yet, so this goes straight to stderr
        print(
            f"Warning: Invalid LOG_LEVEL '{level_str}'. "
            f"Valid values: {', '.join(VALID_LEVELS.keys())}. "
            f"Using {DEFAULT_LOG_LEVEL}.",
            file=sys.stderr,
        )
        return VALID_LEVELS[DEFAULT_LOG_LEVEL]

    return VALID_LEVELS[level_str]


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """
    Configure logging for the recipe finder.

    Should be called once at application startup.

    Args:
        level: Override log level (default: from LOG_LEVEL env var)
        verbose: Use detailed format with timestamps (default: simple format)

    Environment Variables:
        LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL
    """
    if level is None:
        level = get_log_level()

    log_format = LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE

    logging.basicConfig(
        level=level,
        format=log_format,
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )

    logging.getLogger("recipe_finder").setLevel(level)

    # Quiet noisy third-party loggers in non-debug mode
    if level > logging.DEBUG:
        logging.getLogger("claude_agent_sdk").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


@dataclass
class AgentConfig:
    """
    Settings for one agent runtime session.

    Reads from environment variables with sensible defaults.
    """

    # Model tier - haiku keeps snapshot-heavy browsing cheap
    model: str = DEFAULT_MODEL

    # Upper bound on agent turns for one query
    max_turns: int = DEFAULT_MAX_TURNS

    @classmethod
    def from_env(cls) -> "AgentConfig":
        """
        Create AgentConfig from environment variables.

        Environment variables:
            RECIPE_FINDER_MODEL: haiku, sonnet, or opus (default: haiku)
            RECIPE_FINDER_MAX_TURNS: positive int (default: 50)
        """
        model = os.getenv("RECIPE_FINDER_MODEL", DEFAULT_MODEL).strip().lower()
        if model not in MODEL_TIERS:
            logger.warning(
                "Invalid RECIPE_FINDER_MODEL '%s', using %s", model, DEFAULT_MODEL
            )
            model = DEFAULT_MODEL

        return cls(
            model=model,
            max_turns=_parse_max_turns(os.getenv("RECIPE_FINDER_MAX_TURNS")),
        )


def _parse_max_turns(value: Optional[str]) -> int:
    if value is None or not value.strip():
        return DEFAULT_MAX_TURNS
    try:
        max_turns = int(value)
    except ValueError:
        logger.warning(
            "Invalid RECIPE_FINDER_MAX_TURNS '%s', using %d", value, DEFAULT_MAX_TURNS
        )
        return DEFAULT_MAX_TURNS
    if max_turns < 1:
        logger.warning(
            "RECIPE_FINDER_MAX_TURNS must be positive, got %d; using %d",
            max_turns,
            DEFAULT_MAX_TURNS,
        )
        return DEFAULT_MAX_TURNS
    return max_turns
