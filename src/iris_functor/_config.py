"""Library configuration: FunctorConfig, init, and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from iris_functor._logging import configure_logging, get_logger, log_event

__all__ = [
    'FunctorConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')

_log = get_logger(__name__)


@dataclass(frozen=True)
class FunctorConfig:
    """Configuration for iris-functor.

    Attributes:
        strict_infer: If True, ``infer`` raises MissingValidatorError when no
            validator is set instead of returning an empty container.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    strict_infer: bool = False
    log_level: str | None = None


# Global configuration (set by init())
_config: FunctorConfig | None = None


def _detect_strict_infer() -> bool:
    """Read the strict_infer flag from IRIS_STRICT_INFER.

    Unset or empty means False. Unknown values log a warning and fall back
    to False.
    """
    env_value = os.environ.get('IRIS_STRICT_INFER', '').strip().lower()
    if env_value in _TRUTHY:
        return True
    if env_value and env_value not in _FALSY:
        logging.warning("Unknown IRIS_STRICT_INFER value '%s', defaulting to false", env_value)
    return False


def _detect_log_level() -> str | None:
    """Read the log level from IRIS_LOG_LEVEL, None if unset."""
    env_value = os.environ.get('IRIS_LOG_LEVEL', '').strip()
    return env_value.upper() or None


def init(
    strict_infer: bool | None = None,
    log_level: str | None = None,
) -> FunctorConfig:
    """Initialize iris-functor with the specified configuration.

    Args:
        strict_infer: Make ``infer`` raise when no validator is set.
            Read from IRIS_STRICT_INFER if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            IRIS_LOG_LEVEL if None; None there too means silent.

    Returns:
        The FunctorConfig that was set.

    Example:
        ```python
        from iris_functor import init

        init(strict_infer=True, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    resolved_strict = _detect_strict_infer() if strict_infer is None else strict_infer
    resolved_level = _detect_log_level() if log_level is None else log_level

    _config = FunctorConfig(strict_infer=resolved_strict, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)
    log_event(_log, 'config_initialized', strict_infer=resolved_strict, log_level=resolved_level)

    return _config


def _from_environment() -> FunctorConfig:
    """Build a FunctorConfig from the environment without touching logging."""
    return FunctorConfig(strict_infer=_detect_strict_infer(), log_level=_detect_log_level())


def get_config() -> FunctorConfig:
    """Get the current configuration.

    Before init() has been called, the configuration is read from the
    environment. Logging is only configured by an explicit init().
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = _from_environment()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
