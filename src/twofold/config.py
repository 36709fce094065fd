"""Configuration: frozen Config resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import os
from typing import TYPE_CHECKING, Any, Literal

from dotenv import load_dotenv

from twofold.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

load_dotenv()

logger = logging.getLogger(__name__)

CopyMode = Literal["deep", "shallow"]
CallbackPreference = Literal["payload", "bare"]

_COPY_MODES: tuple[CopyMode, ...] = ("deep", "shallow")
_CALLBACK_PREFERENCES: tuple[CallbackPreference, ...] = ("payload", "bare")

# Environment variable names, keyed by Config field
_ENV_VARS: dict[str, str] = {
    "copy_mode": "TWOFOLD_COPY_MODE",
    "callback_preference": "TWOFOLD_CALLBACK_PREFERENCE",
}


@dataclass(frozen=True)
class Config:
    """Immutable process-wide settings for twofold.

    Example:
        configure(callback_preference="payload")
        # callbacks accepting both forms now receive the payload
    """

    #: How ``Result.from_result`` copies the payload it converts.
    copy_mode: CopyMode = "deep"
    #: Which call form wins when a callback accepts both zero and one argument.
    callback_preference: CallbackPreference = "bare"

    def __post_init__(self) -> None:
        """Validate enumerated fields."""
        if self.copy_mode not in _COPY_MODES:
            raise ConfigurationError(
                f"Unknown copy_mode: {self.copy_mode!r}",
                hint="Supported copy modes: 'deep', 'shallow'",
            )
        if self.callback_preference not in _CALLBACK_PREFERENCES:
            raise ConfigurationError(
                f"Unknown callback_preference: {self.callback_preference!r}",
                hint="Supported preferences: 'payload', 'bare'",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from ``TWOFOLD_*`` environment variables.

        Unset or blank variables fall back to field defaults. Values are
        case-insensitive.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name, var in _ENV_VARS.items():
            raw = env.get(var)
            if raw is None or not raw.strip():
                continue
            values[name] = raw.strip().lower()
        try:
            config = cls(**values)
        except ConfigurationError as e:
            raise ConfigurationError(
                f"Invalid environment configuration: {e}",
                hint=f"Check {', '.join(_ENV_VARS.values())}. {e.hint or ''}".strip(),
            ) from e
        logger.debug("Resolved config from environment: %s", config)
        return config


_active: Config | None = None


def get_config() -> Config:
    """Return the active Config, resolving it from the environment on first use."""
    global _active
    if _active is None:
        _active = Config.from_env()
    return _active


def configure(config: Config | None = None, **overrides: Any) -> Config:
    """Install a new active Config and return it.

    With *config*, that instance becomes the base; otherwise the current
    active config is. Keyword *overrides* replace individual fields.
    """
    global _active
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            hint=f"Valid keys: {', '.join(sorted(known))}",
        )
    base = config if config is not None else get_config()
    new = replace(base, **overrides) if overrides else base
    _active = new
    logger.debug("Configured: %s", new)
    return new


def reset_config() -> None:
    """Forget the active Config; the next read re-resolves from the environment."""
    global _active
    _active = None
