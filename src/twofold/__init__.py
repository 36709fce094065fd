"""twofold: a two-state result container.

Public API:
    - Ok(value) / Error(value): Construct a success or failure result
    - Result: Abstract base of both variants (``Result.ok``, ``Result.error``,
      ``Result.from_result``)
    - UNIT: Marker for slots that carry no payload
    - Config / configure(): Process-wide settings
"""

from __future__ import annotations

import logging

from twofold.config import Config, configure, get_config, reset_config
from twofold.errors import ConfigurationError, InvalidStateError, TwofoldError
from twofold.result import Error, Ok, Result
from twofold.unit import UNIT, Unit, is_unit

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("twofold")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("twofold").addHandler(logging.NullHandler())

__all__ = [
    "UNIT",
    "Config",
    "ConfigurationError",
    "Error",
    "InvalidStateError",
    "Ok",
    "Result",
    "TwofoldError",
    "Unit",
    "configure",
    "get_config",
    "is_unit",
    "reset_config",
]
