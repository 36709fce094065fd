"""Callback dispatch for ``Result.if_ok``/``Result.if_error``.

Callbacks may take the active payload or nothing at all. The call form is
decided from the callback's signature, not from trial calls, so a callback
that raises ``TypeError`` internally is never retried with other arguments.
"""

from __future__ import annotations

import inspect
import logging
import typing

from twofold.config import get_config

if typing.TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["invoke", "resolve_arity"]

logger = logging.getLogger(__name__)

# Placeholder bound against signatures; never passed to a callback.
_PROBE = object()


def resolve_arity(callback: Callable[..., object], *, field_name: str = "callback") -> int:
    """Return 1 to call *callback* with the payload, 0 to call it bare.

    A callback that accepts both forms is called bare unless
    ``Config.callback_preference`` is ``"payload"``.

    The signature is inspected and bound twice on every call, including for
    the inactive branch of ``if_ok``/``if_error``. Results are not cached,
    since bound methods and lambdas are usually fresh objects per call; hot
    loops should branch on ``is_ok()`` instead.

    Raises:
        TypeError: *callback* is not callable, or accepts neither zero nor
            one positional argument.
    """
    if not callable(callback):
        raise TypeError(f"{field_name}: must be callable, got {type(callback).__name__}")

    try:
        sig = inspect.signature(callback)
    except (ValueError, TypeError):
        logger.debug(
            "No signature for %r; assuming it takes the payload", callback
        )
        return 1

    takes_payload = _binds(sig, _PROBE)
    takes_nothing = _binds(sig)
    if takes_payload and takes_nothing:
        return 1 if get_config().callback_preference == "payload" else 0
    if takes_payload:
        return 1
    if takes_nothing:
        return 0
    raise TypeError(
        f"{field_name}: must accept zero or one positional argument, "
        f"got signature {sig}"
    )


def invoke(callback: Callable[..., object], payload: object) -> None:
    """Call *callback* with *payload* or with no arguments, per its signature."""
    if resolve_arity(callback):
        callback(payload)
    else:
        callback()


def _binds(sig: inspect.Signature, *args: object) -> bool:
    try:
        sig.bind(*args)
    except TypeError:
        return False
    return True
