"""Observability hook for the fetch layer.

The fetcher and resolver never print or log directly. They emit
structured, level-tagged events to an injected observer:

    observer(logging.INFO, "resolve.succeeded", kind="locations", route="23")

The default observer forwards to the standard logging module.
"""

import logging
from typing import Any, Callable

# (level, event, **fields) -> None
ObserverFunc = Callable[..., None]

logger = logging.getLogger(__name__)


def logging_observer(target: logging.Logger | None = None) -> ObserverFunc:
    """Build an observer that writes events to a logger."""
    log = target or logger

    def observe(level: int, event: str, **fields: Any) -> None:
        if not log.isEnabledFor(level):
            return
        details = " ".join(f"{key}={value!r}" for key, value in fields.items())
        log.log(level, f"{event} {details}".rstrip())

    return observe

