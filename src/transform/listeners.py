"""Event listener back-linking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.artifacts.symbols import EventSymbol, Symbol

logger = logging.getLogger(__name__)


def link_event_listeners(symbols: Sequence[Symbol]) -> None:
    """Record each ``@listens`` declaration on the event it names.

    After this runs, an event's ``listeners`` holds the longname of every
    symbol listening to it, each at most once. Declarations naming an event
    that is not in ``symbols`` are ignored.
    """
    events: dict[str, EventSymbol] = {}
    for symbol in symbols:
        if symbol.kind == "event":
            events.setdefault(symbol.longname, symbol)

    for listener in symbols:
        for event_longname in listener.listens:
            event = events.get(event_longname)
            if event is None:
                logger.debug(
                    "%s listens to unknown event %s", listener.longname, event_longname
                )
                continue
            if listener.longname not in event.listeners:
                event.listeners.append(listener.longname)


__all__ = ["link_event_listeners"]
