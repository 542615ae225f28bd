"""Event sink the container reports to.

The container emits on three channels:

- ``log``: a `LogEvent` for every registration and lookup (``trace``) and
  before a resolution error is raised (``fatal``).
- ``preDispose`` / ``postDispose``: emitted by `Container.dispose`, no payload.

`EventSink` is a minimal synchronous observer. Anything exposing a matching
``notify(channel, payload)`` method can be handed to the container instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol


if TYPE_CHECKING:
    from collections.abc import Callable

    Subscriber = Callable[[Any], None]


LOG = "log"
PRE_DISPOSE = "preDispose"
POST_DISPOSE = "postDispose"


@dataclass(frozen=True)
class LogEvent:
    tags: tuple[str, ...]
    message: str
    data: Any = None


class Notifier(Protocol):
    def notify(self, channel: str, payload: Any = None) -> None: ...


class EventSink:
    def __init__(self) -> None:
        self._subscribers: dict[str, list[Subscriber]] = {}

    def subscribe(self, channel: str, callback: Subscriber) -> None:
        self._subscribers.setdefault(channel, []).append(callback)

    def unsubscribe(self, channel: str, callback: Subscriber) -> None:
        callbacks = self._subscribers.get(channel, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def notify(self, channel: str, payload: Any = None) -> None:
        # Snapshot: callbacks subscribed during an emission only see later ones.
        for callback in list(self._subscribers.get(channel, ())):
            callback(payload)


_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


class LoggingSubscriber:
    """Forward `LogEvent`s to a stdlib logger, picking the level from the tags."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logging.getLogger("bazza")

    def __call__(self, event: LogEvent) -> None:
        level = next((_LEVELS[tag] for tag in event.tags if tag in _LEVELS), logging.DEBUG)
        if not self._logger.isEnabledFor(level):
            return

        self._logger.log(level, "%s", event.message, extra={"tags": event.tags, "data": event.data})
