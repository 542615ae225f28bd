from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from ._errors import CircularDependencyError, MissingDependencyError, RequiredArgumentError, ReservedNameError
from ._events import LOG, POST_DISPOSE, PRE_DISPOSE, EventSink, LogEvent, LoggingSubscriber
from ._names import array_name, parse_registration_name
from ._registration import Kind, Registration


if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._events import Notifier


logger = logging.getLogger(__name__)

CONTAINER_NAME = "container"


class Container:
    """Minimal IoC container.

    - register raw values, factories or arrays of them under a name
    - resolve factories by constructing their declared dependencies
    - every lookup of a factory builds a fresh instance.

    `get` holds the registry lock while factories and subscribers run; a factory
    that waits on another thread calling `get` on the same container deadlocks.
    """

    def __init__(self, events: Notifier | None = None) -> None:
        if events is None:
            sink = EventSink()
            sink.subscribe(LOG, LoggingSubscriber(logger))
            events = sink

        self._events = events
        self._registrations: dict[str, Registration] = {}
        self._lock = threading.RLock()

        self._registrations[CONTAINER_NAME] = Registration.create(CONTAINER_NAME, self)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._registrations

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def register(self, name: str, reference: Any, *, inject: Sequence[str] | None = None) -> None:
        """Register a value, a factory or an array element under `name`.

        Example:
          container.register("db", create_db, inject=["config"])
          container.register("plugins[]", AuthPlugin)
          container.register("plugins[]", CachePlugin)

        Registering `name` evicts `name[]` and vice versa; registering `name[]`
        again appends to the existing array.
        """
        if not name or reference is None:
            msg = "Both name and reference are required"
            raise RequiredArgumentError(msg)

        if parse_registration_name(name).base == CONTAINER_NAME:
            msg = f"{CONTAINER_NAME!r} is reserved for the container itself"
            raise ReservedNameError(msg)

        candidate = Registration.create(name, reference, inject=inject)

        with self._lock:
            existing = self._registrations.get(name)

            if existing is not None and existing.is_array and candidate.is_array:
                existing.append(reference, inject=inject)
            else:
                self._registrations.pop(candidate.name, None)
                self._registrations.pop(array_name(candidate.name), None)
                self._registrations[name] = candidate

        self._log(("trace",), f"Registered {name!r} ({candidate.kind.value})", {"name": name})

    def get(self, name: str) -> Any:
        """Return the value registered under `name`, or None.

        Factories are called with their resolved dependencies; arrays are
        returned as lists with each element resolved independently.
        """
        with self._lock:
            registration = self._registrations.get(name)
            self._log(("trace",), f"Resolving {name!r}", {"name": name, "found": registration is not None})

            if registration is None:
                return None

            return self._construct(registration)

    def dispose(self) -> None:
        self._events.notify(PRE_DISPOSE)
        self._events.notify(POST_DISPOSE)

    def _construct(self, registration: Registration) -> Any:
        if registration.kind is Kind.RAW:
            return registration.value

        if registration.kind is Kind.COLLECTION:
            return [self._construct(child) for child in registration.value]

        args = []
        for dependency in registration.injectables:
            if dependency.name == registration.name:
                self._log(("fatal",), f"{registration.full_name!r} depends on itself", {"name": dependency.name})
                raise CircularDependencyError(dependency.name)

            found = self._registrations.get(dependency.name)
            if found is None:
                if dependency.required:
                    self._log(
                        ("fatal",),
                        f"{registration.full_name!r} requires unregistered {dependency.name!r}",
                        {"name": dependency.name},
                    )
                    raise MissingDependencyError(dependency.name)

                args.append(None)
                continue

            args.append(self._construct(found))

        return registration.value(*args)

    def _log(self, tags: tuple[str, ...], message: str, data: Any = None) -> None:
        self._events.notify(LOG, LogEvent(tags=tags, message=message, data=data))
