"""Minimal inversion-of-control container.

This package provides a small name-based IoC container: register raw values,
factories or arrays of them under symbolic names, then retrieve fully
constructed instances without knowing their dependency graphs.

Exports:
- `Container`: Registry supporting `register`, `get` and `dispose`.
- `injectable`: Decorator declaring the ordered dependencies of a factory.
  Names suffixed with ``?`` are optional and resolve to None when missing.
- `EventSink`, `LogEvent`, `LoggingSubscriber`: Observer the container reports
  registrations, lookups and disposal to.
- Error types raised on invalid registrations and failed resolutions.
"""

from ._container import CONTAINER_NAME, Container
from ._errors import (
    BazzaError,
    CircularDependencyError,
    InvalidNameError,
    InvariantViolationError,
    MissingDependencyError,
    RequiredArgumentError,
    ReservedNameError,
    ResolutionError,
)
from ._events import LOG, POST_DISPOSE, PRE_DISPOSE, EventSink, LogEvent, LoggingSubscriber
from ._registration import Injectable, Kind, Registration, injectable, make_registration


__all__ = [
    "CONTAINER_NAME",
    "LOG",
    "POST_DISPOSE",
    "PRE_DISPOSE",
    "BazzaError",
    "CircularDependencyError",
    "Container",
    "EventSink",
    "Injectable",
    "InvalidNameError",
    "InvariantViolationError",
    "Kind",
    "LogEvent",
    "LoggingSubscriber",
    "MissingDependencyError",
    "Registration",
    "RequiredArgumentError",
    "ReservedNameError",
    "ResolutionError",
    "injectable",
    "make_registration",
]
