from __future__ import annotations


class BazzaError(Exception):
    """Base class for every error raised by the container."""


class RequiredArgumentError(BazzaError, ValueError):
    pass


class InvalidNameError(BazzaError, ValueError):
    pass


class ReservedNameError(BazzaError, ValueError):
    pass


class InvariantViolationError(BazzaError, TypeError):
    pass


class ResolutionError(BazzaError, RuntimeError):
    """Raised by `Container.get` when a dependency graph cannot be built."""

    def __init__(self, msg: str, name: str) -> None:
        super().__init__(msg)
        self.name = name


class CircularDependencyError(ResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Circular dependency detected: {name!r} depends on itself", name)


class MissingDependencyError(ResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required dependency: no registration found for {name!r}", name)
