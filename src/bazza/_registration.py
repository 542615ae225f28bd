from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from ._errors import InvariantViolationError, RequiredArgumentError
from ._names import parse_injectable_name, parse_registration_name


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    F = TypeVar("F", bound="Callable[..., Any]")

INJECT_ATTRIBUTE = "__inject__"


class Kind(Enum):
    RAW = "raw"
    CONSTRUCTIBLE = "constructible"
    COLLECTION = "collection"


@dataclass(frozen=True)
class Injectable:
    name: str  # registry key, keeps the [] suffix of array dependencies
    base: str
    required: bool


@dataclass(frozen=True, eq=False)
class Registration:
    """One named binding.

    - RAW: `value` is returned as-is
    - CONSTRUCTIBLE: `value` is a factory called with its resolved `injectables`
    - COLLECTION: `value` is a list of non-array child registrations.
    """

    full_name: str
    name: str
    kind: Kind
    value: Any
    injectables: tuple[Injectable, ...] = field(default=())

    @property
    def is_array(self) -> bool:
        return self.kind is Kind.COLLECTION

    @property
    def is_function(self) -> bool:
        return self.kind is Kind.CONSTRUCTIBLE

    @classmethod
    def create(
        cls,
        full_name: str,
        value: Any,
        *,
        inject: Sequence[str] | None = None,
    ) -> Registration:
        if not full_name:
            msg = "name is required"
            raise RequiredArgumentError(msg)

        if value is None:
            msg = f"value is required for {full_name!r}"
            raise RequiredArgumentError(msg)

        parsed = parse_registration_name(full_name)

        if parsed.is_array:
            child = cls.create(parsed.base, value, inject=inject)
            return cls(full_name=full_name, name=parsed.base, kind=Kind.COLLECTION, value=[child])

        if not _is_factory(value):
            return cls(full_name=full_name, name=parsed.base, kind=Kind.RAW, value=value)

        declared = inject if inject is not None else getattr(value, INJECT_ATTRIBUTE, None)
        return cls(
            full_name=full_name,
            name=parsed.base,
            kind=Kind.CONSTRUCTIBLE,
            value=value,
            injectables=_parse_injectables(full_name, declared),
        )

    def append(self, value: Any, *, inject: Sequence[str] | None = None) -> Registration:
        """Add `value` as a new element of an array registration."""
        if not self.is_array:
            msg = f"Cannot append to non-array registration {self.full_name!r}"
            raise InvariantViolationError(msg)

        self.value.append(Registration.create(self.name, value, inject=inject))
        return self


make_registration = Registration.create


def injectable(*names: str) -> Callable[[F], F]:
    """Declare the ordered dependencies of a class or factory function.

    Example:
      @injectable("db", "cache?")
      class Repo:
          def __init__(self, db, cache): ...

    Names are validated when the factory is registered.
    """

    def decorate(target: F) -> F:
        setattr(target, INJECT_ATTRIBUTE, names)
        return target

    return decorate


def _is_factory(value: object) -> bool:
    return inspect.isclass(value) or inspect.isroutine(value) or isinstance(value, functools.partial)


def _parse_injectables(owner: str, declared: object) -> tuple[Injectable, ...]:
    if declared is None:
        return ()

    if not isinstance(declared, (list, tuple)):
        msg = f"Dependencies of {owner!r} must be a list or tuple of names, got {type(declared).__name__}"
        raise InvariantViolationError(msg)

    injectables = []
    for raw in declared:
        if not isinstance(raw, str):
            msg = f"Dependency names of {owner!r} must be strings, got {raw!r}"
            raise InvariantViolationError(msg)

        parsed = parse_injectable_name(raw)
        injectables.append(Injectable(name=parsed.key, base=parsed.base, required=not parsed.optional))

    return tuple(injectables)
