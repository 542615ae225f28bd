"""Grammar for registration and injectable names.

A name starts with a letter and continues with letters, digits, underscores,
hyphens or periods. Registration names may end in ``[]`` to denote an array
registration; injectable names may additionally end in ``?`` to mark the
dependency as optional.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from ._errors import InvalidNameError


REGISTRATION_NAME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9_.-]*)(\[\])?$")
INJECTABLE_NAME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9_.-]*)(\[\])?(\?)?$")

VALID_NAME_DESCRIPTION = (
    "Name must start with a letter (A-Z, a-z) and can only include letters, "
    "digits (0-9), underscores (_), hyphens (-) or periods (.). "
    "Array registrations can be suffixed with [] and optional services with ?"
)

ARRAY_SUFFIX = "[]"


class ParsedName(NamedTuple):
    base: str
    is_array: bool


class ParsedInjectableName(NamedTuple):
    base: str
    is_array: bool
    optional: bool

    @property
    def key(self) -> str:
        """Registry key the dependency is looked up under."""
        return self.base + ARRAY_SUFFIX if self.is_array else self.base


def _invalid(raw: object) -> InvalidNameError:
    return InvalidNameError(f"Invalid name {raw!r}. {VALID_NAME_DESCRIPTION}")


def parse_registration_name(raw: str) -> ParsedName:
    if not isinstance(raw, str):
        raise _invalid(raw)

    match = REGISTRATION_NAME_PATTERN.fullmatch(raw)
    if match is None:
        raise _invalid(raw)

    return ParsedName(base=match.group(1), is_array=match.group(2) is not None)


def parse_injectable_name(raw: str) -> ParsedInjectableName:
    if not isinstance(raw, str):
        raise _invalid(raw)

    match = INJECTABLE_NAME_PATTERN.fullmatch(raw)
    if match is None:
        raise _invalid(raw)

    return ParsedInjectableName(
        base=match.group(1),
        is_array=match.group(2) is not None,
        optional=match.group(3) is not None,
    )


def array_name(base: str) -> str:
    return base + ARRAY_SUFFIX
