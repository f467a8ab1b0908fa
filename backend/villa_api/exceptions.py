"""Domain exceptions raised by the villa service and repository.

Each class maps to one HTTP status in ``villa_api.api.errors``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError


class VillaError(Exception):
    """Base class for all villa domain errors."""


class InvalidArgument(VillaError):
    """Malformed or sentinel identifier, or a body that contradicts the path."""


class VillaNotFound(VillaError):
    """No villa matches the requested id."""

    def __init__(self, villa_id: int):
        self.villa_id = villa_id
        super().__init__(f"Villa {villa_id} not found")


class ValidationError(VillaError):
    """Payload failed field constraints. Carries per-field messages."""

    def __init__(self, errors: Mapping[str, list[str]]):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__("; ".join(f"{f}: {', '.join(m)}" for f, m in self.errors.items()))

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(collect_field_errors(exc.errors()))


class DuplicateName(ValidationError):
    """A villa with the same name (case-insensitive) already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__({"name": [f"A villa named {name!r} already exists."]})


def collect_field_errors(
    raw_errors: Iterable[Mapping[str, Any]],
    skip_prefix: str | None = None,
) -> dict[str, list[str]]:
    """Group pydantic error dicts by dotted field location.

    ``skip_prefix`` drops a leading location segment such as ``"body"``.
    """
    grouped: dict[str, list[str]] = {}
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ())]
        if skip_prefix is not None and loc and loc[0] == skip_prefix:
            loc = loc[1:]
        field = ".".join(loc) or (skip_prefix or "__root__")
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return grouped
