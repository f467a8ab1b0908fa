"""Partial-update support: turn patch operations into a validated VillaUpdate."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from villa_api.exceptions import ValidationError
from villa_api.schemas.villa import PatchOperation, VillaPatch, VillaUpdate

PATCHABLE_FIELDS = frozenset(VillaPatch.model_fields)


def _field_name(path: str) -> str:
    field = path.lstrip("/")
    if field == "id":
        raise ValidationError({"id": ["The id of a villa cannot be patched."]})
    if field not in PATCHABLE_FIELDS:
        raise ValidationError({field: [f"Unknown field {path!r}."]})
    return field


def _removed_value(field: str) -> Any:
    field_info = VillaUpdate.model_fields[field]
    if field_info.is_required():
        return None
    return field_info.get_default(call_default_factory=True)


def operations_to_patch(current: VillaUpdate, operations: Sequence[PatchOperation]) -> VillaPatch:
    """Replay ``operations`` in order against ``current`` and collect the changes.

    ``test`` compares against the document as modified by earlier operations.
    ``remove`` resets a field to its VillaUpdate default; required fields
    have none, are cleared to null and then fail validation in
    :func:`apply_patch`.
    """
    document: dict[str, Any] = current.model_dump(exclude={"id"})
    changes: dict[str, Any] = {}

    for operation in operations:
        field = _field_name(operation.path)

        if operation.op == "test":
            if document[field] != operation.value:
                raise ValidationError(
                    {field: [f"Test failed: expected {operation.value!r}, found {document[field]!r}."]}
                )
            continue

        if operation.op in ("add", "replace"):
            value = operation.value
        elif operation.op == "remove":
            value = _removed_value(field)
        else:  # copy, move
            if operation.from_ is None:
                raise ValidationError({field: [f"'{operation.op}' requires a 'from' path."]})
            source = _field_name(operation.from_)
            value = document[source]
            if operation.op == "move" and source != field:
                document[source] = changes[source] = _removed_value(source)

        document[field] = value
        changes[field] = value

    try:
        return VillaPatch.model_validate(changes)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def apply_patch(current: VillaUpdate, patch: VillaPatch) -> VillaUpdate:
    """Return a re-validated copy of ``current`` with the set fields of ``patch``."""
    data = current.model_dump()
    data.update(patch.model_dump(exclude_unset=True))
    try:
        return VillaUpdate.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
