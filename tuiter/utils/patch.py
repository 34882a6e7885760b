"""Shallow-merge helpers for partial record updates.

A patch is a mapping of field name to new value. Every key present in the
patch overwrites the record's value; keys absent from the patch are left
alone. Patches come from ``BaseModel.model_dump(exclude_unset=True)`` at the
API boundary, so an explicit ``None`` is a real value, not "missing".
"""
from dataclasses import fields, is_dataclass, replace
from typing import Any, Dict, Iterable, Mapping, TypeVar

T = TypeVar('T')


def field_names(record_type) -> set:
    """Names of the fields declared on a dataclass type."""
    return {f.name for f in fields(record_type)}


def validate_patch(
    record_type,
    patch: Mapping[str, Any],
    immutable: Iterable[str] = (),
    not_null: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Check a patch against a dataclass type and return it as a plain dict.

    Fields named in ``not_null`` may be left out of the patch but may not be
    sent as ``None``.

    Raises:
        ValueError: If the patch names an unknown or immutable field, or
            clears a ``not_null`` field
    """
    allowed = field_names(record_type) - set(immutable)
    unknown = sorted(set(patch) - allowed)
    if unknown:
        raise ValueError(f"Cannot update field(s): {', '.join(unknown)}")

    cleared = sorted(k for k in not_null if k in patch and patch[k] is None)
    if cleared:
        raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}")
    return dict(patch)


def apply_patch(record: T, patch: Mapping[str, Any]) -> T:
    """
    Return a copy of ``record`` with ``patch`` merged in.

    Works on dataclass instances and on plain dict documents. The original
    record is not modified.
    """
    if is_dataclass(record) and not isinstance(record, type):
        return replace(record, **patch)
    if isinstance(record, Mapping):
        merged = dict(record)
        merged.update(patch)
        return merged
    raise TypeError(f"Cannot patch {type(record).__name__}")
