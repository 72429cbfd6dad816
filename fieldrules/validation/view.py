"""Generic Value View

Converts a caller's record into a tree of JSON-shaped values keyed by
field name: the only input contract the evaluation loop depends on.

Anything pydantic can serialize in JSON mode is accepted: plain dicts,
``BaseModel`` instances, dataclasses, ``TypedDict`` values. Nested
models become nested dicts, tuples become lists, ``None`` stays ``None``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from pydantic import TypeAdapter

from fieldrules.errors import AppError, ErrorCode, Err, Ok, Result, invalid_input_shape, try_result
from fieldrules.logging import view_logger

log = view_logger()

ValueTree = dict[str, Any]


@lru_cache(maxsize=256)
def _adapter_for(record_type: type) -> TypeAdapter:
    return TypeAdapter(record_type)


def _dump(record: Any) -> Any:
    if isinstance(record, Mapping):
        # Mapping subclasses may not have a schema; the values still do.
        return _adapter_for(dict).dump_python(dict(record), mode="json")
    return _adapter_for(type(record)).dump_python(record, mode="json")


def to_value(record: Any) -> Result[Any, AppError]:
    """Serialize ``record`` into JSON-shaped Python values.

    Fails with ``Err`` when pydantic cannot build a schema for the record
    type or cannot serialize one of its values.
    """
    result = try_result(
        lambda: _dump(record),
        code=ErrorCode.E2004_INVALID_TYPE,
        origin="value_view",
    )
    if result.is_err():
        log.debug(
            "record_conversion_failed",
            record_type=type(record).__name__,
            error=result.unwrap_err().message,
        )
    return result


def to_object(record: Any) -> Result[ValueTree, AppError]:
    """Serialize ``record`` and require an object-shaped result."""
    match to_value(record):
        case Ok(dict() as tree):
            return Ok({str(key): value for key, value in tree.items()})
        case Ok(other):
            return invalid_input_shape(other, origin="value_view")
        case Err() as failure:
            return failure
