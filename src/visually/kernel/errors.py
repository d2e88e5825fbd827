"""Error taxonomy for .visual parsing.

Two kinds only: the text is not JSON (MALFORMED_INPUT), or it is JSON that
does not match the document schema (SCHEMA_VIOLATION). A schema violation
carries the dotted path of the first offending value and a short reason.
"""

import json
from enum import Enum
from typing import Any, Dict, Sequence, Tuple, Union

from pydantic import ValidationError


class ErrorKind(str, Enum):
    """Parse failure kinds."""

    MALFORMED_INPUT = "MALFORMED_INPUT"
    SCHEMA_VIOLATION = "SCHEMA_VIOLATION"


class VisualFileError(ValueError):
    """Raised when a .visual document is rejected."""

    kind: ErrorKind


class MalformedInputError(VisualFileError):
    """The input is not valid JSON. The syntax error itself is not exposed."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self) -> None:
        super().__init__("Invalid file content: Not a valid JSON format.")


class SchemaViolationError(VisualFileError):
    """The input is JSON but not a valid document."""

    kind = ErrorKind.SCHEMA_VIOLATION

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Validation failed: Field '{path}' - {reason}.")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "SchemaViolationError":
        """Build from the first error pydantic reported."""
        path, reason = describe_error(exc.errors()[0])
        return cls(path, reason)


# List fields whose items are discriminated unions. Pydantic inserts the
# matched tag after the item index; it is not part of the document path.
_UNION_LIST_FIELDS = frozenset({"mediaQueue", "elements"})

_TAG_ERRORS = frozenset({"union_tag_invalid", "union_tag_not_found"})

_NUMBER_ERRORS = frozenset({"float_type", "int_type", "finite_number", "float_parsing"})

_EXPECTED_BY_TYPE = {
    "string_type": "string",
    "float_type": "number",
    "int_type": "number",
    "bool_type": "boolean",
    "list_type": "array",
    "tuple_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def json_type_name(value: Any) -> str:
    """Name a decoded JSON value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as a dotted document path.

    ('mediaQueue', 2, 'created-slide', 'slide', 'elements', 0, 'text', 'fontSize')
    becomes 'mediaQueue.2.slide.elements.0.fontSize'.
    """
    parts = []
    skip_tag = False
    for i, item in enumerate(loc):
        if skip_tag:
            skip_tag = False
            continue
        parts.append(str(item))
        if isinstance(item, int) and i > 0 and loc[i - 1] in _UNION_LIST_FIELDS:
            skip_tag = True
    return ".".join(parts)


def describe_error(error: Dict[str, Any]) -> Tuple[str, str]:
    """Turn one pydantic error dict into (path, reason)."""
    error_type = error["type"]
    value = error.get("input")
    ctx = error.get("ctx") or {}
    path = format_path(error["loc"])

    if error_type in _TAG_ERRORS:
        if not isinstance(value, dict):
            return path, f"expected object, received {json_type_name(value)}"
        path = f"{path}.type" if path else "type"
        if error_type == "union_tag_not_found":
            return path, "required, but missing"
        return path, (
            f"invalid discriminator value, expected {ctx.get('expected_tags')}, "
            f"received {json.dumps(ctx.get('tag'))}"
        )

    if error_type == "missing":
        return path, "required, but missing"
    if error_type in _NUMBER_ERRORS and json_type_name(value) == "number":
        # A JSON number that does not fit a finite float
        return path, "number out of range"
    if error_type == "literal_error":
        return path, f"invalid enum value, expected {ctx.get('expected')}, received {json.dumps(value, default=str)}"
    if error_type in _EXPECTED_BY_TYPE:
        return path, f"expected {_EXPECTED_BY_TYPE[error_type]}, received {json_type_name(value)}"
    # null_value and anything else already carry a readable message
    return path, error["msg"]
