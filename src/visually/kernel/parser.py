"""Reader for .visual files: text in, validated VisualPresentation out.

Two stages, fail-fast, no partial results:

1. Syntax: the text must be strict JSON.
2. Structure: the decoded value must match the schema. The first
   violation in document order is reported.

Nothing is coerced or defaulted; an absent optional field stays absent.
"""

import json
from typing import Any, Union

from pydantic import ValidationError

from .errors import MalformedInputError, SchemaViolationError
from .schema import VisualPresentation


def _reject_constant(token: str) -> Any:
    # json.loads accepts NaN/Infinity by default; strict JSON does not
    raise ValueError(f"Non-standard JSON constant: {token}")


def load_json(file_content: Union[str, bytes]) -> Any:
    """Decode strict JSON or raise MalformedInputError."""
    try:
        return json.loads(file_content, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        raise MalformedInputError() from None


def validate_document(obj: Any) -> VisualPresentation:
    """Validate an already-decoded JSON value against the schema.

    Raises:
        SchemaViolationError: carrying the path and reason of the first
            structural mismatch.
    """
    try:
        return VisualPresentation.model_validate(obj)
    except ValidationError as e:
        raise SchemaViolationError.from_validation_error(e) from e


def parse_visual_file(file_content: Union[str, bytes]) -> VisualPresentation:
    """Parse and validate the content of a .visual file.

    Args:
        file_content: Raw file content; not assumed to be well-formed.

    Returns:
        A validated, immutable VisualPresentation.

    Raises:
        MalformedInputError: If the content is not valid JSON.
        SchemaViolationError: If the JSON does not match the format.
    """
    return validate_document(load_json(file_content))


parse = parse_visual_file
