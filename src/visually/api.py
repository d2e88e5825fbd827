"""Public API for the visually package.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from kernel modules.
"""

import os
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from visually.codes import ValidationCode
from visually.kernel.errors import MalformedInputError, SchemaViolationError, VisualFileError
from visually.kernel.parser import parse_visual_file
from visually.kernel.schema import CreatedSlideMediaItem, VisualPresentation
from visually.kernel.serialize import dumps, to_dict


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class ValidationIssue(BaseModel):
    """A single validation issue (error or warning)."""
    code: str  # e.g., "SCHEMA_VIOLATION", "DUPLICATE_ID"
    message: str
    path: Optional[str] = None  # Dotted document path, when the issue has one
    element_id: Optional[str] = None  # For DUPLICATE_ID warnings


class ValidationResult(BaseModel):
    """Result of validation/preflight check."""
    ok: bool  # True if no errors (warnings don't block)
    errors: List[ValidationIssue]  # Blocking issues (at most one: first violation wins)
    warnings: List[ValidationIssue]  # Non-blocking issues


def load_visual_file(path: Union[str, os.PathLike, Path]) -> VisualPresentation:
    """Read and parse a .visual file from disk."""
    path = _normalize_path(path)
    return parse_visual_file(path.read_bytes())


def save_visual_file(presentation: VisualPresentation, path: Union[str, os.PathLike, Path]) -> Path:
    """Write a presentation to disk as .visual text."""
    path = _normalize_path(path)
    path.write_text(dumps(presentation) + "\n", encoding="utf-8")
    return path


def _duplicate_id_warnings(ids: List[str], collection: str) -> List[ValidationIssue]:
    counts = Counter(ids)
    seen = set()
    warnings = []
    for index, item_id in enumerate(ids):
        if counts[item_id] > 1 and item_id in seen:
            warnings.append(ValidationIssue(
                code=ValidationCode.DUPLICATE_ID.value,
                message=f"Duplicate id '{item_id}' in {collection}",
                path=f"{collection}.{index}.id",
                element_id=item_id,
            ))
        seen.add(item_id)
    return warnings


def find_duplicate_ids(presentation: VisualPresentation) -> List[ValidationIssue]:
    """Report ids repeated within one collection.

    Collections are the media queue, the sources, and the elements of each
    custom slide. The first occurrence is not reported, later ones are.
    """
    warnings = _duplicate_id_warnings(presentation.media_ids(), "mediaQueue")
    for index, item in enumerate(presentation.media_queue):
        if isinstance(item, CreatedSlideMediaItem):
            element_ids = [element.id for element in item.slide.elements]
            warnings.extend(
                _duplicate_id_warnings(element_ids, f"mediaQueue.{index}.slide.elements")
            )
    warnings.extend(_duplicate_id_warnings(presentation.source_ids(), "sources"))
    return warnings


def validate(
    text: Optional[Union[str, bytes]] = None,
    path: Optional[Union[str, os.PathLike, Path]] = None,
) -> ValidationResult:
    """Validate a .visual document without raising.

    Exactly one of ``text`` or ``path`` must be given.

    Returns:
        ValidationResult with ok=False and a single error when the document
        is rejected, or ok=True with any DUPLICATE_ID warnings.
    """
    if (text is None) == (path is None):
        raise ValueError("Provide exactly one of 'text' or 'path'")

    if path is not None:
        path = _normalize_path(path)
        try:
            text = path.read_bytes()
        except FileNotFoundError:
            return ValidationResult(
                ok=False,
                errors=[ValidationIssue(
                    code=ValidationCode.FILE_NOT_FOUND.value,
                    message=f"File not found: {path}",
                )],
                warnings=[],
            )

    try:
        presentation = parse_visual_file(text)
    except SchemaViolationError as e:
        issue = ValidationIssue(code=ValidationCode.SCHEMA_VIOLATION.value, message=str(e), path=e.path)
        return ValidationResult(ok=False, errors=[issue], warnings=[])
    except MalformedInputError as e:
        issue = ValidationIssue(code=ValidationCode.MALFORMED_INPUT.value, message=str(e))
        return ValidationResult(ok=False, errors=[issue], warnings=[])

    return ValidationResult(ok=True, errors=[], warnings=find_duplicate_ids(presentation))


def json_schema() -> Dict[str, Any]:
    """JSON Schema of the .visual format, using wire field names."""
    return VisualPresentation.model_json_schema(by_alias=True)


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "VisualFileError",
    "dumps",
    "find_duplicate_ids",
    "json_schema",
    "load_visual_file",
    "parse_visual_file",
    "save_visual_file",
    "to_dict",
    "validate",
]
