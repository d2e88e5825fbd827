"""Writer side of the format: VisualPresentation to .visual text."""

import json
from typing import Any, Dict, Optional

from .schema import VisualPresentation


def to_dict(presentation: VisualPresentation) -> Dict[str, Any]:
    """JSON-compatible dict using wire names.

    Optional fields that are absent are omitted, never written as null,
    so the result parses back to an equal value.
    """
    return presentation.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps(presentation: VisualPresentation, indent: Optional[int] = 2) -> str:
    """Serialize to .visual text."""
    return json.dumps(to_dict(presentation), indent=indent, ensure_ascii=False)
