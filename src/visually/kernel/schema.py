"""Pydantic models for the .visual presentation format.

This module is the schema of the format: every entity and union variant,
with the exact set of accepted shapes. Field declaration order is the
validation order, so the first reported error is stable across runs.
"""

from typing import Annotated, Any, Callable, List, Literal, Optional, Tuple, Union

from pydantic import AllowInfNan, BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictStr
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


Transition = Literal["fade", "slide", "zoom", "none"]
TextAlign = Literal["left", "center", "right"]

# Finite only; an overflowing literal such as 1e400 decodes to inf
Number = Annotated[StrictFloat, AllowInfNan(False)]


def _reject_null(expected: str) -> Callable[[Any], Any]:
    """Build a before-validator that refuses an explicit null.

    Optional fields must be genuinely absent; ``null`` is not a stand-in.
    """
    def check(value: Any) -> Any:
        if value is None:
            raise PydanticCustomError(
                "null_value",
                "expected {expected}, received null",
                {"expected": expected},
            )
        return value
    return check


OptionalStr = Annotated[Optional[StrictStr], BeforeValidator(_reject_null("string"))]
OptionalTransition = Annotated[Optional[Transition], BeforeValidator(_reject_null("string"))]
OptionalTextAlign = Annotated[Optional[TextAlign], BeforeValidator(_reject_null("string"))]
OptionalTags = Annotated[Optional[Tuple[StrictStr, ...]], BeforeValidator(_reject_null("array"))]


class VisualModel(BaseModel):
    """Shared config: immutable, camelCase on the wire, unknown keys dropped.

    Array fields are tuples so a validated value cannot be edited in place.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
    )


# --- Slide elements ---

class TextSlideElement(VisualModel):
    """A text box on a custom slide."""
    id: StrictStr
    type: Literal["text"]
    x: Number
    y: Number
    width: Number
    height: Number
    content: StrictStr
    font_size: Number
    color: StrictStr
    font_family: StrictStr
    text_align: OptionalTextAlign = None


class ImageSlideElement(VisualModel):
    """An image placed on a custom slide."""
    id: StrictStr
    type: Literal["image"]
    x: Number
    y: Number
    width: Number
    height: Number
    src: StrictStr
    alt: OptionalStr = None


SlideElement = Annotated[
    Union[TextSlideElement, ImageSlideElement],
    Field(discriminator="type"),
]


class PresentationSlide(VisualModel):
    """A custom slide. Element order is paint order."""
    id: StrictStr
    title: StrictStr
    elements: Tuple[SlideElement, ...]
    background_color: OptionalStr = None  # Absent stays absent; builders default to white


# --- Media queue items ---

class ImageMediaItem(VisualModel):
    """An image shown full-frame."""
    id: StrictStr
    type: Literal["image"]
    name: StrictStr
    data_url: StrictStr  # URL or data URI of the image
    notes: OptionalStr = None
    transition: OptionalTransition = None


class YouTubeMediaItem(VisualModel):
    """An embedded YouTube video."""
    id: StrictStr
    type: Literal["youtube"]
    name: StrictStr
    url: StrictStr  # Original URL as given
    embed_url: StrictStr  # Privacy-enhanced embed URL
    notes: OptionalStr = None
    transition: OptionalTransition = None


class WebsiteMediaItem(VisualModel):
    """An embedded website."""
    id: StrictStr
    type: Literal["url"]
    name: StrictStr
    url: StrictStr
    notes: OptionalStr = None
    transition: OptionalTransition = None


class CreatedSlideMediaItem(VisualModel):
    """A custom slide in the media queue."""
    id: StrictStr
    type: Literal["created-slide"]
    name: StrictStr
    slide: PresentationSlide
    notes: OptionalStr = None
    transition: OptionalTransition = None


MediaItem = Annotated[
    Union[ImageMediaItem, YouTubeMediaItem, WebsiteMediaItem, CreatedSlideMediaItem],
    Field(discriminator="type"),
]


class SourceItem(VisualModel):
    """A bibliography entry."""
    id: StrictStr
    title: StrictStr
    url: StrictStr
    notes: OptionalStr = None
    tags: OptionalTags = None  # Order kept, duplicates allowed


class VisualPresentation(VisualModel):
    """Root of a .visual document."""
    title: StrictStr
    media_queue: Tuple[MediaItem, ...]  # Playback order
    sources: Tuple[SourceItem, ...]

    def media_ids(self) -> List[str]:
        """Get media item IDs in queue order (duplicates kept)."""
        return [item.id for item in self.media_queue]

    def source_ids(self) -> List[str]:
        """Get source IDs in insertion order (duplicates kept)."""
        return [s.id for s in self.sources]

    def get_media_by_id(self, id: str) -> Optional[Union[ImageMediaItem, YouTubeMediaItem, WebsiteMediaItem, CreatedSlideMediaItem]]:
        """Get the first media item with the given ID."""
        for item in self.media_queue:
            if item.id == id:
                return item
        return None

    def get_source_by_id(self, id: str) -> Optional[SourceItem]:
        """Get the first source with the given ID."""
        for s in self.sources:
            if s.id == id:
                return s
        return None

    def slides(self) -> List[PresentationSlide]:
        """Get the custom slides in queue order."""
        return [item.slide for item in self.media_queue if isinstance(item, CreatedSlideMediaItem)]


MEDIA_TYPES = ("image", "youtube", "url", "created-slide")
ELEMENT_TYPES = ("text", "image")
