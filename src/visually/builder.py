"""Builder classes to create .visual presentations programmatically.

Every method returns ``self`` so calls can be chained::

    deck = (
        Presentation("Field trip")
        .add_slide(Slide("Welcome").add_text("Hello", x=50, y=50, font_size=48,
                                             color="#000000", font_family="Inter"))
        .add_image("https://example.com/photos/lake.jpg")
        .add_youtube("https://youtu.be/dQw4w9WgXcQ")
        .add_source(Source("Lake survey", "https://example.com/survey"))
        .build()
    )
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from visually.kernel.schema import (
    CreatedSlideMediaItem,
    ImageMediaItem,
    ImageSlideElement,
    PresentationSlide,
    SourceItem,
    TextSlideElement,
    VisualPresentation,
    WebsiteMediaItem,
    YouTubeMediaItem,
)
from visually.utils import generate_id, get_youtube_embed_url

logger = logging.getLogger(__name__)

DEFAULT_TRANSITION = "fade"
DEFAULT_BACKGROUND = "#FFFFFF"
DEFAULT_TEXT_WIDTH = 700
DEFAULT_TEXT_HEIGHT = 100


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


class Slide:
    """Builder for a single custom slide."""

    def __init__(self, title: str):
        self.id = generate_id()
        self.title = title
        self.background_color = DEFAULT_BACKGROUND
        self._elements: List[Any] = []

    def get_title(self) -> str:
        return self.title

    def set_background(self, color: str) -> "Slide":
        self.background_color = color
        return self

    def add_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float,
        color: str,
        font_family: str,
        width: float = DEFAULT_TEXT_WIDTH,
        height: float = DEFAULT_TEXT_HEIGHT,
        text_align: Optional[str] = None,
    ) -> "Slide":
        """Add a text box. Width and height default to a 700x100 box."""
        element = TextSlideElement.model_validate(_drop_none({
            "id": generate_id(),
            "type": "text",
            "x": x,
            "y": y,
            "width": width,
            "height": height,
            "content": content,
            "fontSize": font_size,
            "color": color,
            "fontFamily": font_family,
            "textAlign": text_align,
        }))
        self._elements.append(element)
        return self

    def add_image(
        self,
        src: str,
        x: float,
        y: float,
        width: float,
        height: float,
        alt: Optional[str] = None,
    ) -> "Slide":
        element = ImageSlideElement.model_validate(_drop_none({
            "id": generate_id(),
            "type": "image",
            "x": x,
            "y": y,
            "width": width,
            "height": height,
            "src": src,
            "alt": alt,
        }))
        self._elements.append(element)
        return self

    def build(self) -> PresentationSlide:
        return PresentationSlide.model_validate({
            "id": self.id,
            "title": self.title,
            "elements": list(self._elements),
            "backgroundColor": self.background_color,
        })


class Source:
    """Builder for a bibliography entry."""

    def __init__(self, title: str, url: str):
        self.id = generate_id()
        self.title = title
        self.url = url
        self.notes: Optional[str] = None
        self.tags: Optional[List[str]] = None

    def with_notes(self, notes: str) -> "Source":
        self.notes = notes
        return self

    def with_tags(self, tags: Sequence[str]) -> "Source":
        self.tags = list(tags)
        return self

    def build(self) -> SourceItem:
        return SourceItem.model_validate(_drop_none({
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "notes": self.notes,
            "tags": self.tags,
        }))


class Presentation:
    """Builder for a whole presentation.

    Args:
        title: Presentation title.
        strict: If True, an unrecognized YouTube URL raises ValueError
            instead of being skipped with a warning.
    """

    def __init__(self, title: str, strict: bool = False):
        self.title = title
        self.strict = strict
        self._media_queue: List[Any] = []
        self._sources: List[SourceItem] = []

    def __len__(self) -> int:
        return len(self._media_queue)

    def add_slide(self, slide: Slide) -> "Presentation":
        self._media_queue.append(CreatedSlideMediaItem.model_validate({
            "id": generate_id(),
            "type": "created-slide",
            "name": slide.get_title(),
            "slide": slide.build(),
            "transition": DEFAULT_TRANSITION,
        }))
        return self

    def add_image(self, url: str, name: Optional[str] = None) -> "Presentation":
        self._media_queue.append(ImageMediaItem.model_validate({
            "id": generate_id(),
            "type": "image",
            "name": name or f"Image: {url[url.rfind('/') + 1:]}",
            "dataUrl": url,
            "transition": DEFAULT_TRANSITION,
        }))
        return self

    def add_youtube(self, url: str, name: Optional[str] = None) -> "Presentation":
        embed_url = get_youtube_embed_url(url)
        if embed_url is None:
            if self.strict:
                raise ValueError(f"Not a YouTube URL: {url}")
            logger.warning("Invalid YouTube URL skipped: %s", url)
            return self
        self._media_queue.append(YouTubeMediaItem.model_validate({
            "id": generate_id(),
            "type": "youtube",
            "name": name or "YouTube Video",
            "url": url,
            "embedUrl": embed_url,
            "transition": DEFAULT_TRANSITION,
        }))
        return self

    def add_website(self, url: str, name: Optional[str] = None) -> "Presentation":
        self._media_queue.append(WebsiteMediaItem.model_validate({
            "id": generate_id(),
            "type": "url",
            "name": name or f"Website: {url}",
            "url": url,
            "transition": DEFAULT_TRANSITION,
        }))
        return self

    def add_source(self, source: Source) -> "Presentation":
        self._sources.append(source.build())
        return self

    def build(self) -> VisualPresentation:
        """Finalize into an immutable VisualPresentation."""
        return VisualPresentation.model_validate({
            "title": self.title,
            "mediaQueue": list(self._media_queue),
            "sources": list(self._sources),
        })

    to_json = build
