"""visually: reader, writer and validator for .visual presentation files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("visually")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Reader
from visually.kernel.parser import parse_visual_file
from visually.kernel.errors import (
    ErrorKind,
    MalformedInputError,
    SchemaViolationError,
    VisualFileError,
)
# Writer
from visually.builder import Presentation, Slide, Source
from visually.kernel.serialize import dumps
# Converter
from visually.converter import ImageInput, from_image_urls
# Validation
from visually.api import validate, ValidationIssue, ValidationResult
from visually.codes import ValidationCode
# Core types
from visually.kernel.schema import (
    CreatedSlideMediaItem,
    ImageMediaItem,
    ImageSlideElement,
    MediaItem,
    PresentationSlide,
    SlideElement,
    SourceItem,
    TextSlideElement,
    VisualPresentation,
    WebsiteMediaItem,
    YouTubeMediaItem,
)

__all__ = [
    "__version__",
    "parse_visual_file",
    "ErrorKind",
    "MalformedInputError",
    "SchemaViolationError",
    "VisualFileError",
    "Presentation",
    "Slide",
    "Source",
    "dumps",
    "ImageInput",
    "from_image_urls",
    "validate",
    "ValidationIssue",
    "ValidationResult",
    "ValidationCode",
    "CreatedSlideMediaItem",
    "ImageMediaItem",
    "ImageSlideElement",
    "MediaItem",
    "PresentationSlide",
    "SlideElement",
    "SourceItem",
    "TextSlideElement",
    "VisualPresentation",
    "WebsiteMediaItem",
    "YouTubeMediaItem",
]
