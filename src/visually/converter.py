"""Convert other inputs into .visual presentations."""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from visually.builder import Presentation
from visually.kernel.schema import VisualPresentation


@dataclass(frozen=True)
class ImageInput:
    """An image URL with an optional display name."""
    url: str
    name: Optional[str] = None


def from_image_urls(
    title: str,
    images: Iterable[Union[ImageInput, Mapping[str, str], str]],
) -> VisualPresentation:
    """Turn a list of image URLs into a presentation, one image item each.

    Each entry may be an ImageInput, a mapping with "url" and optional
    "name", or a bare URL string.
    """
    presentation = Presentation(title)
    for image in images:
        if isinstance(image, str):
            image = ImageInput(url=image)
        elif isinstance(image, Mapping):
            image = ImageInput(url=image["url"], name=image.get("name"))
        presentation.add_image(image.url, image.name)
    return presentation.build()
