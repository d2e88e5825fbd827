"""Tests for builder.py."""

import logging

import pytest

from visually.builder import DEFAULT_BACKGROUND, Presentation, Slide, Source
from visually.kernel.parser import parse_visual_file
from visually.kernel.schema import (
    CreatedSlideMediaItem,
    ImageMediaItem,
    TextSlideElement,
    VisualPresentation,
    WebsiteMediaItem,
    YouTubeMediaItem,
)
from visually.kernel.serialize import dumps, to_dict


def _welcome_slide() -> Slide:
    return (
        Slide("Welcome")
        .set_background("#102030")
        .add_text("Hello", x=50, y=40, font_size=48, color="#FFFFFF", font_family="Inter",
                  text_align="center")
        .add_image("https://example.com/map.png", x=100, y=200, width=320, height=240, alt="Map")
    )


def _deck() -> VisualPresentation:
    return (
        Presentation("Field trip")
        .add_slide(_welcome_slide())
        .add_image("https://example.com/photos/lake.jpg")
        .add_youtube("https://www.youtube.com/watch?v=dQw4w9WgXcQ", name="Intro")
        .add_website("https://example.com/survey")
        .add_source(Source("Lake survey", "https://example.com/survey").with_notes("p. 12").with_tags(["lakes"]))
        .add_source(Source("Map", "https://example.com/map"))
        .build()
    )


def test_build_presentation():
    """Test building a presentation with every media kind."""
    deck = _deck()

    assert deck.title == "Field trip"
    assert [type(item) for item in deck.media_queue] == [
        CreatedSlideMediaItem, ImageMediaItem, YouTubeMediaItem, WebsiteMediaItem,
    ]
    assert all(item.transition == "fade" for item in deck.media_queue)
    assert len(set(deck.media_ids())) == 4


def test_default_names():
    deck = (
        Presentation("Names")
        .add_image("https://example.com/photos/lake.jpg")
        .add_youtube("https://youtu.be/dQw4w9WgXcQ")
        .add_website("https://example.com")
        .add_slide(Slide("Agenda"))
        .build()
    )
    assert [item.name for item in deck.media_queue] == [
        "Image: lake.jpg",
        "YouTube Video",
        "Website: https://example.com",
        "Agenda",
    ]


def test_youtube_item_keeps_original_and_embed_url():
    item = _deck().media_queue[2]
    assert item.url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert item.embed_url == "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ"
    assert item.name == "Intro"


def test_invalid_youtube_url_skipped(caplog):
    builder = Presentation("Skip")
    with caplog.at_level(logging.WARNING, logger="visually.builder"):
        builder.add_youtube("https://example.com/video")
    assert len(builder) == 0
    assert "Invalid YouTube URL skipped: https://example.com/video" in caplog.text


def test_invalid_youtube_url_strict():
    with pytest.raises(ValueError, match="Not a YouTube URL"):
        Presentation("Strict", strict=True).add_youtube("https://example.com/video")


def test_slide_build():
    slide = _welcome_slide().build()
    assert slide.title == "Welcome"
    assert slide.background_color == "#102030"
    text, image = slide.elements
    assert isinstance(text, TextSlideElement)
    assert (text.width, text.height) == (700, 100)
    assert text.text_align == "center"
    assert image.alt == "Map"


def test_slide_defaults():
    slide = Slide("Blank").add_text("x", x=0, y=0, font_size=12, color="#000", font_family="Arial").build()
    assert slide.background_color == DEFAULT_BACKGROUND
    assert slide.elements[0].text_align is None
    assert Slide("Blank").get_title() == "Blank"


def test_slide_item_carries_slide_title_and_id():
    slide = _welcome_slide()
    item = Presentation("x").add_slide(slide).build().media_queue[0]
    assert item.name == "Welcome"
    assert item.slide.id == slide.id
    assert item.id != slide.id


def test_source_build():
    tags = ["a", "a"]
    source = Source("Paper", "https://example.com/paper").with_tags(tags)
    tags.append("b")
    built = source.build()
    assert built.tags == ("a", "a")
    assert built.notes is None

    plain = Source("Paper", "https://example.com/paper").build()
    assert plain.notes is None
    assert plain.tags is None


def test_absent_optionals_not_serialized():
    out = to_dict(Presentation("x").add_source(Source("t", "u")).build())
    assert out["sources"][0] == {"id": out["sources"][0]["id"], "title": "t", "url": "u"}


def test_builder_output_round_trips():
    deck = _deck()
    assert parse_visual_file(dumps(deck)) == deck


def test_to_json_alias():
    builder = Presentation("Alias").add_website("https://example.com")
    assert builder.to_json() == builder.build()
