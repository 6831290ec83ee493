"""
Tests for the deck renderer.
"""
import typing

import pytest

from aippt.models import (
    ContentItem,
    ContentSlide,
    ContentsSlide,
    CoverSlide,
    EndSlide,
    Language,
    SlideRecord,
    Theme,
    TransitionSlide,
    parse_slide_record,
)
from aippt.services.renderer import DeckRenderer, content_line
from aippt.services.renderer import layouts

THEME = Theme(background="101010", accent="AA0000", font_color="00AA00")


@pytest.fixture
def renderer():
    return DeckRenderer()


class TestDispatch:
    """Tests for per-record dispatch."""

    def test_every_slide_type_has_a_layout(self, renderer):
        """Test the layout table covers the whole slide record union."""
        assert set(renderer.supported_types) == set(typing.get_args(SlideRecord))

    def test_one_page_per_known_record(self, renderer, wire_slides):
        """Test unknown records contribute no page and order is preserved."""
        records = wire_slides[:3] + [{"type": "chart", "data": {}}] + wire_slides[3:] + [None, "text"]

        document = renderer.render(records, THEME, "English")

        assert len(document) == 5
        first_texts = [page.blocks[0].text for page in document.pages]
        assert first_texts == ["AI in Education", "Contents", "Background", "Practice", "Thank you"]

    def test_every_page_uses_theme_background(self, renderer, wire_slides):
        """Test pages carry the theme background color."""
        document = renderer.render(wire_slides, THEME, "English")
        assert {page.background for page in document.pages} == {"101010"}

    def test_empty_input(self, renderer):
        """Test no records yields an empty document."""
        assert len(renderer.render([], THEME, "English")) == 0


class TestCover:
    """Tests for the cover layout."""

    def test_title_and_subtitle(self, renderer):
        """Test cover title and subtitle blocks."""
        page = renderer.render([CoverSlide(title="A", subtitle="B")], THEME).pages[0]
        title, subtitle = page.blocks

        assert (title.text, title.color, title.bold, title.centered) == ("A", "AA0000", True, True)
        assert title.font_size == layouts.COVER_TITLE.font_size
        assert (subtitle.text, subtitle.color, subtitle.centered) == ("B", "00AA00", True)
        assert subtitle.y == layouts.COVER_SUBTITLE.y

    def test_placeholder_title(self, renderer):
        """Test a cover without text gets only a placeholder title."""
        page = renderer.render([{"type": "cover"}], THEME, "English").pages[0]

        assert [block.text for block in page.blocks] == ["Title"]

    def test_placeholder_title_chinese_default(self, renderer):
        """Test unknown languages fall back to Chinese labels."""
        page = renderer.render([CoverSlide()], THEME, "Elvish").pages[0]
        assert page.blocks[0].text == "标题"


class TestContents:
    """Tests for the contents layout."""

    def test_heading_and_bulleted_items(self, renderer):
        """Test contents heading label and joined bullet block."""
        page = renderer.render([ContentsSlide(items=["x", "", "y"])], THEME, "中文").pages[0]
        heading, items = page.blocks

        assert heading.text == "目录"
        assert heading.centered is False
        assert heading.color == "AA0000"
        assert items.text == "x\ny"
        assert items.bulleted is True
        assert items.color == "00AA00"

    def test_no_items(self, renderer):
        """Test contents without items renders the heading only."""
        page = renderer.render([ContentsSlide()], THEME, "English").pages[0]
        assert [block.text for block in page.blocks] == ["Contents"]


class TestTransition:
    """Tests for the transition layout."""

    def test_title_and_body(self, renderer):
        """Test centered title and body."""
        page = renderer.render([TransitionSlide(title="Part 1", body="Intro")], THEME).pages[0]

        assert [block.text for block in page.blocks] == ["Part 1", "Intro"]
        assert all(block.centered for block in page.blocks)

    def test_fallback_title(self, renderer):
        """Test a missing title uses the language label."""
        page = renderer.render([TransitionSlide()], THEME, "English").pages[0]
        assert [block.text for block in page.blocks] == ["Part"]


class TestContent:
    """Tests for the content layout."""

    def test_lines_with_and_without_heading(self, renderer):
        """Test item lines are composed with a full-width colon."""
        slide = ContentSlide(title="Why", items=[
            ContentItem(heading="Speed", body="fast"),
            ContentItem(body="cheap"),
            ContentItem(),
        ])
        page = renderer.render([slide], THEME).pages[0]
        heading, body = page.blocks

        assert heading.text == "Why"
        assert body.text == "Speed：fast\ncheap"
        assert body.bulleted is True
        assert body.x == layouts.CONTENT_LIST.x

    def test_empty_content_still_yields_page(self, renderer):
        """Test a content record with nothing renderable still produces a page."""
        document = renderer.render([ContentSlide(items=[ContentItem()])], THEME)

        assert len(document) == 1
        assert document.pages[0].blocks == ()

    def test_content_line(self):
        """Test line composition helper."""
        assert content_line("a", "b") == "a：b"
        assert content_line("", "b") == "b"
        assert content_line("", "") == ""


class TestEndToEnd:
    """Tests for a small deck."""

    def test_cover_contents_end_in_english(self, renderer):
        """Test the three-page English deck from wire records."""
        records = [
            parse_slide_record({"type": "cover", "data": {"title": "A"}}),
            parse_slide_record({"type": "contents", "data": {"items": ["x", "y"]}}),
            parse_slide_record({"type": "end", "data": {}}),
        ]

        document = renderer.render(records, Theme(), Language.ENGLISH)

        assert len(document) == 3
        bulleted = [block for block in document.pages[1].blocks if block.bulleted]
        assert [block.text for block in bulleted] == ["x\ny"]
        assert [block.text for block in document.pages[2].blocks] == ["Thank you"]
        assert isinstance(records[2], EndSlide)
