"""
PPTX serialization of the document model.

Builds a 16:9 presentation with python-pptx: one blank-layout slide per page,
a solid background fill and one textbox per text block.
"""
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

from aippt.models.document import DocumentModel, Page, TextBlock
from aippt.services.renderer.layouts import SLIDE_HEIGHT_IN, SLIDE_WIDTH_IN

BLANK_LAYOUT_INDEX = 6
BULLET_CHAR = "•"
BULLET_INDENT_EMU = 285750


def _set_bullet(paragraph) -> None:
    """Give a paragraph a bullet character with a hanging indent."""
    p_pr = paragraph._p.get_or_add_pPr()
    p_pr.set("marL", str(BULLET_INDENT_EMU))
    p_pr.set("indent", str(-BULLET_INDENT_EMU))
    for tag in ("a:buNone", "a:buAutoNum", "a:buChar"):
        for old in p_pr.findall(qn(tag)):
            p_pr.remove(old)
    etree.SubElement(p_pr, qn("a:buChar")).set("char", BULLET_CHAR)


def _add_block(slide, block: TextBlock) -> None:
    shape = slide.shapes.add_textbox(
        Inches(block.x), Inches(block.y), Inches(block.width), Inches(block.height)
    )
    frame = shape.text_frame
    frame.word_wrap = True
    color = RGBColor.from_string(block.color)

    for i, line in enumerate(block.lines):
        paragraph = frame.paragraphs[0] if i == 0 else frame.add_paragraph()
        paragraph.alignment = PP_ALIGN.CENTER if block.centered else PP_ALIGN.LEFT
        if block.bulleted:
            _set_bullet(paragraph)
        run = paragraph.add_run()
        run.text = line
        font = run.font
        font.size = Pt(block.font_size)
        font.bold = block.bold
        font.color.rgb = color


def _add_page(presentation, page: Page) -> None:
    slide = presentation.slides.add_slide(presentation.slide_layouts[BLANK_LAYOUT_INDEX])
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = RGBColor.from_string(page.background)
    for block in page.blocks:
        _add_block(slide, block)


def build_presentation(document: DocumentModel):
    """Build a python-pptx Presentation from a document model."""
    presentation = Presentation()
    presentation.slide_width = Inches(SLIDE_WIDTH_IN)
    presentation.slide_height = Inches(SLIDE_HEIGHT_IN)
    for page in document.pages:
        _add_page(presentation, page)
    return presentation


def write_pptx(document: DocumentModel, target: Union[str, Path, BinaryIO]) -> None:
    """Serialize a document model to a .pptx file or binary stream."""
    build_presentation(document).save(target)
