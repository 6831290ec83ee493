"""In-memory document model produced by the deck renderer."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextBlock:
    """
    One positioned text box on a page.

    Geometry is in inches on a 10 x 5.625 (16:9) canvas, font size in points.
    Multi-line text is split into one paragraph per line on export.
    """
    text: str
    x: float
    y: float
    width: float
    height: float
    font_size: int
    color: str
    bold: bool = False
    centered: bool = False
    bulleted: bool = False

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


@dataclass(frozen=True)
class Page:
    """A single slide: background color plus text blocks in paint order."""
    background: str
    blocks: tuple[TextBlock, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentModel:
    """Ordered pages of one rendered deck."""
    pages: tuple[Page, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self):
        return iter(self.pages)
