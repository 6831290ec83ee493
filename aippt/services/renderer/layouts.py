"""Fixed block geometry for each slide type (inches on a 10 x 5.625 canvas)."""
from typing import NamedTuple

SLIDE_WIDTH_IN = 10.0
SLIDE_HEIGHT_IN = 5.625

CONTENT_SEPARATOR = "："


class BlockLayout(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    font_size: int
    bold: bool = False
    centered: bool = False
    bulleted: bool = False


COVER_TITLE = BlockLayout(0.5, 1.0, 9, 1.2, 32, bold=True, centered=True)
COVER_SUBTITLE = BlockLayout(1.0, 2.2, 8, 1.5, 18, centered=True)

CONTENTS_HEADING = BlockLayout(0.5, 0.7, 9, 1.0, 28, bold=True)
CONTENTS_LIST = BlockLayout(1.0, 1.8, 8, 4, 18, bulleted=True)

TRANSITION_TITLE = BlockLayout(0.5, 1.2, 9, 1.2, 30, bold=True, centered=True)
TRANSITION_BODY = BlockLayout(1.0, 2.5, 8, 2.5, 20, centered=True)

CONTENT_HEADING = BlockLayout(0.5, 0.7, 9, 1.0, 26, bold=True)
CONTENT_LIST = BlockLayout(0.8, 1.8, 8.4, 4, 18, bulleted=True)

END_TEXT = BlockLayout(0.5, 2.0, 9, 1.5, 30, bold=True, centered=True)
