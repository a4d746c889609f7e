"""Text wrapping, number formatting and name lookups shared by the widgets."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import IntEnum

log = logging.getLogger(__name__)

MAX_WRAPPED_LINES = 10


class Color(IntEnum):
    """RGB565 colours understood by the displays."""

    BLACK = 0x0000
    NAVY = 0x000F
    DARKGREEN = 0x03E0
    DARKCYAN = 0x03EF
    MAROON = 0x7800
    PURPLE = 0x780F
    OLIVE = 0x7BE0
    LIGHTGREY = 0xD69A
    DARKGREY = 0x7BEF
    BLUE = 0x001F
    GREEN = 0x07E0
    CYAN = 0x07FF
    RED = 0xF800
    MAGENTA = 0xF81F
    YELLOW = 0xFFE0
    WHITE = 0xFFFF
    ORANGE = 0xFDA0
    GREENYELLOW = 0xB7E0
    PINK = 0xFE19
    BROWN = 0x9A60
    GOLD = 0xFEA0
    SILVER = 0xC618
    SKYBLUE = 0x867D
    VIOLET = 0x915C


class Datum(IntEnum):
    """Text reference points used when drawing strings."""

    TL = 0
    TC = 1
    TR = 2
    ML = 3
    CL = 3
    MC = 4
    CC = 4
    MR = 5
    CR = 5
    BL = 6
    BC = 7
    BR = 8
    L_BASELINE = 9
    C_BASELINE = 10
    R_BASELINE = 11


_COLOR_NAMES = {
    "black": Color.BLACK,
    "navy": Color.NAVY,
    "darkgreen": Color.DARKGREEN,
    "darkcyan": Color.DARKCYAN,
    "maroon": Color.MAROON,
    "purple": Color.PURPLE,
    "olive": Color.OLIVE,
    "lightgrey": Color.LIGHTGREY,
    "grey": Color.LIGHTGREY,
    "darkgrey": Color.DARKGREY,
    "blue": Color.BLUE,
    "green": Color.GREEN,
    "cyan": Color.CYAN,
    "red": Color.RED,
    "magenta": Color.MAGENTA,
    "yellow": Color.YELLOW,
    "white": Color.WHITE,
    "orange": Color.ORANGE,
    "greenyellow": Color.GREENYELLOW,
    "pink": Color.PINK,
    "brown": Color.BROWN,
    "gold": Color.GOLD,
    "silver": Color.SILVER,
    "skyblue": Color.SKYBLUE,
    "vilolet": Color.VIOLET,
}

_ALIGNMENTS = {
    "tl": Datum.TL,
    "tc": Datum.TC,
    "tr": Datum.TR,
    "ml": Datum.ML,
    "mc": Datum.MC,
    "mr": Datum.MR,
    "bl": Datum.BL,
    "bc": Datum.BC,
    "br": Datum.BR,
    "cl": Datum.CL,
    "cc": Datum.CC,
    "cr": Datum.CR,
    "l": Datum.L_BASELINE,
    "c": Datum.C_BASELINE,
    "r": Datum.R_BASELINE,
}


def _wrap(text: str, limit: int, max_lines: int) -> Iterator[str]:
    """Yield wrapped lines, breaking at newlines or the last space within limit."""
    pos = 0
    length = len(text)
    for _ in range(max_lines):
        if pos > length:
            return
        end = text.find("\n", pos)
        if end == -1:
            end = length
        if end - pos > limit:
            end = pos + limit
            while end > pos and text[end] not in " \n":
                end -= 1
        yield text[pos:end]
        pos = end + 1


def get_wrapped_lines(text: str, limit: int) -> list[str]:
    """Wrap text into at most MAX_WRAPPED_LINES lines of up to limit characters."""
    return list(_wrap(text, limit, MAX_WRAPPED_LINES))


def get_wrapped_line(text: str, limit: int, line_num: int, max_lines: int) -> str:
    """Return one line of the wrapped text, or an empty string if there is none."""
    if line_num > max_lines or line_num < 0:
        return ""
    lines = list(_wrap(text, limit, min(max_lines, line_num + 1)))
    return lines[line_num] if line_num < len(lines) else ""


def string_to_color(color: str) -> Color:
    """Look up a colour by name; unknown names give black."""
    key = color.lower().replace(" ", "")
    try:
        return _COLOR_NAMES[key]
    except KeyError:
        log.warning("Invalid color: %s", key)
        return Color.BLACK


def format_float(value: float, digits: int) -> str:
    """Format a number with a fixed count of decimal places."""
    return f"{value:.{max(digits, 0)}f}"


def string_to_alignment(alignment: str) -> Datum:
    """Map an alignment abbreviation such as "mc" or "tl" to a text datum.

    Only the text before the first space is considered; unknown values give TL.
    """
    key = alignment.lower()
    space = key.find(" ")
    if space != -1:
        key = key[: space + 1]
    key = key.replace(" ", "")
    return _ALIGNMENTS.get(key, Datum.TL)