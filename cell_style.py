"""Day-cell colours derived from a DayState, independent of any toolkit."""

from typing import NamedTuple

from selection import DayState

# Colours
ACCENT = "#0078D4"
GRID_BG = "white"
TEXT_FG = "black"
SELECTED_FG = "white"

ENDPOINT_ALPHA = 1.0
INTERIOR_ALPHA = 0.6
RANGE_ALPHA = 0.2


class CellStyle(NamedTuple):
    bg: str
    fg: str
    bold: bool = False


def _parse_hex(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected #RRGGBB colour, got {color!r}")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        raise ValueError(f"expected #RRGGBB colour, got {color!r}") from None


def blend(color: str, alpha: float, over: str = "#FFFFFF") -> str:
    """Return *color* painted at *alpha* opacity over *over*, as #RRGGBB."""
    fr, fg, fb = _parse_hex(color)
    br, bg, bb = _parse_hex(over)
    mix = [round(f * alpha + b * (1 - alpha)) for f, b in ((fr, br), (fg, bg), (fb, bb))]
    return "#{:02X}{:02X}{:02X}".format(*mix)


def cell_style(state: DayState, accent: str = ACCENT) -> CellStyle:
    if state is DayState.ENDPOINT:
        return CellStyle(blend(accent, ENDPOINT_ALPHA), SELECTED_FG, bold=True)
    if state is DayState.SELECTED:
        return CellStyle(blend(accent, INTERIOR_ALPHA), SELECTED_FG)
    if state is DayState.IN_RANGE:
        return CellStyle(blend(accent, RANGE_ALPHA), accent)
    return CellStyle(GRID_BG, TEXT_FG)
