"""Read a queens board out of the game's HTML markup."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from queens_solver.game_logic import CellColor

__all__ = ["BoardParseError", "parse_board"]

_log = logging.getLogger(__name__)


class BoardParseError(ValueError):
    """Raised when the HTML does not describe a readable board."""


def _parse_count(text: str, what: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise BoardParseError(f"Could not parse {what} as number: {text!r}")
    return int(text)


def _style_dimension(style: str, key: str) -> int:
    parts = style.split(f"--{key}: ")
    if len(parts) < 2:
        raise BoardParseError(f"Could not find --{key} in style")
    return _parse_count(parts[1].split(";")[0].strip(), key)


def _label_position(label: str) -> tuple[int, int]:
    row_parts = label.split("row ")
    col_parts = label.split("column ")
    if len(row_parts) < 2:
        raise BoardParseError(f"Could not parse row number in {label!r}")
    if len(col_parts) < 2:
        raise BoardParseError(f"Could not parse column number in {label!r}")
    row = _parse_count(row_parts[1].split(",")[0], "row")
    col = _parse_count(col_parts[1], "column")
    if row == 0 or col == 0:
        raise BoardParseError(f"Row and column numbers start at 1: {label!r}")
    return row - 1, col - 1


def parse_board(html_content: str) -> list[list[CellColor]]:
    """Return the grid of cell colours described by the board HTML.

    Cells missing from the markup keep the colour Lavender.
    """
    _log.debug("Parsing HTML content of length: %d", len(html_content))
    document = BeautifulSoup(html_content, "html.parser")

    grid = document.find("div", id="queens-grid")
    if grid is None:
        raise BoardParseError("Could not find queens-grid element")
    style = grid.get("style")
    if style is None:
        raise BoardParseError("Grid element has no style attribute")

    rows = _style_dimension(style, "rows")
    cols = _style_dimension(style, "cols")
    _log.debug("Board dimensions: %dx%d", rows, cols)

    board = [[CellColor.LAVENDER] * cols for _ in range(rows)]
    cells_found = 0
    for cell in document.find_all("div", class_="queens-cell-with-border"):
        label = cell.get("aria-label")
        if label is None:
            raise BoardParseError("Cell has no aria-label")
        row, col = _label_position(label)
        color = CellColor.from_aria_label(label)
        if color is None:
            raise BoardParseError(f"Could not parse cell color in {label!r}")
        if row >= rows or col >= cols:
            raise BoardParseError(f"Cell outside the {rows}x{cols} board: {label!r}")
        board[row][col] = color
        cells_found += 1

    _log.debug("Found %d cells out of %d total cells", cells_found, rows * cols)
    return board