import pytest

from queens_solver.game_logic import CellColor
from queens_solver.html_parser import BoardParseError, parse_board


def _cell(color_name, row, col):
    return (
        '<div class="queens-cell queens-cell-with-border" '
        f'aria-label="Cell of color {color_name}, row {row}, column {col}"></div>'
    )


def _html(board, style=None, extra=""):
    rows = len(board)
    cols = len(board[0]) if board else 0
    if style is None:
        style = f"--rows: {rows}; --cols: {cols};"
    cells = "".join(
        _cell(color.value, r + 1, c + 1)
        for r, line in enumerate(board)
        for c, color in enumerate(line)
    )
    return (
        f'<html><body><div id="queens-grid" style="{style}">'
        f"{cells}{extra}</div></body></html>"
    )


def test_round_trip_full_board():
    palette = list(CellColor)
    board = [[palette[(r * 3 + c) % len(palette)] for c in range(5)] for r in range(5)]
    assert parse_board(_html(board)) == board


def test_missing_cells_default_to_lavender():
    html = (
        '<div id="queens-grid" style="--rows: 2; --cols: 2;">'
        + _cell("Pink", 1, 2)
        + "</div>"
    )
    assert parse_board(html) == [
        [CellColor.LAVENDER, CellColor.PINK],
        [CellColor.LAVENDER, CellColor.LAVENDER],
    ]


def test_dimensions_from_style_with_other_properties():
    html = '<div id="queens-grid" style="display: grid; --rows: 3; --cols: 3;"></div>'
    board = parse_board(html)
    assert len(board) == 3
    assert all(len(line) == 3 for line in board)


def test_missing_grid():
    with pytest.raises(BoardParseError, match="queens-grid"):
        parse_board("<div id='other'></div>")


def test_grid_without_style():
    with pytest.raises(BoardParseError, match="style"):
        parse_board('<div id="queens-grid"></div>')


def test_style_without_rows():
    with pytest.raises(BoardParseError, match="--rows"):
        parse_board('<div id="queens-grid" style="--cols: 3;"></div>')


def test_non_numeric_cols():
    with pytest.raises(BoardParseError):
        parse_board('<div id="queens-grid" style="--rows: 3; --cols: x;"></div>')


def test_cell_without_label():
    html = _html([[CellColor.PINK]], extra='<div class="queens-cell-with-border"></div>')
    with pytest.raises(BoardParseError, match="aria-label"):
        parse_board(html)


def test_unknown_color():
    html = '<div id="queens-grid" style="--rows: 1; --cols: 1;">' + _cell("Teal", 1, 1) + "</div>"
    with pytest.raises(BoardParseError, match="color"):
        parse_board(html)


def test_zero_row_number():
    html = '<div id="queens-grid" style="--rows: 1; --cols: 1;">' + _cell("Pink", 0, 1) + "</div>"
    with pytest.raises(BoardParseError):
        parse_board(html)


def test_cell_outside_board():
    html = '<div id="queens-grid" style="--rows: 1; --cols: 1;">' + _cell("Pink", 2, 1) + "</div>"
    with pytest.raises(BoardParseError):
        parse_board(html)


def test_bad_column_text():
    html = (
        '<div id="queens-grid" style="--rows: 1; --cols: 1;">'
        '<div class="queens-cell-with-border" aria-label="Pink, row 1, column one"></div>'
        "</div>"
    )
    with pytest.raises(BoardParseError, match="column"):
        parse_board(html)