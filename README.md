# queens_solver

Solves the colour-region queens puzzle. The board is n×n, and each cell
belongs to a coloured region. The solver places exactly one queen in every
row, every column and every colour region. Queens in neighbouring rows may
not touch diagonally.

A board can be read from either of two inputs:

* the HTML of the puzzle grid, using `queens_solver.html_parser.parse_board`;
* a screenshot of the grid, using `queens_solver.image_processor.process_image`
  or `BoardImage`.

## Installation

```
pip install .
```

## Usage

### Solving a board

```python
from queens_solver.game_logic import CellColor, queens

board = [[CellColor.SOFT_BLUE, ...], ...]   # n rows of n cells
solution = queens(board)
```

`queens(board)` accepts any square grid of hashable cell values. In
practice these are `CellColor` members. It returns the flattened index
`row * n + col` of each queen, listed row by row. The solver backtracks
through the rows in order and returns the first placement it finds. If no
placement exists, it raises `NoSolutionError`, which is a subclass of
`ValueError`.

### From HTML

```python
from queens_solver.html_parser import parse_board
from queens_solver.game_logic import queens

with open("board.html", encoding="utf-8") as fh:
    board = parse_board(fh.read())

print(queens(board))
```

`parse_board` works as follows:

* It finds the `div` with id `queens-grid`.
* It reads the board size from the `--rows: N;` and `--cols: N;` entries of
  that element's `style` attribute.
* It reads every `div` with class `queens-cell-with-border`. The cell's
  `aria-label` gives its position and colour, for example
  `"Queen of color Soft Blue, row 1, column 2"`. Row and column numbers start
  at 1.

If a cell is missing from the markup, that cell is set to `CellColor.LAVENDER`.

`parse_board` raises `BoardParseError`, a subclass of `ValueError`, in these
cases:

* the grid element is missing;
* the grid has no style;
* the dimensions are missing or not numbers;
* a cell has no label;
* a label has no readable row, column or colour;
* a label gives a position outside the board.

### From a screenshot

```python
from PIL import Image
from queens_solver.image_processor import BoardImage, process_image
from queens_solver.game_logic import queens

board = process_image("board.png")        # a path, str or os.PathLike
print(queens(board))

with Image.open("board.png") as img:      # or an already opened image
    board = BoardImage(img).get_board_colors()
```

The screenshot must be cropped to the grid, and the grid lines must be pure
black (`0, 0, 0`).

`BoardImage` measures the image as follows:

* It finds the centre of each grid line with `detect_lines(image,
  is_horizontal)`.
* It takes the cell size as the mean gap between lines, using
  `calculate_average_gap(lines)`.
* It samples one pixel in each cell, a quarter in from the cell's left edge
  and a quarter up from its bottom edge.
* It maps that pixel to the nearest known colour by Manhattan distance, using
  `detect_single_color(pixel)`.

`ImageProcessingError`, a subclass of `ValueError`, is raised in these cases:

* fewer than six grid lines are found in either direction;
* the cell size comes out as zero;
* the grid is not square;
* a sample point falls outside the image;
* a pixel's distance from every known colour is more than 100.

### Colours

`CellColor` lists the ten region colours:

* Peach Orange
* Soft Blue
* Pastel Green
* Light Gray
* Vibrant Coral
* Lime Yellow
* Lavender
* Warm Beige
* Dark Gray
* Pink

`CellColor.from_aria_label(label)` returns the first colour whose name
appears in the label. It returns `None` if the label names no known colour.

### Logging

The HTML and image readers report what they find through the standard
`logging` module at DEBUG level. The loggers are named
`queens_solver.html_parser` and `queens_solver.image_processor`.

## What this package does not do

This is a library only:

* it has no command-line program;
* it does not open a browser or fetch the puzzle page;
* it does not enter a solution into the game.

You supply the grid HTML or a screenshot, and the package returns the cells
where the queens go.

## Running the tests

```
pip install .[test]
pytest
```