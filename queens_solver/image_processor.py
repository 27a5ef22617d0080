"""Read a queens board out of a screenshot of the game grid."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from os import PathLike
from typing import Union

from PIL import Image

from queens_solver.game_logic import CellColor

__all__ = [
    "BoardImage",
    "ImageProcessingError",
    "calculate_average_gap",
    "detect_lines",
    "detect_single_color",
    "process_image",
]

_log = logging.getLogger(__name__)

MIN_GRID_SIZE = 6
WINDOW_SIZE = 5
MAX_COLOR_DIFFERENCE = 100

COLOR_DEFINITIONS: tuple[tuple[tuple[int, int, int], CellColor], ...] = (
    ((241, 203, 154), CellColor.PEACH_ORANGE),
    ((229, 130, 104), CellColor.VIBRANT_CORAL),
    ((164, 190, 249), CellColor.SOFT_BLUE),
    ((190, 221, 166), CellColor.PASTEL_GREEN),
    ((223, 223, 223), CellColor.LIGHT_GRAY),
    ((183, 165, 221), CellColor.LAVENDER),
    ((231, 242, 151), CellColor.LIME_YELLOW),
    ((183, 178, 160), CellColor.DARK_GRAY),
    ((209, 163, 190), CellColor.PINK),
    ((241, 234, 218), CellColor.WARM_BEIGE),
)

_BLACK = (0, 0, 0)


class ImageProcessingError(ValueError):
    """Raised when an image cannot be read as a queens board."""


def _as_rgb(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGB" else image.convert("RGB")


def detect_single_color(pixel: Sequence[int]) -> CellColor:
    """Return the board colour nearest to ``pixel`` by Manhattan distance.

    Raises ImageProcessingError if even the nearest colour is too far away.
    """
    red, green, blue = pixel[:3]
    closest = CellColor.LIGHT_GRAY
    min_diff: float = float("inf")
    for (r, g, b), color in COLOR_DEFINITIONS:
        diff = abs(red - r) + abs(green - g) + abs(blue - b)
        if diff < min_diff:
            min_diff = diff
            closest = color
    if min_diff > MAX_COLOR_DIFFERENCE:
        raise ImageProcessingError(f"Color difference too large: {min_diff}")
    return closest


def calculate_average_gap(lines: Sequence[int]) -> int:
    """Return the mean distance between consecutive line positions, floored."""
    gaps = [after - before for before, after in zip(lines, lines[1:])]
    if not gaps:
        raise ImageProcessingError("At least two lines are needed to measure a gap")
    return sum(gaps) // len(gaps)


def detect_lines(image: Image.Image, is_horizontal: bool) -> list[int]:
    """Return the centre positions of the black grid lines in ``image``.

    Horizontal lines are reported as y coordinates, vertical ones as x.
    A line starts when the sliding average of black pixels per row (or
    column) exceeds a quarter of the image's other dimension and ends when
    it falls to an eighth of it.
    """
    rgb = _as_rgb(image)
    width, height = rgb.size
    black = [pixel[:3] == _BLACK for pixel in rgb.getdata()]

    if is_horizontal:
        secondary = width
        counts = [sum(black[y * width:(y + 1) * width]) for y in range(height)]
    else:
        secondary = height
        counts = [sum(black[x::width]) for x in range(width)]

    threshold = secondary // 4
    end_threshold = secondary // 8
    window: deque[int] = deque([0] * WINDOW_SIZE, maxlen=WINDOW_SIZE)
    lines: list[int] = []
    line_start: int | None = None

    for position, count in enumerate(counts):
        window.append(count)
        average = sum(window) // WINDOW_SIZE
        if line_start is None and average > threshold:
            line_start = position
        elif line_start is not None and average <= end_threshold:
            lines.append(line_start + (position - line_start) // 2)
            line_start = None

    return lines


class BoardImage:
    """A screenshot of a square board whose grid has been measured."""

    def __init__(self, image: Image.Image) -> None:
        self.image = _as_rgb(image)
        width, height = self.image.size
        _log.debug("Image dimensions: %dx%d", width, height)

        horizontal_lines = detect_lines(self.image, True)
        vertical_lines = detect_lines(self.image, False)
        _log.debug(
            "Found %d horizontal lines and %d vertical lines",
            len(horizontal_lines),
            len(vertical_lines),
        )

        if len(horizontal_lines) < MIN_GRID_SIZE or len(vertical_lines) < MIN_GRID_SIZE:
            raise ImageProcessingError(
                "Could not detect enough grid lines. Found "
                f"{len(horizontal_lines)} horizontal and "
                f"{len(vertical_lines)} vertical lines"
            )

        self.cell_height = calculate_average_gap(horizontal_lines)
        self.cell_width = calculate_average_gap(vertical_lines)
        _log.debug("Detected cell dimensions: %dx%d", self.cell_width, self.cell_height)
        if self.cell_height == 0 or self.cell_width == 0:
            raise ImageProcessingError("Invalid cell dimensions detected")

        self.grid_height = len(horizontal_lines) - 1
        self.grid_width = len(vertical_lines) - 1
        _log.debug("Detected grid dimensions: %dx%d", self.grid_width, self.grid_height)
        if self.grid_width != self.grid_height:
            raise ImageProcessingError(
                f"Board must be square (n*n), got {self.grid_width}x{self.grid_height}"
            )

    def _sample_point(self, row: int, col: int) -> tuple[int, int]:
        # One pixel in from the border, then a quarter in from the left
        # and a quarter up from the bottom of the cell.
        cell_x = 1 + col * (self.cell_width + 1)
        cell_y = 1 + row * (self.cell_height + 1)
        return cell_x + self.cell_width // 4, cell_y + (self.cell_height * 3) // 4

    def _cell_color(self, row: int, col: int) -> CellColor:
        x, y = self._sample_point(row, col)
        width, height = self.image.size
        if not (0 <= x < width and 0 <= y < height):
            raise ImageProcessingError(
                f"Sample point ({x}, {y}) for cell ({row}, {col}) lies outside the image"
            )
        return detect_single_color(self.image.getpixel((x, y)))

    def get_board_colors(self) -> list[list[CellColor]]:
        """Return the colour of every cell, row by row."""
        return [
            [self._cell_color(row, col) for col in range(self.grid_width)]
            for row in range(self.grid_height)
        ]


def process_image(image_path: Union[str, PathLike]) -> list[list[CellColor]]:
    """Open the screenshot at ``image_path`` and return its cell colours."""
    with Image.open(image_path) as image:
        board_image = BoardImage(image.convert("RGB"))
    return board_image.get_board_colors()