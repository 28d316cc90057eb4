"""Document elements that are copied from prototypes rather than built anew."""

from __future__ import annotations

import copy
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _emit(element: object) -> None:
    line = f"{element}\n"
    sys.stdout.write(line)


class DocumentElement(ABC):
    """An element of a document that can copy and print itself."""

    def clone(self) -> DocumentElement:
        """Return an independent copy of this element."""
        return copy.deepcopy(self)

    @abstractmethod
    def __str__(self) -> str:
        """Describe the element as it is printed."""

    def print(self) -> None:
        """Write the element's description to standard output."""
        line = f"{self}\n"
        sys.stdout.write(line)


@dataclass
class TextBox(DocumentElement):
    """A block of text in a given font size."""

    text: str = ""
    font_size: int = 12

    def clone(self) -> TextBox:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f'TextBox: "{self.text}" (Font size: {self.font_size})'

    def print(self) -> None:
        line = f"{self}\n"
        sys.stdout.write(line)


@dataclass
class Image(DocumentElement):
    """A picture taken from a file, with its size in pixels."""

    image_path: str = ""
    width: int = 0
    height: int = 0

    def clone(self) -> Image:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"Image: {self.image_path} ({self.width}x{self.height})"

    def print(self) -> None:
        line = f"{self}\n"
        sys.stdout.write(line)


@dataclass
class Table(DocumentElement):
    """A grid of text cells of fixed size."""

    rows: int = 0
    cols: int = 0
    cells: list[list[str]] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [["" for _ in range(self.cols)] for _ in range(self.rows)]

    def set_cell(self, row: int, col: int, value: str) -> None:
        """Set one cell; positions outside the table are ignored."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            self.cells[row][col] = value

    def clone(self) -> Table:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        lines = [f"Table ({self.rows}x{self.cols}):"]
        lines.extend("".join(f"{cell}\t" for cell in row) for row in self.cells)
        return "\n".join(lines)

    def print(self) -> None:
        line = f"{self}\n"
        sys.stdout.write(line)


@dataclass
class Chart(DocumentElement):
    """A titled series of integer data points."""

    title: str = ""
    data_points: list[int] = field(default_factory=list)

    def add_data_point(self, value: int) -> None:
        """Append a value to the series."""
        self.data_points.append(value)

    def clone(self) -> Chart:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        points = "".join(f"{value} " for value in self.data_points)
        return f"Chart: {self.title} Data Points: {points}"

    def print(self) -> None:
        line = f"{self}\n"
        sys.stdout.write(line)