"""Houses assembled step by step by interchangeable builders."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    """A house described by its four main parts."""

    walls: str = ""
    roof: str = ""
    doors: str = ""
    windows: str = ""

    def __str__(self) -> str:
        return (
            f"House with {self.walls} walls, {self.roof} roof, "
            f"{self.doors} doors, and {self.windows} windows."
        )

    def show(self) -> None:
        """Print a one-line description of the house."""
        line = f"{self}\n"
        sys.stdout.write(line)


class HouseBuilder(ABC):
    """Builds one house at a time; subclasses choose the materials."""

    def __init__(self) -> None:
        self.house: House | None = None

    def create_new_house(self) -> House:
        """Start a fresh, empty house and return it."""
        self.house = House()
        return self.house

    def _current(self) -> House:
        if self.house is None:
            raise RuntimeError("no house under construction; call create_new_house() first")
        return self.house

    @abstractmethod
    def build_walls(self) -> None:
        """Put up the walls."""

    @abstractmethod
    def build_roof(self) -> None:
        """Put on the roof."""

    @abstractmethod
    def build_doors(self) -> None:
        """Fit the doors."""

    @abstractmethod
    def build_windows(self) -> None:
        """Fit the windows."""


class WoodenHouseBuilder(HouseBuilder):
    """Builds houses out of wood."""

    def build_walls(self) -> None:
        self._current().walls = "wooden"

    def build_roof(self) -> None:
        self._current().roof = "wooden shingles"

    def build_doors(self) -> None:
        self._current().doors = "wooden doors"

    def build_windows(self) -> None:
        self._current().windows = "glass windows"


class StoneHouseBuilder(HouseBuilder):
    """Builds houses out of stone."""

    def build_walls(self) -> None:
        self._current().walls = "stone"

    def build_roof(self) -> None:
        self._current().roof = "stone slab roof"

    def build_doors(self) -> None:
        self._current().doors = "metal doors"

    def build_windows(self) -> None:
        self._current().windows = "reinforced glass windows"


class GlassHouseBuilder(HouseBuilder):
    """Builds houses out of glass."""

    def build_walls(self) -> None:
        self._current().walls = "glass panels"

    def build_roof(self) -> None:
        self._current().roof = "glass roof"

    def build_doors(self) -> None:
        self._current().doors = "glass doors"

    def build_windows(self) -> None:
        self._current().windows = "floor-to-ceiling windows"