"""A registry that hands out copies of named prototype elements."""

from __future__ import annotations

from collections.abc import Sequence

from patternkit.documents import Chart, DocumentElement, Image, Table, TextBox


class PrototypeRegistry:
    """Keeps prototypes by key and makes clones of them on request."""

    def __init__(self) -> None:
        self._prototypes: dict[str, DocumentElement] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)

    def register_prototype(self, key: str, prototype: DocumentElement) -> None:
        """Store ``prototype`` under ``key``, replacing any earlier one."""
        self._prototypes[key] = prototype

    def create_clone(self, key: str) -> DocumentElement:
        """Return a fresh clone of the prototype stored under ``key``."""
        try:
            prototype = self._prototypes[key]
        except KeyError:
            raise KeyError(f"no prototype registered under {key!r}") from None
        return prototype.clone()


def main(argv: Sequence[str] | None = None) -> int:
    """Register sample prototypes, clone them and print the clones."""
    registry = PrototypeRegistry()

    default_table = Table(3, 3)
    for col, header in enumerate(("Header1", "Header2", "Header3")):
        default_table.set_cell(0, col, header)

    default_chart = Chart("Sales Chart")
    for value in (10, 20, 30):
        default_chart.add_data_point(value)

    registry.register_prototype("TextBox", TextBox("Default Text", 12))
    registry.register_prototype("Image", Image("default.png", 300, 200))
    registry.register_prototype("Table", default_table)
    registry.register_prototype("Chart", default_chart)

    clones = [registry.create_clone(key) for key in ("TextBox", "Image", "Table", "Chart")]
    for element in clones:
        if isinstance(element, TextBox):
            element.text = "Hello, Prototype Pattern!"

    print("Cloned Document Elements:")
    for element in clones:
        element.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())