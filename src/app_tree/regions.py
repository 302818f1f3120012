"""Region lookup collaborators.

Rendering is out of scope here. A `View` only declares named regions, which
is all the child app lifecycle needs to hand a region to a child.
"""

from typing import Iterable


class Region:
    """A named placeholder a child app can be bound to."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<Region: {self.name}>"


class View:
    """A view exposing named regions."""

    def __init__(self, regions: Iterable[str] = ()):
        self._regions: dict[str, Region] = {name: Region(name) for name in regions}

    def get_region(self, name: str) -> Region | None:
        """Get a region by name, or None when the view does not declare it."""
        return self._regions.get(name)
