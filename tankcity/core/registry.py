"""Mutable collection of placed elements with a cell-bucketed spatial index."""

from __future__ import annotations

import itertools
from collections import defaultdict
from typing import DefaultDict, Dict, Iterator, List, Optional, Set, Tuple

from tankcity.core.elements import Element
from tankcity.core.events import ChangeKind, ElementEvent, RenderListener
from tankcity.core.grid import Box, Cell, Coordinate, cells_covered
from tankcity.core.materials import Material


class InvalidPlacement(ValueError):
    """An element would leave the grid or overlap solid geometry."""

    def __init__(self, element: Element, reason: str) -> None:
        super().__init__(
            f"Cannot place {element.material.name} at "
            f"({element.coordinate.top}, {element.coordinate.left}): {reason}"
        )
        self.element = element
        self.reason = reason


class ElementRegistry:
    """Single source of truth for every element on the field.

    Iteration order is insertion order. Every read returns a snapshot, so
    elements may be removed while a caller is still walking an earlier
    result; removed elements are simply no longer ``in`` the registry.
    """

    def __init__(self, bounds: Box, cell_size: int) -> None:
        self.bounds = bounds
        self.cell_size = cell_size
        self._order: Dict[Element, int] = {}
        self._cells: DefaultDict[Cell, Set[Element]] = defaultdict(set)
        self._sequence = itertools.count()
        self._listeners: List[RenderListener] = []

    # ------------------------------------------------------------------
    # Listeners
    def add_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def _notify(self, kind: ChangeKind, element: Element) -> None:
        if not self._listeners:
            return
        event = ElementEvent(
            kind=kind,
            element_id=element.id,
            material=element.material,
            coordinate=element.coordinate,
            width=element.width,
            height=element.height,
            visible=kind is not ChangeKind.DESTROYED,
            direction=getattr(element, "direction", None),
        )
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Mutation
    def add(self, element: Element) -> None:
        if element in self._order:
            return
        self._order[element] = next(self._sequence)
        self._index(element)
        self._notify(ChangeKind.CREATED, element)

    def place(self, element: Element) -> None:
        """Add ``element`` after checking bounds and solid overlap."""
        if not self.bounds.contains(element.box):
            raise InvalidPlacement(element, "outside the grid")
        if element.material.is_solid:
            for other in self.find_overlapping(element.box, excluding=element):
                if other.material.is_solid:
                    raise InvalidPlacement(element, f"overlaps {other.material.name}")
        self.add(element)

    def remove(self, element: Element) -> bool:
        if element not in self._order:
            return False
        self._unindex(element)
        del self._order[element]
        self._notify(ChangeKind.DESTROYED, element)
        return True

    def move(self, element: Element, coordinate: Coordinate) -> bool:
        if element not in self._order:
            return False
        if coordinate == element.coordinate:
            return True
        self._unindex(element)
        element.coordinate = coordinate
        self._index(element)
        self._notify(ChangeKind.MOVED, element)
        return True

    def turned(self, element: Element) -> None:
        """Report an in-place change such as a tank rotating."""
        if element in self._order:
            self._notify(ChangeKind.TURNED, element)

    def clear(self) -> None:
        for element in self.all():
            self.remove(element)

    # ------------------------------------------------------------------
    # Queries
    def __contains__(self, element: object) -> bool:
        return element in self._order

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.all())

    def all(self) -> Tuple[Element, ...]:
        return tuple(self._order)

    def of_material(self, material: Material) -> List[Element]:
        return [element for element in self._order if element.material is material]

    def count(self, material: Material) -> int:
        return sum(1 for element in self._order if element.material is material)

    def find_overlapping(
        self, box: Box, excluding: Optional[Element] = None
    ) -> List[Element]:
        """Elements whose box intersects ``box``, in insertion order."""
        candidates: Set[Element] = set()
        for cell in cells_covered(box, self.cell_size):
            bucket = self._cells.get(cell)
            if bucket:
                candidates.update(bucket)
        candidates.discard(excluding)  # type: ignore[arg-type]
        hits = [element for element in candidates if element.box.intersects(box)]
        hits.sort(key=self._order.__getitem__)
        return hits

    # ------------------------------------------------------------------
    # Spatial index
    def _index(self, element: Element) -> None:
        for cell in cells_covered(element.box, self.cell_size):
            self._cells[cell].add(element)

    def _unindex(self, element: Element) -> None:
        for cell in cells_covered(element.box, self.cell_size):
            bucket = self._cells.get(cell)
            if bucket is None:
                continue
            bucket.discard(element)
            if not bucket:
                del self._cells[cell]


__all__ = ["ElementRegistry", "InvalidPlacement"]
