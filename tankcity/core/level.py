"""Static level layout and the fixed positions of the original board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from tankcity.core.grid import Cell, Coordinate, to_pixel
from tankcity.core.materials import Material
from tankcity.core.settings import GameSettings


@dataclass(frozen=True)
class LevelEntry:
    material: Material
    coordinate: Coordinate


@dataclass
class Level:
    """Ordered terrain placements; storage format is up to the caller."""

    entries: List[LevelEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[LevelEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, material: Material, coordinate: Coordinate) -> None:
        self.entries.append(LevelEntry(material, coordinate))

    def pairs(self) -> List[Tuple[Material, Coordinate]]:
        return [(entry.material, entry.coordinate) for entry in self.entries]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Material, Coordinate]]) -> "Level":
        return cls([LevelEntry(material, coordinate) for material, coordinate in pairs])

    def to_records(self) -> List[dict]:
        return [
            {
                "material": entry.material.key,
                "top": entry.coordinate.top,
                "left": entry.coordinate.left,
            }
            for entry in self.entries
        ]

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "Level":
        level = cls()
        for record in records:
            level.add(
                Material.from_key(str(record["material"])),
                Coordinate(top=int(record["top"]), left=int(record["left"])),
            )
        return level


# ----------------------------------------------------------------------
# Fixed positions
def player_start(settings: GameSettings) -> Coordinate:
    """Bottom row, eight cells left of centre."""
    material = Material.PLAYER_TANK
    return Coordinate(
        top=settings.height - material.height * settings.cell_size,
        left=settings.width // 2 - 8 * settings.cell_size,
    )


def eagle_position(settings: GameSettings) -> Coordinate:
    material = Material.EAGLE
    return Coordinate(
        top=settings.height - material.height * settings.cell_size,
        left=settings.width // 2 - material.width * settings.cell_size // 2,
    )


def entry_points(settings: GameSettings) -> List[Coordinate]:
    """Top-left, top-centre and top-right enemy entry points."""
    tank_width = Material.ENEMY_TANK.width * settings.cell_size
    return [
        Coordinate(top=0, left=0),
        Coordinate(top=0, left=settings.width // 2 - tank_width // 2),
        Coordinate(top=0, left=settings.width - tank_width),
    ]


def default_level(settings: GameSettings) -> Level:
    """Brick fortress around the eagle plus a few rows of mixed terrain."""
    columns, rows = settings.columns, settings.rows
    cells: List[Tuple[Material, Cell]] = []

    eagle = eagle_position(settings)
    eagle_row = eagle.top // settings.cell_size
    eagle_col = eagle.left // settings.cell_size
    first_col = eagle_col - 1
    last_col = eagle_col + Material.EAGLE.width
    for col in range(first_col, last_col + 1):
        cells.append((Material.BRICK, Cell(eagle_row - 1, col)))
    for row in range(eagle_row, rows):
        cells.append((Material.BRICK, Cell(row, first_col)))
        cells.append((Material.BRICK, Cell(row, last_col)))

    middle = rows // 2
    for col in range(2, columns - 2, 6):
        for row in range(4, middle + 2):
            cells.append((Material.BRICK, Cell(row, col)))
            cells.append((Material.BRICK, Cell(row, col + 1)))

    centre = columns // 2
    for col in (centre - 1, centre):
        cells.append((Material.CONCRETE, Cell(middle + 4, col)))
    for col in list(range(4, 8)) + list(range(columns - 8, columns - 4)):
        cells.append((Material.WATER, Cell(middle + 4, col)))
    for col in list(range(5, 9)) + list(range(columns - 9, columns - 5)):
        for row in (2, 3):
            cells.append((Material.GRASS, Cell(row, col)))

    level = Level()
    for material, cell in cells:
        if 0 <= cell.row < rows and 0 <= cell.column < columns:
            level.add(material, to_pixel(cell, settings.cell_size))
    return level


__all__ = [
    "Level",
    "LevelEntry",
    "default_level",
    "eagle_position",
    "entry_points",
    "player_start",
]
