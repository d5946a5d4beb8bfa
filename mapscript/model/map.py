from __future__ import annotations

"""Host tile map model.

Cells are global tile ids stored in a ``(height, width)`` integer array;
``0`` means an empty cell.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, TypeAlias

import numpy as np

Orientation: TypeAlias = Literal["orthogonal", "isometric", "staggered", "hexagonal"]

CELL_DTYPE = np.uint32


def empty_cells(width: int, height: int) -> np.ndarray:
    return np.zeros((height, width), dtype=CELL_DTYPE)


@dataclass(eq=False)
class TileLayer:
    name: str
    cells: np.ndarray
    visible: bool = True
    opacity: float = 1.0
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def blank(cls, name: str, width: int, height: int) -> "TileLayer":
        return cls(name=name, cells=empty_cells(width, height))

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def clone(self) -> "TileLayer":
        return TileLayer(
            name=self.name,
            cells=np.array(self.cells, dtype=CELL_DTYPE, copy=True),
            visible=self.visible,
            opacity=self.opacity,
            properties=copy.deepcopy(self.properties),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileLayer):
            return NotImplemented
        return (
            self.name == other.name
            and self.visible == other.visible
            and self.opacity == other.opacity
            and self.properties == other.properties
            and np.array_equal(self.cells, other.cells)
        )


@dataclass
class Map:
    orientation: Orientation = "orthogonal"
    width: int = 0
    height: int = 0
    tile_width: int = 32
    tile_height: int = 32
    layers: List[TileLayer] = field(default_factory=list)
    properties: Dict[str, Any] = field(default_factory=dict)

    def layer(self, name: str) -> Optional[TileLayer]:
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def clone(self) -> "Map":
        """Deep copy: the clone shares no cell arrays or property dicts."""
        return Map(
            orientation=self.orientation,
            width=self.width,
            height=self.height,
            tile_width=self.tile_width,
            tile_height=self.tile_height,
            layers=[layer.clone() for layer in self.layers],
            properties=copy.deepcopy(self.properties),
        )
