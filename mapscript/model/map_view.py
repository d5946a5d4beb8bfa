from __future__ import annotations

"""Script-facing view of a :class:`~mapscript.model.map.Map`.

A view either *owns* its map (``MapView()``, what a read script builds and
returns) or *borrows* a caller-owned map read-only (``MapView.borrow(map)``,
what a write script receives). Borrowed views reject every mutation and only
hand out copies of cells and properties.

Scripts never get at the wrapped map; host code uses :func:`unwrap_map`.
"""

import copy
from typing import Any, Dict, List, Optional

import numpy as np

from mapscript.core.errors import ReadOnlyMapError
from mapscript.model.map import Map, Orientation, TileLayer


class MapView:
    def __init__(self, map: Optional[Map] = None, *, read_only: bool = False):
        self._map = map if map is not None else Map()
        self._read_only = read_only

    @classmethod
    def borrow(cls, map: Map) -> "MapView":
        return cls(map, read_only=True)

    @property
    def read_only(self) -> bool:
        return self._read_only

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyMapError("Map is read-only")

    # -- map attributes -----------------------------------------------

    @property
    def orientation(self) -> Orientation:
        return self._map.orientation

    @orientation.setter
    def orientation(self, value: Orientation) -> None:
        self._check_writable()
        self._map.orientation = value

    @property
    def width(self) -> int:
        return self._map.width

    @property
    def height(self) -> int:
        return self._map.height

    @property
    def tile_width(self) -> int:
        return self._map.tile_width

    @tile_width.setter
    def tile_width(self, value: int) -> None:
        self._check_writable()
        self._map.tile_width = int(value)

    @property
    def tile_height(self) -> int:
        return self._map.tile_height

    @tile_height.setter
    def tile_height(self, value: int) -> None:
        self._check_writable()
        self._map.tile_height = int(value)

    def set_size(self, width: int, height: int) -> None:
        """Resize the map; existing layers are cropped or padded with empty cells."""
        self._check_writable()
        width, height = int(width), int(height)
        if width < 0 or height < 0:
            raise ValueError(f"invalid map size: {width}x{height}")
        for layer in self._map.layers:
            cells = np.zeros((height, width), dtype=layer.cells.dtype)
            h = min(height, layer.height)
            w = min(width, layer.width)
            cells[:h, :w] = layer.cells[:h, :w]
            layer.cells = cells
        self._map.width = width
        self._map.height = height

    # -- properties ---------------------------------------------------

    def properties(self) -> Dict[str, Any]:
        if self._read_only:
            return copy.deepcopy(self._map.properties)
        return dict(self._map.properties)

    def get_property(self, name: str) -> Any:
        value = self._map.properties.get(name)
        if self._read_only:
            return copy.deepcopy(value)
        return value

    def set_property(self, name: str, value: Any) -> None:
        self._check_writable()
        self._map.properties[name] = value

    # -- layers -------------------------------------------------------

    @property
    def layer_count(self) -> int:
        return len(self._map.layers)

    def layer_names(self) -> List[str]:
        return [layer.name for layer in self._map.layers]

    def cells(self, index: int) -> np.ndarray:
        """Cell array of layer ``index``; a non-writeable copy when the map is borrowed."""
        arr = self._map.layers[index].cells
        if self._read_only:
            arr = arr.copy()
            arr.flags.writeable = False
        return arr

    def add_tile_layer(self, name: str, cells: Optional[Any] = None) -> int:
        """Append a tile layer and return its index.

        ``cells`` must match the map size; when omitted the layer is empty.
        """
        self._check_writable()
        if cells is None:
            layer = TileLayer.blank(name, self._map.width, self._map.height)
        else:
            arr = np.asarray(cells)
            expected = (self._map.height, self._map.width)
            if arr.shape != expected:
                raise ValueError(f"layer '{name}': expected cells of shape {expected}, got {arr.shape}")
            if arr.size and (arr < 0).any():
                raise ValueError(f"layer '{name}': tile ids must be non-negative")
            layer = TileLayer(name=name, cells=np.array(arr, dtype=np.uint32, copy=True))
        self._map.layers.append(layer)
        return len(self._map.layers) - 1

    def set_cell(self, index: int, x: int, y: int, gid: int) -> None:
        self._check_writable()
        self._map.layers[index].cells[y, x] = gid

    def remove_layer(self, index: int) -> None:
        self._check_writable()
        del self._map.layers[index]

    def __repr__(self) -> str:  # pragma: no cover
        mode = "borrowed" if self._read_only else "owned"
        return f"MapView({self._map.width}x{self._map.height}, {self.layer_count} layers, {mode})"


def unwrap_map(view: MapView) -> Map:
    """The host map behind ``view`` (not a copy). Host code only."""
    return view._map
