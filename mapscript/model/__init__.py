"""Host map model and its script-facing view."""

from .map import Map, TileLayer, empty_cells
from .map_view import MapView, unwrap_map

__all__ = ["Map", "TileLayer", "MapView", "empty_cells", "unwrap_map"]
