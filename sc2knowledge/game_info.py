from typing import NamedTuple, Optional

from loguru import logger

from .data import proto_field
from .pixel_map import ByteMap, GridDecodeError, PixelMap, VisibilityMap
from .position import Size


class MapGrids(NamedTuple):
    pathing: PixelMap
    placement: PixelMap
    terrain_height: ByteMap
    visibility: Optional[VisibilityMap] = None


class GameInfo:
    """
    Map level grids of the current game.

    All grids live in one immutable ``MapGrids`` snapshot. Updates decode every
    new grid before the snapshot reference is replaced, so a reader that took
    ``grids`` once never sees a mix of old and new cells.
    """

    def __init__(self, proto):
        self._proto = proto
        start_raw = proto_field(proto, "start_raw")
        if start_raw is None:
            raise GridDecodeError("Game info carries no start_raw section with the map grids")
        self.map_name: str = proto_field(proto, "map_name", "")
        self.map_size: Size = Size.from_proto(proto_field(start_raw, "map_size"))
        self.grids: MapGrids = MapGrids(
            pathing=PixelMap.from_proto(proto_field(start_raw, "pathing_grid")),
            placement=PixelMap.from_proto(proto_field(start_raw, "placement_grid")),
            terrain_height=ByteMap.from_proto(proto_field(start_raw, "terrain_height")),
        )
        logger.debug(f"Map {self.map_name or '<unnamed>'} loaded with size {self.map_size}")

    @property
    def pathing_grid(self) -> PixelMap:
        return self.grids.pathing

    @property
    def placement_grid(self) -> PixelMap:
        return self.grids.placement

    @property
    def terrain_height(self) -> ByteMap:
        return self.grids.terrain_height

    @property
    def visibility(self) -> Optional[VisibilityMap]:
        return self.grids.visibility

    def update(self, pathing=None, placement=None, visibility=None) -> MapGrids:
        """
        Publishes new grids from raw images. Images left as None keep their current grid.

        Raises a GridDecodeError, leaving the current snapshot untouched, if any image is invalid.
        """
        changes = {}
        if pathing is not None:
            changes["pathing"] = PixelMap.from_proto(pathing)
        if placement is not None:
            changes["placement"] = PixelMap.from_proto(placement)
        if visibility is not None:
            changes["visibility"] = VisibilityMap.from_proto(visibility)
        if changes:
            self.grids = self.grids._replace(**changes)
        return self.grids

    def update_from_observation(self, observation) -> MapGrids:
        """ Takes the visibility image out of an observation's raw data. """
        raw_data = proto_field(observation, "raw_data")
        map_state = proto_field(raw_data, "map_state") if raw_data is not None else None
        if map_state is None:
            return self.grids
        return self.update(visibility=proto_field(map_state, "visibility"))
