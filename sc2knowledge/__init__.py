from loguru import logger

from .constants import (
    ADDON_IDS,
    CONSTRUCTING_IDS,
    MELEE_IDS,
    RACE_VALUES,
    TECH_REQUIREMENTS,
    TOWNHALL_IDS,
    WORKER_IDS,
    RaceValues,
)
from .data import AbilityTarget, Attribute, Race, TargetType
from .game_data import Cost, GameData, build
from .game_info import GameInfo, MapGrids
from .ids import AbilityId, BuffId, EffectId, UnitTypeId, UpgradeId, from_wire
from .pixel_map import (
    ByteMap,
    GridDecodeError,
    GridShapeError,
    Pixel,
    PixelMap,
    Visibility,
    VisibilityDecodeError,
    VisibilityMap,
)
from .position import Point2, Size, to_cell

# Library code stays quiet unless the application enables it or calls utl.init_logging
logger.disable("sc2knowledge")

__version__ = "0.1.0"
