from enum import IntEnum
from numbers import Integral
from typing import Optional, Type, TypeVar

from .ability_id import AbilityId
from .buff_id import BuffId
from .effect_id import EffectId
from .unit_typeid import UnitTypeId
from .upgrade_id import UpgradeId

E = TypeVar("E", bound=IntEnum)


def from_wire(enum: Type[E], value) -> Optional[E]:
    """
    Maps a numeric wire id onto its enum member.

    Returns None for ids the enum does not know (content added by a newer
    game build) and for missing or non-integer values.
    """
    if not isinstance(value, Integral) or isinstance(value, bool):
        return None
    try:
        return enum(int(value))
    except ValueError:
        return None


__all__ = ["AbilityId", "BuffId", "EffectId", "UnitTypeId", "UpgradeId", "from_wire"]
