""" Enumerations mirroring the wire values used by the game's data catalog. """
from collections.abc import Mapping
from enum import IntEnum


class Race(IntEnum):
    NoRace = 0
    Terran = 1
    Zerg = 2
    Protoss = 3
    Random = 4


class Attribute(IntEnum):
    Light = 1
    Armored = 2
    Biological = 3
    Mechanical = 4
    Robotic = 5
    Psionic = 6
    Massive = 7
    Structure = 8
    Hover = 9
    Heroic = 10
    Summoned = 11


class TargetType(IntEnum):
    """ What a weapon or an effect can hit. """
    Ground = 1
    Air = 2
    Any = 3


class AbilityTarget(IntEnum):
    NONE = 1
    Point = 2
    Unit = 3
    PointOrUnit = 4
    PointOrNone = 5


def proto_field(proto, name: str, default=None):
    """
    Reads a field from a wire record.

    Records are either plain dicts (the JSON form of the message, with enums as
    integers) or message objects. An absent field yields ``default``, so optional
    values stay distinguishable from zero.
    """
    if isinstance(proto, Mapping):
        return proto.get(name, default)
    has_field = getattr(proto, "HasField", None)
    if has_field is not None:
        try:
            if not has_field(name):
                return default
        except ValueError:
            # repeated fields have no presence
            pass
    return getattr(proto, name, default)
