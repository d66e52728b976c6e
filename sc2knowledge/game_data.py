from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from loguru import logger

from .cache import property_cache_forever
from .data import AbilityTarget, Attribute, Race, TargetType, proto_field
from .ids import AbilityId, BuffId, EffectId, UnitTypeId, UpgradeId, from_wire

# Effects carry no target or friendly fire information on the wire.
ANY_TARGET_EFFECTS = frozenset({
    EffectId.NULL,
    EffectId.PSISTORMPERSISTENT,
    EffectId.SCANNERSWEEP,
    EffectId.NUKEPERSISTENT,
    EffectId.RAVAGERCORROSIVEBILECP,
})
FRIENDLY_FIRE_EFFECTS = frozenset({
    EffectId.PSISTORMPERSISTENT,
    EffectId.NUKEPERSISTENT,
    EffectId.RAVAGERCORROSIVEBILECP,
})


class Cost(NamedTuple):
    minerals: int
    vespene: int
    supply: float
    time: float


class DamageBonus(NamedTuple):
    attribute: Attribute
    bonus: float


class Weapon:
    def __init__(self, proto):
        self._proto = proto

    @property
    def target(self) -> TargetType:
        return from_wire(TargetType, proto_field(self._proto, "type")) or TargetType.Ground

    @property
    def damage(self) -> float:
        return proto_field(self._proto, "damage", 0.0)

    @property_cache_forever
    def damage_bonus(self) -> Tuple[DamageBonus, ...]:
        bonuses = []
        for b in proto_field(self._proto, "damage_bonus", ()):
            attribute = from_wire(Attribute, proto_field(b, "attribute"))
            if attribute is not None:
                bonuses.append(DamageBonus(attribute, proto_field(b, "bonus", 0.0)))
        return tuple(bonuses)

    @property
    def attacks(self) -> int:
        return proto_field(self._proto, "attacks", 0)

    @property
    def range(self) -> float:
        return proto_field(self._proto, "range", 0.0)

    @property
    def speed(self) -> float:
        """ Seconds between attacks. """
        return proto_field(self._proto, "speed", 0.0)

    def __repr__(self):
        return f"Weapon(target={self.target.name}, damage={self.damage}, range={self.range})"


class AbilityData:
    def __init__(self, game_data, proto, ability_id: AbilityId):
        self._game_data = game_data
        self._proto = proto
        self.id = ability_id

    @classmethod
    def try_from_proto(cls, game_data, proto) -> Optional["AbilityData"]:
        ability_id = from_wire(AbilityId, proto_field(proto, "ability_id"))
        if ability_id is None:
            return None
        return cls(game_data, proto, ability_id)

    @property
    def link_name(self) -> str:
        return proto_field(self._proto, "link_name", "")

    @property
    def link_index(self) -> int:
        return proto_field(self._proto, "link_index", 0)

    @property
    def button_name(self) -> Optional[str]:
        return proto_field(self._proto, "button_name")

    @property
    def friendly_name(self) -> Optional[str]:
        return proto_field(self._proto, "friendly_name")

    @property
    def hotkey(self) -> Optional[str]:
        return proto_field(self._proto, "hotkey")

    @property
    def remaps_to_ability_id(self) -> Optional[AbilityId]:
        return from_wire(AbilityId, proto_field(self._proto, "remaps_to_ability_id"))

    @property
    def available(self) -> bool:
        return proto_field(self._proto, "available", False)

    @property
    def target(self) -> AbilityTarget:
        return from_wire(AbilityTarget, proto_field(self._proto, "target")) or AbilityTarget.NONE

    @property
    def allow_minimap(self) -> bool:
        return proto_field(self._proto, "allow_minimap", False)

    @property
    def allow_autocast(self) -> bool:
        return proto_field(self._proto, "allow_autocast", False)

    @property
    def is_building(self) -> bool:
        return proto_field(self._proto, "is_building", False)

    @property
    def footprint_radius(self) -> Optional[float]:
        return proto_field(self._proto, "footprint_radius")

    @property
    def is_instant_placement(self) -> bool:
        return proto_field(self._proto, "is_instant_placement", False)

    @property
    def cast_range(self) -> Optional[float]:
        return proto_field(self._proto, "cast_range")

    def __repr__(self):
        return f"AbilityData(name={self.id.name})"


class UnitTypeData:
    def __init__(self, game_data, proto, unit_id: UnitTypeId):
        self._game_data = game_data
        self._proto = proto
        self.id = unit_id

    @classmethod
    def try_from_proto(cls, game_data, proto) -> Optional["UnitTypeData"]:
        unit_id = from_wire(UnitTypeId, proto_field(proto, "unit_id"))
        if unit_id is None:
            return None
        return cls(game_data, proto, unit_id)

    @property
    def name(self) -> str:
        return proto_field(self._proto, "name", "")

    @property
    def available(self) -> bool:
        return proto_field(self._proto, "available", False)

    @property
    def cargo_size(self) -> int:
        return proto_field(self._proto, "cargo_size", 0)

    @property
    def mineral_cost(self) -> int:
        return proto_field(self._proto, "mineral_cost", 0)

    @property
    def vespene_cost(self) -> int:
        return proto_field(self._proto, "vespene_cost", 0)

    @property
    def food_required(self) -> float:
        return proto_field(self._proto, "food_required", 0.0)

    @property
    def food_provided(self) -> float:
        return proto_field(self._proto, "food_provided", 0.0)

    @property
    def ability(self) -> Optional[AbilityId]:
        """ The ability that creates this unit type, if the game reports one. """
        return from_wire(AbilityId, proto_field(self._proto, "ability_id"))

    @property
    def creation_ability(self) -> Optional[AbilityData]:
        if self.ability is None:
            return None
        return self._game_data.abilities.get(self.ability)

    @property
    def race(self) -> Race:
        return from_wire(Race, proto_field(self._proto, "race")) or Race.NoRace

    @property
    def build_time(self) -> float:
        return proto_field(self._proto, "build_time", 0.0)

    @property
    def has_vespene(self) -> bool:
        return proto_field(self._proto, "has_vespene", False)

    @property
    def has_minerals(self) -> bool:
        return proto_field(self._proto, "has_minerals", False)

    @property
    def sight_range(self) -> float:
        return proto_field(self._proto, "sight_range", 0.0)

    @property_cache_forever
    def tech_alias(self) -> Tuple[UnitTypeId, ...]:
        """ Unit types that count as this one for tech requirements. Unknown ids are left out. """
        aliases = (from_wire(UnitTypeId, a) for a in proto_field(self._proto, "tech_alias", ()))
        return tuple(a for a in aliases if a is not None)

    @property
    def unit_alias(self) -> Optional[UnitTypeId]:
        return from_wire(UnitTypeId, proto_field(self._proto, "unit_alias"))

    @property
    def tech_requirement(self) -> Optional[UnitTypeId]:
        return from_wire(UnitTypeId, proto_field(self._proto, "tech_requirement"))

    @property
    def require_attached(self) -> bool:
        return proto_field(self._proto, "require_attached", False)

    @property_cache_forever
    def attributes(self) -> Tuple[Attribute, ...]:
        attributes = (from_wire(Attribute, a) for a in proto_field(self._proto, "attributes", ()))
        return tuple(a for a in attributes if a is not None)

    @property
    def is_structure(self) -> bool:
        return Attribute.Structure in self.attributes

    @property
    def movement_speed(self) -> float:
        return proto_field(self._proto, "movement_speed", 0.0)

    @property
    def armor(self) -> float:
        return proto_field(self._proto, "armor", 0.0)

    @property_cache_forever
    def weapons(self) -> Tuple[Weapon, ...]:
        return tuple(Weapon(w) for w in proto_field(self._proto, "weapons", ()))

    @property
    def cost(self) -> Cost:
        return Cost(self.mineral_cost, self.vespene_cost, self.food_required, self.build_time)

    def __repr__(self):
        return f"UnitTypeData(name={self.name or self.id.name})"


class UpgradeData:
    def __init__(self, game_data, proto, upgrade_id: UpgradeId, ability_id: AbilityId):
        self._game_data = game_data
        self._proto = proto
        self.id = upgrade_id
        self.ability = ability_id

    @classmethod
    def try_from_proto(cls, game_data, proto) -> Optional["UpgradeData"]:
        """ Upgrades whose research ability id is present but unknown are dropped along with unknown upgrades. """
        upgrade_id = from_wire(UpgradeId, proto_field(proto, "upgrade_id"))
        raw_ability_id = proto_field(proto, "ability_id")
        # no research ability on the wire reads as the null ability
        ability_id = AbilityId.NULL_NULL if raw_ability_id is None else from_wire(AbilityId, raw_ability_id)
        if upgrade_id is None or ability_id is None:
            return None
        return cls(game_data, proto, upgrade_id, ability_id)

    @property
    def name(self) -> str:
        return proto_field(self._proto, "name", "")

    @property
    def mineral_cost(self) -> int:
        return proto_field(self._proto, "mineral_cost", 0)

    @property
    def vespene_cost(self) -> int:
        return proto_field(self._proto, "vespene_cost", 0)

    @property
    def research_time(self) -> float:
        return proto_field(self._proto, "research_time", 0.0)

    @property
    def research_ability(self) -> Optional[AbilityData]:
        return self._game_data.abilities.get(self.ability)

    @property
    def cost(self) -> Cost:
        return Cost(self.mineral_cost, self.vespene_cost, 0.0, self.research_time)

    def __repr__(self):
        return f"UpgradeData(name={self.name or self.id.name})"


class BuffData:
    def __init__(self, game_data, proto, buff_id: BuffId):
        self._game_data = game_data
        self._proto = proto
        self.id = buff_id

    @classmethod
    def try_from_proto(cls, game_data, proto) -> Optional["BuffData"]:
        buff_id = from_wire(BuffId, proto_field(proto, "buff_id"))
        if buff_id is None:
            return None
        return cls(game_data, proto, buff_id)

    @property
    def name(self) -> str:
        return proto_field(self._proto, "name", "")

    def __repr__(self):
        return f"BuffData(name={self.name or self.id.name})"


class EffectData:
    def __init__(self, game_data, proto, effect_id: EffectId):
        self._game_data = game_data
        self._proto = proto
        self.id = effect_id

    @classmethod
    def try_from_proto(cls, game_data, proto) -> Optional["EffectData"]:
        effect_id = from_wire(EffectId, proto_field(proto, "effect_id"))
        if effect_id is None:
            return None
        return cls(game_data, proto, effect_id)

    @property
    def name(self) -> str:
        return proto_field(self._proto, "name", "")

    @property
    def friendly_name(self) -> str:
        return proto_field(self._proto, "friendly_name", "")

    @property
    def radius(self) -> float:
        return proto_field(self._proto, "radius", 0.0)

    @property
    def target(self) -> TargetType:
        return TargetType.Any if self.id in ANY_TARGET_EFFECTS else TargetType.Ground

    @property
    def friendly_fire(self) -> bool:
        return self.id in FRIENDLY_FIRE_EFFECTS

    def __repr__(self):
        return f"EffectData(name={self.name or self.id.name})"


class GameData:
    """
    Catalog of abilities, unit types, upgrades, buffs and effects for the running game version.

    Records whose id is unknown to this library are left out. The maps are read-only
    once the catalog is built.
    """

    def __init__(self, data=None):
        self.abilities: Mapping[AbilityId, AbilityData] = self._collect(AbilityData, data, "abilities")
        self.units: Mapping[UnitTypeId, UnitTypeData] = self._collect(UnitTypeData, data, "units")
        self.upgrades: Mapping[UpgradeId, UpgradeData] = self._collect(UpgradeData, data, "upgrades")
        self.buffs: Mapping[BuffId, BuffData] = self._collect(BuffData, data, "buffs")
        self.effects: Mapping[EffectId, EffectData] = self._collect(EffectData, data, "effects")

        logger.debug(
            f"Game data loaded: {len(self.abilities)} abilities, {len(self.units)} units, "
            f"{len(self.upgrades)} upgrades, {len(self.buffs)} buffs, {len(self.effects)} effects"
        )

    @classmethod
    def from_proto(cls, data) -> "GameData":
        return cls(data)

    def _collect(self, record_type, data, category: str) -> Mapping:
        records: Dict = {}
        raw: List = proto_field(data, category, ()) if data is not None else ()
        for proto in raw or ():
            record = record_type.try_from_proto(self, proto)
            if record is not None:
                records[record.id] = record
        return MappingProxyType(records)

    def ability(self, ability_id: AbilityId) -> Optional[AbilityData]:
        return self.abilities.get(ability_id)

    def unit(self, unit_id: UnitTypeId) -> Optional[UnitTypeData]:
        return self.units.get(unit_id)

    def upgrade(self, upgrade_id: UpgradeId) -> Optional[UpgradeData]:
        return self.upgrades.get(upgrade_id)

    def buff(self, buff_id: BuffId) -> Optional[BuffData]:
        return self.buffs.get(buff_id)

    def effect(self, effect_id: EffectId) -> Optional[EffectData]:
        return self.effects.get(effect_id)

    @staticmethod
    def cost_of(entity: Union[UnitTypeData, UpgradeData]) -> Cost:
        return entity.cost


def build(data) -> GameData:
    return GameData.from_proto(data)
