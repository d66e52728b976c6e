from types import MappingProxyType
from typing import FrozenSet, List, Mapping, NamedTuple, Optional

from .data import Race, TargetType
from .ids import AbilityId, UnitTypeId

UnitTypeIdSet = FrozenSet[UnitTypeId]

WORKER_IDS: UnitTypeIdSet = frozenset({UnitTypeId.SCV, UnitTypeId.DRONE, UnitTypeId.PROBE})
TOWNHALL_IDS: UnitTypeIdSet = frozenset({
    UnitTypeId.COMMANDCENTER,
    UnitTypeId.ORBITALCOMMAND,
    UnitTypeId.PLANETARYFORTRESS,
    UnitTypeId.COMMANDCENTERFLYING,
    UnitTypeId.ORBITALCOMMANDFLYING,
    UnitTypeId.HATCHERY,
    UnitTypeId.LAIR,
    UnitTypeId.HIVE,
    UnitTypeId.NEXUS,
})
ADDON_IDS: UnitTypeIdSet = frozenset({
    UnitTypeId.TECHLAB,
    UnitTypeId.REACTOR,
    UnitTypeId.BARRACKSTECHLAB,
    UnitTypeId.BARRACKSREACTOR,
    UnitTypeId.FACTORYTECHLAB,
    UnitTypeId.FACTORYREACTOR,
    UnitTypeId.STARPORTTECHLAB,
    UnitTypeId.STARPORTREACTOR,
})
MELEE_IDS: UnitTypeIdSet = frozenset({
    UnitTypeId.SCV,
    UnitTypeId.DRONE,
    UnitTypeId.DRONEBURROWED,
    UnitTypeId.PROBE,
    UnitTypeId.ZERGLING,
    UnitTypeId.ZERGLINGBURROWED,
    UnitTypeId.BANELINGCOCOON,
    UnitTypeId.BANELING,
    UnitTypeId.BANELINGBURROWED,
    UnitTypeId.BROODLING,
    UnitTypeId.ZEALOT,
    UnitTypeId.DARKTEMPLAR,
    UnitTypeId.ULTRALISK,
    UnitTypeId.ULTRALISKBURROWED,
})
mineral_ids: UnitTypeIdSet = frozenset({
    UnitTypeId.RICHMINERALFIELD,
    UnitTypeId.RICHMINERALFIELD750,
    UnitTypeId.MINERALFIELD,
    UnitTypeId.MINERALFIELD750,
    UnitTypeId.LABMINERALFIELD,
    UnitTypeId.LABMINERALFIELD750,
    UnitTypeId.PURIFIERRICHMINERALFIELD,
    UnitTypeId.PURIFIERRICHMINERALFIELD750,
    UnitTypeId.PURIFIERMINERALFIELD,
    UnitTypeId.PURIFIERMINERALFIELD750,
    UnitTypeId.BATTLESTATIONMINERALFIELD,
    UnitTypeId.BATTLESTATIONMINERALFIELD750,
})
geyser_ids: UnitTypeIdSet = frozenset({
    UnitTypeId.VESPENEGEYSER,
    UnitTypeId.SPACEPLATFORMGEYSER,
    UnitTypeId.RICHVESPENEGEYSER,
    UnitTypeId.PROTOSSVESPENEGEYSER,
    UnitTypeId.PURIFIERVESPENEGEYSER,
    UnitTypeId.SHAKURASVESPENEGEYSER,
})
gas_building_ids: UnitTypeIdSet = frozenset({
    UnitTypeId.REFINERY,
    UnitTypeId.REFINERYRICH,
    UnitTypeId.ASSIMILATOR,
    UnitTypeId.ASSIMILATORRICH,
    UnitTypeId.EXTRACTOR,
    UnitTypeId.EXTRACTORRICH,
})

TARGET_GROUND: FrozenSet[TargetType] = frozenset({TargetType.Ground, TargetType.Any})
TARGET_AIR: FrozenSet[TargetType] = frozenset({TargetType.Air, TargetType.Any})

# Abilities a worker uses to start a new structure
CONSTRUCTING_IDS: FrozenSet[AbilityId] = frozenset({
    # Terran
    AbilityId.TERRANBUILD_COMMANDCENTER,
    AbilityId.TERRANBUILD_SUPPLYDEPOT,
    AbilityId.TERRANBUILD_REFINERY,
    AbilityId.TERRANBUILD_BARRACKS,
    AbilityId.TERRANBUILD_ENGINEERINGBAY,
    AbilityId.TERRANBUILD_MISSILETURRET,
    AbilityId.TERRANBUILD_BUNKER,
    AbilityId.TERRANBUILD_SENSORTOWER,
    AbilityId.TERRANBUILD_GHOSTACADEMY,
    AbilityId.TERRANBUILD_FACTORY,
    AbilityId.TERRANBUILD_STARPORT,
    AbilityId.TERRANBUILD_ARMORY,
    AbilityId.TERRANBUILD_FUSIONCORE,
    # Protoss
    AbilityId.PROTOSSBUILD_NEXUS,
    AbilityId.PROTOSSBUILD_PYLON,
    AbilityId.PROTOSSBUILD_ASSIMILATOR,
    AbilityId.PROTOSSBUILD_GATEWAY,
    AbilityId.PROTOSSBUILD_FORGE,
    AbilityId.PROTOSSBUILD_FLEETBEACON,
    AbilityId.PROTOSSBUILD_TWILIGHTCOUNCIL,
    AbilityId.PROTOSSBUILD_PHOTONCANNON,
    AbilityId.PROTOSSBUILD_STARGATE,
    AbilityId.PROTOSSBUILD_TEMPLARARCHIVE,
    AbilityId.PROTOSSBUILD_DARKSHRINE,
    AbilityId.PROTOSSBUILD_ROBOTICSBAY,
    AbilityId.PROTOSSBUILD_ROBOTICSFACILITY,
    AbilityId.PROTOSSBUILD_CYBERNETICSCORE,
    AbilityId.BUILD_SHIELDBATTERY,
    # Zerg
    AbilityId.ZERGBUILD_HATCHERY,
    AbilityId.ZERGBUILD_CREEPTUMOR,
    AbilityId.ZERGBUILD_EXTRACTOR,
    AbilityId.ZERGBUILD_SPAWNINGPOOL,
    AbilityId.ZERGBUILD_EVOLUTIONCHAMBER,
    AbilityId.ZERGBUILD_HYDRALISKDEN,
    AbilityId.ZERGBUILD_SPIRE,
    AbilityId.ZERGBUILD_ULTRALISKCAVERN,
    AbilityId.ZERGBUILD_INFESTATIONPIT,
    AbilityId.ZERGBUILD_NYDUSNETWORK,
    AbilityId.ZERGBUILD_BANELINGNEST,
    AbilityId.BUILD_LURKERDEN,
    AbilityId.ZERGBUILD_ROACHWARREN,
    AbilityId.ZERGBUILD_SPINECRAWLER,
    AbilityId.ZERGBUILD_SPORECRAWLER,
})


class RaceValues(NamedTuple):
    start_townhall: UnitTypeId = UnitTypeId.NOTAUNIT
    townhalls: UnitTypeIdSet = frozenset()
    gas_building: UnitTypeId = UnitTypeId.NOTAUNIT
    supply: UnitTypeId = UnitTypeId.NOTAUNIT
    worker: UnitTypeId = UnitTypeId.NOTAUNIT


RACE_VALUES: Mapping[Race, RaceValues] = MappingProxyType({
    Race.Terran: RaceValues(
        start_townhall=UnitTypeId.COMMANDCENTER,
        townhalls=frozenset({
            UnitTypeId.COMMANDCENTER,
            UnitTypeId.ORBITALCOMMAND,
            UnitTypeId.PLANETARYFORTRESS,
            UnitTypeId.COMMANDCENTERFLYING,
            UnitTypeId.ORBITALCOMMANDFLYING,
        }),
        gas_building=UnitTypeId.REFINERY,
        supply=UnitTypeId.SUPPLYDEPOT,
        worker=UnitTypeId.SCV,
    ),
    Race.Zerg: RaceValues(
        start_townhall=UnitTypeId.HATCHERY,
        townhalls=frozenset({UnitTypeId.HATCHERY, UnitTypeId.LAIR, UnitTypeId.HIVE}),
        gas_building=UnitTypeId.EXTRACTOR,
        supply=UnitTypeId.OVERLORD,
        worker=UnitTypeId.DRONE,
    ),
    Race.Protoss: RaceValues(
        start_townhall=UnitTypeId.NEXUS,
        townhalls=frozenset({UnitTypeId.NEXUS}),
        gas_building=UnitTypeId.ASSIMILATOR,
        supply=UnitTypeId.PYLON,
        worker=UnitTypeId.PROBE,
    ),
})

# unit or structure -> structure that has to exist before it can be made
TECH_REQUIREMENTS: Mapping[UnitTypeId, UnitTypeId] = MappingProxyType({
    # Terran
    UnitTypeId.MISSILETURRET: UnitTypeId.ENGINEERINGBAY,
    UnitTypeId.SENSORTOWER: UnitTypeId.ENGINEERINGBAY,
    UnitTypeId.PLANETARYFORTRESS: UnitTypeId.ENGINEERINGBAY,
    UnitTypeId.BARRACKS: UnitTypeId.SUPPLYDEPOT,
    UnitTypeId.ORBITALCOMMAND: UnitTypeId.BARRACKS,
    UnitTypeId.BUNKER: UnitTypeId.BARRACKS,
    UnitTypeId.GHOST: UnitTypeId.GHOSTACADEMY,
    UnitTypeId.GHOSTACADEMY: UnitTypeId.BARRACKS,
    UnitTypeId.FACTORY: UnitTypeId.BARRACKS,
    UnitTypeId.ARMORY: UnitTypeId.FACTORY,
    UnitTypeId.HELLIONTANK: UnitTypeId.ARMORY,
    UnitTypeId.THOR: UnitTypeId.ARMORY,
    UnitTypeId.STARPORT: UnitTypeId.FACTORY,
    UnitTypeId.FUSIONCORE: UnitTypeId.STARPORT,
    UnitTypeId.BATTLECRUISER: UnitTypeId.FUSIONCORE,
    # Protoss
    UnitTypeId.PHOTONCANNON: UnitTypeId.FORGE,
    UnitTypeId.CYBERNETICSCORE: UnitTypeId.GATEWAY,
    UnitTypeId.SENTRY: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.STALKER: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.ADEPT: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.TWILIGHTCOUNCIL: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.SHIELDBATTERY: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.TEMPLARARCHIVE: UnitTypeId.TWILIGHTCOUNCIL,
    UnitTypeId.DARKSHRINE: UnitTypeId.TWILIGHTCOUNCIL,
    UnitTypeId.HIGHTEMPLAR: UnitTypeId.TEMPLARARCHIVE,
    UnitTypeId.DARKTEMPLAR: UnitTypeId.DARKSHRINE,
    UnitTypeId.STARGATE: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.TEMPEST: UnitTypeId.FLEETBEACON,
    UnitTypeId.CARRIER: UnitTypeId.FLEETBEACON,
    UnitTypeId.MOTHERSHIP: UnitTypeId.FLEETBEACON,
    UnitTypeId.ROBOTICSFACILITY: UnitTypeId.CYBERNETICSCORE,
    UnitTypeId.ROBOTICSBAY: UnitTypeId.ROBOTICSFACILITY,
    UnitTypeId.COLOSSUS: UnitTypeId.ROBOTICSBAY,
    UnitTypeId.DISRUPTOR: UnitTypeId.ROBOTICSBAY,
    # Zerg
    UnitTypeId.ZERGLING: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.QUEEN: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.ROACHWARREN: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.BANELINGNEST: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.SPINECRAWLER: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.SPORECRAWLER: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.ROACH: UnitTypeId.ROACHWARREN,
    UnitTypeId.BANELING: UnitTypeId.BANELINGNEST,
    UnitTypeId.LAIR: UnitTypeId.SPAWNINGPOOL,
    UnitTypeId.OVERSEER: UnitTypeId.LAIR,
    UnitTypeId.OVERLORDTRANSPORT: UnitTypeId.LAIR,
    UnitTypeId.INFESTATIONPIT: UnitTypeId.LAIR,
    UnitTypeId.INFESTOR: UnitTypeId.INFESTATIONPIT,
    UnitTypeId.SWARMHOSTMP: UnitTypeId.INFESTATIONPIT,
    UnitTypeId.HYDRALISKDEN: UnitTypeId.LAIR,
    UnitTypeId.HYDRALISK: UnitTypeId.HYDRALISKDEN,
    UnitTypeId.LURKERDENMP: UnitTypeId.HYDRALISKDEN,
    UnitTypeId.LURKERMP: UnitTypeId.LURKERDENMP,
    UnitTypeId.SPIRE: UnitTypeId.LAIR,
    UnitTypeId.MUTALISK: UnitTypeId.SPIRE,
    UnitTypeId.CORRUPTOR: UnitTypeId.SPIRE,
    UnitTypeId.NYDUSNETWORK: UnitTypeId.LAIR,
    UnitTypeId.HIVE: UnitTypeId.INFESTATIONPIT,
    UnitTypeId.VIPER: UnitTypeId.HIVE,
    UnitTypeId.ULTRALISKCAVERN: UnitTypeId.HIVE,
    UnitTypeId.GREATERSPIRE: UnitTypeId.HIVE,
    UnitTypeId.BROODLORD: UnitTypeId.GREATERSPIRE,
})


def race_values(race: Race) -> RaceValues:
    """ Economy unit types for a race. Races without fixed values (Random, NoRace) get empty defaults. """
    return RACE_VALUES.get(race, RaceValues())


def tech_requirement(unit_type: UnitTypeId) -> Optional[UnitTypeId]:
    return TECH_REQUIREMENTS.get(unit_type)


def tech_chain(unit_type: UnitTypeId) -> List[UnitTypeId]:
    """
    All structures needed before ``unit_type`` can be made, nearest first.

    e.g. ``tech_chain(UnitTypeId.THOR)`` is
    ``[ARMORY, FACTORY, BARRACKS, SUPPLYDEPOT]``.
    """
    chain = []
    requirement = TECH_REQUIREMENTS.get(unit_type)
    while requirement is not None:
        chain.append(requirement)
        requirement = TECH_REQUIREMENTS.get(requirement)
    return chain
