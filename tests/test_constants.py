"""
Tests for the fixed game knowledge tables.
"""
import pytest

from sc2knowledge.constants import (
    ADDON_IDS,
    CONSTRUCTING_IDS,
    MELEE_IDS,
    RACE_VALUES,
    TARGET_AIR,
    TARGET_GROUND,
    TECH_REQUIREMENTS,
    TOWNHALL_IDS,
    WORKER_IDS,
    RaceValues,
    gas_building_ids,
    geyser_ids,
    mineral_ids,
    race_values,
    tech_chain,
    tech_requirement,
)
from sc2knowledge.data import Race, TargetType
from sc2knowledge.ids import AbilityId, UnitTypeId, from_wire


class TestRaceValues:
    """Test the per race economy values."""

    @pytest.mark.parametrize("race,townhall,gas,supply,worker", [
        (Race.Terran, UnitTypeId.COMMANDCENTER, UnitTypeId.REFINERY, UnitTypeId.SUPPLYDEPOT, UnitTypeId.SCV),
        (Race.Zerg, UnitTypeId.HATCHERY, UnitTypeId.EXTRACTOR, UnitTypeId.OVERLORD, UnitTypeId.DRONE),
        (Race.Protoss, UnitTypeId.NEXUS, UnitTypeId.ASSIMILATOR, UnitTypeId.PYLON, UnitTypeId.PROBE),
    ])
    def test_race_values(self, race, townhall, gas, supply, worker):
        values = race_values(race)
        assert values.start_townhall == townhall
        assert townhall in values.townhalls
        assert values.gas_building == gas
        assert values.supply == supply
        assert values.worker == worker

    def test_terran_townhalls_include_flying_and_upgraded_forms(self):
        assert RACE_VALUES[Race.Terran].townhalls == {
            UnitTypeId.COMMANDCENTER,
            UnitTypeId.ORBITALCOMMAND,
            UnitTypeId.PLANETARYFORTRESS,
            UnitTypeId.COMMANDCENTERFLYING,
            UnitTypeId.ORBITALCOMMANDFLYING,
        }

    @pytest.mark.parametrize("race", [Race.Random, Race.NoRace])
    def test_races_without_values_get_defaults(self, race):
        """Random and NoRace are valid lookups with nothing to report."""
        assert race not in RACE_VALUES
        values = race_values(race)
        assert values == RaceValues()
        assert values.worker == UnitTypeId.NOTAUNIT
        assert not values.townhalls

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            RACE_VALUES[Race.Random] = RaceValues()

    def test_townhall_ids_cover_every_race(self):
        all_townhalls = set()
        for values in RACE_VALUES.values():
            all_townhalls |= values.townhalls
        assert all_townhalls == TOWNHALL_IDS

    def test_workers_match_race_values(self):
        assert {values.worker for values in RACE_VALUES.values()} == WORKER_IDS


class TestTechRequirements:
    """Test the tech requirement graph."""

    def test_traversal_from_every_key_terminates(self):
        """Depth first walk from every entry never revisits a node, so the graph has no cycles."""
        for start in TECH_REQUIREMENTS:
            seen = set()
            stack = [start]
            while stack:
                node = stack.pop()
                assert node not in seen, f"Cycle through {node.name} starting at {start.name}"
                seen.add(node)
                requirement = TECH_REQUIREMENTS.get(node)
                if requirement is not None:
                    stack.append(requirement)

    def test_roots_have_no_requirement(self):
        assert tech_requirement(UnitTypeId.SUPPLYDEPOT) is None
        assert tech_requirement(UnitTypeId.GATEWAY) is None
        assert tech_requirement(UnitTypeId.SPAWNINGPOOL) is None

    def test_direct_requirements(self):
        assert tech_requirement(UnitTypeId.BARRACKS) == UnitTypeId.SUPPLYDEPOT
        assert tech_requirement(UnitTypeId.STALKER) == UnitTypeId.CYBERNETICSCORE
        assert tech_requirement(UnitTypeId.BROODLORD) == UnitTypeId.GREATERSPIRE

    def test_tech_chain(self):
        assert tech_chain(UnitTypeId.THOR) == [
            UnitTypeId.ARMORY,
            UnitTypeId.FACTORY,
            UnitTypeId.BARRACKS,
            UnitTypeId.SUPPLYDEPOT,
        ]
        assert tech_chain(UnitTypeId.MARINE) == []

    def test_shared_prerequisites(self):
        """Several children may point at the same structure."""
        children = [child for child, parent in TECH_REQUIREMENTS.items() if parent == UnitTypeId.SPAWNINGPOOL]
        assert len(children) > 1


class TestIdSets:
    """Test the fixed id sets."""

    def test_workers(self):
        assert WORKER_IDS == {UnitTypeId.SCV, UnitTypeId.DRONE, UnitTypeId.PROBE}

    def test_addons(self):
        assert len(ADDON_IDS) == 8
        assert UnitTypeId.BARRACKSREACTOR in ADDON_IDS
        assert UnitTypeId.BARRACKS not in ADDON_IDS

    def test_melee(self):
        assert len(MELEE_IDS) == 14
        assert UnitTypeId.ZEALOT in MELEE_IDS
        assert UnitTypeId.MARINE not in MELEE_IDS

    def test_constructing_abilities(self):
        assert len(CONSTRUCTING_IDS) == 43
        assert AbilityId.TERRANBUILD_SUPPLYDEPOT in CONSTRUCTING_IDS
        assert AbilityId.BUILD_SHIELDBATTERY in CONSTRUCTING_IDS
        assert AbilityId.BUILD_LURKERDEN in CONSTRUCTING_IDS
        assert AbilityId.COMMANDCENTERTRAIN_SCV not in CONSTRUCTING_IDS

    def test_target_sets(self):
        assert TargetType.Any in TARGET_GROUND and TargetType.Any in TARGET_AIR
        assert TargetType.Air not in TARGET_GROUND
        assert TargetType.Ground not in TARGET_AIR

    def test_mineral_fields(self):
        assert len(mineral_ids) == 12
        assert UnitTypeId.MINERALFIELD in mineral_ids
        assert UnitTypeId.RICHMINERALFIELD750 in mineral_ids
        assert UnitTypeId.BATTLESTATIONMINERALFIELD in mineral_ids
        assert UnitTypeId.VESPENEGEYSER not in mineral_ids

    def test_geysers(self):
        assert len(geyser_ids) == 6
        assert UnitTypeId.RICHVESPENEGEYSER in geyser_ids
        assert UnitTypeId.SHAKURASVESPENEGEYSER in geyser_ids
        assert UnitTypeId.REFINERY not in geyser_ids

    def test_gas_buildings_include_rich_variants(self):
        assert gas_building_ids == {
            UnitTypeId.REFINERY, UnitTypeId.REFINERYRICH,
            UnitTypeId.ASSIMILATOR, UnitTypeId.ASSIMILATORRICH,
            UnitTypeId.EXTRACTOR, UnitTypeId.EXTRACTORRICH,
        }
        for values in RACE_VALUES.values():
            assert values.gas_building in gas_building_ids

    def test_resource_sets_are_disjoint(self):
        assert not mineral_ids & geyser_ids
        assert not geyser_ids & gas_building_ids
        assert not mineral_ids & gas_building_ids

    @pytest.mark.parametrize("id_set", [WORKER_IDS, TOWNHALL_IDS, ADDON_IDS, MELEE_IDS, mineral_ids, geyser_ids,
                                        gas_building_ids])
    def test_sets_hold_known_unit_types(self, id_set):
        """Every member decodes back from its wire id."""
        for unit_type in id_set:
            assert from_wire(UnitTypeId, int(unit_type)) is unit_type
