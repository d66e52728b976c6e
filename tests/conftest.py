"""
Shared fixtures: a small wire catalog and helpers for raw images.
"""
import pytest

from sc2knowledge import GameData


def make_image(data: bytes, width: int, height: int, bits_per_pixel: int = 8) -> dict:
    return {"bits_per_pixel": bits_per_pixel, "size": {"x": width, "y": height}, "data": data}


@pytest.fixture
def raw_catalog():
    """ Catalog in the dict form of ResponseData, including records this library does not know. """
    return {
        "abilities": [
            {
                "ability_id": 524,
                "link_name": "CommandCenterTrain",
                "link_index": 0,
                "button_name": "SCV",
                "friendly_name": "Train SCV",
                "hotkey": "S",
                "available": True,
                "target": 1,
            },
            {
                "ability_id": 1036,
                "link_name": "PsiStorm",
                "link_index": 0,
                "available": True,
                "target": 2,
                "cast_range": 9.0,
                "allow_autocast": False,
            },
            {
                "ability_id": 319,
                "link_name": "TerranBuild",
                "link_index": 1,
                "available": True,
                "target": 2,
                "is_building": True,
                "footprint_radius": 1.0,
                "cast_range": 0.0,
                "remaps_to_ability_id": 999999,
            },
            {"ability_id": 730, "link_name": "BarracksTechLabResearch", "available": True},
            {"ability_id": 987654, "link_name": "FromTheFuture"},
            {"link_name": "NoId"},
        ],
        "units": [
            {
                "unit_id": 45,
                "name": "SCV",
                "available": True,
                "cargo_size": 1,
                "mineral_cost": 50,
                "vespene_cost": 0,
                "food_required": 1.0,
                "food_provided": 0.0,
                "ability_id": 524,
                "race": 1,
                "build_time": 272.0,
                "sight_range": 8.0,
                "attributes": [1, 3, 4],
                "movement_speed": 2.8125,
                "armor": 0.0,
                "weapons": [
                    {"type": 1, "damage": 5.0, "attacks": 1, "range": 0.1, "speed": 1.07},
                ],
            },
            {
                "unit_id": 52,
                "name": "Thor",
                "available": True,
                "mineral_cost": 300,
                "vespene_cost": 200,
                "food_required": 6.0,
                "race": 1,
                "build_time": 960.0,
                "tech_requirement": 29,
                "tech_alias": [691, 424242],
                "attributes": [2, 4, 7, 99],
                "weapons": [
                    {"type": 1, "damage": 30.0, "attacks": 2, "range": 7.0, "speed": 0.91},
                    {
                        "type": 2,
                        "damage": 6.0,
                        "attacks": 4,
                        "range": 10.0,
                        "speed": 2.14,
                        "damage_bonus": [{"attribute": 1, "bonus": 6.0}, {"attribute": 77, "bonus": 1.0}],
                    },
                ],
            },
            {"unit_id": 21, "name": "Barracks", "mineral_cost": 150, "race": 1, "attributes": [2, 4, 8],
             "tech_requirement": 19, "require_attached": False},
            {"unit_id": 777777, "name": "NewUnit", "mineral_cost": 1},
            {"unit_id": "not-a-number", "name": "Broken"},
        ],
        "upgrades": [
            {"upgrade_id": 15, "name": "Stimpack", "mineral_cost": 100, "vespene_cost": 100,
             "research_time": 2240.0, "ability_id": 730},
            {"upgrade_id": 86, "name": "Charge", "mineral_cost": 100, "vespene_cost": 100,
             "research_time": 2240.0, "ability_id": 555555},
            {"upgrade_id": 40404, "name": "Unknown", "ability_id": 730},
        ],
        "buffs": [
            {"buff_id": 27, "name": "Stimpack"},
            {"buff_id": 90909, "name": "Unknown"},
        ],
        "effects": [
            {"effect_id": 1, "name": "PsiStormPersistent", "friendly_name": "Psionic Storm", "radius": 1.5},
            {"effect_id": 6, "name": "ScannerSweep", "friendly_name": "Scanner Sweep", "radius": 13.0},
            {"effect_id": 12, "name": "LurkerMP", "friendly_name": "Lurker Spines", "radius": 0.5},
            {"effect_id": 11, "name": "RavagerCorrosiveBileCP", "friendly_name": "Corrosive Bile", "radius": 0.5},
            {"effect_id": 1313, "name": "Unknown"},
        ],
    }


@pytest.fixture
def game_data(raw_catalog):
    return GameData.from_proto(raw_catalog)


@pytest.fixture
def raw_game_info():
    """ 8x2 map: pathing has one open cell per row, placement is closed, height rises along x. """
    return {
        "map_name": "Test Map LE",
        "start_raw": {
            "map_size": {"x": 8, "y": 2},
            "pathing_grid": make_image(bytes([0b10000000, 0b00000001]), 8, 2, bits_per_pixel=1),
            "placement_grid": make_image(bytes([0x00, 0x00]), 8, 2, bits_per_pixel=1),
            "terrain_height": make_image(bytes(range(16)), 8, 2),
        },
    }
