import pytest

from critter_battle.battle_manager import BattleManager
from critter_battle.enums import Type
from critter_battle.errors import DataIntegrityError
from critter_battle.migration import (
    battle_from_data,
    battle_to_data,
    critter_from_data,
    critter_to_data,
    is_legacy_critter_data,
    load_critter,
    normalize_critter_data,
)
from critter_battle.registry import GameData
from critter_battle.utils.mon_factory import create_critter

DATA = GameData.create()


def legacy_record(**overrides) -> dict:
    record = {
        "id": "legacy-1",
        "critterId": "embolt",
        "name": "Embolt",
        "assetKey": "embolt",
        "assetFrame": 0,
        "currentLevel": 5,
        "maxHp": 50,
        "currentHp": 25,
        "baseAttack": 10,
        "currentAttack": 10,
        "attackIds": [1, 2],
        "baseExp": 100,
        "currentExp": 200,
    }
    record.update(overrides)
    return record


def test_saved_battle_restores_equal_state():
    player = [create_critter("embolt", 12, DATA, seed=1)]
    opponent = [create_critter("aqualis", 10, DATA, seed=2)]
    battle = BattleManager.create_battle("player", "Red", player, "opponent", "Blue", opponent, seed=9)
    manager = BattleManager(battle, DATA)
    manager.damage_active_critter("opponent", 7)
    manager.add_log("checkpoint")

    data = battle_to_data(battle)
    assert isinstance(data["player"]["party"][0]["types"][0], str)
    assert battle_from_data(data) == battle


def test_malformed_saves_raise_data_integrity_error():
    with pytest.raises(DataIntegrityError):
        battle_from_data({"id": "broken"})
    critter = critter_to_data(create_critter("embolt", 5, DATA))
    critter["currentHP"] = critter["maxHP"] + 10
    with pytest.raises(DataIntegrityError):
        critter_from_data(critter)


def test_legacy_record_is_converted():
    assert is_legacy_critter_data(legacy_record())
    data = normalize_critter_data(legacy_record(), DATA)
    assert data["speciesId"] == "embolt"
    assert data["nickname"] is None
    assert data["level"] == 5
    assert data["maxHP"] == 15
    assert data["currentHP"] == 8
    assert data["experience"] == 200
    assert [m["moveId"] for m in data["moves"]] == ["scratch", "ember"]
    assert "attackIds" not in data

    critter = load_critter(legacy_record(), DATA)
    assert critter.id == "legacy-1"
    assert critter.types == [Type.FIRE]
    assert critter.moves[0].currentPP == 35


def test_legacy_experience_is_clamped_into_level_range():
    assert normalize_critter_data(legacy_record(currentExp=0), DATA)["experience"] == 125
    assert normalize_critter_data(legacy_record(currentExp=10_000), DATA)["experience"] == 215


def test_legacy_nickname_and_fainted_state():
    data = normalize_critter_data(legacy_record(name="Sparky", currentHp=0), DATA)
    assert data["nickname"] == "Sparky"
    assert data["currentHP"] == 0
    assert data["isFainted"]
    assert critter_from_data(data).isFainted


def test_unknown_legacy_attack_ids_are_dropped():
    data = normalize_critter_data(legacy_record(attackIds=[2, 9, "bite", 2]), DATA)
    assert [m["moveId"] for m in data["moves"]] == ["ember", "bite"]


def test_legacy_record_with_unknown_species_fails():
    with pytest.raises(DataIntegrityError):
        normalize_critter_data(legacy_record(critterId="missingno"), DATA)
    with pytest.raises(DataIntegrityError):
        normalize_critter_data(legacy_record(currentLevel="five"), DATA)


def test_current_records_pass_through():
    data = critter_to_data(create_critter("embolt", 5, DATA))
    assert not is_legacy_critter_data(data)
    assert normalize_critter_data(data, DATA) == data
