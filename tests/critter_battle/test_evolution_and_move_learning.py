from critter_battle.enums import BattleEvent, Type
from critter_battle.events import EventBus
from critter_battle.evolution import EvolutionManager
from critter_battle.move_learning import MoveLearningManager
from critter_battle.registry import GameData
from critter_battle.utils.mon_factory import create_critter

DATA = GameData.create()


def test_learnset_queries():
    learning = MoveLearningManager(DATA)
    assert learning.get_learnable_moves("embolt", 7) == ["flame-burst"]
    assert learning.get_learnable_moves("embolt", 8) == []
    assert learning.get_learnable_moves_up_to_level("embolt", 7) == ["scratch", "ember", "flame-burst"]
    assert [e.moveId for e in learning.get_moves_learned_between("embolt", 5, 15)] == ["flame-burst", "dragon-claw"]
    assert learning.get_learnset("missingno") == []


def test_has_new_move_to_learn_at_current_level():
    learning = MoveLearningManager(DATA)
    critter = create_critter("embolt", 7, DATA)
    assert [e.moveId for e in learning.has_new_move_to_learn(critter)] == ["flame-burst"]
    critter.level = 8
    assert learning.has_new_move_to_learn(critter) == []


def test_learn_move_rules():
    events = EventBus()
    learning = MoveLearningManager(DATA, events)
    critter = create_critter("embolt", 15, DATA)
    assert not learning.learn_move(critter, "scratch")
    assert not learning.learn_move(critter, "splash")
    assert learning.learn_move(critter, "flame-burst")
    assert learning.learn_move(critter, "dragon-claw")
    assert not learning.learn_move(critter, "bite")
    assert [m.moveId for m in critter.moves] == ["scratch", "ember", "flame-burst", "dragon-claw"]
    assert len(events.payloads(BattleEvent.MOVE_LEARNED)) == 2


def test_replace_move():
    events = EventBus()
    learning = MoveLearningManager(DATA, events)
    critter = create_critter("embolt", 15, DATA)
    assert not learning.replace_move(critter, "bite", 5)
    assert not learning.replace_move(critter, "ember", 0)
    assert learning.replace_move(critter, "bite", 0)
    assert [m.moveId for m in critter.moves] == ["bite", "ember"]
    assert critter.moves[0].currentPP == 25
    assert events.payloads(BattleEvent.MOVE_REPLACED) == [{"critterId": critter.id, "newMoveId": "bite", "oldMoveId": "scratch"}]


def test_can_evolve_needs_level():
    evolution = EvolutionManager(DATA)
    assert evolution.can_evolve(create_critter("embolt", 35, DATA)) is None
    info = evolution.can_evolve(create_critter("embolt", 36, DATA))
    assert info.toSpeciesId == "boltiger"
    assert info.level == 36
    assert evolution.can_evolve(create_critter("infernus", 100, DATA)) is None


def test_evolve_swaps_species_and_keeps_hp_ratio():
    events = EventBus()
    evolution = EvolutionManager(DATA, events)
    critter = create_critter("embolt", 36, DATA)
    critter.take_damage(critter.maxHP // 2)
    ratio = critter.hp_ratio
    old_max = critter.maxHP

    assert evolution.evolve(critter)
    assert critter.speciesId == "boltiger"
    assert critter.types == [Type.FIRE]
    assert critter.baseStats == DATA.species.get("boltiger").baseStats
    assert critter.maxHP > old_max
    assert critter.hp_ratio >= ratio
    assert [m.moveId for m in critter.moves] == ["scratch", "ember", "flame-burst", "dragon-claw"]
    assert events.payloads(BattleEvent.EVOLVED)[0]["toSpecies"] == "boltiger"
    assert not evolution.evolve(critter)


def test_dual_type_evolution_updates_types():
    critter = create_critter("pupskin", 22, DATA)
    assert EvolutionManager(DATA).evolve(critter)
    assert critter.types == [Type.DARK, Type.FIRE]


def test_chain_queries():
    evolution = EvolutionManager(DATA)
    assert evolution.get_evolution_chain("embolt") == ["embolt", "boltiger"]
    assert evolution.get_evolution_chain("boltiger") == ["boltiger"]
    assert evolution.is_fully_evolved("boltiger")
    assert not evolution.is_fully_evolved("embolt")
    assert not evolution.is_fully_evolved("missingno")
    assert evolution.get_base_form("boltiger") == "embolt"
    assert evolution.get_final_form("embolt") == "boltiger"
    assert evolution.get_final_form("infernus") == "infernus"
    assert evolution.get_base_form("missingno") is None
    assert evolution.get_evolution_info("tidal") is None
