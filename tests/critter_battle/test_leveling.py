from critter_battle.leveling import (
    apply_experience,
    exp_bar_value,
    exp_needed_for_next_level,
    exp_needed_to_reach_level,
    exp_progress_percent,
    experience_gained_for,
    round_half_up,
    total_exp_for_level,
)
from critter_battle.registry import GameData
from critter_battle.utils.mon_factory import create_critter

DATA = GameData.create()


def test_curve_is_cubic_and_capped():
    assert total_exp_for_level(1) == 1
    assert total_exp_for_level(10) == 1000
    assert total_exp_for_level(100) == 1_000_000
    assert total_exp_for_level(150) == 1_000_000


def test_level_1_plus_1000_exp_reaches_level_10():
    critter = create_critter("embolt", 1, DATA)
    levels = critter.add_experience(1000)
    assert critter.level == 10
    assert levels == list(range(2, 11))
    assert critter.maxHP == critter.currentStats.hp


def test_level_up_never_lowers_hp_ratio():
    critter = create_critter("embolt", 5, DATA)
    critter.take_damage(7)
    before = critter.hp_ratio
    critter.add_experience(5000)
    assert critter.level > 5
    assert critter.hp_ratio >= before


def test_non_positive_experience_is_ignored():
    critter = create_critter("embolt", 5, DATA)
    assert critter.add_experience(0) == []
    assert critter.add_experience(-50) == []
    assert critter.experience == 125


def test_experience_and_level_are_capped_at_100():
    critter = create_critter("embolt", 99, DATA)
    critter.add_experience(10_000_000)
    assert critter.level == 100
    assert critter.experience == 1_000_000
    assert critter.add_experience(10) == []


def test_exp_bar_helpers():
    assert exp_needed_for_next_level(5, 125) == 91
    assert exp_needed_for_next_level(100, 1_000_000) == 0
    assert exp_bar_value(5, 125) == 0.0
    assert exp_bar_value(100, 1_000_000) == 1.0
    assert exp_progress_percent(2, 8) == 0
    assert exp_progress_percent(2, 27) == 100
    assert exp_needed_to_reach_level(125, 10) == 875


def test_experience_award_formula():
    assert experience_gained_for(64, 10, True, True) == 91
    assert experience_gained_for(64, 10, False, True) == 46
    assert experience_gained_for(64, 10, True, False) == 46
    assert experience_gained_for(1, 1, True, False) == 1


def test_experience_award_rounds_halves_up():
    # 45 -> 22.5 after the trainer halving
    assert experience_gained_for(63, 5, True, False) == 23
    # 4.57 -> 5 -> 2.5
    assert experience_gained_for(1, 32, True, False) == 3
    # bench split of 5 -> 2.5
    assert experience_gained_for(7, 5, False, True) == 3
    assert experience_gained_for(7, 1, False, True) == 1


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0) == 0


def test_apply_experience_reports_stat_changes():
    critter = create_critter("embolt", 1, DATA)
    result = apply_experience(critter, 1000)
    assert result.leveled_up
    assert result.oldLevel == 1
    assert result.newLevel == 10
    assert result.statChanges["hp"] > 0
