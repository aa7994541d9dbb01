import pytest

from critter_battle.capture import catch_probability, flee_chance, is_caught, shake_count, status_catch_bonus
from critter_battle.enums import StatusEffect


def test_half_hp_catch_probability():
    assert catch_probability(45, 50, 100) == pytest.approx(0.0882, abs=1e-4)
    assert catch_probability(45, 50, 100) == pytest.approx(45 / 255 * 0.5)


def test_full_hp_target_cannot_be_caught():
    assert catch_probability(255, 100, 100, orb_modifier=100.0) == 0.0


def test_probability_is_capped_at_one():
    assert catch_probability(45, 1, 100, orb_modifier=100.0) == 1.0


def test_probability_strictly_falls_as_hp_rises():
    values = [catch_probability(45, hp, 100, status_bonus=1.5) for hp in range(1, 100)]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_status_bonus_table():
    assert status_catch_bonus(StatusEffect.SLEEP) == 2.0
    assert status_catch_bonus(StatusEffect.FREEZE) == 2.0
    assert status_catch_bonus(StatusEffect.PARALYZE) == 1.5
    assert status_catch_bonus(StatusEffect.BURN) == 1.5
    assert status_catch_bonus(StatusEffect.CONFUSION) == 1.0
    assert status_catch_bonus(None) == 1.0


def test_catch_roll_boundaries():
    assert is_caught(1.0, 0.9999)
    assert not is_caught(0.0, 0.0)
    assert is_caught(0.5, 0.49)
    assert not is_caught(0.5, 0.5)


@pytest.mark.parametrize("roll,shakes", [(0.0, 1), (0.3, 1), (0.31, 2), (0.6, 2), (0.85, 3), (0.9, 4), (1.0, 4)])
def test_shake_count_thresholds(roll, shakes):
    assert shake_count(roll) == shakes


def test_flee_chance():
    assert flee_chance(50, 100) == pytest.approx(0.25)
    assert flee_chance(200, 50) == 0.9
    assert flee_chance(10, 0) == 0.9
    assert flee_chance(0, 50) == 0.0
