import pytest

from critter_battle.enums import Type
from critter_battle.type_effectiveness import TypeEffectiveness


def test_single_pair_lookups():
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.GRASS) == 2.0
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.WATER) == 0.5
    assert TypeEffectiveness.get_effectiveness(Type.ELECTRIC, Type.FIRE) == 1.0
    assert TypeEffectiveness.get_effectiveness(Type.DARK, Type.PSYCHIC) == 2.0


def test_dual_type_effectiveness_is_product():
    # Water hits Fire and Ground super-effectively
    assert TypeEffectiveness.effectiveness(Type.WATER, [Type.FIRE, Type.GROUND]) == 4.0
    # Fire is resisted by Water but hits Grass hard: the two cancel out
    assert TypeEffectiveness.effectiveness(Type.FIRE, [Type.WATER, Type.GRASS]) == 1.0
    assert TypeEffectiveness.effectiveness(Type.GRASS, [Type.FIRE, Type.GRASS]) == 0.25


@pytest.mark.parametrize("attacking", list(Type))
def test_combined_multiplier_matches_pairwise_product_for_every_type(attacking):
    for first in Type:
        for second in Type:
            expected = TypeEffectiveness.get_effectiveness(attacking, first) * TypeEffectiveness.get_effectiveness(attacking, second)
            combined = TypeEffectiveness.effectiveness(attacking, [first, second])
            assert combined == expected
            assert combined >= 0


def test_empty_defender_list_is_neutral():
    assert TypeEffectiveness.effectiveness(Type.FIRE, []) == 1.0


def test_effectiveness_predicates_and_descriptions():
    assert TypeEffectiveness.is_super_effective(Type.GROUND, [Type.ELECTRIC])
    assert TypeEffectiveness.is_not_very_effective(Type.ELECTRIC, [Type.GRASS])
    assert not TypeEffectiveness.is_immune(Type.ELECTRIC, [Type.GRASS])
    assert TypeEffectiveness.get_effectiveness_description(Type.GROUND, [Type.ELECTRIC]) == "It's super effective!"
    assert TypeEffectiveness.get_effectiveness_description(Type.ELECTRIC, [Type.GRASS]) == "It's not very effective..."
    assert TypeEffectiveness.get_effectiveness_description(Type.FIRE, [Type.ELECTRIC]) == ""


def test_strength_and_weakness_queries():
    assert set(TypeEffectiveness.get_strength_against([Type.FIRE])) == {Type.WATER, Type.GROUND}
    assert set(TypeEffectiveness.get_weak_against([Type.FIRE])) == {Type.GRASS, Type.FAIRY}
    assert TypeEffectiveness.get_resistance([Type.WATER], Type.FIRE) == 0.5
    assert len(TypeEffectiveness.all_types()) == 8
