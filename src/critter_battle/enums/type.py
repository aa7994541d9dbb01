from enum import Enum


class Type(str, Enum):
    """Elemental critter types - the closed 8-type set used by the type chart"""

    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    PSYCHIC = "Psychic"
    GROUND = "Ground"
    DARK = "Dark"
    FAIRY = "Fairy"
