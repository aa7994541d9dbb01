# Move catalog, validated into MoveInfo by MoveRegistry.initialize()
# Basic strikes (scratch, tackle, dragon-claw) are Fire-typed: the type set has no Normal or Dragon.

MOVES_DATA: list[dict] = [
    # =============================================================================
    # BASIC STRIKES
    # =============================================================================
    {"id": "scratch", "name": "Scratch", "type": "Fire", "power": 40, "accuracy": 100, "basePP": 35, "category": "Physical"},
    {"id": "tackle", "name": "Tackle", "type": "Fire", "power": 40, "accuracy": 100, "basePP": 35, "category": "Physical"},
    {"id": "dragon-claw", "name": "Dragon Claw", "type": "Fire", "power": 80, "accuracy": 100, "basePP": 15, "category": "Physical"},
    # =============================================================================
    # FIRE
    # =============================================================================
    {
        "id": "flame-burst",
        "name": "Flame Burst",
        "type": "Fire",
        "power": 70,
        "accuracy": 100,
        "basePP": 15,
        "category": "Special",
        "effect": {"kind": "burn", "chance": 10},
    },
    {
        "id": "ember",
        "name": "Ember",
        "type": "Fire",
        "power": 40,
        "accuracy": 100,
        "basePP": 25,
        "category": "Special",
        "effect": {"kind": "burn", "chance": 10},
    },
    # =============================================================================
    # WATER
    # =============================================================================
    {
        "id": "aqua-ring",
        "name": "Aqua Ring",
        "type": "Water",
        "power": 0,
        "accuracy": 100,
        "basePP": 20,
        "category": "Status",
        "effect": {"kind": "heal", "chance": 100, "value": 12.5},
    },
    {"id": "water-gun", "name": "Water Gun", "type": "Water", "power": 40, "accuracy": 100, "basePP": 25, "category": "Special"},
    {"id": "bubblebeam", "name": "Bubble Beam", "type": "Water", "power": 65, "accuracy": 100, "basePP": 20, "category": "Special"},
    # =============================================================================
    # GRASS
    # =============================================================================
    {"id": "vine-whip", "name": "Vine Whip", "type": "Grass", "power": 45, "accuracy": 100, "basePP": 25, "category": "Physical"},
    {
        "id": "growth",
        "name": "Growth",
        "type": "Grass",
        "power": 0,
        "accuracy": 100,
        "basePP": 40,
        "category": "Status",
        "effect": {"kind": "stat-boost", "chance": 100, "value": 1},
    },
    # =============================================================================
    # ELECTRIC
    # =============================================================================
    {
        "id": "thunderbolt",
        "name": "Thunderbolt",
        "type": "Electric",
        "power": 90,
        "accuracy": 100,
        "basePP": 15,
        "category": "Special",
        "effect": {"kind": "paralyze", "chance": 10},
    },
    {
        "id": "spark",
        "name": "Spark",
        "type": "Electric",
        "power": 65,
        "accuracy": 100,
        "basePP": 20,
        "category": "Physical",
        "effect": {"kind": "paralyze", "chance": 30},
    },
    # =============================================================================
    # PSYCHIC / GROUND / DARK / FAIRY
    # =============================================================================
    {
        "id": "psychic",
        "name": "Psychic",
        "type": "Psychic",
        "power": 90,
        "accuracy": 100,
        "basePP": 10,
        "category": "Special",
        "effect": {"kind": "lower-spdef", "chance": 10},
    },
    {"id": "earthquake", "name": "Earthquake", "type": "Ground", "power": 100, "accuracy": 100, "basePP": 10, "category": "Physical"},
    {"id": "bite", "name": "Bite", "type": "Dark", "power": 60, "accuracy": 100, "basePP": 25, "category": "Physical"},
    {"id": "fairy-wind", "name": "Fairy Wind", "type": "Fairy", "power": 40, "accuracy": 100, "basePP": 30, "category": "Special"},
]
