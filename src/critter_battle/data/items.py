# Item catalog, validated into ItemInfo by ItemRegistry.initialize()

ITEMS_DATA: list[dict] = [
    # =============================================================================
    # CAPTURE ORBS - catchModifier multiplies the capture probability
    # =============================================================================
    {"id": "pokeball", "name": "Pokéball", "description": "Standard capture orb", "kind": "CaptureOrb", "catchModifier": 1.0, "price": 200},
    {"id": "great-ball", "name": "Great Ball", "description": "Enhanced capture orb", "kind": "CaptureOrb", "catchModifier": 1.5, "price": 600},
    {"id": "ultra-ball", "name": "Ultra Ball", "description": "High-power capture orb", "kind": "CaptureOrb", "catchModifier": 2.0, "price": 1200},
    {"id": "master-ball", "name": "Master Ball", "description": "Guaranteed capture", "kind": "CaptureOrb", "catchModifier": 100.0, "price": 10000},
    # =============================================================================
    # HEALING
    # =============================================================================
    {"id": "potion", "name": "Potion", "description": "Restores 20 HP", "kind": "Potion", "effect": {"kind": "heal", "value": 20}, "price": 300},
    {"id": "super-potion", "name": "Super Potion", "description": "Restores 50 HP", "kind": "Potion", "effect": {"kind": "heal", "value": 50}, "price": 700},
    {"id": "hyper-potion", "name": "Hyper Potion", "description": "Restores 100 HP", "kind": "Potion", "effect": {"kind": "heal", "value": 100}, "price": 1500},
    {"id": "revive", "name": "Revive", "description": "Revives fainted critter with 50% HP", "kind": "Potion", "effect": {"kind": "revive", "value": 50}, "price": 2000},
    # =============================================================================
    # STATUS CURES
    # =============================================================================
    {"id": "antidote", "name": "Antidote", "description": "Cures poison", "kind": "Potion", "effect": {"kind": "cure-status", "status": "Poison"}, "price": 100},
    {"id": "full-heal", "name": "Full Heal", "description": "Fully heals HP and cures status", "kind": "Potion", "effect": {"kind": "full-heal"}, "price": 600},
    # =============================================================================
    # KEY ITEMS - never consumed, never sold
    # =============================================================================
    {"id": "critterdex", "name": "Critterdex", "description": "Device for recording critter data", "kind": "KeyItem"},
]
