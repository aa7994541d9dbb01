# Species catalog, validated into SpeciesInfo by SpeciesRegistry.initialize()
# The closed type set has no Normal type, so basic species carry the element of their line.


def _stats(hp: int, attack: int, defense: int, sp_atk: int, sp_def: int, speed: int) -> dict:
    return {"hp": hp, "attack": attack, "defense": defense, "spAtk": sp_atk, "spDef": sp_def, "speed": speed}


SPECIES_DATA: list[dict] = [
    # =============================================================================
    # STARTER TRIO
    # =============================================================================
    {
        "id": "embolt",
        "name": "Embolt",
        "types": ["Fire"],
        "baseStats": _stats(39, 52, 43, 60, 50, 65),
        "moves": ["scratch", "ember"],
        "evolvesInto": "boltiger",
        "evolutionLevel": 36,
        "catchRate": 45,
        "baseExp": 62,
        "dexEntry": "An energetic fire-type with a sparky personality.",
        "height": 0.3,
        "weight": 2.3,
    },
    {
        "id": "boltiger",
        "name": "Boltiger",
        "types": ["Fire"],
        "baseStats": _stats(58, 76, 58, 88, 72, 93),
        "moves": ["scratch", "ember", "flame-burst", "thunderbolt"],
        "evolvesFrom": "embolt",
        "catchRate": 45,
        "baseExp": 142,
        "dexEntry": "The evolved form of Embolt, crackling with energy.",
        "height": 1.1,
        "weight": 40.5,
    },
    {
        "id": "aqualis",
        "name": "Aqualis",
        "types": ["Water"],
        "baseStats": _stats(44, 48, 65, 50, 64, 43),
        "moves": ["water-gun", "bubblebeam"],
        "evolvesInto": "tidecrown",
        "evolutionLevel": 36,
        "catchRate": 45,
        "baseExp": 63,
        "dexEntry": "A calm water-type known for its defensive shell.",
        "height": 0.5,
        "weight": 7.9,
    },
    {
        "id": "tidecrown",
        "name": "Tidecrown",
        "types": ["Water"],
        "baseStats": _stats(65, 65, 100, 85, 105, 60),
        "moves": ["water-gun", "bubblebeam", "aqua-ring"],
        "evolvesFrom": "aqualis",
        "catchRate": 45,
        "baseExp": 142,
        "dexEntry": "An elegant water-type with aquatic grace.",
        "height": 1.6,
        "weight": 39.2,
    },
    {
        "id": "thornwick",
        "name": "Thornwick",
        "types": ["Grass"],
        "baseStats": _stats(45, 49, 49, 65, 49, 45),
        "moves": ["vine-whip", "growth"],
        "evolvesInto": "verdaxe",
        "evolutionLevel": 36,
        "catchRate": 45,
        "baseExp": 64,
        "dexEntry": "A nurturing grass-type with healing properties.",
        "height": 0.4,
        "weight": 2.6,
    },
    {
        "id": "verdaxe",
        "name": "Verdaxe",
        "types": ["Grass"],
        "baseStats": _stats(65, 75, 68, 90, 72, 60),
        "moves": ["vine-whip", "growth"],
        "evolvesFrom": "thornwick",
        "catchRate": 45,
        "baseExp": 142,
        "dexEntry": "A mighty grass-type warrior.",
        "height": 1.3,
        "weight": 16.8,
    },
    # =============================================================================
    # EARLY GAME
    # =============================================================================
    {
        "id": "sparkit",
        "name": "Sparkit",
        "types": ["Electric"],
        "baseStats": _stats(35, 42, 37, 47, 40, 52),
        "moves": ["spark"],
        "evolvesInto": "voltrix",
        "evolutionLevel": 20,
        "catchRate": 190,
        "baseExp": 55,
        "dexEntry": "A yellow mouse-like electric type, quick and sparky.",
        "height": 0.4,
        "weight": 6.0,
    },
    {
        "id": "voltrix",
        "name": "Voltrix",
        "types": ["Electric"],
        "baseStats": _stats(55, 65, 55, 72, 60, 80),
        "moves": ["spark", "thunderbolt"],
        "evolvesFrom": "sparkit",
        "catchRate": 190,
        "baseExp": 112,
        "dexEntry": "The evolved electric rodent, crackling with power.",
        "height": 0.8,
        "weight": 13.2,
    },
    {
        "id": "rockpile",
        "name": "Rockpile",
        "types": ["Ground"],
        "baseStats": _stats(35, 45, 52, 35, 40, 35),
        "moves": ["tackle"],
        "evolvesInto": "boulderan",
        "evolutionLevel": 25,
        "catchRate": 120,
        "baseExp": 60,
        "dexEntry": "A stubborn rock-type, slowly but surely advancing.",
        "height": 0.4,
        "weight": 18.0,
    },
    {
        "id": "boulderan",
        "name": "Boulderan",
        "types": ["Ground"],
        "baseStats": _stats(55, 70, 90, 50, 60, 40),
        "moves": ["tackle", "earthquake"],
        "evolvesFrom": "rockpile",
        "catchRate": 120,
        "baseExp": 137,
        "dexEntry": "A massive rock-type guardian.",
        "height": 1.3,
        "weight": 60.0,
    },
    {
        "id": "pupskin",
        "name": "Pupskin",
        "types": ["Dark"],
        "baseStats": _stats(37, 46, 36, 46, 36, 35),
        "moves": ["tackle", "bite"],
        "evolvesInto": "houndrake",
        "evolutionLevel": 22,
        "catchRate": 180,
        "baseExp": 56,
        "dexEntry": "A loyal dog-like critter with a fiery spirit.",
        "height": 0.5,
        "weight": 6.2,
    },
    {
        "id": "houndrake",
        "name": "Houndrake",
        "types": ["Dark", "Fire"],
        "baseStats": _stats(65, 80, 50, 70, 60, 65),
        "moves": ["tackle", "bite", "flame-burst"],
        "evolvesFrom": "pupskin",
        "catchRate": 180,
        "baseExp": 128,
        "dexEntry": "An imposing fire beast with a fierce personality.",
        "height": 1.5,
        "weight": 24.0,
    },
    # =============================================================================
    # MID GAME
    # =============================================================================
    {
        "id": "frostwhip",
        "name": "Frostwhip",
        "types": ["Fairy"],
        "baseStats": _stats(50, 50, 50, 65, 60, 65),
        "moves": ["scratch"],
        "evolvesInto": "glaciarch",
        "evolutionLevel": 30,
        "catchRate": 120,
        "baseExp": 67,
        "dexEntry": "A mischievous snow creature that defies nature.",
        "height": 0.7,
        "weight": 12.5,
    },
    {
        "id": "glaciarch",
        "name": "Glaciarch",
        "types": ["Fairy", "Psychic"],
        "baseStats": _stats(70, 65, 65, 95, 85, 80),
        "moves": ["scratch", "thunderbolt"],
        "evolvesFrom": "frostwhip",
        "catchRate": 120,
        "baseExp": 148,
        "dexEntry": "A powerful snow sage with mystical powers.",
        "height": 1.4,
        "weight": 22.8,
    },
    {
        "id": "psychink",
        "name": "Psychink",
        "types": ["Psychic"],
        "baseStats": _stats(30, 25, 35, 70, 60, 45),
        "moves": ["psychic"],
        "evolvesInto": "mindseer",
        "evolutionLevel": 32,
        "catchRate": 120,
        "baseExp": 62,
        "dexEntry": "An alien-like telepath with strange abilities.",
        "height": 0.6,
        "weight": 4.2,
    },
    {
        "id": "mindseer",
        "name": "Mindseer",
        "types": ["Psychic"],
        "baseStats": _stats(55, 48, 60, 103, 95, 77),
        "moves": ["psychic", "growth"],
        "evolvesFrom": "psychink",
        "catchRate": 120,
        "baseExp": 145,
        "dexEntry": "A master of the psychic realm.",
        "height": 1.6,
        "weight": 48.0,
    },
    {
        "id": "venomling",
        "name": "Venomling",
        "types": ["Dark"],
        "baseStats": _stats(35, 42, 37, 50, 35, 42),
        "moves": ["bite"],
        "evolvesInto": "toxiclaw",
        "evolutionLevel": 29,
        "catchRate": 140,
        "baseExp": 58,
        "dexEntry": "A tiny toxic reptile with a venomous bite.",
        "height": 0.3,
        "weight": 5.5,
    },
    {
        "id": "toxiclaw",
        "name": "Toxiclaw",
        "types": ["Dark"],
        "baseStats": _stats(60, 75, 60, 75, 65, 70),
        "moves": ["bite", "flame-burst"],
        "evolvesFrom": "venomling",
        "catchRate": 140,
        "baseExp": 136,
        "dexEntry": "A dangerous poison dealer.",
        "height": 1.1,
        "weight": 25.0,
    },
    # =============================================================================
    # LATE GAME
    # =============================================================================
    {
        "id": "stoneguard",
        "name": "Stoneguard",
        "types": ["Ground"],
        "baseStats": _stats(65, 75, 100, 35, 40, 25),
        "moves": ["earthquake"],
        "evolvesInto": "terrasmith",
        "evolutionLevel": 34,
        "catchRate": 120,
        "baseExp": 90,
        "dexEntry": "A slow but solid earth guardian.",
        "height": 1.0,
        "weight": 88.5,
    },
    {
        "id": "terrasmith",
        "name": "Terrasmith",
        "types": ["Ground"],
        "baseStats": _stats(85, 100, 125, 55, 60, 30),
        "moves": ["earthquake", "tackle"],
        "evolvesFrom": "stoneguard",
        "catchRate": 120,
        "baseExp": 175,
        "dexEntry": "An unstoppable force of nature.",
        "height": 1.6,
        "weight": 128.0,
    },
    {
        "id": "lightbringer",
        "name": "Lightbringer",
        "types": ["Fairy"],
        "baseStats": _stats(45, 48, 48, 62, 66, 42),
        "moves": ["fairy-wind"],
        "evolvesInto": "radianceking",
        "evolutionLevel": 39,
        "catchRate": 150,
        "baseExp": 65,
        "dexEntry": "A magical sparkly fairy-type.",
        "height": 0.6,
        "weight": 1.5,
    },
    {
        "id": "radianceking",
        "name": "Radianceking",
        "types": ["Fairy"],
        "baseStats": _stats(68, 65, 68, 85, 88, 72),
        "moves": ["fairy-wind", "psychic"],
        "evolvesFrom": "lightbringer",
        "catchRate": 150,
        "baseExp": 150,
        "dexEntry": "A radiant celestial being.",
        "height": 1.3,
        "weight": 4.2,
    },
    # =============================================================================
    # LEGENDARY
    # =============================================================================
    {
        "id": "infernus",
        "name": "Infernus",
        "types": ["Fire", "Dark"],
        "baseStats": _stats(75, 131, 95, 106, 95, 77),
        "moves": ["flame-burst", "bite", "earthquake"],
        "catchRate": 3,
        "baseExp": 270,
        "dexEntry": "A legendary fire-dark hybrid of immense power.",
        "height": 2.0,
        "weight": 150.0,
    },
    {
        "id": "tidal",
        "name": "Tidal",
        "types": ["Water", "Electric"],
        "baseStats": _stats(75, 88, 111, 112, 97, 72),
        "moves": ["water-gun", "thunderbolt", "aqua-ring"],
        "catchRate": 3,
        "baseExp": 270,
        "dexEntry": "A legendary water-electric deity.",
        "height": 1.8,
        "weight": 145.0,
    },
    {
        "id": "natureveil",
        "name": "Natureveil",
        "types": ["Grass", "Fairy"],
        "baseStats": _stats(80, 65, 100, 120, 120, 65),
        "moves": ["vine-whip", "fairy-wind", "growth"],
        "catchRate": 3,
        "baseExp": 270,
        "dexEntry": "A legendary guardian of nature.",
        "height": 2.5,
        "weight": 88.8,
    },
]
