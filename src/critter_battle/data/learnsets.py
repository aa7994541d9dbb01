# Level-up learnsets: species id -> [(level, move id)]
# Level-1 entries mirror the species base move list.

LEARNSETS: dict[str, list[tuple[int, str]]] = {
    "embolt": [(1, "scratch"), (1, "ember"), (7, "flame-burst"), (15, "dragon-claw")],
    "boltiger": [(1, "scratch"), (1, "ember"), (7, "flame-burst"), (15, "dragon-claw"), (36, "thunderbolt")],
    "aqualis": [(1, "water-gun"), (1, "bubblebeam"), (10, "aqua-ring")],
    "tidecrown": [(1, "water-gun"), (1, "bubblebeam"), (10, "aqua-ring"), (40, "earthquake")],
    "thornwick": [(1, "vine-whip"), (1, "growth"), (12, "fairy-wind")],
    "verdaxe": [(1, "vine-whip"), (1, "growth"), (12, "fairy-wind"), (40, "earthquake")],
    "sparkit": [(1, "spark"), (8, "tackle"), (15, "thunderbolt")],
    "voltrix": [(1, "spark"), (1, "thunderbolt"), (8, "tackle")],
    "rockpile": [(1, "tackle"), (18, "earthquake")],
    "boulderan": [(1, "tackle"), (1, "earthquake"), (30, "bite")],
    "pupskin": [(1, "tackle"), (1, "bite"), (15, "ember")],
    "houndrake": [(1, "tackle"), (1, "bite"), (1, "flame-burst"), (30, "dragon-claw")],
    "frostwhip": [(1, "scratch"), (10, "fairy-wind")],
    "glaciarch": [(1, "scratch"), (1, "thunderbolt"), (30, "psychic")],
    "psychink": [(1, "psychic"), (10, "fairy-wind")],
    "mindseer": [(1, "psychic"), (1, "growth"), (35, "fairy-wind")],
    "venomling": [(1, "bite"), (12, "ember")],
    "toxiclaw": [(1, "bite"), (1, "flame-burst"), (35, "dragon-claw")],
    "stoneguard": [(1, "earthquake"), (10, "tackle")],
    "terrasmith": [(1, "earthquake"), (1, "tackle"), (40, "bite")],
    "lightbringer": [(1, "fairy-wind"), (20, "psychic")],
    "radianceking": [(1, "fairy-wind"), (1, "psychic"), (45, "growth")],
    "infernus": [(1, "flame-burst"), (1, "bite"), (1, "earthquake"), (60, "dragon-claw")],
    "tidal": [(1, "water-gun"), (1, "thunderbolt"), (1, "aqua-ring"), (60, "bubblebeam")],
    "natureveil": [(1, "vine-whip"), (1, "fairy-wind"), (1, "growth"), (60, "psychic")],
}
