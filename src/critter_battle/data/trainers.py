# Trainer rosters, validated into TrainerInfo by TrainerRegistry.initialize()
# Gym leaders and the champion play with the boss AI tier.

TRAINERS_DATA: list[dict] = [
    {
        "id": "camper-rowan",
        "name": "Rowan",
        "title": "Camper",
        "aiTier": 1,
        "reward": 120,
        "party": [{"speciesId": "pupskin", "level": 6}, {"speciesId": "sparkit", "level": 7}],
    },
    {
        "id": "blaze-leader",
        "name": "Blaze",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "sparkit", "level": 16}, {"speciesId": "embolt", "level": 18, "moveIds": ["scratch", "ember", "flame-burst"]}],
    },
    {
        "id": "marina-leader",
        "name": "Marina",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "aqualis", "level": 21}, {"speciesId": "tidecrown", "level": 23}],
    },
    {
        "id": "sage-leader",
        "name": "Sage",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "psychink", "level": 26}, {"speciesId": "mindseer", "level": 28}],
    },
    {
        "id": "voltz-leader",
        "name": "Voltz",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "sparkit", "level": 23}, {"speciesId": "voltrix", "level": 25}],
    },
    {
        "id": "granite-leader",
        "name": "Granite",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "stoneguard", "level": 29}, {"speciesId": "terrasmith", "level": 31}],
    },
    {
        "id": "shadow-leader",
        "name": "Shadow",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "houndrake", "level": 31}, {"speciesId": "toxiclaw", "level": 33}],
    },
    {
        "id": "aurora-leader",
        "name": "Aurora",
        "title": "Gym Leader",
        "aiTier": 2,
        "reward": 2000,
        "party": [{"speciesId": "lightbringer", "level": 36}, {"speciesId": "radianceking", "level": 38}],
    },
    {
        "id": "champion",
        "name": "Champion Alex",
        "title": "Champion",
        "aiTier": 2,
        "reward": 5000,
        "party": [
            {"speciesId": "boltiger", "level": 48},
            {"speciesId": "tidecrown", "level": 48},
            {"speciesId": "thornwick", "level": 46},
            {"speciesId": "mindseer", "level": 47},
            {"speciesId": "terrasmith", "level": 47},
            {"speciesId": "radianceking", "level": 50},
        ],
    },
]
