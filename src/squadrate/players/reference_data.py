"""
Built-in player rating table.

Always available, even when no on-disk dataset can be loaded. Entries
from the on-disk dataset overwrite these on name collision.
Keyed by display name; values use the same field names as CanonicalProfile.
"""

REFERENCE_PLAYERS: dict[str, dict] = {
    "Virgil van Dijk": {
        "overall": 90,
        "potential": 90,
        "positions": ["CB"],
        "age": 32,
        "height_cm": 193,
        "weight_kg": 92,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Netherlands",
        "club": "Liverpool",
        "value": "€104.1M",
        "wage": "€455K",
        "contract": "2025",
        "pace": 77,
        "shooting": 60,
        "passing": 91,
        "dribbling": 72,
        "defending": 95,
        "physical": 86,
        "skills": {
            "crossing": 76, "finishing": 60, "headingAccuracy": 88, "shortPassing": 84, "volleys": 80,
            "curve": 80, "fkAccuracy": 79, "longPassing": 81, "ballControl": 79, "acceleration": 73,
            "sprintSpeed": 73, "agility": 83, "reactions": 82, "balance": 76, "shotPower": 71,
            "jumping": 76, "stamina": 84, "strength": 78, "longShots": 74, "aggression": 74,
            "interceptions": 93, "positioning": 79, "vision": 70, "penalties": 77, "composure": 81,
        },
        "external_id": 203376,
        "reference_url": "https://sofifa.com/player/203376/virgil-van-dijk/250001/",
    },
    "Karim Benzema": {
        "overall": 91,
        "potential": 91,
        "positions": ["ST"],
        "age": 36,
        "height_cm": 185,
        "weight_kg": 81,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Al Ittihad",
        "value": "€56.3M",
        "wage": "€73K",
        "contract": "2025",
        "pace": 77,
        "shooting": 90,
        "passing": 83,
        "dribbling": 88,
        "defending": 39,
        "physical": 78,
        "skills": {
            "crossing": 71, "finishing": 92, "headingAccuracy": 76, "shortPassing": 81, "volleys": 75,
            "curve": 71, "fkAccuracy": 76, "longPassing": 76, "ballControl": 79, "acceleration": 74,
            "sprintSpeed": 77, "agility": 73, "reactions": 73, "balance": 83, "shotPower": 85,
            "jumping": 78, "stamina": 71, "strength": 83, "longShots": 79, "aggression": 73,
            "interceptions": 72, "positioning": 82, "vision": 83, "penalties": 84, "composure": 72,
        },
        "external_id": 165153,
        "reference_url": "https://sofifa.com/player/165153/karim-benzema/250001/",
    },
    "Iago Aspas": {
        "overall": 84,
        "potential": 84,
        "positions": ["ST","CF"],
        "age": 36,
        "height_cm": 177,
        "weight_kg": 76,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Spain",
        "club": "Celta Vigo",
        "value": "€84.7M",
        "wage": "€426K",
        "contract": "2025",
        "pace": 83,
        "shooting": 95,
        "passing": 77,
        "dribbling": 89,
        "defending": 76,
        "physical": 83,
        "skills": {
            "crossing": 71, "finishing": 82, "headingAccuracy": 68, "shortPassing": 77, "volleys": 78,
            "curve": 65, "fkAccuracy": 71, "longPassing": 73, "ballControl": 69, "acceleration": 66,
            "sprintSpeed": 71, "agility": 75, "reactions": 65, "balance": 75, "shotPower": 65,
            "jumping": 66, "stamina": 69, "strength": 75, "longShots": 74, "aggression": 70,
            "interceptions": 66, "positioning": 86, "vision": 64, "penalties": 68, "composure": 69,
        },
        "external_id": 192629,
        "reference_url": "https://sofifa.com/player/192629/250001/",
    },
    "Kylian Mbappé": {
        "overall": 91,
        "potential": 95,
        "positions": ["LW","ST","RW"],
        "age": 25,
        "height_cm": 178,
        "weight_kg": 73,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Real Madrid",
        "value": "€32.0M",
        "wage": "€133K",
        "contract": "2025",
        "pace": 97,
        "shooting": 89,
        "passing": 80,
        "dribbling": 92,
        "defending": 36,
        "physical": 77,
        "skills": {
            "crossing": 80, "finishing": 98, "headingAccuracy": 72, "shortPassing": 83, "volleys": 72,
            "curve": 79, "fkAccuracy": 77, "longPassing": 71, "ballControl": 85, "acceleration": 76,
            "sprintSpeed": 76, "agility": 74, "reactions": 84, "balance": 79, "shotPower": 74,
            "jumping": 79, "stamina": 72, "strength": 77, "longShots": 71, "aggression": 80,
            "interceptions": 81, "positioning": 95, "vision": 76, "penalties": 78, "composure": 73,
        },
        "external_id": 231747,
        "reference_url": "https://sofifa.com/player/231747/kylian-mbappe/250001/",
    },
    "Erling Haaland": {
        "overall": 91,
        "potential": 94,
        "positions": ["ST","CF"],
        "age": 23,
        "height_cm": 194,
        "weight_kg": 88,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Norway",
        "club": "Manchester City",
        "value": "€44.4M",
        "wage": "€173K",
        "contract": "2025",
        "pace": 89,
        "shooting": 94,
        "passing": 65,
        "dribbling": 80,
        "defending": 45,
        "physical": 88,
        "skills": {
            "crossing": 73, "finishing": 94, "headingAccuracy": 77, "shortPassing": 80, "volleys": 75,
            "curve": 80, "fkAccuracy": 77, "longPassing": 80, "ballControl": 81, "acceleration": 80,
            "sprintSpeed": 74, "agility": 76, "reactions": 82, "balance": 71, "shotPower": 85,
            "jumping": 78, "stamina": 80, "strength": 82, "longShots": 83, "aggression": 72,
            "interceptions": 77, "positioning": 91, "vision": 77, "penalties": 78, "composure": 71,
        },
        "external_id": 239085,
        "reference_url": "https://sofifa.com/player/239085/erling-haaland/250001/",
    },
    "Viktor Gyökeres": {
        "overall": 84,
        "potential": 86,
        "positions": ["ST"],
        "age": 26,
        "height_cm": 192,
        "weight_kg": 88,
        "preferred_foot": "Left",
        "weak_foot": 3,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Sweden",
        "club": "Sporting CP",
        "value": "€51.1M",
        "wage": "€187K",
        "contract": "2025",
        "pace": 86,
        "shooting": 93,
        "passing": 86,
        "dribbling": 79,
        "defending": 79,
        "physical": 79,
        "skills": {
            "crossing": 64, "finishing": 90, "headingAccuracy": 64, "shortPassing": 65, "volleys": 64,
            "curve": 75, "fkAccuracy": 69, "longPassing": 76, "ballControl": 74, "acceleration": 69,
            "sprintSpeed": 68, "agility": 67, "reactions": 77, "balance": 71, "shotPower": 64,
            "jumping": 70, "stamina": 78, "strength": 78, "longShots": 75, "aggression": 64,
            "interceptions": 71, "positioning": 84, "vision": 69, "penalties": 74, "composure": 71,
        },
        "external_id": 234558,
        "reference_url": "https://sofifa.com/player/234558/?r=250001",
    },
    "Kevin De Bruyne": {
        "overall": 91,
        "potential": 91,
        "positions": ["CAM","CM"],
        "age": 33,
        "height_cm": 181,
        "weight_kg": 70,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Belgium",
        "club": "Manchester City",
        "value": "€64.9M",
        "wage": "€471K",
        "contract": "2025",
        "pace": 66,
        "shooting": 86,
        "passing": 93,
        "dribbling": 88,
        "defending": 64,
        "physical": 78,
        "skills": {
            "crossing": 75, "finishing": 71, "headingAccuracy": 73, "shortPassing": 71, "volleys": 75,
            "curve": 78, "fkAccuracy": 73, "longPassing": 73, "ballControl": 85, "acceleration": 79,
            "sprintSpeed": 73, "agility": 84, "reactions": 77, "balance": 85, "shotPower": 73,
            "jumping": 76, "stamina": 73, "strength": 80, "longShots": 77, "aggression": 72,
            "interceptions": 72, "positioning": 81, "vision": 76, "penalties": 77, "composure": 85,
        },
        "external_id": 192985,
        "reference_url": "https://sofifa.com/player/192985/kevin-de-bruyne/250001/",
    },
    "Lionel Messi": {
        "overall": 90,
        "potential": 90,
        "positions": ["RW","CAM"],
        "age": 37,
        "height_cm": 170,
        "weight_kg": 72,
        "preferred_foot": "Left",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Argentina",
        "club": "Inter Miami",
        "value": "€51.3M",
        "wage": "€249K",
        "contract": "2025",
        "pace": 81,
        "shooting": 89,
        "passing": 91,
        "dribbling": 94,
        "defending": 34,
        "physical": 65,
        "skills": {
            "crossing": 84, "finishing": 84, "headingAccuracy": 77, "shortPassing": 78, "volleys": 83,
            "curve": 80, "fkAccuracy": 81, "longPassing": 76, "ballControl": 79, "acceleration": 77,
            "sprintSpeed": 73, "agility": 76, "reactions": 70, "balance": 80, "shotPower": 79,
            "jumping": 84, "stamina": 83, "strength": 84, "longShots": 79, "aggression": 78,
            "interceptions": 75, "positioning": 78, "vision": 70, "penalties": 79, "composure": 81,
        },
        "external_id": 158023,
        "reference_url": "https://sofifa.com/player/158023/lionel-messi/250001/",
    },
    "Frank Acheampong": {
        "overall": 73,
        "potential": 73,
        "positions": ["RW","RM"],
        "age": 30,
        "height_cm": 191,
        "weight_kg": 67,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Ghana",
        "club": "AEK Athens",
        "value": "€42.6M",
        "wage": "€293K",
        "contract": "2025",
        "pace": 72,
        "shooting": 75,
        "passing": 69,
        "dribbling": 78,
        "defending": 77,
        "physical": 78,
        "skills": {
            "crossing": 55, "finishing": 63, "headingAccuracy": 57, "shortPassing": 63, "volleys": 64,
            "curve": 57, "fkAccuracy": 55, "longPassing": 65, "ballControl": 61, "acceleration": 63,
            "sprintSpeed": 53, "agility": 57, "reactions": 61, "balance": 67, "shotPower": 60,
            "jumping": 64, "stamina": 55, "strength": 62, "longShots": 62, "aggression": 53,
            "interceptions": 58, "positioning": 63, "vision": 67, "penalties": 58, "composure": 65,
        },
        "external_id": 208450,
        "reference_url": "https://sofifa.com/player/208450/?r=250001",
    },
    "Nestory Irankunda": {
        "overall": 68,
        "potential": 82,
        "positions": ["RW"],
        "age": 18,
        "height_cm": 178,
        "weight_kg": 87,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Australia",
        "club": "Bayern Munich",
        "value": "€34.9M",
        "wage": "€406K",
        "contract": "2025",
        "pace": 71,
        "shooting": 64,
        "passing": 63,
        "dribbling": 67,
        "defending": 61,
        "physical": 71,
        "skills": {
            "crossing": 61, "finishing": 53, "headingAccuracy": 52, "shortPassing": 58, "volleys": 59,
            "curve": 55, "fkAccuracy": 54, "longPassing": 52, "ballControl": 54, "acceleration": 57,
            "sprintSpeed": 52, "agility": 60, "reactions": 60, "balance": 51, "shotPower": 59,
            "jumping": 61, "stamina": 55, "strength": 60, "longShots": 62, "aggression": 48,
            "interceptions": 53, "positioning": 55, "vision": 49, "penalties": 57, "composure": 61,
        },
        "external_id": 271416,
        "reference_url": "https://sofifa.com/player/271416/?r=250001",
    },
    "Pepe Reina": {
        "overall": 81,
        "potential": 81,
        "positions": ["GK"],
        "age": 41,
        "height_cm": 177,
        "weight_kg": 80,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Spain",
        "club": "Villarreal",
        "value": "€93.0M",
        "wage": "€139K",
        "contract": "2025",
        "pace": 70,
        "shooting": 40,
        "passing": 74,
        "dribbling": 60,
        "defending": 84,
        "physical": 74,
        "skills": {
            "crossing": 50, "finishing": 40, "headingAccuracy": 64, "shortPassing": 74, "volleys": 70,
            "curve": 70, "fkAccuracy": 61, "longPassing": 63, "ballControl": 75, "acceleration": 69,
            "sprintSpeed": 67, "agility": 74, "reactions": 63, "balance": 71, "shotPower": 63,
            "jumping": 74, "stamina": 75, "strength": 72, "longShots": 70, "aggression": 67,
            "interceptions": 72, "positioning": 81, "vision": 70, "penalties": 67, "composure": 68,
        },
        "external_id": 116356,
        "reference_url": "https://sofifa.com/player/116356/?r=250001",
    },
    "Amor Layouni": {
        "overall": 72,
        "potential": 75,
        "positions": ["CAM","LM"],
        "age": 26,
        "height_cm": 190,
        "weight_kg": 84,
        "preferred_foot": "Left",
        "weak_foot": 3,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Tunisia",
        "club": "AEK Athens",
        "value": "€60.6M",
        "wage": "€353K",
        "contract": "2025",
        "pace": 76,
        "shooting": 79,
        "passing": 77,
        "dribbling": 75,
        "defending": 73,
        "physical": 73,
        "skills": {
            "crossing": 60, "finishing": 54, "headingAccuracy": 59, "shortPassing": 59, "volleys": 63,
            "curve": 53, "fkAccuracy": 60, "longPassing": 61, "ballControl": 65, "acceleration": 58,
            "sprintSpeed": 62, "agility": 63, "reactions": 58, "balance": 56, "shotPower": 65,
            "jumping": 56, "stamina": 65, "strength": 57, "longShots": 62, "aggression": 56,
            "interceptions": 58, "positioning": 66, "vision": 54, "penalties": 55, "composure": 65,
        },
        "external_id": 225257,
        "reference_url": "https://sofifa.com/player/225257/?r=250001",
    },
    "Luis Advíncula": {
        "overall": 78,
        "potential": 78,
        "positions": ["RB","RWB"],
        "age": 33,
        "height_cm": 179,
        "weight_kg": 83,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Peru",
        "club": "Boca Juniors",
        "value": "€47.4M",
        "wage": "€398K",
        "contract": "2025",
        "pace": 78,
        "shooting": 83,
        "passing": 72,
        "dribbling": 84,
        "defending": 78,
        "physical": 72,
        "skills": {
            "crossing": 64, "finishing": 66, "headingAccuracy": 62, "shortPassing": 63, "volleys": 58,
            "curve": 67, "fkAccuracy": 70, "longPassing": 72, "ballControl": 68, "acceleration": 61,
            "sprintSpeed": 70, "agility": 62, "reactions": 65, "balance": 70, "shotPower": 60,
            "jumping": 61, "stamina": 68, "strength": 60, "longShots": 58, "aggression": 71,
            "interceptions": 69, "positioning": 72, "vision": 63, "penalties": 68, "composure": 71,
        },
        "external_id": 207929,
        "reference_url": "https://sofifa.com/player/207929/?r=250001",
    },
    "Mohamed Salah": {
        "overall": 89,
        "potential": 89,
        "positions": ["RW","ST"],
        "age": 32,
        "height_cm": 181,
        "weight_kg": 66,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Egypt",
        "club": "Liverpool",
        "value": "€84.0M",
        "wage": "€71K",
        "contract": "2025",
        "pace": 94,
        "shooting": 99,
        "passing": 87,
        "dribbling": 81,
        "defending": 86,
        "physical": 92,
        "skills": {
            "crossing": 79, "finishing": 96, "headingAccuracy": 74, "shortPassing": 79, "volleys": 83,
            "curve": 74, "fkAccuracy": 80, "longPassing": 70, "ballControl": 74, "acceleration": 82,
            "sprintSpeed": 82, "agility": 71, "reactions": 76, "balance": 81, "shotPower": 74,
            "jumping": 83, "stamina": 74, "strength": 79, "longShots": 69, "aggression": 78,
            "interceptions": 72, "positioning": 82, "vision": 70, "penalties": 72, "composure": 78,
        },
        "external_id": 209331,
        "reference_url": "https://sofifa.com/player/209331/?r=250001",
    },
    "Luis Suárez": {
        "overall": 86,
        "potential": 86,
        "positions": ["ST"],
        "age": 37,
        "height_cm": 194,
        "weight_kg": 66,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Uruguay",
        "club": "Inter Miami",
        "value": "€77.0M",
        "wage": "€430K",
        "contract": "2025",
        "pace": 91,
        "shooting": 99,
        "passing": 92,
        "dribbling": 92,
        "defending": 83,
        "physical": 80,
        "skills": {
            "crossing": 74, "finishing": 84, "headingAccuracy": 71, "shortPassing": 67, "volleys": 77,
            "curve": 74, "fkAccuracy": 72, "longPassing": 76, "ballControl": 76, "acceleration": 69,
            "sprintSpeed": 68, "agility": 76, "reactions": 73, "balance": 66, "shotPower": 68,
            "jumping": 72, "stamina": 75, "strength": 77, "longShots": 70, "aggression": 76,
            "interceptions": 67, "positioning": 81, "vision": 69, "penalties": 77, "composure": 78,
        },
        "external_id": 176580,
        "reference_url": "https://sofifa.com/player/176580/?r=250001",
    },
    "Antonio Rüdiger": {
        "overall": 87,
        "potential": 87,
        "positions": ["CB"],
        "age": 31,
        "height_cm": 173,
        "weight_kg": 89,
        "preferred_foot": "Left",
        "weak_foot": 2,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Germany",
        "club": "Real Madrid",
        "value": "€100.9M",
        "wage": "€500K",
        "contract": "2025",
        "pace": 90,
        "shooting": 94,
        "passing": 86,
        "dribbling": 83,
        "defending": 95,
        "physical": 85,
        "skills": {
            "crossing": 73, "finishing": 60, "headingAccuracy": 87, "shortPassing": 69, "volleys": 73,
            "curve": 72, "fkAccuracy": 80, "longPassing": 70, "ballControl": 77, "acceleration": 71,
            "sprintSpeed": 74, "agility": 70, "reactions": 79, "balance": 75, "shotPower": 76,
            "jumping": 76, "stamina": 77, "strength": 78, "longShots": 71, "aggression": 81,
            "interceptions": 79, "positioning": 77, "vision": 75, "penalties": 79, "composure": 72,
        },
        "external_id": 205452,
        "reference_url": "https://sofifa.com/player/205452/?r=250001",
    },
    "Kalidou Koulibaly": {
        "overall": 87,
        "potential": 87,
        "positions": ["CB"],
        "age": 33,
        "height_cm": 176,
        "weight_kg": 82,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Senegal",
        "club": "Al Hilal",
        "value": "€101.3M",
        "wage": "€362K",
        "contract": "2025",
        "pace": 82,
        "shooting": 82,
        "passing": 79,
        "dribbling": 90,
        "defending": 94,
        "physical": 93,
        "skills": {
            "crossing": 67, "finishing": 60, "headingAccuracy": 81, "shortPassing": 80, "volleys": 68,
            "curve": 68, "fkAccuracy": 78, "longPassing": 78, "ballControl": 80, "acceleration": 67,
            "sprintSpeed": 81, "agility": 73, "reactions": 76, "balance": 74, "shotPower": 72,
            "jumping": 79, "stamina": 76, "strength": 67, "longShots": 75, "aggression": 77,
            "interceptions": 82, "positioning": 72, "vision": 67, "penalties": 79, "composure": 67,
        },
        "external_id": 201024,
        "reference_url": "https://sofifa.com/player/201024/?r=250001",
    },
    "N'Golo Kanté": {
        "overall": 87,
        "potential": 87,
        "positions": ["CDM","CM"],
        "age": 33,
        "height_cm": 191,
        "weight_kg": 72,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Al Ittihad",
        "value": "€34.5M",
        "wage": "€436K",
        "contract": "2025",
        "pace": 92,
        "shooting": 84,
        "passing": 91,
        "dribbling": 94,
        "defending": 93,
        "physical": 81,
        "skills": {
            "crossing": 79, "finishing": 74, "headingAccuracy": 76, "shortPassing": 79, "volleys": 74,
            "curve": 73, "fkAccuracy": 77, "longPassing": 78, "ballControl": 78, "acceleration": 75,
            "sprintSpeed": 80, "agility": 69, "reactions": 75, "balance": 69, "shotPower": 70,
            "jumping": 77, "stamina": 74, "strength": 79, "longShots": 73, "aggression": 69,
            "interceptions": 68, "positioning": 68, "vision": 68, "penalties": 67, "composure": 75,
        },
        "external_id": 215914,
        "reference_url": "https://sofifa.com/player/215914/?r=250001",
    },
    "Luka Modrić": {
        "overall": 88,
        "potential": 88,
        "positions": ["CM","CAM"],
        "age": 38,
        "height_cm": 175,
        "weight_kg": 69,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Croatia",
        "club": "Real Madrid",
        "value": "€13.4M",
        "wage": "€169K",
        "contract": "2025",
        "pace": 93,
        "shooting": 93,
        "passing": 99,
        "dribbling": 85,
        "defending": 86,
        "physical": 81,
        "skills": {
            "crossing": 70, "finishing": 73, "headingAccuracy": 76, "shortPassing": 72, "volleys": 69,
            "curve": 72, "fkAccuracy": 72, "longPassing": 82, "ballControl": 77, "acceleration": 68,
            "sprintSpeed": 70, "agility": 79, "reactions": 68, "balance": 74, "shotPower": 69,
            "jumping": 82, "stamina": 79, "strength": 68, "longShots": 79, "aggression": 82,
            "interceptions": 72, "positioning": 68, "vision": 71, "penalties": 81, "composure": 78,
        },
        "external_id": 177003,
        "reference_url": "https://sofifa.com/player/177003/?r=250001",
    },
    "Kyle Walker": {
        "overall": 84,
        "potential": 84,
        "positions": ["RB"],
        "age": 34,
        "height_cm": 185,
        "weight_kg": 78,
        "preferred_foot": "Left",
        "weak_foot": 2,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "England",
        "club": "Manchester City",
        "value": "€99.1M",
        "wage": "€282K",
        "contract": "2025",
        "pace": 80,
        "shooting": 85,
        "passing": 88,
        "dribbling": 89,
        "defending": 83,
        "physical": 77,
        "skills": {
            "crossing": 67, "finishing": 72, "headingAccuracy": 70, "shortPassing": 75, "volleys": 72,
            "curve": 64, "fkAccuracy": 65, "longPassing": 67, "ballControl": 67, "acceleration": 68,
            "sprintSpeed": 75, "agility": 77, "reactions": 73, "balance": 77, "shotPower": 76,
            "jumping": 78, "stamina": 75, "strength": 66, "longShots": 73, "aggression": 70,
            "interceptions": 66, "positioning": 64, "vision": 78, "penalties": 71, "composure": 69,
        },
        "external_id": 198710,
        "reference_url": "https://sofifa.com/player/198710/?r=250001",
    },
    "Dominik Kohr": {
        "overall": 76,
        "potential": 76,
        "positions": ["CDM"],
        "age": 30,
        "height_cm": 193,
        "weight_kg": 71,
        "preferred_foot": "Left",
        "weak_foot": 3,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Germany",
        "club": "Mainz 05",
        "value": "€27.8M",
        "wage": "€489K",
        "contract": "2025",
        "pace": 73,
        "shooting": 80,
        "passing": 70,
        "dribbling": 70,
        "defending": 77,
        "physical": 72,
        "skills": {
            "crossing": 70, "finishing": 67, "headingAccuracy": 62, "shortPassing": 56, "volleys": 61,
            "curve": 70, "fkAccuracy": 57, "longPassing": 64, "ballControl": 63, "acceleration": 64,
            "sprintSpeed": 60, "agility": 67, "reactions": 69, "balance": 61, "shotPower": 65,
            "jumping": 61, "stamina": 66, "strength": 64, "longShots": 57, "aggression": 63,
            "interceptions": 68, "positioning": 63, "vision": 57, "penalties": 56, "composure": 66,
        },
        "external_id": 199412,
        "reference_url": "https://sofifa.com/player/199412/?r=250001",
    },
    "Robert Lewandowski": {
        "overall": 90,
        "potential": 90,
        "positions": ["ST"],
        "age": 35,
        "height_cm": 185,
        "weight_kg": 81,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Poland",
        "club": "Barcelona",
        "value": "€99.7M",
        "wage": "€381K",
        "contract": "2025",
        "pace": 78,
        "shooting": 91,
        "passing": 79,
        "dribbling": 85,
        "defending": 44,
        "physical": 82,
        "skills": {
            "crossing": 70, "finishing": 93, "headingAccuracy": 83, "shortPassing": 83, "volleys": 75,
            "curve": 71, "fkAccuracy": 72, "longPassing": 75, "ballControl": 75, "acceleration": 82,
            "sprintSpeed": 77, "agility": 78, "reactions": 80, "balance": 81, "shotPower": 82,
            "jumping": 79, "stamina": 75, "strength": 72, "longShots": 75, "aggression": 74,
            "interceptions": 74, "positioning": 80, "vision": 81, "penalties": 70, "composure": 80,
        },
        "external_id": 188545,
        "reference_url": "https://sofifa.com/player/188545/?r=250001",
    },
    "Cristiano Ronaldo": {
        "overall": 88,
        "potential": 88,
        "positions": ["ST","LW"],
        "age": 39,
        "height_cm": 187,
        "weight_kg": 83,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Portugal",
        "club": "Al Nassr",
        "value": "€57.6M",
        "wage": "€431K",
        "contract": "2025",
        "pace": 81,
        "shooting": 92,
        "passing": 82,
        "dribbling": 85,
        "defending": 34,
        "physical": 77,
        "skills": {
            "crossing": 78, "finishing": 87, "headingAccuracy": 72, "shortPassing": 73, "volleys": 74,
            "curve": 71, "fkAccuracy": 79, "longPassing": 73, "ballControl": 73, "acceleration": 81,
            "sprintSpeed": 69, "agility": 71, "reactions": 73, "balance": 72, "shotPower": 79,
            "jumping": 75, "stamina": 82, "strength": 75, "longShots": 73, "aggression": 69,
            "interceptions": 71, "positioning": 82, "vision": 82, "penalties": 68, "composure": 80,
        },
        "external_id": 20801,
        "reference_url": "https://sofifa.com/player/20801/?r=250001",
    },
    "Iñaki Williams": {
        "overall": 81,
        "potential": 81,
        "positions": ["RW","ST"],
        "age": 30,
        "height_cm": 185,
        "weight_kg": 65,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Ghana",
        "club": "Athletic Bilbao",
        "value": "€65.9M",
        "wage": "€517K",
        "contract": "2025",
        "pace": 78,
        "shooting": 98,
        "passing": 88,
        "dribbling": 79,
        "defending": 75,
        "physical": 77,
        "skills": {
            "crossing": 70, "finishing": 83, "headingAccuracy": 62, "shortPassing": 71, "volleys": 67,
            "curve": 72, "fkAccuracy": 65, "longPassing": 68, "ballControl": 64, "acceleration": 74,
            "sprintSpeed": 65, "agility": 63, "reactions": 72, "balance": 61, "shotPower": 69,
            "jumping": 69, "stamina": 65, "strength": 72, "longShots": 72, "aggression": 69,
            "interceptions": 70, "positioning": 71, "vision": 72, "penalties": 67, "composure": 63,
        },
        "external_id": 215316,
        "reference_url": "https://sofifa.com/player/215316/?r=250001",
    },
    "Francesco Acerbi": {
        "overall": 84,
        "potential": 84,
        "positions": ["CB"],
        "age": 36,
        "height_cm": 172,
        "weight_kg": 68,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Italy",
        "club": "Inter Milan",
        "value": "€22.9M",
        "wage": "€272K",
        "contract": "2025",
        "pace": 77,
        "shooting": 86,
        "passing": 76,
        "dribbling": 77,
        "defending": 94,
        "physical": 92,
        "skills": {
            "crossing": 72, "finishing": 60, "headingAccuracy": 87, "shortPassing": 72, "volleys": 66,
            "curve": 66, "fkAccuracy": 76, "longPassing": 75, "ballControl": 70, "acceleration": 68,
            "sprintSpeed": 65, "agility": 74, "reactions": 67, "balance": 64, "shotPower": 74,
            "jumping": 69, "stamina": 68, "strength": 69, "longShots": 72, "aggression": 66,
            "interceptions": 80, "positioning": 75, "vision": 76, "penalties": 67, "composure": 72,
        },
        "external_id": 183711,
        "reference_url": "https://sofifa.com/player/183711/?r=250001",
    },
    "Sofyan Amrabat": {
        "overall": 79,
        "potential": 82,
        "positions": ["CDM","CM"],
        "age": 27,
        "height_cm": 190,
        "weight_kg": 65,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Morocco",
        "club": "Fiorentina",
        "value": "€29.3M",
        "wage": "€242K",
        "contract": "2025",
        "pace": 84,
        "shooting": 74,
        "passing": 95,
        "dribbling": 82,
        "defending": 85,
        "physical": 80,
        "skills": {
            "crossing": 59, "finishing": 62, "headingAccuracy": 59, "shortPassing": 69, "volleys": 67,
            "curve": 63, "fkAccuracy": 61, "longPassing": 71, "ballControl": 66, "acceleration": 69,
            "sprintSpeed": 69, "agility": 62, "reactions": 65, "balance": 64, "shotPower": 59,
            "jumping": 60, "stamina": 67, "strength": 66, "longShots": 61, "aggression": 63,
            "interceptions": 67, "positioning": 70, "vision": 60, "penalties": 69, "composure": 60,
        },
        "external_id": 221700,
        "reference_url": "https://sofifa.com/player/221700/?r=250001",
    },
    "Federico Chiesa": {
        "overall": 84,
        "potential": 87,
        "positions": ["LW","RW"],
        "age": 26,
        "height_cm": 186,
        "weight_kg": 77,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Italy",
        "club": "Liverpool",
        "value": "€97.0M",
        "wage": "€221K",
        "contract": "2025",
        "pace": 76,
        "shooting": 89,
        "passing": 84,
        "dribbling": 91,
        "defending": 86,
        "physical": 85,
        "skills": {
            "crossing": 70, "finishing": 66, "headingAccuracy": 77, "shortPassing": 72, "volleys": 69,
            "curve": 76, "fkAccuracy": 77, "longPassing": 70, "ballControl": 69, "acceleration": 68,
            "sprintSpeed": 77, "agility": 76, "reactions": 68, "balance": 69, "shotPower": 73,
            "jumping": 69, "stamina": 70, "strength": 67, "longShots": 64, "aggression": 64,
            "interceptions": 70, "positioning": 72, "vision": 77, "penalties": 64, "composure": 69,
        },
        "external_id": 233049,
        "reference_url": "https://sofifa.com/player/233049/?r=250001",
    },
    "İlkay Gündoğan": {
        "overall": 85,
        "potential": 85,
        "positions": ["CM","CAM"],
        "age": 33,
        "height_cm": 175,
        "weight_kg": 74,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Germany",
        "club": "Barcelona",
        "value": "€73.0M",
        "wage": "€155K",
        "contract": "2025",
        "pace": 83,
        "shooting": 80,
        "passing": 92,
        "dribbling": 96,
        "defending": 91,
        "physical": 89,
        "skills": {
            "crossing": 76, "finishing": 72, "headingAccuracy": 76, "shortPassing": 76, "volleys": 71,
            "curve": 77, "fkAccuracy": 77, "longPassing": 67, "ballControl": 77, "acceleration": 73,
            "sprintSpeed": 70, "agility": 72, "reactions": 71, "balance": 75, "shotPower": 67,
            "jumping": 69, "stamina": 67, "strength": 65, "longShots": 76, "aggression": 72,
            "interceptions": 71, "positioning": 68, "vision": 71, "penalties": 77, "composure": 72,
        },
        "external_id": 186942,
        "reference_url": "https://sofifa.com/player/186942/?r=250001",
    },
    "Theo Hernández": {
        "overall": 84,
        "potential": 86,
        "positions": ["LB"],
        "age": 26,
        "height_cm": 172,
        "weight_kg": 89,
        "preferred_foot": "Left",
        "weak_foot": 2,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "AC Milan",
        "value": "€93.8M",
        "wage": "€133K",
        "contract": "2025",
        "pace": 81,
        "shooting": 81,
        "passing": 81,
        "dribbling": 83,
        "defending": 81,
        "physical": 85,
        "skills": {
            "crossing": 65, "finishing": 68, "headingAccuracy": 73, "shortPassing": 64, "volleys": 71,
            "curve": 68, "fkAccuracy": 71, "longPassing": 68, "ballControl": 75, "acceleration": 76,
            "sprintSpeed": 68, "agility": 64, "reactions": 69, "balance": 69, "shotPower": 74,
            "jumping": 70, "stamina": 67, "strength": 74, "longShots": 72, "aggression": 64,
            "interceptions": 68, "positioning": 75, "vision": 77, "penalties": 77, "composure": 70,
        },
        "external_id": 239062,
        "reference_url": "https://sofifa.com/player/239062/?r=250001",
    },
    "Jordi Alba": {
        "overall": 84,
        "potential": 84,
        "positions": ["LB"],
        "age": 35,
        "height_cm": 189,
        "weight_kg": 65,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Spain",
        "club": "Inter Miami",
        "value": "€97.1M",
        "wage": "€453K",
        "contract": "2025",
        "pace": 77,
        "shooting": 83,
        "passing": 89,
        "dribbling": 80,
        "defending": 91,
        "physical": 84,
        "skills": {
            "crossing": 75, "finishing": 68, "headingAccuracy": 66, "shortPassing": 68, "volleys": 66,
            "curve": 64, "fkAccuracy": 64, "longPassing": 69, "ballControl": 70, "acceleration": 66,
            "sprintSpeed": 71, "agility": 76, "reactions": 77, "balance": 65, "shotPower": 70,
            "jumping": 65, "stamina": 66, "strength": 75, "longShots": 64, "aggression": 64,
            "interceptions": 75, "positioning": 78, "vision": 71, "penalties": 66, "composure": 64,
        },
        "external_id": 189332,
        "reference_url": "https://sofifa.com/player/189332/?r=250001",
    },
    "Nicolò Barella": {
        "overall": 86,
        "potential": 89,
        "positions": ["CM","CAM"],
        "age": 27,
        "height_cm": 177,
        "weight_kg": 73,
        "preferred_foot": "Left",
        "weak_foot": 2,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Italy",
        "club": "Inter Milan",
        "value": "€50.4M",
        "wage": "€424K",
        "contract": "2025",
        "pace": 89,
        "shooting": 79,
        "passing": 93,
        "dribbling": 98,
        "defending": 92,
        "physical": 85,
        "skills": {
            "crossing": 73, "finishing": 77, "headingAccuracy": 66, "shortPassing": 76, "volleys": 66,
            "curve": 67, "fkAccuracy": 79, "longPassing": 67, "ballControl": 73, "acceleration": 80,
            "sprintSpeed": 67, "agility": 80, "reactions": 77, "balance": 68, "shotPower": 73,
            "jumping": 72, "stamina": 70, "strength": 78, "longShots": 73, "aggression": 70,
            "interceptions": 80, "positioning": 67, "vision": 68, "penalties": 80, "composure": 72,
        },
        "external_id": 235998,
        "reference_url": "https://sofifa.com/player/235998/?r=250001",
    },
    "Ferland Mendy": {
        "overall": 82,
        "potential": 84,
        "positions": ["LB"],
        "age": 29,
        "height_cm": 178,
        "weight_kg": 81,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Real Madrid",
        "value": "€53.9M",
        "wage": "€99K",
        "contract": "2025",
        "pace": 77,
        "shooting": 79,
        "passing": 76,
        "dribbling": 83,
        "defending": 75,
        "physical": 79,
        "skills": {
            "crossing": 70, "finishing": 66, "headingAccuracy": 69, "shortPassing": 63, "volleys": 69,
            "curve": 63, "fkAccuracy": 72, "longPassing": 68, "ballControl": 73, "acceleration": 68,
            "sprintSpeed": 69, "agility": 72, "reactions": 62, "balance": 72, "shotPower": 67,
            "jumping": 68, "stamina": 75, "strength": 63, "longShots": 67, "aggression": 69,
            "interceptions": 72, "positioning": 70, "vision": 62, "penalties": 75, "composure": 70,
        },
        "external_id": 228845,
        "reference_url": "https://sofifa.com/player/228845/?r=250001",
    },
    "Raphaël Varane": {
        "overall": 86,
        "potential": 86,
        "positions": ["CB"],
        "age": 31,
        "height_cm": 188,
        "weight_kg": 68,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Como",
        "value": "€80.9M",
        "wage": "€322K",
        "contract": "2025",
        "pace": 79,
        "shooting": 78,
        "passing": 93,
        "dribbling": 85,
        "defending": 99,
        "physical": 92,
        "skills": {
            "crossing": 73, "finishing": 60, "headingAccuracy": 87, "shortPassing": 78, "volleys": 79,
            "curve": 74, "fkAccuracy": 68, "longPassing": 76, "ballControl": 79, "acceleration": 69,
            "sprintSpeed": 77, "agility": 74, "reactions": 71, "balance": 71, "shotPower": 78,
            "jumping": 76, "stamina": 72, "strength": 75, "longShots": 69, "aggression": 72,
            "interceptions": 79, "positioning": 75, "vision": 68, "penalties": 69, "composure": 80,
        },
        "external_id": 201535,
        "reference_url": "https://sofifa.com/player/201535/?r=250001",
    },
    "Wojciech Szczęsny": {
        "overall": 85,
        "potential": 85,
        "positions": ["GK"],
        "age": 34,
        "height_cm": 186,
        "weight_kg": 66,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Poland",
        "club": "Barcelona",
        "value": "€70.4M",
        "wage": "€373K",
        "contract": "2025",
        "pace": 70,
        "shooting": 40,
        "passing": 92,
        "dribbling": 60,
        "defending": 83,
        "physical": 83,
        "skills": {
            "crossing": 50, "finishing": 40, "headingAccuracy": 77, "shortPassing": 73, "volleys": 69,
            "curve": 67, "fkAccuracy": 76, "longPassing": 71, "ballControl": 73, "acceleration": 74,
            "sprintSpeed": 72, "agility": 68, "reactions": 70, "balance": 71, "shotPower": 75,
            "jumping": 69, "stamina": 69, "strength": 70, "longShots": 74, "aggression": 73,
            "interceptions": 68, "positioning": 79, "vision": 71, "penalties": 74, "composure": 69,
        },
        "external_id": 188390,
        "reference_url": "https://sofifa.com/player/188390/?r=250001",
    },
    "Jonathan Tah": {
        "overall": 84,
        "potential": 86,
        "positions": ["CB"],
        "age": 28,
        "height_cm": 186,
        "weight_kg": 74,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Germany",
        "club": "Bayer Leverkusen",
        "value": "€21.3M",
        "wage": "€143K",
        "contract": "2025",
        "pace": 79,
        "shooting": 83,
        "passing": 80,
        "dribbling": 82,
        "defending": 96,
        "physical": 87,
        "skills": {
            "crossing": 67, "finishing": 60, "headingAccuracy": 75, "shortPassing": 64, "volleys": 69,
            "curve": 65, "fkAccuracy": 65, "longPassing": 69, "ballControl": 66, "acceleration": 75,
            "sprintSpeed": 71, "agility": 73, "reactions": 78, "balance": 65, "shotPower": 64,
            "jumping": 75, "stamina": 64, "strength": 74, "longShots": 75, "aggression": 78,
            "interceptions": 81, "positioning": 77, "vision": 68, "penalties": 76, "composure": 66,
        },
        "external_id": 220834,
        "reference_url": "https://sofifa.com/player/220834/?r=250001",
    },
    "Manuel Neuer": {
        "overall": 87,
        "potential": 87,
        "positions": ["GK"],
        "age": 38,
        "height_cm": 179,
        "weight_kg": 74,
        "preferred_foot": "Left",
        "weak_foot": 4,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Germany",
        "club": "Bayern Munich",
        "value": "€32.8M",
        "wage": "€452K",
        "contract": "2025",
        "pace": 70,
        "shooting": 40,
        "passing": 85,
        "dribbling": 60,
        "defending": 89,
        "physical": 79,
        "skills": {
            "crossing": 50, "finishing": 40, "headingAccuracy": 67, "shortPassing": 81, "volleys": 75,
            "curve": 67, "fkAccuracy": 67, "longPassing": 72, "ballControl": 79, "acceleration": 75,
            "sprintSpeed": 77, "agility": 71, "reactions": 77, "balance": 71, "shotPower": 79,
            "jumping": 75, "stamina": 79, "strength": 78, "longShots": 77, "aggression": 80,
            "interceptions": 72, "positioning": 91, "vision": 69, "penalties": 77, "composure": 71,
        },
        "external_id": 167495,
        "reference_url": "https://sofifa.com/player/167495/?r=250001",
    },
    "Manuel Lazzari": {
        "overall": 78,
        "potential": 78,
        "positions": ["RB","RWB"],
        "age": 30,
        "height_cm": 177,
        "weight_kg": 79,
        "preferred_foot": "Left",
        "weak_foot": 3,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Italy",
        "club": "Lazio",
        "value": "€17.1M",
        "wage": "€436K",
        "contract": "2025",
        "pace": 79,
        "shooting": 83,
        "passing": 78,
        "dribbling": 78,
        "defending": 82,
        "physical": 84,
        "skills": {
            "crossing": 65, "finishing": 72, "headingAccuracy": 72, "shortPassing": 71, "volleys": 60,
            "curve": 67, "fkAccuracy": 67, "longPassing": 64, "ballControl": 67, "acceleration": 63,
            "sprintSpeed": 62, "agility": 72, "reactions": 66, "balance": 70, "shotPower": 61,
            "jumping": 65, "stamina": 59, "strength": 70, "longShots": 60, "aggression": 60,
            "interceptions": 66, "positioning": 65, "vision": 66, "penalties": 70, "composure": 62,
        },
        "external_id": 226978,
        "reference_url": "https://sofifa.com/player/226978/?r=250001",
    },
    "Jonathan Clauss": {
        "overall": 78,
        "potential": 78,
        "positions": ["RB","RWB"],
        "age": 31,
        "height_cm": 170,
        "weight_kg": 71,
        "preferred_foot": "Left",
        "weak_foot": 3,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "France",
        "club": "Nice",
        "value": "€10.7M",
        "wage": "€162K",
        "contract": "2025",
        "pace": 75,
        "shooting": 84,
        "passing": 70,
        "dribbling": 75,
        "defending": 79,
        "physical": 80,
        "skills": {
            "crossing": 67, "finishing": 59, "headingAccuracy": 71, "shortPassing": 64, "volleys": 59,
            "curve": 69, "fkAccuracy": 64, "longPassing": 68, "ballControl": 59, "acceleration": 69,
            "sprintSpeed": 69, "agility": 64, "reactions": 69, "balance": 65, "shotPower": 58,
            "jumping": 68, "stamina": 67, "strength": 68, "longShots": 70, "aggression": 62,
            "interceptions": 61, "positioning": 65, "vision": 70, "penalties": 61, "composure": 65,
        },
        "external_id": 226221,
        "reference_url": "https://sofifa.com/player/226221/?r=250001",
    },
    "Jeremiah St. Juste": {
        "overall": 77,
        "potential": 79,
        "positions": ["CB"],
        "age": 27,
        "height_cm": 183,
        "weight_kg": 67,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Netherlands",
        "club": "Sporting CP",
        "value": "€76.7M",
        "wage": "€453K",
        "contract": "2025",
        "pace": 72,
        "shooting": 74,
        "passing": 73,
        "dribbling": 69,
        "defending": 92,
        "physical": 88,
        "skills": {
            "crossing": 58, "finishing": 60, "headingAccuracy": 71, "shortPassing": 57, "volleys": 61,
            "curve": 59, "fkAccuracy": 58, "longPassing": 62, "ballControl": 69, "acceleration": 57,
            "sprintSpeed": 69, "agility": 67, "reactions": 61, "balance": 57, "shotPower": 62,
            "jumping": 58, "stamina": 69, "strength": 70, "longShots": 68, "aggression": 60,
            "interceptions": 73, "positioning": 59, "vision": 63, "penalties": 64, "composure": 60,
        },
        "external_id": 231442,
        "reference_url": "https://sofifa.com/player/231442/?r=250001",
    },
    "David Alaba": {
        "overall": 84,
        "potential": 84,
        "positions": ["CB","LB"],
        "age": 32,
        "height_cm": 191,
        "weight_kg": 76,
        "preferred_foot": "Right",
        "weak_foot": 2,
        "skill_moves": 2,
        "work_rate": "Medium/Medium",
        "nationality": "Austria",
        "club": "Real Madrid",
        "value": "€96.8M",
        "wage": "€420K",
        "contract": "2025",
        "pace": 88,
        "shooting": 78,
        "passing": 79,
        "dribbling": 88,
        "defending": 90,
        "physical": 82,
        "skills": {
            "crossing": 67, "finishing": 60, "headingAccuracy": 77, "shortPassing": 72, "volleys": 78,
            "curve": 68, "fkAccuracy": 78, "longPassing": 67, "ballControl": 70, "acceleration": 71,
            "sprintSpeed": 66, "agility": 68, "reactions": 72, "balance": 72, "shotPower": 73,
            "jumping": 76, "stamina": 65, "strength": 69, "longShots": 76, "aggression": 73,
            "interceptions": 85, "positioning": 71, "vision": 71, "penalties": 73, "composure": 64,
        },
        "external_id": 197445,
        "reference_url": "https://sofifa.com/player/197445/?r=250001",
    },
    "Saud Abdulhamid": {
        "overall": 71,
        "potential": 75,
        "positions": ["RB"],
        "age": 25,
        "height_cm": 188,
        "weight_kg": 66,
        "preferred_foot": "Right",
        "weak_foot": 4,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Saudi Arabia",
        "club": "AS Roma",
        "value": "€36.8M",
        "wage": "€499K",
        "contract": "2025",
        "pace": 75,
        "shooting": 64,
        "passing": 75,
        "dribbling": 73,
        "defending": 76,
        "physical": 68,
        "skills": {
            "crossing": 60, "finishing": 52, "headingAccuracy": 62, "shortPassing": 58, "volleys": 60,
            "curve": 57, "fkAccuracy": 60, "longPassing": 59, "ballControl": 64, "acceleration": 62,
            "sprintSpeed": 60, "agility": 53, "reactions": 56, "balance": 51, "shotPower": 57,
            "jumping": 64, "stamina": 59, "strength": 61, "longShots": 59, "aggression": 64,
            "interceptions": 63, "positioning": 64, "vision": 63, "penalties": 57, "composure": 53,
        },
        "external_id": 251880,
        "reference_url": "https://sofifa.com/player/251880/?r=250001",
    },
    "Lukáš Hrádecký": {
        "overall": 82,
        "potential": 82,
        "positions": ["GK"],
        "age": 34,
        "height_cm": 191,
        "weight_kg": 79,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 4,
        "work_rate": "Medium/Medium",
        "nationality": "Finland",
        "club": "Bayer Leverkusen",
        "value": "€31.4M",
        "wage": "€305K",
        "contract": "2025",
        "pace": 70,
        "shooting": 40,
        "passing": 77,
        "dribbling": 60,
        "defending": 79,
        "physical": 79,
        "skills": {
            "crossing": 50, "finishing": 40, "headingAccuracy": 73, "shortPassing": 73, "volleys": 75,
            "curve": 63, "fkAccuracy": 71, "longPassing": 63, "ballControl": 75, "acceleration": 71,
            "sprintSpeed": 69, "agility": 74, "reactions": 67, "balance": 72, "shotPower": 65,
            "jumping": 76, "stamina": 63, "strength": 68, "longShots": 63, "aggression": 71,
            "interceptions": 62, "positioning": 75, "vision": 65, "penalties": 74, "composure": 73,
        },
        "external_id": 183705,
        "reference_url": "https://sofifa.com/player/183705/?r=250001",
    },
    "Alisson": {
        "overall": 89,
        "potential": 89,
        "positions": ["GK"],
        "age": 31,
        "height_cm": 181,
        "weight_kg": 87,
        "preferred_foot": "Right",
        "weak_foot": 3,
        "skill_moves": 3,
        "work_rate": "Medium/Medium",
        "nationality": "Brazil",
        "club": "Liverpool",
        "value": "€106.7M",
        "wage": "€63K",
        "contract": "2025",
        "pace": 70,
        "shooting": 40,
        "passing": 81,
        "dribbling": 60,
        "defending": 90,
        "physical": 87,
        "skills": {
            "crossing": 50, "finishing": 40, "headingAccuracy": 72, "shortPassing": 77, "volleys": 71,
            "curve": 78, "fkAccuracy": 73, "longPassing": 69, "ballControl": 78, "acceleration": 77,
            "sprintSpeed": 72, "agility": 70, "reactions": 74, "balance": 71, "shotPower": 71,
            "jumping": 69, "stamina": 80, "strength": 82, "longShots": 80, "aggression": 72,
            "interceptions": 80, "positioning": 87, "vision": 80, "penalties": 76, "composure": 74,
        },
        "external_id": 212831,
        "reference_url": "https://sofifa.com/player/212831/?r=250001",
    },
}
